"""Round-trip tests over the canonical JSON fixtures, via `FixtureLoader`."""

from __future__ import annotations

from pathlib import Path
from typing import Any

import pytest

from wikiterms.core.codec import decode_documents, encode_document
from wikiterms.core.contracts.document import ItemDocument, PropertyDocument
from wikiterms.core.errors import DocumentDecodeError, FixtureMismatchError
from wikiterms.core.settings import load_settings
from wikiterms.fixtures import FixtureLoader

ROUND_TRIP_KEYS = ("id", "labels", "descriptions", "aliases")


@pytest.fixture  # type: ignore[misc]
def loader(fixtures_dir: Path) -> FixtureLoader:
    return FixtureLoader(fixtures_dir)


@pytest.mark.parametrize(  # type: ignore[misc]
    "name", ["item_earth.json", "property_instance_of.json"]
)
def test_fixture_round_trip(loader: FixtureLoader, name: str) -> None:
    """Decode-then-encode reproduces id and all term maps exactly."""
    original = loader.load_json_object(name)
    encoded = encode_document(loader.load_document(name))
    for key in ROUND_TRIP_KEYS:
        assert encoded[key] == original[key], key
    assert encoded["type"] == original["type"]


def test_load_item_document(loader: FixtureLoader) -> None:
    item = loader.load_item_document("item_earth.json", "Q2")
    assert isinstance(item, ItemDocument)
    assert item.labels["de"].text == "Erde"
    assert [t.text for t in item.aliases["en"]] == ["the Earth", "Blue Planet", "Terra"]
    # "fr" has an empty alias array, which reads as absent.
    assert "fr" not in item.aliases
    assert item.site_iri is None


def test_load_property_document(loader: FixtureLoader) -> None:
    prop = loader.load_property_document("property_instance_of.json", "P31")
    assert isinstance(prop, PropertyDocument)
    assert prop.datatype == "wikibase-item"
    assert prop.descriptions["en"].language == "en"
    assert "rdf:type" in [t.text for t in prop.aliases["en"]]


def test_requested_variant_wins_over_fixture_type(loader: FixtureLoader) -> None:
    """Loading a property fixture as an item yields an item."""
    item = loader.load_item_document("property_instance_of.json", "P31")
    assert item.json_type == "item"


def test_missing_id_is_injected(loader: FixtureLoader) -> None:
    item = loader.load_item_document("item_without_id.json", "Q42")
    assert item.entity_id == "Q42"
    assert item.aliases["en"][0].text == "Douglas Noël Adams"


def test_id_mismatch_is_rejected(loader: FixtureLoader) -> None:
    with pytest.raises(FixtureMismatchError, match="'Q2'"):
        loader.load_item_document("item_earth.json", "Q3")


def test_json_array_fixture(loader: FixtureLoader) -> None:
    docs = decode_documents(loader.load_json_array("documents.json"))
    assert [(d.json_type, d.entity_id) for d in docs] == [("item", "Q1"), ("property", "P279")]


def test_shape_mismatch_between_object_and_array(loader: FixtureLoader) -> None:
    with pytest.raises(DocumentDecodeError):
        loader.load_json_object("documents.json")
    with pytest.raises(DocumentDecodeError):
        loader.load_json_array("item_earth.json")


def test_fixture_names_must_be_bare(loader: FixtureLoader) -> None:
    with pytest.raises(ValueError, match="path parts"):
        loader.path_for("../pyproject.toml")


def test_try_load_document(tmp_path: Path) -> None:
    (tmp_path / "broken.json").write_text('{"type": "item", "aliases": []}', encoding="utf-8")
    (tmp_path / "ok.json").write_text('{"type": "property", "id": "P1"}', encoding="utf-8")
    loader = FixtureLoader(tmp_path)

    broken = loader.try_load_document("broken.json")
    assert broken.is_err() and broken.unwrap_err().path == "aliases"
    assert loader.try_load_document("ok.json").unwrap().entity_id == "P1"


def test_base_dir_from_settings(monkeypatch: Any, tmp_path: Path) -> None:
    monkeypatch.setenv("WIKITERMS_FIXTURES_DIR", str(tmp_path))
    load_settings.cache_clear()
    assert FixtureLoader().base_dir == tmp_path
