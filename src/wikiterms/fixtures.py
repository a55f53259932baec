"""Load JSON fixture resources and decode them as termed documents.

Used by the test-suite and by the ``roundtrip`` CLI command to check that
canonical documents survive decode and encode unchanged. Fixtures are plain
``.json`` files below a base directory (``WIKITERMS_FIXTURES_DIR`` or
``tests/fixtures``), addressed by file name only.

Usage
-----
>>> loader = FixtureLoader()
>>> item = loader.load_item_document("item_earth.json", "Q2")
>>> item.labels["en"].text
'Earth'
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, TypeVar, cast

from wikiterms.core.codec import decode_as, decode_document, parse_json
from wikiterms.core.contracts.document import ItemDocument, PropertyDocument, TermedDocument
from wikiterms.core.errors import DocumentDecodeError, FixtureMismatchError
from wikiterms.core.result import Result, capture
from wikiterms.core.settings import get_logger, load_settings

log = get_logger("wikiterms.fixtures")

D = TypeVar("D", bound=TermedDocument)


class FixtureLoader:
    """Read named JSON resources from a fixture directory."""

    def __init__(self, base_dir: Path | None = None) -> None:
        self.base_dir: Path = base_dir if base_dir is not None else load_settings().fixtures_dir

    def path_for(self, name: str) -> Path:
        """Resolve a bare file name inside the fixture directory."""
        if Path(name).name != name:
            raise ValueError(f"fixture name must not contain path parts: {name!r}")
        return self.base_dir / name

    def load_text(self, name: str) -> str:
        return self.path_for(name).read_text(encoding="utf-8")

    def load_json_object(self, name: str) -> dict[str, Any]:
        """Return the JSON object stored in fixture ``name``."""
        data = parse_json(self.load_text(name))
        if not isinstance(data, dict):
            raise DocumentDecodeError("$", f"{name} does not hold a JSON object")
        return cast(dict[str, Any], data)

    def load_json_array(self, name: str) -> list[Any]:
        """Return the JSON array stored in fixture ``name``."""
        data = parse_json(self.load_text(name))
        if not isinstance(data, list):
            raise DocumentDecodeError("$", f"{name} does not hold a JSON array")
        return cast(list[Any], data)

    def load_document(self, name: str) -> TermedDocument:
        """Decode fixture ``name``, picking the variant from its ``type``."""
        return decode_document(self.load_json_object(name))

    def try_load_document(self, name: str) -> Result[TermedDocument, DocumentDecodeError]:
        return capture(lambda: self.load_document(name), DocumentDecodeError)

    def load_item_document(self, name: str, item_id: str) -> ItemDocument:
        """Decode fixture ``name`` as the item ``item_id``."""
        return self._load_as(ItemDocument, name, item_id)

    def load_property_document(self, name: str, property_id: str) -> PropertyDocument:
        """Decode fixture ``name`` as the property ``property_id``."""
        return self._load_as(PropertyDocument, name, property_id)

    def _load_as(self, cls: type[D], name: str, entity_id: str) -> D:
        # Fixtures from older exports may omit "id"; the caller's id fills it in.
        data = self.load_json_object(name)
        found = data.get("id")
        if found is None:
            data["id"] = entity_id
        elif found != entity_id:
            raise FixtureMismatchError(f"{name} holds {found!r}, expected {entity_id!r}")
        log.debug("Loading %s as %s %s", name, cls.JSON_TYPE, entity_id)
        return decode_as(cls, data)


__all__ = ["FixtureLoader"]
