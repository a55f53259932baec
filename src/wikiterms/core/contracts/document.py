"""Termed documents: items and properties with labels, descriptions and aliases.

This module defines the polymorphic document models:

- `TermedDocument`  : shared base carrying the id, the three term maps and the
  injected site IRI.
- `ItemDocument`    : variant tagged ``"item"`` on the wire.
- `PropertyDocument`: variant tagged ``"property"``; also carries `datatype`.

Wire mapping
------------
=================  ===================================================
JSON key           attribute
=================  ===================================================
``type``           ``JSON_TYPE`` of the class (ignored when decoding)
``id``             ``entity_id`` (absent means ``""``)
``labels``         ``label_terms`` / read via ``labels``
``descriptions``   ``description_terms`` / read via ``descriptions``
``aliases``        ``alias_records`` / read via ``aliases``
=================  ===================================================

The site IRI has no wire slot. It is set after decoding with
:meth:`TermedDocument.set_site_iri` and is never serialized.

Immutability
------------
Models are frozen: term maps are filled once by validation and stored as
`MappingProxyType` views over dicts, alias arrays as tuples of frozen records.
`set_site_iri` is the only mutator; call it before the document is shared.

Python callers may construct documents by attribute name (``entity_id=...``);
wire input goes through the codec, which reads the JSON keys only.

Variant registry
----------------
Decoders pick the concrete class with :func:`resolve_document_type`. New
variants join the registry with the :func:`register_document_type` decorator;
an unregistered ``type`` value is a decode error, never a fallback to items.
"""

from __future__ import annotations

from collections.abc import Mapping
from types import MappingProxyType
from typing import Any, ClassVar, TypeVar

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    PrivateAttr,
    SerializerFunctionWrapHandler,
    ValidationInfo,
    field_validator,
    model_serializer,
)

from wikiterms.core.errors import UnknownDocumentTypeError
from wikiterms.core.settings import get_logger, load_settings

from .entity_id import EntityIdValue
from .term import TermValue
from .term_maps import (
    AliasMap,
    AliasRecords,
    StoredAliasRecords,
    StoredTermMap,
    aliases_view,
    reconcile_alias_languages,
)

#: JSON ``type`` of item documents.
JSON_TYPE_ITEM = "item"
#: JSON ``type`` of property documents.
JSON_TYPE_PROPERTY = "property"

#: Validation context key overriding the configured alias language policy.
ALIAS_POLICY_CONTEXT_KEY = "alias_language_policy"

log = get_logger("wikiterms.document")


def _empty_map() -> Mapping[str, Any]:
    return MappingProxyType({})


class TermedDocument(BaseModel):
    """Abstract base of all documents carrying term maps."""

    JSON_TYPE: ClassVar[str] = ""

    # Attribute names are for Python callers; the codec validates by alias only.
    model_config = ConfigDict(
        frozen=True, validate_by_alias=True, validate_by_name=True, extra="ignore"
    )

    entity_id: str = Field(default="", alias="id", description="Local id, e.g. 'Q42'")
    label_terms: StoredTermMap = Field(default_factory=_empty_map, alias="labels")
    description_terms: StoredTermMap = Field(default_factory=_empty_map, alias="descriptions")
    alias_records: StoredAliasRecords = Field(default_factory=_empty_map, alias="aliases")

    _site_iri: str | None = PrivateAttr(default=None)

    @field_validator("alias_records", mode="after")
    @classmethod
    def _check_alias_languages(cls, value: AliasRecords, info: ValidationInfo) -> AliasRecords:
        """Apply the alias language policy (context override, else settings)."""
        policy = None
        if isinstance(info.context, Mapping):
            policy = info.context.get(ALIAS_POLICY_CONTEXT_KEY)
        if policy is None:
            policy = load_settings().alias_language_policy
        return reconcile_alias_languages(value, policy, log)

    @model_serializer(mode="wrap")
    def _emit_type(self, handler: SerializerFunctionWrapHandler) -> dict[str, Any]:
        # "type" always comes from the class, never from stored state.
        return {"type": self.JSON_TYPE, **handler(self)}

    @property
    def json_type(self) -> str:
        return self.JSON_TYPE

    @property
    def labels(self) -> Mapping[str, TermValue]:
        return self.label_terms

    @property
    def descriptions(self) -> Mapping[str, TermValue]:
        return self.description_terms

    @property
    def aliases(self) -> AliasMap:
        """Aliases per language, rebuilt from the stored records on each call."""
        return aliases_view(self.alias_records)

    @property
    def site_iri(self) -> str | None:
        """Injected site IRI, or ``None`` when the default site applies."""
        return self._site_iri

    def set_site_iri(self, site_iri: str | None) -> None:
        """Inject the site IRI that the wire format does not carry."""
        self._site_iri = site_iri

    @property
    def entity_id_value(self) -> EntityIdValue:
        """The id qualified by the injected site, or the configured default site."""
        site_iri = self._site_iri
        if site_iri is None:
            site_iri = load_settings().default_site_iri
        return EntityIdValue(id=self.entity_id, site_iri=site_iri, entity_type=self.JSON_TYPE)


D = TypeVar("D", bound=TermedDocument)

DOCUMENT_TYPES: dict[str, type[TermedDocument]] = {}


def register_document_type(cls: type[D]) -> type[D]:
    """Class decorator adding a document variant under its ``JSON_TYPE``."""
    json_type = cls.JSON_TYPE
    if not json_type:
        raise ValueError(f"{cls.__name__} does not define JSON_TYPE")
    existing = DOCUMENT_TYPES.get(json_type)
    if existing is not None and existing is not cls:
        raise ValueError(f"document type {json_type!r} already registered to {existing.__name__}")
    DOCUMENT_TYPES[json_type] = cls
    return cls


def resolve_document_type(json_type: object) -> type[TermedDocument]:
    """Return the variant registered for ``json_type`` or raise."""
    if isinstance(json_type, str):
        cls = DOCUMENT_TYPES.get(json_type)
        if cls is not None:
            return cls
    raise UnknownDocumentTypeError(json_type)


@register_document_type
class ItemDocument(TermedDocument):
    """A document describing an item (ids like ``Q42``)."""

    JSON_TYPE: ClassVar[str] = JSON_TYPE_ITEM


@register_document_type
class PropertyDocument(TermedDocument):
    """A document describing a property (ids like ``P31``).

    Fields
    ------
    datatype : Optional[str]
        Datatype of the property's values, e.g. ``"wikibase-item"``; emitted
        only when present.
    """

    JSON_TYPE: ClassVar[str] = JSON_TYPE_PROPERTY

    datatype: str | None = Field(default=None, description="Value datatype id")


__all__ = [
    "ALIAS_POLICY_CONTEXT_KEY",
    "DOCUMENT_TYPES",
    "ItemDocument",
    "JSON_TYPE_ITEM",
    "JSON_TYPE_PROPERTY",
    "PropertyDocument",
    "TermedDocument",
    "register_document_type",
    "resolve_document_type",
]
