"""Decode wire JSON into termed documents and encode them back.

Decoding happens in two steps:

1. **Type resolution** — the ``type`` field selects a registered variant
   (:func:`~wikiterms.core.contracts.document.resolve_document_type`).
2. **Field population** — the variant's pydantic model validates ``id``,
   ``labels``, ``descriptions`` and ``aliases``.

Every failure is raised as :class:`~wikiterms.core.errors.DocumentDecodeError`
(or its subclass :class:`~wikiterms.core.errors.UnknownDocumentTypeError`) with
the dotted path of the offending field. The ``try_*`` functions return the same
errors as :class:`~wikiterms.core.result.Err` values instead.

Encoding is the mirror image: ``type`` from the variant class, ``id`` from
``entity_id``, then the three term maps. The site IRI is never written.

Duplicate keys inside one JSON object follow :mod:`json` semantics: the last
occurrence wins.
"""

from __future__ import annotations

import json
from collections.abc import Iterable, Mapping
from typing import Any, TypeVar, get_args

from pydantic import ValidationError

from wikiterms.core.contracts.document import (
    ALIAS_POLICY_CONTEXT_KEY,
    TermedDocument,
    resolve_document_type,
)
from wikiterms.core.errors import DocumentDecodeError
from wikiterms.core.result import Result, capture
from wikiterms.core.settings import AliasLanguagePolicy, get_logger

log = get_logger("wikiterms.codec")

D = TypeVar("D", bound=TermedDocument)


#: Wire keys compared after a round trip, with the value an absent key stands for.
ROUND_TRIP_FIELDS: dict[str, Any] = {
    "id": "",
    "labels": {},
    "descriptions": {},
    "aliases": {},
}


def _context(policy: AliasLanguagePolicy | None) -> dict[str, Any] | None:
    """Validation context for ``policy``; an unknown policy is a caller bug."""
    if policy is None:
        return None
    if policy not in get_args(AliasLanguagePolicy):
        raise ValueError(f"unknown alias language policy {policy!r}")
    return {ALIAS_POLICY_CONTEXT_KEY: policy}


def parse_json(text: str | bytes) -> Any:
    """Parse JSON text, raising `DocumentDecodeError` when it is malformed."""
    try:
        return json.loads(text)
    except json.JSONDecodeError as exc:
        log.debug("Rejecting malformed JSON: %s", exc)
        raise DocumentDecodeError.from_json_error(exc) from exc
    except UnicodeDecodeError as exc:
        raise DocumentDecodeError("$", f"input is not valid text: {exc.reason}") from exc


def decode_as(
    cls: type[D],
    data: Any,
    *,
    alias_language_policy: AliasLanguagePolicy | None = None,
) -> D:
    """Populate the variant ``cls`` from a wire mapping.

    The mapping's own ``type`` field is not consulted; the result always
    reports ``cls.JSON_TYPE``.
    """
    context = _context(alias_language_policy)
    if not isinstance(data, Mapping):
        raise DocumentDecodeError("$", f"expected a JSON object, got {type(data).__name__}")
    try:
        # Wire keys only: attribute names such as "entity_id" are not read.
        return cls.model_validate(data, context=context, by_alias=True, by_name=False)
    except ValidationError as exc:
        error = DocumentDecodeError.from_validation_error(exc)
        log.debug("Failed to decode %s document: %s", cls.JSON_TYPE, error)
        raise error from exc


def decode_document(
    data: Any,
    *,
    alias_language_policy: AliasLanguagePolicy | None = None,
) -> TermedDocument:
    """Resolve the variant named by ``data["type"]`` and decode into it."""
    _context(alias_language_policy)
    if not isinstance(data, Mapping):
        raise DocumentDecodeError("$", f"expected a JSON object, got {type(data).__name__}")
    cls = resolve_document_type(data.get("type"))
    return decode_as(cls, data, alias_language_policy=alias_language_policy)


def decode_documents(
    items: Iterable[Any],
    *,
    alias_language_policy: AliasLanguagePolicy | None = None,
) -> list[TermedDocument]:
    """Decode a sequence of wire mappings, e.g. a parsed JSON array.

    Errors keep their class and are re-raised with the element index prefixed
    to their path.
    """
    _context(alias_language_policy)
    documents: list[TermedDocument] = []
    for index, item in enumerate(items):
        try:
            documents.append(
                decode_document(item, alias_language_policy=alias_language_policy)
            )
        except DocumentDecodeError as exc:
            exc.prefix_path(str(index))
            raise
    return documents


def loads_document(
    text: str | bytes,
    *,
    alias_language_policy: AliasLanguagePolicy | None = None,
) -> TermedDocument:
    """Parse JSON text holding a single document."""
    return decode_document(parse_json(text), alias_language_policy=alias_language_policy)


def try_loads_document(
    text: str | bytes,
    *,
    alias_language_policy: AliasLanguagePolicy | None = None,
) -> Result[TermedDocument, DocumentDecodeError]:
    """Like :func:`loads_document`, returning ``Err`` instead of raising."""
    return capture(
        lambda: loads_document(text, alias_language_policy=alias_language_policy),
        DocumentDecodeError,
    )


def encode_document(document: TermedDocument) -> dict[str, Any]:
    """Return the wire mapping of ``document`` (``type`` first, no site IRI)."""
    return document.model_dump(mode="json", by_alias=True, exclude_none=True)


def dumps_document(document: TermedDocument, indent: int | None = None) -> str:
    """Return the wire JSON text of ``document``."""
    return json.dumps(encode_document(document), ensure_ascii=False, indent=indent)


def round_trip_changes(original: Mapping[str, Any], encoded: Mapping[str, Any]) -> list[str]:
    """Return the wire keys whose content differs between input and re-encoding.

    ``type`` is compared only when the input carried one.
    """
    changed = [
        key
        for key, default in ROUND_TRIP_FIELDS.items()
        if original.get(key, default) != encoded.get(key, default)
    ]
    if "type" in original and original["type"] != encoded.get("type"):
        changed.append("type")
    return changed


__all__ = [
    "ROUND_TRIP_FIELDS",
    "decode_as",
    "decode_document",
    "decode_documents",
    "dumps_document",
    "encode_document",
    "loads_document",
    "parse_json",
    "round_trip_changes",
    "try_loads_document",
]
