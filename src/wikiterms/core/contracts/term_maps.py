"""Label, description and alias maps of a termed document.

Labels and descriptions hold exactly one :class:`TermValue` per language::

    "labels": {"en": {"language": "en", "value": "Earth"}}

Aliases hold an ordered array of records per language, one level deeper::

    "aliases": {"en": [{"language": "en", "value": "Blue Planet"}, ...]}

Documents store aliases as :class:`TermRecord` tuples and expose them as tuples
of :class:`TermValue`, so the alias view is rebuilt on every access. A language
missing from any map means "no value in that language", never an error, and
an empty alias array reads the same as a missing key.

Stored maps are `MappingProxyType` wrappers over freshly validated dicts
(`StoredTermMap`, `StoredAliasRecords`); they serialize back to plain JSON
objects.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from types import MappingProxyType
from typing import Annotated, Any

from pydantic import AfterValidator, SerializerFunctionWrapHandler, WrapSerializer

from .term import TermRecord, TermValue

TermMap = Mapping[str, TermValue]
AliasRecords = Mapping[str, tuple[TermRecord, ...]]
AliasMap = Mapping[str, tuple[TermValue, ...]]


def freeze_terms(terms: TermMap) -> Mapping[str, TermValue]:
    """Return a read-only view of a label or description map."""
    if isinstance(terms, MappingProxyType):
        return terms
    return MappingProxyType(dict(terms))


def freeze_alias_records(records: AliasRecords) -> AliasRecords:
    """Return a read-only alias record map with tuple values."""
    return MappingProxyType({key: tuple(value) for key, value in records.items()})


def _thaw(value: Mapping[str, Any], handler: SerializerFunctionWrapHandler) -> Any:
    return handler(dict(value))


StoredTermMap = Annotated[
    Mapping[str, TermValue], AfterValidator(freeze_terms), WrapSerializer(_thaw)
]
StoredAliasRecords = Annotated[
    Mapping[str, tuple[TermRecord, ...]],
    AfterValidator(freeze_alias_records),
    WrapSerializer(_thaw),
]


def aliases_view(records: AliasRecords) -> AliasMap:
    """Build a fresh read-only alias map from stored alias records.

    Record order within a language is kept; duplicates are not removed.
    Languages with no records are left out.
    """
    view = {
        language: tuple(record.to_term() for record in language_records)
        for language, language_records in records.items()
        if language_records
    }
    return MappingProxyType(view)


def reconcile_alias_languages(
    records: AliasRecords,
    policy: str,
    logger: logging.Logger | None = None,
) -> AliasRecords:
    """Apply the alias language policy to freshly decoded alias records.

    Parameters
    ----------
    records:
        Alias records keyed by the language of their containing array.
    policy:
        ``"reject"`` raises ``ValueError`` on the first record whose own
        language differs from its key, ``"correct"`` rewrites such records to
        the key, ``"keep"`` returns ``records`` untouched.
    """
    if policy == "keep":
        return records
    if policy not in ("reject", "correct"):
        raise ValueError(f"unknown alias language policy {policy!r}")

    out: dict[str, tuple[TermRecord, ...]] = {}
    for key, language_records in records.items():
        fixed: list[TermRecord] = []
        for index, record in enumerate(language_records):
            if record.language != key:
                if policy == "reject":
                    raise ValueError(
                        f"alias {index} under {key!r} has language {record.language!r}"
                    )
                if logger is not None:
                    logger.warning(
                        "Correcting alias %d under %r from language %r",
                        index,
                        key,
                        record.language,
                    )
                record = TermRecord(language=key, value=record.value)
            fixed.append(record)
        out[key] = tuple(fixed)
    return MappingProxyType(out)


__all__ = [
    "AliasMap",
    "AliasRecords",
    "StoredAliasRecords",
    "StoredTermMap",
    "TermMap",
    "aliases_view",
    "freeze_alias_records",
    "freeze_terms",
    "reconcile_alias_languages",
]
