"""Exception hierarchy for decoding termed documents.

Decode failures are always exceptions (or `Err` values from the ``try_*``
helpers), never empty documents, so callers can tell "no labels" apart from
"labels could not be read".
"""

from __future__ import annotations

import json
from collections.abc import Sequence

from pydantic import ValidationError


class WikitermsError(Exception):
    """Base class for all errors raised by this package."""


class DocumentDecodeError(WikitermsError, ValueError):
    """Input could not be decoded into a termed document.

    Attributes
    ----------
    path : str
        Dotted path of the offending field, e.g. ``"aliases.en.1.value"``;
        ``"$"`` when the document as a whole is at fault.
    reason : str
        Human-readable cause.
    """

    def __init__(self, path: str, reason: str) -> None:
        super().__init__(f"{path}: {reason}")
        self.path = path
        self.reason = reason

    def __str__(self) -> str:
        return f"{self.path}: {self.reason}"

    def prefix_path(self, prefix: str) -> None:
        """Nest the error under ``prefix``, e.g. an element index of an array."""
        self.path = prefix if self.path == "$" else f"{prefix}.{self.path}"

    @classmethod
    def from_validation_error(cls, exc: ValidationError) -> DocumentDecodeError:
        """Build from the first error of a pydantic ``ValidationError``."""
        first = exc.errors()[0]
        return cls(format_path(first["loc"]), first["msg"])

    @classmethod
    def from_json_error(cls, exc: json.JSONDecodeError) -> DocumentDecodeError:
        return cls("$", f"malformed JSON at line {exc.lineno} column {exc.colno}: {exc.msg}")


class UnknownDocumentTypeError(DocumentDecodeError):
    """The ``type`` discriminator is missing or names no registered variant."""

    def __init__(self, json_type: object) -> None:
        super().__init__("type", f"unknown document type {json_type!r}")
        self.json_type = json_type


class FixtureMismatchError(WikitermsError):
    """A fixture's ``id`` disagrees with the id the caller asked for."""


def format_path(loc: Sequence[str | int]) -> str:
    """Render a pydantic error location as a dotted path."""
    return ".".join(str(part) for part in loc) or "$"


__all__ = [
    "DocumentDecodeError",
    "FixtureMismatchError",
    "UnknownDocumentTypeError",
    "WikitermsError",
    "format_path",
]
