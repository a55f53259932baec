"""TermValue — a language-tagged text, plus its decoder-side alias record.

Wire shape of both types is ``{"language": "<code>", "value": "<text>"}``.
Neither normalises its input: case and whitespace are kept verbatim. Python
callers may build a `TermValue` with `text=`; the codec reads only `value`.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class TermValue(BaseModel):
    """An immutable language code + text pair (a label, description or alias)."""

    model_config = ConfigDict(frozen=True, validate_by_alias=True, validate_by_name=True)

    language: str = Field(description="Language code, e.g. 'en' or 'de-ch'")
    text: str = Field(alias="value", description="The text in that language")


class TermRecord(BaseModel):
    """One element of an alias array as read from the wire.

    Only used while decoding and encoding aliases; document accessors convert
    records to :class:`TermValue` with :meth:`to_term`.
    """

    model_config = ConfigDict(frozen=True)

    language: str
    value: str

    def to_term(self) -> TermValue:
        return TermValue(language=self.language, text=self.value)


__all__ = ["TermRecord", "TermValue"]
