"""EntityIdValue — a document id qualified by the site it belongs to.

The wire format only carries the local id (``"Q42"``); the site IRI
(``"http://www.wikidata.org/entity/"``) is injected by whoever decoded the
document, or falls back to the configured default site.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class EntityIdValue(BaseModel):
    """Fully qualified entity identifier."""

    model_config = ConfigDict(frozen=True)

    id: str = Field(description="Local id, e.g. 'Q42' or 'P31'")
    site_iri: str = Field(description="IRI prefix of the knowledge base")
    entity_type: str = Field(description="Document type the id refers to ('item', 'property')")

    @property
    def iri(self) -> str:
        """The full IRI, e.g. ``http://www.wikidata.org/entity/Q42``."""
        return self.site_iri + self.id


__all__ = ["EntityIdValue"]
