"""wikiterms — typed labels, descriptions and aliases of knowledge-base entities.

Decode item and property documents from the knowledge base's JSON export
format, read their multilingual terms, and encode them back unchanged:

    from wikiterms.core.codec import loads_document, dumps_document
"""

from __future__ import annotations

__all__ = ["__version__"]
__version__ = "0.1.0"
