"""Core package initializer for wikiterms.

Models live in ``wikiterms.core.contracts``; the JSON codec, errors, settings
and the Result type sit next to this file:
    from wikiterms.core.settings import settings, load_settings, Settings, get_logger
"""

from __future__ import annotations

__all__ = ["__doc__"]
