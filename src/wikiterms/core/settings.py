"""Centralized configuration using Pydantic Settings (v2).

This module exposes a single, cached `settings` instance that reads from:
- Real environment variables (highest precedence)
- `.env` files at the repository root: .env, .env.local, .env.dev/.env.test/.env.prod

Decode-time behaviour that the wire format leaves open (the default site IRI
for documents without injected site context, and what to do with alias records
whose language disagrees with their map key) is configured here rather than
hard-coded in the models.
"""

from __future__ import annotations

import logging
import os
from functools import lru_cache
from pathlib import Path
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

EnvName = Literal["dev", "test", "prod"]
LogLevelName = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
AliasLanguagePolicy = Literal["reject", "correct", "keep"]

#: Site IRI of Wikidata, assumed for documents whose site context is unset.
WIKIDATA_SITE_IRI = "http://www.wikidata.org/entity/"


class Settings(BaseSettings):
    """Typed configuration loaded from env and `.env` files.

    Attributes
    ----------
    environment : EnvName
        Runtime environment flag; maps from `WIKITERMS_ENV`.
    log_level : LogLevelName
        Global log level string; maps from `LOG_LEVEL`.
    default_site_iri : str
        Site IRI reported for documents with no injected site context; maps
        from `WIKITERMS_DEFAULT_SITE_IRI`.
    alias_language_policy : AliasLanguagePolicy
        How alias records whose `language` differs from their map key are
        handled: `reject` fails decoding, `correct` rewrites the record to the
        key, `keep` passes it through. Maps from `WIKITERMS_ALIAS_LANGUAGE_POLICY`.
    fixtures_dir : Path
        Base directory for JSON fixture resources; maps from
        `WIKITERMS_FIXTURES_DIR`.
    """

    environment: EnvName = Field(default="dev", alias="WIKITERMS_ENV")
    log_level: LogLevelName = Field(default="INFO", alias="LOG_LEVEL")
    default_site_iri: str = Field(default=WIKIDATA_SITE_IRI, alias="WIKITERMS_DEFAULT_SITE_IRI")
    alias_language_policy: AliasLanguagePolicy = Field(
        default="reject", alias="WIKITERMS_ALIAS_LANGUAGE_POLICY"
    )
    fixtures_dir: Path = Field(default=Path("tests/fixtures"), alias="WIKITERMS_FIXTURES_DIR")

    model_config = SettingsConfigDict(
        env_file=(".env", ".env.local", ".env.dev", ".env.test", ".env.prod"),
        env_file_encoding="utf-8",
        extra="ignore",
    )

    @property
    def is_dev(self) -> bool:
        return self.environment == "dev"

    @property
    def is_test(self) -> bool:
        return self.environment == "test"

    @property
    def is_prod(self) -> bool:
        return self.environment == "prod"

    def log_level_numeric(self) -> int:
        """Return the numeric logging level corresponding to `self.log_level`."""
        return getattr(logging, self.log_level, logging.INFO)


@lru_cache(maxsize=1)
def load_settings() -> Settings:
    """Create and cache a `Settings` instance.

    Kept behind an LRU cache so tests can force a rebuild via
    `load_settings.cache_clear()` after mutating `os.environ`.
    """
    os.environ.setdefault("WIKITERMS_ENV", "dev")
    return Settings()


settings: Settings = load_settings()


def get_logger(name: str = "wikiterms") -> logging.Logger:
    """Return a process-global logger configured to the current log level."""
    logger = logging.getLogger(name)
    if not logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(
            logging.Formatter("%(asctime)s | %(levelname)s | %(name)s | %(message)s")
        )
        logger.addHandler(handler)
    logger.setLevel(load_settings().log_level_numeric())
    logger.propagate = False
    return logger
