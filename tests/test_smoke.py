"""
Smoke tests for package structure and availability.

Scope
-----
These tests strictly verify that the package is installed correctly in the
environment and that top-level modules are importable.
"""

from __future__ import annotations

import importlib

from wikiterms import __version__


def test_package_importable() -> None:
    """Ensure the top-level package can be imported."""
    mod = importlib.import_module("wikiterms")
    assert mod is not None


def test_version_is_set() -> None:
    """Ensure the package exposes a valid version string."""
    assert isinstance(__version__, str)
    assert len(__version__) > 0


def test_cli_module_exposes_app() -> None:
    """
    Ensure the CLI module exposes the Typer 'app' object.

    The entry point in pyproject.toml is `wikiterms.cli:app`.
    """
    cli = importlib.import_module("wikiterms.cli")
    assert hasattr(cli, "app"), "wikiterms.cli must expose an 'app' Typer object."


def test_variants_registered_on_import() -> None:
    """Importing the document module registers both wire variants."""
    document = importlib.import_module("wikiterms.core.contracts.document")
    assert set(document.DOCUMENT_TYPES) >= {"item", "property"}
