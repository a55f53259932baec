# src/wikiterms/cli.py
"""
wikiterms Command Line Interface (CLI).

Inspect entity documents stored as JSON files and check that they survive a
decode/encode round trip. Built with `typer` and rendered with `rich`.

Usage
-----
    # Show the terms of a document, optionally for one language only
    $ wikiterms show Q42.json --language en

    # Qualify the id with another site
    $ wikiterms show Q42.json --site-iri http://example.org/entity/

    # Decode, re-encode and compare the carried fields
    $ wikiterms roundtrip Q42.json
"""

from __future__ import annotations

from pathlib import Path
from typing import Annotated, Any

import typer
from dotenv import load_dotenv
from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from wikiterms.core.codec import (
    decode_document,
    encode_document,
    parse_json,
    round_trip_changes,
)
from wikiterms.core.contracts.document import TermedDocument
from wikiterms.core.errors import DocumentDecodeError

load_dotenv()

app = typer.Typer(
    help="wikiterms: Read labels, descriptions and aliases of entity documents.",
    rich_markup_mode="markdown",
)
console = Console()


# --------------------------------------------------------------------------- #
# Helpers
# --------------------------------------------------------------------------- #


def _read_json(file: Path) -> Any:
    """Read and parse ``file``; decode errors exit with code 1."""
    try:
        return parse_json(file.read_bytes())
    except DocumentDecodeError as e:
        console.print(f"[bold red]❌ Malformed JSON in {file.name}:[/bold red] {e}")
        raise typer.Exit(code=1) from e


def _decode(payload: Any, file: Path) -> TermedDocument:
    try:
        return decode_document(payload)
    except DocumentDecodeError as e:
        console.print(f"[bold red]❌ Cannot decode {file.name}:[/bold red] {e}")
        raise typer.Exit(code=1) from e


def _render_terms(document: TermedDocument, language: str | None) -> None:
    """Render one table row per language present in any term map."""
    labels = document.labels
    descriptions = document.descriptions
    aliases = document.aliases

    languages = sorted(set(labels) | set(descriptions) | set(aliases))
    if language is not None:
        languages = [lang for lang in languages if lang == language]

    if not languages:
        console.print("[dim]No terms.[/dim]")
        return

    table = Table(show_lines=False)
    table.add_column("Language", style="cyan", no_wrap=True)
    table.add_column("Label")
    table.add_column("Description")
    table.add_column("Aliases")
    for lang in languages:
        label = labels.get(lang)
        description = descriptions.get(lang)
        table.add_row(
            lang,
            label.text if label else "",
            description.text if description else "",
            ", ".join(term.text for term in aliases.get(lang, ())),
        )
    console.print(table)


# --------------------------------------------------------------------------- #
# Commands
# --------------------------------------------------------------------------- #


@app.command()  # type: ignore[misc]
def show(
    file: Annotated[
        Path,
        typer.Argument(
            exists=True,
            file_okay=True,
            dir_okay=False,
            readable=True,
            help="Path to a JSON file holding one item or property document.",
        ),
    ],
    site_iri: Annotated[
        str | None,
        typer.Option(
            "--site-iri",
            "-s",
            help="Site IRI the document's id belongs to (default: configured site).",
        ),
    ] = None,
    language: Annotated[
        str | None,
        typer.Option("--language", "-l", help="Only show terms in this language."),
    ] = None,
) -> None:
    """
    Decode a document and print its identity and terms.
    """
    document = _decode(_read_json(file), file)
    if site_iri is not None:
        document.set_site_iri(site_iri)

    console.print(
        Panel.fit(
            f"[bold cyan]{document.entity_id or '(no id)'}[/bold cyan] "
            f"[dim]{document.json_type}[/dim]\n{document.entity_id_value.iri}",
            border_style="cyan",
        )
    )
    _render_terms(document, language)


@app.command()  # type: ignore[misc]
def roundtrip(
    file: Annotated[
        Path,
        typer.Argument(
            exists=True,
            file_okay=True,
            dir_okay=False,
            readable=True,
            help="Path to a JSON file holding one item or property document.",
        ),
    ],
) -> None:
    """
    Decode a document, encode it again and compare id, type and term maps.

    Exits with code 1 if the document cannot be decoded or any compared field
    differs after re-encoding.
    """
    payload = _read_json(file)
    document = _decode(payload, file)
    encoded = encode_document(document)

    changed = round_trip_changes(payload, encoded)
    if changed:
        console.print(
            f"[bold red]❌ Round trip changed:[/bold red] {', '.join(changed)} ({file.name})"
        )
        raise typer.Exit(code=1)

    console.print(
        f"[bold green]✅ Round trip OK[/bold green] {document.json_type} "
        f"{document.entity_id} ({file.name})"
    )


if __name__ == "__main__":
    app()
