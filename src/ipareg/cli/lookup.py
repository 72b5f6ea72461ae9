"""ipareg lookup — show the features of one grapheme."""

from __future__ import annotations

import json
import sys

import click

from ipareg import get_registry
from ipareg.registry import AffricateEntry


@click.command()
@click.argument("grapheme")
@click.option(
    "--format", "-f",
    "output_format",
    type=click.Choice(["text", "json"]),
    default="text",
    help="Output format. Default: text.",
)
def lookup(grapheme: str, output_format: str) -> None:
    """Show the classification of GRAPHEME (exact match, no normalization)."""
    registry = get_registry()
    entry = registry.get(grapheme)
    if entry is None:
        click.echo(f"Error: Unknown grapheme: {grapheme!r}", err=True)
        sys.exit(1)

    parts = registry.decompose(grapheme) if isinstance(entry, AffricateEntry) else None

    if output_format == "json":
        data = entry.to_dict()
        if parts is not None:
            data["constituents"] = [p.to_dict() for p in parts]
        click.echo(json.dumps(data, ensure_ascii=False, indent=2))
        return

    click.echo(f"{entry.grapheme}: {entry.describe()}")
    if parts is not None:
        onset, release = parts
        click.echo(f"  onset:   {onset.grapheme} ({onset.describe()})")
        click.echo(f"  release: {release.grapheme} ({release.describe()})")
    else:
        click.echo(f"  place: {entry.place.value}")
