"""ipareg affricates — list affricates with their constituents."""

from __future__ import annotations

import json

import click

from ipareg import get_registry
from ipareg.features import Phonation


@click.command()
@click.option(
    "--phonation",
    type=click.Choice([p.value for p in Phonation]),
    default=None,
    help="voiced or voiceless.",
)
@click.option(
    "--format", "-f",
    "output_format",
    type=click.Choice(["text", "json"]),
    default="text",
    help="Output format. Default: text.",
)
def affricates_cmd(phonation: str | None, output_format: str) -> None:
    """List affricates as plosive + fricative pairs."""
    found = list(get_registry().affricates(
        phonation=Phonation(phonation) if phonation else None,
    ))

    if output_format == "json":
        data = {"affricates": [a.to_dict() for a in found], "total": len(found)}
        click.echo(json.dumps(data, ensure_ascii=False, indent=2))
        return

    for a in found:
        click.echo(f"{a.grapheme}\t{a.onset} + {a.release}\t{a.describe()}")
    click.echo(f"Total: {len(found)} affricates")
