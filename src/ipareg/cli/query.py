"""ipareg query — list consonants matching a feature predicate."""

from __future__ import annotations

import json
import sys

import click

from ipareg import get_registry
from ipareg.features import Articulation, Manner, MannerKind, Phonation, Place


@click.command()
@click.option(
    "--manner", "-m",
    type=click.Choice([m.value for m in MannerKind]),
    default=None,
    help="Manner of articulation (e.g. nasal, plosive, fricative).",
)
@click.option(
    "--sibilant/--non-sibilant",
    default=None,
    help="Restrict fricatives by sibilance. Implies --manner fricative.",
)
@click.option(
    "--place", "-p",
    type=click.Choice([p.value for p in Place]),
    default=None,
    help="Coarse place (labial, coronal, dorsal, laryngeal).",
)
@click.option(
    "--articulation", "-a",
    type=click.Choice([a.value for a in Articulation]),
    default=None,
    help="Chart column (e.g. bilabial, alveolar, velar).",
)
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
def query(
    manner: str | None,
    sibilant: bool | None,
    place: str | None,
    articulation: str | None,
    phonation: str | None,
    output_format: str,
) -> None:
    """List consonants matching every given feature, in chart order."""
    criterion: Manner | MannerKind | None = None
    if manner is not None:
        criterion = MannerKind(manner)
    if sibilant is not None:
        if criterion is not None and criterion is not MannerKind.FRICATIVE:
            click.echo(
                f"Error: --sibilant/--non-sibilant only applies to fricatives, "
                f"not {manner!r}",
                err=True,
            )
            sys.exit(1)
        criterion = Manner(MannerKind.FRICATIVE, sibilant=sibilant)

    entries = list(get_registry().filter(
        place=Place(place) if place else None,
        articulation=Articulation(articulation) if articulation else None,
        manner=criterion,
        phonation=Phonation(phonation) if phonation else None,
    ))

    if output_format == "json":
        data = {
            "entries": [e.to_dict() for e in entries],
            "total": len(entries),
        }
        click.echo(json.dumps(data, ensure_ascii=False, indent=2))
        return

    for entry in entries:
        click.echo(f"{entry.grapheme}\t{entry.describe()}")
    click.echo(f"Total: {len(entries)} consonants")
