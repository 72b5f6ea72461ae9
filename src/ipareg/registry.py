"""PhonemeRegistry: immutable grapheme → articulatory feature lookup.

``build()`` expands the manner tables in ``ipareg.graphemes`` into
``PhonemeEntry`` rows, splits each affricate into its plosive onset and
fricative release, and freezes the result. Nothing is mutable after
``build()`` returns, so a registry can be shared between threads
without locking.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass
from types import MappingProxyType
from typing import Any, Iterable, Iterator, Sequence, Union

from ipareg.errors import (
    AffricateDecompositionError,
    DuplicateGraphemeError,
    TableLayoutError,
)
from ipareg.features import (
    Articulation,
    Manner,
    MannerKind,
    Phonation,
    Place,
    PlaceOfArticulation,
)
from ipareg.graphemes import AFFRICATES, BUILTIN_TABLES, PAIR, MannerTable

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PhonemeEntry:
    """One simple (single-manner) consonant.

    Attributes:
        grapheme: IPA symbol, compared by exact code points.
        place_of_articulation: Validated place/articulation pair.
        manner: Manner of articulation.
        phonation: Voiced or voiceless.
    """

    grapheme: str
    place_of_articulation: PlaceOfArticulation
    manner: Manner
    phonation: Phonation

    @property
    def place(self) -> Place:
        return self.place_of_articulation.place

    @property
    def articulation(self) -> Articulation:
        return self.place_of_articulation.articulation

    @property
    def sibilant(self) -> bool:
        return self.manner.sibilant

    def describe(self) -> str:
        """Chart label, e.g. 'voiceless alveolar lateral fricative'."""
        return f"{self.phonation.value} {self.articulation.value} {self.manner.label}"

    def to_dict(self) -> dict[str, Any]:
        """Export as a plain dict suitable for JSON serialization."""
        return {
            "grapheme": self.grapheme,
            "place": self.place.value,
            "articulation": self.articulation.value,
            "manner": self.manner.kind.value,
            "sibilant": self.sibilant,
            "phonation": self.phonation.value,
        }


@dataclass(frozen=True)
class AffricateEntry:
    """A plosive-to-fricative sequence written as one grapheme.

    Attributes:
        grapheme: The affricate symbol (e.g. 'ts', 'dʒ').
        onset: Grapheme key of the plosive entry.
        release: Grapheme key of the fricative entry.
        phonation: Shared phonation of both constituents.
        sibilant: Whether the release is a sibilant fricative.
    """

    grapheme: str
    onset: str
    release: str
    phonation: Phonation
    sibilant: bool = False

    def describe(self) -> str:
        kind = "sibilant affricate" if self.sibilant else "non-sibilant affricate"
        return f"{self.phonation.value} {kind}"

    def to_dict(self) -> dict[str, Any]:
        return {
            "grapheme": self.grapheme,
            "manner": "affricate",
            "onset": self.onset,
            "release": self.release,
            "sibilant": self.sibilant,
            "phonation": self.phonation.value,
        }


Entry = Union[PhonemeEntry, AffricateEntry]


class PhonemeRegistry(Mapping):
    """Read-only mapping from grapheme to PhonemeEntry or AffricateEntry.

    Simple entries are registered first, in the order given; affricates
    follow and must point at an already registered plosive onset and
    fricative release with the same phonation. Iteration yields
    graphemes in registration order.

    Args:
        entries: Simple consonant entries.
        affricates: Affricate entries referring to ``entries``.

    Raises:
        DuplicateGraphemeError: If a grapheme is registered twice with
            different features. Identical repeats are ignored.
        AffricateDecompositionError: If an affricate's constituents are
            missing, of the wrong manner, or disagree in phonation.
    """

    def __init__(
        self,
        entries: Iterable[PhonemeEntry],
        affricates: Iterable[AffricateEntry] = (),
    ) -> None:
        table: dict[str, Entry] = {}
        simple: list[PhonemeEntry] = []
        compound: list[AffricateEntry] = []

        for entry in entries:
            if self._claim(table, entry):
                simple.append(entry)

        for affricate in affricates:
            self._check_constituents(table, affricate)
            if self._claim(table, affricate):
                compound.append(affricate)

        self._table = MappingProxyType(table)
        self._entries: tuple[PhonemeEntry, ...] = tuple(simple)
        self._affricates: tuple[AffricateEntry, ...] = tuple(compound)

    @staticmethod
    def _claim(table: dict[str, Entry], entry: Entry) -> bool:
        """Register entry; False if an identical entry already exists."""
        existing = table.get(entry.grapheme)
        if existing is None:
            table[entry.grapheme] = entry
            return True
        if existing != entry:
            raise DuplicateGraphemeError(entry.grapheme, existing, entry)
        return False

    @staticmethod
    def _check_constituents(table: dict[str, Entry], affricate: AffricateEntry) -> None:
        onset = table.get(affricate.onset)
        if not isinstance(onset, PhonemeEntry) or onset.manner.kind is not MannerKind.PLOSIVE:
            raise AffricateDecompositionError(
                affricate.grapheme, f"onset {affricate.onset!r} is not a registered plosive"
            )
        release = table.get(affricate.release)
        if not isinstance(release, PhonemeEntry) or release.manner.kind is not MannerKind.FRICATIVE:
            raise AffricateDecompositionError(
                affricate.grapheme, f"release {affricate.release!r} is not a registered fricative"
            )
        if onset.phonation is not affricate.phonation or release.phonation is not affricate.phonation:
            raise AffricateDecompositionError(
                affricate.grapheme,
                f"phonation mismatch: {onset.grapheme!r} is {onset.phonation.value}, "
                f"{release.grapheme!r} is {release.phonation.value}, "
                f"affricate is {affricate.phonation.value}",
            )
        if release.sibilant != affricate.sibilant:
            raise AffricateDecompositionError(
                affricate.grapheme, f"sibilance disagrees with release {release.grapheme!r}"
            )

    # --- Mapping protocol ---

    def __getitem__(self, grapheme: str) -> Entry:
        return self._table[grapheme]

    def __iter__(self) -> Iterator[str]:
        return iter(self._table)

    def __len__(self) -> int:
        return len(self._table)

    def __repr__(self) -> str:
        return (
            f"PhonemeRegistry(entries={self.entry_count}, "
            f"affricates={self.affricate_count})"
        )

    # --- Counts ---

    @property
    def entry_count(self) -> int:
        """Number of simple (non-affricate) entries."""
        return len(self._entries)

    @property
    def affricate_count(self) -> int:
        """Number of affricate entries."""
        return len(self._affricates)

    # --- Lookup ---

    def get(self, grapheme: str, default: Any = None) -> Entry | None:
        """Look up a grapheme by exact code-point match.

        Unknown graphemes are expected (the catalogue covers pulmonic
        consonants only) and return ``default`` rather than raising.
        No Unicode normalization is applied; callers normalize input.
        """
        return self._table.get(grapheme, default)

    def decompose(self, grapheme: str) -> tuple[PhonemeEntry, PhonemeEntry] | None:
        """Return the (onset, release) entries of an affricate, or None."""
        entry = self._table.get(grapheme)
        if not isinstance(entry, AffricateEntry):
            return None
        onset = self._table[entry.onset]
        release = self._table[entry.release]
        assert isinstance(onset, PhonemeEntry) and isinstance(release, PhonemeEntry)
        return onset, release

    # --- Queries ---

    def filter(
        self,
        place: Place | None = None,
        articulation: Articulation | None = None,
        manner: Manner | MannerKind | None = None,
        phonation: Phonation | None = None,
    ) -> Iterator[PhonemeEntry]:
        """Iterate simple entries matching every given criterion.

        Omitted criteria match anything. ``manner`` may be a ``Manner``
        (sibilance must match) or a ``MannerKind`` (any sibilance).
        Entries come out in registration order, and each call starts a
        fresh scan.

        Raises:
            TypeError: If a criterion has the wrong type.
        """
        _check_type("place", place, Place)
        _check_type("articulation", articulation, Articulation)
        _check_type("manner", manner, (Manner, MannerKind))
        _check_type("phonation", phonation, Phonation)
        return self._scan(place, articulation, manner, phonation)

    def _scan(
        self,
        place: Place | None,
        articulation: Articulation | None,
        manner: Manner | MannerKind | None,
        phonation: Phonation | None,
    ) -> Iterator[PhonemeEntry]:
        for entry in self._entries:
            if place is not None and entry.place is not place:
                continue
            if articulation is not None and entry.articulation is not articulation:
                continue
            if manner is not None and not entry.manner.matches(manner):
                continue
            if phonation is not None and entry.phonation is not phonation:
                continue
            yield entry

    def graphemes_for(self, manner: Manner | MannerKind) -> list[str]:
        """Graphemes of one manner, in registration order.

        ``graphemes_for(MannerKind.FRICATIVE)`` gives back the whole
        fricative table; ``graphemes_for(SIBILANT_FRICATIVE)`` only the
        sibilants.
        """
        return [entry.grapheme for entry in self.filter(manner=manner)]

    def affricates(self, phonation: Phonation | None = None) -> Iterator[AffricateEntry]:
        """Iterate affricate entries in registration order."""
        _check_type("phonation", phonation, Phonation)
        return (
            a for a in self._affricates
            if phonation is None or a.phonation is phonation
        )

    def manners(self) -> list[Manner]:
        """Distinct manners with at least one entry, in registration order."""
        seen: list[Manner] = []
        for entry in self._entries:
            if entry.manner not in seen:
                seen.append(entry.manner)
        return seen


def _check_type(name: str, value: Any, expected: type | tuple[type, ...]) -> None:
    if value is not None and not isinstance(value, expected):
        raise TypeError(f"{name} must be {expected!r} or None, got {value!r}")


# ---------------------------------------------------------------------------
# Construction
# ---------------------------------------------------------------------------


def build(
    tables: Sequence[MannerTable] | None = None,
    affricates: Sequence[str] | None = None,
) -> PhonemeRegistry:
    """Build a registry from manner tables and affricate graphemes.

    Args:
        tables: Manner tables in registration order. Defaults to the
            built-in pulmonic consonant tables.
        affricates: Affricate graphemes as voiceless/voiced pairs.
            Defaults to the built-in affricate table.

    Returns:
        A fully populated, immutable PhonemeRegistry.

    Raises:
        BuildError: If any table is inconsistent (see ``ipareg.errors``).
    """
    if tables is None:
        tables = BUILTIN_TABLES
    if affricates is None:
        affricates = AFFRICATES

    entries: list[PhonemeEntry] = []
    for table in tables:
        expanded = _expand_table(table)
        logger.debug("Expanded %s: %d entries", table.name, len(expanded))
        entries.extend(expanded)

    plosives = {e.grapheme: e for e in entries if e.manner.kind is MannerKind.PLOSIVE}
    fricatives = {e.grapheme: e for e in entries if e.manner.kind is MannerKind.FRICATIVE}
    compound = [
        _decompose_affricate(grapheme, PAIR[i % 2], plosives, fricatives)
        for i, grapheme in enumerate(affricates)
    ]

    registry = PhonemeRegistry(entries, compound)
    logger.info(
        "Built phoneme registry: %d entries across %d manners, %d affricates",
        registry.entry_count,
        len(registry.manners()),
        registry.affricate_count,
    )
    return registry


def _expand_table(table: MannerTable) -> list[PhonemeEntry]:
    """Walk a flat grapheme table column by column.

    A two-phonation column takes a voiceless/voiced pair, a
    single-phonation column takes one grapheme. Columns must follow
    chart order and the layout must consume the table exactly.
    """
    if table.slot_count != len(table.graphemes):
        raise TableLayoutError(
            table.name,
            f"layout expects {table.slot_count} graphemes, table has {len(table.graphemes)}",
        )

    entries: list[PhonemeEntry] = []
    position = 0
    last_column = -1
    for column in table.columns:
        if column.articulation.column < last_column:
            raise TableLayoutError(
                table.name, f"{column.articulation.value} is out of chart order"
            )
        last_column = column.articulation.column

        if column.phonations not in (PAIR, PAIR[:1], PAIR[1:]):
            raise TableLayoutError(
                table.name,
                f"{column.articulation.value} must list voiceless before voiced, "
                f"got {[p.value for p in column.phonations]}",
            )

        try:
            manner = Manner(table.kind, sibilant=column.sibilant)
        except ValueError as exc:
            raise TableLayoutError(table.name, str(exc)) from exc

        place = PlaceOfArticulation.of(column.articulation)
        for phonation in column.phonations:
            entries.append(
                PhonemeEntry(table.graphemes[position], place, manner, phonation)
            )
            position += 1

    return entries


def _decompose_affricate(
    grapheme: str,
    phonation: Phonation,
    plosives: Mapping[str, PhonemeEntry],
    fricatives: Mapping[str, PhonemeEntry],
) -> AffricateEntry:
    """Split an affricate into its unique plosive + fricative parts."""
    splits = [
        (grapheme[:i], grapheme[i:])
        for i in range(1, len(grapheme))
        if grapheme[:i] in plosives and grapheme[i:] in fricatives
    ]
    if not splits:
        raise AffricateDecompositionError(grapheme, "no plosive + fricative split")
    if len(splits) > 1:
        raise AffricateDecompositionError(grapheme, f"ambiguous splits {splits}")

    onset, release = splits[0]
    return AffricateEntry(
        grapheme=grapheme,
        onset=onset,
        release=release,
        phonation=phonation,
        sibilant=fricatives[release].sibilant,
    )
