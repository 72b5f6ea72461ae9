"""Articulatory feature types for pulmonic consonants.

Pure value types with no I/O. The IPA consonant chart has two column
schemes: the coarse ``Place`` and the fine-grained ``Articulation``.
Every articulation belongs to exactly one place, fixed by
``ARTICULATION_PLACE``; ``PlaceOfArticulation`` refuses any pair that
disagrees with that table.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from ipareg.errors import InvalidPlaceArticulationError


class Place(Enum):
    """Coarse place of articulation."""

    LABIAL = "labial"
    CORONAL = "coronal"
    DORSAL = "dorsal"
    LARYNGEAL = "laryngeal"


class Articulation(Enum):
    """Chart column, in canonical left-to-right order."""

    BILABIAL = "bilabial"
    LABIODENTAL = "labiodental"
    LINGUOLABIAL = "linguolabial"
    DENTAL = "dental"
    ALVEOLAR = "alveolar"
    POSTALVEOLAR = "postalveolar"
    RETROFLEX = "retroflex"
    PALATAL = "palatal"
    VELAR = "velar"
    UVULAR = "uvular"
    PHARYNGEAL = "pharyngeal"
    EPIGLOTTAL = "epiglottal"
    GLOTTAL = "glottal"

    @property
    def column(self) -> int:
        """0-based position of this column on the chart."""
        return COLUMN_ORDER.index(self)

    @property
    def place(self) -> Place:
        """The coarse Place this column belongs to."""
        return ARTICULATION_PLACE[self]


COLUMN_ORDER: tuple[Articulation, ...] = tuple(Articulation)
"""Articulation columns in chart order (bilabial first, glottal last)."""

ARTICULATION_PLACE: dict[Articulation, Place] = {
    Articulation.BILABIAL: Place.LABIAL,
    Articulation.LABIODENTAL: Place.LABIAL,
    Articulation.LINGUOLABIAL: Place.LABIAL,
    Articulation.DENTAL: Place.CORONAL,
    Articulation.ALVEOLAR: Place.CORONAL,
    Articulation.POSTALVEOLAR: Place.CORONAL,
    Articulation.RETROFLEX: Place.CORONAL,
    Articulation.PALATAL: Place.DORSAL,
    Articulation.VELAR: Place.DORSAL,
    Articulation.UVULAR: Place.DORSAL,
    Articulation.PHARYNGEAL: Place.LARYNGEAL,
    Articulation.EPIGLOTTAL: Place.LARYNGEAL,
    Articulation.GLOTTAL: Place.LARYNGEAL,
}
"""Fixed many-to-one mapping from chart column to coarse place."""


@dataclass(frozen=True)
class PlaceOfArticulation:
    """A validated (Place, Articulation) pair.

    Use ``PlaceOfArticulation.of(articulation)`` to derive the place.
    Passing both fields explicitly is allowed, but they must agree with
    ``ARTICULATION_PLACE``.

    Raises:
        InvalidPlaceArticulationError: If the pair is inconsistent.
    """

    place: Place
    articulation: Articulation

    def __post_init__(self) -> None:
        if ARTICULATION_PLACE.get(self.articulation) is not self.place:
            raise InvalidPlaceArticulationError(self.place, self.articulation)

    @classmethod
    def of(cls, articulation: Articulation) -> PlaceOfArticulation:
        """Build the pair for a column, deriving its place."""
        return cls(ARTICULATION_PLACE[articulation], articulation)

    def __repr__(self) -> str:
        return f"PlaceOfArticulation({self.place.value}/{self.articulation.value})"


class MannerKind(Enum):
    """Chart rows for pulmonic consonants."""

    NASAL = "nasal"
    PLOSIVE = "plosive"
    FRICATIVE = "fricative"
    APPROXIMANT = "approximant"
    TAP_FLAP = "tap_flap"
    TRILL = "trill"
    LATERAL_FRICATIVE = "lateral_fricative"
    LATERAL_APPROXIMANT = "lateral_approximant"
    LATERAL_TAP_FLAP = "lateral_tap_flap"


@dataclass(frozen=True)
class Manner:
    """Manner of articulation.

    Fricatives additionally carry sibilance; every other kind has
    ``sibilant=False``.

    Attributes:
        kind: The chart row.
        sibilant: Whether a fricative is sibilant (s, z, ʃ, ʒ, ...).
    """

    kind: MannerKind
    sibilant: bool = False

    def __post_init__(self) -> None:
        if self.sibilant and self.kind is not MannerKind.FRICATIVE:
            raise ValueError(
                f"Only fricatives can be sibilant, got {self.kind.value!r}"
            )

    def matches(self, other: Manner | MannerKind) -> bool:
        """Whether this manner satisfies a Manner or MannerKind criterion.

        A bare MannerKind matches regardless of sibilance.
        """
        if isinstance(other, MannerKind):
            return self.kind is other
        return self == other

    @property
    def label(self) -> str:
        """Human-readable name, e.g. 'sibilant fricative'."""
        name = self.kind.value.replace("_", " ")
        if self.kind is MannerKind.FRICATIVE:
            return ("sibilant " if self.sibilant else "non-sibilant ") + name
        return name

    def __repr__(self) -> str:
        if self.kind is MannerKind.FRICATIVE:
            return f"Manner(fricative, sibilant={self.sibilant})"
        return f"Manner({self.kind.value})"


class Phonation(Enum):
    """State of the vocal folds."""

    VOICED = "voiced"
    VOICELESS = "voiceless"


NASAL = Manner(MannerKind.NASAL)
PLOSIVE = Manner(MannerKind.PLOSIVE)
SIBILANT_FRICATIVE = Manner(MannerKind.FRICATIVE, sibilant=True)
NON_SIBILANT_FRICATIVE = Manner(MannerKind.FRICATIVE, sibilant=False)
APPROXIMANT = Manner(MannerKind.APPROXIMANT)
TAP_FLAP = Manner(MannerKind.TAP_FLAP)
TRILL = Manner(MannerKind.TRILL)
LATERAL_FRICATIVE = Manner(MannerKind.LATERAL_FRICATIVE)
LATERAL_APPROXIMANT = Manner(MannerKind.LATERAL_APPROXIMANT)
LATERAL_TAP_FLAP = Manner(MannerKind.LATERAL_TAP_FLAP)
