"""Built-in grapheme tables for pulmonic consonants.

Each manner table is a flat tuple of graphemes read left to right off
the IPA chart. Within a column the voiceless symbol comes before the
voiced one. Which columns a table covers, and whether a column holds a
pair or a single symbol, is spelled out by its ``columns`` layout so
the registry can check the table instead of trusting it.

Combining diacritics are written as escapes: U+0325 / U+030A (voiceless),
U+032A (dental), U+031F (advanced), U+0361 (tie bar). Voiced velar
plosives use the IPA script g (U+0261), not ASCII "g".
"""

from __future__ import annotations

from dataclasses import dataclass

from ipareg.features import Articulation, MannerKind, Phonation

A = Articulation

PAIR: tuple[Phonation, ...] = (Phonation.VOICELESS, Phonation.VOICED)
VOICELESS_ONLY: tuple[Phonation, ...] = (Phonation.VOICELESS,)
VOICED_ONLY: tuple[Phonation, ...] = (Phonation.VOICED,)


@dataclass(frozen=True)
class Column:
    """One attested chart cell of a manner table.

    Attributes:
        articulation: Chart column.
        phonations: Phonations present, in table order.
        sibilant: Sibilance of the column (fricatives only).
    """

    articulation: Articulation
    phonations: tuple[Phonation, ...] = PAIR
    sibilant: bool = False


@dataclass(frozen=True)
class MannerTable:
    """A manner row of the chart: flat graphemes plus their layout."""

    name: str
    kind: MannerKind
    graphemes: tuple[str, ...]
    columns: tuple[Column, ...]

    @property
    def slot_count(self) -> int:
        """Number of graphemes the layout expects."""
        return sum(len(c.phonations) for c in self.columns)


# Graphemes: m̥ m ɱ̊ ɱ n̪̊ n̪ n̥ n ɲ̊ ɲ ŋ̊ ŋ ɴ̥ ɴ
NASALS: tuple[str, ...] = (
    "m\u0325", "m", "ɱ\u030A", "ɱ", "n\u030A\u032A", "n\u032A",
    "n\u0325", "n", "ɲ\u030A", "ɲ", "ŋ\u030A", "ŋ", "ɴ\u0325", "ɴ",
)

# Graphemes: p b p̪ b̪ t̪ d̪ t d ʈ ɖ c ɟ k ɡ q ɢ ʡ ʔ
PLOSIVES: tuple[str, ...] = (
    "p", "b", "p\u032A", "b\u032A", "t\u032A", "d\u032A", "t", "d",
    "ʈ", "ɖ", "c", "ɟ", "k", "\u0261", "q", "ɢ", "ʡ", "ʔ",
)

# Graphemes: ʙ r̥ r ɽ͡r ʀ̥ ʀ ᴙ
TRILLS: tuple[str, ...] = (
    "ʙ", "r\u0325", "r", "ɽ\u0361r", "ʀ\u0325", "ʀ", "\u1D19",
)

# Graphemes: ⱱ̟ ⱱ ɾ̥ ɾ ɽ
TAPS: tuple[str, ...] = ("ⱱ\u031F", "ⱱ", "ɾ\u0325", "ɾ", "ɽ")

# Graphemes: ɸ β f v θ ð s z ʃ ʒ ɕ ʑ ʂ ʐ ç ʝ x ɣ χ ʁ ħ ʕ ʜ ʢ h ɦ
FRICATIVES: tuple[str, ...] = (
    "ɸ", "β", "f", "v", "θ", "ð", "s", "z", "ʃ", "ʒ", "ɕ", "ʑ", "ʂ",
    "ʐ", "ç", "ʝ", "x", "ɣ", "χ", "ʁ", "ħ", "ʕ", "ʜ", "ʢ", "h", "ɦ",
)

LAT_FRICATIVES: tuple[str, ...] = ("ɬ", "ɮ")

LAT_APPROX: tuple[str, ...] = ("l", "ɭ", "ʎ", "ʟ")

# Graphemes: ʋ ɹ ɻ j̊ j ɰ
APPROX: tuple[str, ...] = ("ʋ", "ɹ", "ɻ", "j\u030A", "j", "ɰ")

# Voiceless/voiced pairs; each splits into a plosive onset and a
# fricative release already present in the tables above.
AFFRICATES: tuple[str, ...] = (
    "pf", "bv", "p\u032Af", "b\u032Av", "tθ", "dð", "ts", "dz",
    "tʃ", "dʒ", "tɕ", "dʑ", "ʈʂ", "ɖʐ", "cç", "ɟʝ", "kx", "\u0261ɣ",
    "qχ", "ɢʁ",
)


BUILTIN_TABLES: tuple[MannerTable, ...] = (
    MannerTable(
        name="nasals",
        kind=MannerKind.NASAL,
        graphemes=NASALS,
        columns=(
            Column(A.BILABIAL),
            Column(A.LABIODENTAL),
            Column(A.DENTAL),
            Column(A.ALVEOLAR),
            Column(A.PALATAL),
            Column(A.VELAR),
            Column(A.UVULAR),
        ),
    ),
    MannerTable(
        name="plosives",
        kind=MannerKind.PLOSIVE,
        graphemes=PLOSIVES,
        columns=(
            Column(A.BILABIAL),
            Column(A.LABIODENTAL),
            Column(A.DENTAL),
            Column(A.ALVEOLAR),
            Column(A.RETROFLEX),
            Column(A.PALATAL),
            Column(A.VELAR),
            Column(A.UVULAR),
            Column(A.EPIGLOTTAL, VOICELESS_ONLY),
            Column(A.GLOTTAL, VOICELESS_ONLY),
        ),
    ),
    MannerTable(
        name="trills",
        kind=MannerKind.TRILL,
        graphemes=TRILLS,
        columns=(
            Column(A.BILABIAL, VOICED_ONLY),
            Column(A.ALVEOLAR),
            Column(A.RETROFLEX, VOICED_ONLY),
            Column(A.UVULAR),
            Column(A.EPIGLOTTAL, VOICED_ONLY),
        ),
    ),
    MannerTable(
        name="taps",
        kind=MannerKind.TAP_FLAP,
        graphemes=TAPS,
        columns=(
            Column(A.BILABIAL, VOICED_ONLY),
            Column(A.LABIODENTAL, VOICED_ONLY),
            Column(A.ALVEOLAR),
            Column(A.RETROFLEX, VOICED_ONLY),
        ),
    ),
    MannerTable(
        name="fricatives",
        kind=MannerKind.FRICATIVE,
        graphemes=FRICATIVES,
        columns=(
            Column(A.BILABIAL),
            Column(A.LABIODENTAL),
            Column(A.DENTAL),
            Column(A.ALVEOLAR, sibilant=True),
            Column(A.POSTALVEOLAR, sibilant=True),
            # alveolo-palatal ɕ ʑ
            Column(A.POSTALVEOLAR, sibilant=True),
            Column(A.RETROFLEX, sibilant=True),
            Column(A.PALATAL),
            Column(A.VELAR),
            Column(A.UVULAR),
            Column(A.PHARYNGEAL),
            Column(A.EPIGLOTTAL),
            Column(A.GLOTTAL),
        ),
    ),
    MannerTable(
        name="lateral fricatives",
        kind=MannerKind.LATERAL_FRICATIVE,
        graphemes=LAT_FRICATIVES,
        columns=(Column(A.ALVEOLAR),),
    ),
    MannerTable(
        name="lateral approximants",
        kind=MannerKind.LATERAL_APPROXIMANT,
        graphemes=LAT_APPROX,
        columns=(
            Column(A.ALVEOLAR, VOICED_ONLY),
            Column(A.RETROFLEX, VOICED_ONLY),
            Column(A.PALATAL, VOICED_ONLY),
            Column(A.VELAR, VOICED_ONLY),
        ),
    ),
    MannerTable(
        name="approximants",
        kind=MannerKind.APPROXIMANT,
        graphemes=APPROX,
        columns=(
            Column(A.LABIODENTAL, VOICED_ONLY),
            Column(A.ALVEOLAR, VOICED_ONLY),
            Column(A.RETROFLEX, VOICED_ONLY),
            Column(A.PALATAL),
            Column(A.VELAR, VOICED_ONLY),
        ),
    ),
)
"""Manner tables in registration order."""
