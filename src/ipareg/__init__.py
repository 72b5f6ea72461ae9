"""ipareg: a classification registry for IPA pulmonic consonants."""

__version__ = "0.1.0"

from functools import lru_cache

from ipareg.errors import (
    AffricateDecompositionError,
    BuildError,
    DuplicateGraphemeError,
    InvalidPlaceArticulationError,
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
from ipareg.registry import AffricateEntry, PhonemeEntry, PhonemeRegistry, build


@lru_cache(maxsize=None)
def get_registry() -> PhonemeRegistry:
    """Return the shared registry built from the built-in tables.

    Built on first call and reused afterwards. The registry is
    immutable, so the same instance is safe to share across threads.
    """
    return build()


__all__ = [
    "AffricateDecompositionError",
    "AffricateEntry",
    "Articulation",
    "BuildError",
    "DuplicateGraphemeError",
    "InvalidPlaceArticulationError",
    "Manner",
    "MannerKind",
    "Phonation",
    "PhonemeEntry",
    "PhonemeRegistry",
    "Place",
    "PlaceOfArticulation",
    "TableLayoutError",
    "__version__",
    "build",
    "get_registry",
]
