"""Exceptions raised while building a PhonemeRegistry.

Every error here signals an inconsistency in the grapheme tables, not a
runtime condition. A registry is never returned in a half-built state.
"""

from __future__ import annotations

from typing import Any


class BuildError(ValueError):
    """Base class for registry construction failures."""


class DuplicateGraphemeError(BuildError):
    """A grapheme was registered twice with different features.

    Attributes:
        grapheme: The colliding IPA symbol.
    """

    def __init__(self, grapheme: str, existing: Any = None, new: Any = None) -> None:
        self.grapheme = grapheme
        self.existing = existing
        self.new = new
        message = f"Duplicate grapheme {grapheme!r}"
        if existing is not None and new is not None:
            message += f": already registered as {existing!r}, got {new!r}"
        super().__init__(message)


class InvalidPlaceArticulationError(BuildError):
    """A Place was paired with an Articulation outside its group.

    Attributes:
        place: The offending Place.
        articulation: The Articulation it was paired with.
    """

    def __init__(self, place: Any, articulation: Any) -> None:
        self.place = place
        self.articulation = articulation
        super().__init__(
            f"Invalid place/articulation pair: {place!r} does not "
            f"contain {articulation!r}"
        )


class TableLayoutError(BuildError):
    """A manner table does not fit its column layout."""

    def __init__(self, manner: Any, reason: str) -> None:
        self.manner = manner
        super().__init__(f"Bad table layout for {manner!r}: {reason}")


class AffricateDecompositionError(BuildError):
    """An affricate could not be split into plosive + fricative."""

    def __init__(self, grapheme: str, reason: str) -> None:
        self.grapheme = grapheme
        super().__init__(f"Cannot decompose affricate {grapheme!r}: {reason}")
