"""Shared test fixtures for ipareg."""

import pytest

from ipareg import build
from ipareg.features import Articulation, MannerKind
from ipareg.graphemes import Column, MannerTable, VOICELESS_ONLY


@pytest.fixture(scope="session")
def registry():
    """The registry built from the built-in tables."""
    return build()


@pytest.fixture
def small_tables() -> list[MannerTable]:
    """A minimal plosive + fricative chart fragment."""
    return [
        MannerTable(
            name="plosives",
            kind=MannerKind.PLOSIVE,
            graphemes=("p", "b", "t", "d", "ʔ"),
            columns=(
                Column(Articulation.BILABIAL),
                Column(Articulation.ALVEOLAR),
                Column(Articulation.GLOTTAL, VOICELESS_ONLY),
            ),
        ),
        MannerTable(
            name="fricatives",
            kind=MannerKind.FRICATIVE,
            graphemes=("f", "v", "s", "z"),
            columns=(
                Column(Articulation.LABIODENTAL),
                Column(Articulation.ALVEOLAR, sibilant=True),
            ),
        ),
    ]
