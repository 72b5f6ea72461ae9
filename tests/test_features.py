"""Tests for the articulatory feature types."""

import dataclasses

import pytest

from ipareg.errors import BuildError, InvalidPlaceArticulationError
from ipareg.features import (
    ARTICULATION_PLACE,
    COLUMN_ORDER,
    NON_SIBILANT_FRICATIVE,
    PLOSIVE,
    SIBILANT_FRICATIVE,
    Articulation,
    Manner,
    MannerKind,
    Place,
    PlaceOfArticulation,
)


class TestArticulation:
    """Chart columns and their fixed place table."""

    def test_column_order(self):
        assert COLUMN_ORDER[0] is Articulation.BILABIAL
        assert COLUMN_ORDER[-1] is Articulation.GLOTTAL
        assert len(COLUMN_ORDER) == 13

    def test_column_index(self):
        assert Articulation.BILABIAL.column == 0
        assert Articulation.ALVEOLAR.column == 4
        assert Articulation.GLOTTAL.column == 12

    def test_every_articulation_has_a_place(self):
        assert set(ARTICULATION_PLACE) == set(Articulation)

    @pytest.mark.parametrize(
        "articulation, place",
        [
            (Articulation.LINGUOLABIAL, Place.LABIAL),
            (Articulation.RETROFLEX, Place.CORONAL),
            (Articulation.UVULAR, Place.DORSAL),
            (Articulation.EPIGLOTTAL, Place.LARYNGEAL),
        ],
    )
    def test_place_property(self, articulation, place):
        assert articulation.place is place


class TestPlaceOfArticulation:
    """Place/articulation pairs must agree with the fixed table."""

    def test_derive_place(self):
        poa = PlaceOfArticulation.of(Articulation.VELAR)
        assert poa.place is Place.DORSAL
        assert poa.articulation is Articulation.VELAR

    def test_explicit_consistent_pair(self):
        poa = PlaceOfArticulation(Place.CORONAL, Articulation.DENTAL)
        assert poa == PlaceOfArticulation.of(Articulation.DENTAL)

    def test_inconsistent_pair_rejected(self):
        with pytest.raises(InvalidPlaceArticulationError) as excinfo:
            PlaceOfArticulation(Place.LABIAL, Articulation.VELAR)
        assert excinfo.value.place is Place.LABIAL
        assert excinfo.value.articulation is Articulation.VELAR

    def test_error_is_build_error(self):
        with pytest.raises(BuildError):
            PlaceOfArticulation(Place.LARYNGEAL, Articulation.PALATAL)
        with pytest.raises(ValueError):
            PlaceOfArticulation(Place.LARYNGEAL, Articulation.PALATAL)

    def test_frozen(self):
        poa = PlaceOfArticulation.of(Articulation.GLOTTAL)
        with pytest.raises(dataclasses.FrozenInstanceError):
            poa.place = Place.LABIAL


class TestManner:
    """Manner values, sibilance, and matching."""

    def test_only_fricatives_are_sibilant(self):
        with pytest.raises(ValueError, match="fricative"):
            Manner(MannerKind.PLOSIVE, sibilant=True)

    def test_default_is_non_sibilant(self):
        assert Manner(MannerKind.FRICATIVE) == NON_SIBILANT_FRICATIVE
        assert NON_SIBILANT_FRICATIVE != SIBILANT_FRICATIVE

    def test_matches_kind_ignores_sibilance(self):
        assert SIBILANT_FRICATIVE.matches(MannerKind.FRICATIVE)
        assert NON_SIBILANT_FRICATIVE.matches(MannerKind.FRICATIVE)
        assert not PLOSIVE.matches(MannerKind.FRICATIVE)

    def test_matches_manner_is_exact(self):
        assert SIBILANT_FRICATIVE.matches(SIBILANT_FRICATIVE)
        assert not SIBILANT_FRICATIVE.matches(NON_SIBILANT_FRICATIVE)

    def test_label(self):
        assert SIBILANT_FRICATIVE.label == "sibilant fricative"
        assert NON_SIBILANT_FRICATIVE.label == "non-sibilant fricative"
        assert Manner(MannerKind.LATERAL_APPROXIMANT).label == "lateral approximant"

    def test_hashable(self):
        assert len({PLOSIVE, Manner(MannerKind.PLOSIVE), SIBILANT_FRICATIVE}) == 2
