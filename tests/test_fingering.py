"""Tests for fingering analysis."""

from dataclasses import replace

import pytest

from chord_catalog.fingering import (
    analyze_fingering,
    detect_barre,
    fingering_name,
    muted_strings,
    ordinal,
    resolve_intervals,
    resolve_notes,
)
from chord_catalog.models import BarreInfo, RawPosition
from chord_catalog.theory import PychordTheory


def make_position(frets: tuple[int, ...], base_fret: int = 1, barres: tuple[int, ...] = ()) -> RawPosition:
    return RawPosition(frets=frets, fingers=(0,) * 6, base_fret=base_fret, barres=barres)


class TestMutedStrings:
    def test_low_e_muted(self) -> None:
        assert muted_strings((-1, 0, 2, 2, 1, 0)) == (6,)

    def test_several_muted(self) -> None:
        assert muted_strings((-1, -1, 0, 2, 3, -1)) == (6, 5, 1)

    def test_none_muted(self) -> None:
        assert muted_strings((3, 2, 0, 0, 0, 3)) == ()


class TestDetectBarre:
    def test_full_barre(self, f_barre: RawPosition) -> None:
        assert detect_barre(f_barre) == BarreInfo(from_string=6, to_string=1, fret=1)

    def test_partial_barre(self) -> None:
        position = make_position((-1, 1, 3, 3, 3, 1), barres=(3,))
        assert detect_barre(position) == BarreInfo(from_string=4, to_string=2, fret=3)

    def test_no_barres(self, open_c: RawPosition) -> None:
        assert detect_barre(open_c) is None

    def test_barre_fret_not_played(self) -> None:
        assert detect_barre(make_position((-1, 0, 2, 2, 2, 0), barres=(5,))) is None

    def test_only_first_barre_is_modeled(self) -> None:
        position = make_position((1, 3, 3, 3, 1, 1), barres=(1, 3))
        assert detect_barre(position) == BarreInfo(from_string=6, to_string=1, fret=1)

    def test_strings_on_barre_fret_fall_within_span(self) -> None:
        position = make_position((5, 7, 5, 6, 5, -1), barres=(5,))
        barre = detect_barre(position)
        assert barre is not None
        for index, fret in enumerate(position.frets):
            if fret == barre.fret:
                assert barre.to_string <= 6 - index <= barre.from_string


class TestOrdinal:
    @pytest.mark.parametrize(
        ("n", "expected"),
        [(1, "1st"), (2, "2nd"), (3, "3rd"), (4, "4th"), (10, "10th"), (11, "11th"), (12, "12th"), (13, "13th"),
         (21, "21st"), (22, "22nd"), (111, "111th")],
    )
    def test_ordinals(self, n: int, expected: str) -> None:
        assert ordinal(n) == expected


class TestFingeringName:
    def test_open_position(self, open_c: RawPosition) -> None:
        assert fingering_name(open_c, None) == "Open Position"

    def test_barre(self) -> None:
        position = make_position((3, 5, 5, 4, 3, 3), base_fret=3, barres=(3,))
        assert fingering_name(position, detect_barre(position)) == "Barre - 3rd fret"

    def test_barre_at_first_fret(self, f_barre: RawPosition) -> None:
        """A first-fret barre without open strings is not an open position."""
        assert fingering_name(f_barre, detect_barre(f_barre)) == "Barre - 1st fret"

    def test_barre_with_open_strings(self) -> None:
        position = make_position((-1, 0, 7, 7, 7, 0), base_fret=5, barres=(7,))
        assert fingering_name(position, detect_barre(position)) == "Open - 7th fret"

    def test_open_strings_up_the_neck(self) -> None:
        position = make_position((0, 7, 6, -1, -1, 0), base_fret=6)
        assert fingering_name(position, None) == "Open - 6th fret"

    def test_closed_shape(self) -> None:
        position = make_position((-1, 12, 14, 14, 13, -1), base_fret=12)
        assert fingering_name(position, None) == "12th fret"


class TestResolveNotes:
    def test_octaves_are_stripped(self, stub_theory) -> None:
        assert resolve_notes((48, 52, 55), stub_theory) == ("C", "E", "G")

    def test_unresolved_midi_is_dropped(self, stub_theory) -> None:
        assert resolve_notes((48, -5, 61), stub_theory) == ("C", "Db")


class TestResolveIntervals:
    def test_root_is_reduced_to_pitch_class(self, stub_theory) -> None:
        assert resolve_intervals(("C", "E"), "C4", stub_theory) == ("C->C", "C->E")

    def test_unresolved_intervals_are_dropped(self, stub_theory) -> None:
        """Notes and intervals are filtered independently."""
        notes = ("C", "X", "G")
        intervals = resolve_intervals(notes, "C", stub_theory)
        assert intervals == ("C->C", "C->G")
        assert len(intervals) < len(notes)


class TestAnalyzeFingering:
    def test_open_c(self, open_c: RawPosition) -> None:
        fingering = analyze_fingering(open_c, "major", "C", PychordTheory())
        assert fingering.id == "C-major-1"
        assert fingering.name == "Open Position"
        assert fingering.muted_strings == (6,)
        assert fingering.barre is None
        assert fingering.notes == ("C", "E", "G", "C", "E")
        assert fingering.intervals == ("1P", "3M", "5P", "1P", "3M")
        assert fingering.difficulty == 1.0
        assert fingering.frets == open_c.frets
        assert fingering.midi == open_c.midi

    def test_f_barre(self, f_barre: RawPosition) -> None:
        fingering = analyze_fingering(f_barre, "major", "F", PychordTheory())
        assert fingering.barre == BarreInfo(from_string=6, to_string=1, fret=1)
        assert fingering.name == "Barre - 1st fret"
        assert fingering.notes == ("F", "C", "F", "A", "C", "F")
        assert fingering.intervals == ("1P", "5P", "1P", "3M", "5P", "1P")
        assert fingering.difficulty == 2.5

    def test_capo_is_carried(self, open_c: RawPosition, stub_theory) -> None:
        fingering = analyze_fingering(replace(open_c, capo=True), "major", "C", stub_theory)
        assert fingering.capo is True
        assert fingering.to_dict()["capo"] is True

    def test_to_dict_shape(self, f_barre: RawPosition, stub_theory) -> None:
        data = analyze_fingering(f_barre, "major", "F", stub_theory).to_dict()
        assert data["baseFret"] == 1
        assert data["mutedStrings"] == []
        assert data["barre"] == {"fromString": 6, "toString": 1, "fret": 1}
        assert "capo" not in data
