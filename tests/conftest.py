"""Shared fixtures for chord catalog tests."""

from __future__ import annotations

import pytest

from chord_catalog.models import ChordInfo, RawPosition
from chord_catalog.pitch_class import PC_TO_NOTE


class StubTheory:
    """Music theory stub with canned chord resolutions.

    MIDI numbers map to flat-spelled notes; intervals are reported as
    ``root->note`` so tests can see exactly which pairs were asked for.
    """

    def __init__(self, chords: dict[str, ChordInfo] | None = None) -> None:
        self.chords = chords or {}
        self.resolved: list[str] = []

    def resolve_symbol(self, symbol: str) -> ChordInfo | None:
        self.resolved.append(symbol)
        return self.chords.get(symbol)

    def note_from_midi(self, midi: int) -> str | None:
        if midi < 0:
            return None
        return f"{PC_TO_NOTE[midi % 12]}{midi // 12 - 1}"

    def pitch_class_of(self, note: str) -> str:
        return note.rstrip("0123456789")

    def interval_between(self, root: str, note: str) -> str:
        if note == "X":
            return ""
        return f"{root}->{note}"


@pytest.fixture
def stub_theory() -> StubTheory:
    """Stub theory resolving C, Cm7 and C#."""
    return StubTheory(
        {
            "C": ChordInfo(symbol="C", name="C major", tonic="C", notes=("C", "E", "G")),
            "Cm7": ChordInfo(symbol="Cm7", name="C minor seventh", tonic="C", notes=("C", "Eb", "G", "Bb")),
            "C#": ChordInfo(symbol="C#", name="C# major", tonic="C#", notes=("C#", "F", "G#")),
        }
    )


@pytest.fixture
def open_c() -> RawPosition:
    """Open C major shape."""
    return RawPosition(
        frets=(-1, 3, 2, 0, 1, 0),
        fingers=(0, 3, 2, 0, 1, 0),
        base_fret=1,
        midi=(48, 52, 55, 60, 64),
    )


@pytest.fixture
def f_barre() -> RawPosition:
    """F major barre shape at the first fret."""
    return RawPosition(
        frets=(1, 3, 3, 2, 1, 1),
        fingers=(1, 3, 4, 2, 1, 1),
        base_fret=1,
        midi=(41, 48, 53, 57, 60, 65),
        barres=(1,),
    )
