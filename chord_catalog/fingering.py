"""Fingering analysis for guitar chord diagrams.

This module turns a raw fingering diagram into an enriched fingering:
muted strings, barre geometry, sounding notes and intervals, a
human-readable name and a difficulty score.

Strings are numbered the guitarist's way: 6 is the low E string (index 0
of ``frets``) and 1 is the high E string (index 5).
"""

from __future__ import annotations

import re
from collections.abc import Sequence
from typing import TYPE_CHECKING

from chord_catalog.difficulty import fingering_difficulty
from chord_catalog.models import STRING_COUNT, BarreInfo, GuitarFingering, RawPosition

if TYPE_CHECKING:
    from chord_catalog.theory import MusicTheory

MUTED = -1
OPEN = 0

_OCTAVE_RE = re.compile(r"-?\d+")

ORDINAL_SUFFIXES = {1: "st", 2: "nd", 3: "rd"}


def string_number(index: int) -> int:
    """Convert a ``frets`` index to a string number (6 = low E)."""
    return STRING_COUNT - index


def muted_strings(frets: Sequence[int]) -> tuple[int, ...]:
    """Return the string numbers of muted strings.

    Examples
    --------
    >>> muted_strings([-1, 0, 2, 2, 1, 0])
    (6,)
    >>> muted_strings([-1, -1, 0, 2, 3, 2])
    (6, 5)
    """
    return tuple(string_number(i) for i, fret in enumerate(frets) if fret == MUTED)


def detect_barre(position: RawPosition) -> BarreInfo | None:
    """Find the barre of a diagram.

    Only the first listed barre fret is modeled. The barre spans every
    string fretted at that fret.

    Examples
    --------
    >>> pos = RawPosition(frets=(1, 3, 3, 2, 1, 1), fingers=(1, 3, 4, 2, 1, 1), base_fret=1, barres=(1,))
    >>> detect_barre(pos)
    BarreInfo(from_string=6, to_string=1, fret=1)
    """
    if not position.barres:
        return None

    fret = position.barres[0]
    strings = [string_number(i) for i, f in enumerate(position.frets) if f == fret]
    if not strings:
        return None

    return BarreInfo(from_string=max(strings), to_string=min(strings), fret=fret)


def ordinal(n: int) -> str:
    """Format a number as an English ordinal.

    Examples
    --------
    >>> [ordinal(n) for n in (1, 2, 3, 4, 11, 12, 13, 21, 22, 23)]
    ['1st', '2nd', '3rd', '4th', '11th', '12th', '13th', '21st', '22nd', '23rd']
    """
    if 11 <= n % 100 <= 13:
        return f"{n}th"
    return f"{n}{ORDINAL_SUFFIXES.get(n % 10, 'th')}"


def fingering_name(position: RawPosition, barre: BarreInfo | None) -> str:
    """Label a fingering by where it sits on the neck.

    Examples
    --------
    >>> fingering_name(RawPosition(frets=(-1, 0, 2, 2, 1, 0), fingers=(0,) * 6, base_fret=1), None)
    'Open Position'
    >>> fingering_name(RawPosition(frets=(-1, 3, 5, 5, 5, 3), fingers=(0,) * 6, base_fret=3), None)
    '3rd fret'
    """
    has_open_strings = OPEN in position.frets

    if position.base_fret == 1 and has_open_strings:
        return "Open Position"

    if barre is not None:
        if has_open_strings:
            return f"Open - {ordinal(barre.fret)} fret"
        return f"Barre - {ordinal(barre.fret)} fret"

    if has_open_strings:
        return f"Open - {ordinal(position.base_fret)} fret"

    return f"{ordinal(position.base_fret)} fret"


def fingering_id(root: str, suffix: str, base_fret: int) -> str:
    """Build the id of a fingering.

    Two fingerings of one chord sharing a base fret share an id.
    """
    return f"{root}-{suffix}-{base_fret}"


def resolve_notes(midi: Sequence[int], theory: MusicTheory) -> tuple[str, ...]:
    """Name the sounding notes, without octave, dropping unknown numbers."""
    notes = []
    for number in midi:
        note = theory.note_from_midi(number)
        if note:
            notes.append(_OCTAVE_RE.sub("", note))
    return tuple(notes)


def resolve_intervals(notes: Sequence[str], root: str, theory: MusicTheory) -> tuple[str, ...]:
    """Name the interval from the chord root to each note.

    Unresolved intervals are dropped, so the result can be shorter than
    ``notes``.
    """
    root_pc = theory.pitch_class_of(root)
    intervals = (theory.interval_between(root_pc, note) for note in notes)
    return tuple(i for i in intervals if i)


def analyze_fingering(
    position: RawPosition,
    suffix: str,
    root: str,
    theory: MusicTheory,
) -> GuitarFingering:
    """Enrich one fingering diagram.

    Parameters
    ----------
    position : RawPosition
        The raw diagram.
    suffix : str
        Suffix code of the chord the diagram belongs to.
    root : str
        Root note of the chord.
    theory : MusicTheory
        Service used to name notes and intervals.

    Returns
    -------
    GuitarFingering
        The enriched fingering.
    """
    barre = detect_barre(position)
    notes = resolve_notes(position.midi, theory)

    return GuitarFingering(
        id=fingering_id(root, suffix, position.base_fret),
        name=fingering_name(position, barre),
        frets=position.frets,
        fingers=position.fingers,
        base_fret=position.base_fret,
        muted_strings=muted_strings(position.frets),
        midi=position.midi,
        notes=notes,
        intervals=resolve_intervals(notes, root, theory),
        difficulty=fingering_difficulty(position, barre),
        barre=barre,
        capo=position.capo,
    )
