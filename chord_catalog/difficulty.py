"""Heuristic playing difficulty of fingerings and chords.

Scores run from 1 (easiest) to 5 in half steps.
"""

from __future__ import annotations

import math
from collections.abc import Sequence
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from chord_catalog.models import BarreInfo, GuitarFingering, RawPosition

MIN_DIFFICULTY = 1.0
MAX_DIFFICULTY = 5.0
NEUTRAL_DIFFICULTY = 3

BARRE_PENALTY = 1.5
HIGH_BARRE_FRET = 5
HIGH_BARRE_PENALTY = 0.5
FAR_BASE_FRET = 7
FAR_BASE_PENALTY = 1.0
MID_BASE_FRET = 3
MID_BASE_PENALTY = 0.5
WIDE_STRETCH = 4
WIDE_STRETCH_PENALTY = 1.0
STRETCH = 2
STRETCH_PENALTY = 0.5
CAPO_BONUS = 0.5


def _round_half_up(value: float, steps_per_unit: int) -> float:
    return math.floor(value * steps_per_unit + 0.5) / steps_per_unit


def fingering_difficulty(position: RawPosition, barre: BarreInfo | None = None) -> float:
    """Score how hard a single fingering is to play.

    Parameters
    ----------
    position : RawPosition
        The fingering diagram.
    barre : BarreInfo | None
        The barre detected in the diagram, if any.

    Returns
    -------
    float
        Difficulty between 1.0 and 5.0, rounded to the nearest 0.5.
    """
    difficulty = MIN_DIFFICULTY

    if barre is not None:
        difficulty += BARRE_PENALTY
        if barre.fret > HIGH_BARRE_FRET:
            difficulty += HIGH_BARRE_PENALTY

    if position.base_fret > FAR_BASE_FRET:
        difficulty += FAR_BASE_PENALTY
    elif position.base_fret > MID_BASE_FRET:
        difficulty += MID_BASE_PENALTY

    active = [fret for fret in position.frets if fret > 0]
    if active:
        stretch = max(active) - min(active)
        if stretch > WIDE_STRETCH:
            difficulty += WIDE_STRETCH_PENALTY
        elif stretch > STRETCH:
            difficulty += STRETCH_PENALTY

    if position.capo:
        difficulty = max(MIN_DIFFICULTY, difficulty - CAPO_BONUS)

    return min(MAX_DIFFICULTY, max(MIN_DIFFICULTY, _round_half_up(difficulty, 2)))


def chord_difficulty(fingerings: Sequence[GuitarFingering]) -> float:
    """Average fingering difficulty, rounded to one decimal.

    A chord without fingerings gets the neutral score of 3.

    Examples
    --------
    >>> chord_difficulty([])
    3
    """
    if not fingerings:
        return NEUTRAL_DIFFICULTY
    average = sum(f.difficulty for f in fingerings) / len(fingerings)
    return _round_half_up(average, 10)
