"""Descriptive tags, genre tags and common progressions for chords.

All three are driven by ordered rule tables keyed on the raw suffix code.
Tags and genre tags collect every matching rule (deduplicated, first
insertion order kept). Progressions take the first matching rule only.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from typing import TYPE_CHECKING

from chord_catalog.difficulty import chord_difficulty
from chord_catalog.fingering import OPEN
from chord_catalog.quality import SuffixTest, contains, equals

if TYPE_CHECKING:
    from chord_catalog.models import GuitarFingering

BEGINNER_MAX_DIFFICULTY = 2
ADVANCED_MIN_DIFFICULTY = 4

SUFFIX_TAG_RULES: tuple[tuple[SuffixTest, str], ...] = (
    (contains("maj"), "major-type"),
    (contains("m7"), "minor-7th"),
    (contains("9"), "extended"),
    (contains("sus"), "suspended"),
    (contains("dim"), "diminished"),
    (contains("aug"), "augmented"),
    (contains("add"), "added-tone"),
    (equals("5"), "power-chord"),
)

GENRE_RULES: tuple[tuple[SuffixTest, tuple[str, ...]], ...] = (
    (lambda suffix: "7" in suffix or "9" in suffix, ("blues", "jazz", "funk")),
    (contains("sus"), ("pop", "rock", "folk")),
    (lambda suffix: "maj7" in suffix or "m9" in suffix, ("jazz", "bossa-nova", "r&b")),
    (equals("5"), ("rock", "metal", "punk")),
    (lambda suffix: suffix in ("major", "minor"), ("all-genres", "essential")),
)

PROGRESSION_RULES: tuple[tuple[SuffixTest, tuple[str, ...]], ...] = (
    (equals("major"), ("I-IV-V", "I-V-vi-IV", "ii-V-I")),
    (equals("minor"), ("i-iv-v", "i-VI-III-VII", "ii°-V-i")),
    (contains("7"), ("I7-IV7-V7", "ii7-V7-I7")),
    # Shadowed by the "7" rule above
    (contains("m7"), ("i7-iv7-v7", "ii7b5-V7-i7")),
)


def _unique(items: Iterable[str]) -> tuple[str, ...]:
    return tuple(dict.fromkeys(items))


def generate_tags(suffix: str, fingerings: Sequence[GuitarFingering]) -> tuple[str, ...]:
    """Describe a chord by its suffix, its fingerings and its difficulty.

    Parameters
    ----------
    suffix : str
        Raw suffix code.
    fingerings : Sequence[GuitarFingering]
        The analyzed fingerings of the chord.

    Returns
    -------
    tuple[str, ...]
        Unique tags in order of first insertion.

    Examples
    --------
    >>> generate_tags("maj7", [])
    ('major-type',)
    """
    tags = [tag for test, tag in SUFFIX_TAG_RULES if test(suffix)]

    if any(f.barre is not None for f in fingerings):
        tags.append("barre")
    if any(OPEN in f.frets for f in fingerings):
        tags.append("open-chord")
    if any(f.capo for f in fingerings):
        tags.append("capo")

    difficulty = chord_difficulty(fingerings)
    if difficulty <= BEGINNER_MAX_DIFFICULTY:
        tags.append("beginner")
    if difficulty >= ADVANCED_MIN_DIFFICULTY:
        tags.append("advanced")

    return _unique(tags)


def generate_genre_tags(suffix: str) -> tuple[str, ...]:
    """Genres a chord type is associated with.

    Examples
    --------
    >>> generate_genre_tags("maj7")
    ('blues', 'jazz', 'funk', 'bossa-nova', 'r&b')
    >>> generate_genre_tags("5")
    ('rock', 'metal', 'punk')
    """
    return _unique(genre for test, genres in GENRE_RULES if test(suffix) for genre in genres)


def find_common_progressions(suffix: str) -> tuple[str, ...]:
    """Common progressions for a chord type, empty when none is known.

    Examples
    --------
    >>> find_common_progressions("major")
    ('I-IV-V', 'I-V-vi-IV', 'ii-V-I')
    >>> find_common_progressions("sus2")
    ()
    """
    for test, progressions in PROGRESSION_RULES:
        if test(suffix):
            return progressions
    return ()
