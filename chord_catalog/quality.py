"""Chord quality classification from suffix codes.

Rules are evaluated top to bottom and the first match wins, so the
order of :data:`QUALITY_RULES` is significant: "maj7" must be tested
before "m7", and "m7" before the bare "m". Every rule is a plain
substring test, so "dim7" is caught by the "m7" rule and "major" by the
bare "m" rule.
"""

from __future__ import annotations

from collections.abc import Callable

from chord_catalog.models import ChordQuality

SuffixTest = Callable[[str], bool]


def contains(fragment: str) -> SuffixTest:
    """Match suffix codes containing ``fragment``."""
    return lambda suffix: fragment in suffix


def equals(code: str) -> SuffixTest:
    """Match exactly the suffix code ``code``."""
    return lambda suffix: suffix == code


QUALITY_RULES: tuple[tuple[SuffixTest, ChordQuality], ...] = (
    (contains("maj7"), "major-seventh"),
    (contains("m7"), "minor-seventh"),
    (contains("dim7"), "diminished-seventh"),
    (contains("aug7"), "augmented-seventh"),
    (contains("m9"), "minor-ninth"),
    (contains("maj9"), "major-ninth"),
    (lambda suffix: "9" in suffix and "maj" not in suffix, "dominant-ninth"),
    (contains("dim"), "diminished"),
    (contains("aug"), "augmented"),
    (contains("sus"), "suspended"),
    (contains("m"), "minor"),
    (equals("5"), "power"),
    (equals("6"), "sixth"),
    (equals("69"), "six-nine"),
)


def classify_quality(suffix: str) -> ChordQuality:
    """Return the quality tag of a suffix code.

    Parameters
    ----------
    suffix : str
        Raw suffix code (e.g., "maj7", "m7b5", "sus2").

    Returns
    -------
    ChordQuality
        The first matching quality, or "major" when no rule matches.

    Examples
    --------
    >>> classify_quality("maj7")
    'major-seventh'
    >>> classify_quality("m7b5")
    'minor-seventh'
    >>> classify_quality("")
    'major'
    """
    for test, quality in QUALITY_RULES:
        if test(suffix):
            return quality
    return "major"
