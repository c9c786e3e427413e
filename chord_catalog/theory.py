"""Music theory service used to enrich chords.

The enrichment core only talks to the narrow :class:`MusicTheory`
protocol, so tests can substitute a stub. :class:`PychordTheory` is the
default implementation, backed by pychord for chord parsing and by
:mod:`chord_catalog.pitch_class` for note and interval naming.

Examples
--------
>>> theory = PychordTheory()
>>> info = theory.resolve_symbol("Am7")
>>> info.tonic, info.notes
('A', ('A', 'C', 'E', 'G'))
>>> theory.note_from_midi(61)
'Db4'
"""

from __future__ import annotations

import logging
from typing import Protocol

from pychord import Chord as PyChord
from pychord import QualityManager

from chord_catalog import pitch_class
from chord_catalog.models import ChordInfo

logger = logging.getLogger(__name__)

# Qualities used by guitar fingering databases, as semitones from the root.
# Registered with pychord so resolution does not depend on its default table.
# pychord 1.4 changed set_quality to take interval strings; see pyproject.toml.
GUITAR_QUALITIES: dict[str, tuple[int, ...]] = {
    "dim": (0, 3, 6),
    "dim7": (0, 3, 6, 9),
    "sus2": (0, 2, 7),
    "sus4": (0, 5, 7),
    "sus2sus4": (0, 2, 5, 7),
    "7sus4": (0, 5, 7, 10),
    "alt": (0, 4, 6, 8, 10, 13, 15),
    "aug": (0, 4, 8),
    "5": (0, 7),
    "6": (0, 4, 7, 9),
    "69": (0, 4, 7, 9, 14),
    "7": (0, 4, 7, 10),
    "7b5": (0, 4, 6, 10),
    "7#5": (0, 4, 8, 10),
    "9": (0, 4, 7, 10, 14),
    "9b5": (0, 4, 6, 10, 14),
    "9#5": (0, 4, 8, 10, 14),
    "7b9": (0, 4, 7, 10, 13),
    "7#9": (0, 4, 7, 10, 15),
    "11": (0, 7, 10, 14, 17),
    "9#11": (0, 4, 7, 10, 14, 18),
    "13": (0, 4, 7, 10, 14, 21),
    "maj7": (0, 4, 7, 11),
    "maj7b5": (0, 4, 6, 11),
    "maj7#5": (0, 4, 8, 11),
    "maj7sus2": (0, 2, 7, 11),
    "maj9": (0, 4, 7, 11, 14),
    "maj11": (0, 4, 7, 11, 14, 17),
    "maj13": (0, 4, 7, 11, 14, 21),
    "m6": (0, 3, 7, 9),
    "m69": (0, 3, 7, 9, 14),
    "m7": (0, 3, 7, 10),
    "m7b5": (0, 3, 6, 10),
    "m9": (0, 3, 7, 10, 14),
    "m11": (0, 3, 7, 10, 14, 17),
    "mmaj7": (0, 3, 7, 11),
    "mmaj7b5": (0, 3, 6, 11),
    "mmaj9": (0, 3, 7, 11, 14),
    "mmaj11": (0, 3, 7, 11, 14, 17),
    "add9": (0, 4, 7, 14),
    "madd9": (0, 3, 7, 14),
    "add11": (0, 4, 7, 17),
}

# Descriptive quality names, keyed by pychord quality
QUALITY_NAMES: dict[str, str] = {
    "": "major",
    "m": "minor",
    "dim": "diminished",
    "dim7": "diminished seventh",
    "aug": "augmented",
    "sus2": "suspended second",
    "sus4": "suspended fourth",
    "sus2sus4": "suspended second fourth",
    "7sus4": "suspended fourth seventh",
    "alt": "altered",
    "5": "fifth",
    "6": "sixth",
    "69": "sixth added ninth",
    "7": "dominant seventh",
    "7b5": "dominant flat five",
    "7#5": "augmented seventh",
    "9": "dominant ninth",
    "9b5": "dominant ninth flat five",
    "9#5": "augmented ninth",
    "7b9": "dominant flat ninth",
    "7#9": "dominant sharp ninth",
    "11": "eleventh",
    "9#11": "dominant ninth sharp eleventh",
    "13": "dominant thirteenth",
    "maj7": "major seventh",
    "maj7b5": "major seventh flat five",
    "maj7#5": "augmented major seventh",
    "maj7sus2": "major seventh suspended second",
    "maj9": "major ninth",
    "maj11": "major eleventh",
    "maj13": "major thirteenth",
    "m6": "minor sixth",
    "m69": "minor sixth added ninth",
    "m7": "minor seventh",
    "m7b5": "half-diminished",
    "m9": "minor ninth",
    "m11": "minor eleventh",
    "mmaj7": "minor/major seventh",
    "mmaj7b5": "minor/major seventh flat five",
    "mmaj9": "minor/major ninth",
    "mmaj11": "minor/major eleventh",
    "add9": "added ninth",
    "madd9": "minor added ninth",
    "add11": "added eleventh",
}

# Alternative spellings of the same quality
QUALITY_SYNONYMS: tuple[tuple[str, ...], ...] = (
    ("", "M", "maj"),
    ("m", "min", "-"),
    ("sus4", "sus"),
    ("7#5", "7+5", "aug7"),
    ("7b5", "7-5"),
    ("9#5", "9+5", "aug9"),
    ("9b5", "9-5"),
    ("7b9", "7-9"),
    ("7#9", "7+9"),
    ("9#11", "9+11"),
    ("maj7", "M7", "Δ7"),
    ("maj7#5", "M7+5"),
    ("maj9", "M9"),
    ("maj13", "M13"),
    ("m7b5", "m7-5", "ø"),
    ("mmaj7", "mM7", "m(maj7)"),
    ("69", "6/9"),
    ("m69", "m6/9"),
    ("dim7", "°7"),
    ("dim", "°"),
)

# Mapping from pychord quality names to Harte shorthand
PYCHORD_TO_HARTE_QUALITY: dict[str, str] = {
    "": "maj",
    "m": "min",
    "m7": "min7",
    "7": "7",
    "maj7": "maj7",
    "dim": "dim",
    "dim7": "dim7",
    "aug": "aug",
    "7#5": "aug7",
    "m7b5": "hdim7",
    "sus4": "sus4",
    "sus2": "sus2",
    "7sus4": "7sus4",
    "add9": "maj(9)",
    "madd9": "min(9)",
    "9": "9",
    "m9": "min9",
    "maj9": "maj9",
    "11": "11",
    "m11": "min11",
    "maj11": "maj11",
    "13": "13",
    "maj13": "maj13",
    "6": "maj6",
    "m6": "min6",
    "mmaj7": "minmaj7",
    "5": "5",
}


class MusicTheory(Protocol):
    """Capabilities the enrichment core needs from a music theory library."""

    def resolve_symbol(self, symbol: str) -> ChordInfo | None:
        """Resolve a chord symbol, or return None if it is not understood."""
        ...

    def note_from_midi(self, midi: int) -> str | None:
        """Return the note name with octave for a MIDI number, or None."""
        ...

    def pitch_class_of(self, note: str) -> str:
        """Return the note name without octave, or "" if not a note."""
        ...

    def interval_between(self, root: str, note: str) -> str:
        """Return the interval label from root to note, or "" if unknown."""
        ...


def quality_aliases(quality: str) -> tuple[str, ...]:
    """Return the other spellings of a pychord quality.

    Examples
    --------
    >>> quality_aliases("maj7")
    ('M7', 'Δ7')
    >>> quality_aliases("9")
    ()
    """
    for group in QUALITY_SYNONYMS:
        if quality in group:
            return tuple(q for q in group if q != quality)
    return ()


def register_guitar_qualities() -> None:
    """Register :data:`GUITAR_QUALITIES` with pychord's quality manager."""
    manager = QualityManager()
    for name, components in GUITAR_QUALITIES.items():
        manager.set_quality(name, components)


class PychordTheory:
    """Music theory service backed by pychord."""

    def __init__(self) -> None:
        register_guitar_qualities()

    def resolve_symbol(self, symbol: str) -> ChordInfo | None:
        """Resolve a chord symbol to its root, tones and names.

        Parameters
        ----------
        symbol : str
            Chord symbol (e.g., "C#m7", "G/B").

        Returns
        -------
        ChordInfo | None
            Resolved chord, or None if pychord cannot parse the symbol.
        """
        try:
            chord = PyChord(symbol)
            notes = tuple(chord.components())
        except (KeyError, ValueError):
            logger.debug("pychord cannot parse %s", symbol)
            return None

        root = chord.root
        quality = str(chord.quality)
        bass = chord.on or None

        name = f"{root} {QUALITY_NAMES.get(quality, quality)}"
        if bass:
            name = f"{name} over {bass}"

        slash = f"/{bass}" if bass else ""
        aliases = [f"{root}{alias}{slash}" for alias in quality_aliases(quality)]
        if quality in PYCHORD_TO_HARTE_QUALITY:
            aliases.append(f"{root}:{PYCHORD_TO_HARTE_QUALITY[quality]}{slash}")

        intervals = tuple(i for i in (self.interval_between(root, n) for n in notes) if i)

        return ChordInfo(
            symbol=chord.chord,
            name=name,
            tonic=root,
            notes=notes,
            intervals=intervals,
            aliases=tuple(aliases),
            bass=bass,
        )

    def note_from_midi(self, midi: int) -> str | None:
        try:
            return pitch_class.midi_to_note(midi)
        except (TypeError, ValueError):
            return None

    def pitch_class_of(self, note: str) -> str:
        try:
            return pitch_class.pitch_class(note)
        except ValueError:
            return ""

    def interval_between(self, root: str, note: str) -> str:
        try:
            return pitch_class.interval_between(root, note)
        except ValueError:
            return ""
