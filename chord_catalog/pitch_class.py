"""Pitch class operations for note and interval naming.

This module converts between MIDI numbers, note names and pitch classes,
and names the interval between two spelled notes.
"""

from __future__ import annotations

import re

# Note name to pitch class (0-11, where C=0)
NOTE_TO_PC: dict[str, int] = {
    "C": 0,
    "D": 2,
    "E": 4,
    "F": 5,
    "G": 7,
    "A": 9,
    "B": 11,
}

# Pitch class to flat note name
PC_TO_NOTE = ["C", "Db", "D", "Eb", "E", "F", "Gb", "G", "Ab", "A", "Bb", "B"]

LETTERS = "CDEFGAB"

# Semitones of the major/perfect interval for each interval number
NUMBER_TO_SEMITONES = [0, 2, 4, 5, 7, 9, 11]

PERFECT_NUMBERS = (1, 4, 5)

MIDI_RANGE = range(128)

_NOTE_RE = re.compile(r"^([A-Ga-g])(#+|b+)?(-?\d+)?$")


def parse_note(note: str) -> tuple[str, int, int | None]:
    """Split a note name into letter, accidental offset and octave.

    Parameters
    ----------
    note : str
        Note name with optional accidentals and octave (e.g., "C#4", "Bb").

    Returns
    -------
    tuple[str, int, int | None]
        Uppercase letter, accidental offset in semitones, octave or None.

    Raises
    ------
    ValueError
        If the note name is not recognized.

    Examples
    --------
    >>> parse_note("Bb3")
    ('B', -1, 3)
    >>> parse_note("F#")
    ('F', 1, None)
    """
    match = _NOTE_RE.match(note.strip())
    if not match:
        msg = f"Unknown note: {note}"
        raise ValueError(msg)
    letter, accidentals, octave = match.groups()
    offset = 0
    if accidentals:
        offset = len(accidentals) if accidentals[0] == "#" else -len(accidentals)
    return letter.upper(), offset, int(octave) if octave is not None else None


def note_to_pc(note: str) -> int:
    """Convert a note name to pitch class (0-11).

    Examples
    --------
    >>> note_to_pc("C")
    0
    >>> note_to_pc("F#")
    6
    >>> note_to_pc("Cb")
    11
    """
    letter, offset, _ = parse_note(note)
    return (NOTE_TO_PC[letter] + offset) % 12


def pitch_class(note: str) -> str:
    """Strip the octave from a note name.

    Examples
    --------
    >>> pitch_class("Eb4")
    'Eb'
    >>> pitch_class("g#")
    'G#'
    """
    letter, offset, _ = parse_note(note)
    accidental = "#" * offset if offset > 0 else "b" * -offset
    return f"{letter}{accidental}"


def midi_to_note(midi: int) -> str:
    """Convert a MIDI number to a flat-spelled note name with octave.

    Raises
    ------
    ValueError
        If the number is outside the MIDI range.

    Examples
    --------
    >>> midi_to_note(60)
    'C4'
    >>> midi_to_note(61)
    'Db4'
    >>> midi_to_note(40)
    'E2'
    """
    if midi not in MIDI_RANGE:
        msg = f"MIDI number out of range: {midi}"
        raise ValueError(msg)
    return f"{PC_TO_NOTE[midi % 12]}{midi // 12 - 1}"


def interval_between(root: str, note: str) -> str:
    """Name the ascending interval from ``root`` to ``note``.

    Intervals are spelled from the note letters, so enharmonic notes give
    different names. Labels are the interval number followed by its
    quality: ``P`` perfect, ``M`` major, ``m`` minor, ``A`` augmented and
    ``d`` diminished (repeated for doubly altered intervals).

    Parameters
    ----------
    root : str
        Root note name, octave ignored.
    note : str
        Target note name, octave ignored.

    Returns
    -------
    str
        Interval label (e.g., "3M", "5P", "7m").

    Raises
    ------
    ValueError
        If either note name is not recognized.

    Examples
    --------
    >>> interval_between("C", "E")
    '3M'
    >>> interval_between("A", "C")
    '3m'
    >>> interval_between("C#", "F")
    '4d'
    >>> interval_between("C", "Gb")
    '5d'
    """
    root_letter, _, _ = parse_note(root)
    note_letter, _, _ = parse_note(note)
    number = (LETTERS.index(note_letter) - LETTERS.index(root_letter)) % 7 + 1
    semitones = (note_to_pc(note) - note_to_pc(root)) % 12

    alteration = semitones - NUMBER_TO_SEMITONES[number - 1]
    if alteration > 6:
        alteration -= 12
    elif alteration < -6:
        alteration += 12

    if alteration > 0:
        quality = "A" * alteration
    elif number in PERFECT_NUMBERS:
        quality = "d" * -alteration if alteration else "P"
    elif alteration == 0:
        quality = "M"
    elif alteration == -1:
        quality = "m"
    else:
        quality = "d" * (-alteration - 1)
    return f"{number}{quality}"
