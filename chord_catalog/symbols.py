"""Key normalization and chord symbol construction.

Raw chords-db keys spell accidentals as words ("Csharp", "Bflat") and
suffixes are short codes ("major", "m7b5", "mmaj7"). This module turns
both into symbols a chord parser understands.

Examples
--------
>>> normalize_key("Csharp")
'C#'
>>> build_symbol("C#", "m7b5")
'C#m7b5'
>>> build_symbol("C", "major/E")
'C/E'
"""

from __future__ import annotations

import re

_SHARP_RE = re.compile("sharp", re.IGNORECASE)
_FLAT_RE = re.compile("flat", re.IGNORECASE)

# Mapping from chords-db suffix codes to chord symbol fragments
SUFFIX_MAP: dict[str, str] = {
    "major": "",
    "minor": "m",
    "dim": "dim",
    "dim7": "dim7",
    "sus": "sus4",
    "sus2": "sus2",
    "sus4": "sus4",
    "sus2sus4": "sus2sus4",
    "7sus4": "7sus4",
    "alt": "alt",
    "aug": "aug",
    "5": "5",
    "6": "6",
    "69": "69",
    "7": "7",
    "7b5": "7b5",
    "aug7": "7#5",
    "9": "9",
    "9b5": "9b5",
    "aug9": "9#5",
    "7b9": "7b9",
    "7#9": "7#9",
    "11": "11",
    "9#11": "9#11",
    "13": "13",
    "maj7": "maj7",
    "maj7b5": "maj7b5",
    "maj7#5": "maj7#5",
    "maj7sus2": "maj7sus2",
    "maj9": "maj9",
    "maj11": "maj11",
    "maj13": "maj13",
    "m6": "m6",
    "m69": "m69",
    "m7": "m7",
    "m7b5": "m7b5",
    "m9": "m9",
    "m11": "m11",
    "mmaj7": "mmaj7",
    "mmaj7b5": "mmaj7b5",
    "mmaj9": "mmaj9",
    "mmaj11": "mmaj11",
    "add9": "add9",
    "madd9": "madd9",
    "add11": "add11",
}


def normalize_key(key: str) -> str:
    """Replace spelled-out accidentals in a raw key with symbols.

    Parameters
    ----------
    key : str
        Raw key from the database (e.g., "Csharp", "Bflat", "E").

    Returns
    -------
    str
        The key with "sharp" replaced by "#" and "flat" by "b".

    Examples
    --------
    >>> normalize_key("Fsharp")
    'F#'
    >>> normalize_key("E")
    'E'
    """
    return _FLAT_RE.sub("b", _SHARP_RE.sub("#", key))


def suffix_fragment(suffix: str) -> str:
    """Translate a suffix code to its symbol fragment.

    Codes missing from :data:`SUFFIX_MAP` pass through unchanged.
    """
    return SUFFIX_MAP.get(suffix, suffix)


def build_symbol(key: str, suffix: str) -> str:
    """Compose a chord symbol from a normalized key and a suffix code.

    Parameters
    ----------
    key : str
        Normalized key (e.g., "C#").
    suffix : str
        Suffix code, optionally with a slash bass (e.g., "m7", "major/E").

    Returns
    -------
    str
        Chord symbol (e.g., "C#m7", "C/E").

    Examples
    --------
    >>> build_symbol("A", "minor")
    'Am'
    >>> build_symbol("D", "m/C")
    'Dm/C'
    """
    if "/" in suffix:
        base_suffix, bass = suffix.split("/", 1)
        return f"{key}{suffix_fragment(base_suffix)}/{bass}"
    return f"{key}{suffix_fragment(suffix)}"


def _slug(text: str) -> str:
    text = text.lower().replace("#", "sharp")
    # A flat is a "b" after a note letter or before a degree number
    text = re.sub(r"^([a-g])b", r"\1flat", text)
    return re.sub(r"b(?=\d)", "flat", text)


def chord_id(key: str, suffix: str) -> str:
    """Build the catalog id of a chord.

    Examples
    --------
    >>> chord_id("C#", "m7b5")
    'csharp-m7flat5'
    >>> chord_id("Bb", "major/E")
    'bflat-major-over-e'
    >>> chord_id("C", "/Eb")
    'c-major-over-eflat'
    """
    base_suffix, _, bass = (suffix or "major").partition("/")
    result = f"{_slug(key)}-{_slug(base_suffix or 'major')}"
    if bass:
        result = f"{result}-over-{_slug(bass)}"
    return result
