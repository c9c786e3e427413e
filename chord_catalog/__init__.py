"""Guitar chord catalog builder.

This library enriches a raw database of guitar chord fingering diagrams
(chords-db format) into a catalog with chord symbols, notes, intervals,
barre geometry, difficulty scores and descriptive tags.

Examples
--------
>>> from chord_catalog import PychordTheory, RawChord, RawPosition, parse_all_chords

>>> position = RawPosition(
...     frets=(-1, 3, 2, 0, 1, 0),
...     fingers=(0, 3, 2, 0, 1, 0),
...     base_fret=1,
...     midi=(48, 52, 55, 60, 64),
... )
>>> chords = parse_all_chords({"C": [RawChord("C", "major", (position,))]}, PychordTheory())
>>> chord = chords["C"]["major"]
>>> chord.fingerings[0].name
'Open Position'
>>> chord.fingerings[0].intervals
('1P', '3M', '5P', '1P', '3M')
"""

from chord_catalog.assembler import ChordResolutionError, parse_all_chords, parse_chord, try_parse_chord
from chord_catalog.catalog import CatalogError, build_output, load_database, parse_database, write_catalog
from chord_catalog.models import (
    BarreInfo,
    ChordInfo,
    ChordParseResult,
    ChordQuality,
    GuitarChord,
    GuitarFingering,
    RawChord,
    RawPosition,
)
from chord_catalog.symbols import build_symbol, normalize_key
from chord_catalog.theory import MusicTheory, PychordTheory

__all__ = [
    "BarreInfo",
    "CatalogError",
    "ChordInfo",
    "ChordParseResult",
    "ChordQuality",
    "ChordResolutionError",
    "GuitarChord",
    "GuitarFingering",
    "MusicTheory",
    "PychordTheory",
    "RawChord",
    "RawPosition",
    "build_output",
    "build_symbol",
    "load_database",
    "normalize_key",
    "parse_all_chords",
    "parse_chord",
    "parse_database",
    "try_parse_chord",
    "write_catalog",
]
