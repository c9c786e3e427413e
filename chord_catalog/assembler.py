"""Assemble enriched chord records from the raw chord database.

Each raw chord runs through key normalization, symbol construction,
identity resolution, quality classification, fingering analysis,
difficulty scoring and metadata generation. A chord that fails any step
is logged and skipped; the rest of the catalog is still built.

Examples
--------
>>> from chord_catalog.theory import PychordTheory
>>> raw = RawChord(key="Csharp", suffix="minor", positions=())
>>> chords = parse_all_chords({"Csharp": [raw]}, PychordTheory())
>>> chords["C#"]["minor"].symbol
'C#m'
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping, Sequence
from typing import TYPE_CHECKING

from tqdm import tqdm

from chord_catalog.difficulty import chord_difficulty
from chord_catalog.fingering import analyze_fingering
from chord_catalog.metadata import find_common_progressions, generate_genre_tags, generate_tags
from chord_catalog.models import ChordParseResult, GuitarChord, RawChord
from chord_catalog.quality import classify_quality
from chord_catalog.symbols import build_symbol, chord_id, normalize_key

if TYPE_CHECKING:
    from chord_catalog.theory import MusicTheory

logger = logging.getLogger(__name__)

DEFAULT_SUFFIX = "major"

Catalog = dict[str, dict[str, GuitarChord]]


class ChordResolutionError(ValueError):
    """Raised when a chord symbol cannot be resolved."""

    def __init__(self, symbol: str) -> None:
        super().__init__(f"Cannot resolve chord symbol: {symbol}")
        self.symbol = symbol


def parse_chord(key: str, raw_chord: RawChord, theory: MusicTheory) -> GuitarChord:
    """Build the enriched record of one chord.

    Parameters
    ----------
    key : str
        Normalized key (e.g., "C#").
    raw_chord : RawChord
        The raw chord entry.
    theory : MusicTheory
        Service used to resolve the chord and name its notes.

    Returns
    -------
    GuitarChord
        The assembled chord.

    Raises
    ------
    ChordResolutionError
        If the chord symbol cannot be resolved.
    """
    suffix = raw_chord.suffix
    symbol = build_symbol(key, suffix)
    info = theory.resolve_symbol(symbol)
    if info is None:
        raise ChordResolutionError(symbol)

    tonic = info.tonic or key
    fingerings = tuple(analyze_fingering(pos, suffix, tonic, theory) for pos in raw_chord.positions)

    return GuitarChord(
        id=chord_id(key, suffix),
        symbol=info.symbol,
        name=info.name,
        tonic=tonic,
        quality=classify_quality(suffix),
        difficulty=chord_difficulty(fingerings),
        notes=info.notes,
        intervals=info.intervals,
        aliases=info.aliases,
        fingerings=fingerings,
        common_progressions=find_common_progressions(suffix),
        tags=generate_tags(suffix, fingerings),
        genre_tags=generate_genre_tags(suffix),
        bass=info.bass,
    )


def try_parse_chord(key: str, raw_chord: RawChord, theory: MusicTheory) -> ChordParseResult:
    """Build one chord, capturing any failure in the result."""
    try:
        chord = parse_chord(key, raw_chord, theory)
    except Exception as e:  # noqa: BLE001
        return ChordParseResult(key=key, suffix=raw_chord.suffix, error=e)
    return ChordParseResult(key=key, suffix=raw_chord.suffix, chord=chord)


def iter_parse_results(
    database: Mapping[str, Sequence[RawChord]],
    theory: MusicTheory,
    *,
    progress: bool = False,
) -> Iterable[ChordParseResult]:
    """Yield a parse result for every raw chord, key by key."""
    for raw_key, raw_chords in tqdm(database.items(), desc="Keys", unit="key", disable=not progress):
        key = normalize_key(raw_key)
        logger.debug("Parsing %d chords for %s", len(raw_chords), key)
        for raw_chord in raw_chords:
            yield try_parse_chord(key, raw_chord, theory)


def parse_all_chords(
    database: Mapping[str, Sequence[RawChord]],
    theory: MusicTheory,
    *,
    progress: bool = False,
) -> Catalog:
    """Build the enriched catalog, keyed by normalized key then suffix.

    Every normalized key of the input is present in the output, even when
    all of its chords failed.

    Parameters
    ----------
    database : Mapping[str, Sequence[RawChord]]
        Raw chords grouped by raw key.
    theory : MusicTheory
        Music theory service.
    progress : bool
        Show a progress bar over keys.

    Returns
    -------
    Catalog
        Mapping from key to suffix to chord.
    """
    catalog: Catalog = {normalize_key(raw_key): {} for raw_key in database}

    for result in iter_parse_results(database, theory, progress=progress):
        if result.chord is None:
            logger.warning("Failed to parse %s %s: %s", result.key, result.suffix, result.error)
            continue
        catalog[result.key][result.suffix or DEFAULT_SUFFIX] = result.chord

    return catalog


def count_chords(catalog: Catalog) -> int:
    """Number of chords across all keys."""
    return sum(len(suffixes) for suffixes in catalog.values())
