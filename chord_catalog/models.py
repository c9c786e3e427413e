"""Data models for the guitar chord catalog.

Raw models mirror the chords-db input document. Derived models hold the
enriched catalog and serialize to the camelCase JSON shape consumed by
downstream chart and search tools.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Literal

ChordQuality = Literal[
    "major",
    "minor",
    "diminished",
    "augmented",
    "suspended",
    "major-seventh",
    "minor-seventh",
    "diminished-seventh",
    "augmented-seventh",
    "major-ninth",
    "minor-ninth",
    "dominant-ninth",
    "power",
    "sixth",
    "six-nine",
]

STRING_COUNT = 6


@dataclass(frozen=True)
class RawPosition:
    """One fingering diagram as stored in the source database.

    Parameters
    ----------
    frets : tuple[int, ...]
        Fret per string, low E first. ``-1`` is muted, ``0`` is open.
    fingers : tuple[int, ...]
        Finger per string, parallel to ``frets``.
    base_fret : int
        Lowest fret shown in the diagram.
    midi : tuple[int, ...]
        Sounding MIDI note numbers (muted strings excluded).
    barres : tuple[int, ...]
        Fret numbers spanned by a barre.
    capo : bool | None
        Whether the diagram is played with a capo, if known.
    """

    frets: tuple[int, ...]
    fingers: tuple[int, ...]
    base_fret: int
    midi: tuple[int, ...] = ()
    barres: tuple[int, ...] = ()
    capo: bool | None = None

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> RawPosition:
        """Build a position from its chords-db JSON object."""
        barres = data.get("barres") or ()
        if isinstance(barres, int):
            barres = (barres,)
        return cls(
            frets=tuple(int(fret) for fret in data["frets"]),
            fingers=tuple(int(finger) for finger in data["fingers"]),
            base_fret=int(data.get("baseFret", 1)),
            midi=tuple(int(note) for note in data.get("midi") or ()),
            barres=tuple(int(fret) for fret in barres),
            capo=data.get("capo"),
        )


@dataclass(frozen=True)
class RawChord:
    """A chord entry of the source database: one suffix under one key."""

    key: str
    suffix: str
    positions: tuple[RawPosition, ...] = ()

    @classmethod
    def from_dict(cls, data: dict[str, Any], key: str = "") -> RawChord:
        """Build a chord from its chords-db JSON object.

        ``key`` is used when the object does not carry its own key.
        """
        return cls(
            key=data.get("key") or key,
            suffix=data["suffix"],
            positions=tuple(RawPosition.from_dict(p) for p in data["positions"]),
        )


@dataclass(frozen=True)
class BarreInfo:
    """A single finger across several strings.

    Strings are numbered 6 (low E) to 1 (high E), so ``from_string`` is
    always greater than or equal to ``to_string``.
    """

    from_string: int
    to_string: int
    fret: int

    def to_dict(self) -> dict[str, int]:
        return {"fromString": self.from_string, "toString": self.to_string, "fret": self.fret}


@dataclass(frozen=True)
class ChordInfo:
    """Chord identity as resolved by a music theory service.

    Parameters
    ----------
    symbol : str
        Canonical chord symbol (e.g., "Cmaj7", "G/B").
    name : str
        Descriptive name (e.g., "C major seventh").
    tonic : str
        Root note of the chord.
    notes : tuple[str, ...]
        Chord tones, bass first for slash chords.
    intervals : tuple[str, ...]
        Interval of each chord tone from the tonic.
    aliases : tuple[str, ...]
        Alternative spellings of the same chord.
    bass : str | None
        Bass note of a slash chord.
    """

    symbol: str
    name: str
    tonic: str
    notes: tuple[str, ...] = ()
    intervals: tuple[str, ...] = ()
    aliases: tuple[str, ...] = ()
    bass: str | None = None


@dataclass(frozen=True)
class GuitarFingering:
    """An enriched fingering, owned by its parent :class:`GuitarChord`."""

    id: str
    name: str
    frets: tuple[int, ...]
    fingers: tuple[int, ...]
    base_fret: int
    muted_strings: tuple[int, ...]
    midi: tuple[int, ...]
    notes: tuple[str, ...]
    intervals: tuple[str, ...]
    difficulty: float
    barre: BarreInfo | None = None
    capo: bool | None = None

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {
            "id": self.id,
            "name": self.name,
            "frets": list(self.frets),
            "fingers": list(self.fingers),
            "baseFret": self.base_fret,
            "mutedStrings": list(self.muted_strings),
        }
        if self.barre is not None:
            data["barre"] = self.barre.to_dict()
        data["intervals"] = list(self.intervals)
        data["difficulty"] = self.difficulty
        if self.capo is not None:
            data["capo"] = self.capo
        data["midi"] = list(self.midi)
        data["notes"] = list(self.notes)
        return data


@dataclass(frozen=True)
class GuitarChord:
    """Root aggregate of the catalog: one key and suffix with its fingerings."""

    id: str
    symbol: str
    name: str
    tonic: str
    quality: ChordQuality
    difficulty: float
    notes: tuple[str, ...] = ()
    intervals: tuple[str, ...] = ()
    aliases: tuple[str, ...] = ()
    fingerings: tuple[GuitarFingering, ...] = ()
    common_progressions: tuple[str, ...] = ()
    tags: tuple[str, ...] = ()
    genre_tags: tuple[str, ...] = ()
    bass: str | None = None

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {
            "id": self.id,
            "symbol": self.symbol,
            "name": self.name,
            "tonic": self.tonic,
        }
        if self.bass is not None:
            data["bass"] = self.bass
        data.update(
            {
                "aliases": list(self.aliases),
                "intervals": list(self.intervals),
                "notes": list(self.notes),
                "quality": self.quality,
                "fingerings": [f.to_dict() for f in self.fingerings],
                "difficulty": self.difficulty,
                "commonProgressions": list(self.common_progressions),
                "tags": list(self.tags),
                "genreTags": list(self.genre_tags),
            }
        )
        return data


@dataclass(frozen=True)
class ChordParseResult:
    """Outcome of enriching one raw chord.

    Exactly one of ``chord`` and ``error`` is set.
    """

    key: str
    suffix: str
    chord: GuitarChord | None = None
    error: Exception | None = field(default=None, compare=False)

    @property
    def ok(self) -> bool:
        return self.chord is not None
