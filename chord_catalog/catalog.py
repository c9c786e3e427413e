"""Reading the chord database and writing the enriched catalog."""

from __future__ import annotations

import json
from datetime import datetime, timezone
from pathlib import Path
from typing import Any

from chord_catalog.assembler import Catalog
from chord_catalog.models import STRING_COUNT, RawChord

CATALOG_VERSION = "1.0.0"
DATA_SOURCE = "chord-db.json"
PRETTY_FILENAME = "chords.json"
MINIFIED_FILENAME = "chords.min.json"

Database = dict[str, list[RawChord]]


class CatalogError(ValueError):
    """Raised when the chord database does not have the expected shape."""


def parse_database(data: Any) -> Database:
    """Convert a decoded chords-db document into raw chords.

    Both the bare key-to-chords mapping and the full chords-db document,
    which nests that mapping under ``chords``, are accepted.

    Raises
    ------
    CatalogError
        If the document is not a mapping of keys to chord lists, or a
        chord entry is malformed.
    """
    if isinstance(data, dict) and isinstance(data.get("chords"), dict):
        data = data["chords"]
    if not isinstance(data, dict):
        msg = f"Expected a mapping of keys to chords, got {type(data).__name__}"
        raise CatalogError(msg)

    database: Database = {}
    for key, entries in data.items():
        if not isinstance(entries, list):
            msg = f"Expected a list of chords for key {key}"
            raise CatalogError(msg)
        chords = []
        for entry in entries:
            try:
                chord = RawChord.from_dict(entry, key=key)
            except (AttributeError, KeyError, TypeError, ValueError) as e:
                msg = f"Malformed chord entry under {key}: {e}"
                raise CatalogError(msg) from e
            for position in chord.positions:
                if len(position.frets) != STRING_COUNT or len(position.fingers) != STRING_COUNT:
                    msg = f"Expected {STRING_COUNT} frets and fingers for {key} {chord.suffix}"
                    raise CatalogError(msg)
            chords.append(chord)
        database[key] = chords
    return database


def load_database(path: Path) -> Database:
    """Load and validate the chord database JSON file."""
    with open(path, encoding="utf-8") as f:
        return parse_database(json.load(f))


def catalog_to_dict(catalog: Catalog) -> dict[str, dict[str, Any]]:
    """Serialize every chord of the catalog."""
    return {
        key: {suffix: chord.to_dict() for suffix, chord in suffixes.items()} for key, suffixes in catalog.items()
    }


def build_output(
    catalog: Catalog,
    *,
    version: str = CATALOG_VERSION,
    data_source: str = DATA_SOURCE,
    generated_at: datetime | None = None,
) -> dict[str, Any]:
    """Wrap the catalog with its metadata block."""
    generated_at = generated_at or datetime.now(timezone.utc)
    keys = list(dict.fromkeys(catalog))
    return {
        "meta": {
            "generatedAt": generated_at.isoformat(timespec="milliseconds").replace("+00:00", "Z"),
            "version": version,
            "totalChords": len(catalog),
            "keys": keys,
            "dataSource": data_source,
        },
        "chords": catalog_to_dict(catalog),
    }


def dumps(output: dict[str, Any], *, pretty: bool = True) -> str:
    """Encode the output document as JSON text."""
    if pretty:
        return json.dumps(output, indent=2, ensure_ascii=False)
    return json.dumps(output, separators=(",", ":"), ensure_ascii=False)


def write_catalog(output: dict[str, Any], out_dir: Path) -> tuple[Path, Path]:
    """Write the pretty and minified catalog files.

    Parameters
    ----------
    output : dict[str, Any]
        Document returned by :func:`build_output`.
    out_dir : Path
        Output directory, created if missing.

    Returns
    -------
    tuple[Path, Path]
        Paths of the pretty and minified files.
    """
    out_dir.mkdir(parents=True, exist_ok=True)
    pretty_path = out_dir / PRETTY_FILENAME
    minified_path = out_dir / MINIFIED_FILENAME
    pretty_path.write_text(dumps(output), encoding="utf-8")
    minified_path.write_text(dumps(output, pretty=False), encoding="utf-8")
    return pretty_path, minified_path
