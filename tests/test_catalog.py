"""Tests for database loading, output building and the command line."""

import json
from datetime import datetime, timezone
from pathlib import Path

import pytest

from chord_catalog.assembler import parse_all_chords
from chord_catalog.catalog import (
    MINIFIED_FILENAME,
    PRETTY_FILENAME,
    CatalogError,
    build_output,
    load_database,
    parse_database,
    write_catalog,
)
from chord_catalog.cli import main
from chord_catalog.theory import PychordTheory

C_MAJOR = {
    "key": "C",
    "suffix": "major",
    "positions": [
        {
            "frets": [-1, 3, 2, 0, 1, 0],
            "fingers": [0, 3, 2, 0, 1, 0],
            "baseFret": 1,
            "barres": [],
            "midi": [48, 52, 55, 60, 64],
        },
        {
            "frets": [1, 1, 3, 3, 3, 1],
            "fingers": [1, 1, 2, 3, 4, 1],
            "baseFret": 3,
            "barres": [1],
            "capo": True,
            "midi": [55, 60, 67, 72, 76, 79],
        },
    ],
}

CSHARP_MINOR = {"key": "C#", "suffix": "minor", "positions": []}


@pytest.fixture
def database_file(tmp_path: Path) -> Path:
    """A small chords-db document on disk."""
    path = tmp_path / "chord-db.json"
    document = {"main": {"strings": 6}, "chords": {"C": [C_MAJOR], "Csharp": [CSHARP_MINOR]}}
    path.write_text(json.dumps(document), encoding="utf-8")
    return path


class TestParseDatabase:
    def test_bare_mapping(self) -> None:
        database = parse_database({"C": [C_MAJOR]})
        chord = database["C"][0]
        assert chord.suffix == "major"
        assert len(chord.positions) == 2
        assert chord.positions[0].barres == ()
        assert chord.positions[1].capo is True
        assert chord.positions[1].base_fret == 3

    def test_chords_db_document(self) -> None:
        database = parse_database({"keys": ["C"], "chords": {"C": [C_MAJOR]}})
        assert list(database) == ["C"]

    def test_key_defaults_to_mapping_key(self) -> None:
        database = parse_database({"Csharp": [{"suffix": "minor", "positions": []}]})
        assert database["Csharp"][0].key == "Csharp"

    def test_single_barre_integer(self) -> None:
        position = dict(C_MAJOR["positions"][1], barres=1)
        database = parse_database({"C": [dict(C_MAJOR, positions=[position])]})
        assert database["C"][0].positions[0].barres == (1,)

    def test_float_numbers_are_coerced(self) -> None:
        position = dict(C_MAJOR["positions"][0], frets=[-1.0, 3.0, 2, 0, 1, 0], midi=[48.0, 52, 55, 60.0, 64])
        database = parse_database({"C": [dict(C_MAJOR, positions=[position])]})
        raw = database["C"][0].positions[0]
        assert raw.midi == (48, 52, 55, 60, 64)
        assert all(isinstance(note, int) for note in raw.midi)
        assert raw.frets == (-1, 3, 2, 0, 1, 0)

        chord = parse_all_chords(database, PychordTheory())["C"]["major"]
        assert chord.fingerings[0].notes == ("C", "E", "G", "C", "E")

    def test_non_numeric_midi(self) -> None:
        position = dict(C_MAJOR["positions"][0], midi=["C4"])
        with pytest.raises(CatalogError):
            parse_database({"C": [dict(C_MAJOR, positions=[position])]})

    def test_not_a_mapping(self) -> None:
        with pytest.raises(CatalogError, match="Expected a mapping"):
            parse_database([C_MAJOR])

    def test_chords_not_a_list(self) -> None:
        with pytest.raises(CatalogError, match="list of chords"):
            parse_database({"C": C_MAJOR})

    def test_missing_suffix(self) -> None:
        with pytest.raises(CatalogError, match="Malformed chord entry under C"):
            parse_database({"C": [{"positions": []}]})

    def test_wrong_string_count(self) -> None:
        position = dict(C_MAJOR["positions"][0], frets=[0, 1, 2])
        with pytest.raises(CatalogError, match="6 frets"):
            parse_database({"C": [dict(C_MAJOR, positions=[position])]})


class TestBuildOutput:
    def test_meta_block(self, database_file: Path) -> None:
        catalog = parse_all_chords(load_database(database_file), PychordTheory())
        generated_at = datetime(2024, 1, 2, 3, 4, 5, tzinfo=timezone.utc)
        output = build_output(catalog, generated_at=generated_at)
        meta = output["meta"]
        assert meta["generatedAt"] == "2024-01-02T03:04:05.000Z"
        assert meta["version"] == "1.0.0"
        assert meta["totalChords"] == 2
        assert meta["keys"] == ["C", "C#"]
        assert meta["dataSource"] == "chord-db.json"
        assert set(output["chords"]["C"]["major"]) >= {"id", "symbol", "fingerings", "genreTags"}
        assert output["chords"]["C#"]["minor"]["difficulty"] == 3


class TestWriteCatalog:
    def test_writes_pretty_and_minified(self, tmp_path: Path, database_file: Path) -> None:
        catalog = parse_all_chords(load_database(database_file), PychordTheory())
        output = build_output(catalog)
        out_dir = tmp_path / "dist" / "nested"
        pretty_path, minified_path = write_catalog(output, out_dir)

        assert pretty_path == out_dir / PRETTY_FILENAME
        assert minified_path == out_dir / MINIFIED_FILENAME
        pretty = pretty_path.read_text(encoding="utf-8")
        minified = minified_path.read_text(encoding="utf-8")
        assert "\n  " in pretty
        assert "\n" not in minified
        assert json.loads(pretty) == json.loads(minified) == output


class TestMain:
    def test_generates_catalog(self, tmp_path: Path, database_file: Path, capsys) -> None:
        out_dir = tmp_path / "out"
        code = main(["--input", str(database_file), "--output-dir", str(out_dir), "--no-progress"])
        assert code == 0
        data = json.loads((out_dir / PRETTY_FILENAME).read_text(encoding="utf-8"))
        assert list(data["chords"]) == ["C", "C#"]
        fingering = data["chords"]["C"]["major"]["fingerings"][1]
        assert fingering["capo"] is True
        assert fingering["barre"] == {"fromString": 6, "toString": 1, "fret": 1}
        assert "Successfully parsed 2 chords" in capsys.readouterr().out

    def test_missing_input_fails(self, tmp_path: Path) -> None:
        code = main(["--input", str(tmp_path / "missing.json"), "--output-dir", str(tmp_path), "--no-progress"])
        assert code == 1
