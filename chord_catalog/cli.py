"""Command line entry point: enrich a chords-db file into a chord catalog."""

from __future__ import annotations

import argparse
import logging
import sys
import time
from pathlib import Path

from tqdm.contrib.logging import logging_redirect_tqdm

from chord_catalog.assembler import count_chords, parse_all_chords
from chord_catalog.catalog import CATALOG_VERSION, build_output, dumps, load_database, write_catalog
from chord_catalog.theory import PychordTheory

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    """Create the argument parser."""
    parser = argparse.ArgumentParser(
        prog="chord-catalog",
        description="Enrich a guitar chord fingering database into a chord catalog",
    )
    parser.add_argument(
        "--input",
        type=Path,
        default=Path("source/chord-db.json"),
        help="Path to the chords-db JSON file",
    )
    parser.add_argument(
        "--output-dir",
        type=Path,
        default=Path("dist"),
        help="Directory to write chords.json and chords.min.json",
    )
    parser.add_argument(
        "--version-tag",
        default=CATALOG_VERSION,
        help="Catalog version recorded in the metadata block",
    )
    parser.add_argument(
        "--progress",
        action=argparse.BooleanOptionalAction,
        default=True,
        help="Show a progress bar over keys",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable debug logging",
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    """Run the catalog generator."""
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(levelname)s %(name)s: %(message)s",
    )

    print("Starting guitar chord parser...\n")
    start = time.perf_counter()

    try:
        database = load_database(args.input)
        with logging_redirect_tqdm():
            catalog = parse_all_chords(database, PychordTheory(), progress=args.progress)
        output = build_output(catalog, version=args.version_tag, data_source=args.input.name)
        pretty_path, _ = write_catalog(output, args.output_dir)
    except (OSError, ValueError) as e:
        logger.error("Catalog generation failed: %s", e)
        return 1

    elapsed_ms = (time.perf_counter() - start) * 1000
    size_kb = round(len(dumps(output, pretty=False).encode("utf-8")) / 1024)

    print(f"Successfully parsed {count_chords(catalog)} chords")
    print(f"Unique keys: {len(output['meta']['keys'])}")
    print(f"Output: {pretty_path} ({size_kb}KB)")
    print(f"Time: {round(elapsed_ms)}ms\n")
    return 0


if __name__ == "__main__":
    sys.exit(main())
