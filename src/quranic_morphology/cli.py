"""Command-line interface for Quranic morphology descriptions."""

import argparse
import logging
import sys
from pathlib import Path

from sqlalchemy import func, select

from quranic_morphology.corpus import load_verse
from quranic_morphology.db import (
    get_connection,
    get_engine,
    get_readonly_connection,
    init_db,
    segments,
)
from quranic_morphology.db.connection import DEFAULT_DB_PATH
from quranic_morphology.descriptor import generate_description
from quranic_morphology.errors import DescriptionError, FeatureParseError
from quranic_morphology.features import parse_word
from quranic_morphology.importers import import_corpus

logger = logging.getLogger(__name__)

DEFAULT_CORPUS_PATH = Path("data/quranic-corpus-morphology-0.4.txt")

# Annotation markers counted by the stats command
SEGMENT_MARKERS = {"prefixes": "PREFIX|%", "stems": "STEM|%", "suffixes": "SUFF|%"}


def cmd_describe(args: argparse.Namespace) -> int:
    """Describe the segments of one word given as annotation strings."""
    try:
        word = parse_word(args.features)
        descriptions = [generate_description(segment) for segment in word]
    except (DescriptionError, FeatureParseError) as e:
        logger.debug("Failed to describe %s", args.features, exc_info=True)
        print(f"Error: {e}", file=sys.stderr)
        return 1

    for annotation, description in zip(args.features, descriptions, strict=True):
        print(f"{annotation}\t{description}")
    return 0


def cmd_import_corpus(args: argparse.Namespace) -> int:
    """Run the corpus import command."""
    corpus_path = Path(args.input)
    db_path = Path(args.database)

    if not corpus_path.exists():
        print(f"Error: Input file not found: {corpus_path}", file=sys.stderr)
        return 1

    print(f"Initializing database: {db_path}")
    engine = get_engine(db_path)
    init_db(engine)

    print(f"Importing from: {corpus_path}")
    with get_connection(db_path) as conn:
        stats = import_corpus(
            conn,
            corpus_path,
            progress_callback=lambda n: print(f"\r  Imported {n:,} segments", end="", flush=True),
        )

    print()
    print(f"  Segments imported: {stats['imported']:,}")
    if stats["skipped"] > 0:
        print(f"  Lines skipped:     {stats['skipped']:,}")
    print()
    print("Import complete!")
    return 0


def cmd_describe_verse(args: argparse.Namespace) -> int:
    """Print the description of every segment of a stored verse."""
    db_path = Path(args.database)

    if not db_path.exists():
        print(f"Error: Database not found: {db_path}", file=sys.stderr)
        print("Run 'import-corpus' first to create the database.", file=sys.stderr)
        return 1

    location = f"{args.chapter}:{args.verse}"
    try:
        with get_readonly_connection(db_path) as conn:
            words = load_verse(conn, args.chapter, args.verse)
        lines = [
            f"({location}:{token_no}:{segment_no})\t{segment.form}\t{generate_description(segment)}"
            for token_no, word in words
            for segment_no, segment in word
        ]
    except (DescriptionError, FeatureParseError) as e:
        logger.debug("Failed to describe verse %s", location, exc_info=True)
        print(f"Error: {e}", file=sys.stderr)
        return 1

    if not lines:
        print(f"Error: Verse not found: {location}", file=sys.stderr)
        return 1

    for line in lines:
        print(line)
    return 0


def cmd_stats(args: argparse.Namespace) -> int:
    """Print database statistics."""
    db_path = Path(args.database)

    if not db_path.exists():
        print(f"Error: Database not found: {db_path}", file=sys.stderr)
        return 1

    with get_readonly_connection(db_path) as conn:
        total = conn.execute(select(func.count()).select_from(segments)).scalar() or 0
        n_chapters = (
            conn.execute(select(func.count(func.distinct(segments.c.chapter_no)))).scalar() or 0
        )
        counts = {
            label: conn.execute(
                select(func.count()).select_from(segments).where(segments.c.features.like(pattern))
            ).scalar()
            or 0
            for label, pattern in SEGMENT_MARKERS.items()
        }

    print(f"Database: {db_path}")
    print(f"  Chapters:  {n_chapters:,}")
    print(f"  Segments:  {total:,}")
    for label, count in counts.items():
        print(f"    {label + ':':<11}{count:,}")
    return 0


def main() -> int:
    """Main entry point for the CLI."""
    parser = argparse.ArgumentParser(
        prog="quranic-morphology",
        description="Describe the morphology of Quranic Arabic corpus segments",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable debug logging",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    # describe subcommand
    describe_parser = subparsers.add_parser(
        "describe",
        help="Describe the segments of one word",
    )
    describe_parser.add_argument(
        "features",
        nargs="+",
        help='Segment annotations in word order (e.g. "PREFIX|bi+" "STEM|POS:N|LEM:{som|M|GEN")',
    )
    describe_parser.set_defaults(func=cmd_describe)

    # import-corpus subcommand
    import_parser = subparsers.add_parser(
        "import-corpus",
        help="Import the corpus morphology file into SQLite",
    )
    import_parser.add_argument(
        "-i",
        "--input",
        type=str,
        default=str(DEFAULT_CORPUS_PATH),
        help=f"Path to corpus morphology file (default: {DEFAULT_CORPUS_PATH})",
    )
    import_parser.add_argument(
        "-d",
        "--database",
        type=str,
        default=str(DEFAULT_DB_PATH),
        help=f"Path to SQLite database (default: {DEFAULT_DB_PATH})",
    )
    import_parser.set_defaults(func=cmd_import_corpus)

    # describe-verse subcommand
    verse_parser = subparsers.add_parser(
        "describe-verse",
        help="Describe every segment of a stored verse",
    )
    verse_parser.add_argument("chapter", type=int, help="Chapter number")
    verse_parser.add_argument("verse", type=int, help="Verse number")
    verse_parser.add_argument(
        "-d",
        "--database",
        type=str,
        default=str(DEFAULT_DB_PATH),
        help=f"Path to SQLite database (default: {DEFAULT_DB_PATH})",
    )
    verse_parser.set_defaults(func=cmd_describe_verse)

    # stats subcommand
    stats_parser = subparsers.add_parser(
        "stats",
        help="Show database statistics",
    )
    stats_parser.add_argument(
        "-d",
        "--database",
        type=str,
        default=str(DEFAULT_DB_PATH),
        help=f"Path to SQLite database (default: {DEFAULT_DB_PATH})",
    )
    stats_parser.set_defaults(func=cmd_stats)

    args = parser.parse_args()
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )
    return args.func(args)


if __name__ == "__main__":
    sys.exit(main())
