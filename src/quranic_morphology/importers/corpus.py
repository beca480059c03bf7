"""Import the Quranic Arabic Corpus morphology file."""

import logging
import re
from collections.abc import Callable
from pathlib import Path
from typing import Any

from sqlalchemy import Connection

from quranic_morphology.db.schema import segments

logger = logging.getLogger(__name__)

# (chapter:verse:token:segment)
_LOCATION = re.compile(r"^\((\d+):(\d+):(\d+):(\d+)\)$")

HEADER_PREFIX = "LOCATION"

BATCH_SIZE = 5000


def make_segment_id(chapter: int, verse: int, token: int, segment: int) -> int:
    """Build the composite segment id, e.g. (1:1:1:2) -> 1001001002."""
    return int(f"{chapter}{verse:03d}{token:03d}{segment:03d}")


def parse_corpus_line(line: str) -> dict[str, Any] | None:
    """Parse one line of the corpus file into a segments row.

    Format: (chapter:verse:token:segment)<TAB>FORM<TAB>TAG<TAB>FEATURES

    Returns None for comments, blank lines and the header line.

    Raises:
        ValueError: If the line is not a well-formed corpus entry.
    """
    line = line.rstrip("\n")
    if not line.strip() or line.startswith("#") or line.startswith(HEADER_PREFIX):
        return None

    parts = line.split("\t")
    if len(parts) != 4:
        raise ValueError(f"Expected 4 tab-separated columns, got {len(parts)}")

    location, form, tag, features = parts
    match = _LOCATION.match(location)
    if match is None:
        raise ValueError(f"Invalid location: {location!r}")

    chapter, verse, token, segment = (int(group) for group in match.groups())
    return {
        "segment_id": make_segment_id(chapter, verse, token, segment),
        "chapter_no": chapter,
        "verse_no": verse,
        "token_no": token,
        "segment_no": segment,
        "form": form,
        "tag": tag,
        "features": features,
    }


def import_corpus(
    conn: Connection,
    corpus_path: Path,
    *,
    progress_callback: Callable[[int], None] | None = None,
) -> dict[str, int]:
    """Import corpus segments into the database.

    Existing rows with the same segment id are replaced.

    Args:
        conn: SQLAlchemy connection
        corpus_path: Path to the corpus morphology text file
        progress_callback: Optional callback receiving the number of rows imported so far

    Returns:
        Statistics dict with counts
    """
    stats = {"imported": 0, "skipped": 0}
    batch: list[dict[str, Any]] = []

    def flush() -> None:
        if batch:
            conn.execute(segments.insert().prefix_with("OR REPLACE"), batch)
            stats["imported"] += len(batch)
            batch.clear()
            if progress_callback:
                progress_callback(stats["imported"])

    with corpus_path.open(encoding="utf-8") as f:
        for line_no, line in enumerate(f, 1):
            try:
                row = parse_corpus_line(line)
            except ValueError as e:
                logger.warning("Skipping line %d of %s: %s", line_no, corpus_path, e)
                stats["skipped"] += 1
                continue

            if row is None:
                continue

            batch.append(row)
            if len(batch) >= BATCH_SIZE:
                flush()

    flush()
    return stats
