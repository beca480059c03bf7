"""Load stored corpus segments back as linked Segment records."""

from itertools import groupby

from sqlalchemy import Connection, select

from quranic_morphology.db.schema import segments
from quranic_morphology.features import link_word, parse_segment
from quranic_morphology.segment import Segment


def load_word(conn: Connection, chapter: int, verse: int, token: int) -> list[Segment]:
    """Load the segments of one word, in order, with suffixes linked to the stem."""
    rows = conn.execute(
        select(segments.c.form, segments.c.features)
        .where(
            segments.c.chapter_no == chapter,
            segments.c.verse_no == verse,
            segments.c.token_no == token,
        )
        .order_by(segments.c.segment_no)
    ).fetchall()
    return link_word(parse_segment(row.features, form=row.form) for row in rows)


# (token_no, [(segment_no, segment), ...]) as stored in the database
NumberedWord = tuple[int, list[tuple[int, Segment]]]


def load_verse(conn: Connection, chapter: int, verse: int) -> list[NumberedWord]:
    """Load every word of a verse with its stored token and segment numbers.

    Returns:
        List of (token_no, [(segment_no, segment), ...]) pairs in token order.
        Numbers are the ones stored at import, so words or segments skipped by
        the importer leave gaps. Empty if the verse is not in the database.
    """
    rows = conn.execute(
        select(segments.c.token_no, segments.c.segment_no, segments.c.form, segments.c.features)
        .where(segments.c.chapter_no == chapter, segments.c.verse_no == verse)
        .order_by(segments.c.token_no, segments.c.segment_no)
    ).fetchall()

    words: list[NumberedWord] = []
    for token_no, token_rows in groupby(rows, key=lambda row: row.token_no):
        word_rows = list(token_rows)
        word = link_word(parse_segment(row.features, form=row.form) for row in word_rows)
        numbered = [(row.segment_no, s) for row, s in zip(word_rows, word, strict=True)]
        words.append((token_no, numbered))
    return words
