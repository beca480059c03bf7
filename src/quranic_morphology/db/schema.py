"""Database schema definition using SQLAlchemy Core."""

from sqlalchemy import Column, Index, Integer, MetaData, String, Table, Text
from sqlalchemy.engine import Engine

metadata = MetaData()

# One row per morphological segment of the corpus
segments = Table(
    "segments",
    metadata,
    Column("segment_id", Integer, primary_key=True),  # e.g. 1001001002 = (1:1:1:2)
    Column("chapter_no", Integer, nullable=False),
    Column("verse_no", Integer, nullable=False),
    Column("token_no", Integer, nullable=False),
    Column("segment_no", Integer, nullable=False),
    Column("form", Text, nullable=False),  # Buckwalter transliteration (e.g., "somi")
    Column("tag", String(10), nullable=False),  # part-of-speech tag (e.g., "N")
    Column("features", Text, nullable=False),  # raw annotation (e.g., "STEM|POS:N|...")
    Index("idx_segments_location", "chapter_no", "verse_no", "token_no"),
)


def init_db(engine: Engine) -> None:
    """Create all tables if they don't exist."""
    metadata.create_all(engine)
