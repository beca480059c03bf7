"""Storage of corpus segments."""

from quranic_morphology.db.connection import get_connection, get_engine, get_readonly_connection
from quranic_morphology.db.schema import init_db, metadata, segments

__all__ = [
    "get_connection",
    "get_engine",
    "get_readonly_connection",
    "init_db",
    "metadata",
    "segments",
]
