"""SQLite engines and connections for the segment store."""

from collections.abc import Generator
from contextlib import contextmanager
from pathlib import Path

from sqlalchemy import Connection, Engine, create_engine

DEFAULT_DB_PATH = Path("quran.db")

# Engines keyed by (database path, read-only flag)
_engine_cache: dict[tuple[Path, bool], Engine] = {}


def _database_url(db_path: Path, readonly: bool) -> str:
    if not readonly:
        return f"sqlite:///{db_path}"
    # SQLite URI filename; mode=ro refuses writes and never creates the file
    return f"sqlite:///file:{db_path.resolve().as_posix()}?mode=ro&uri=true"


def get_engine(db_path: Path | str = DEFAULT_DB_PATH, *, readonly: bool = False) -> Engine:
    """Get or create a cached engine for the given database path.

    A read-only engine opens the file with SQLite's ``mode=ro``, so the
    database must already exist and any write raises OperationalError.
    """
    key = (Path(db_path), readonly)
    if key not in _engine_cache:
        _engine_cache[key] = create_engine(_database_url(key[0], readonly), echo=False)
    return _engine_cache[key]


@contextmanager
def get_connection(
    db_path: Path | str = DEFAULT_DB_PATH,
) -> Generator[Connection]:
    """Writable connection that commits on success and rolls back on exception.

    Example:
        with get_connection() as conn:
            import_corpus(conn, corpus_path)
    """
    with get_engine(db_path).connect() as conn:
        try:
            yield conn
            conn.commit()
        except Exception:
            conn.rollback()
            raise


@contextmanager
def get_readonly_connection(
    db_path: Path | str = DEFAULT_DB_PATH,
) -> Generator[Connection]:
    """Connection for looking up stored segments without touching the file.

    Example:
        with get_readonly_connection(db_path) as conn:
            words = load_verse(conn, 1, 1)
    """
    with get_engine(db_path, readonly=True).connect() as conn:
        yield conn
