"""Connection handling for the quiz database.

The application owns exactly one connection for its whole lifetime. It is
opened once at startup and passed explicitly to every store.
"""

import logging
import sqlite3
from collections.abc import Iterator
from contextlib import contextmanager
from pathlib import Path

logger = logging.getLogger(__name__)


def open_connection(db_path: Path | str) -> sqlite3.Connection:
    """Open a connection with dict-like rows and foreign keys enforced.

    Raises:
        sqlite3.Error: If the database file cannot be opened.
    """
    if db_path != ":memory:":
        Path(db_path).parent.mkdir(parents=True, exist_ok=True)
    conn = sqlite3.connect(db_path)
    conn.row_factory = sqlite3.Row
    try:
        # SQLite leaves foreign keys off unless asked per connection
        conn.execute("PRAGMA foreign_keys = ON")
    except sqlite3.Error:
        conn.close()
        raise
    logger.debug("Opened database %s", db_path)
    return conn


@contextmanager
def connect(db_path: Path | str) -> Iterator[sqlite3.Connection]:
    """Yield a connection that is closed when the block exits."""
    conn = open_connection(db_path)
    try:
        yield conn
    finally:
        conn.close()
        logger.debug("Closed database %s", db_path)
