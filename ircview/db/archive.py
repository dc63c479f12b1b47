# file: ircview/db/archive.py

import sqlite3
import logging
import pathlib

from ircview.core.config import Settings

log = logging.getLogger("api.db")

ARCHIVE_SCHEMA = """
CREATE TABLE IF NOT EXISTS log_records (
    id INTEGER PRIMARY KEY,
    channel TEXT NOT NULL,
    log_date TEXT NOT NULL,
    content TEXT NOT NULL
);

CREATE INDEX IF NOT EXISTS idx_log_records_channel_date ON log_records (channel, log_date);

-- Token index keyed by the same id (rowid = log_records.id)
CREATE VIRTUAL TABLE IF NOT EXISTS search_tokens USING fts5(id UNINDEXED, content);
"""

def initialize_archive(settings: Settings, reset: bool = False) -> None:
    """
    Creates the archive tables if they don't exist.
    With reset=True the database file is removed first, so the archive starts empty.
    """
    db_path = pathlib.Path(settings.DB_PATH)
    if reset and db_path.exists():
        log.info(f"Removing existing archive database: {db_path}")
        db_path.unlink()
    db_path.parent.mkdir(parents=True, exist_ok=True)

    if settings.SCHEMA_FILE:
        log.info(f"Loading schema from file: {settings.SCHEMA_FILE}")
        schema_sql = pathlib.Path(settings.SCHEMA_FILE).read_text(encoding="utf-8")
    else:
        schema_sql = ARCHIVE_SCHEMA

    log.info(f"Initializing archive database at: {db_path}")
    conn = sqlite3.connect(db_path)
    try:
        conn.executescript(schema_sql)
        conn.commit()
        log.info("Archive database initialized successfully.")
    except sqlite3.Error as e:
        log.error(f"Database error during initialization: {e}")
        raise
    finally:
        conn.close()

def get_db_connection(settings: Settings) -> sqlite3.Connection:
    """Provides a fresh connection to the archive database."""
    conn = sqlite3.connect(settings.DB_PATH)
    conn.row_factory = sqlite3.Row
    return conn
