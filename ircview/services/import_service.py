# file: ircview/services/import_service.py

import logging
import os
import pathlib
import sqlite3
import time
from typing import Iterator, List, Tuple

from ircview.core.config import Settings
from ircview.db.archive import get_db_connection
from ircview.schemas.models import ImportSummary
from ircview.services.line_parser import parse_log_line
from ircview.services.tokenizer import index_content

log = logging.getLogger("api.services.import")

LOG_FILE_SUFFIX = ".txt"

def derive_channel_and_date(path: pathlib.Path) -> Tuple[str, str]:
    """<root>/<channel>/<log_date>.txt -> (channel, log_date)"""
    name = path.name
    if name.endswith(LOG_FILE_SUFFIX):
        name = name[:-len(LOG_FILE_SUFFIX)]
    return path.parent.name, name

def _raise_walk_error(err: OSError):
    raise err

def walk_log_tree(src_dir: pathlib.Path) -> Iterator[pathlib.Path]:
    """Yields every file under src_dir in a stable (sorted) order. Walk errors are fatal."""
    for dirpath, dirnames, filenames in os.walk(src_dir, onerror=_raise_walk_error):
        dirnames.sort()
        for filename in sorted(filenames):
            yield pathlib.Path(dirpath) / filename

class ImportService:
    """Rebuilds the whole archive from a directory of per-channel, per-day log files."""

    def __init__(self, settings: Settings):
        self.settings = settings

    def read_log_file(self, path: pathlib.Path) -> Tuple[List[str], List[str]]:
        """Returns (accepted lines, message bodies) of one file, in original order."""
        text = path.read_text(
            encoding=self.settings.LOG_ENCODING,
            errors=self.settings.LOG_DECODE_ERRORS,
        )
        contents, messages = [], []
        for line in text.split("\n"):
            parsed = parse_log_line(line)
            if parsed is None:
                continue
            contents.append(parsed.line)
            messages.append(parsed.message)
        return contents, messages

    def _import_file(self, conn: sqlite3.Connection, path: pathlib.Path, record_id: int, summary: ImportSummary) -> None:
        channel, log_date = derive_channel_and_date(path)
        contents, messages = self.read_log_file(path)
        if not contents:
            log.info(f"No contents in {path}, skipping.")
            summary.files_empty += 1
            return

        conn.execute(
            "INSERT INTO log_records (id, channel, log_date, content) VALUES (?, ?, ?, ?)",
            (record_id, channel, log_date, "\n".join(contents)),
        )
        if messages:
            conn.execute(
                "INSERT INTO search_tokens (rowid, id, content) VALUES (?, ?, ?)",
                (record_id, record_id, index_content(messages, self.settings.NGRAM_SIZE)),
            )

        summary.files_imported += 1
        summary.lines_imported += len(contents)
        log.info(f"Imported id={record_id} channel={channel} log_date={log_date} lines={len(contents)} ({path})")

    def run(self, src_dir) -> ImportSummary:
        """
        Replaces the archive contents with the logs found under src_dir.

        Truncation and all inserts share one transaction: any filesystem or
        database error rolls everything back and is re-raised, so readers see
        either the previous archive or the new one.
        """
        src_dir = pathlib.Path(src_dir)
        summary = ImportSummary(src_dir=str(src_dir))
        started = time.monotonic()
        log.info(f"Starting full import from {src_dir} into {self.settings.DB_PATH}")

        conn = get_db_connection(self.settings)
        try:
            with conn:
                conn.execute("DELETE FROM search_tokens")
                conn.execute("DELETE FROM log_records")

                record_id = 0
                for path in walk_log_tree(src_dir):
                    if path.suffix != LOG_FILE_SUFFIX:
                        log.info(f"Skipping non-log file: {path}")
                        summary.files_skipped += 1
                        continue
                    # Ids follow walk order and are also assigned to files that end up empty
                    record_id += 1
                    try:
                        self._import_file(conn, path, record_id, summary)
                    except (OSError, sqlite3.Error) as e:
                        log.error(f"Import aborted at {path}: {e}")
                        raise
        except (OSError, sqlite3.Error):
            log.error("Import rolled back; the previous archive contents are kept.")
            raise
        finally:
            conn.close()

        summary.elapsed_sec = round(time.monotonic() - started, 3)
        log.info(
            f"Import complete: {summary.files_imported} records, {summary.lines_imported} lines, "
            f"{summary.files_empty} empty and {summary.files_skipped} skipped files in {summary.elapsed_sec}s"
        )
        return summary
