# file: ircview/services/archive_service.py

import logging
from typing import List, Optional

from ircview.core.config import Settings
from ircview.db.archive import get_db_connection
from ircview.schemas.models import LogRecord

log = logging.getLogger("api.services.archive")

class ArchiveService:
    """Read-only navigation over the imported logs: channels, days, and full day logs."""

    def __init__(self, settings: Settings):
        self.settings = settings

    def list_channels(self) -> List[str]:
        conn = get_db_connection(self.settings)
        try:
            cursor = conn.execute("SELECT DISTINCT channel FROM log_records ORDER BY channel")
            return [row["channel"] for row in cursor.fetchall()]
        finally:
            conn.close()

    def list_log_dates(self, channel: str) -> List[str]:
        """Newest first."""
        conn = get_db_connection(self.settings)
        try:
            cursor = conn.execute(
                "SELECT DISTINCT log_date FROM log_records WHERE channel = ? ORDER BY log_date DESC",
                (channel,),
            )
            return [row["log_date"] for row in cursor.fetchall()]
        finally:
            conn.close()

    def get_log(self, channel: str, log_date: str) -> Optional[LogRecord]:
        if log_date.endswith(".txt"):
            log_date = log_date[:-len(".txt")]
        conn = get_db_connection(self.settings)
        try:
            cursor = conn.execute(
                "SELECT id, channel, log_date, content FROM log_records WHERE channel = ? AND log_date = ?",
                (channel, log_date),
            )
            row = cursor.fetchone()
            if row:
                return LogRecord(**dict(row))
            log.info(f"No log for channel={channel} log_date={log_date}")
            return None
        finally:
            conn.close()
