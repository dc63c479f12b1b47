# file: ircview/schemas/models.py
from pydantic import BaseModel
from typing import List, Optional

# --- Archive Records ---
class LogRecord(BaseModel):
    id: int
    channel: str
    log_date: str
    content: str

class ChannelList(BaseModel):
    channels: List[str]

class LogDateList(BaseModel):
    channel: str
    log_dates: List[str]

# --- Search ---
class SearchResponse(BaseModel):
    query: str
    channel: Optional[str] = None
    low_precision: bool = False  # Very short queries match loosely; the UI should warn
    records: List[LogRecord] = []
    channels: List[str] = []  # Distinct channels among the returned records, sorted

# --- Import ---
class ImportSummary(BaseModel):
    src_dir: str
    files_imported: int = 0
    files_skipped: int = 0  # Not a .txt file
    files_empty: int = 0    # No accepted lines, so no record written
    lines_imported: int = 0
    elapsed_sec: float = 0.0
