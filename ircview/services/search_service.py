# file: ircview/services/search_service.py
"""
Two-stage log search.

1. candidate_lookup: a ranked FTS5 query over the bigram index. Bigram overlap
   has high recall but can match characters that are only adjacent by chance.
2. refine_lines: re-reads each candidate and keeps only the lines whose message
   contains the first query word, which restores precision and turns a whole
   day of chat into a short excerpt.

Only the first word of a multi-word query is used in stage 2; the remaining
words narrow the candidates through the index but are not checked per line.
"""

import logging
import sqlite3
from typing import List, Optional

from ircview.core.config import Settings
from ircview.db.archive import get_db_connection
from ircview.schemas.models import LogRecord, SearchResponse
from ircview.services.line_parser import parse_log_line
from ircview.services.tokenizer import build_match_expression

log = logging.getLogger("api.services.search")

def prefix(text: str, n: int) -> str:
    """First n code points of text."""
    return text[:n]

def first_word(query: str) -> str:
    words = query.lower().split()
    return words[0] if words else ""

def candidate_lookup(
    conn: sqlite3.Connection,
    match_expression: str,
    channel: Optional[str] = None,
    limit: int = 100,
) -> List[LogRecord]:
    """Returns up to `limit` records whose tokens match, best-ranked first."""
    sql = """
        SELECT log_records.id AS id, log_records.channel AS channel,
               log_records.log_date AS log_date, log_records.content AS content
        FROM search_tokens
        JOIN log_records ON log_records.id = search_tokens.rowid
        WHERE search_tokens MATCH ?
    """
    params: list = [match_expression]
    if channel:
        sql += " AND log_records.channel = ?"
        params.append(channel)
    sql += " ORDER BY search_tokens.rank LIMIT ?"
    params.append(limit)

    cursor = conn.execute(sql, params)
    return [LogRecord(**dict(row)) for row in cursor.fetchall()]

def refine_lines(record: LogRecord, word: str, max_matches: int = 10, preview_chars: int = 256) -> LogRecord:
    """
    Narrows a record's content to the lines whose message contains `word`
    (case-insensitive). Scanning stops once more than max_matches lines matched.
    When nothing matches, the first preview_chars code points are shown instead.
    """
    word = word.lower()
    matched_lines = []
    for line in record.content.split("\n"):
        parsed = parse_log_line(line)
        message = parsed.message if parsed else ""
        if word in message.lower():
            matched_lines.append(line)
            log.debug(f"matched id={record.id}: {message}")
        if len(matched_lines) > max_matches:
            break

    if matched_lines:
        content = "\n".join(matched_lines)
    else:
        content = prefix(record.content, preview_chars)
    return record.model_copy(update={"content": content})

class SearchService:
    """Free-text search over the archive."""

    def __init__(self, settings: Settings):
        self.settings = settings

    def is_low_precision(self, query: str) -> bool:
        return len(query) <= self.settings.LOW_PRECISION_MAX_CHARS

    def search(self, query: str, channel: Optional[str] = None) -> SearchResponse:
        channel = channel or None
        response = SearchResponse(query=query, channel=channel, low_precision=self.is_low_precision(query))

        # A single character yields no bigram on its own
        padded = query if len(query) >= self.settings.NGRAM_SIZE else query + " "
        match_expression = build_match_expression(padded, self.settings.NGRAM_SIZE)
        if not match_expression:
            log.info(f"No searchable tokens in query {query!r}")
            return response

        log.info(f"Searching match={match_expression!r} channel={channel!r}")
        conn = get_db_connection(self.settings)
        try:
            candidates = candidate_lookup(conn, match_expression, channel, self.settings.SEARCH_LIMIT)
        finally:
            conn.close()
        log.info(f"Search for {query!r} returned {len(candidates)} candidate records")

        word = first_word(query)
        response.records = [
            refine_lines(record, word, self.settings.SNIPPET_MATCH_LIMIT, self.settings.PREVIEW_CHARS)
            for record in candidates
        ]
        response.channels = sorted({record.channel for record in response.records})
        return response
