# file: ircview/services/line_parser.py

from typing import NamedTuple, Optional

# A line like "12:00:01 <alice> hello" is spoken text; "12:00:01 (bob) hi" is a
# notice/action. Anything else (joins, topic changes, blank lines) is dropped.
MESSAGE_MARKERS = ("<", "(")

class ParsedLine(NamedTuple):
    line: str     # The original line, kept for display
    message: str  # Body after the speaker marker, used for tokens and refinement

def parse_log_line(line: str) -> Optional[ParsedLine]:
    """Returns the parsed message line, or None if the line is not a chat message."""
    parts = line.split(" ", 1)
    if len(parts) != 2:
        return None
    rest = parts[1]
    if not rest.startswith(MESSAGE_MARKERS):
        return None
    speaker_and_body = rest.split(" ", 1)
    if len(speaker_and_body) != 2:
        return None
    return ParsedLine(line=line, message=speaker_and_body[1])
