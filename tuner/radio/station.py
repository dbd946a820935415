"""
Station Identifiers and Status Text

Helpers for turning raw request input into a safe station identifier
and the radio program's stdout into response lines.
"""

import re
from typing import Iterable, List, Optional, Union

# Station IDs may consist of digits or lowercase letters
STATION_DISALLOWED = re.compile(r'[^a-z0-9]+')
MAX_STATION_LENGTH = 7

# Same set PHP trim() strips; exec() splits output on "\n" only
LINE_WHITESPACE = " \t\n\r\0\x0b"


def sanitize_station(raw: Optional[str]) -> str:
    """
    Reduce a raw station parameter to a safe identifier.

    Runs of characters outside [a-z0-9] are deleted (uppercase letters
    included), then the result is cut to MAX_STATION_LENGTH.

    Args:
        raw: Value of the station query parameter, or None

    Returns:
        Sanitized identifier; empty string means "do not tune"
    """
    if not raw:
        return ""
    return STATION_DISALLOWED.sub('', raw)[:MAX_STATION_LENGTH]


def clean_status_lines(output: Union[str, Iterable[str], None]) -> List[str]:
    """Trim every line and drop the ones left empty"""
    if output is None:
        return []
    if isinstance(output, str):
        output = output.split("\n")
    lines = []
    for line in output:
        trimmed = line.strip(LINE_WHITESPACE)
        if trimmed:
            lines.append(trimmed)
    return lines


def format_status(lines: Iterable[str]) -> str:
    """Join status lines into a response body, one terminated line each"""
    return ''.join(f"{line}\n" for line in lines)
