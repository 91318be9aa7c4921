# pwnedcheck/core/parser.py
"""
Parser for range endpoint bodies: one "SUFFIX:COUNT" pair per line.
"""

from typing import Dict

from .exceptions import MalformedResponseError
from ..utils.logger import get_logger

logger = get_logger(__name__)


def parse_range_response(body: str) -> Dict[str, int]:
    """
    Parse a range response into a suffix -> count mapping.

    Empty lines (the service usually ends with one) are skipped. A count of 0
    is kept as a real value; padded responses use it for decoy rows. When a
    suffix repeats, the last occurrence wins.

    Args:
        body: Raw response text

    Returns:
        Dict[str, int]: Suffix to breach count, in response order

    Raises:
        MalformedResponseError: If a line is not a suffix/count pair
    """
    if body is None:
        raise MalformedResponseError("Range response body is missing")

    matches: Dict[str, int] = {}

    for line_number, line in enumerate(body.splitlines(), start=1):
        if not line.strip():
            continue

        if ":" not in line:
            raise MalformedResponseError(
                f"Line {line_number} has no suffix/count separator", line=line
            )

        suffix, count_str = line.split(":", 1)
        suffix = suffix.strip()
        count_str = count_str.strip()

        if not suffix:
            raise MalformedResponseError(f"Line {line_number} has an empty suffix", line=line)

        # int() would also accept "+5", "-1" or "1_000"
        if not (count_str.isascii() and count_str.isdigit()):
            raise MalformedResponseError(
                f"Line {line_number} has a non-numeric count: {count_str!r}", line=line
            )

        matches[suffix] = int(count_str)

    logger.debug(f"Parsed {len(matches)} suffix entries from range response")
    return matches
