"""Line-level parser for the coordinate-list matrix format.

A file looks like::

    rows=3
    cols=4
    (0, 1, 5)
    (2, 3, -7)

Whitespace is insignificant anywhere on a line. Parsing never raises:
numeric tokens that are not an optional ``-`` followed by ASCII digits
resolve to ``0``.
"""

from typing import NamedTuple, Optional


class Entry(NamedTuple):
    row: int
    col: int
    value: int


def strip_whitespace(line: str) -> str:
    """Remove every whitespace character from ``line``, not just the ends."""
    return "".join(line.split())


def parse_integer(token: str) -> int:
    """Parse a signed decimal integer, returning 0 for anything malformed.

    Examples
    --------
    >>> parse_integer("-42")
    -42
    >>> parse_integer("4x2")
    0
    >>> parse_integer("")
    0
    """
    digits = token[1:] if token.startswith("-") else token
    result = 0
    for ch in digits:
        if not ("0" <= ch <= "9"):
            return 0
        result = result * 10 + (ord(ch) - ord("0"))
    return -result if token.startswith("-") else result


def parse_header(line: str, key: str) -> Optional[int]:
    """Return the integer of a ``key=<int>`` header line, or None."""
    prefix = key + "="
    if not line.startswith(prefix):
        return None
    return parse_integer(line[len(prefix):])


def parse_entry(line: str) -> Optional[Entry]:
    """Parse a whitespace-stripped ``(row,col,value)`` line.

    Returns None when the line is not a parenthesised triple. Inside a
    triple, malformed fields become 0, so ``(1,,abc)`` parses as
    ``Entry(1, 0, 0)``.
    """
    if len(line) < 2 or not (line.startswith("(") and line.endswith(")")):
        return None
    parts = line[1:-1].split(",")
    if len(parts) != 3:
        return None
    row, col, value = (parse_integer(p) for p in parts)
    return Entry(row, col, value)
