"""Rock notation parser.

Reads the human-authored scan format: one polyline per line, vertices written
as ``x,y`` and joined by ``->``::

    498,4 -> 498,6 -> 496,6
    503,4 -> 502,4 -> 502,9 -> 494,9

Blank lines are ignored. Whitespace around arrows and commas is tolerated.
"""

from typing import List, Optional, Tuple

from sandfall.components import Position
from sandfall.errors import RockParseError

ARROW = "->"


def parse_vertex(token: str, line_number: Optional[int] = None) -> Position:
    """Parse a single ``x,y`` token into a :class:`Position`."""
    parts = [part.strip() for part in token.split(",")]
    if len(parts) != 2:
        raise RockParseError(f"expected 'x,y', got {token.strip()!r}", line_number)
    try:
        x, y = int(parts[0]), int(parts[1])
    except ValueError:
        raise RockParseError(
            f"non-integer coordinate in {token.strip()!r}", line_number
        ) from None
    if x < 0 or y < 0:
        raise RockParseError(f"negative coordinate in {token.strip()!r}", line_number)
    return Position(x, y)


def parse_polyline(
    line: str, line_number: Optional[int] = None
) -> Tuple[Position, ...]:
    """Parse one ``x,y -> x,y -> ...`` line."""
    return tuple(parse_vertex(token, line_number) for token in line.split(ARROW))


def parse_polylines(text: str) -> List[Tuple[Position, ...]]:
    """Parse a whole scan, skipping blank lines.

    Raises:
        RockParseError: With the 1-based line number of the first bad line.
    """
    return [
        parse_polyline(line, line_number)
        for line_number, line in enumerate(text.splitlines(), start=1)
        if line.strip()
    ]
