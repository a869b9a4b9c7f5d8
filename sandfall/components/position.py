"""Position component.

Immutable integer grid coordinates. Used both as members of the obstacle set
(rock and settled sand) and as the cursor of a falling grain. ``y`` grows
downward, so "below" means ``y + 1``.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class Position:
    """Grid coordinate.

    Attributes:
        x: Column index.
        y: Row index (0 at top, increasing downward).
    """

    x: int
    y: int

    def below(self) -> "Position":
        """Cell directly underneath."""
        return Position(self.x, self.y + 1)

    def below_left(self) -> "Position":
        return Position(self.x - 1, self.y + 1)

    def below_right(self) -> "Position":
        return Position(self.x + 1, self.y + 1)
