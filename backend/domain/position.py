"""
Position value type for the game board.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class Position:
    """
    Immutable grid coordinate.

    Attributes:
        x: column index (0 at the left edge)
        y: row index (0 at the top edge, growing southwards)
    """

    x: int
    y: int

    def __iter__(self):
        yield self.x
        yield self.y

    def __repr__(self):
        return f"({self.x}, {self.y})"
