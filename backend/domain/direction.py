"""
Direction enum and the small amount of algebra the engine needs on it.
"""

from enum import Enum

from .position import Position


class Direction(Enum):
    NORTH = "NORTH"
    WEST = "WEST"
    SOUTH = "SOUTH"
    EAST = "EAST"

    def step(self, position: Position) -> Position:
        """Return the neighbouring position one cell away in this direction."""
        dx, dy = _OFFSETS[self]
        return Position(position.x + dx, position.y + dy)

    def turn_left(self) -> "Direction":
        try:
            return _LEFT_OF[self]
        except KeyError:
            raise RuntimeError(f"This direction is invalid: {self!r}") from None

    def turn_right(self) -> "Direction":
        try:
            return _RIGHT_OF[self]
        except KeyError:
            raise RuntimeError(f"This direction is invalid: {self!r}") from None

    def opposite(self) -> "Direction":
        return self.turn_left().turn_left()

    @classmethod
    def from_to(cls, start: Position, end: Position) -> "Direction":
        """
        Infer the direction that leads from one position towards another.

        Args:
            start: the position we move from
            end: the position we move towards; must share exactly one axis
                with ``start``

        Returns:
            The axis-aligned direction pointing from ``start`` to ``end``.

        Raises:
            ValueError: if the positions are equal or not axis-aligned.
        """
        if start == end:
            raise ValueError(f"Cannot infer a direction from {start} to itself.")

        if start.x == end.x:
            return cls.SOUTH if start.y < end.y else cls.NORTH
        if start.y == end.y:
            return cls.EAST if start.x < end.x else cls.WEST

        raise ValueError(f"Positions {start} and {end} are not on a shared row or column.")


_OFFSETS = {
    Direction.NORTH: (0, -1),
    Direction.SOUTH: (0, 1),
    Direction.EAST: (1, 0),
    Direction.WEST: (-1, 0),
}

# WEST -> SOUTH -> EAST -> NORTH -> WEST
_LEFT_OF = {
    Direction.WEST: Direction.SOUTH,
    Direction.SOUTH: Direction.EAST,
    Direction.EAST: Direction.NORTH,
    Direction.NORTH: Direction.WEST,
}
_RIGHT_OF = {turned: original for original, turned in _LEFT_OF.items()}
