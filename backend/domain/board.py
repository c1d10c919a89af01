"""
Board storage: a fixed grid of squares, each holding zero or more occupants.
"""

from types import MappingProxyType
from typing import Dict, Iterable, List, Mapping, Tuple

from .game_objects import FRUIT, WALL, SnakeSegment
from .position import Position


class Square:
    """
    A single cell of the board. Occupants are kept as a multiset (a list),
    so a snake overlapping itself is stored twice.
    """

    def __init__(self, occupants: Iterable = ()):
        self.occupants: List = list(occupants)

    def is_empty(self) -> bool:
        return not self.occupants

    def has_wall(self) -> bool:
        return WALL in self.occupants

    def has_fruit(self) -> bool:
        return FRUIT in self.occupants

    def snake_ids(self) -> set:
        return {o.snake_id for o in self.occupants if isinstance(o, SnakeSegment)}

    def segment_count(self) -> int:
        return sum(1 for o in self.occupants if isinstance(o, SnakeSegment))

    def is_lethal(self) -> bool:
        return any(o.lethal for o in self.occupants)

    def eat_fruit(self) -> int:
        """Remove one fruit from the square and return its value."""
        self.occupants.remove(FRUIT)
        return FRUIT.value


def _lethal_within_radius(cells, position: Position, radius: int, width: int, height: int) -> bool:
    for x in range(max(0, position.x - radius), min(width, position.x + radius + 1)):
        for y in range(max(0, position.y - radius), min(height, position.y + radius + 1)):
            if any(o.lethal for o in cells(Position(x, y))):
                return True
    return False


class Board:
    """
    Mutable game board owned by the session.

    Attributes:
        width, height: board dimensions in squares
    """

    def __init__(self, width: int, height: int):
        self.width = width
        self.height = height
        self._squares: List[List[Square]] = [
            [Square() for _ in range(width)] for _ in range(height)
        ]

    def contains(self, position: Position) -> bool:
        return 0 <= position.x < self.width and 0 <= position.y < self.height

    def square(self, position: Position) -> Square:
        if not self.contains(position):
            raise ValueError(f"Position {position} is outside the {self.width}x{self.height} board.")
        return self._squares[position.y][position.x]

    def add_occupant(self, thing, position: Position) -> None:
        self.square(position).occupants.append(thing)

    def remove_occupant(self, thing, position: Position) -> None:
        square = self.square(position)
        if thing not in square.occupants:
            raise ValueError(f"{thing!r} is not present at {position}.")
        square.occupants.remove(thing)

    def occupants_at(self, position: Position) -> Tuple:
        return tuple(self.square(position).occupants)

    def has_occupant(self, position: Position) -> bool:
        return not self.square(position).is_empty()

    def has_lethal_occupant_within_radius(self, position: Position, radius: int) -> bool:
        """
        Check the (2 * radius + 1) square centred on ``position`` for lethal
        occupants. Parts of the area outside the board are ignored.
        """
        return _lethal_within_radius(
            lambda p: self._squares[p.y][p.x].occupants, position, radius, self.width, self.height
        )

    def fruit_positions(self) -> List[Position]:
        return [
            Position(x, y)
            for y, row in enumerate(self._squares)
            for x, square in enumerate(row)
            if square.has_fruit()
        ]

    def empty_interior_positions(self) -> List[Position]:
        return [
            Position(x, y)
            for y in range(1, self.height - 1)
            for x in range(1, self.width - 1)
            if self._squares[y][x].is_empty()
        ]

    def snapshot(self) -> "BoardSnapshot":
        cells = {
            Position(x, y): tuple(square.occupants)
            for y, row in enumerate(self._squares)
            for x, square in enumerate(row)
            if square.occupants
        }
        return BoardSnapshot(self.width, self.height, cells)


class BoardSnapshot:
    """
    Read-only copy of a board at one moment. Used for replay frames and
    for the view handed to players, so nothing done with it can reach the
    live board.
    """

    def __init__(self, width: int, height: int, cells: Dict[Position, Tuple]):
        self._width = width
        self._height = height
        self._cells: Mapping[Position, Tuple] = MappingProxyType(dict(cells))

    @property
    def width(self) -> int:
        return self._width

    @property
    def height(self) -> int:
        return self._height

    @property
    def cells(self) -> Mapping[Position, Tuple]:
        return self._cells

    def contains(self, position: Position) -> bool:
        return 0 <= position.x < self._width and 0 <= position.y < self._height

    def occupants_at(self, position: Position) -> Tuple:
        return self._cells.get(position, ())

    def has_occupant(self, position: Position) -> bool:
        return bool(self.occupants_at(position))

    def is_lethal(self, position: Position) -> bool:
        if not self.contains(position):
            return True
        return any(o.lethal for o in self.occupants_at(position))

    def has_lethal_occupant_within_radius(self, position: Position, radius: int) -> bool:
        return _lethal_within_radius(self.occupants_at, position, radius, self._width, self._height)

    def fruit_positions(self) -> List[Position]:
        return [pos for pos, occupants in self._cells.items() if FRUIT in occupants]

    def render(self) -> str:
        """
        Returns a string representation of the board with:
        . = empty square
        # = wall
        A = fruit
        a digit/letter = first character of the id of the snake on that square
        Row 0 is printed first, matching NORTH = decreasing y.
        """
        rows = []
        for y in range(self._height):
            row = []
            for x in range(self._width):
                occupants = self.occupants_at(Position(x, y))
                if WALL in occupants:
                    row.append('#')
                elif any(isinstance(o, SnakeSegment) for o in occupants):
                    segment = next(o for o in occupants if isinstance(o, SnakeSegment))
                    row.append(segment.snake_id[:1] or 'S')
                elif FRUIT in occupants:
                    row.append('A')
                else:
                    row.append('.')
            rows.append(f"{y:2d} {' '.join(row)}")
        return "\n".join(rows)

    def __eq__(self, other):
        if not isinstance(other, BoardSnapshot):
            return NotImplemented
        return (self._width, self._height, dict(self._cells)) == (
            other._width, other._height, dict(other._cells)
        )

    def __hash__(self):
        return hash((self._width, self._height, frozenset(self._cells.items())))


def create_standard_board(width: int, height: int) -> Board:
    """
    Generate a width x height board with lethal walls around the edges.
    """
    board = Board(width, height)
    for x in range(width):
        board.add_occupant(WALL, Position(x, 0))
        board.add_occupant(WALL, Position(x, height - 1))
    for y in range(1, height - 1):
        board.add_occupant(WALL, Position(0, y))
        board.add_occupant(WALL, Position(width - 1, y))
    return board
