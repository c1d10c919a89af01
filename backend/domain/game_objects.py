"""
Things that can occupy a square on the board.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class GameObjectType:
    """
    A static kind of board occupant.

    Attributes:
        name: display name, e.g. 'Wall' or 'Fruit'
        lethal: whether a snake whose head lands on it dies
        value: score awarded when the object is eaten
    """

    name: str
    lethal: bool
    value: int = 0


WALL = GameObjectType("Wall", lethal=True)
FRUIT = GameObjectType("Fruit", lethal=False, value=1)


@dataclass(frozen=True)
class SnakeSegment:
    """One body segment of the snake with the given id."""

    snake_id: str

    lethal = True
