"""
Snake entity for the game engine.
"""

from collections import deque
from dataclasses import dataclass
from typing import Iterable, Optional, Tuple

from .direction import Direction
from .position import Position


@dataclass(frozen=True)
class SnakeView:
    """Immutable projection of a snake, safe to hand to players and results."""

    snake_id: str
    name: str
    positions: Tuple[Position, ...]
    direction: Optional[Direction]
    alive: bool
    score: int
    death_reason: Optional[str] = None
    death_round: Optional[int] = None

    @property
    def head(self) -> Optional[Position]:
        return self.positions[0] if self.positions else None


class Snake:
    """
    Represents a snake on the board.

    Attributes:
        snake_id: stable identifier, used as the roster key
        player: object with a ``get_move(game_state)`` method deciding moves
        positions: deque of Position from head at index 0 to tail at the end
        direction: current heading, kept until a legal decision replaces it
        alive: whether this snake is still alive
        score: fruit value eaten so far
        death_reason: e.g., 'wall', 'collision'
        death_round: The round number when the snake died
    """

    def __init__(self, snake_id: str, player=None, name: Optional[str] = None):
        self.snake_id = snake_id
        self.player = player
        player_name = getattr(player, 'name', None)
        if not isinstance(player_name, str):
            player_name = None
        self.name = name or player_name or (
            player.__class__.__name__ if player is not None else snake_id
        )
        self.positions: deque = deque()
        self.direction: Optional[Direction] = None
        self.alive = True
        self.score = 0
        self.death_reason: Optional[str] = None
        self.death_round: Optional[int] = None

    @property
    def head(self) -> Position:
        """Return the head position (first element)."""
        return self.positions[0]

    @property
    def tail(self) -> Position:
        return self.positions[-1]

    @property
    def length(self) -> int:
        return len(self.positions)

    def place_on_board(self, positions: Iterable[Position], direction: Direction) -> None:
        self.positions = deque(positions)
        if not self.positions:
            raise ValueError(f"Snake {self.snake_id} needs at least one body segment.")
        self.direction = direction

    def move_head(self, position: Position) -> None:
        self.positions.appendleft(position)

    def remove_tail(self) -> Position:
        return self.positions.pop()

    def kill(self, reason: str, round_number: int) -> None:
        if not self.alive:
            return
        self.alive = False
        self.death_reason = reason
        self.death_round = round_number

    def add_score(self, points: int) -> None:
        self.score += points

    def view(self) -> SnakeView:
        return SnakeView(
            snake_id=self.snake_id,
            name=self.name,
            positions=tuple(self.positions),
            direction=self.direction,
            alive=self.alive,
            score=self.score,
            death_reason=self.death_reason,
            death_round=self.death_round,
        )

    def __repr__(self):
        return f"<Snake {self.snake_id} ({self.name}) alive={self.alive} score={self.score} length={self.length}>"
