"""
GameState entity - a snapshot of the game at a point in time.
"""

from types import MappingProxyType
from typing import Dict, List, Mapping

from .board import BoardSnapshot
from .metadata import Metadata
from .snake import SnakeView


class GameState:
    """
    A read-only snapshot of the game handed to every player once per tick.

    Attributes:
        round_number: which round we are in (0-based)
        board: snapshot of every occupied square
        snakes: mapping of snake_id -> SnakeView
        metadata: the match settings
    """

    __slots__ = ("_round_number", "_board", "_snakes", "_metadata")

    def __init__(
        self,
        round_number: int,
        board: BoardSnapshot,
        snakes: Dict[str, SnakeView],
        metadata: Metadata,
    ):
        object.__setattr__(self, "_round_number", round_number)
        object.__setattr__(self, "_board", board)
        object.__setattr__(self, "_snakes", MappingProxyType(dict(snakes)))
        object.__setattr__(self, "_metadata", metadata)

    def __setattr__(self, name, value):
        raise AttributeError("GameState is read-only")

    @property
    def round_number(self) -> int:
        return self._round_number

    @property
    def board(self) -> BoardSnapshot:
        return self._board

    @property
    def snakes(self) -> Mapping[str, SnakeView]:
        return self._snakes

    @property
    def metadata(self) -> Metadata:
        return self._metadata

    @property
    def width(self) -> int:
        return self._board.width

    @property
    def height(self) -> int:
        return self._board.height

    def snake(self, snake_id: str) -> SnakeView:
        return self._snakes[snake_id]

    def living_snakes(self) -> List[SnakeView]:
        return [view for view in self._snakes.values() if view.alive]

    def print_board(self) -> str:
        return self._board.render()

    def __repr__(self):
        scores = {sid: view.score for sid, view in self._snakes.items()}
        return (
            f"<GameState round={self._round_number}, fruits={self._board.fruit_positions()}, "
            f"snakes={len(self._snakes)}, scores={scores}>"
        )
