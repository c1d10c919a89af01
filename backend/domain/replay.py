"""
In-memory replay recording: one immutable frame per tick.
"""

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import List, Mapping, Tuple

from .board import BoardSnapshot
from .metadata import Metadata


@dataclass(frozen=True)
class Frame:
    """
    The board and per-snake status after one tick.

    Attributes:
        turn: 0-based tick number this frame closes
        board: snapshot of the board after the tick
        scores: snake_id -> score
        alive: snake_id -> alive flag
    """

    turn: int
    board: BoardSnapshot
    scores: Mapping[str, int] = field(default_factory=dict)
    alive: Mapping[str, bool] = field(default_factory=dict)

    def __post_init__(self):
        object.__setattr__(self, "scores", MappingProxyType(dict(self.scores)))
        object.__setattr__(self, "alive", MappingProxyType(dict(self.alive)))

    def __hash__(self):
        return hash((self.turn, self.board))


class RecordedGame:
    """
    Replay history for one match: the starting board plus a frame per tick.
    """

    def __init__(self, metadata: Metadata, initial_board: BoardSnapshot):
        self.metadata = metadata
        self.initial_board = initial_board
        self._frames: List[Frame] = []

    def add_frame(self, frame: Frame) -> None:
        self._frames.append(frame)

    @property
    def turn_count(self) -> int:
        return len(self._frames)

    @property
    def frames(self) -> Tuple[Frame, ...]:
        return tuple(self._frames)

    def frame(self, turn: int) -> Frame:
        return self._frames[turn]

    def __len__(self):
        return len(self._frames)
