"""
Slow player - takes far longer to decide than any sensible thinking time.

Useful for checking that one stalled player cannot hold up a match.
"""

import time

from domain.direction import Direction
from domain.game_state import GameState
from .base import Player


class SlowPlayer(Player):

    def __init__(self, snake_id: str, delay: float = 10.0, move: Direction = Direction.WEST):
        super().__init__(snake_id)
        self.delay = delay
        self.move = move

    def get_move(self, game_state: GameState) -> Direction:
        time.sleep(self.delay)
        return self.move
