"""
Random player implementation - picks random safe moves.
"""

import random
from typing import Optional

from domain.direction import Direction
from domain.game_state import GameState
from .base import Player


class RandomPlayer(Player):
    """
    A random AI that picks a direction that avoids walls and snake bodies.
    """

    def __init__(self, snake_id: str, rng: Optional[random.Random] = None):
        super().__init__(snake_id)
        self.rng = rng or random.Random()

    def get_move(self, game_state: GameState) -> Direction:
        safe_moves = self.safe_directions(game_state)

        # If no safe moves, keep going (we'll die anyway)
        if not safe_moves:
            return game_state.snake(self.snake_id).direction or self.rng.choice(list(Direction))

        return self.rng.choice(safe_moves)
