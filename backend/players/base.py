"""
Base player interface for the game engine.
"""

from domain.direction import Direction
from domain.game_state import GameState


class Player:
    """
    Base class/interface for player logic.

    Each player is responsible for returning a direction for its snake_id
    given the current game state. Calls run on worker threads and may be
    abandoned once the per-tick thinking time runs out.
    """

    def __init__(self, snake_id: str):
        self.snake_id = snake_id

    def get_move(self, game_state: GameState) -> Direction:
        """
        Return a move direction given the current game state.

        Args:
            game_state: Read-only snapshot of the game

        Returns:
            One of Direction.NORTH, WEST, SOUTH or EAST. Reversing the current
            heading is ignored by the engine.
        """
        raise NotImplementedError

    def safe_directions(self, game_state: GameState):
        """Directions that neither reverse the snake nor step onto a lethal square."""
        me = game_state.snake(self.snake_id)
        candidates = [d for d in Direction if me.direction is None or d != me.direction.opposite()]
        return [d for d in candidates if not game_state.board.is_lethal(d.step(me.head))]
