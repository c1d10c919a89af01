"""
Greedy player - heads for the closest fruit.
"""

from domain.direction import Direction
from domain.game_state import GameState
from domain.position import Position
from .base import Player


def _manhattan(a: Position, b: Position) -> int:
    return abs(a.x - b.x) + abs(a.y - b.y)


class GreedyPlayer(Player):
    """
    Moves towards the nearest fruit (Manhattan distance) using only safe
    directions. Without a reachable-looking fruit it keeps its heading while
    that is safe, then turns.
    """

    def get_move(self, game_state: GameState) -> Direction:
        me = game_state.snake(self.snake_id)
        safe_moves = self.safe_directions(game_state)
        if not safe_moves:
            return me.direction or Direction.NORTH

        fruits = game_state.board.fruit_positions()
        if fruits:
            target = min(fruits, key=lambda fruit: _manhattan(me.head, fruit))
            return min(safe_moves, key=lambda d: (_manhattan(d.step(me.head), target), d != me.direction))

        if me.direction in safe_moves:
            return me.direction
        return safe_moves[0]
