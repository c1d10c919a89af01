"""
Per-tick decision gathering.

Every living snake's player is asked for a move on its own worker thread.
The gatherer waits once for the shared thinking time, then takes whatever
has finished; anything late, broken or illegal becomes "keep going straight".
"""

import logging
import time
from concurrent.futures import Future, ThreadPoolExecutor, wait
from typing import Dict, Iterable, Optional, Set, Tuple

from domain.constants import ACCEPTED, FAULTED, INVALID, REVERSED, TIMED_OUT
from domain.direction import Direction
from domain.game_state import GameState
from domain.snake import Snake


logger = logging.getLogger(__name__)


def is_valid_move(current: Optional[Direction], proposed: Direction) -> bool:
    """A move is illegal only when it exactly reverses the current heading."""
    if current is None:
        return True
    return proposed != current.opposite()


def _ask_player(player, game_state: GameState):
    return player.get_move(game_state)


class DecisionGatherer:
    """
    Collects one direction per living snake within ``thinking_time`` seconds.

    Late players are abandoned, not stopped: their worker threads are not
    daemons and ``concurrent.futures`` joins them at interpreter exit, so a
    player that never returns keeps the process from exiting.

    Attributes:
        thinking_time: shared deadline for all players, in seconds
        last_outcomes: snake_id -> outcome label for the most recent gather
        last_elapsed: wall-clock seconds the most recent gather took
    """

    def __init__(self, thinking_time: float):
        self.thinking_time = thinking_time
        self.last_outcomes: Dict[str, str] = {}
        self.last_elapsed: float = 0.0

    def gather(self, game_state: GameState, snakes: Iterable[Snake]) -> Dict[str, Direction]:
        """
        Ask every living snake for its next move.

        Accepted directions become the snake's new heading. Every other snake
        gets its current heading back, unchanged.

        Args:
            game_state: immutable snapshot shared by all players this tick
            snakes: the roster; dead snakes are skipped

        Returns:
            Dictionary of snake_id -> Direction for every living snake.
        """
        alive_snakes = [snake for snake in snakes if snake.alive]
        moves: Dict[str, Direction] = {}
        outcomes: Dict[str, str] = {}
        started = time.monotonic()

        if alive_snakes:
            # A fresh pool per tick: a player stuck from an earlier tick cannot
            # occupy a worker that this tick needs.
            executor = ThreadPoolExecutor(
                max_workers=len(alive_snakes), thread_name_prefix="snake-decision"
            )
            try:
                futures = {
                    executor.submit(_ask_player, snake.player, game_state): snake
                    for snake in alive_snakes
                }
                done, _ = wait(futures, timeout=self.thinking_time)
            finally:
                executor.shutdown(wait=False, cancel_futures=True)

            for future, snake in futures.items():
                direction, outcome = self._collect(future, snake, done)
                moves[snake.snake_id] = direction
                outcomes[snake.snake_id] = outcome

        self.last_elapsed = time.monotonic() - started
        self.last_outcomes = outcomes
        logger.debug(f"Gathered {len(moves)} decisions in {self.last_elapsed:.3f}s: {outcomes}")
        return moves

    def _collect(self, future: Future, snake: Snake, done: Set[Future]) -> Tuple[Direction, str]:
        straight = snake.direction

        if future not in done:
            logger.warning(
                f"Snake {snake.snake_id} ({snake.name}) did not answer within "
                f"{self.thinking_time}s; continuing {straight.name if straight else None}."
            )
            return straight, TIMED_OUT

        error = future.exception()
        if error is not None:
            logger.warning(f"Snake {snake.snake_id} ({snake.name}) raised {error!r}; continuing straight.")
            return straight, FAULTED

        proposed = future.result()
        if not isinstance(proposed, Direction):
            logger.warning(f"Snake {snake.snake_id} ({snake.name}) returned {proposed!r}, not a Direction.")
            return straight, INVALID

        if not is_valid_move(snake.direction, proposed):
            logger.warning(
                f"Snake {snake.snake_id} ({snake.name}) tried to reverse from "
                f"{snake.direction.name} to {proposed.name}; ignored."
            )
            return straight, REVERSED

        snake.direction = proposed
        return proposed, ACCEPTED
