"""
Session - the tick engine for one match.

Each tick runs, in order: growth check, decision gathering, simultaneous
movement, collision and fruit resolution, fruit spawning, replay frame.
"""

import logging
import math
import random
import uuid
from typing import Dict, Iterable, List, Optional

from domain.board import Board, create_standard_board
from domain.constants import (
    DEATH_COLLISION,
    DEATH_WALL,
    EDGE_OFFSET,
    STARTING_SAFETY_RADIUS,
)
from domain.direction import Direction
from domain.game_objects import FRUIT, SnakeSegment
from domain.game_result import GameResult
from domain.game_state import GameState
from domain.metadata import Metadata
from domain.position import Position
from domain.replay import Frame, RecordedGame
from domain.snake import Snake
from .decision_gatherer import DecisionGatherer


logger = logging.getLogger(__name__)


def get_starting_head_positions(num_snakes: int, width: int, height: int) -> List[Position]:
    """
    Spread ``num_snakes`` heads evenly on a circle centred on the board.

    Each head is at least EDGE_OFFSET squares from the edge on each axis, but
    no other checks are made: squeezing many snakes onto a small board can
    produce overlapping starts.
    """
    x_center = width // 2
    y_center = height // 2
    angle_step = 2 * math.pi / num_snakes if num_snakes else 0.0

    positions = []
    for i in range(num_snakes):
        angle = i * angle_step
        x = int((x_center - EDGE_OFFSET) * math.cos(angle))
        y = int((y_center - EDGE_OFFSET) * math.sin(angle))
        positions.append(Position(x_center + x, y_center + y))
    return positions


class Session:
    """
    Manages:
      - Board (walls, fruit, snake segments)
      - Snakes, keyed by snake_id
      - Decision gathering with a per-tick deadline
      - Replay history

    Attributes:
        metadata: match settings
        board: the live board
        recorded_game: replay frames, one per tick
        game_id: unique id for this match
    """

    def __init__(
        self,
        metadata: Metadata,
        rng: Optional[random.Random] = None,
        gatherer: Optional[DecisionGatherer] = None,
        game_id: Optional[str] = None,
    ):
        self.metadata = metadata
        self.rng = rng or random.Random()
        self.gatherer = gatherer or DecisionGatherer(metadata.thinking_time)
        self.game_id = game_id or str(uuid.uuid4())

        self._snakes: Dict[str, Snake] = {}
        self.board: Board = create_standard_board(metadata.board_width, metadata.board_height)
        self.recorded_game = RecordedGame(metadata, self.board.snapshot())

    # ------------------------------------------------------------------
    # Roster
    # ------------------------------------------------------------------

    def add_snake(self, snake: Snake) -> None:
        if snake is None:
            raise ValueError("Trying to add a null Snake.")
        if snake.snake_id in self._snakes:
            raise ValueError(f"Snake with id {snake.snake_id} already exists.")
        self._snakes[snake.snake_id] = snake

    def remove_snake(self, snake_id: str) -> None:
        if snake_id not in self._snakes:
            raise ValueError(f"No such snake exists: {snake_id}")
        snake = self._snakes.pop(snake_id)
        for position in snake.positions:
            self.board.remove_occupant(SnakeSegment(snake_id), position)

    @property
    def snakes(self) -> Dict[str, Snake]:
        return dict(self._snakes)

    def living_snakes(self) -> List[Snake]:
        return [snake for snake in self._snakes.values() if snake.alive]

    @property
    def turn_count(self) -> int:
        return self.recorded_game.turn_count

    # ------------------------------------------------------------------
    # Setup
    # ------------------------------------------------------------------

    def place_snake(self, snake: Snake, positions: Iterable[Position], direction: Direction) -> None:
        """Put a roster snake on the board with the given body and heading."""
        if snake.snake_id not in self._snakes:
            raise ValueError(f"No such snake exists: {snake.snake_id}")
        snake.place_on_board(positions, direction)
        for position in snake.positions:
            self.board.add_occupant(SnakeSegment(snake.snake_id), position)

    def prepare_for_start(self) -> None:
        """Place every snake as a single segment on the starting circle, heading NORTH."""
        starts = get_starting_head_positions(
            len(self._snakes), self.board.width, self.board.height
        )
        for snake, position in zip(self._snakes.values(), starts):
            if self.board.has_lethal_occupant_within_radius(position, STARTING_SAFETY_RADIUS):
                logger.warning(f"Snake {snake.snake_id} starts close to a lethal square at {position}.")
            self.place_snake(snake, [position], Direction.NORTH)
            logger.info(f"Placed snake '{snake.snake_id}' ({snake.name}) at {position}.")
        logger.info(
            f"Game {self.game_id} ready: {len(self._snakes)} snakes on a "
            f"{self.board.width}x{self.board.height} board."
        )

    # ------------------------------------------------------------------
    # Game state
    # ------------------------------------------------------------------

    def get_current_state(self) -> GameState:
        """Return a read-only snapshot of the current match."""
        return GameState(
            round_number=self.turn_count,
            board=self.board.snapshot(),
            snakes={sid: snake.view() for sid, snake in self._snakes.items()},
            metadata=self.metadata,
        )

    def has_ended(self) -> bool:
        living = len(self.living_snakes())

        if living == 0 or (living < 2 and len(self._snakes) > 2):
            return True

        return any(snake.score >= self.metadata.fruit_goal for snake in self._snakes.values())

    def get_game_result(self) -> GameResult:
        """
        Note that this method does not guarantee that the game has ended.
        Check has_ended() first before treating the result as final.
        """
        return GameResult(
            (snake.view() for snake in self._snakes.values()),
            self.metadata,
            turns=self.turn_count,
            final=self.has_ended(),
        )

    # ------------------------------------------------------------------
    # Tick
    # ------------------------------------------------------------------

    def tick(self) -> None:
        """
        Move all the snakes simultaneously. In addition to movement, it also
        checks for collisions, kills colliding snakes, adds points when fruit
        is eaten, maybe spawns fruit and records a replay frame.
        """
        for snake in self.living_snakes():
            if not snake.positions or snake.direction is None:
                raise RuntimeError(
                    f"Snake {snake.snake_id} has not been placed; call prepare_for_start() first."
                )

        turn = self.turn_count
        growth = self._check_for_growth()
        moves = self.gatherer.gather(self.get_current_state(), self.living_snakes())
        self._move_all_snakes(moves, growth)
        self._check_for_collisions()
        if self._perhaps_spawn_fruit():
            logger.info(f"Turn {turn}: fruit spawned.")

        scores = {sid: snake.score for sid, snake in self._snakes.items()}
        self.recorded_game.add_frame(Frame(
            turn=turn,
            board=self.board.snapshot(),
            scores=scores,
            alive={sid: snake.alive for sid, snake in self._snakes.items()},
        ))
        logger.debug(
            f"Finished turn {turn}. Alive: {[s.snake_id for s in self.living_snakes()]}, Scores: {scores}"
        )

    def run(self, max_turns: Optional[int] = None) -> GameResult:
        """Tick until the match ends (or ``max_turns`` ticks have been played)."""
        while not self.has_ended():
            if max_turns is not None and self.turn_count >= max_turns:
                logger.info(f"Game {self.game_id} stopped after {max_turns} turns without a decision.")
                break
            self.tick()

        result = self.get_game_result()
        logger.info(f"Game {self.game_id} over after {result.turns} turns: {result.results}")
        return result

    def _check_for_growth(self) -> bool:
        return self.turn_count % self.metadata.growth_frequency == 0

    def _move_all_snakes(self, moves: Dict[str, Direction], grow: bool) -> None:
        # New heads only add segments and old tails only remove this snake's
        # own segments, so the order over snakes does not matter.
        for snake_id, direction in moves.items():
            self._move_snake(self._snakes[snake_id], direction, grow)

    def _move_snake(self, snake: Snake, direction: Direction, grow: bool) -> None:
        segment = SnakeSegment(snake.snake_id)
        current_tail = snake.tail
        new_head = direction.step(snake.head)

        self.board.add_occupant(segment, new_head)
        snake.move_head(new_head)
        if not grow:
            self.board.remove_occupant(segment, current_tail)
            snake.remove_tail()

    def _check_for_collisions(self) -> None:
        turn = self.turn_count
        for snake in self.living_snakes():
            square = self.board.square(snake.head)

            if square.has_wall():
                snake.kill(DEATH_WALL, turn)
            elif len(square.snake_ids()) > 1:
                snake.kill(DEATH_COLLISION, turn)

            if not snake.alive:
                logger.info(f"Snake {snake.snake_id} ({snake.name}) died: {snake.death_reason} at {snake.head}.")
                continue

            if square.has_fruit():
                snake.add_score(square.eat_fruit())

    def _perhaps_spawn_fruit(self) -> bool:
        if self.turn_count % self.metadata.fruit_frequency != 0:
            return False

        if not self.board.empty_interior_positions():
            logger.warning(f"Game {self.game_id}: no empty interior square left, skipping fruit spawn.")
            return False

        while True:
            x = self.rng.randint(1, self.board.width - 2)
            y = self.rng.randint(1, self.board.height - 2)
            position = Position(x, y)
            if not self.board.has_occupant(position):
                self.board.add_occupant(FRUIT, position)
                return True
