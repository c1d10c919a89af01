"""
Tests for per-tick decision gathering: deadlines, faults and illegal moves.
"""

import os
import sys
import threading
import time
from unittest.mock import Mock

import pytest

# Add backend to path for imports
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from domain.board import create_standard_board
from domain.constants import ACCEPTED, FAULTED, INVALID, REVERSED, TIMED_OUT
from domain.direction import Direction
from domain.game_state import GameState
from domain.metadata import Metadata
from domain.position import Position
from domain.snake import Snake
from gameplay.decision_gatherer import DecisionGatherer, is_valid_move
from players.base import Player


def make_state():
    metadata = Metadata(board_width=10, board_height=10)
    return GameState(0, create_standard_board(10, 10).snapshot(), {}, metadata)


def make_snake(snake_id, player, direction=Direction.NORTH, position=Position(5, 5)):
    snake = Snake(snake_id, player, name=f"player-{snake_id}")
    snake.place_on_board([position], direction)
    return snake


def mock_player(**kwargs):
    return Mock(get_move=Mock(**kwargs))


class BlockingPlayer(Player):
    """Waits for the test to release it before answering."""

    def __init__(self, snake_id, release, move=Direction.EAST):
        super().__init__(snake_id)
        self.release = release
        self.move = move

    def get_move(self, game_state):
        self.release.wait(5)
        return self.move


@pytest.fixture
def release():
    event = threading.Event()
    yield event
    event.set()


class TestIsValidMove:

    @pytest.mark.parametrize("current, reverse", [
        (Direction.NORTH, Direction.SOUTH),
        (Direction.SOUTH, Direction.NORTH),
        (Direction.EAST, Direction.WEST),
        (Direction.WEST, Direction.EAST),
    ])
    def test_reverse_is_illegal(self, current, reverse):
        assert is_valid_move(current, reverse) is False

    @pytest.mark.parametrize("current", list(Direction))
    def test_everything_else_is_legal(self, current):
        for proposed in Direction:
            if proposed != current.opposite():
                assert is_valid_move(current, proposed) is True


class TestGather:

    def test_accepted_move_becomes_heading(self):
        snake = make_snake("0", mock_player(return_value=Direction.EAST))
        gatherer = DecisionGatherer(thinking_time=1.0)

        moves = gatherer.gather(make_state(), [snake])

        assert moves == {"0": Direction.EAST}
        assert snake.direction == Direction.EAST
        assert gatherer.last_outcomes == {"0": ACCEPTED}

    def test_keeping_heading_is_legal(self):
        snake = make_snake("0", mock_player(return_value=Direction.NORTH))
        moves = DecisionGatherer(thinking_time=1.0).gather(make_state(), [snake])
        assert moves == {"0": Direction.NORTH}

    def test_reversal_is_rejected(self):
        snake = make_snake("0", mock_player(return_value=Direction.SOUTH), direction=Direction.NORTH)
        gatherer = DecisionGatherer(thinking_time=1.0)

        moves = gatherer.gather(make_state(), [snake])

        assert moves == {"0": Direction.NORTH}
        assert snake.direction == Direction.NORTH
        assert gatherer.last_outcomes == {"0": REVERSED}

    def test_exception_means_straight_on(self):
        snake = make_snake("0", mock_player(side_effect=RuntimeError("boom")), direction=Direction.WEST)
        gatherer = DecisionGatherer(thinking_time=1.0)

        moves = gatherer.gather(make_state(), [snake])

        assert moves == {"0": Direction.WEST}
        assert snake.direction == Direction.WEST
        assert gatherer.last_outcomes == {"0": FAULTED}

    def test_non_direction_result_means_straight_on(self):
        snake = make_snake("0", mock_player(return_value="UP"), direction=Direction.EAST)
        gatherer = DecisionGatherer(thinking_time=1.0)

        moves = gatherer.gather(make_state(), [snake])

        assert moves == {"0": Direction.EAST}
        assert gatherer.last_outcomes == {"0": INVALID}

    def test_missing_player_is_a_fault(self):
        snake = make_snake("0", None, direction=Direction.SOUTH)
        gatherer = DecisionGatherer(thinking_time=1.0)

        assert gatherer.gather(make_state(), [snake]) == {"0": Direction.SOUTH}
        assert gatherer.last_outcomes == {"0": FAULTED}

    def test_dead_snakes_are_not_asked(self):
        player = mock_player(return_value=Direction.EAST)
        dead = make_snake("0", player)
        dead.kill("wall", 0)

        moves = DecisionGatherer(thinking_time=1.0).gather(make_state(), [dead])

        assert moves == {}
        player.get_move.assert_not_called()

    def test_every_player_gets_the_same_snapshot_once(self):
        players = [mock_player(return_value=Direction.EAST) for _ in range(3)]
        snakes = [make_snake(str(i), p) for i, p in enumerate(players)]
        state = make_state()

        DecisionGatherer(thinking_time=1.0).gather(state, snakes)

        for player in players:
            player.get_move.assert_called_once_with(state)

    def test_one_faulty_player_does_not_affect_others(self):
        good = make_snake("0", mock_player(return_value=Direction.EAST))
        bad = make_snake("1", mock_player(side_effect=ValueError("nope")), direction=Direction.SOUTH)
        gatherer = DecisionGatherer(thinking_time=1.0)

        moves = gatherer.gather(make_state(), [good, bad])

        assert moves == {"0": Direction.EAST, "1": Direction.SOUTH}
        assert gatherer.last_outcomes == {"0": ACCEPTED, "1": FAULTED}

    def test_no_living_snakes(self):
        gatherer = DecisionGatherer(thinking_time=1.0)
        assert gatherer.gather(make_state(), []) == {}
        assert gatherer.last_outcomes == {}


class TestDeadline:

    def test_late_player_goes_straight(self, release):
        snake = make_snake("0", BlockingPlayer("0", release, move=Direction.EAST), direction=Direction.NORTH)
        gatherer = DecisionGatherer(thinking_time=0.1)

        moves = gatherer.gather(make_state(), [snake])

        assert moves == {"0": Direction.NORTH}
        assert snake.direction == Direction.NORTH
        assert gatherer.last_outcomes == {"0": TIMED_OUT}

    def test_wait_is_shared_not_cumulative(self, release):
        """Eight stalled players cost one deadline, not eight."""
        thinking_time = 0.2
        snakes = [make_snake(str(i), BlockingPlayer(str(i), release)) for i in range(8)]
        gatherer = DecisionGatherer(thinking_time=thinking_time)

        started = time.monotonic()
        moves = gatherer.gather(make_state(), snakes)
        elapsed = time.monotonic() - started

        assert elapsed < thinking_time * 4
        assert set(gatherer.last_outcomes.values()) == {TIMED_OUT}
        assert all(direction == Direction.NORTH for direction in moves.values())

    def test_fast_players_do_not_wait_for_the_deadline(self):
        snakes = [make_snake(str(i), mock_player(return_value=Direction.EAST)) for i in range(4)]
        gatherer = DecisionGatherer(thinking_time=5.0)

        started = time.monotonic()
        gatherer.gather(make_state(), snakes)

        assert time.monotonic() - started < 2.0

    def test_mixed_fast_and_stalled_players(self, release):
        fast = make_snake("0", mock_player(return_value=Direction.WEST))
        slow = make_snake("1", BlockingPlayer("1", release, move=Direction.EAST))
        gatherer = DecisionGatherer(thinking_time=0.2)

        moves = gatherer.gather(make_state(), [fast, slow])

        assert moves == {"0": Direction.WEST, "1": Direction.NORTH}
        assert gatherer.last_outcomes == {"0": ACCEPTED, "1": TIMED_OUT}

    def test_late_answer_is_never_applied(self, release):
        snake = make_snake("0", BlockingPlayer("0", release, move=Direction.EAST))
        gatherer = DecisionGatherer(thinking_time=0.1)

        gatherer.gather(make_state(), [snake])
        release.set()
        time.sleep(0.2)

        assert snake.direction == Direction.NORTH
        assert gatherer.last_outcomes == {"0": TIMED_OUT}

    def test_next_gather_starts_fresh_after_a_straggler(self, release):
        player = Mock()
        player.get_move = Mock(side_effect=[Direction.WEST, Direction.SOUTH])
        stalled = make_snake("0", BlockingPlayer("0", release))
        snake = make_snake("1", player)
        gatherer = DecisionGatherer(thinking_time=0.1)

        gatherer.gather(make_state(), [stalled, snake])
        moves = gatherer.gather(make_state(), [snake])

        assert moves == {"1": Direction.SOUTH}
        assert gatherer.last_outcomes == {"1": ACCEPTED}
