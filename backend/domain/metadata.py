"""
Match configuration.

Values come from the caller, or from environment variables (optionally
loaded from a .env file) through ``Metadata.from_env``.
"""

import os
from dataclasses import dataclass
from typing import Optional

from dotenv import load_dotenv

from .constants import (
    DEFAULT_BOARD_HEIGHT,
    DEFAULT_BOARD_WIDTH,
    DEFAULT_FRUIT_FREQUENCY,
    DEFAULT_FRUIT_GOAL,
    DEFAULT_GROWTH_FREQUENCY,
    DEFAULT_THINKING_TIME,
)


@dataclass(frozen=True)
class Metadata:
    """
    Read-only settings for one match.

    Attributes:
        board_width, board_height: board dimensions, walls included
        growth_frequency: snakes grow on every tick divisible by this
        fruit_frequency: a fruit spawns on every tick divisible by this
        thinking_time: per-tick decision deadline in seconds
        fruit_goal: score that ends the match as soon as one snake reaches it
    """

    board_width: int = DEFAULT_BOARD_WIDTH
    board_height: int = DEFAULT_BOARD_HEIGHT
    growth_frequency: int = DEFAULT_GROWTH_FREQUENCY
    fruit_frequency: int = DEFAULT_FRUIT_FREQUENCY
    thinking_time: float = DEFAULT_THINKING_TIME
    fruit_goal: int = DEFAULT_FRUIT_GOAL

    def __post_init__(self):
        if self.board_width < 3 or self.board_height < 3:
            raise ValueError(
                f"Board must be at least 3x3 to have an interior, got {self.board_width}x{self.board_height}."
            )
        if self.growth_frequency < 1:
            raise ValueError(f"growth_frequency must be >= 1, got {self.growth_frequency}.")
        if self.fruit_frequency < 1:
            raise ValueError(f"fruit_frequency must be >= 1, got {self.fruit_frequency}.")
        if self.thinking_time <= 0:
            raise ValueError(f"thinking_time must be positive, got {self.thinking_time}.")
        if self.fruit_goal < 1:
            raise ValueError(f"fruit_goal must be >= 1, got {self.fruit_goal}.")

    @classmethod
    def from_env(cls, dotenv_path: Optional[str] = None) -> "Metadata":
        """
        Build match settings from SNAKE_* environment variables.

        Variables that are unset fall back to the defaults in constants.py.
        """
        load_dotenv(dotenv_path)
        return cls(
            board_width=int(os.getenv("SNAKE_BOARD_WIDTH", DEFAULT_BOARD_WIDTH)),
            board_height=int(os.getenv("SNAKE_BOARD_HEIGHT", DEFAULT_BOARD_HEIGHT)),
            growth_frequency=int(os.getenv("SNAKE_GROWTH_FREQUENCY", DEFAULT_GROWTH_FREQUENCY)),
            fruit_frequency=int(os.getenv("SNAKE_FRUIT_FREQUENCY", DEFAULT_FRUIT_FREQUENCY)),
            thinking_time=float(os.getenv("SNAKE_THINKING_TIME", DEFAULT_THINKING_TIME)),
            fruit_goal=int(os.getenv("SNAKE_FRUIT_GOAL", DEFAULT_FRUIT_GOAL)),
        )
