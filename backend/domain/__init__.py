"""
Domain entities for the Snake Arena game engine.

This module contains the core game entities that are independent of
how matches are driven (threads, launchers, etc.).
"""

from .position import Position
from .direction import Direction
from .game_objects import GameObjectType, SnakeSegment, WALL, FRUIT
from .board import Board, BoardSnapshot, Square, create_standard_board
from .snake import Snake, SnakeView
from .metadata import Metadata
from .game_state import GameState
from .replay import Frame, RecordedGame
from .game_result import GameResult

__all__ = [
    'Position',
    'Direction',
    'GameObjectType', 'SnakeSegment', 'WALL', 'FRUIT',
    'Board', 'BoardSnapshot', 'Square', 'create_standard_board',
    'Snake', 'SnakeView',
    'Metadata',
    'GameState',
    'Frame', 'RecordedGame',
    'GameResult',
]
