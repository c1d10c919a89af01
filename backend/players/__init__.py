"""
Player implementations for Snake Arena.

This module contains the player abstraction and the bundled strategies
that control snake movement decisions.
"""

from .base import Player
from .random_player import RandomPlayer
from .greedy_player import GreedyPlayer
from .slow_player import SlowPlayer
from .variant_registry import get_player_class, list_variants, AVAILABLE_VARIANTS

__all__ = [
    'Player',
    'RandomPlayer',
    'GreedyPlayer',
    'SlowPlayer',
    'get_player_class',
    'list_variants',
    'AVAILABLE_VARIANTS',
]
