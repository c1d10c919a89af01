"""
Match orchestration: decision gathering and the tick engine.
"""

from .decision_gatherer import DecisionGatherer, is_valid_move
from .session import Session, get_starting_head_positions

__all__ = [
    'DecisionGatherer',
    'is_valid_move',
    'Session',
    'get_starting_head_positions',
]
