"""
Registry for bundled player strategies.

Maps variant keys (e.g., 'random', 'greedy') to player classes. To add a
strategy, create a module with a Player subclass, import it here and add
an entry to PLAYER_VARIANT_LOADERS.
"""

from typing import Callable, Dict, List, Optional, Type

from .base import Player


# Lazy imports keep the registry importable on its own
def _get_random_player() -> Type[Player]:
    from .random_player import RandomPlayer
    return RandomPlayer


def _get_greedy_player() -> Type[Player]:
    from .greedy_player import GreedyPlayer
    return GreedyPlayer


def _get_slow_player() -> Type[Player]:
    from .slow_player import SlowPlayer
    return SlowPlayer


# Registry: maps variant key -> callable that returns the player class
PLAYER_VARIANT_LOADERS: Dict[str, Callable[[], Type[Player]]] = {
    "random": _get_random_player,
    "greedy": _get_greedy_player,
    "slow": _get_slow_player,
}

DEFAULT_VARIANT = "random"

# Canonical list of available variant keys
AVAILABLE_VARIANTS = list(PLAYER_VARIANT_LOADERS.keys())


def get_player_class(variant_key: Optional[str] = None) -> Type[Player]:
    """
    Get the player class for a given variant key.

    Args:
        variant_key: One of 'random', 'greedy', 'slow'. If None or empty, returns the default.

    Returns:
        The player class (subclass of Player).

    Raises:
        ValueError: If variant_key is not recognized.
    """
    if not variant_key or variant_key.strip() == "":
        variant_key = DEFAULT_VARIANT

    variant_key = variant_key.strip().lower()

    if variant_key not in PLAYER_VARIANT_LOADERS:
        available = ", ".join(AVAILABLE_VARIANTS)
        raise ValueError(
            f"Unknown player variant '{variant_key}'. Available variants: {available}"
        )

    return PLAYER_VARIANT_LOADERS[variant_key]()


def list_variants() -> List[dict]:
    """
    Return metadata about all available player variants.

    Returns:
        List of dicts with 'key' and 'description' for each variant.
    """
    return [
        {"key": "random", "description": "Random safe move each tick"},
        {"key": "greedy", "description": "Steers towards the nearest fruit, avoiding lethal squares"},
        {"key": "slow", "description": "Sleeps far beyond the thinking time, then turns west"},
    ]
