"""
Run a local Snake Arena match between bundled bot players.

Usage:
    python main.py --players random greedy greedy --seed 7
    python main.py --players greedy slow --thinking-time 0.2 --max-turns 200
"""

import argparse
import json
import logging
import random
from dataclasses import replace
from typing import Dict, List, Optional

from dotenv import load_dotenv

from domain.metadata import Metadata
from domain.snake import Snake
from gameplay.session import Session
from players.random_player import RandomPlayer
from players.variant_registry import AVAILABLE_VARIANTS, get_player_class

load_dotenv()

logger = logging.getLogger(__name__)


def run_simulation(
    variants: List[str],
    metadata: Metadata,
    seed: Optional[int] = None,
    max_turns: Optional[int] = None,
) -> Dict:
    """
    Runs a single match between the given player variants.

    Args:
        variants: one registry key per snake, e.g. ['random', 'greedy']
        metadata: match settings
        seed: seeds fruit placement and the random players
        max_turns: optional cap on the number of ticks

    Returns:
        A dictionary summarizing the match (game_id, turns, final_scores, game_result).
    """
    rng = random.Random(seed)
    session = Session(metadata, rng=rng)

    for i, variant in enumerate(variants):
        snake_id = str(i)
        player_class = get_player_class(variant)
        if issubclass(player_class, RandomPlayer):
            player = player_class(snake_id, rng=random.Random(rng.random()))
        else:
            player = player_class(snake_id)
        session.add_snake(Snake(snake_id, player, name=f"{variant}-{snake_id}"))

    session.prepare_for_start()
    result = session.run(max_turns=max_turns)

    return {
        "game_id": session.game_id,
        "turns": result.turns,
        "ended": result.final,
        "final_scores": result.scores,
        "game_result": result.results,
    }


def main():
    parser = argparse.ArgumentParser(
        description="Run a Snake Arena match between bundled bot players."
    )
    parser.add_argument("--players", type=str, nargs='+', required=True,
                        help=f"One variant per snake ({', '.join(AVAILABLE_VARIANTS)})")
    parser.add_argument("--width", type=int, default=None, help="Board width, walls included")
    parser.add_argument("--height", type=int, default=None, help="Board height, walls included")
    parser.add_argument("--growth-frequency", type=int, default=None,
                        help="Snakes grow on every tick divisible by this")
    parser.add_argument("--fruit-frequency", type=int, default=None,
                        help="A fruit spawns on every tick divisible by this")
    parser.add_argument("--thinking-time", type=float, default=None,
                        help="Seconds each player gets per tick")
    parser.add_argument("--fruit-goal", type=int, default=None,
                        help="Score that wins the match outright")
    parser.add_argument("--max-turns", type=int, default=None,
                        help="Stop after this many ticks even if nobody has won")
    parser.add_argument("--seed", type=int, default=None, help="Random seed for a reproducible match")
    parser.add_argument("--log-level", type=str, default="INFO", help="Logging level (default: INFO)")

    args = parser.parse_args()

    logging.basicConfig(
        level=args.log_level.upper(),
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )

    overrides = {
        "board_width": args.width,
        "board_height": args.height,
        "growth_frequency": args.growth_frequency,
        "fruit_frequency": args.fruit_frequency,
        "thinking_time": args.thinking_time,
        "fruit_goal": args.fruit_goal,
    }
    metadata = replace(
        Metadata.from_env(),
        **{key: value for key, value in overrides.items() if value is not None}
    )

    result = run_simulation(args.players, metadata, seed=args.seed, max_turns=args.max_turns)

    print("\nSimulation Result Summary:")
    print(json.dumps(result, indent=2))


if __name__ == "__main__":
    main()
