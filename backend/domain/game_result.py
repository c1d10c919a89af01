"""
GameResult - the roster and outcome of a match.
"""

from typing import Dict, Iterable, List

from .constants import LOST, TIED, WON
from .metadata import Metadata
from .snake import SnakeView


class GameResult:
    """
    Outcome report built from the session roster.

    Winners are the snakes with the highest score; among equal scores,
    snakes still alive beat dead ones. Several remaining winners tie.

    Attributes:
        snakes: snake_id -> SnakeView at the time the result was built
        metadata: match settings
        turns: number of ticks played
        final: whether the match had ended when the result was built
        winners: ids of the winning snakes
        results: snake_id -> 'won' | 'lost' | 'tied'
    """

    def __init__(self, snakes: Iterable[SnakeView], metadata: Metadata, turns: int = 0, final: bool = True):
        self.snakes: Dict[str, SnakeView] = {view.snake_id: view for view in snakes}
        self.metadata = metadata
        self.turns = turns
        self.final = final
        self.winners: List[str] = self._decide_winners()
        self.results: Dict[str, str] = {}
        for sid in self.snakes:
            if sid in self.winners:
                self.results[sid] = TIED if len(self.winners) > 1 else WON
            else:
                self.results[sid] = LOST

    def _decide_winners(self) -> List[str]:
        if not self.snakes:
            return []
        best = max((view.score, view.alive) for view in self.snakes.values())
        return sorted(sid for sid, view in self.snakes.items() if (view.score, view.alive) == best)

    @property
    def scores(self) -> Dict[str, int]:
        return {sid: view.score for sid, view in self.snakes.items()}

    def __repr__(self):
        return f"<GameResult turns={self.turns} final={self.final} results={self.results}>"
