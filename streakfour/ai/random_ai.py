"""Uniform random column picker."""

import random

from ..core.types import GameState
from .interface import AIInterface


class RandomAI(AIInterface):
    """Random move AI.

    Picks any column with equal probability, full or not. Only the board's
    column count is consulted, never its cells.

    Args:
        seed: Seed for a private `random.Random` (ignored when `rng` is given)
        rng: Random source to draw from, for sharing or replacing the generator
    """

    def __init__(self, seed: int | None = None, rng: random.Random | None = None):
        self.seed = seed
        self._rng = rng or random.Random(seed)

    def get_move(self, state: GameState) -> int:
        columns = state.board.columns
        if columns < 1:
            raise ValueError("Board has no columns")
        return self._rng.randrange(columns)

    def get_name(self) -> str:
        return "Random AI" if self.seed is None else f"Random AI (seed={self.seed})"

    def get_move_with_explanation(self, state: GameState) -> tuple[int, str]:
        move = self.get_move(state)
        return move, f"Randomly selected column {move}"
