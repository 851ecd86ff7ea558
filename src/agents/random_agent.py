"""
Random clicking agent.

Clicks hidden cells uniformly at random; the `evaluate` command uses it
to play the engine end to end.
"""
from typing import Optional

import numpy as np

from .base_agent import BaseAgent


class RandomAgent(BaseAgent):
    """Clicks a random hidden cell, seeded for repeatable runs."""

    def __init__(
        self,
        board_width: int = 9,
        board_height: int = 9,
        seed: Optional[int] = None,
    ) -> None:
        super().__init__(board_width, board_height)
        self.rng = np.random.default_rng(seed)

    def select_action(
        self,
        observation: np.ndarray,
        valid_actions: Optional[np.ndarray] = None,
    ) -> int:
        if valid_actions is None:
            valid_actions = self.hidden_mask(observation)

        candidates = np.flatnonzero(valid_actions)
        if candidates.size == 0:
            return 0
        return int(self.rng.choice(candidates))
