"""
Base agent interface for automated Minesweeper players.

Agents play through MinesweeperEnv: they see the observation array and
pick a cell index (y * width + x) to click.
"""
from abc import ABC, abstractmethod
from typing import Optional

import numpy as np


class BaseAgent(ABC):
    """Chooses the next click from an observation."""

    def __init__(self, board_width: int, board_height: int) -> None:
        self.board_width = board_width
        self.board_height = board_height

    @abstractmethod
    def select_action(
        self,
        observation: np.ndarray,
        valid_actions: Optional[np.ndarray] = None,
    ) -> int:
        """
        Pick the next cell to click.

        Args:
            observation: Board observation, one value per cell.
            valid_actions: Flat mask of clickable cells; derived from the
                observation when omitted.
        """

    @staticmethod
    def hidden_mask(observation: np.ndarray) -> np.ndarray:
        """Flat mask of cells that are hidden and unflagged."""
        return observation.flatten() == -1

    def reset(self) -> None:
        """Forget per-game state before a new board."""
