"""
Gymnasium environment wrapper for Minesweeper.

Lets agents drive the engine through a standard RL interface, using the
same click API as the interactive front end.
"""
import random
from typing import Any, Dict, Optional, Tuple, SupportsFloat

import gymnasium as gym
import numpy as np
from gymnasium import spaces

from .board import BoardConfig
from .session import Difficulty, Session
from .state import GameState


# ============================================================================
# Minesweeper Environment
# ============================================================================

class MinesweeperEnv(gym.Env):
    """
    Gymnasium environment for Minesweeper.

    Observation:
        2D array (height x width) where:
        - -1 = hidden cell
        - -2 = flagged cell
        - 0-8 = revealed cell with adjacent mine count
        - 9 = revealed mine

    Actions:
        Discrete action space of size width * height.
        Action i clicks the cell at x = i % width, y = i // width.

    Rewards:
        - +1 for revealing a safe cell
        - +10 for winning the game
        - -10 for hitting a mine
        - -0.1 for clicking an already revealed cell
    """

    metadata = {"render_modes": ["human", "ansi"], "render_fps": 4}

    def __init__(
        self,
        config: Optional[BoardConfig] = None,
        render_mode: Optional[str] = None,
    ) -> None:
        """
        Initialize the Minesweeper environment.

        Args:
            config: Board configuration (default: the easy preset).
            render_mode: How to render the environment.
        """
        super().__init__()

        self.config = config or Difficulty.EASY.config
        self.session = Session(
            game=GameState.new(
                self.config.width, self.config.height, self.config.mines_count
            )
        )
        self.render_mode = render_mode

        self.observation_space = spaces.Box(
            low=-2,
            high=9,
            shape=(self.config.height, self.config.width),
            dtype=np.int8,
        )
        self.action_space = spaces.Discrete(self.config.total_cells)

        self._steps = 0
        self._total_safe_cells = self.config.total_cells - self.config.mines_count

    def reset(
        self,
        *,
        seed: Optional[int] = None,
        options: Optional[Dict[str, Any]] = None,
    ) -> Tuple[np.ndarray, Dict[str, Any]]:
        """
        Deal a fresh board for a new episode.

        Args:
            seed: Random seed for reproducibility.
            options: Additional options (unused).

        Returns:
            Tuple of (observation, info dict).
        """
        super().reset(seed=seed)
        self.session.rng = random.Random(int(self.np_random.integers(2**32)))
        self.session.restart()
        self._steps = 0

        return self.session.game.get_observation(), self._get_info()

    def step(
        self, action: int
    ) -> Tuple[np.ndarray, SupportsFloat, bool, bool, Dict[str, Any]]:
        """
        Click one cell.

        Args:
            action: Cell index to click (y * width + x).

        Returns:
            Tuple of (observation, reward, terminated, truncated, info).
        """
        x, y = self._action_to_position(action)
        self._steps += 1

        reward = self._calculate_reward(x, y)
        observation = self.session.game.get_observation()
        terminated = not self.session.game.is_playing

        return observation, reward, terminated, False, self._get_info()

    def _action_to_position(self, action: int) -> Tuple[int, int]:
        """Convert flat action index to (x, y) position."""
        return int(action) % self.config.width, int(action) // self.config.width

    def _calculate_reward(self, x: int, y: int) -> float:
        """Click the cell and score the result."""
        if not self.session.click(x, y):
            return -0.1
        if self.session.game_won:
            return 10.0
        if self.session.game_over:
            return -10.0
        return 1.0

    def _get_info(self) -> Dict[str, Any]:
        """Get info dictionary for current state."""
        game = self.session.game
        return {
            "steps": self._steps,
            "revealed": game.board.revealed_count(),
            "total_safe": self._total_safe_cells,
            "game_state": game.status.name,
            "mines_left": game.mines_left,
            "score": self.session.score,
        }

    def render(self) -> Optional[str]:
        """Render the current board state."""
        if self.render_mode == "ansi":
            return render_text(self.session.game.get_observation())
        if self.render_mode == "human":
            print(render_text(self.session.game.get_observation()))
        return None

    def get_action_mask(self) -> np.ndarray:
        """
        Get mask of valid actions.

        Returns:
            Boolean array where True = hidden, unflagged cell.
        """
        return self.session.game.get_observation().flatten() == -1


def render_text(obs: np.ndarray) -> str:
    """Render an observation array as rows of single characters."""
    symbols = {-1: ".", -2: "F", 9: "*", 0: " "}
    lines = []
    for row in obs:
        lines.append(" ".join(symbols.get(int(v), str(int(v))) for v in row))
    return "\n".join(lines)
