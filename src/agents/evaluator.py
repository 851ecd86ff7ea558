"""
Agent evaluation for Minesweeper.

Plays many games through MinesweeperEnv and reports aggregate results.
"""
import json
import logging
from pathlib import Path
from typing import Dict, Optional, Union

from minesweeper.board import BoardConfig
from minesweeper.environment import MinesweeperEnv

from .base_agent import BaseAgent


logger = logging.getLogger(__name__)


# ============================================================================
# Agent Evaluator
# ============================================================================

class Evaluator:
    """
    Plays an agent through many games on a fixed board configuration.
    """

    def __init__(
        self,
        board_config: Optional[BoardConfig] = None,
        num_episodes: int = 100,
        max_steps: Optional[int] = None,
        seed: Optional[int] = None,
    ) -> None:
        """
        Initialize the evaluator.

        Args:
            board_config: Board configuration for evaluation.
            num_episodes: Number of games to play.
            max_steps: Click limit per game, defaults to the cell count.
            seed: Seed for the first board; later boards follow from it.
        """
        self.board_config = board_config or BoardConfig()
        self.num_episodes = num_episodes
        self.max_steps = max_steps or self.board_config.total_cells
        self.seed = seed

    def evaluate(self, agent: BaseAgent) -> Dict[str, float]:
        """
        Evaluate a single agent.

        Returns:
            Dictionary with win rate, reward, steps and revealed averages.
        """
        env = MinesweeperEnv(config=self.board_config)

        wins = 0
        total_reward = 0.0
        total_steps = 0
        total_revealed = 0

        for episode in range(self.num_episodes):
            seed = self.seed if episode == 0 else None
            observation, info = env.reset(seed=seed)
            agent.reset()

            for _ in range(self.max_steps):
                action = agent.select_action(observation, env.get_action_mask())
                observation, reward, terminated, truncated, info = env.step(action)

                total_reward += reward
                total_steps += 1

                if terminated or truncated:
                    break

            if info.get("game_state") == "WON":
                wins += 1
            total_revealed += info.get("revealed", 0)
            logger.debug("Episode %d finished: %s", episode + 1, info["game_state"])

        return {
            "win_rate": wins / self.num_episodes,
            "avg_reward": total_reward / self.num_episodes,
            "avg_steps": total_steps / self.num_episodes,
            "avg_revealed": total_revealed / self.num_episodes,
        }


def save_results(path: Union[str, Path], results: Dict[str, Dict[str, float]]) -> None:
    """Save evaluation results to JSON."""
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, "w") as f:
        json.dump(results, f, indent=2)
