"""
Automated players for the Minesweeper engine.

Provides:
- BaseAgent: Interface for agents that play through MinesweeperEnv
- RandomAgent: Clicks random hidden cells
- Evaluator: Plays many games and aggregates results
"""
from .base_agent import BaseAgent
from .random_agent import RandomAgent
from .evaluator import Evaluator, save_results

__all__ = [
    "BaseAgent",
    "RandomAgent",
    "Evaluator",
    "save_results",
]
