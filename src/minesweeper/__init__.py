"""
Minesweeper game engine.

Provides board construction, the reveal cascade, flagging, win/loss
detection, session score and difficulty presets, and snapshot
persistence for the front end.
"""
from .cell import Cell, CellDisplay, CellState, DisplayKind
from .board import Board, BoardConfig
from .errors import InvalidConfiguration
from .reveal import RevealOutcome, reveal
from .state import GameState, GameStatus
from .session import Difficulty, PRESETS, Session
from .persistence import DEFAULT_SAVE_PATH, load_session, save_session
from .environment import MinesweeperEnv, render_text

__all__ = [
    "Cell",
    "CellDisplay",
    "CellState",
    "DisplayKind",
    "Board",
    "BoardConfig",
    "InvalidConfiguration",
    "RevealOutcome",
    "reveal",
    "GameState",
    "GameStatus",
    "Difficulty",
    "PRESETS",
    "Session",
    "DEFAULT_SAVE_PATH",
    "load_session",
    "save_session",
    "MinesweeperEnv",
    "render_text",
]
