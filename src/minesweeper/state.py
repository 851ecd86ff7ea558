"""
Game state module for Minesweeper.

Wraps a board with the per-game flags and the remaining-mine counter,
and runs the Playing -> Won / Lost state machine.
"""
import logging
import random
from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Any, Dict, List, Optional

import numpy as np

from .board import Board, BoardConfig
from .cell import Cell, CellDisplay
from .errors import InvalidConfiguration
from .fields import read_bool, read_int
from .reveal import RevealOutcome, reveal


logger = logging.getLogger(__name__)


# ============================================================================
# Constants
# ============================================================================

class GameStatus(Enum):
    """Possible states of the game."""

    PLAYING = auto()
    WON = auto()
    LOST = auto()


# ============================================================================
# Game State
# ============================================================================

@dataclass
class GameState:
    """
    One game in play.

    Attributes:
        board: The minefield.
        game_over: A mine was clicked.
        game_won: Every safe cell has been revealed.
        mines_left: Mines minus flags; a player-facing counter only, it
            may go negative.
    """

    board: Board = field(default_factory=Board)
    game_over: bool = False
    game_won: bool = False
    mines_left: int = 0

    @classmethod
    def new(
        cls,
        width: int,
        height: int,
        mines_count: int,
        rng: Optional[random.Random] = None,
    ) -> "GameState":
        """Start a game on a freshly generated board."""
        board = Board.generate(width, height, mines_count, rng)
        return cls(board=board, mines_left=mines_count)

    @classmethod
    def from_board(cls, board: Board) -> "GameState":
        """Start a game on an existing, untouched board."""
        return cls(board=board, mines_left=board.mines_count)

    # ========================================================================
    # State Accessors
    # ========================================================================

    @property
    def width(self) -> int:
        return self.board.width

    @property
    def height(self) -> int:
        return self.board.height

    @property
    def mines_count(self) -> int:
        return self.board.mines_count

    @property
    def status(self) -> GameStatus:
        """Get current game status."""
        if self.game_over:
            return GameStatus.LOST
        if self.game_won:
            return GameStatus.WON
        return GameStatus.PLAYING

    @property
    def is_playing(self) -> bool:
        """Check if game is still in progress."""
        return not (self.game_over or self.game_won)

    def cell(self, x: int, y: int) -> Cell:
        return self.board.cell(x, y)

    def display_grid(self) -> List[List[CellDisplay]]:
        """
        Build the display instructions for every cell, row by row.

        After a loss every mine is shown, revealed or not.
        """
        return [
            [cell.display(show_mine=self.game_over) for cell in row]
            for row in self.board.grid
        ]

    def get_observation(self) -> np.ndarray:
        return self.board.get_observation()

    # ========================================================================
    # Game Actions
    # ========================================================================

    def reveal(self, x: int, y: int, is_direct_click: bool = True) -> RevealOutcome:
        """
        Reveal a cell and apply the outcome to this game.

        A direct click on a mine ends the game. Each flagged cell the
        reveal uncovers hands its flag back to ``mines_left``.

        Args:
            x: Column index.
            y: Row index.
            is_direct_click: Whether the player clicked this cell.

        Returns:
            What the reveal did; empty once the game has ended.
        """
        if not self.is_playing:
            return RevealOutcome()

        outcome = reveal(self.board, x, y, is_direct_click)
        self.mines_left += outcome.flags_cleared
        if outcome.hit_mine:
            self.game_over = True
            logger.info("Mine hit at (%d, %d), game lost", x, y)
        return outcome

    def click(self, x: int, y: int) -> bool:
        """
        Handle a direct click on a cell.

        Returns:
            True if any cell was revealed, False otherwise.
        """
        return self.reveal(x, y, is_direct_click=True).changed

    def toggle_flag(self, x: int, y: int) -> bool:
        """
        Toggle flag on an unrevealed cell and adjust ``mines_left``.

        Returns:
            True if flag was toggled, False otherwise.
        """
        if not self.is_playing:
            return False
        cell = self.board.cell(x, y)
        if not cell.toggle_flag():
            return False
        self.mines_left += -1 if cell.is_flagged else 1
        return True

    def check_win(self) -> bool:
        """
        Mark the game won once every safe cell is revealed.

        An empty zero-sized game is never won.

        Returns:
            True only on the call that moves the game into the won state.
        """
        if self.game_over or self.game_won or not self.board.grid:
            return False
        if self.board.revealed_count() != self.board.safe_cells:
            return False
        self.game_won = True
        logger.info("All %d safe cells revealed, game won", self.board.safe_cells)
        return True

    # ========================================================================
    # Snapshot
    # ========================================================================

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for serialization."""
        return {
            "grid": [[cell.to_dict() for cell in row] for row in self.board.grid],
            "game_over": self.game_over,
            "game_won": self.game_won,
            "width": self.width,
            "height": self.height,
            "mines_count": self.mines_count,
            "mines_left": self.mines_left,
        }

    @classmethod
    def from_dict(cls, data: Any) -> "GameState":
        """
        Restore a game from a snapshot.

        Missing fields default to an empty zero-sized game. A grid that
        does not match the stored dimensions is replaced by a fresh board
        of those dimensions, or by the empty board when they cannot form
        a game.
        """
        if not isinstance(data, dict):
            logger.warning("Game snapshot is not a mapping, starting empty")
            return cls()

        width = read_int(data, "width", 0, minimum=0)
        height = read_int(data, "height", 0, minimum=0)
        mines_count = read_int(data, "mines_count", 0, minimum=0)

        raw_grid = data.get("grid", [])
        if not isinstance(raw_grid, list) or not all(
            isinstance(row, list) for row in raw_grid
        ):
            logger.warning("Snapshot grid is malformed, ignoring it")
            raw_grid = None

        board = None
        if raw_grid is not None:
            grid = [[Cell.from_dict(item) for item in row] for row in raw_grid]
            board = Board(width, height, mines_count, grid)
            if not board.has_shape(width, height):
                board = None

        if board is None:
            return cls._regenerate(width, height, mines_count)

        return cls(
            board=board,
            game_over=read_bool(data, "game_over"),
            game_won=read_bool(data, "game_won"),
            mines_left=read_int(data, "mines_left", 0),
        )

    @classmethod
    def _regenerate(cls, width: int, height: int, mines_count: int) -> "GameState":
        try:
            BoardConfig(width, height, mines_count)
        except InvalidConfiguration:
            logger.warning(
                "Snapshot grid unusable and %dx%d/%d is not a valid board, "
                "starting empty", width, height, mines_count
            )
            return cls()
        logger.warning(
            "Snapshot grid does not match %dx%d, dealing a fresh board",
            width, height
        )
        return cls.new(width, height, mines_count)
