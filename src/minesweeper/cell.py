"""
Cell module for Minesweeper game.

Represents individual cells on the game board with their state
(hidden/flagged/revealed), content (mine/number), and the display
instruction handed to the rendering layer.
"""
from enum import Enum, auto
from dataclasses import dataclass
from typing import Any, Dict, NamedTuple

from .fields import read_bool, read_int


# ============================================================================
# Constants
# ============================================================================

class CellState(Enum):
    """Possible visual states of a cell."""

    HIDDEN = auto()
    FLAGGED = auto()
    REVEALED = auto()


class DisplayKind(Enum):
    """What the rendering layer should draw for a cell."""

    HIDDEN = auto()
    FLAGGED = auto()
    NUMBER = auto()
    MINE = auto()


class CellDisplay(NamedTuple):
    """Display instruction for one cell; value is 0-8 for NUMBER, else 0."""

    kind: DisplayKind
    value: int = 0


# ============================================================================
# Cell Data Class
# ============================================================================

@dataclass
class Cell:
    """
    Represents a single cell in the Minesweeper grid.

    Attributes:
        is_mine: Whether this cell contains a mine.
        adjacent_mines: Count of mines in neighboring cells (0-8).
        state: Current visual state (hidden, flagged, or revealed).
    """

    is_mine: bool = False
    adjacent_mines: int = 0
    state: CellState = CellState.HIDDEN

    def reveal(self) -> bool:
        """
        Reveal this cell, flagged or not.

        A flag on the cell is dropped by the reveal.

        Returns:
            True if cell was revealed, False if it was already revealed.
        """
        if self.state == CellState.REVEALED:
            return False
        self.state = CellState.REVEALED
        return True

    def toggle_flag(self) -> bool:
        """
        Toggle flag on this cell.

        Returns:
            True if flag was toggled, False if cell is revealed.
        """
        if self.state == CellState.REVEALED:
            return False
        if self.state == CellState.HIDDEN:
            self.state = CellState.FLAGGED
        else:
            self.state = CellState.HIDDEN
        return True

    @property
    def is_hidden(self) -> bool:
        """Check if cell is hidden and unflagged."""
        return self.state == CellState.HIDDEN

    @property
    def is_revealed(self) -> bool:
        """Check if cell is revealed."""
        return self.state == CellState.REVEALED

    @property
    def is_flagged(self) -> bool:
        """Check if cell is flagged."""
        return self.state == CellState.FLAGGED

    def display(self, show_mine: bool = False) -> CellDisplay:
        """
        Build the display instruction for this cell.

        Args:
            show_mine: Draw an unrevealed mine as a mine (used after a loss).
        """
        if self.is_mine and (show_mine or self.is_revealed):
            return CellDisplay(DisplayKind.MINE)
        if self.state == CellState.HIDDEN:
            return CellDisplay(DisplayKind.HIDDEN)
        if self.state == CellState.FLAGGED:
            return CellDisplay(DisplayKind.FLAGGED)
        return CellDisplay(DisplayKind.NUMBER, self.adjacent_mines)

    def to_observation(self) -> int:
        """
        Convert cell to observation value for agents.

        Returns:
            -1: Hidden cell
            -2: Flagged cell
            0-8: Revealed cell with adjacent mine count
            9: Revealed mine (game over state)
        """
        if self.state == CellState.HIDDEN:
            return -1
        if self.state == CellState.FLAGGED:
            return -2
        if self.is_mine:
            return 9
        return self.adjacent_mines

    # ========================================================================
    # Snapshot
    # ========================================================================

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for serialization."""
        return {
            "is_mine": self.is_mine,
            "is_flagged": self.is_flagged,
            "is_revealed": self.is_revealed,
            "adjacent_mines": self.adjacent_mines,
        }

    @classmethod
    def from_dict(cls, data: Any) -> "Cell":
        """
        Build a cell from a snapshot entry.

        Missing or malformed fields fall back to an empty hidden cell.
        A snapshot cell marked both revealed and flagged comes back revealed.
        """
        if not isinstance(data, dict):
            return cls()

        if read_bool(data, "is_revealed"):
            state = CellState.REVEALED
        elif read_bool(data, "is_flagged"):
            state = CellState.FLAGGED
        else:
            state = CellState.HIDDEN

        return cls(
            is_mine=read_bool(data, "is_mine"),
            adjacent_mines=read_int(data, "adjacent_mines", 0, 0, 8),
            state=state,
        )
