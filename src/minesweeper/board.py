"""
Board module for Minesweeper game.

Implements the game board: configuration, mine placement and
adjacency-count precomputation.
"""
import logging
import random
from dataclasses import dataclass, field
from typing import Iterable, Iterator, List, Optional, Tuple

import numpy as np

from .cell import Cell
from .errors import InvalidConfiguration


logger = logging.getLogger(__name__)


# ============================================================================
# Configuration
# ============================================================================

@dataclass(frozen=True)
class BoardConfig:
    """
    Configuration for a Minesweeper board.

    Attributes:
        width: Number of columns.
        height: Number of rows.
        mines_count: Total mines to place.
    """

    width: int = 9
    height: int = 9
    mines_count: int = 10

    def __post_init__(self) -> None:
        """Validate configuration after initialization."""
        self._validate()

    def _validate(self) -> None:
        """Ensure configuration values are valid."""
        if self.width < 1 or self.height < 1:
            raise InvalidConfiguration("Board dimensions must be positive")
        if self.mines_count < 0:
            raise InvalidConfiguration("Number of mines cannot be negative")
        max_mines = self.width * self.height - 1
        if self.mines_count > max_mines:
            raise InvalidConfiguration(f"Too many mines (max {max_mines})")

    @property
    def total_cells(self) -> int:
        return self.width * self.height


# ============================================================================
# Board Class
# ============================================================================

@dataclass
class Board:
    """
    Minesweeper game board.

    Holds the grid of cells as rows (``grid[y][x]``). Public methods take
    ``(x, y)`` with ``x`` the column and ``y`` the row.

    A board is usually built with :meth:`generate`. The zero-sized default
    only exists for snapshots that carry no grid.
    """

    width: int = 0
    height: int = 0
    mines_count: int = 0
    grid: List[List[Cell]] = field(default_factory=list, repr=False)

    # ========================================================================
    # Construction
    # ========================================================================

    @classmethod
    def generate(
        cls,
        width: int,
        height: int,
        mines_count: int,
        rng: Optional[random.Random] = None,
    ) -> "Board":
        """
        Build a board with randomly placed mines.

        Args:
            width: Number of columns.
            height: Number of rows.
            mines_count: Mines to place; must leave at least one safe cell.
            rng: Random source, a fresh unseeded one by default.

        Raises:
            InvalidConfiguration: If the dimensions and mine count are invalid.
        """
        config = BoardConfig(width, height, mines_count)
        board = cls._blank(config)
        board._place_mines(rng or random.Random())
        board._calculate_adjacent_mines()
        logger.debug(
            "Generated %dx%d board with %d mines", width, height, mines_count
        )
        return board

    @classmethod
    def from_mines(
        cls, width: int, height: int, mines: Iterable[Tuple[int, int]]
    ) -> "Board":
        """
        Build a board with mines at the given (x, y) positions.

        Raises:
            InvalidConfiguration: If a position is off the board or the
                layout leaves no safe cell.
        """
        positions = set(mines)
        config = BoardConfig(width, height, len(positions))
        board = cls._blank(config)
        for x, y in positions:
            if not board.in_bounds(x, y):
                raise InvalidConfiguration(
                    f"Mine position ({x}, {y}) is outside the board"
                )
            board.grid[y][x].is_mine = True
        board._calculate_adjacent_mines()
        return board

    @classmethod
    def _blank(cls, config: BoardConfig) -> "Board":
        grid = [
            [Cell() for _ in range(config.width)]
            for _ in range(config.height)
        ]
        return cls(config.width, config.height, config.mines_count, grid)

    def _place_mines(self, rng: random.Random) -> None:
        """
        Place mines by sampling coordinates, re-sampling on collision.

        Terminates because the configuration guarantees a free cell.
        """
        placed = 0
        while placed < self.mines_count:
            x = rng.randrange(self.width)
            y = rng.randrange(self.height)
            cell = self.grid[y][x]
            if not cell.is_mine:
                cell.is_mine = True
                placed += 1

    def _calculate_adjacent_mines(self) -> None:
        """Calculate adjacent mine counts for all cells."""
        for y in range(self.height):
            for x in range(self.width):
                self.grid[y][x].adjacent_mines = self.adjacent_mines_of(x, y)

    # ========================================================================
    # Neighbor Utilities
    # ========================================================================

    def adjacent_mines_of(self, x: int, y: int) -> int:
        """Count mines among the up to 8 cells around (x, y)."""
        return sum(
            1 for nx, ny in self.neighbors(x, y) if self.grid[ny][nx].is_mine
        )

    def neighbors(self, x: int, y: int) -> Iterator[Tuple[int, int]]:
        """
        Yield in-bounds neighbor positions of (x, y).

        Args:
            x: Column of center cell.
            y: Row of center cell.
        """
        for ny in range(max(0, y - 1), min(self.height - 1, y + 1) + 1):
            for nx in range(max(0, x - 1), min(self.width - 1, x + 1) + 1):
                if nx == x and ny == y:
                    continue
                yield nx, ny

    def in_bounds(self, x: int, y: int) -> bool:
        """Check if position is within board bounds."""
        return 0 <= x < self.width and 0 <= y < self.height

    # ========================================================================
    # Accessors
    # ========================================================================

    def cell(self, x: int, y: int) -> Cell:
        """
        Get cell at position.

        Raises:
            IndexError: If the position is off the board.
        """
        if not self.in_bounds(x, y):
            raise IndexError(f"Cell ({x}, {y}) is outside the board")
        return self.grid[y][x]

    def cells(self) -> Iterator[Tuple[int, int, Cell]]:
        """Yield (x, y, cell) for every cell, row by row."""
        for y, row in enumerate(self.grid):
            for x, cell in enumerate(row):
                yield x, y, cell

    def mine_positions(self) -> List[Tuple[int, int]]:
        return [(x, y) for x, y, cell in self.cells() if cell.is_mine]

    def revealed_count(self) -> int:
        return sum(1 for _, _, cell in self.cells() if cell.is_revealed)

    @property
    def safe_cells(self) -> int:
        """Number of cells that must be revealed to win."""
        return self.width * self.height - self.mines_count

    def has_shape(self, width: int, height: int) -> bool:
        """Check that the grid really is ``height`` rows of ``width`` cells."""
        return len(self.grid) == height and all(
            len(row) == width for row in self.grid
        )

    def get_observation(self) -> np.ndarray:
        """
        Get board state as numpy array for agents.

        Returns:
            2D numpy array (height x width) where:
                -1 = hidden
                -2 = flagged
                0-8 = revealed with adjacent count
                9 = revealed mine
        """
        obs = np.zeros((self.height, self.width), dtype=np.int8)
        for x, y, cell in self.cells():
            obs[y, x] = cell.to_observation()
        return obs
