"""
Pytest configuration and shared fixtures.
"""
import random
import sys
from pathlib import Path
from typing import Set, Tuple

import pytest

# Add src to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from minesweeper import Board, BoardConfig, Cell, GameState, Session


# ============================================================================
# Helpers
# ============================================================================

def expected_flood(board: Board, x: int, y: int) -> Set[Tuple[int, int]]:
    """Cells a click on safe (x, y) should uncover, by plain BFS."""
    seen = {(x, y)}
    frontier = [(x, y)]
    while frontier:
        cx, cy = frontier.pop(0)
        if board.grid[cy][cx].adjacent_mines > 0:
            continue
        for nx, ny in board.neighbors(cx, cy):
            if (nx, ny) not in seen:
                seen.add((nx, ny))
                frontier.append((nx, ny))
    return seen


def revealed_positions(board: Board) -> Set[Tuple[int, int]]:
    return {(x, y) for x, y, cell in board.cells() if cell.is_revealed}


# ============================================================================
# Board Fixtures
# ============================================================================

@pytest.fixture
def rng() -> random.Random:
    """Seeded random source for reproducible layouts."""
    return random.Random(1234)


@pytest.fixture
def center_mine_board() -> Board:
    """3x3 board with a single mine in the middle."""
    return Board.from_mines(3, 3, [(1, 1)])


@pytest.fixture
def empty_board() -> Board:
    """5x5 board with no mines for cascade testing."""
    return Board.from_mines(5, 5, [])


@pytest.fixture
def wall_board() -> Board:
    """5x3 board with a vertical wall of mines in column 2."""
    return Board.from_mines(5, 3, [(2, 0), (2, 1), (2, 2)])


@pytest.fixture
def beginner_board(rng: random.Random) -> Board:
    """Randomly generated 9x9 board with 10 mines."""
    return Board.generate(9, 9, 10, rng)


# ============================================================================
# Game Fixtures
# ============================================================================

@pytest.fixture
def center_mine_game(center_mine_board: Board) -> GameState:
    """Game in play on the 3x3 center-mine board."""
    return GameState.from_board(center_mine_board)


@pytest.fixture
def center_mine_session(center_mine_board: Board) -> Session:
    """Session playing the 3x3 center-mine board."""
    return Session(game=GameState.from_board(center_mine_board))


# ============================================================================
# Cell Fixtures
# ============================================================================

@pytest.fixture
def hidden_cell() -> Cell:
    """Create a hidden cell."""
    return Cell()


@pytest.fixture
def mine_cell() -> Cell:
    """Create a cell containing a mine."""
    return Cell(is_mine=True)


# ============================================================================
# Configuration Fixtures
# ============================================================================

@pytest.fixture
def valid_config() -> BoardConfig:
    """Create a valid board configuration."""
    return BoardConfig(9, 9, 10)
