"""
Unit tests for the reveal engine.

Tests the idempotent guard, the zero-count cascade, mine handling and
flag bookkeeping.
"""
import random

import pytest
from minesweeper import Board, reveal

from conftest import expected_flood, revealed_positions


# ============================================================================
# Single Cell Tests
# ============================================================================

class TestSingleReveal:
    """Test reveals that do not cascade."""

    @pytest.mark.parametrize("x, y", [(0, 0), (2, 0), (0, 2), (2, 2)])
    def test_corner_next_to_mine_reveals_one_cell(
        self, center_mine_board: Board, x: int, y: int
    ) -> None:
        outcome = reveal(center_mine_board, x, y)
        assert outcome.revealed == [(x, y)]
        assert revealed_positions(center_mine_board) == {(x, y)}

    def test_reveal_is_idempotent(self, center_mine_board: Board) -> None:
        reveal(center_mine_board, 0, 0)
        before = center_mine_board.get_observation()
        outcome = reveal(center_mine_board, 0, 0)
        assert outcome.changed is False
        assert outcome.revealed == []
        assert (center_mine_board.get_observation() == before).all()

    def test_off_board_raises(self, center_mine_board: Board) -> None:
        with pytest.raises(IndexError):
            reveal(center_mine_board, 5, 5)


# ============================================================================
# Mine Tests
# ============================================================================

class TestMineReveal:
    """Test revealing mine cells."""

    def test_direct_click_on_mine_hits_it(self, center_mine_board: Board) -> None:
        outcome = reveal(center_mine_board, 1, 1, is_direct_click=True)
        assert outcome.hit_mine is True
        assert center_mine_board.cell(1, 1).is_revealed is True

    def test_indirect_reveal_of_mine_is_not_a_hit(
        self, center_mine_board: Board
    ) -> None:
        outcome = reveal(center_mine_board, 1, 1, is_direct_click=False)
        assert outcome.hit_mine is False
        assert center_mine_board.cell(1, 1).is_revealed is True

    def test_mine_does_not_cascade(self) -> None:
        board = Board.from_mines(3, 3, [(0, 0)])
        reveal(board, 0, 0)
        assert revealed_positions(board) == {(0, 0)}


# ============================================================================
# Cascade Tests
# ============================================================================

class TestCascade:
    """Test zero-count flood reveal."""

    def test_board_without_mines_reveals_everything(self, empty_board: Board) -> None:
        outcome = reveal(empty_board, 2, 2)
        assert len(outcome.revealed) == 25
        assert empty_board.revealed_count() == 25

    def test_cascade_stops_at_numbered_border(self, wall_board: Board) -> None:
        """Zero column and its numbered border open, the far side stays shut."""
        reveal(wall_board, 0, 0)
        assert revealed_positions(wall_board) == {
            (0, 0), (0, 1), (0, 2), (1, 0), (1, 1), (1, 2),
        }

    def test_cascade_never_reveals_mines(self, wall_board: Board) -> None:
        reveal(wall_board, 4, 1)
        for x, y in wall_board.mine_positions():
            assert wall_board.cell(x, y).is_revealed is False

    def test_numbered_cell_click_does_not_cascade(self, wall_board: Board) -> None:
        reveal(wall_board, 1, 1)
        assert revealed_positions(wall_board) == {(1, 1)}

    @pytest.mark.parametrize("seed", range(10))
    def test_cascade_matches_connected_region(self, seed: int) -> None:
        rng = random.Random(seed)
        board = Board.generate(16, 16, 30, rng)
        safe = [(x, y) for x, y, cell in board.cells() if not cell.is_mine]
        x, y = rng.choice(safe)

        expected = expected_flood(board, x, y)
        outcome = reveal(board, x, y)

        assert set(outcome.revealed) == expected
        assert revealed_positions(board) == expected
        assert not any(board.cell(*pos).is_mine for pos in expected)

    def test_large_open_board_does_not_recurse(self) -> None:
        board = Board.from_mines(120, 120, [])
        outcome = reveal(board, 0, 0)
        assert len(outcome.revealed) == 120 * 120

    def test_cascade_skips_already_revealed_cells(self, empty_board: Board) -> None:
        reveal(empty_board, 4, 4, is_direct_click=False)
        assert empty_board.revealed_count() == 25
        assert reveal(empty_board, 0, 0).revealed == []


# ============================================================================
# Flag Tests
# ============================================================================

class TestFlagsDuringReveal:
    """Test flags uncovered by a reveal."""

    def test_direct_reveal_of_flagged_cell(self, center_mine_board: Board) -> None:
        center_mine_board.cell(0, 0).toggle_flag()
        outcome = reveal(center_mine_board, 0, 0)
        assert outcome.revealed == [(0, 0)]
        assert outcome.flags_cleared == 1
        assert center_mine_board.cell(0, 0).is_flagged is False

    def test_cascade_counts_flags_it_uncovers(self, empty_board: Board) -> None:
        empty_board.cell(4, 4).toggle_flag()
        empty_board.cell(3, 0).toggle_flag()
        outcome = reveal(empty_board, 0, 4)
        assert outcome.flags_cleared == 2
        assert empty_board.revealed_count() == 25

    def test_unflagged_reveal_clears_nothing(self, center_mine_board: Board) -> None:
        assert reveal(center_mine_board, 2, 2).flags_cleared == 0
