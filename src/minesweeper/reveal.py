"""
Reveal engine for Minesweeper.

Reveals a cell and cascades through connected cells that have no
adjacent mines. The cascade uses an explicit stack so its depth does
not grow with the board.
"""
import logging
from dataclasses import dataclass, field
from typing import List, Tuple

from .board import Board


logger = logging.getLogger(__name__)


@dataclass
class RevealOutcome:
    """
    Result of a single reveal request.

    Attributes:
        revealed: Positions newly revealed, in reveal order.
        hit_mine: A mine was revealed by the direct click.
        flags_cleared: Flagged cells that were revealed; each one gives
            its flag back to the remaining-mine counter.
    """

    revealed: List[Tuple[int, int]] = field(default_factory=list)
    hit_mine: bool = False
    flags_cleared: int = 0

    @property
    def changed(self) -> bool:
        return bool(self.revealed)


def reveal(board: Board, x: int, y: int, is_direct_click: bool = True) -> RevealOutcome:
    """
    Reveal the cell at (x, y) and flood out from zero-count cells.

    Already revealed cells are left alone, which makes the call
    idempotent and bounds the cascade by the number of cells.

    Args:
        board: Board to mutate in place.
        x: Column of the cell.
        y: Row of the cell.
        is_direct_click: The player clicked this cell. Only a direct
            click on a mine counts as hitting it.

    Raises:
        IndexError: If (x, y) is off the board.
    """
    outcome = RevealOutcome()
    if board.cell(x, y).is_revealed:
        return outcome

    stack = [(x, y, is_direct_click)]
    while stack:
        cx, cy, direct = stack.pop()
        cell = board.grid[cy][cx]
        if cell.is_revealed:
            continue

        was_flagged = cell.is_flagged
        cell.reveal()
        outcome.revealed.append((cx, cy))

        if direct and cell.is_mine:
            outcome.hit_mine = True
        if was_flagged:
            outcome.flags_cleared += 1
        if cell.is_mine or cell.adjacent_mines > 0:
            continue

        for nx, ny in board.neighbors(cx, cy):
            if not board.grid[ny][nx].is_revealed:
                stack.append((nx, ny, False))

    if len(outcome.revealed) > 1:
        logger.debug(
            "Cascade from (%d, %d) revealed %d cells", x, y, len(outcome.revealed)
        )
    return outcome
