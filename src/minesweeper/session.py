"""
Session module for Minesweeper.

A session outlives individual games: it keeps the win counter and the
selected difficulty, and exposes the per-click API the front end calls.
"""
import logging
import random
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Optional

from .board import BoardConfig
from .cell import CellDisplay
from .errors import InvalidConfiguration
from .fields import read_int
from .state import GameState, GameStatus


logger = logging.getLogger(__name__)


# ============================================================================
# Difficulty Presets
# ============================================================================

class Difficulty(Enum):
    """Fixed difficulty presets; the value is what snapshots store."""

    EASY = 0
    MEDIUM = 1
    HARD = 2

    @property
    def config(self) -> BoardConfig:
        return PRESETS[self]

    @classmethod
    def from_name(cls, name: str) -> "Difficulty":
        """
        Look up a preset by name, ignoring case.

        Raises:
            InvalidConfiguration: If no preset has that name.
        """
        try:
            return cls[name.upper()]
        except KeyError:
            choices = ", ".join(d.name.lower() for d in cls)
            raise InvalidConfiguration(
                f"Unknown difficulty {name!r} (choose from {choices})"
            ) from None


PRESETS = {
    Difficulty.EASY: BoardConfig(9, 9, 10),
    Difficulty.MEDIUM: BoardConfig(16, 16, 40),
    Difficulty.HARD: BoardConfig(40, 16, 99),
}


def _hard_game() -> GameState:
    config = PRESETS[Difficulty.HARD]
    return GameState.new(config.width, config.height, config.mines_count)


# ============================================================================
# Session
# ============================================================================

@dataclass
class Session:
    """
    Player session: score, difficulty and the game in play.

    Attributes:
        score: Games won so far.
        difficulty: Last selected preset.
        game: Current game; replaced wholesale on restart, new game or
            difficulty change.
        rng: Random source for dealing boards.
    """

    score: int = 0
    difficulty: Difficulty = Difficulty.HARD
    game: GameState = field(default_factory=_hard_game)
    rng: Optional[random.Random] = field(default=None, repr=False, compare=False)

    @classmethod
    def start(
        cls,
        difficulty: Difficulty = Difficulty.HARD,
        rng: Optional[random.Random] = None,
    ) -> "Session":
        """Create a session with a fresh game at the given difficulty."""
        session = cls(difficulty=difficulty, game=GameState(), rng=rng)
        session.select_difficulty(difficulty)
        return session

    # ========================================================================
    # Game Lifecycle
    # ========================================================================

    def new_game(self, width: int, height: int, mines_count: int) -> None:
        """
        Replace the current game with a fresh custom board.

        The difficulty selector is left as it was.

        Raises:
            InvalidConfiguration: If the board cannot be built.
        """
        self.game = GameState.new(width, height, mines_count, self.rng)
        logger.debug("New %dx%d game with %d mines", width, height, mines_count)

    def restart(self) -> None:
        """
        Deal a fresh board with the current dimensions; score is kept.

        A restored zero-sized game restarts as another empty game.
        """
        if not self.game.board.grid:
            self.game = GameState()
            return
        self.new_game(self.game.width, self.game.height, self.game.mines_count)

    def select_difficulty(self, difficulty: Difficulty) -> None:
        """Switch preset and start a new game with it."""
        config = difficulty.config
        self.new_game(config.width, config.height, config.mines_count)
        self.difficulty = difficulty
        logger.info("Difficulty set to %s", difficulty.name.lower())

    def reset_score(self) -> None:
        self.score = 0

    # ========================================================================
    # Player Actions
    # ========================================================================

    def click(self, x: int, y: int) -> bool:
        """
        Reveal the clicked cell and run win detection.

        Returns:
            True if any cell was revealed, False otherwise.
        """
        if not self.game.click(x, y):
            return False
        if self.game.check_win():
            self.score += 1
        return True

    def toggle_flag(self, x: int, y: int) -> bool:
        return self.game.toggle_flag(x, y)

    # ========================================================================
    # Read Accessors
    # ========================================================================

    @property
    def status(self) -> GameStatus:
        return self.game.status

    @property
    def mines_left(self) -> int:
        return self.game.mines_left

    @property
    def game_over(self) -> bool:
        return self.game.game_over

    @property
    def game_won(self) -> bool:
        return self.game.game_won

    def display_grid(self) -> List[List[CellDisplay]]:
        return self.game.display_grid()

    # ========================================================================
    # Snapshot
    # ========================================================================

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for serialization."""
        return {
            "score": self.score,
            "difficulty": self.difficulty.value,
            "game_state": self.game.to_dict(),
        }

    @classmethod
    def from_dict(cls, data: Any) -> "Session":
        """
        Restore a session from a snapshot.

        Defaults: score 0, difficulty hard, and a fresh hard game when
        the snapshot holds no game. A restored game whose safe cells are
        all revealed is won, and scored, on load.
        """
        if not isinstance(data, dict):
            logger.warning("Session snapshot is not a mapping, using defaults")
            return cls()

        score = read_int(data, "score", 0, minimum=0)
        value = read_int(
            data, "difficulty", Difficulty.HARD.value,
            minimum=min(d.value for d in Difficulty),
            maximum=max(d.value for d in Difficulty),
        )
        if "game_state" in data:
            game = GameState.from_dict(data["game_state"])
        else:
            game = _hard_game()
        if game.check_win():
            score += 1
        return cls(score=score, difficulty=Difficulty(value), game=game)
