"""
Exceptions raised by the Minesweeper engine.
"""


class InvalidConfiguration(ValueError):
    """Board dimensions, mine count or preset name cannot form a game."""
