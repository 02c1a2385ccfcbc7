"""A single game session: moves, restarts and the win condition."""

from __future__ import annotations

import random

from backend.engine.gamegenerator import GameGenerator
from backend.models.board import PuzzleBoard


class GamePlay:
    """Orchestrates a single game session.

    A new session starts from a freshly shuffled board. ``moves`` counts
    the moves the board accepted since the board was dealt.
    """

    def __init__(
        self,
        size: int,
        steps: int | None = None,
        rng: random.Random | None = None,
    ) -> None:
        self.size = size
        self._steps = steps
        self._rng = rng
        self.board = GameGenerator.generate(size, steps, rng)
        self.moves = 0

    @classmethod
    def from_board(cls, board: PuzzleBoard) -> GamePlay:
        """Create a game session around an existing board."""
        obj = object.__new__(cls)
        obj.size = board.size
        obj._steps = None
        obj._rng = None
        obj.board = board
        obj.moves = 0
        return obj

    # -- movement -------------------------------------------------------------

    def move(self, value: int) -> bool:
        """Slide tile *value* into the adjacent blank.

        Returns True if the move was valid.
        """
        if not self.board.move_by_value(value):
            return False
        self.moves += 1
        return True

    def restart(self) -> None:
        """Throw the current board away and deal a new one of the same size."""
        self.board = GameGenerator.generate(self.size, self._steps, self._rng)
        self.moves = 0

    # -- queries --------------------------------------------------------------

    @property
    def is_won(self) -> bool:
        return self.board.is_solved()
