"""Generates solvable sliding puzzle boards."""

from __future__ import annotations

import random

from backend.models.board import PuzzleBoard


class GameGenerator:
    """Creates solvable puzzles by shuffling from the solved state."""

    @staticmethod
    def solved(size: int, rng: random.Random | None = None) -> PuzzleBoard:
        """Return the goal-state board (all tiles in order, blank bottom-right)."""
        board = PuzzleBoard(size, rng=rng)
        board.initialize()
        return board

    @staticmethod
    def generate(
        size: int,
        steps: int | None = None,
        rng: random.Random | None = None,
    ) -> PuzzleBoard:
        """Return a random *solvable*, not yet solved board of the given size.

        *steps* overrides the shuffle length (``size ** 6`` by default).
        """
        board = GameGenerator.solved(size, rng=rng)
        board.shuffle(steps)
        return board
