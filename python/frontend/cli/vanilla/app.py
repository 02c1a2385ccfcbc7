"""Vanilla terminal frontend.

Uses only ``print``/``input`` and ANSI codes. The board itself is drawn
with :meth:`PuzzleBoard.render`.
"""

from __future__ import annotations

import random

from backend.engine.gameplay import GamePlay
from frontend.cli.loop import run_session

# -- ANSI helpers -------------------------------------------------------------

_G = "\033[32;1m"    # bold green
_Y = "\033[33;1m"    # bold yellow
_C = "\033[36;1m"    # bold cyan
_RED = "\033[31;1m"  # bold red
_R = "\033[0m"       # reset

_KIND_COLOURS = {"info": _C, "error": _RED, "success": _G}


class VanillaUI:
    """Plain ``print``/``input`` implementation of the loop's UI."""

    def ask(self, message: str) -> str | None:
        print()
        print(message)
        try:
            return input("> ")
        except (EOFError, KeyboardInterrupt):
            return None

    def show_board(self, game: GamePlay) -> None:
        size = game.size
        print()
        print(f"  {_C}=== Sliding Puzzle ({size}×{size}) ==={_R}")
        print()
        print(game.board.render())
        print()
        movable = ", ".join(str(v) for v in game.board.movable_values())
        print(f"  Moves: {_Y}{game.moves}{_R}  |  Movable: {_Y}{movable}{_R}")

    def notify(self, message: str, kind: str = "info") -> None:
        print(f"{_KIND_COLOURS.get(kind, '')}{message}{_R}")


# -- public entry point -------------------------------------------------------


def run(
    size: int | None = None,
    steps: int | None = None,
    seed: int | None = None,
) -> int:
    """Launch the vanilla CLI. Returns the number of puzzles solved."""
    rng = random.Random(seed) if seed is not None else None
    print("Welcome to the amazing puzzle game")
    return run_session(VanillaUI(), size=size, steps=steps, rng=rng)
