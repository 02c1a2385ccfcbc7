"""Frontend-agnostic game loop for the line-based CLIs.

The loop talks to the player only through a :class:`GameUI`, so the same
control flow drives the vanilla and Rich terminals as well as the tests.
Quitting is an ordinary :class:`Outcome`; nothing in here exits the
process.
"""

from __future__ import annotations

import random
from enum import StrEnum
from typing import Protocol

from backend.engine.gameplay import GamePlay
from frontend.cli.commands import (
    NEW_GAME_SENTINEL,
    QUIT_SENTINEL,
    Action,
    parse_command,
    parse_size,
)

SIZE_PROMPT = (
    f"Please enter the required board side length (minimum 2), "
    f"{QUIT_SENTINEL} to exit."
)
MOVE_PROMPT = (
    f"Enter which tile you want to move. You can enter {NEW_GAME_SENTINEL} "
    f"to start a new game or {QUIT_SENTINEL} to exit."
)
INVALID_MOVE = "Invalid move, please try another one."
INVALID_INPUT = "Please insert a valid number."


class Outcome(StrEnum):
    SOLVED = "solved"
    NEW_GAME = "new_game"
    QUIT = "quit"


class GameUI(Protocol):
    def ask(self, message: str) -> str | None:
        """Prompt for one line; ``None`` means input is exhausted."""

    def show_board(self, game: GamePlay) -> None: ...

    def notify(self, message: str, kind: str = "info") -> None:
        """Show a status line. *kind* is ``info``, ``error`` or ``success``."""


# -- prompts ------------------------------------------------------------------


def ask_size(ui: GameUI) -> int | None:
    """Keep asking until the player gives a usable side length or quits."""
    while True:
        raw = ui.ask(SIZE_PROMPT)
        if raw is None:
            return None
        try:
            return parse_size(raw)
        except ValueError as exc:
            ui.notify(str(exc), "error")


# -- game loops ---------------------------------------------------------------


def play_round(ui: GameUI, game: GamePlay) -> Outcome:
    """Play *game* until it is solved or the player leaves it."""
    while not game.is_won:
        ui.show_board(game)
        raw = ui.ask(MOVE_PROMPT)
        if raw is None:
            return Outcome.QUIT

        command = parse_command(raw)
        if command.action is Action.QUIT:
            return Outcome.QUIT
        if command.action is Action.NEW_GAME:
            return Outcome.NEW_GAME
        if command.action is Action.INVALID:
            ui.notify(INVALID_INPUT, "error")
        elif not game.move(command.value):
            ui.notify(INVALID_MOVE, "error")

    ui.show_board(game)
    ui.notify(
        f"Puzzle solved in {game.moves} moves, congrats! Another one?",
        "success",
    )
    return Outcome.SOLVED


def run_session(
    ui: GameUI,
    size: int | None = None,
    steps: int | None = None,
    rng: random.Random | None = None,
) -> int:
    """Play games back to back until the player quits.

    *size* skips the first side-length prompt. Returns how many puzzles
    were solved.
    """
    solved = 0
    if size is None:
        size = ask_size(ui)

    while size is not None:
        outcome = play_round(ui, GamePlay(size, steps, rng))
        if outcome is Outcome.QUIT:
            break
        if outcome is Outcome.SOLVED:
            solved += 1
        size = ask_size(ui)

    ui.notify("Goodbye!")
    return solved
