"""CLI tests — command parsing, the game loop, and the typer entry point.

The loop is driven by a scripted UI whose answers are either fixed strings
or callables that look at the game currently on screen.
"""

from __future__ import annotations

import io
import random
from typing import Callable, Union

import pytest
from rich.console import Console
from typer.testing import CliRunner

from backend.engine.gamegenerator import GameGenerator
from backend.engine.gameplay import GamePlay
from backend.models.board import Position
from frontend.cli.commands import Action, Command, parse_command, parse_size
from frontend.cli.loop import (
    INVALID_INPUT,
    INVALID_MOVE,
    MOVE_PROMPT,
    SIZE_PROMPT,
    Outcome,
    ask_size,
    play_round,
    run_session,
)
from frontend.cli.rich.app import _MOVABLE, _PLACED, _cell, _render_board
from frontend.cli.vanilla.app import VanillaUI
from main import app

Answer = Union[str, None, Callable[["ScriptedUI"], str]]


class ScriptedUI:
    """Replays canned answers and records everything the loop shows."""

    def __init__(self, answers: list[Answer]) -> None:
        self._answers = list(answers)
        self.prompts: list[str] = []
        self.boards: list[str] = []
        self.messages: list[tuple[str, str]] = []
        self.game: GamePlay | None = None

    def ask(self, message: str) -> str | None:
        self.prompts.append(message)
        if not self._answers:
            return None
        answer = self._answers.pop(0)
        return answer(self) if callable(answer) else answer

    def show_board(self, game: GamePlay) -> None:
        self.game = game
        self.boards.append(game.board.render())

    def notify(self, message: str, kind: str = "info") -> None:
        self.messages.append((kind, message))


def _slide_home_tile(ui: ScriptedUI) -> str:
    """Answer that undoes a one-step shuffle."""
    board = ui.game.board
    return str(board.tile_at(*board.home))


# -- command parsing ----------------------------------------------------------


@pytest.mark.parametrize(
    ("raw", "expected"),
    [
        ("5", Command(Action.MOVE, 5)),
        ("  12 \n", Command(Action.MOVE, 12)),
        ("0", Command(Action.MOVE, 0)),
        ("-7", Command(Action.MOVE, -7)),
        ("-1", Command(Action.NEW_GAME)),
        ("n", Command(Action.NEW_GAME)),
        ("NEW", Command(Action.NEW_GAME)),
        ("-2", Command(Action.QUIT)),
        ("q", Command(Action.QUIT)),
        ("Exit", Command(Action.QUIT)),
        ("", Command(Action.INVALID)),
        ("five", Command(Action.INVALID)),
        ("3.5", Command(Action.INVALID)),
    ],
)
def test_parse_command(raw: str, expected: Command) -> None:
    assert parse_command(raw) == expected


@pytest.mark.parametrize(("raw", "expected"), [("2", 2), (" 4 ", 4), ("-2", None), ("quit", None)])
def test_parse_size(raw: str, expected: int | None) -> None:
    assert parse_size(raw) == expected


@pytest.mark.parametrize("raw", ["1", "0", "-1", "abc", ""])
def test_parse_size_rejects(raw: str) -> None:
    with pytest.raises(ValueError):
        parse_size(raw)


# -- loop ---------------------------------------------------------------------


def test_ask_size_reprompts_until_valid() -> None:
    ui = ScriptedUI(["big", "1", "3"])
    assert ask_size(ui) == 3
    assert ui.prompts == [SIZE_PROMPT] * 3
    assert [kind for kind, _ in ui.messages] == ["error", "error"]


def test_ask_size_quits_on_end_of_input() -> None:
    assert ask_size(ScriptedUI([])) is None


def test_play_round_reports_bad_input_and_solves() -> None:
    board = GameGenerator.solved(2)
    board.move_by_value(2)  # [[1, 0], [3, 2]]
    game = GamePlay.from_board(board)
    ui = ScriptedUI(["oops", "3", "2"])

    assert play_round(ui, game) is Outcome.SOLVED
    assert ui.prompts == [MOVE_PROMPT] * 3
    assert ("error", INVALID_INPUT) in ui.messages
    assert ("error", INVALID_MOVE) in ui.messages
    assert ui.messages[-1][0] == "success"
    assert ui.boards[-1] == "1\t2\n3\t"
    assert game.moves == 1


@pytest.mark.parametrize(
    ("answer", "outcome"),
    [("-1", Outcome.NEW_GAME), ("-2", Outcome.QUIT), (None, Outcome.QUIT)],
)
def test_play_round_leaves_on_sentinels(answer: Answer, outcome: Outcome) -> None:
    game = GamePlay(3, steps=20, rng=random.Random(5))
    before = game.board.rows()
    assert play_round(ScriptedUI([answer]), game) is outcome
    assert game.board.rows() == before


def test_run_session_counts_solved_games() -> None:
    ui = ScriptedUI([_slide_home_tile, "2", _slide_home_tile, "-2"])
    solved = run_session(ui, size=2, steps=1, rng=random.Random(11))
    assert solved == 2
    assert ui.messages[-1] == ("info", "Goodbye!")


def test_run_session_new_game_asks_for_size() -> None:
    ui = ScriptedUI(["nope", "3", "-1", "q"])
    solved = run_session(ui, steps=10, rng=random.Random(2))
    assert solved == 0
    assert ui.prompts == [SIZE_PROMPT, SIZE_PROMPT, MOVE_PROMPT, SIZE_PROMPT]
    assert ui.game.size == 3


def test_run_session_quit_at_first_prompt() -> None:
    ui = ScriptedUI(["-2"])
    assert run_session(ui) == 0
    assert ui.boards == []


# -- entry point --------------------------------------------------------------

runner = CliRunner()


def test_main_vanilla_quit() -> None:
    result = runner.invoke(app, ["-f", "vanilla", "-s", "2", "--seed", "1"], input="-2\n")
    assert result.exit_code == 0
    assert "Welcome to the amazing puzzle game" in result.output
    assert "Goodbye!" in result.output


def test_main_vanilla_prompts_for_size() -> None:
    result = runner.invoke(app, ["-f", "vanilla", "--steps", "5"], input="1\n3\nq\n")
    assert result.exit_code == 0
    assert "at least 2" in result.output
    assert "3×3" in result.output


def test_main_rich_quit_on_end_of_input() -> None:
    result = runner.invoke(app, ["-s", "3", "--steps", "10"], input="")
    assert result.exit_code == 0
    assert "Goodbye!" in result.output


def test_main_rejects_tiny_board() -> None:
    result = runner.invoke(app, ["-s", "1"])
    assert result.exit_code != 0


# -- frontends ----------------------------------------------------------------


def test_vanilla_board_lists_moves_and_movable_tiles(
    capsys: pytest.CaptureFixture[str],
) -> None:
    game = GamePlay.from_board(GameGenerator.solved(3))
    game.move(6)
    VanillaUI().show_board(game)
    out = capsys.readouterr().out
    assert "1\t2\t3\n4\t5\t\n7\t8\t6" in out
    assert "Moves: " in out and "Movable: " in out
    assert "3, 5" in out
    assert "Time" not in out


def test_rich_cells_highlight_tiles_next_to_blank() -> None:
    board = GameGenerator.solved(3)
    movable = set(board.movable_values())
    assert _cell(board, Position(1, 2), movable).style == _MOVABLE  # 6
    assert _cell(board, Position(2, 1), movable).style == _MOVABLE  # 8
    assert _cell(board, Position(0, 0), movable).style == _PLACED
    assert _cell(board, Position(2, 2), movable).plain == ""


def test_rich_board_shows_every_tile() -> None:
    board = GameGenerator.generate(3, steps=15, rng=random.Random(4))
    out = Console(file=io.StringIO(), width=40, color_system=None)
    out.print(_render_board(board))
    text = out.file.getvalue()
    for value in range(1, 9):
        assert str(value) in text
    assert "0" not in text
