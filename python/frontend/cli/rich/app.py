"""Rich terminal frontend built on Rich tables and panels.

Uses the ``rich`` library for styled output while sharing the same
command parsing and game loop as the vanilla CLI.
"""

from __future__ import annotations

import random

import rich.box
from rich.align import Align
from rich.console import Console, Group
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from backend.engine.gameplay import GamePlay
from backend.models.board import BLANK, Position, PuzzleBoard
from frontend.cli.loop import run_session

console = Console()

_KIND_STYLES = {"info": "cyan", "error": "bold red", "success": "bold green"}

# Cell styles, most specific first: a tile that can slide now, a tile
# already on its goal cell, any other tile.
_MOVABLE = "bold black on yellow"
_PLACED = "bold green"
_OTHER = "bold white"


# -- board rendering ----------------------------------------------------------


def _cell(board: PuzzleBoard, pos: Position, movable: set[int]) -> Text:
    value = board.tile_at(*pos)
    if value == BLANK:
        return Text("")
    if value in movable:
        style = _MOVABLE
    elif board.is_tile_correct(*pos):
        style = _PLACED
    else:
        style = _OTHER
    return Text(str(value), style=style)


def _render_board(board: PuzzleBoard) -> Table:
    """Grid of the board; tiles next to the blank are highlighted."""
    movable = set(board.movable_values())
    table = Table.grid(padding=(0, 1))
    for _ in range(board.size):
        table.add_column(min_width=len(str(board.size**2 - 1)), justify="right")
    for row in range(board.size):
        table.add_row(
            *(_cell(board, Position(row, col), movable) for col in range(board.size))
        )
    return table


def _legend(game: GamePlay) -> Text:
    text = Text()
    text.append("Moves: ", style="dim")
    text.append(str(game.moves), style="bold yellow")
    text.append("    Movable: ", style="dim")
    text.append(" ".join(str(v) for v in game.board.movable_values()), style=_MOVABLE)
    return text


class RichUI:
    """Rich implementation of the loop's UI."""

    def __init__(self, out: Console | None = None) -> None:
        self.console = out if out is not None else console

    def ask(self, message: str) -> str | None:
        self.console.print()
        self.console.print(Text(message, style="dim"))
        try:
            return self.console.input("[bold cyan]>[/bold cyan] ")
        except (EOFError, KeyboardInterrupt):
            return None

    def show_board(self, game: GamePlay) -> None:
        size = game.size
        panel = Panel(
            Group(Align.center(_render_board(game.board)), Align.center(_legend(game))),
            title=f"[bold cyan]Sliding Puzzle  {size}×{size}[/bold cyan]",
            box=rich.box.HEAVY,
            border_style="bold green" if game.is_won else "bright_blue",
            padding=(1, 2),
        )
        self.console.print()
        self.console.print(panel)

    def notify(self, message: str, kind: str = "info") -> None:
        self.console.print(Text(message, style=_KIND_STYLES.get(kind, "")))


# -- public entry point -------------------------------------------------------


def run(
    size: int | None = None,
    steps: int | None = None,
    seed: int | None = None,
) -> int:
    """Launch the Rich CLI. Returns the number of puzzles solved."""
    rng = random.Random(seed) if seed is not None else None
    console.print(Text("Welcome to the amazing puzzle game", style="bold cyan"))
    return run_session(RichUI(), size=size, steps=steps, rng=rng)
