#!/usr/bin/env python3
"""Sliding Puzzle Game.

Usage::

    fifteen                       # Rich terminal, asks for the size
    fifteen -f vanilla -s 3       # plain terminal, 3×3
    fifteen -s 4 --seed 7         # reproducible shuffle
"""

import importlib
from enum import StrEnum
from typing import Optional

import typer

from backend.models.board import MIN_SIZE

# -- frontend registry -------------------------------------------------------


class Frontend(StrEnum):
    vanilla = "vanilla"
    rich = "rich"


_RUNNERS = {
    Frontend.vanilla: "frontend.cli.vanilla.app",
    Frontend.rich: "frontend.cli.rich.app",
}


# -- CLI entry point ----------------------------------------------------------

app = typer.Typer(add_completion=False)


@app.command()
def main(
    frontend: Frontend = typer.Option(
        Frontend.rich, "-f", "--frontend",
        help="Terminal frontend to launch.",
    ),
    size: Optional[int] = typer.Option(
        None, "-s", "--size",
        min=MIN_SIZE,
        help="Board side length. Omit to be asked.",
    ),
    steps: Optional[int] = typer.Option(
        None, "--steps",
        min=1,
        help="Shuffle steps (default: size ** 6).",
    ),
    seed: Optional[int] = typer.Option(
        None, "--seed",
        help="Seed the shuffle for a reproducible board.",
    ),
) -> None:
    """Sliding Puzzle Game."""
    mod = importlib.import_module(_RUNNERS[frontend])
    mod.run(size=size, steps=steps, seed=seed)


if __name__ == "__main__":
    app()
