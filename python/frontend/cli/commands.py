"""Line-based command parsing shared by the CLI frontends.

Every line the player types is normalised into a :class:`Command`. Plain
integers are tile values to move, except the two sentinels inherited from
the classic numeric prompt: ``-1`` starts a new game and ``-2`` quits.
"""

from __future__ import annotations

from enum import StrEnum
from typing import NamedTuple

from backend.models.board import MIN_SIZE

NEW_GAME_SENTINEL = -1
QUIT_SENTINEL = -2


class Action(StrEnum):
    MOVE = "move"
    NEW_GAME = "new_game"
    QUIT = "quit"
    INVALID = "invalid"


class Command(NamedTuple):
    action: Action
    value: int | None = None


# -- shared word mapping -------------------------------------------------------

_WORD_MAP: dict[str, Action] = {
    "n": Action.NEW_GAME,
    "new": Action.NEW_GAME,
    "q": Action.QUIT,
    "quit": Action.QUIT,
    "exit": Action.QUIT,
}

_SENTINEL_MAP: dict[int, Action] = {
    NEW_GAME_SENTINEL: Action.NEW_GAME,
    QUIT_SENTINEL: Action.QUIT,
}


def _to_int(raw: str) -> int | None:
    try:
        return int(raw)
    except ValueError:
        return None


# -- public API ----------------------------------------------------------------


def parse_command(raw: str) -> Command:
    """Map one line of player input to a :class:`Command`.

    Possible results:
        Command(MOVE, <tile>)  any integer other than a sentinel
        Command(NEW_GAME)      -1 / n / new
        Command(QUIT)          -2 / q / quit / exit
        Command(INVALID)       anything else, including blank lines
    """
    text = raw.strip().lower()
    if text in _WORD_MAP:
        return Command(_WORD_MAP[text])

    number = _to_int(text)
    if number is None:
        return Command(Action.INVALID)
    if number in _SENTINEL_MAP:
        return Command(_SENTINEL_MAP[number])
    return Command(Action.MOVE, number)


def parse_size(raw: str, minimum: int = MIN_SIZE) -> int | None:
    """Parse a board side length.

    Returns ``None`` when the player asked to quit, raises ``ValueError``
    for anything that is not an integer of at least *minimum*.
    """
    text = raw.strip().lower()
    if _WORD_MAP.get(text) is Action.QUIT:
        return None
    size = _to_int(text)
    if size == QUIT_SENTINEL:
        return None
    if size is None:
        raise ValueError(f"Not a number: {raw.strip()!r}.")
    if size < minimum:
        raise ValueError(f"Side length must be at least {minimum}.")
    return size
