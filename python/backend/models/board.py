"""Board model for the sliding puzzle game."""

from __future__ import annotations

import random
from typing import NamedTuple

BLANK = 0
MIN_SIZE = 2

# Default shuffle length is size ** DEFAULT_SHUFFLE_POW blank steps.
DEFAULT_SHUFFLE_POW = 6

# Upper bound on how many walks shuffle() may throw away for ending solved.
MAX_SHUFFLE_ATTEMPTS = 1000

# (d_row, d_col) offsets of the four neighbours of a cell.
_OFFSETS: tuple[tuple[int, int], ...] = ((1, 0), (0, 1), (-1, 0), (0, -1))


class Position(NamedTuple):
    row: int
    col: int


class BlankNotHomeError(RuntimeError):
    """Raised when shuffling a board whose blank is not in the home cell."""


class PuzzleBoard:
    """Represents an N×N sliding puzzle board.

    Tiles are stored as a 2D list of ints addressed ``grid[row][col]``;
    0 represents the blank. A parallel location index maps every value to
    its current :class:`Position` so "where is tile X" is O(1). Both are
    only ever mutated together, through :meth:`_swap`.

    A fresh board is all zeros until :meth:`initialize` is called.
    """

    def __init__(self, size: int, rng: random.Random | None = None) -> None:
        if size < MIN_SIZE:
            raise ValueError(
                f"Board side length must be at least {MIN_SIZE}, got {size}."
            )
        self._size = size
        self._grid: list[list[int]] = [[BLANK] * size for _ in range(size)]
        self._index: list[Position | None] = [None] * (size * size)
        self._rng = rng if rng is not None else random

    # -- construction helpers -------------------------------------------------

    @classmethod
    def from_rows(cls, rows: list[list[int]]) -> PuzzleBoard:
        """Create a board from an explicit row-major grid.

        Example::

            PuzzleBoard.from_rows([[1, 2], [0, 3]])
        """
        size = len(rows)
        if any(len(row) != size for row in rows):
            raise ValueError("Rows must form a square grid.")
        flat = [v for row in rows for v in row]
        if any(isinstance(v, bool) or not isinstance(v, int) for v in flat):
            raise ValueError("Tile values must be integers.")
        values = sorted(flat)
        if values != list(range(size * size)):
            raise ValueError(
                f"A {size}×{size} board must hold each of 0..{size * size - 1} "
                f"exactly once."
            )
        board = cls(size)
        for r, row in enumerate(rows):
            for c, v in enumerate(row):
                board._grid[r][c] = v
                board._index[v] = Position(r, c)
        return board

    def initialize(self) -> None:
        """Lay the tiles out in the solved order, blank in the home cell."""
        n = self._size
        for r in range(n):
            for c in range(n):
                value = r * n + c + 1
                if value == n * n:
                    value = BLANK
                self._grid[r][c] = value
                self._index[value] = Position(r, c)

    # -- queries --------------------------------------------------------------

    @property
    def size(self) -> int:
        return self._size

    @property
    def home(self) -> Position:
        """The bottom-right cell, where the blank sits when solved."""
        return Position(self._size - 1, self._size - 1)

    @property
    def blank_pos(self) -> Position | None:
        return self._index[BLANK]

    def tile_at(self, row: int, col: int) -> int:
        return self._grid[row][col]

    def rows(self) -> list[list[int]]:
        """Return a copy of the grid, one list per row."""
        return [row[:] for row in self._grid]

    def locate(self, value: int) -> Position | None:
        """Return where *value* currently sits, or ``None`` if it is unknown."""
        if isinstance(value, bool) or not isinstance(value, int):
            return None
        if not 0 <= value < len(self._index):
            return None
        return self._index[value]

    def in_bounds(self, row: int, col: int) -> bool:
        return 0 <= row < self._size and 0 <= col < self._size

    def neighbors(self, pos: Position) -> list[Position]:
        """In-bounds cells one step away from *pos* along a single axis."""
        return [
            Position(pos.row + dr, pos.col + dc)
            for dr, dc in _OFFSETS
            if self.in_bounds(pos.row + dr, pos.col + dc)
        ]

    def movable_values(self) -> list[int]:
        """Tiles that may legally slide into the blank right now."""
        blank = self.blank_pos
        if blank is None:
            return []
        return sorted(self._grid[p.row][p.col] for p in self.neighbors(blank))

    def is_solved(self) -> bool:
        """Check if all tiles are in their goal positions."""
        if self._index[BLANK] != self.home:
            return False
        n = self._size
        for r in range(n):
            for c in range(n):
                if (r, c) == self.home:
                    continue
                if self._grid[r][c] != r * n + c + 1:
                    return False
        return True

    def is_tile_correct(self, row: int, col: int) -> bool:
        """Check if a specific tile is in its goal position."""
        val = self._grid[row][col]
        if val == BLANK:
            return (row, col) == self.home
        return divmod(val - 1, self._size) == (row, col)

    # -- moves ----------------------------------------------------------------

    def move_by_value(self, value: int) -> bool:
        """Slide tile *value* into the blank if the two are adjacent.

        Returns True if the move was applied. An illegal move (not adjacent,
        the blank itself, a value that is not on the board) leaves the board
        untouched and returns False.
        """
        if value == BLANK:
            return False
        src = self.locate(value)
        blank = self.blank_pos
        if src is None or blank is None:
            return False
        if blank not in self.neighbors(src):
            return False
        self._swap(src, blank)
        return True

    def shuffle(self, steps: int | None = None) -> None:
        """Scramble the board in-place with a random walk of the blank.

        The blank must be in the home cell. Each step swaps the blank with
        one of its in-bounds neighbours chosen uniformly at random, so the
        result is always reachable from (and back to) the solved state. A
        walk that happens to end solved is discarded and walked again.
        """
        if steps is None:
            steps = self._size**DEFAULT_SHUFFLE_POW
        if steps < 0:
            raise ValueError(f"Shuffle steps must be non-negative, got {steps}.")
        if self.blank_pos != self.home:
            raise BlankNotHomeError(
                f"Cannot shuffle: blank is at {self.blank_pos}, "
                f"expected {self.home}."
            )

        for _ in range(MAX_SHUFFLE_ATTEMPTS):
            blank = self.home
            for _ in range(steps):
                target = self._rng.choice(self.neighbors(blank))
                self._swap(target, blank)
                blank = target
            if not self.is_solved():
                return
        raise RuntimeError(
            f"Board was still solved after {MAX_SHUFFLE_ATTEMPTS} shuffle "
            f"walks of {steps} steps."
        )

    # -- rendering ------------------------------------------------------------

    def render(self) -> str:
        """Return the grid as tab-separated rows with the blank left empty.

        Example for a 3×3 board::

            7	3	5
            	2	4
            6	1	8
        """
        return "\n".join(
            "\t".join("" if v == BLANK else str(v) for v in row)
            for row in self._grid
        )

    def __str__(self) -> str:
        return self.render()

    def __repr__(self) -> str:
        return f"PuzzleBoard(size={self._size}, rows={self._grid!r})"

    # -- helpers --------------------------------------------------------------

    def _swap(self, a: Position, b: Position) -> None:
        grid = self._grid
        va = grid[a.row][a.col]
        vb = grid[b.row][b.col]
        grid[a.row][a.col], grid[b.row][b.col] = vb, va
        self._index[va] = b
        self._index[vb] = a
