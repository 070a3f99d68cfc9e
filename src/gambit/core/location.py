"""Location value type and directional stepping helpers.

Board layout::

    row 7   a8 b8 ... h8
    ...
    row 0   a1 b1 ... h1
            col 0 ... col 7

Every stepping helper returns ``None`` when the step would leave the board,
so a ray can be walked until the helper runs out of squares.
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass

BOARD_SIZE = 8

KNIGHT_OFFSETS: tuple[tuple[int, int], ...] = (
    (-2, -1),
    (-2, 1),
    (-1, -2),
    (-1, 2),
    (1, -2),
    (1, 2),
    (2, -1),
    (2, 1),
)

KING_OFFSETS: tuple[tuple[int, int], ...] = (
    (-1, -1),
    (-1, 0),
    (-1, 1),
    (0, -1),
    (0, 1),
    (1, -1),
    (1, 0),
    (1, 1),
)

DIAGONAL_DIRS: tuple[tuple[int, int], ...] = ((-1, -1), (-1, 1), (1, -1), (1, 1))
ORTHOGONAL_DIRS: tuple[tuple[int, int], ...] = ((-1, 0), (1, 0), (0, -1), (0, 1))
ALL_DIRS: tuple[tuple[int, int], ...] = DIAGONAL_DIRS + ORTHOGONAL_DIRS


def on_board(col: int, row: int) -> bool:
    return 0 <= col < BOARD_SIZE and 0 <= row < BOARD_SIZE


@dataclass(frozen=True, slots=True)
class Location:
    """Immutable (column, row) coordinate on the 8x8 grid."""

    col: int
    row: int

    def __post_init__(self) -> None:
        if not on_board(self.col, self.row):
            raise ValueError(f"Location off board: ({self.col}, {self.row})")

    # ── Construction ─────────────────────────────────────────────────────

    @classmethod
    def at(cls, col: int, row: int) -> Location | None:
        """Location at (*col*, *row*), or ``None`` if that is off the board."""
        if not on_board(col, row):
            return None
        return cls(col, row)

    @classmethod
    def all(cls) -> Iterator[Location]:
        """Every square, row by row from row 0."""
        for row in range(BOARD_SIZE):
            for col in range(BOARD_SIZE):
                yield cls(col, row)

    # ── Stepping ─────────────────────────────────────────────────────────

    def step(self, dcol: int, drow: int) -> Location | None:
        return Location.at(self.col + dcol, self.row + drow)

    def up(self, n: int = 1) -> Location | None:
        return self.step(0, n)

    def down(self, n: int = 1) -> Location | None:
        return self.step(0, -n)

    def left(self, n: int = 1) -> Location | None:
        return self.step(-n, 0)

    def right(self, n: int = 1) -> Location | None:
        return self.step(n, 0)

    def up_left(self, n: int = 1) -> Location | None:
        return self.step(-n, n)

    def up_right(self, n: int = 1) -> Location | None:
        return self.step(n, n)

    def down_left(self, n: int = 1) -> Location | None:
        return self.step(-n, -n)

    def down_right(self, n: int = 1) -> Location | None:
        return self.step(n, -n)

    def ray(self, dcol: int, drow: int) -> Iterator[Location]:
        """Squares from here outwards in one direction, excluding the origin."""
        n = 1
        nxt = self.step(dcol, drow)
        while nxt is not None:
            yield nxt
            n += 1
            nxt = self.step(dcol * n, drow * n)

    def knight_jumps(self) -> Iterator[Location]:
        for dcol, drow in KNIGHT_OFFSETS:
            target = self.step(dcol, drow)
            if target is not None:
                yield target

    def neighbours(self) -> Iterator[Location]:
        for dcol, drow in KING_OFFSETS:
            target = self.step(dcol, drow)
            if target is not None:
                yield target

    def rotated(self) -> Location:
        """The same square seen from the opposite side of the board."""
        return Location(BOARD_SIZE - 1 - self.col, BOARD_SIZE - 1 - self.row)

    # ── Display ──────────────────────────────────────────────────────────

    def __str__(self) -> str:
        return square_name(self)


def square_name(loc: Location) -> str:
    """Human-readable name, e.g. ``Location(4, 3)`` → ``'e4'``."""
    return chr(ord("a") + loc.col) + str(loc.row + 1)


def parse_square(name: str) -> Location:
    """Parse square name, e.g. ``'e4'`` → ``Location(4, 3)``."""
    if len(name) != 2 or name[0] not in "abcdefgh" or name[1] not in "12345678":
        raise ValueError(f"Invalid square name: {name!r}")
    return Location(ord(name[0]) - ord("a"), int(name[1]) - 1)
