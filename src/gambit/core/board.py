"""BoardState - piece placement on an 8x8 board."""

from __future__ import annotations

from collections.abc import Iterator
from typing import TYPE_CHECKING

from gambit.core.enums import Color, Direction, PieceKind
from gambit.core.location import BOARD_SIZE, Location
from gambit.core.move_generator import attacks_square
from gambit.core.piece import Piece

if TYPE_CHECKING:
    from gambit.core.move import Move

_BACK_RANK: tuple[PieceKind, ...] = (
    PieceKind.ROOK,
    PieceKind.KNIGHT,
    PieceKind.BISHOP,
    PieceKind.QUEEN,
    PieceKind.KING,
    PieceKind.BISHOP,
    PieceKind.KNIGHT,
    PieceKind.ROOK,
)


class MissingKingError(LookupError):
    """A color has no king on the board.

    Kings are never captured, so this only happens when a board is assembled
    by hand without one.
    """


class BoardState:
    """Mutable mapping of squares to pieces with a king-location cache.

    Every placement goes through :meth:`place` / :meth:`remove` so the cache
    always agrees with the grid.  ``last_move`` is the most recent move
    applied to this board; en passant eligibility is read from it.
    """

    __slots__ = ("_pieces", "_king_locations", "_directions", "last_move")

    def __init__(self, white_direction: Direction = Direction.UP) -> None:
        self._pieces: dict[Location, Piece] = {}
        self._king_locations: dict[Color, Location] = {}
        self._directions: dict[Color, Direction] = {
            Color.WHITE: white_direction,
            Color.BLACK: white_direction.opposite,
        }
        self.last_move: Move | None = None

    # -- Element access -----------------------------------------------------

    def get(self, location: Location) -> Piece | None:
        return self._pieces.get(location)

    def __getitem__(self, location: Location) -> Piece | None:
        return self._pieces.get(location)

    def is_empty(self, location: Location) -> bool:
        return location not in self._pieces

    def place(self, piece: Piece, location: Location) -> None:
        """Put *piece* on *location*, replacing whatever stood there."""
        self.remove(location)
        self._pieces[location] = piece
        if piece.kind == PieceKind.KING:
            self._king_locations[piece.color] = location

    def remove(self, location: Location) -> Piece | None:
        """Take the piece off *location* and return it (``None`` if empty)."""
        piece = self._pieces.pop(location, None)
        if (
            piece is not None
            and piece.kind == PieceKind.KING
            and self._king_locations.get(piece.color) == location
        ):
            del self._king_locations[piece.color]
        return piece

    # -- Query helpers ------------------------------------------------------

    def king_location(self, color: Color) -> Location:
        """Return the king square for *color*."""
        try:
            return self._king_locations[color]
        except KeyError:
            raise MissingKingError(f"No {color.name} king on board") from None

    def has_king(self, color: Color) -> bool:
        return color in self._king_locations

    def pieces(self, color: Color | None = None) -> Iterator[tuple[Location, Piece]]:
        """(location, piece) pairs, optionally only those of *color*.

        Iterates over a snapshot so callers may mutate the board meanwhile.
        """
        for location, piece in list(self._pieces.items()):
            if color is None or piece.color == color:
                yield location, piece

    def count(self, color: Color, kind: PieceKind) -> int:
        return sum(1 for _, p in self.pieces(color) if p.kind == kind)

    def direction(self, color: Color) -> Direction:
        """Direction in which *color*'s pawns advance."""
        return self._directions[color]

    def forward(self, color: Color) -> int:
        """Row delta of one forward pawn step for *color*."""
        return self._directions[color].delta

    def pawn_start_row(self, color: Color) -> int:
        return 1 if self.forward(color) > 0 else BOARD_SIZE - 2

    def promotion_row(self, color: Color) -> int:
        return BOARD_SIZE - 1 if self.forward(color) > 0 else 0

    def is_in_check(self, color: Color) -> bool:
        """Is *color*'s king attacked by the opponent?"""
        return attacks_square(self, self.king_location(color), color.opposite)

    # -- Mutation / copying -------------------------------------------------

    def copy(self) -> BoardState:
        """Deep copy: pieces are duplicated, caches are independent."""
        b = BoardState(self._directions[Color.WHITE])
        b._pieces = {loc: piece.copy() for loc, piece in self._pieces.items()}
        b._king_locations = self._king_locations.copy()
        b.last_move = self.last_move
        return b

    def clear(self) -> None:
        self._pieces = {}
        self._king_locations = {}
        self.last_move = None

    # -- Factory ------------------------------------------------------------

    @classmethod
    def initial(cls, white_direction: Direction = Direction.UP) -> BoardState:
        """Standard starting position.

        With ``Direction.DOWN`` the board is turned around: white occupies
        rows 6-7 and both kings stand on column 3.
        """
        b = cls(white_direction)
        for col, kind in enumerate(_BACK_RANK):
            for color, row in ((Color.WHITE, 0), (Color.BLACK, 7)):
                loc = Location(col, row)
                if white_direction == Direction.DOWN:
                    loc = loc.rotated()
                b.place(Piece(color, kind), loc)
        for col in range(BOARD_SIZE):
            for color in Color:
                row = b.pawn_start_row(color)
                b.place(Piece(color, PieceKind.PAWN), Location(col, row))
        return b

    # -- Dunder helpers -----------------------------------------------------

    def __len__(self) -> int:
        return len(self._pieces)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, BoardState):
            return NotImplemented
        return self.placement() == other.placement()

    def placement(self) -> dict[Location, tuple[Color, PieceKind]]:
        """Color and kind per occupied square, ignoring move bookkeeping."""
        return {loc: (p.color, p.kind) for loc, p in self._pieces.items()}

    def __repr__(self) -> str:
        rows: list[str] = []
        for row in range(BOARD_SIZE - 1, -1, -1):
            cells = []
            for col in range(BOARD_SIZE):
                p = self._pieces.get(Location(col, row))
                cells.append(str(p) if p else ".")
            rows.append(f"{row + 1} {' '.join(cells)}")
        rows.append("  a b c d e f g h")
        return "\n".join(rows)
