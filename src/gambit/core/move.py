"""Move value objects.

A move is one of four frozen records.  Each knows how to apply itself to a
:class:`~gambit.core.board.BoardState`; that is the only path by which a
board changes during play or search.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import TYPE_CHECKING, TypeAlias

from gambit.core.enums import PROMOTION_KINDS, PieceKind
from gambit.core.location import Location
from gambit.core.piece import Piece

if TYPE_CHECKING:
    from gambit.core.board import BoardState

_PROMO_CHARS: dict[PieceKind, str] = {
    PieceKind.KNIGHT: "n",
    PieceKind.BISHOP: "b",
    PieceKind.ROOK: "r",
    PieceKind.QUEEN: "q",
}


def _is_enemy_at(board: BoardState, origin: Location, target: Location) -> bool:
    mover = board.get(origin)
    victim = board.get(target)
    if mover is None or victim is None:
        return False
    return victim.color != mover.color


@dataclass(frozen=True, slots=True)
class RegularMove:
    """Plain relocation, optionally capturing.

    ``captured`` is set only for en passant, where the taken pawn does not
    stand on the destination square.
    """

    origin: Location
    destination: Location
    captured: Location | None = None

    def apply(self, board: BoardState) -> None:
        piece = board.remove(self.origin)
        if piece is None:
            raise ValueError(f"No piece on {self.origin} to move")
        if self.captured is not None:
            board.remove(self.captured)
        board.remove(self.destination)
        board.place(piece, self.destination)
        board.last_move = self

    def is_capture(self, board: BoardState) -> bool:
        if self.captured is not None:
            return True
        return _is_enemy_at(board, self.origin, self.destination)

    @property
    def is_en_passant(self) -> bool:
        return self.captured is not None

    def rotated(self) -> RegularMove:
        captured = self.captured.rotated() if self.captured is not None else None
        return RegularMove(self.origin.rotated(), self.destination.rotated(), captured)

    def __str__(self) -> str:
        return f"{self.origin}{self.destination}"


@dataclass(frozen=True, slots=True)
class PawnDoubleMove:
    """Two-square pawn advance; the pawn may be taken en passant next ply."""

    origin: Location
    destination: Location

    @property
    def skipped(self) -> Location:
        """The square the pawn passed over."""
        return Location(
            self.origin.col, (self.origin.row + self.destination.row) // 2
        )

    def apply(self, board: BoardState) -> None:
        piece = board.remove(self.origin)
        if piece is None:
            raise ValueError(f"No piece on {self.origin} to move")
        board.place(piece, self.destination)
        board.last_move = self

    def is_capture(self, board: BoardState) -> bool:
        return False

    def rotated(self) -> PawnDoubleMove:
        return PawnDoubleMove(self.origin.rotated(), self.destination.rotated())

    def __str__(self) -> str:
        return f"{self.origin}{self.destination}"


@dataclass(frozen=True, slots=True)
class CastleMove:
    """King and rook relocate together."""

    origin: Location
    destination: Location
    rook_origin: Location
    rook_destination: Location

    def apply(self, board: BoardState) -> None:
        king = board.remove(self.origin)
        rook = board.remove(self.rook_origin)
        if king is None or rook is None:
            raise ValueError(
                f"Castling needs a king on {self.origin} "
                f"and a rook on {self.rook_origin}"
            )
        board.place(king, self.destination)
        board.place(rook, self.rook_destination)
        board.last_move = self

    def is_capture(self, board: BoardState) -> bool:
        return False

    @property
    def is_short(self) -> bool:
        """Castling with the rook nearest the king (kingside in the standard setup)."""
        return abs(self.rook_origin.col - self.origin.col) == 3

    def rotated(self) -> CastleMove:
        return CastleMove(
            self.origin.rotated(),
            self.destination.rotated(),
            self.rook_origin.rotated(),
            self.rook_destination.rotated(),
        )

    def __str__(self) -> str:
        return f"{self.origin}{self.destination}"


@dataclass(frozen=True, slots=True)
class PromotionMove:
    """Pawn reaching the far row.

    ``kind`` is chosen by the player before the move is committed; an
    unresolved promotion (``kind is None``) becomes a queen.
    """

    origin: Location
    destination: Location
    kind: PieceKind | None = None

    @property
    def promoted_kind(self) -> PieceKind:
        return self.kind if self.kind is not None else PieceKind.QUEEN

    def with_kind(self, kind: PieceKind) -> PromotionMove:
        if kind not in PROMOTION_KINDS:
            raise ValueError(f"Cannot promote to {kind.name}")
        return replace(self, kind=kind)

    def apply(self, board: BoardState) -> None:
        pawn = board.remove(self.origin)
        if pawn is None:
            raise ValueError(f"No piece on {self.origin} to move")
        board.remove(self.destination)
        promoted = Piece(
            pawn.color, self.promoted_kind, pawn.move_count, pawn.last_move
        )
        board.place(promoted, self.destination)
        board.last_move = self

    def is_capture(self, board: BoardState) -> bool:
        return _is_enemy_at(board, self.origin, self.destination)

    def rotated(self) -> PromotionMove:
        return PromotionMove(
            self.origin.rotated(), self.destination.rotated(), self.kind
        )

    def __str__(self) -> str:
        suffix = _PROMO_CHARS.get(self.promoted_kind, "")
        return f"{self.origin}{self.destination}{suffix}"


Move: TypeAlias = RegularMove | PawnDoubleMove | CastleMove | PromotionMove


def same_squares(a: Move, b: Move) -> bool:
    """Whether two moves go from and to the same squares and are the same kind."""
    return (
        type(a) is type(b)
        and a.origin == b.origin
        and a.destination == b.destination
    )
