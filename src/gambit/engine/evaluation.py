"""Material-only static evaluation."""

from __future__ import annotations

from typing import TYPE_CHECKING

from gambit.core.enums import PieceKind

if TYPE_CHECKING:
    from gambit.core.board import BoardState
    from gambit.core.enums import Color

PIECE_VALUES: dict[PieceKind, int] = {
    PieceKind.PAWN: 100,
    PieceKind.KNIGHT: 300,
    PieceKind.BISHOP: 300,
    PieceKind.ROOK: 500,
    PieceKind.QUEEN: 900,
    PieceKind.KING: 9000,
}


def evaluate(board: BoardState, color: Color) -> int:
    """Material of *color* minus material of its opponent."""
    score = 0
    for _, piece in board.pieces():
        value = PIECE_VALUES[piece.kind]
        if piece.color == color:
            score += value
        else:
            score -= value
    return score
