"""Tests for the material evaluator."""

from gambit.core.board import BoardState
from gambit.core.enums import Color, PieceKind
from gambit.core.location import parse_square
from gambit.core.notation import board_from_fen
from gambit.engine.evaluation import PIECE_VALUES, evaluate


class TestEvaluate:
    def test_start_is_balanced(self) -> None:
        board = BoardState.initial()
        assert evaluate(board, Color.WHITE) == 0
        assert evaluate(board, Color.BLACK) == 0

    def test_missing_queen(self) -> None:
        board = BoardState.initial()
        board.remove(parse_square("d1"))
        assert evaluate(board, Color.WHITE) == -900
        assert evaluate(board, Color.BLACK) == 900

    def test_antisymmetric(self) -> None:
        board = board_from_fen("4k3/pp6/8/8/8/8/8/R2QK3")
        assert evaluate(board, Color.WHITE) == -evaluate(board, Color.BLACK)
        assert evaluate(board, Color.WHITE) == 500 + 900 - 200

    def test_values(self) -> None:
        assert PIECE_VALUES[PieceKind.PAWN] == 100
        assert PIECE_VALUES[PieceKind.KNIGHT] == PIECE_VALUES[PieceKind.BISHOP] == 300
        assert PIECE_VALUES[PieceKind.ROOK] == 500
        assert PIECE_VALUES[PieceKind.QUEEN] == 900
        assert PIECE_VALUES[PieceKind.KING] == 9000
