"""Tests for BoardState."""

import pytest

from gambit.core.board import BoardState, MissingKingError
from gambit.core.enums import Color, Direction, PieceKind
from gambit.core.location import Location, parse_square
from gambit.core.move import PawnDoubleMove, RegularMove
from gambit.core.notation import board_from_fen
from gambit.core.piece import Piece

E1 = parse_square("e1")
E2 = parse_square("e2")
E4 = parse_square("e4")
E8 = parse_square("e8")


class TestBoardInitial:
    def test_piece_count(self) -> None:
        board = BoardState.initial()
        assert len(board) == 32

    def test_one_king_per_color(self) -> None:
        board = BoardState.initial()
        assert board.count(Color.WHITE, PieceKind.KING) == 1
        assert board.count(Color.BLACK, PieceKind.KING) == 1

    def test_kings(self) -> None:
        board = BoardState.initial()
        assert board[E1] == Piece(Color.WHITE, PieceKind.KING)
        assert board[E8] == Piece(Color.BLACK, PieceKind.KING)
        assert board.king_location(Color.WHITE) == E1
        assert board.king_location(Color.BLACK) == E8

    def test_back_ranks(self) -> None:
        board = BoardState.initial()
        expected = [
            PieceKind.ROOK, PieceKind.KNIGHT, PieceKind.BISHOP, PieceKind.QUEEN,
            PieceKind.KING, PieceKind.BISHOP, PieceKind.KNIGHT, PieceKind.ROOK,
        ]
        for col, kind in enumerate(expected):
            assert board[Location(col, 0)] == Piece(Color.WHITE, kind)
            assert board[Location(col, 7)] == Piece(Color.BLACK, kind)

    def test_pawns_and_empty_middle(self) -> None:
        board = BoardState.initial()
        for col in range(8):
            assert board[Location(col, 1)] == Piece(Color.WHITE, PieceKind.PAWN)
            assert board[Location(col, 6)] == Piece(Color.BLACK, PieceKind.PAWN)
            for row in range(2, 6):
                assert board.is_empty(Location(col, row))

    def test_directions(self) -> None:
        board = BoardState.initial()
        assert board.direction(Color.WHITE) == Direction.UP
        assert board.direction(Color.BLACK) == Direction.DOWN
        assert board.pawn_start_row(Color.WHITE) == 1
        assert board.promotion_row(Color.BLACK) == 0


class TestBoardRotated:
    def test_white_at_top(self) -> None:
        board = BoardState.initial(Direction.DOWN)
        assert board.direction(Color.WHITE) == Direction.DOWN
        assert board[Location(0, 6)] == Piece(Color.WHITE, PieceKind.PAWN)
        assert board[Location(0, 1)] == Piece(Color.BLACK, PieceKind.PAWN)

    def test_kings_on_column_three(self) -> None:
        board = BoardState.initial(Direction.DOWN)
        assert board.king_location(Color.WHITE) == Location(3, 7)
        assert board.king_location(Color.BLACK) == Location(3, 0)

    def test_pawn_rows(self) -> None:
        board = BoardState.initial(Direction.DOWN)
        assert board.pawn_start_row(Color.WHITE) == 6
        assert board.promotion_row(Color.WHITE) == 0
        assert board.forward(Color.BLACK) == 1


class TestBoardMutation:
    def test_place_and_remove(self) -> None:
        board = BoardState()
        p = Piece(Color.WHITE, PieceKind.KNIGHT)
        board.place(p, E4)
        assert board[E4] is p
        assert board.remove(E4) is p
        assert board.is_empty(E4)
        assert board.remove(E4) is None

    def test_place_replaces_occupant(self) -> None:
        board = BoardState()
        board.place(Piece(Color.BLACK, PieceKind.PAWN), E4)
        board.place(Piece(Color.WHITE, PieceKind.QUEEN), E4)
        assert len(board) == 1
        assert board[E4] == Piece(Color.WHITE, PieceKind.QUEEN)

    def test_king_cache_follows_moves(self) -> None:
        board = BoardState.initial()
        board.remove(E2)
        RegularMove(E1, E2).apply(board)
        assert board.king_location(Color.WHITE) == E2

    def test_missing_king_raises(self) -> None:
        board = BoardState()
        with pytest.raises(MissingKingError):
            board.king_location(Color.WHITE)
        assert not board.has_king(Color.WHITE)

    def test_clear(self) -> None:
        board = BoardState.initial()
        board.last_move = RegularMove(E2, E4)
        board.clear()
        assert len(board) == 0
        assert board.last_move is None
        assert not board.has_king(Color.BLACK)

    def test_pieces_filters_by_color(self) -> None:
        board = BoardState.initial()
        whites = list(board.pieces(Color.WHITE))
        assert len(whites) == 16
        assert all(p.color == Color.WHITE for _, p in whites)


class TestBoardCopy:
    def test_copy_equal(self) -> None:
        board = BoardState.initial()
        assert board.copy() == board

    def test_copy_independent_pieces(self) -> None:
        board = BoardState.initial()
        clone = board.copy()
        PawnDoubleMove(E2, E4).apply(clone)
        assert board[E2] is not None
        assert board[E4] is None
        assert board.last_move is None
        assert clone.last_move == PawnDoubleMove(E2, E4)

    def test_copy_independent_bookkeeping(self) -> None:
        board = BoardState.initial()
        clone = board.copy()
        clone[E1].record_move(RegularMove(E1, E2))
        assert clone[E1].move_count == 1
        assert board[E1].move_count == 0
        assert board[E1].last_move is None

    def test_copy_keeps_bookkeeping(self) -> None:
        board = BoardState.initial()
        move = RegularMove(E1, E2)
        board[E1].record_move(move)
        clone = board.copy()
        assert clone[E1].move_count == 1
        assert clone[E1].last_move == move
        assert clone[E1] is not board[E1]

    def test_copy_independent_king_cache(self) -> None:
        board = BoardState.initial()
        clone = board.copy()
        clone.remove(E2)
        RegularMove(E1, E2).apply(clone)
        assert clone.king_location(Color.WHITE) == E2
        assert board.king_location(Color.WHITE) == E1

    def test_copy_keeps_direction(self) -> None:
        board = BoardState.initial(Direction.DOWN)
        assert board.copy().direction(Color.WHITE) == Direction.DOWN


class TestBoardCheck:
    def test_not_in_check_at_start(self) -> None:
        board = BoardState.initial()
        assert not board.is_in_check(Color.WHITE)
        assert not board.is_in_check(Color.BLACK)

    def test_rook_gives_check(self) -> None:
        board = board_from_fen("4k3/8/8/8/8/8/8/4RK2")
        assert board.is_in_check(Color.BLACK)
        assert not board.is_in_check(Color.WHITE)

    def test_blocked_rook_no_check(self) -> None:
        board = board_from_fen("4k3/4p3/8/8/8/8/8/4RK2")
        assert not board.is_in_check(Color.BLACK)


class TestBoardRepr:
    def test_repr_has_eight_ranks(self) -> None:
        text = repr(BoardState.initial())
        assert text.splitlines()[0].startswith("8 r n b q k b n r")
        assert text.splitlines()[-1].strip() == "a b c d e f g h"
