"""Tests for FEN placement parsing and serialization."""

import pytest

from gambit.core.board import BoardState
from gambit.core.enums import Color, Direction, PieceKind
from gambit.core.location import parse_square
from gambit.core.notation import STARTING_PLACEMENT, board_from_fen, board_to_fen
from gambit.core.piece import Piece


class TestBoardFromFen:
    def test_starting_placement_matches_initial(self) -> None:
        assert board_from_fen(STARTING_PLACEMENT) == BoardState.initial()

    def test_trailing_fields_ignored(self) -> None:
        fen = STARTING_PLACEMENT + " w KQkq - 0 1"
        assert board_from_fen(fen) == BoardState.initial()

    def test_pieces_have_no_history(self) -> None:
        board = board_from_fen("4k3/8/8/8/8/8/8/R3K3")
        rook = board[parse_square("a1")]
        assert rook == Piece(Color.WHITE, PieceKind.ROOK)
        assert rook.move_count == 0

    def test_direction_passed_through(self) -> None:
        board = board_from_fen("4k3/8/8/8/8/8/8/4K3", Direction.DOWN)
        assert board.direction(Color.WHITE) == Direction.DOWN

    def test_king_cache_built(self) -> None:
        board = board_from_fen("8/8/8/3k4/8/8/8/K7")
        assert board.king_location(Color.BLACK) == parse_square("d5")
        assert board.king_location(Color.WHITE) == parse_square("a1")

    @pytest.mark.parametrize(
        "bad",
        [
            "",
            "8/8/8",
            "9/8/8/8/8/8/8/8",
            "rnbqkbnrr/8/8/8/8/8/8/8",
            "7/8/8/8/8/8/8/8",
            "x7/8/8/8/8/8/8/8",
        ],
    )
    def test_invalid(self, bad: str) -> None:
        with pytest.raises(ValueError):
            board_from_fen(bad)


class TestBoardToFen:
    def test_starting(self) -> None:
        assert board_to_fen(BoardState.initial()) == STARTING_PLACEMENT

    def test_after_move(self) -> None:
        board = board_from_fen("4k3/8/8/8/8/8/4P3/4K3")
        board.place(board.remove(parse_square("e2")), parse_square("e4"))
        assert board_to_fen(board) == "4k3/8/8/8/4P3/8/8/4K3"

    def test_round_trip(self) -> None:
        fen = "r3k2r/p1ppqpb1/bn2pnp1/3PN3/1p2P3/2N2Q1p/PPPBBPPP/R3K2R"
        assert board_to_fen(board_from_fen(fen)) == fen
