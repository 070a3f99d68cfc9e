"""Tests for check, game-over and protection queries."""

from gambit.core.board import BoardState
from gambit.core.enums import Color, GameResult
from gambit.core.location import parse_square
from gambit.core.move import PawnDoubleMove, RegularMove
from gambit.core.notation import board_from_fen
from gambit.core.rules import Rules


def _fools_mate() -> BoardState:
    board = BoardState.initial()
    for move in (
        RegularMove(parse_square("f2"), parse_square("f3")),
        PawnDoubleMove(parse_square("e7"), parse_square("e5")),
        PawnDoubleMove(parse_square("g2"), parse_square("g4")),
        RegularMove(parse_square("d8"), parse_square("h4")),
    ):
        move.apply(board)
    return board


class TestCheckmate:
    def test_fools_mate_is_check(self) -> None:
        board = _fools_mate()
        assert Rules.is_in_check(board, Color.WHITE)
        assert not Rules.is_in_check(board, Color.BLACK)

    def test_fools_mate_is_game_over(self) -> None:
        board = _fools_mate()
        assert Rules.is_game_over(board, Color.WHITE)
        assert Rules.is_checkmate(board, Color.WHITE)
        assert not Rules.is_stalemate(board, Color.WHITE)
        assert Rules.game_result(board, Color.WHITE) == GameResult.BLACK_WINS

    def test_winner_can_still_move(self) -> None:
        assert not Rules.is_game_over(_fools_mate(), Color.BLACK)

    def test_start_in_progress(self) -> None:
        board = BoardState.initial()
        assert not Rules.is_game_over(board, Color.WHITE)
        assert Rules.game_result(board, Color.WHITE) == GameResult.IN_PROGRESS

    def test_check_with_escape_is_not_over(self) -> None:
        board = board_from_fen("4k3/8/8/8/8/8/8/4RK2")
        assert Rules.is_in_check(board, Color.BLACK)
        assert not Rules.is_game_over(board, Color.BLACK)


class TestStalemate:
    STALEMATE = "7k/5Q2/6K1/8/8/8/8/8"

    def test_stalemate_detected(self) -> None:
        board = board_from_fen(self.STALEMATE)
        assert Rules.is_stalemate(board, Color.BLACK)
        assert not Rules.is_checkmate(board, Color.BLACK)

    def test_stalemate_ends_game_as_loss(self) -> None:
        board = board_from_fen(self.STALEMATE)
        assert Rules.is_game_over(board, Color.BLACK)
        assert Rules.game_result(board, Color.BLACK) == GameResult.WHITE_WINS


class TestProtection:
    def test_start_pawn_protected(self) -> None:
        board = BoardState.initial()
        assert Rules.is_protected(board, parse_square("e2"))

    def test_lone_pawn_unprotected(self) -> None:
        board = board_from_fen("4k3/8/8/8/3p4/8/8/4K3")
        assert not Rules.is_protected(board, parse_square("d4"))

    def test_pawn_protects_diagonally_forward(self) -> None:
        board = board_from_fen("4k3/8/8/8/3p4/4p3/8/4K3")
        assert Rules.is_protected(board, parse_square("e3"))
        assert not Rules.is_protected(board, parse_square("d4"))

    def test_empty_square(self) -> None:
        board = BoardState.initial()
        assert not Rules.is_protected(board, parse_square("e4"))
