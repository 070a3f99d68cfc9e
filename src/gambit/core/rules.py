"""High-level chess rules: check, game over, protection."""

from __future__ import annotations

from typing import TYPE_CHECKING

from gambit.core.enums import Color, GameResult
from gambit.core.move_generator import MoveGenerator, attacks_square

if TYPE_CHECKING:
    from gambit.core.board import BoardState
    from gambit.core.location import Location


class Rules:
    """Static rule-checker that operates on a :class:`BoardState`."""

    # Product policy:
    # - A side without a legal move has lost, checkmated or stalemated.
    # - No draw rules (fifty-move, repetition, insufficient material).

    @staticmethod
    def is_in_check(board: BoardState, color: Color) -> bool:
        return board.is_in_check(color)

    @staticmethod
    def is_game_over(board: BoardState, color: Color) -> bool:
        """*color* is to move and has no legal move."""
        return not MoveGenerator(board).has_legal_move(color)

    @staticmethod
    def is_checkmate(board: BoardState, color: Color) -> bool:
        if not board.is_in_check(color):
            return False
        return Rules.is_game_over(board, color)

    @staticmethod
    def is_stalemate(board: BoardState, color: Color) -> bool:
        if board.is_in_check(color):
            return False
        return Rules.is_game_over(board, color)

    @staticmethod
    def game_result(board: BoardState, side_to_move: Color) -> GameResult:
        """Determine the current game result."""
        if Rules.is_game_over(board, side_to_move):
            return GameResult.win_for(side_to_move.opposite)
        return GameResult.IN_PROGRESS

    @staticmethod
    def is_protected(board: BoardState, location: Location) -> bool:
        """Is the piece on *location* defended by a piece of its own color?"""
        piece = board.get(location)
        if piece is None:
            return False
        return attacks_square(board, location, piece.color)
