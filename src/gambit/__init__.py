"""Gambit: a two-player chess rules engine with a computer opponent.

Quick start::

    from gambit import Color, Strategy, apply_move, new_game, select_move

    board = new_game()
    move = select_move(Strategy.MINIMAX, Color.WHITE, board)
    apply_move(move, board)
"""

from __future__ import annotations

from gambit.core import BoardState, Color, Direction, Move, MoveGenerator, Rules
from gambit.engine import (
    NoLegalMoveError,
    SearchConfig,
    Strategy,
    create_engine,
    select_move,
)

__version__ = "0.1.0"


def new_game(white_direction: Direction = Direction.UP) -> BoardState:
    """Board in the standard starting arrangement."""
    return BoardState.initial(white_direction)


def legal_moves(color: Color, board: BoardState) -> list[Move]:
    """Every legal move for *color* on *board*; empty when it has none."""
    return MoveGenerator(board).legal_moves(color)


def apply_move(move: Move, board: BoardState) -> None:
    """Apply *move* to *board* in place."""
    move.apply(board)


def is_game_over(color: Color, board: BoardState) -> bool:
    """True when *color*, to move, has no legal move."""
    return Rules.is_game_over(board, color)


__all__ = [
    "BoardState",
    "Color",
    "Direction",
    "Move",
    "NoLegalMoveError",
    "SearchConfig",
    "Strategy",
    "apply_move",
    "create_engine",
    "is_game_over",
    "legal_moves",
    "new_game",
    "select_move",
]
