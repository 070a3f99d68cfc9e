"""Core domain layer: pure chess rules with zero external dependencies.

Quick start::

    from gambit.core import BoardState, Color, MoveGenerator

    board = BoardState.initial()
    for move in MoveGenerator(board).legal_moves(Color.WHITE):
        print(move)
"""

from gambit.core.board import BoardState, MissingKingError
from gambit.core.enums import PROMOTION_KINDS, Color, Direction, GameResult, PieceKind
from gambit.core.location import Location, parse_square, square_name
from gambit.core.move import (
    CastleMove,
    Move,
    PawnDoubleMove,
    PromotionMove,
    RegularMove,
)
from gambit.core.move_generator import MoveGenerator, attacks_square, legal_moves
from gambit.core.notation import STARTING_PLACEMENT, board_from_fen, board_to_fen
from gambit.core.piece import Piece
from gambit.core.rules import Rules

__all__ = [
    # Enums
    "Color",
    "Direction",
    "GameResult",
    "PROMOTION_KINDS",
    "PieceKind",
    # Geometry
    "Location",
    "parse_square",
    "square_name",
    # Domain objects
    "BoardState",
    "CastleMove",
    "MissingKingError",
    "Move",
    "MoveGenerator",
    "PawnDoubleMove",
    "Piece",
    "PromotionMove",
    "RegularMove",
    "Rules",
    "attacks_square",
    "legal_moves",
    # Notation
    "STARTING_PLACEMENT",
    "board_from_fen",
    "board_to_fen",
]
