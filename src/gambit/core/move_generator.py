"""Legal move generation + attack detection."""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING

from gambit.core.enums import Color, PieceKind
from gambit.core.location import DIAGONAL_DIRS, ORTHOGONAL_DIRS, Location
from gambit.core.move import (
    CastleMove,
    Move,
    PawnDoubleMove,
    PromotionMove,
    RegularMove,
)

if TYPE_CHECKING:
    from gambit.core.board import BoardState
    from gambit.core.piece import Piece


# -- Attack probes ----------------------------------------------------------
#
# Each probe answers "does a piece of this kind and of *by_color* reach
# *target*?" by looking outwards from the target square.  Reachability is
# purely geometric: whether the attacking move would itself be legal is not
# considered.


def _slider_reaches(
    board: BoardState,
    target: Location,
    by_color: Color,
    directions: tuple[tuple[int, int], ...],
    kinds: tuple[PieceKind, ...],
) -> bool:
    for dcol, drow in directions:
        for loc in target.ray(dcol, drow):
            piece = board.get(loc)
            if piece is None:
                continue
            if piece.color == by_color and piece.kind in kinds:
                return True
            break
    return False


def _pawn_attacks(board: BoardState, target: Location, by_color: Color) -> bool:
    # A pawn attacks one step forward diagonally, so look one step back.
    back = -board.forward(by_color)
    for dcol in (-1, 1):
        loc = target.step(dcol, back)
        if loc is None:
            continue
        piece = board.get(loc)
        if piece is None or piece.color != by_color:
            continue
        if piece.kind == PieceKind.PAWN:
            return True
    return False


def _knight_attacks(board: BoardState, target: Location, by_color: Color) -> bool:
    for loc in target.knight_jumps():
        piece = board.get(loc)
        if piece is None or piece.color != by_color:
            continue
        if piece.kind == PieceKind.KNIGHT:
            return True
    return False


def _bishop_attacks(board: BoardState, target: Location, by_color: Color) -> bool:
    return _slider_reaches(board, target, by_color, DIAGONAL_DIRS, (PieceKind.BISHOP,))


def _rook_attacks(board: BoardState, target: Location, by_color: Color) -> bool:
    return _slider_reaches(board, target, by_color, ORTHOGONAL_DIRS, (PieceKind.ROOK,))


def _queen_attacks(board: BoardState, target: Location, by_color: Color) -> bool:
    return _slider_reaches(
        board, target, by_color, DIAGONAL_DIRS + ORTHOGONAL_DIRS, (PieceKind.QUEEN,)
    )


def _king_attacks(board: BoardState, target: Location, by_color: Color) -> bool:
    for loc in target.neighbours():
        piece = board.get(loc)
        if piece is None or piece.color != by_color:
            continue
        if piece.kind == PieceKind.KING:
            return True
    return False


AttackProbe = Callable[["BoardState", Location, Color], bool]
_Generator = Callable[["MoveGenerator", Location, "Piece", list[Move]], None]

ATTACK_PROBES: dict[PieceKind, AttackProbe] = {
    PieceKind.PAWN: _pawn_attacks,
    PieceKind.KNIGHT: _knight_attacks,
    PieceKind.BISHOP: _bishop_attacks,
    PieceKind.ROOK: _rook_attacks,
    PieceKind.QUEEN: _queen_attacks,
    PieceKind.KING: _king_attacks,
}


def attacks_square(board: BoardState, target: Location, by_color: Color) -> bool:
    """Is *target* attacked by any piece of *by_color*?"""
    return any(probe(board, target, by_color) for probe in ATTACK_PROBES.values())


# -- Move generation --------------------------------------------------------


class MoveGenerator:
    """Generates legal moves on a :class:`BoardState`.

    Every candidate is tried on a copy of the board and kept only if the
    mover's king is not attacked afterwards; the board passed in is never
    modified.
    """

    __slots__ = ("_board",)

    def __init__(self, board: BoardState) -> None:
        self._board = board

    # -- Public API ---------------------------------------------------------

    def legal_moves(self, color: Color) -> list[Move]:
        """All legal moves for *color*, aggregated over its pieces."""
        moves: list[Move] = []
        for location, piece in self._board.pieces(color):
            self._DISPATCH[piece.kind](self, location, piece, moves)
        return moves

    def valid_moves(self, location: Location) -> list[Move]:
        """Legal moves of the piece on *location* (empty if the square is)."""
        piece = self._board.get(location)
        if piece is None:
            return []
        moves: list[Move] = []
        self._DISPATCH[piece.kind](self, location, piece, moves)
        return moves

    def has_legal_move(self, color: Color) -> bool:
        for location, piece in self._board.pieces(color):
            moves: list[Move] = []
            self._DISPATCH[piece.kind](self, location, piece, moves)
            if moves:
                return True
        return False

    def validate_move(
        self, origin: Location, destination: Location | None
    ) -> RegularMove | None:
        """A plain move from *origin* to *destination* if it is legal.

        Rejects destinations that are off the board or hold a piece of the
        mover's own color, and moves that leave the mover's king attacked.
        """
        if destination is None:
            return None
        piece = self._board.get(origin)
        if piece is None:
            return None
        occupant = self._board.get(destination)
        if occupant is not None and occupant.color == piece.color:
            return None
        move = RegularMove(origin, destination)
        if self._leaves_king_safe(move, piece.color):
            return move
        return None

    # -- Attack detection (public) -----------------------------------------

    def is_in_check(self, color: Color) -> bool:
        return self._board.is_in_check(color)

    def is_square_attacked(self, location: Location, by_color: Color) -> bool:
        return attacks_square(self._board, location, by_color)

    # -- Legality helpers (private) ----------------------------------------

    def _leaves_king_safe(self, move: Move, color: Color) -> bool:
        probe = self._board.copy()
        move.apply(probe)
        return not probe.is_in_check(color)

    def _add_if_legal(self, move: Move, color: Color, moves: list[Move]) -> None:
        if self._leaves_king_safe(move, color):
            moves.append(move)

    # -- Piece-specific generators (private) -------------------------------

    def _gen_pawn(self, loc: Location, piece: Piece, moves: list[Move]) -> None:
        board = self._board
        color = piece.color
        fwd = board.forward(color)
        last_row = board.promotion_row(color)

        one_step = loc.step(0, fwd)
        if one_step is not None and board.is_empty(one_step):
            if one_step.row == last_row:
                self._add_if_legal(PromotionMove(loc, one_step), color, moves)
            else:
                self._add_if_legal(RegularMove(loc, one_step), color, moves)
                if loc.row == board.pawn_start_row(color):
                    two_step = loc.step(0, 2 * fwd)
                    if two_step is not None and board.is_empty(two_step):
                        self._add_if_legal(PawnDoubleMove(loc, two_step), color, moves)

        for dcol in (-1, 1):
            target = loc.step(dcol, fwd)
            if target is None:
                continue
            victim = board.get(target)
            if victim is not None:
                if victim.color == color:
                    continue
                if target.row == last_row:
                    self._add_if_legal(PromotionMove(loc, target), color, moves)
                else:
                    self._add_if_legal(RegularMove(loc, target), color, moves)
                continue

            beside = loc.step(dcol, 0)
            if beside is not None and self._can_take_en_passant(beside, color):
                move = RegularMove(loc, target, captured=beside)
                self._add_if_legal(move, color, moves)

    def _can_take_en_passant(self, beside: Location, color: Color) -> bool:
        """Did an enemy pawn land on *beside* with a double step last ply?"""
        last = self._board.last_move
        if not isinstance(last, PawnDoubleMove) or last.destination != beside:
            return False
        pawn = self._board.get(beside)
        return pawn is not None and pawn.color != color and pawn.kind == PieceKind.PAWN

    def _gen_knight(self, loc: Location, piece: Piece, moves: list[Move]) -> None:
        for target in loc.knight_jumps():
            move = self.validate_move(loc, target)
            if move is not None:
                moves.append(move)

    def _gen_sliding(
        self,
        loc: Location,
        piece: Piece,
        directions: tuple[tuple[int, int], ...],
        moves: list[Move],
    ) -> None:
        board = self._board
        for dcol, drow in directions:
            for target in loc.ray(dcol, drow):
                occupant = board.get(target)
                if occupant is None:
                    self._add_if_legal(RegularMove(loc, target), piece.color, moves)
                    continue
                if occupant.color != piece.color:
                    self._add_if_legal(RegularMove(loc, target), piece.color, moves)
                break

    def _gen_bishop(self, loc: Location, piece: Piece, moves: list[Move]) -> None:
        self._gen_sliding(loc, piece, DIAGONAL_DIRS, moves)

    def _gen_rook(self, loc: Location, piece: Piece, moves: list[Move]) -> None:
        self._gen_sliding(loc, piece, ORTHOGONAL_DIRS, moves)

    def _gen_queen(self, loc: Location, piece: Piece, moves: list[Move]) -> None:
        self._gen_sliding(loc, piece, DIAGONAL_DIRS + ORTHOGONAL_DIRS, moves)

    def _gen_king(self, loc: Location, piece: Piece, moves: list[Move]) -> None:
        for target in loc.neighbours():
            move = self.validate_move(loc, target)
            if move is not None:
                moves.append(move)

        if piece.move_count == 0:
            for rook_col in (0, 7):
                castle = self._castle_towards(loc, piece, rook_col)
                if castle is not None:
                    moves.append(castle)

    def _castle_towards(
        self, king_loc: Location, king: Piece, rook_col: int
    ) -> CastleMove | None:
        board = self._board
        distance = rook_col - king_loc.col
        # King travels two squares, so the rook must stand at least three away.
        if abs(distance) < 3:
            return None
        rook_loc = Location(rook_col, king_loc.row)
        rook = board.get(rook_loc)
        if (
            rook is None
            or rook.kind != PieceKind.ROOK
            or rook.color != king.color
            or rook.move_count != 0
        ):
            return None

        step = 1 if distance > 0 else -1
        for col in range(king_loc.col + step, rook_col, step):
            if not board.is_empty(Location(col, king_loc.row)):
                return None

        passed = Location(king_loc.col + step, king_loc.row)
        destination = Location(king_loc.col + 2 * step, king_loc.row)

        # Start, pass-through and destination squares must all be safe.
        if board.is_in_check(king.color):
            return None
        if not self._leaves_king_safe(RegularMove(king_loc, passed), king.color):
            return None
        if not self._leaves_king_safe(RegularMove(king_loc, destination), king.color):
            return None

        return CastleMove(king_loc, destination, rook_loc, passed)

    _DISPATCH: dict[PieceKind, _Generator] = {
        PieceKind.PAWN: _gen_pawn,
        PieceKind.KNIGHT: _gen_knight,
        PieceKind.BISHOP: _gen_bishop,
        PieceKind.ROOK: _gen_rook,
        PieceKind.QUEEN: _gen_queen,
        PieceKind.KING: _gen_king,
    }


def legal_moves(board: BoardState, color: Color) -> list[Move]:
    """Convenience wrapper: all legal moves of *color* on *board*."""
    return MoveGenerator(board).legal_moves(color)
