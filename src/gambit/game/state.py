"""Game state machine: tracks phase transitions and move history."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from gambit.core.board import BoardState
from gambit.core.enums import Color, Direction, GameResult
from gambit.core.move_generator import MoveGenerator
from gambit.core.notation import board_to_fen
from gambit.core.rules import Rules
from gambit.game.interfaces import GamePhase

if TYPE_CHECKING:
    from gambit.core.move import Move


@dataclass
class MoveRecord:
    """A single entry in the move history."""

    move: Move
    color: Color
    placement_after: str
    was_check: bool = False
    was_capture: bool = False


@dataclass
class GameState:
    """Manages game lifecycle: board, side to move, phase, result, history.

    This is a pure data/logic class with no threading and no Qt.
    """

    board: BoardState = field(default_factory=BoardState.initial, init=False)
    side_to_move: Color = field(default=Color.WHITE, init=False)
    phase: GamePhase = field(default=GamePhase.NOT_STARTED, init=False)
    result: GameResult = field(default=GameResult.IN_PROGRESS, init=False)
    move_history: list[MoveRecord] = field(default_factory=list, init=False)

    # ── Initialisation ───────────────────────────────────────────────────

    def setup(
        self,
        white_direction: Direction = Direction.UP,
        board: BoardState | None = None,
        side_to_move: Color = Color.WHITE,
    ) -> None:
        """Initialise (or reset) the game, optionally from a prepared board."""
        self.board = board if board is not None else BoardState.initial(white_direction)
        self.side_to_move = side_to_move
        self.phase = GamePhase.AWAITING_MOVE
        self.result = GameResult.IN_PROGRESS
        self.move_history.clear()
        self._check_game_over()

    # ── Move application ─────────────────────────────────────────────────

    def apply_move(self, move: Move) -> MoveRecord:
        """Commit a validated move for the side to move and record it.

        Caller is responsible for the legality check.  The side to move is
        not flipped here; see :meth:`end_turn`.
        """
        piece = self.board.get(move.origin)
        if piece is None:
            raise ValueError(f"No piece on {move.origin} to move")
        was_capture = move.is_capture(self.board)

        piece.record_move(move)
        move.apply(self.board)

        record = MoveRecord(
            move=move,
            color=self.side_to_move,
            placement_after=board_to_fen(self.board),
            was_check=self.board.is_in_check(self.side_to_move.opposite),
            was_capture=was_capture,
        )
        self.move_history.append(record)
        return record

    def end_turn(self) -> None:
        """Hand the move to the opponent and check for game end."""
        self.side_to_move = self.side_to_move.opposite
        self._check_game_over()

    # ── Resignation ──────────────────────────────────────────────────────

    def resign(self, color: Color) -> None:
        self.result = GameResult.win_for(color.opposite)
        self.phase = GamePhase.GAME_OVER

    # ── Query helpers ────────────────────────────────────────────────────

    @property
    def is_game_over(self) -> bool:
        return self.phase == GamePhase.GAME_OVER

    @property
    def ply_count(self) -> int:
        """Number of half-moves played."""
        return len(self.move_history)

    @property
    def last_record(self) -> MoveRecord | None:
        return self.move_history[-1] if self.move_history else None

    def legal_moves(self) -> list[Move]:
        """Legal moves for the side to move."""
        return MoveGenerator(self.board).legal_moves(self.side_to_move)

    # ── Internal ─────────────────────────────────────────────────────────

    def _check_game_over(self) -> None:
        result = Rules.game_result(self.board, self.side_to_move)
        if result != GameResult.IN_PROGRESS:
            self.result = result
            self.phase = GamePhase.GAME_OVER
