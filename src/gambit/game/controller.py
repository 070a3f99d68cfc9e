"""GameController: the central orchestrator of a chess game.

Coordinates players, the :class:`GameState` and move validation.  It is the
only code that mutates the live board.  Listeners subscribe through simple
callbacks so tests and front ends can follow the game.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass, field

from gambit.core.enums import PROMOTION_KINDS, Color, Direction, GameResult, PieceKind
from gambit.core.move import Move, PromotionMove, same_squares
from gambit.game.interfaces import GamePhase, IGameController, IPlayer
from gambit.game.state import GameState

_LOGGER = logging.getLogger(__name__)

# ── Event definitions ────────────────────────────────────────────────────────

MoveCallback = Callable[[Move, "GameState"], None]
GameOverCallback = Callable[[GameResult], None]
PhaseCallback = Callable[[GamePhase], None]
BroadcastSink = Callable[[Move, Color], None]
PromotionResolver = Callable[[PromotionMove, Color], "PieceKind | None"]


@dataclass
class GameEvents:
    """Observable callbacks. Multiple handlers per event."""

    on_move: list[MoveCallback] = field(default_factory=list)
    on_game_over: list[GameOverCallback] = field(default_factory=list)
    on_phase_changed: list[PhaseCallback] = field(default_factory=list)


# ── Controller ───────────────────────────────────────────────────────────────


class GameController(IGameController):
    """Orchestrates a full chess game: validates moves, switches turns,
    notifies listeners.

    Thread-safety: methods are meant to be called from a single thread.
    Engine results computed on a worker thread arrive through
    ``submit_move`` via a queued signal on the controller's thread.

    Args:
        promotion_resolver: ``(PromotionMove, Color) -> PieceKind | None``,
            asked for the piece an unresolved promotion becomes.  ``None``
            or a kind that is not a legal promotion means a queen.
        broadcast_sinks: ``(Move, Color) -> None`` callables told about
            every committed move, e.g. to forward it to a remote peer.
    """

    __slots__ = (
        "_state",
        "_players",
        "_promotion_resolver",
        "_broadcast_sinks",
        "events",
    )

    def __init__(
        self,
        promotion_resolver: PromotionResolver | None = None,
        broadcast_sinks: list[BroadcastSink] | None = None,
    ) -> None:
        self._state = GameState()
        self._players: dict[Color, IPlayer] = {}
        self._promotion_resolver = promotion_resolver
        self._broadcast_sinks: list[BroadcastSink] = list(broadcast_sinks or [])
        self.events = GameEvents()

    # ── Properties ───────────────────────────────────────────────────────

    @property
    def state(self) -> GameState:
        return self._state

    @property
    def current_player(self) -> IPlayer | None:
        return self._players.get(self._state.side_to_move)

    def player(self, color: Color) -> IPlayer | None:
        return self._players.get(color)

    def add_broadcast_sink(self, sink: BroadcastSink) -> None:
        self._broadcast_sinks.append(sink)

    # ── IGameController impl ─────────────────────────────────────────────

    def new_game(
        self,
        white: IPlayer,
        black: IPlayer,
        white_direction: Direction = Direction.UP,
    ) -> None:
        self._players = {Color.WHITE: white, Color.BLACK: black}
        self._state = GameState()
        self._state.setup(white_direction)
        _LOGGER.debug("New game: %s vs %s", white.name, black.name)

        self._emit_phase(GamePhase.AWAITING_MOVE)
        self._prompt_current_player()

    def submit_move(self, move: Move) -> bool:
        if self._state.is_game_over:
            return False
        if self._state.phase not in (GamePhase.AWAITING_MOVE, GamePhase.THINKING):
            return False

        legal = self._match_legal(move)
        if legal is None:
            _LOGGER.debug("Rejected move %s for %s", move, self._state.side_to_move)
            return False

        color = self._state.side_to_move
        if isinstance(legal, PromotionMove):
            legal = self._resolve_promotion(legal, move, color)

        self._state.apply_move(legal)
        _LOGGER.debug("%s played %s", color, legal)

        self._broadcast(legal, color)
        self._emit_move(legal)

        self._state.end_turn()
        if self._state.is_game_over:
            self._emit_game_over(self._state.result)
            return True

        self._prompt_current_player()
        return True

    def resign(self, color: Color) -> None:
        if self._state.is_game_over:
            return
        self._state.resign(color)
        self._emit_game_over(self._state.result)

    # ── Internal helpers ─────────────────────────────────────────────────

    def _match_legal(self, move: Move) -> Move | None:
        for candidate in self._state.legal_moves():
            if same_squares(candidate, move):
                return candidate
        return None

    def _resolve_promotion(
        self, legal: PromotionMove, submitted: Move, color: Color
    ) -> PromotionMove:
        kind = submitted.kind if isinstance(submitted, PromotionMove) else None
        if kind is None and self._promotion_resolver is not None:
            kind = self._promotion_resolver(legal, color)
        if kind is None:
            return legal.with_kind(PieceKind.QUEEN)
        if kind not in PROMOTION_KINDS:
            _LOGGER.warning("Cannot promote to %s, using a queen", kind)
            return legal.with_kind(PieceKind.QUEEN)
        return legal.with_kind(kind)

    def _broadcast(self, move: Move, color: Color) -> None:
        for sink in self._broadcast_sinks:
            try:
                sink(move, color)
            except Exception:
                _LOGGER.warning("Broadcast sink %r failed", sink, exc_info=True)

    def _prompt_current_player(self) -> None:
        """Ask the current player to move."""
        cp = self.current_player
        if cp is None:
            return

        if cp.is_human:
            self._state.phase = GamePhase.AWAITING_MOVE
            self._emit_phase(GamePhase.AWAITING_MOVE)
        else:
            self._state.phase = GamePhase.THINKING
            self._emit_phase(GamePhase.THINKING)
            cp.request_move(self._state.board)

    def _emit_move(self, move: Move) -> None:
        for cb in self.events.on_move:
            cb(move, self._state)

    def _emit_game_over(self, result: GameResult) -> None:
        _LOGGER.debug("Game over: %s", result.name)
        self._emit_phase(GamePhase.GAME_OVER)
        for cb in self.events.on_game_over:
            cb(result)

    def _emit_phase(self, phase: GamePhase) -> None:
        for cb in self.events.on_phase_changed:
            cb(phase)
