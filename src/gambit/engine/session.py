"""Engine search session: worker thread lifecycle and move hand-off."""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import TYPE_CHECKING, Protocol

from PyQt6.QtCore import QObject, QThread, pyqtSignal

from gambit.core.board import BoardState
from gambit.core.enums import Color
from gambit.core.move import CastleMove, PawnDoubleMove, PromotionMove, RegularMove
from gambit.core.notation import board_to_fen
from gambit.engine.qt_bridge import EngineWorker
from gambit.engine.search import SearchConfig, Strategy
from gambit.game.interfaces import GamePhase
from gambit.game.player import AIPlayer

if TYPE_CHECKING:
    from gambit.engine.search import IEngine
    from gambit.game.controller import GameController

_LOGGER = logging.getLogger(__name__)

_MOVE_TYPES = (RegularMove, PawnDoubleMove, CastleMove, PromotionMove)


class EngineRequestSignal(Protocol):
    """Minimal signal interface used by :class:`EngineSession`."""

    def connect(self, slot: Callable[..., object]) -> object: ...

    def emit(self, board_obj: object, color: object, request_id: int) -> object: ...


class _EngineCommandBus(QObject):
    """Signal bridge for issuing worker commands with queued delivery."""

    move_requested = pyqtSignal(object, object, int)
    set_config_requested = pyqtSignal(object)


class EngineSession:
    """Owns the worker-thread search lifecycle and hands moves to the controller.

    Every request carries an increasing id.  Only the answer to the latest
    request, arriving while the controller still waits for the same side on
    the same position, is submitted; anything else is dropped.  A failed or
    empty search is retried once before the engine's side resigns.
    """

    _MAX_FAILURE_RETRIES = 1
    _THREAD_WAIT_MS = 2000

    __slots__ = (
        "__weakref__",
        "_controller",
        "_engine_request",
        "_command_bus",
        "_engine_thread",
        "_engine_worker",
        "_engine_request_id",
        "_pending_engine_request",
        "_pending_board",
        "_pending_color",
        "_pending_placement",
        "_remaining_failure_retries",
        "_is_shutting_down",
        "_is_started",
    )

    def __init__(
        self,
        *,
        controller: GameController,
        strategy: Strategy = Strategy.MINIMAX,
        config: SearchConfig | None = None,
        engine: IEngine | None = None,
        engine_request: EngineRequestSignal | None = None,
        parent: QObject | None = None,
    ) -> None:
        self._controller = controller
        self._command_bus = _EngineCommandBus(parent)
        self._engine_request: EngineRequestSignal = (
            engine_request
            if engine_request is not None
            else self._command_bus.move_requested
        )

        self._engine_thread = QThread(parent)
        self._engine_worker = EngineWorker(strategy, config, engine=engine)
        self._engine_request_id = 0
        self._pending_engine_request: int | None = None
        self._pending_board: BoardState | None = None
        self._pending_color: Color | None = None
        self._pending_placement: str | None = None
        self._remaining_failure_retries = 0
        self._is_shutting_down = False
        self._is_started = False

    @property
    def is_started(self) -> bool:
        return self._is_started

    @property
    def pending_request(self) -> int | None:
        return self._pending_engine_request

    def setup(self) -> None:
        """Start the engine worker in a dedicated thread and connect callbacks."""
        if self._is_started:
            return
        self._is_shutting_down = False
        self._engine_worker.moveToThread(self._engine_thread)
        self._engine_request.connect(self._engine_worker.request_move)
        self._command_bus.set_config_requested.connect(self._engine_worker.set_config)
        self._engine_worker.best_move_ready.connect(self._on_engine_best_move)
        self._engine_worker.search_no_move.connect(self._on_engine_no_move)
        self._engine_worker.search_error.connect(self._on_engine_error)
        self._engine_thread.start()
        self._is_started = True

    def shutdown(self) -> None:
        """Forget the pending request and shut down the worker thread.

        A search already running is not interrupted; the thread is given
        a bounded time to finish it.
        """
        if not self._is_started:
            return
        self._is_shutting_down = True
        self._clear_pending_request()
        self._engine_thread.quit()
        self._engine_thread.wait(self._THREAD_WAIT_MS)
        self._is_started = False

    def set_config(self, config: SearchConfig) -> None:
        """Update search budgets for subsequent searches."""
        if self._is_started:
            self._command_bus.set_config_requested.emit(config)
            return
        self._engine_worker.set_config(config)

    def create_ai_player(self, color: Color, name: str = "Gambit AI") -> AIPlayer:
        """Create an AI player wired to this session."""
        return AIPlayer(color, name, on_request_move=self.request_ai_move)

    def request_ai_move(self, board: BoardState, color: Color) -> None:
        """Queue a best-move search for *color* on *board*."""
        if not self._is_started or self._is_shutting_down:
            return
        self._queue_request(board.copy(), color, reset_retry_budget=True)

    # ── Worker callbacks ─────────────────────────────────────────────────

    def _on_engine_best_move(self, request_id: int, move_obj: object) -> None:
        if self._is_shutting_down:
            return
        if request_id != self._pending_engine_request:
            _LOGGER.debug("Dropping stale engine answer %d", request_id)
            return
        if not isinstance(move_obj, _MOVE_TYPES):
            self._handle_engine_failure(request_id, "Engine returned a non-move")
            return
        if not self._still_waiting():
            self._clear_pending_request()
            return

        self._clear_pending_request()
        self._remaining_failure_retries = 0
        if not self._controller.submit_move(move_obj):
            _LOGGER.warning("Controller rejected engine move %s", move_obj)

    def _on_engine_no_move(self, request_id: int) -> None:
        self._handle_engine_failure(request_id, "Engine produced no move")

    def _on_engine_error(self, request_id: int, message: str) -> None:
        self._handle_engine_failure(request_id, message)

    # ── Internal ─────────────────────────────────────────────────────────

    def _queue_request(
        self, board: BoardState, color: Color, *, reset_retry_budget: bool
    ) -> None:
        self._engine_request_id += 1
        self._pending_engine_request = self._engine_request_id
        self._pending_board = board
        self._pending_color = color
        self._pending_placement = board_to_fen(board)
        if reset_retry_budget:
            self._remaining_failure_retries = self._MAX_FAILURE_RETRIES
        self._engine_request.emit(board, color, self._engine_request_id)

    def _still_waiting(self) -> bool:
        state = self._controller.state
        if state.phase != GamePhase.THINKING:
            return False
        if state.side_to_move != self._pending_color:
            return False
        return board_to_fen(state.board) == self._pending_placement

    def _clear_pending_request(self) -> None:
        self._pending_engine_request = None
        self._pending_board = None
        self._pending_color = None
        self._pending_placement = None

    def _handle_engine_failure(self, request_id: int, message: str) -> None:
        if self._is_shutting_down:
            return
        if request_id != self._pending_engine_request:
            return

        state = self._controller.state
        if state.phase != GamePhase.THINKING:
            self._clear_pending_request()
            return

        if self._remaining_failure_retries > 0 and self._pending_board is not None:
            self._remaining_failure_retries -= 1
            _LOGGER.warning("Engine failed (%s), retrying", message)
            board = self._pending_board
            color = self._pending_color
            if color is None:
                color = state.side_to_move
            self._queue_request(board, color, reset_retry_budget=False)
            return

        self._clear_pending_request()
        _LOGGER.warning("Engine failed (%s), %s resigns", message, state.side_to_move)
        self._controller.resign(state.side_to_move)
