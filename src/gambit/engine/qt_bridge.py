"""Qt bridge to run engine search in a worker thread."""

from __future__ import annotations

import logging

from PyQt6.QtCore import QObject, pyqtSignal, pyqtSlot

from gambit.core.board import BoardState
from gambit.core.enums import Color
from gambit.engine.search import IEngine, SearchConfig, Strategy

_LOGGER = logging.getLogger(__name__)


class EngineWorker(QObject):
    """Thread-affine worker that computes engine moves on demand."""

    best_move_ready = pyqtSignal(int, object)
    search_no_move = pyqtSignal(int)
    search_error = pyqtSignal(int, str)

    __slots__ = ("_engine", "_config")

    def __init__(
        self,
        strategy: Strategy = Strategy.MINIMAX,
        config: SearchConfig | None = None,
        *,
        engine: IEngine | None = None,
    ) -> None:
        super().__init__()
        if engine is None:
            from gambit.engine import create_engine

            engine = create_engine(strategy)
        self._engine = engine
        self._config = config or SearchConfig()

    @property
    def config(self) -> SearchConfig:
        return self._config

    @pyqtSlot(object, object, int)
    def request_move(self, board_obj: object, color: object, request_id: int) -> None:
        """Search for the best move of *color* on *board_obj* and emit result."""
        if not isinstance(board_obj, BoardState):
            self.search_error.emit(request_id, "Engine received invalid board")
            return

        try:
            result = self._engine.search(board_obj, Color(color), self._config)
        except Exception as exc:
            _LOGGER.exception("Engine search failed for request %d", request_id)
            self.search_error.emit(request_id, str(exc))
            return

        if result.best_move is None:
            self.search_no_move.emit(request_id)
            return

        self.best_move_ready.emit(request_id, result.best_move)

    @pyqtSlot(object)
    def set_config(self, config: object) -> None:
        """Replace the search budgets (takes effect on the next search)."""
        if not isinstance(config, SearchConfig):
            _LOGGER.warning("Ignoring invalid search config: %r", config)
            return
        self._config = config
