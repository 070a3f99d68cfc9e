"""Chess engine package: search strategies and Qt worker bridge."""

from __future__ import annotations

from typing import TYPE_CHECKING

from gambit.engine.evaluation import PIECE_VALUES, evaluate
from gambit.engine.minimax import MinimaxEngine
from gambit.engine.monte_carlo import MonteCarloEngine
from gambit.engine.qt_bridge import EngineWorker
from gambit.engine.search import (
    INF_SCORE,
    IEngine,
    NoLegalMoveError,
    SearchConfig,
    SearchResult,
    Strategy,
)

if TYPE_CHECKING:
    import random

    from gambit.core.board import BoardState
    from gambit.core.enums import Color
    from gambit.core.move import Move

_ENGINES: dict[Strategy, type[IEngine]] = {
    Strategy.MINIMAX: MinimaxEngine,
    Strategy.MONTE_CARLO: MonteCarloEngine,
}


def create_engine(strategy: Strategy, rng: random.Random | None = None) -> IEngine:
    """Instantiate the engine implementing *strategy*."""
    try:
        engine_cls = _ENGINES[Strategy(strategy)]
    except (KeyError, ValueError):
        raise ValueError(f"Unknown search strategy: {strategy!r}") from None
    return engine_cls(rng)


def select_move(
    strategy: Strategy,
    color: Color,
    board: BoardState,
    config: SearchConfig | None = None,
    *,
    rng: random.Random | None = None,
) -> Move:
    """Pick a move for *color* on *board* without mutating it.

    Raises:
        NoLegalMoveError: *color* has no legal move.
    """
    result = create_engine(strategy, rng).search(board, color, config or SearchConfig())
    if result.best_move is None:
        raise NoLegalMoveError(f"{color} has no legal move")
    return result.best_move


__all__ = [
    "EngineWorker",
    "IEngine",
    "INF_SCORE",
    "MinimaxEngine",
    "MonteCarloEngine",
    "NoLegalMoveError",
    "PIECE_VALUES",
    "SearchConfig",
    "SearchResult",
    "Strategy",
    "create_engine",
    "evaluate",
    "select_move",
]
