"""Shared engine search models and protocol."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from gambit.core.board import BoardState
    from gambit.core.enums import Color
    from gambit.core.move import Move

INF_SCORE = 1_000_000


class Strategy(Enum):
    """Move-selection strategy for the computer player."""

    MINIMAX = "minimax"
    MONTE_CARLO = "monte_carlo"


class NoLegalMoveError(RuntimeError):
    """A move was requested for a side that has none.

    Callers are expected to check for game over before asking for a move.
    """


@dataclass(slots=True, frozen=True)
class SearchConfig:
    """Search budgets for a single move computation.

    ``max_depth`` bounds the minimax recursion: plies below the root move
    are expanded while their depth does not exceed it.  ``max_trials`` and
    ``max_rollout_depth`` bound the Monte-Carlo sampler.  ``time_limit_ms``
    is carried for callers that display it; neither strategy enforces it.
    """

    max_depth: int = 2
    max_trials: int = 15_000
    max_rollout_depth: int = 30
    time_limit_ms: int | None = 5_000

    def __post_init__(self) -> None:
        if self.max_depth < 0:
            raise ValueError("Search depth must be >= 0")
        if self.max_trials <= 0:
            raise ValueError("Trial budget must be >= 1")
        if self.max_rollout_depth < 0:
            raise ValueError("Rollout depth must be >= 0")

    @classmethod
    def quick(cls) -> SearchConfig:
        """Small budgets for a responsive opponent."""
        return cls(max_depth=0, max_trials=500, max_rollout_depth=10)


@dataclass(slots=True, frozen=True)
class SearchResult:
    """Result produced by the engine search."""

    best_move: Move | None
    score: int
    nodes: int


class IEngine(Protocol):
    """Protocol for engines used by the game layer."""

    def search(
        self,
        board: BoardState,
        color: Color,
        config: SearchConfig,
    ) -> SearchResult: ...
