"""Monte-Carlo move selection by random rollouts."""

from __future__ import annotations

import logging
import random
from dataclasses import dataclass

from gambit.core.board import BoardState
from gambit.core.enums import Color
from gambit.core.move import Move
from gambit.core.move_generator import MoveGenerator
from gambit.engine.evaluation import evaluate
from gambit.engine.search import INF_SCORE, IEngine, SearchConfig, SearchResult

_LOGGER = logging.getLogger(__name__)


@dataclass(slots=True)
class _MoveStats:
    move: Move
    total: int = 0
    trials: int = 0

    def add_sample(self, score: int) -> None:
        self.total += score
        self.trials += 1

    @property
    def mean(self) -> int:
        if self.trials == 0:
            return -INF_SCORE
        return self.total // self.trials


class MonteCarloEngine(IEngine):
    """Scores root moves by the average material after random play.

    Each trial picks a root move at random, plays it on a copy and then lets
    both sides make uniformly random legal moves until the rollout depth is
    reached or the side to move is stuck.  The final position is evaluated
    for the root mover's opponent and the negation is credited to the root
    move, so higher means better for the root mover.
    """

    __slots__ = ("_rng", "_nodes")

    def __init__(self, rng: random.Random | None = None) -> None:
        self._rng = rng or random.Random()
        self._nodes = 0

    def search(
        self,
        board: BoardState,
        color: Color,
        config: SearchConfig,
    ) -> SearchResult:
        self._nodes = 0
        root = board.copy()
        stats = [_MoveStats(move) for move in MoveGenerator(root).legal_moves(color)]
        if not stats:
            return SearchResult(None, -INF_SCORE, self._nodes)

        for _ in range(config.max_trials):
            entry = self._rng.choice(stats)
            child = root.copy()
            entry.move.apply(child)
            final = self._rollout(child, color.opposite, config.max_rollout_depth)
            entry.add_sample(-evaluate(final, color.opposite))

        best_score = max(entry.mean for entry in stats)
        best_moves = [entry.move for entry in stats if entry.mean == best_score]
        best_move = self._rng.choice(best_moves)

        _LOGGER.debug(
            "monte carlo %s: %d trials over %d root moves, mean %d, chose %s",
            color,
            config.max_trials,
            len(stats),
            best_score,
            best_move,
        )
        return SearchResult(best_move, best_score, self._nodes)

    def _rollout(self, board: BoardState, color: Color, max_depth: int) -> BoardState:
        """Random play from *board* with *color* to move; returns the final board."""
        for _ in range(max_depth):
            self._nodes += 1
            moves = MoveGenerator(board).legal_moves(color)
            if not moves:
                break
            self._rng.choice(moves).apply(board)
            color = color.opposite
        return board
