"""Minimax search with alpha-beta pruning."""

from __future__ import annotations

import logging
import random

from gambit.core.board import BoardState
from gambit.core.enums import Color
from gambit.core.move import Move
from gambit.core.move_generator import MoveGenerator
from gambit.engine.evaluation import evaluate
from gambit.engine.search import INF_SCORE, IEngine, SearchConfig, SearchResult

_LOGGER = logging.getLogger(__name__)


class MinimaxEngine(IEngine):
    """Fixed-depth minimax over copied boards.

    Every root move is scored with a full window, so each root score is the
    exact minimax value and ties can be broken at random.  Below the root
    the search is fail-hard: a maximizing node returns ``beta`` on a cutoff
    and ``alpha`` otherwise, a minimizing node the reverse.  A side left
    without moves therefore scores as badly as its bound allows.
    """

    __slots__ = ("_rng", "_nodes", "_root_color", "_max_depth")

    def __init__(self, rng: random.Random | None = None) -> None:
        self._rng = rng or random.Random()
        self._nodes = 0
        self._root_color = Color.WHITE
        self._max_depth = 0

    def search(
        self,
        board: BoardState,
        color: Color,
        config: SearchConfig,
    ) -> SearchResult:
        self._nodes = 0
        root = board.copy()
        scored = self.score_root_moves(root, color, config)
        if not scored:
            return SearchResult(None, -INF_SCORE, self._nodes)

        best_score = max(score for _, score in scored)
        best_moves = [move for move, score in scored if score == best_score]
        best_move = self._rng.choice(best_moves)

        _LOGGER.debug(
            "minimax %s: %d root moves, %d tied at %d, %d nodes, chose %s",
            color,
            len(scored),
            len(best_moves),
            best_score,
            self._nodes,
            best_move,
        )
        return SearchResult(best_move, best_score, self._nodes)

    def score_root_moves(
        self, board: BoardState, color: Color, config: SearchConfig
    ) -> list[tuple[Move, int]]:
        """Exact minimax score of every legal root move for *color*."""
        self._root_color = color
        self._max_depth = config.max_depth
        scored: list[tuple[Move, int]] = []
        for move in MoveGenerator(board).legal_moves(color):
            child = board.copy()
            move.apply(child)
            score = self._minimize(0, -INF_SCORE, INF_SCORE, color.opposite, child)
            scored.append((move, score))
        return scored

    def _maximize(
        self,
        depth: int,
        alpha: int,
        beta: int,
        color: Color,
        board: BoardState,
    ) -> int:
        self._nodes += 1
        if depth > self._max_depth:
            return evaluate(board, self._root_color)

        for move in MoveGenerator(board).legal_moves(color):
            child = board.copy()
            move.apply(child)
            score = self._minimize(depth + 1, alpha, beta, color.opposite, child)
            if score >= beta:
                return beta
            if score > alpha:
                alpha = score
        return alpha

    def _minimize(
        self,
        depth: int,
        alpha: int,
        beta: int,
        color: Color,
        board: BoardState,
    ) -> int:
        self._nodes += 1
        if depth > self._max_depth:
            return evaluate(board, self._root_color)

        for move in MoveGenerator(board).legal_moves(color):
            child = board.copy()
            move.apply(child)
            score = self._maximize(depth + 1, alpha, beta, color.opposite, child)
            if score <= alpha:
                return alpha
            if score < beta:
                beta = score
        return beta
