"""Tests for the alpha-beta minimax engine."""

import random

import pytest

from gambit.core.board import BoardState
from gambit.core.enums import Color
from gambit.core.location import parse_square
from gambit.core.move import Move, RegularMove
from gambit.core.move_generator import legal_moves
from gambit.core.notation import board_from_fen
from gambit.engine.evaluation import evaluate
from gambit.engine.minimax import MinimaxEngine
from gambit.engine.search import INF_SCORE, SearchConfig


def reference_minimax(
    board: BoardState,
    color: Color,
    root_color: Color,
    depth: int,
    max_depth: int,
    maximizing: bool,
) -> int:
    """Plain minimax without pruning; a side with no moves has lost."""
    if depth > max_depth:
        return evaluate(board, root_color)
    moves = legal_moves(board, color)
    if not moves:
        return -INF_SCORE if maximizing else INF_SCORE
    scores = []
    for move in moves:
        child = board.copy()
        move.apply(child)
        scores.append(
            reference_minimax(
                child, color.opposite, root_color, depth + 1, max_depth, not maximizing
            )
        )
    return max(scores) if maximizing else min(scores)


def reference_root_scores(
    board: BoardState, color: Color, max_depth: int
) -> dict[Move, int]:
    scores: dict[Move, int] = {}
    for move in legal_moves(board, color):
        child = board.copy()
        move.apply(child)
        scores[move] = reference_minimax(
            child, color.opposite, color, 0, max_depth, maximizing=False
        )
    return scores


class _LastChoice(random.Random):
    def choice(self, seq):  # type: ignore[override]
        return seq[-1]


class TestMinimaxEngine:
    @pytest.mark.parametrize(
        ("fen", "color", "max_depth"),
        [
            ("4k3/8/8/3q4/8/2N5/8/R3K3", Color.WHITE, 1),
            ("r3k3/1p6/8/8/4N3/8/5P2/4K2R", Color.BLACK, 1),
            ("6k1/5ppp/8/8/8/8/8/R5K1", Color.WHITE, 1),
            ("4k3/8/8/8/8/8/1q5R/K7", Color.WHITE, 2),
        ],
    )
    def test_alpha_beta_matches_plain_minimax(
        self, fen: str, color: Color, max_depth: int
    ) -> None:
        board = board_from_fen(fen)
        config = SearchConfig(max_depth=max_depth)
        pruned = dict(MinimaxEngine().score_root_moves(board.copy(), color, config))
        assert pruned == reference_root_scores(board, color, max_depth)

    def test_takes_hanging_queen(self) -> None:
        board = board_from_fen("4k3/8/8/3q4/8/8/8/3RK3")
        result = MinimaxEngine().search(board, Color.WHITE, SearchConfig(max_depth=0))
        assert result.best_move == RegularMove(parse_square("d1"), parse_square("d5"))
        assert result.nodes > 0

    def test_finds_back_rank_mate(self) -> None:
        board = board_from_fen("6k1/5ppp/8/8/8/8/8/R5K1")
        result = MinimaxEngine().search(board, Color.WHITE, SearchConfig(max_depth=0))
        assert result.best_move == RegularMove(parse_square("a1"), parse_square("a8"))
        assert result.score == INF_SCORE

    def test_no_moves_returns_none(self) -> None:
        board = board_from_fen("7k/5Q2/6K1/8/8/8/8/8")
        result = MinimaxEngine().search(board, Color.BLACK, SearchConfig())
        assert result.best_move is None

    def test_search_does_not_mutate_board(self) -> None:
        board = BoardState.initial()
        before = board.placement()
        MinimaxEngine().search(board, Color.WHITE, SearchConfig(max_depth=0))
        assert board.placement() == before
        assert board.last_move is None
        assert all(p.move_count == 0 for _, p in board.pieces())

    def test_ties_broken_by_injected_rng(self) -> None:
        board = BoardState.initial()
        config = SearchConfig(max_depth=0)
        engine = MinimaxEngine(rng=_LastChoice())
        result = engine.search(board, Color.WHITE, config)
        scored = engine.score_root_moves(board, Color.WHITE, config)
        best = max(score for _, score in scored)
        tied = [move for move, score in scored if score == best]
        assert result.best_move == tied[-1]
        assert result.score == best

    def test_seeded_search_is_reproducible(self) -> None:
        board = BoardState.initial()
        config = SearchConfig(max_depth=0)
        a = MinimaxEngine(random.Random(7)).search(board, Color.BLACK, config)
        b = MinimaxEngine(random.Random(7)).search(board, Color.BLACK, config)
        assert a.best_move == b.best_move
