"""FEN piece-placement parsing and serialization.

Only the placement field is meaningful here: castling eligibility lives in
each piece's ``move_count`` and en passant in ``BoardState.last_move``, so
the remaining FEN fields are accepted and ignored.
"""

from __future__ import annotations

from gambit.core.board import BoardState
from gambit.core.enums import Direction
from gambit.core.location import BOARD_SIZE, Location
from gambit.core.piece import Piece

STARTING_PLACEMENT = "rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR"


def board_from_fen(fen: str, white_direction: Direction = Direction.UP) -> BoardState:
    """Parse the placement field of *fen* into a :class:`BoardState`.

    The first rank in the string is row 7.  Pieces start with no move
    history.
    """
    parts = fen.split()
    if not parts:
        raise ValueError(f"Invalid FEN (empty): {fen!r}")

    ranks = parts[0].split("/")
    if len(ranks) != BOARD_SIZE:
        raise ValueError(f"Invalid FEN board (must contain 8 ranks): {fen!r}")

    board = BoardState(white_direction)
    for rank_idx, rank_text in enumerate(ranks):
        row = BOARD_SIZE - 1 - rank_idx
        col = 0
        for ch in rank_text:
            if ch.isdigit():
                step = int(ch)
                if not (1 <= step <= BOARD_SIZE):
                    raise ValueError(f"Invalid FEN digit {ch!r}: {fen!r}")
                col += step
            else:
                if col >= BOARD_SIZE:
                    raise ValueError(f"Invalid FEN rank width: {fen!r}")
                board.place(Piece.from_char(ch), Location(col, row))
                col += 1
            if col > BOARD_SIZE:
                raise ValueError(f"Invalid FEN rank width: {fen!r}")
        if col != BOARD_SIZE:
            raise ValueError(f"Invalid FEN rank width: {fen!r}")
    return board


def board_to_fen(board: BoardState) -> str:
    """Serialise the piece placement of *board* to a FEN placement field."""
    rows: list[str] = []
    for row in range(BOARD_SIZE - 1, -1, -1):
        empty = 0
        text = ""
        for col in range(BOARD_SIZE):
            piece = board.get(Location(col, row))
            if piece is None:
                empty += 1
            else:
                if empty:
                    text += str(empty)
                    empty = 0
                text += str(piece)
        if empty:
            text += str(empty)
        rows.append(text)
    return "/".join(rows)
