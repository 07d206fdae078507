"""Counting occupied squares on a chessboard.

A board maps file names "A" to "H" to a list of booleans, one per rank,
telling whether the square is occupied.
"""

from typing import Mapping, Sequence

Board = Mapping[str, Sequence[bool]]

_FILES = "ABCDEFGH"


def count_in_file(board: Board, file: str) -> int:
    """Return how many squares are occupied in the given file."""
    return sum(1 for occupied in board.get(file, ()) if occupied)


def count_in_rank(board: Board, rank: int) -> int:
    """Return how many squares are occupied in the given 1-based rank."""
    if rank < 1:
        return 0
    return sum(
        1
        for name in _FILES
        if len(squares := board.get(name, ())) >= rank and squares[rank - 1]
    )


def count_all(board: Board) -> int:
    """Return how many squares the board has across files A to H."""
    return sum(len(board.get(name, ())) for name in _FILES)


def count_occupied(board: Board) -> int:
    """Return how many squares are occupied across files A to H."""
    return sum(count_in_file(board, name) for name in _FILES)