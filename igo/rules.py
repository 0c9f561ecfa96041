"""
Move legality.

A placement goes through three gates, in order:
- the intersection must be empty
- it must not complete the bent-four shape in the top-left corner
- after captures, the placed stone's group must keep at least one liberty

A rejected placement has no effect at all: captures computed while
checking the third gate are thrown away with the rest of the attempt.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Tuple

from igo.captures import resolve_captures
from igo.goban import Cell, Goban
from igo.groups import group_at
from igo.seki import detect_seki


class Rejection(Enum):
    """Why an operation was refused."""

    OFF_BOARD = "off board"
    OCCUPIED = "intersection already occupied"
    BENT_FOUR = "bent four in the corner"
    SUICIDE = "suicide"
    GAME_OVER = "game is over"
    NO_HISTORY = "nothing to undo"


@dataclass(frozen=True)
class MoveResult:
    """
    Outcome of a game operation.

    Attributes:
        accepted: Whether the operation changed the game
        reason: Why it was refused, None when accepted
        captures: Number of stones captured by an accepted placement
    """

    accepted: bool
    reason: Rejection | None = None
    captures: int = 0

    def __bool__(self) -> bool:
        return self.accepted

    @classmethod
    def rejected(cls, reason: Rejection) -> "MoveResult":
        return cls(False, reason)


ACCEPTED = MoveResult(True)


def is_bent_four_in_corner(goban: Goban, row: int, col: int, color: int) -> bool:
    """
    Check for the bent-four shape in the top-left corner.

    Only a stone played at (0, 0) is checked, on the board after it has
    been placed: (0, 0), (0, 2), (1, 1) and (2, 0) hold `color` while
    (0, 1) and (1, 0) are empty. The other corners are not checked.

    Args:
        goban (Goban): Board with the stone already placed
        row (int): Row of the placed stone
        col (int): Column of the placed stone
        color (int): Color of the placed stone

    Returns:
        bool: True if the shape is formed
    """
    if (row, col) != (0, 0) or goban.size < 3:
        return False
    board = goban.board
    return bool(
        board[0, 0] == color
        and board[0, 1] == Cell.EMPTY
        and board[0, 2] == color
        and board[1, 0] == Cell.EMPTY
        and board[1, 1] == color
        and board[2, 0] == color
    )


def try_move(goban: Goban, row: int, col: int, color: int) -> Tuple[MoveResult, Goban]:
    """
    Attempt a placement without touching the given board.

    Args:
        goban (Goban): Current board
        row (int): Row index
        col (int): Column index
        color (int): Color of the stone to place

    Returns:
        tuple[MoveResult, Goban]: The outcome, and the board after the move
        (the unchanged input board when the move is rejected)
    """
    if not goban.on_board(row, col):
        return MoveResult.rejected(Rejection.OFF_BOARD), goban
    if not goban.is_empty(row, col):
        return MoveResult.rejected(Rejection.OCCUPIED), goban

    placed = goban.place(row, col, color)

    if is_bent_four_in_corner(placed, row, col, color):
        return MoveResult.rejected(Rejection.BENT_FOUR), goban

    after, captured = resolve_captures(placed, row, col, color, detect_seki(placed))

    own = group_at(after, row, col)
    if own is None or not own.liberties:
        return MoveResult.rejected(Rejection.SUICIDE), goban

    return MoveResult(True, captures=captured), after
