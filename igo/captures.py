"""
Capture resolution after a stone has been placed.
"""

import logging
from typing import Tuple

import numpy as np

from igo.goban import Goban, opponent
from igo.groups import group_at

logger = logging.getLogger(__name__)


def resolve_captures(
    goban: Goban, row: int, col: int, color: int, exempt: np.ndarray
) -> Tuple[Goban, int]:
    """
    Remove the opponent groups left without liberties by a placement.

    Each orthogonal neighbour of (row, col) holding an opponent stone that
    is not marked in `exempt` is checked independently; several groups can
    be captured by the same stone.

    Args:
        goban (Goban): Board with the new stone already placed
        row (int): Row of the placed stone
        col (int): Column of the placed stone
        color (int): Color of the placed stone
        exempt (np.ndarray): Seki exemption map for `goban`

    Returns:
        tuple[Goban, int]: Board after captures and number of stones removed
    """
    enemy = opponent(color)
    captured = 0

    for nr, nc in goban.neighbours(row, col):
        # Cleared already if captured through another neighbour
        if goban.board[nr, nc] != enemy or exempt[nr, nc]:
            continue
        group = group_at(goban, nr, nc)
        if group is None or group.liberties:
            continue
        goban = goban.remove(group.stones)
        captured += len(group)
        logger.debug("Captured %d %s stone(s) at (%d, %d)", len(group), enemy.name, nr, nc)

    return goban, captured
