"""
Seki (mutual life) detection.

This is a structural heuristic, not a life-and-death solver: two groups of
opposite colors are considered to be in seki when they have exactly the
same, non-empty set of liberties. Every pair of opposite-colored groups on
the board is compared, whether or not the groups touch.
"""

import logging
from itertools import combinations
from typing import Sequence

import numpy as np

from igo.goban import Goban
from igo.groups import Group, all_groups

logger = logging.getLogger(__name__)


def seki_map(groups: Sequence[Group], size: int) -> np.ndarray:
    """
    Mark the stones of every seki pair among the given groups.

    Args:
        groups (sequence): Full grouping of a board, as from all_groups
        size (int): Board size

    Returns:
        np.ndarray: (size, size) boolean map, True for capture-exempt stones
    """
    exempt = np.zeros((size, size), dtype=bool)

    for first, second in combinations(groups, 2):
        if first.color == second.color:
            continue
        shared = first.liberties & second.liberties
        if shared and shared == first.liberties and shared == second.liberties:
            for row, col in first.stones | second.stones:
                exempt[row, col] = True
            logger.debug(
                "Seki between %s group at %s and %s group at %s",
                first.color.name,
                min(first.stones),
                second.color.name,
                min(second.stones),
            )

    return exempt


def detect_seki(goban: Goban) -> np.ndarray:
    """Exemption map for a whole board."""
    return seki_map(all_groups(goban), goban.size)
