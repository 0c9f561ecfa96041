"""
Chain and liberty analysis.

A group is a maximal set of same-colored stones connected orthogonally,
together with its liberties (the empty intersections next to it). Groups
are never stored: they are recomputed from a Goban whenever needed.
"""

from collections import deque
from dataclasses import dataclass
from typing import FrozenSet, List

import numpy as np

from igo.goban import Cell, Coordinate, Goban


@dataclass(frozen=True)
class Group:
    """
    A connected group of stones.

    Attributes:
        color: Color of every stone in the group
        stones: Coordinates of the stones
        liberties: Empty coordinates adjacent to the group
    """

    color: Cell
    stones: FrozenSet[Coordinate]
    liberties: FrozenSet[Coordinate]

    def __len__(self) -> int:
        return len(self.stones)


def _flood(goban: Goban, row: int, col: int, visited: np.ndarray) -> Group:
    """
    BFS flood-fill of the chain containing (row, col).

    Marks every stone of the chain in `visited`.
    """
    color = Cell(int(goban.board[row, col]))
    stones: set[Coordinate] = set()
    liberties: set[Coordinate] = set()

    visited[row, col] = True
    queue: deque[Coordinate] = deque([(row, col)])

    while queue:
        cr, cc = queue.popleft()
        stones.add((cr, cc))

        for nr, nc in goban.neighbours(cr, cc):
            value = goban.board[nr, nc]
            if value == Cell.EMPTY:
                liberties.add((nr, nc))
            elif value == color and not visited[nr, nc]:
                visited[nr, nc] = True
                queue.append((nr, nc))

    return Group(color, frozenset(stones), frozenset(liberties))


def group_at(goban: Goban, row: int, col: int) -> Group | None:
    """
    Compute the group containing the stone at (row, col).

    Args:
        goban (Goban): Board to analyze
        row (int): Row index
        col (int): Column index

    Returns:
        Group | None: The group, or None if the intersection is empty
    """
    if goban.is_empty(row, col):
        return None
    visited = np.zeros((goban.size, goban.size), dtype=bool)
    return _flood(goban, row, col, visited)


def all_groups(goban: Goban) -> List[Group]:
    """
    Partition every stone on the board into its group.

    Groups are listed in row-major order of their first stone.

    Args:
        goban (Goban): Board to analyze

    Returns:
        list[Group]: Every group on the board
    """
    visited = np.zeros((goban.size, goban.size), dtype=bool)
    groups: List[Group] = []

    for row in range(goban.size):
        for col in range(goban.size):
            if goban.is_empty(row, col) or visited[row, col]:
                continue
            groups.append(_flood(goban, row, col, visited))

    return groups
