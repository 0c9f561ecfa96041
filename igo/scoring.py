"""
End-of-game scoring.

Territory scoring: every empty region bordered by a single color is that
color's territory. A color's final score is its territory plus the stones
it captured, White also receiving komi.
"""

from collections import deque
from dataclasses import dataclass
from typing import Dict, List

import numpy as np

from igo.config import KOMI
from igo.goban import Cell, Coordinate, Goban


@dataclass(frozen=True)
class ScoreResult:
    """
    Final result of a game.

    Attributes:
        territory: Territory points per color
        territory_map: Stones keep their color, owned empty points carry
            their owner, neutral points are EMPTY
        final_score: Territory + captures (+ komi for White) per color
        winner: Black if its final score is strictly higher, otherwise White
        margin: Absolute difference of the final scores
    """

    territory: Dict[Cell, int]
    territory_map: Goban
    final_score: Dict[Cell, float]
    winner: Cell
    margin: float

    # Holds dicts, compared by value only
    __hash__ = None

    def __str__(self) -> str:
        return f"{self.winner.name.capitalize()} wins by {self.margin:.1f} points"


def _empty_region(goban: Goban, row: int, col: int, visited: np.ndarray):
    """
    BFS over the empty region containing (row, col).

    Returns:
        tuple: (list of points in the region, set of bordering colors)
    """
    region: List[Coordinate] = []
    borders: set[Cell] = set()

    visited[row, col] = True
    queue: deque[Coordinate] = deque([(row, col)])

    while queue:
        cr, cc = queue.popleft()
        region.append((cr, cc))

        for nr, nc in goban.neighbours(cr, cc):
            value = goban.board[nr, nc]
            if value != Cell.EMPTY:
                borders.add(Cell(int(value)))
            elif not visited[nr, nc]:
                visited[nr, nc] = True
                queue.append((nr, nc))

    return region, borders


def score_game(
    goban: Goban, captures: Dict[Cell, int], komi: float = KOMI
) -> ScoreResult:
    """
    Score a finished game.

    Args:
        goban (Goban): Final board
        captures (dict): Stones captured by each color
        komi (float): Compensation added to White's score

    Returns:
        ScoreResult: Territory, overlay, final scores and winner
    """
    territory: Dict[Cell, int] = {Cell.BLACK: 0, Cell.WHITE: 0}
    overlay = goban.board.copy()
    visited = np.zeros((goban.size, goban.size), dtype=bool)

    for row in range(goban.size):
        for col in range(goban.size):
            if not goban.is_empty(row, col) or visited[row, col]:
                continue

            region, borders = _empty_region(goban, row, col, visited)

            # Bordering both colors or none: dame
            if len(borders) == 1:
                owner = borders.pop()
                territory[owner] += len(region)
                for r, c in region:
                    overlay[r, c] = owner

    final_score: Dict[Cell, float] = {
        Cell.BLACK: territory[Cell.BLACK] + captures[Cell.BLACK],
        Cell.WHITE: territory[Cell.WHITE] + captures[Cell.WHITE] + komi,
    }

    black, white = final_score[Cell.BLACK], final_score[Cell.WHITE]
    # A tie goes to White
    winner = Cell.BLACK if black > white else Cell.WHITE

    return ScoreResult(
        territory=territory,
        territory_map=Goban(goban.size, overlay),
        final_score=final_score,
        winner=winner,
        margin=abs(black - white),
    )
