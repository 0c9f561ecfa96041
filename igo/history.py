"""
Undo history.

One snapshot is recorded per accepted placement, holding the state just
before the stone was played. Passes are not recorded.
"""

from dataclasses import dataclass
from typing import Dict, Tuple

from igo.goban import Cell, Coordinate, Goban


@dataclass(frozen=True)
class HistorySnapshot:
    """
    State before an accepted placement.

    Attributes:
        goban: Board before the move
        player: Player who made the move
        captures: Capture counts before the move
        move: Where the stone was placed
    """

    goban: Goban
    player: Cell
    captures: Dict[Cell, int]
    move: Coordinate

    # Holds a dict, compared by value only
    __hash__ = None


class History:
    """Immutable stack of snapshots, most recent last."""

    def __init__(self, snapshots: Tuple[HistorySnapshot, ...] = ()):
        self.snapshots: Tuple[HistorySnapshot, ...] = tuple(snapshots)

    def __len__(self) -> int:
        return len(self.snapshots)

    def __bool__(self) -> bool:
        return bool(self.snapshots)

    def __iter__(self):
        return iter(self.snapshots)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, History):
            return NotImplemented
        return self.snapshots == other.snapshots

    def __repr__(self) -> str:
        return f"History({len(self)} snapshots)"

    def record_before_move(
        self, goban: Goban, player: Cell, captures: Dict[Cell, int], move: Coordinate
    ) -> "History":
        """
        Push the pre-move state of a placement.

        Args:
            goban (Goban): Board before the move
            player (Cell): Player about to move
            captures (dict): Capture counts before the move
            move (tuple): Where the stone is being placed

        Returns:
            History: The extended history
        """
        snapshot = HistorySnapshot(goban, player, dict(captures), move)
        return History(self.snapshots + (snapshot,))

    def pop(self) -> Tuple[HistorySnapshot, "History"]:
        """
        Remove the most recent snapshot.

        Returns:
            tuple[HistorySnapshot, History]: The snapshot and the remaining history

        Raises:
            IndexError: If the history is empty
        """
        if not self.snapshots:
            raise IndexError("pop from empty history")
        return self.snapshots[-1], History(self.snapshots[:-1])

    @property
    def last_move(self) -> Coordinate | None:
        """Move of the most recent snapshot, None if empty."""
        return self.snapshots[-1].move if self.snapshots else None
