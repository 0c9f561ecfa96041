"""
Board representation for the Go rules engine.

A Goban is an immutable square grid of cells. Placing or removing stones
never modifies a Goban in place: it returns a new one, so any Goban kept
around (for instance in the undo history) stays valid forever.
"""

from enum import IntEnum
from typing import Iterable, Iterator, Tuple

import numpy as np


Coordinate = Tuple[int, int]


class Cell(IntEnum):
    """Content of a board intersection."""

    EMPTY = 0
    BLACK = 1
    WHITE = 2


def opponent(color: int) -> Cell:
    """
    Return the opponent color.

    Args:
        color (int): Current color

    Returns:
        Cell: Opponent color
    """
    return Cell.BLACK if color == Cell.WHITE else Cell.WHITE


class Goban:
    """
    Immutable Go board (goban).

    Attributes:
        size (int): Side length of the board
        board (np.ndarray): Read-only (size, size) array of Cell values
    """

    def __init__(self, size: int, board: np.ndarray | None = None):
        """
        Create a goban, empty unless a board array is given.

        Args:
            size (int): Board size (e.g. 9, 13, 19)
            board (np.ndarray, optional): Initial cell values, copied

        Raises:
            ValueError: If the board array is not (size, size)
        """
        if board is None:
            board = np.zeros((size, size), dtype=np.int8)
        else:
            board = np.array(board, dtype=np.int8)
            if board.shape != (size, size):
                raise ValueError(
                    f"Board shape {board.shape} does not match size {size}"
                )

        board.flags.writeable = False
        self.size: int = size
        self.board: np.ndarray = board

    @classmethod
    def from_stones(
        cls,
        size: int,
        black: Iterable[Coordinate] = (),
        white: Iterable[Coordinate] = (),
    ) -> "Goban":
        """
        Build a goban from lists of black and white stone coordinates.

        Args:
            size (int): Board size
            black (iterable): Coordinates of black stones
            white (iterable): Coordinates of white stones

        Returns:
            Goban: The new goban
        """
        board = np.zeros((size, size), dtype=np.int8)
        for row, col in black:
            board[row, col] = Cell.BLACK
        for row, col in white:
            board[row, col] = Cell.WHITE
        return cls(size, board)

    # ======================
    # Basic utilities
    # ======================

    def on_board(self, row: int, col: int) -> bool:
        """Check if coordinates are inside the board."""
        return 0 <= row < self.size and 0 <= col < self.size

    def neighbours(self, row: int, col: int) -> Iterator[Coordinate]:
        """
        Yield all orthogonal neighbours of a board position.

        Args:
            row (int): Row index
            col (int): Column index

        Yields:
            tuple[int, int]: Valid neighbour coordinates
        """
        for dr, dc in ((-1, 0), (1, 0), (0, -1), (0, 1)):
            nr, nc = row + dr, col + dc
            if self.on_board(nr, nc):
                yield nr, nc

    def __getitem__(self, coord: Coordinate) -> Cell:
        return Cell(int(self.board[coord]))

    def is_empty(self, row: int, col: int) -> bool:
        return self.board[row, col] == Cell.EMPTY

    def count(self, color: int) -> int:
        """Number of cells holding the given value."""
        return int(np.count_nonzero(self.board == color))

    # ======================
    # Copy-on-write updates
    # ======================

    def place(self, row: int, col: int, color: int) -> "Goban":
        """
        Return a new goban with a stone of the given color at (row, col).

        Args:
            row (int): Row index
            col (int): Column index
            color (int): Stone color

        Returns:
            Goban: The updated copy
        """
        board = self.board.copy()
        board[row, col] = color
        return Goban(self.size, board)

    def remove(self, stones: Iterable[Coordinate]) -> "Goban":
        """
        Return a new goban with the given stones removed.

        Args:
            stones (iterable): Coordinates to clear

        Returns:
            Goban: The updated copy
        """
        board = self.board.copy()
        for row, col in stones:
            board[row, col] = Cell.EMPTY
        return Goban(self.size, board)

    # ======================
    # Comparison and display
    # ======================

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Goban):
            return NotImplemented
        return self.size == other.size and np.array_equal(self.board, other.board)

    def __hash__(self) -> int:
        return hash((self.size, self.board.tobytes()))

    def __repr__(self) -> str:
        return f"Goban(size={self.size}, black={self.count(Cell.BLACK)}, white={self.count(Cell.WHITE)})"

    def __str__(self) -> str:
        """
        Return a human-readable board representation.

        Returns:
            str: Board as ASCII grid
        """
        symbols = {Cell.EMPTY: ".", Cell.BLACK: "X", Cell.WHITE: "O"}
        return "\n".join(
            " ".join(symbols[Cell(int(value))] for value in row) for row in self.board
        )
