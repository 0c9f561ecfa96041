"""
Rules engine for the game of Go.

The engine tracks the board, legalises moves, resolves captures, exempts
simple seki shapes from capture and scores finished games by territory
plus komi. It holds no rendering or input handling of its own.

Available names:
    - GoGame: One game session (place_stone, pass_move, undo, reset, ...)
    - GameState: Immutable state of a session
    - Goban, Cell: Board and intersection values
    - MoveResult, Rejection: Outcome of an operation
    - ScoreResult: Final result of a game
"""

from .core import GameState, GoGame
from .goban import Cell, Goban
from .rules import MoveResult, Rejection
from .scoring import ScoreResult

__all__ = [
    "GoGame",
    "GameState",
    "Goban",
    "Cell",
    "MoveResult",
    "Rejection",
    "ScoreResult",
]
