"""
Game flow for Go (Weiqi/Baduk).

This module contains:
- GameState: An immutable snapshot of a whole game session
- Pure transitions (place_stone, pass_turn, undo, reset, change_board_size)
  taking a GameState and returning the next one with a MoveResult
- GoGame: A stateful wrapper owning the live GameState of one session

Refused operations never raise and never change the state: the
transitions hand back the very same GameState together with a rejected
MoveResult explaining why.
"""

import logging
from dataclasses import dataclass, field, replace
from typing import Dict, Tuple

from igo.config import BOARD_SIZES, DEFAULT_BOARD_SIZE
from igo.goban import Cell, Coordinate, Goban, opponent
from igo.history import History
from igo.rules import ACCEPTED, MoveResult, Rejection, try_move
from igo.scoring import ScoreResult, score_game

logger = logging.getLogger(__name__)


def _no_captures() -> Dict[Cell, int]:
    return {Cell.BLACK: 0, Cell.WHITE: 0}


@dataclass(frozen=True)
class GameState:
    """
    Complete state of a game session.

    Attributes:
        goban: Current board
        current_player: Color to move
        last_move: Most recent placement, None if there is none
        captures: Opponent stones removed by each color
        pass_streak: Consecutive passes, 0 or 1 (the ending pass is not counted)
        game_over: True once both players have passed in a row
        history: Snapshots for undo, one per accepted placement
        score: Final result, set only once the game is over
    """

    goban: Goban
    current_player: Cell = Cell.BLACK
    last_move: Coordinate | None = None
    captures: Dict[Cell, int] = field(default_factory=_no_captures)
    pass_streak: int = 0
    game_over: bool = False
    history: History = field(default_factory=History)
    score: ScoreResult | None = None

    # Holds dicts, compared by value only
    __hash__ = None

    @property
    def board_size(self) -> int:
        return self.goban.size


def _check_size(size: int) -> int:
    if size not in BOARD_SIZES:
        raise ValueError(
            f"Board size must be one of {', '.join(map(str, BOARD_SIZES))}, got {size}"
        )
    return size


def new_game(size: int = DEFAULT_BOARD_SIZE) -> GameState:
    """
    Create a fresh game.

    Args:
        size (int): Board size, one of BOARD_SIZES

    Returns:
        GameState: Empty board, Black to move

    Raises:
        ValueError: If the size is not supported
    """
    return GameState(goban=Goban(_check_size(size)))


# ======================
# Transitions
# ======================


def place_stone(state: GameState, row: int, col: int) -> Tuple[GameState, MoveResult]:
    """
    Play a stone for the current player.

    Args:
        state (GameState): Current state
        row (int): Row index
        col (int): Column index

    Returns:
        tuple[GameState, MoveResult]: Next state and outcome
    """
    if state.game_over:
        return state, MoveResult.rejected(Rejection.GAME_OVER)

    player = state.current_player
    result, goban = try_move(state.goban, row, col, player)
    if not result:
        logger.debug(
            "Rejected %s move at (%d, %d): %s", player.name, row, col, result.reason.value
        )
        return state, result

    captures = dict(state.captures)
    captures[player] += result.captures

    next_state = replace(
        state,
        goban=goban,
        current_player=opponent(player),
        last_move=(row, col),
        captures=captures,
        pass_streak=0,
        history=state.history.record_before_move(
            state.goban, player, state.captures, (row, col)
        ),
    )
    return next_state, result


def pass_turn(state: GameState) -> Tuple[GameState, MoveResult]:
    """
    Pass the current player's turn; the second pass in a row ends the game.

    Args:
        state (GameState): Current state

    Returns:
        tuple[GameState, MoveResult]: Next state and outcome
    """
    if state.game_over:
        return state, MoveResult.rejected(Rejection.GAME_OVER)

    pass_streak = state.pass_streak + 1
    if pass_streak < 2:
        return replace(
            state, pass_streak=pass_streak, current_player=opponent(state.current_player)
        ), ACCEPTED

    score = score_game(state.goban, state.captures)
    logger.info("Game over: %s", score)
    return replace(state, game_over=True, score=score), ACCEPTED


def undo(state: GameState) -> Tuple[GameState, MoveResult]:
    """
    Take back the most recent placement.

    Args:
        state (GameState): Current state

    Returns:
        tuple[GameState, MoveResult]: Previous state and outcome
    """
    if state.game_over:
        return state, MoveResult.rejected(Rejection.GAME_OVER)
    if not state.history:
        return state, MoveResult.rejected(Rejection.NO_HISTORY)

    snapshot, history = state.history.pop()
    previous = replace(
        state,
        goban=snapshot.goban,
        current_player=snapshot.player,
        captures=dict(snapshot.captures),
        last_move=history.last_move,
        pass_streak=0,
        history=history,
    )
    return previous, ACCEPTED


def reset(state: GameState, size: int | None = None) -> GameState:
    """
    Start over on an empty board, keeping the board size unless one is given.

    Args:
        state (GameState): Current state
        size (int, optional): New board size

    Returns:
        GameState: Fresh game

    Raises:
        ValueError: If the size is not supported
    """
    size = state.board_size if size is None else size
    logger.info("New %dx%d game", size, size)
    return new_game(size)


def change_board_size(state: GameState, size: int) -> GameState:
    """Switch to another board size; this always resets the game."""
    return reset(state, _check_size(size))


# ======================
# Session wrapper
# ======================


class GoGame:
    """
    Manages one Go game session:
    - Player turns
    - Passing and game end detection
    - Undo
    - Score access once the game is over

    The session exclusively owns its GameState; two GoGame instances never
    share state.
    """

    def __init__(self, size: int = DEFAULT_BOARD_SIZE):
        """
        Initialize a new Go game.

        Args:
            size (int): Board size
        """
        self.state: GameState = new_game(size)

    def copy(self) -> "GoGame":
        """
        Create an independent copy of the current game.

        Returns:
            GoGame: A new GoGame instance with the same state
        """
        game = GoGame(self.board_size)
        game.state = self.state
        return game

    # Read-only view of the state

    @property
    def goban(self) -> Goban:
        return self.state.goban

    @property
    def board_size(self) -> int:
        return self.state.board_size

    @property
    def current_player(self) -> Cell:
        return self.state.current_player

    @property
    def last_move(self) -> Coordinate | None:
        return self.state.last_move

    @property
    def captures(self) -> Dict[Cell, int]:
        return dict(self.state.captures)

    @property
    def pass_streak(self) -> int:
        return self.state.pass_streak

    @property
    def game_over(self) -> bool:
        return self.state.game_over

    @property
    def history(self) -> History:
        return self.state.history

    @property
    def score(self) -> ScoreResult | None:
        return self.state.score

    @property
    def can_undo(self) -> bool:
        """True when there is a placement to take back."""
        return bool(self.state.history) and not self.state.game_over

    # Operations

    def place_stone(self, row: int, col: int) -> MoveResult:
        """
        Attempt to play a stone for the current player.

        Args:
            row (int): Row index
            col (int): Column index

        Returns:
            MoveResult: Truthy if the stone was played
        """
        self.state, result = place_stone(self.state, row, col)
        return result

    def pass_move(self) -> MoveResult:
        """Pass the current player's turn."""
        self.state, result = pass_turn(self.state)
        return result

    def undo(self) -> MoveResult:
        """Take back the last placement."""
        self.state, result = undo(self.state)
        return result

    def reset(self, size: int | None = None) -> None:
        self.state = reset(self.state, size)

    def change_board_size(self, size: int) -> None:
        self.state = change_board_size(self.state, size)

    def __str__(self) -> str:
        return str(self.state.goban)
