"""
Pydantic schemas describing a serialized game.

Colors are stored as their Cell integer value (1 = black, 2 = white) and
boards as nested lists of cell values, row by row.
"""

from typing import List, Literal, Optional, Tuple

from pydantic import BaseModel, Field, model_validator

from igo.config import BOARD_SIZES

Color = Literal[1, 2]
Board = List[List[Literal[0, 1, 2]]]


def _check_square(board: Board, size: int, name: str) -> None:
    if len(board) != size or any(len(row) != size for row in board):
        raise ValueError(f"{name} must be {size}x{size}")


class CapturesModel(BaseModel):
    black: int = Field(ge=0)
    white: int = Field(ge=0)


class SnapshotModel(BaseModel):
    board: Board
    player: Color
    captures: CapturesModel
    move: Tuple[int, int]


class ScoreModel(BaseModel):
    territory: CapturesModel
    territory_map: Board
    black_score: float
    white_score: float
    winner: Color
    margin: float = Field(ge=0)


class GameStateModel(BaseModel):
    size: int
    board: Board
    current_player: Color
    last_move: Optional[Tuple[int, int]] = None
    captures: CapturesModel
    pass_streak: int = Field(ge=0, le=1)
    game_over: bool
    history: List[SnapshotModel] = []
    score: Optional[ScoreModel] = None

    @model_validator(mode="after")
    def check_shapes(self) -> "GameStateModel":
        if self.size not in BOARD_SIZES:
            raise ValueError(f"Unsupported board size {self.size}")
        _check_square(self.board, self.size, "board")
        for snapshot in self.history:
            _check_square(snapshot.board, self.size, "history board")
        if self.score is not None:
            _check_square(self.score.territory_map, self.size, "territory map")
        if self.game_over != (self.score is not None):
            raise ValueError("score must be present exactly when the game is over")
        return self
