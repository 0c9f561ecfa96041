"""
Game serialization helpers and display lookups.

game_to_dict / game_from_dict convert a GameState verbatim (board, scalar
fields, undo history and score) to and from JSON-compatible dicts, for a
service layer to store or transmit as it sees fit.
"""

from typing import Dict, List

from igo.config import STAR_POINTS
from igo.core import GameState
from igo.goban import Cell, Coordinate, Goban
from igo.history import History, HistorySnapshot
from igo.schemas import CapturesModel, GameStateModel, ScoreModel, SnapshotModel
from igo.scoring import ScoreResult


def star_points(size: int) -> List[Coordinate]:
    """
    Star points (hoshi) drawn as guides on a board.

    Args:
        size (int): Board size

    Returns:
        list[tuple[int, int]]: Star point coordinates, empty for unknown sizes
    """
    return list(STAR_POINTS.get(size, []))


def _captures_to_model(captures: Dict[Cell, int]) -> CapturesModel:
    return CapturesModel(black=captures[Cell.BLACK], white=captures[Cell.WHITE])


def _captures_from_model(model: CapturesModel) -> Dict[Cell, int]:
    return {Cell.BLACK: model.black, Cell.WHITE: model.white}


def game_to_dict(state: GameState) -> dict:
    """
    Serialize a GameState to a dict.
    """
    score = None
    if state.score is not None:
        score = ScoreModel(
            territory=_captures_to_model(state.score.territory),
            territory_map=state.score.territory_map.board.tolist(),
            black_score=state.score.final_score[Cell.BLACK],
            white_score=state.score.final_score[Cell.WHITE],
            winner=int(state.score.winner),
            margin=state.score.margin,
        )

    model = GameStateModel(
        size=state.board_size,
        board=state.goban.board.tolist(),
        current_player=int(state.current_player),
        last_move=state.last_move,
        captures=_captures_to_model(state.captures),
        pass_streak=state.pass_streak,
        game_over=state.game_over,
        history=[
            SnapshotModel(
                board=snapshot.goban.board.tolist(),
                player=int(snapshot.player),
                captures=_captures_to_model(snapshot.captures),
                move=snapshot.move,
            )
            for snapshot in state.history
        ],
        score=score,
    )
    return model.model_dump()


def game_from_dict(data: dict) -> GameState:
    """
    Deserialize a GameState from a dict.

    Raises:
        pydantic.ValidationError: If the data does not describe a valid game
    """
    model = GameStateModel.model_validate(data)
    size = model.size

    score = None
    if model.score is not None:
        score = ScoreResult(
            territory=_captures_from_model(model.score.territory),
            territory_map=Goban(size, model.score.territory_map),
            final_score={
                Cell.BLACK: model.score.black_score,
                Cell.WHITE: model.score.white_score,
            },
            winner=Cell(model.score.winner),
            margin=model.score.margin,
        )

    history = History(
        tuple(
            HistorySnapshot(
                goban=Goban(size, snapshot.board),
                player=Cell(snapshot.player),
                captures=_captures_from_model(snapshot.captures),
                move=tuple(snapshot.move),
            )
            for snapshot in model.history
        )
    )

    return GameState(
        goban=Goban(size, model.board),
        current_player=Cell(model.current_player),
        last_move=None if model.last_move is None else tuple(model.last_move),
        captures=_captures_from_model(model.captures),
        pass_streak=model.pass_streak,
        game_over=model.game_over,
        history=history,
        score=score,
    )


if __name__ == "__main__":
    import logging

    from igo.core import GoGame

    logging.basicConfig(level=logging.DEBUG)

    game = GoGame(9)
    game.place_stone(2, 2)
    game.place_stone(3, 3)
    game.pass_move()
    game.pass_move()

    print(game)
    print(game.score)
    assert game_from_dict(game_to_dict(game.state)) == game.state
