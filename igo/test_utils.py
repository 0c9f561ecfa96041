import json

import pytest
from pydantic import ValidationError
from igo.core import GoGame, new_game
from igo.goban import Cell
from igo.utils import game_from_dict, game_to_dict, star_points


def finished_game() -> GoGame:
    game = GoGame(9)
    for row, col in [(0, 0), (0, 1), (8, 8), (1, 0), (4, 4)]:
        game.place_stone(row, col)
    game.pass_move()
    game.pass_move()
    return game


class TestStarPoints:
    """Tests for star_points"""

    def test_known_sizes(self):
        """Test star point counts per board size"""
        assert len(star_points(9)) == 5
        assert len(star_points(13)) == 5
        assert len(star_points(19)) == 9
        assert (4, 4) in star_points(9)
        assert (9, 9) in star_points(19)

    def test_unknown_size(self):
        """Test that other sizes have no star point"""
        assert star_points(7) == []


class TestGameToDict:
    """Tests for game_to_dict"""

    def test_json_compatible(self):
        """Test that the dict can be dumped to JSON"""
        data = game_to_dict(finished_game().state)
        json.dumps(data)

    def test_fields(self):
        """Test the serialized fields of a game in progress"""
        game = GoGame(9)
        game.place_stone(2, 2)
        data = game_to_dict(game.state)
        assert data["size"] == 9
        assert data["board"][2][2] == Cell.BLACK
        assert data["current_player"] == Cell.WHITE
        assert data["captures"] == {"black": 0, "white": 0}
        assert len(data["history"]) == 1
        assert data["score"] is None


class TestGameFromDict:
    """Tests for game_from_dict"""

    def test_round_trip_in_progress(self):
        """Test restoring a game in progress"""
        game = GoGame(13)
        game.place_stone(3, 3)
        game.place_stone(9, 9)
        game.pass_move()
        assert game_from_dict(game_to_dict(game.state)) == game.state

    def test_round_trip_through_json(self):
        """Test restoring a finished game from JSON text"""
        state = finished_game().state
        restored = game_from_dict(json.loads(json.dumps(game_to_dict(state))))
        assert restored == state
        assert restored.score.winner == state.score.winner

    def test_restored_game_can_undo(self):
        """Test that the restored history is usable"""
        game = GoGame(9)
        game.place_stone(2, 2)
        game.place_stone(3, 3)
        restored = GoGame(9)
        restored.state = game_from_dict(game_to_dict(game.state))
        assert restored.undo()
        assert restored.last_move == (2, 2)

    def test_invalid_size(self):
        """Test that an unsupported size is refused"""
        data = game_to_dict(new_game(9))
        data["size"] = 8
        with pytest.raises(ValidationError):
            game_from_dict(data)

    def test_wrong_board_shape(self):
        """Test that a board not matching the size is refused"""
        data = game_to_dict(new_game(9))
        data["board"] = data["board"][:-1]
        with pytest.raises(ValidationError):
            game_from_dict(data)

    def test_invalid_cell_value(self):
        """Test that unknown cell values are refused"""
        data = game_to_dict(new_game(9))
        data["board"][0][0] = 3
        with pytest.raises(ValidationError):
            game_from_dict(data)

    def test_pass_streak_out_of_range(self):
        """Test that a pass streak above 1 is refused"""
        data = game_to_dict(new_game(9))
        data["pass_streak"] = 2
        with pytest.raises(ValidationError):
            game_from_dict(data)

    def test_finished_game_keeps_pass_streak(self):
        """Test that a finished game serializes its pass streak as 1"""
        assert game_to_dict(finished_game().state)["pass_streak"] == 1

    def test_missing_score(self):
        """Test that a finished game must carry its score"""
        data = game_to_dict(finished_game().state)
        data["score"] = None
        with pytest.raises(ValidationError):
            game_from_dict(data)
