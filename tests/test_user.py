import math
from datetime import date

import pytest

from wordladder.gamedata import GameData
from wordladder.user import UNKNOWN_GAME, User, is_username_unknown


def test_new_user_creates_empty_record(tmp_path):
    data_dir = tmp_path / "data"
    assert is_username_unknown("alice", data_dir) is True
    user = User("alice", data_dir)
    assert is_username_unknown("alice", data_dir) is False
    assert (data_dir / "alice.csv").read_text() == ""
    assert user.games == []
    assert user.wins == 0
    assert user.losses == 0
    assert user.last_game == UNKNOWN_GAME


def test_ratio_infinite_without_losses(tmp_path):
    user = User("bob", tmp_path)
    ratio = user.win_loss_ratio
    assert ratio == math.inf
    user.save_game(GameData(date(2025, 1, 1), True, 2, 0))
    assert user.wins == 1
    assert user.losses == 0
    ratio = user.win_loss_ratio
    assert ratio == math.inf


def test_save_game_writes_line(tmp_path):
    user = User("carol", tmp_path)
    game = GameData(date(2025, 6, 4), False, 7, 2)
    user.save_game(game)
    assert (tmp_path / "carol.csv").read_text() == game.to_line() + "\n"
    assert user.games == [game]


def test_games_survive_reload(tmp_path):
    games = [
        GameData(date(2025, 6, 1), True, 3, 0),
        GameData(date(2025, 6, 2), False, 9, 3),
        GameData(date(2025, 6, 3), True, 4, 1),
    ]
    user = User("dave", tmp_path)
    for game in games:
        user.save_game(game)
    reloaded = User("dave", tmp_path)
    assert reloaded.games == games
    assert reloaded.wins + reloaded.losses == len(games)
    assert reloaded.win_loss_ratio == reloaded.wins / reloaded.losses


def test_wins_and_losses_counts(tmp_path):
    user = User("erin", tmp_path)
    outcomes = [True, False, True, True, False]
    for won in outcomes:
        user.save_game(GameData(date(2025, 3, 3), won, 1, 0))
    assert user.wins == outcomes.count(True)
    assert user.losses == outcomes.count(False)


def test_last_game_format(tmp_path):
    user = User("frank", tmp_path)
    user.save_game(GameData(date(2024, 2, 2), True, 1, 0))
    user.save_game(GameData(date(2025, 6, 4), False, 1, 0))
    assert user.last_game == "04/06/2025"


def test_save_without_username_raises(tmp_path):
    user = User("", tmp_path)
    with pytest.raises(ValueError):
        user.save_game(GameData(date(2025, 6, 4), True, 1, 0))


def test_load_switches_user(tmp_path):
    game = GameData(date(2025, 5, 5), True, 6, 1)
    User("grace", tmp_path).save_game(game)
    user = User("heidi", tmp_path)
    assert user.games == []
    user.load("grace")
    assert user.username == "grace"
    assert user.games == [game]