"""
tests/test_io.py

Тесты парсинга конфигурации, формата истории и текстового вывода.
"""

import sys
import os
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

import argparse

import pytest

from core.game import GameParams, load_game
from core.utils import Player
from main import build_game, main
from utils.error_handling import ConfigurationError, IllegalMoveError
from y_io import (
    format_cells, format_history, format_occupancy, format_rings, parse_game_string,
    parse_history, parse_occupancy, parse_player, replay
)


def test_parse_game_string():
    assert parse_game_string("geodesic_y") == ("geodesic_y", {})
    assert parse_game_string("geodesic_y()") == ("geodesic_y", {})
    assert parse_game_string("geodesic_y(base_size=10,ansi_color_output=True)") == (
        "geodesic_y", {"base_size": 10, "ansi_color_output": True}
    )
    assert parse_game_string(" geodesic_y( base_size = 4 ) ") == ("geodesic_y", {"base_size": 4})


@pytest.mark.parametrize("text", ["", "geodesic y", "geodesic_y(base_size=3", "geodesic_y(=3)"])
def test_parse_game_string_errors(text):
    with pytest.raises(ConfigurationError):
        parse_game_string(text)


@pytest.mark.parametrize("token,expected", [
    ("p1", Player.PLAYER1),
    ("P2", Player.PLAYER2),
    (" player1 ", Player.PLAYER1),
    ("player2", Player.PLAYER2),
    (Player.PLAYER2, Player.PLAYER2),
])
def test_parse_player(token, expected):
    assert parse_player(token) == expected


@pytest.mark.parametrize("token", ["p3", "red", "1", "2", 0, 1, 2, -1, Player.NONE, True, None])
def test_parse_player_errors(token):
    """Номера игроков числами не принимаются: ни "1", ни 0/1."""
    with pytest.raises(ConfigurationError):
        parse_player(token)


@pytest.mark.parametrize("token", ["1", "2"])
def test_numeric_player_rejected_everywhere(token):
    """Строка игры, CLI и расстановка одинаково отвергают числовой токен."""
    with pytest.raises(ConfigurationError):
        load_game(f"geodesic_y(base_size=3,starting_player={token})")
    with pytest.raises(ConfigurationError):
        GameParams(starting_player=token).validate()
    with pytest.raises(ConfigurationError):
        parse_occupancy(f"{token}=0", 3)
    assert main(["--base-size", "3", "--games", "1", "--starting-player", token]) == 1


def test_player_token_same_on_every_input():
    """p2 означает второго игрока в строке игры, CLI и расстановке."""
    from_string = load_game("geodesic_y(base_size=3,starting_player=p2)").params.starting_player
    from_cli = build_game(argparse.Namespace(
        game=None, base_size=3, ansi=False, starting_player="p2", occupancy="p2=0"
    ))
    assert from_string == from_cli.params.starting_player == Player.PLAYER2
    assert from_cli.params.starting_occupancy == {0: Player.PLAYER2}


def test_parse_occupancy():
    assert parse_occupancy("p1=0,4 p2=7", 3) == {
        0: Player.PLAYER1, 4: Player.PLAYER1, 7: Player.PLAYER2
    }
    assert parse_occupancy("p2=1;p1=2", 3) == {1: Player.PLAYER2, 2: Player.PLAYER1}
    assert parse_occupancy("", 3) == {}
    assert parse_occupancy("p1=", 3) == {}


@pytest.mark.parametrize("text", [
    "p1=9",            # вне доски
    "p3=0",            # неизвестный игрок
    "p1=0,0",          # повтор
    "p1=0 p2=0",       # конфликт
    "p1:0",            # неверный формат
    "p1=a",
])
def test_parse_occupancy_errors(text):
    with pytest.raises(ConfigurationError):
        parse_occupancy(text, 3)


def test_format_occupancy():
    occupancy = {7: Player.PLAYER2, 0: Player.PLAYER1, 4: Player.PLAYER1}
    text = format_occupancy(occupancy)
    assert text == "p1=0;p1=4;p2=7"
    assert "," not in text
    assert parse_occupancy(text, 3) == occupancy
    assert format_occupancy({}) == ""


def test_history_format_and_parse():
    assert format_history([0, 5, 4]) == "0, 5, 4"
    assert format_history([]) == ""
    assert parse_history("0, 5, 4") == [0, 5, 4]
    assert parse_history("0 5,4") == [0, 5, 4]
    assert parse_history("  ") == []

    with pytest.raises(IllegalMoveError):
        parse_history("0, x")
    with pytest.raises(IllegalMoveError):
        parse_history("0, -1")
    # Надстрочные цифры проходят str.isdigit(), но не int()
    with pytest.raises(IllegalMoveError):
        parse_history("0, ²")
    assert main(["--base-size", "3", "--history", "0, ²"]) == 1


def test_replay_recorded_game():
    game = load_game("geodesic_y(base_size=3)")
    state = replay(game.new_initial_state(), parse_history("3, 0, 4, 1, 5"))
    assert state.outcome == Player.PLAYER1
    assert state.history_str() == "3, 0, 4, 1, 5"

    # Запись переигрывается на новом состоянии с тем же результатом
    again = replay(game.new_initial_state(), parse_history(state.history_str()))
    assert again.board.same_structure(state.board)


def test_replay_illegal_history():
    game = load_game("geodesic_y(base_size=3)")
    with pytest.raises(IllegalMoveError):
        replay(game.new_initial_state(), [0, 0])


def test_format_cells():
    owner = [Player.PLAYER1, Player.NONE, Player.PLAYER2, Player.PLAYER1]
    assert format_cells(owner) == "Player 1: 0 3 \nPlayer 2: 2 \n"
    assert format_cells([Player.NONE] * 3) == "Player 1: \nPlayer 2: \n"

    colored = format_cells(owner, ansi=True)
    assert colored.count("\033[0m") == 3


def test_format_rings():
    text = format_rings(3)
    assert text.splitlines() == [
        "ring 3 [3..8]: · · · · · ·",
        "ring 2 [0..2]: · · ·",
    ]

    owner = [Player.NONE] * 9
    owner[0] = Player.PLAYER1
    owner[8] = Player.PLAYER2
    assert format_rings(3, owner).splitlines()[1] == "ring 2 [0..2]: ● · ·"
    assert format_rings(3, owner).splitlines()[0].endswith("○")
