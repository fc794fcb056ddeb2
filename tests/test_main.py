"""
tests/test_main.py

Тесты CLI и серии случайных партий.
"""

import sys
import os
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

import random

import pytest

from core.game import load_game
from core.utils import Player
from main import main, play_random_game, replay_history, run_random_games


@pytest.mark.parametrize("base_size", range(2, 21))
def test_random_games_terminate_with_winner(base_size):
    """На любой доске случайная партия заканчивается победой."""
    game = load_game({"base_size": base_size})
    stats = run_random_games(game, 3, seed=base_size, check_undo=base_size <= 6)

    assert stats.games == 3
    assert stats.player1_wins + stats.player2_wins == 3
    assert stats.total_moves <= 3 * game.num_distinct_actions()
    if base_size <= 6:
        assert stats.undo_checks == stats.total_moves


def test_random_games_are_reproducible():
    game = load_game("geodesic_y(base_size=7)")
    a = run_random_games(game, 5, seed=42)
    b = run_random_games(game, 5, seed=42)
    assert (a.player1_wins, a.total_moves) == (b.player1_wins, b.total_moves)


def test_play_random_game_final_state():
    state = play_random_game(load_game({"base_size": 5}), random.Random(0))
    assert state.is_terminal()
    assert state.outcome in (Player.PLAYER1, Player.PLAYER2)
    assert sum(state.returns()) == 0


def test_replay_history():
    state = replay_history(load_game({"base_size": 3}), "3, 0, 4, 1, 5")
    assert state.outcome == Player.PLAYER1


def test_main_random_games(capsys):
    assert main(["--base-size", "4", "--games", "2", "--seed", "1", "--check-undo"]) == 0


def test_main_game_string_and_rings(capsys):
    assert main(["--game", "geodesic_y(base_size=3)", "--games", "1", "--rings"]) == 0
    out = capsys.readouterr().out
    assert "ring 3 [3..8]" in out


def test_main_history(capsys):
    assert main(["--base-size", "3", "--history", "3, 0, 4, 1, 5"]) == 0
    out = capsys.readouterr().out
    assert "Player 1: 3 4 5" in out
    assert "Winner: Player 1" in out


def test_main_unfinished_history(capsys):
    assert main(["--base-size", "3", "--history", "3, 0"]) == 0
    assert "To move: Player 1" in capsys.readouterr().out


@pytest.mark.parametrize("argv", [
    ["--base-size", "1"],
    ["--game", "hex(board_size=3)"],
    ["--base-size", "3", "--history", "0, 0"],
    ["--base-size", "3", "--occupancy", "p1=3,4,5"],
    ["--starting-player", "p7"],
])
def test_main_errors_return_1(argv):
    assert main(argv) == 1
