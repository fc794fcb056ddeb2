"""
core/utils.py

Общие константы и перечисления Geodesic Y.
"""

from enum import IntEnum, IntFlag
from typing import Dict

NUM_PLAYERS = 2
CELL_STATES = 1 + NUM_PLAYERS
DEFAULT_BASE_SIZE = 3


class Player(IntEnum):
    """Владелец клетки / исход партии. NONE — пустая клетка или игра не окончена."""
    PLAYER1 = 0
    PLAYER2 = 1
    NONE = 2


class Edge(IntFlag):
    """Битовая маска краёв доски."""
    NONE = 0
    RIGHT = 1
    BOTTOM = 2
    LEFT = 4
    ALL = RIGHT | BOTTOM | LEFT


# Символы для отображения
PLAYER_SYMBOLS: Dict[Player, str] = {
    Player.PLAYER1: '●',
    Player.PLAYER2: '○',
    Player.NONE: '·',
}

PLAYER_NAMES: Dict[Player, str] = {
    Player.PLAYER1: 'Player 1',
    Player.PLAYER2: 'Player 2',
    Player.NONE: 'Nobody',
}


def opponent_of(player: Player) -> Player:
    """Возвращает соперника. Для Player.NONE соперника нет."""
    if player == Player.PLAYER1:
        return Player.PLAYER2
    if player == Player.PLAYER2:
        return Player.PLAYER1
    raise ValueError(f"Unexpected player: {player!r}")


def player_relative(owner: Player, player: int) -> int:
    """
    Номер плоскости наблюдения для клетки с владельцем owner с точки зрения player.

    0 — свои камни, 1 — камни соперника, 2 — пусто.
    """
    if owner == Player.NONE:
        return 2
    return 0 if owner == player else 1
