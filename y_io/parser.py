"""
y_io/parser.py

Парсинг текстовой конфигурации игры.

Форматы:
    geodesic_y(base_size=9,ansi_color_output=True)   — строка игры
    p1=0,4 p2=7                                       — стартовая расстановка
"""

import re
from typing import Any, Dict, Tuple

from core.topology import board_size
from core.utils import Player
from utils.error_handling import ConfigurationError

GAME_STRING_RE = re.compile(r'^\s*(\w+)\s*(?:\((.*)\))?\s*$')
OCCUPANCY_PART_RE = re.compile(r'^(\w+)=([\d,]*)$')

PLAYER_TOKENS: Dict[str, Player] = {
    'p1': Player.PLAYER1,
    'player1': Player.PLAYER1,
    'p2': Player.PLAYER2,
    'player2': Player.PLAYER2,
}


def _parse_value(text: str) -> Any:
    """Значение параметра: bool, int или строка."""
    text = text.strip()
    if text.lower() in ('true', 'false'):
        return text.lower() == 'true'
    if re.fullmatch(r'-?\d+', text):
        return int(text)
    return text


def parse_game_string(text: str) -> Tuple[str, Dict[str, Any]]:
    """
    Парсит строку игры вида name(key=value,...).

    Args:
        text: строка игры

    Returns:
        (имя игры, словарь параметров)

    Raises:
        ConfigurationError: если строка не соответствует формату
    """
    match = GAME_STRING_RE.match(text)
    if not match:
        raise ConfigurationError(
            f"Неверный формат: {text!r}. Ожидается: name(key=value,...)"
        )

    name, args = match.group(1), match.group(2)
    params: Dict[str, Any] = {}
    if args and args.strip():
        for part in args.split(','):
            key, sep, value = part.partition('=')
            key = key.strip()
            if not sep or not key:
                raise ConfigurationError(f"Неверный параметр {part!r} в {text!r}")
            if key in params:
                raise ConfigurationError(f"Параметр {key!r} задан дважды")
            params[key] = _parse_value(value)
    return name, params


def parse_player(token: Any) -> Player:
    """
    Игрок из токена: 'p1' / 'player1', 'p2' / 'player2' или Player.

    Числа ("1", 0) не принимаются ни в одном источнике.

    Raises:
        ConfigurationError: неизвестный игрок
    """
    if isinstance(token, Player):
        if token == Player.NONE:
            raise ConfigurationError("Игрок не может быть Player.NONE")
        return token

    player = PLAYER_TOKENS.get(token.strip().lower()) if isinstance(token, str) else None
    if player is None:
        raise ConfigurationError(f"Неизвестный игрок: {token!r}. Ожидается p1 или p2")
    return player


def format_occupancy(occupancy: Dict[int, Player]) -> str:
    """
    Расстановка в строку вида p1=0;p1=4;p2=7.

    Без запятых, поэтому помещается в строку игры и читается
    обратно через parse_occupancy().
    """
    return ";".join(
        f"p{int(player) + 1}={node}" for node, player in sorted(occupancy.items())
    )


def parse_occupancy(text: str, base_size: int) -> Dict[int, Player]:
    """
    Парсит стартовую расстановку.

    Формат: p1=0,4 p2=7 (части разделяются пробелами или ';').

    Args:
        text: строка расстановки
        base_size: размер основания доски (для проверки диапазона)

    Returns:
        {узел: игрок}

    Raises:
        ConfigurationError: неверный формат, неизвестный игрок,
            узел вне доски или повтор узла
    """
    num_cells = board_size(base_size)
    occupancy: Dict[int, Player] = {}

    for part in re.split(r'[;\s]+', text.strip()):
        if not part:
            continue
        match = OCCUPANCY_PART_RE.match(part)
        if not match:
            raise ConfigurationError(
                f"Неверный формат {part!r}. Ожидается: p1=0,4 p2=7"
            )

        player = parse_player(match.group(1))
        for token in match.group(2).split(','):
            if not token:
                continue
            node = int(token)
            if not 0 <= node < num_cells:
                raise ConfigurationError(f"Узел {node} вне доски 0..{num_cells - 1}")
            if node in occupancy:
                raise ConfigurationError(f"Узел {node} указан несколько раз")
            occupancy[node] = player

    return occupancy
