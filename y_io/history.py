"""
y_io/history.py

Текстовый формат истории ходов: "0, 4, 7".

Номера действий совпадают с индексами узлов и являются частью формата,
поэтому история переигрывается на доске того же размера однозначно.
"""

import re
from typing import Iterable, List

from utils.error_handling import IllegalMoveError

HISTORY_SEPARATOR = ", "


def format_history(actions: Iterable[int]) -> str:
    """Список действий → строка истории."""
    return HISTORY_SEPARATOR.join(str(action) for action in actions)


def parse_history(text: str) -> List[int]:
    """
    Строка истории → список действий.

    Разделители — запятые и/или пробелы. Пустая строка — пустая история.

    Raises:
        IllegalMoveError: если встретился не числовой токен
    """
    actions = []
    for token in re.split(r'[,\s]+', text.strip()):
        if not token:
            continue
        if not re.fullmatch(r'\d+', token):
            raise IllegalMoveError(f"Неверное действие в истории: {token!r}")
        actions.append(int(token))
    return actions


def replay(state, actions: Iterable[int]):
    """
    Применяет действия к состоянию по порядку.

    Args:
        state: состояние с методом apply_action()
        actions: действия

    Returns:
        То же состояние после всех ходов
    """
    for action in actions:
        state.apply_action(action)
    return state
