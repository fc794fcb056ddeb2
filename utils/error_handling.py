"""
utils/error_handling.py

Иерархия исключений движка и валидаторы входных данных.

Все ошибки фатальны для вызывающего кода: ядро не возвращает коды ошибок
и не перехватывает собственные исключения.
"""

import numbers
from typing import Any


class GeodesicYError(Exception):
    """Базовое исключение движка."""
    pass


class ConfigurationError(GeodesicYError):
    """Невалидная конфигурация игры (размер доски, стартовая расстановка)."""
    pass


class IllegalMoveError(GeodesicYError):
    """Нарушение предусловия хода или отмены хода."""
    pass


class InternalInvariantError(GeodesicYError):
    """Нарушение внутреннего инварианта (не должно происходить)."""
    pass


def validate_base_size(base_size: Any) -> int:
    """
    Валидирует размер основания доски.

    Args:
        base_size: размер основания

    Returns:
        base_size как int

    Raises:
        ConfigurationError: если размер не целый или меньше 2
    """
    if isinstance(base_size, bool) or not isinstance(base_size, numbers.Integral):
        raise ConfigurationError(f"base_size должен быть целым числом, получено {base_size!r}")

    if base_size < 2:
        raise ConfigurationError(f"base_size должен быть >= 2, получено {base_size}")

    return int(base_size)


def validate_player(player: Any) -> int:
    """Проверяет индекс игрока (0 или 1) для наблюдений."""
    if isinstance(player, bool) or not isinstance(player, numbers.Integral) or not 0 <= player < 2:
        raise IllegalMoveError(f"Неизвестный игрок: {player!r}")
    return int(player)


def validate_action(action: Any, num_cells: int) -> int:
    """
    Проверяет, что action — индекс клетки в диапазоне 0..num_cells-1.

    Raises:
        IllegalMoveError: если действие вне диапазона
    """
    if isinstance(action, bool) or not isinstance(action, numbers.Integral):
        raise IllegalMoveError(f"Действие должно быть целым числом, получено {action!r}")

    if not 0 <= action < num_cells:
        raise IllegalMoveError(f"Действие {action} вне диапазона 0..{num_cells - 1}")

    return int(action)

