"""
y_io - Ввод/вывод для Geodesic Y

Экспортирует:
- Парсинг строки игры и стартовой расстановки
- Формат истории ходов
- Текстовый вывод доски
"""

from .parser import format_occupancy, parse_game_string, parse_occupancy, parse_player
from .history import format_history, parse_history, replay
from .visualizer import format_cells, format_rings

__all__ = [
    'format_occupancy',
    'parse_game_string',
    'parse_occupancy',
    'parse_player',
    'format_history',
    'parse_history',
    'replay',
    'format_cells',
    'format_rings'
]
