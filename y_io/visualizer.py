"""
y_io/visualizer.py

Текстовый вывод доски: списки занятых клеток по игрокам.
ANSI-цвета только для терминала и на логику не влияют.
"""

from typing import Optional, Sequence

from core.topology import board_size, ring_nodes
from core.utils import PLAYER_NAMES, PLAYER_SYMBOLS, Player

RED = "\033[91m"
BLUE = "\033[94m"
RESET = "\033[0m"

PLAYER_COLORS = {
    Player.PLAYER1: RED,
    Player.PLAYER2: BLUE,
}


def _colored(text: str, player: Player, ansi: bool) -> str:
    if not ansi or player not in PLAYER_COLORS:
        return text
    return PLAYER_COLORS[player] + text + RESET


def format_cells(owner: Sequence[Player], ansi: bool = False) -> str:
    """
    Занятые клетки каждого игрока, после каждого номера пробел:

        Player 1: 0 4
        Player 2: 3

    Args:
        owner: владелец каждой клетки
        ansi: раскрасить номера клеток

    Returns:
        str (каждая строка заканчивается переводом строки)
    """
    lines = []
    for player in (Player.PLAYER1, Player.PLAYER2):
        cells = [
            _colored(str(node), player, ansi)
            for node, cell_owner in enumerate(owner) if cell_owner == player
        ]
        # Каждый номер завершается пробелом: "Player 1: 0 4 "
        lines.append(f"{PLAYER_NAMES[player]}: " + "".join(cell + " " for cell in cells))
    return "\n".join(lines) + "\n"


def format_rings(base_size: int, owner: Optional[Sequence[Player]] = None,
                 ansi: bool = False) -> str:
    """
    Доска по кольцам, от внешнего к внутреннему:

        ring 3 [3..8]: ● · · ○ · ·
        ring 2 [0..2]: · · ●
    """
    if owner is None:
        owner = [Player.NONE] * board_size(base_size)

    lines = []
    for ring in range(base_size, 1, -1):
        nodes = ring_nodes(ring)
        symbols = " ".join(
            _colored(PLAYER_SYMBOLS[owner[node]], owner[node], ansi) for node in nodes
        )
        lines.append(f"ring {ring} [{nodes.start}..{nodes.stop - 1}]: {symbols}")
    return "\n".join(lines)
