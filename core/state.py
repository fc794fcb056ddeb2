"""
core/state.py

Игровое состояние Geodesic Y: ходы, очередь, победа, отмена хода.

Победа — одна связная группа камней игрока касается всех трёх краёв.
Ничьей не бывает.
"""

from typing import Dict, List, Optional, Tuple

from utils.error_handling import (
    ConfigurationError, IllegalMoveError, validate_action, validate_base_size, validate_player
)
from utils.logging import get_logger
from y_io.history import format_history
from y_io.visualizer import format_cells

from .board import BoardState
from .topology import get_neighbors
from .utils import CELL_STATES, Edge, Player, opponent_of, player_relative

HistoryItem = Tuple[Player, int]


def _coerce_player(player) -> Player:
    """Player.PLAYER1 / PLAYER2 из Player или индекса 0 / 1."""
    try:
        player = Player(player)
    except ValueError:
        raise ConfigurationError(f"Неизвестный игрок: {player!r}") from None
    if player == Player.NONE:
        raise ConfigurationError("Игрок не может быть Player.NONE")
    return player


class GeodesicYState:
    """
    Состояние партии.

    Union-find слияния нельзя отменить локально, поэтому undo_action()
    сбрасывает доску в начальную конфигурацию и переигрывает историю.
    """

    def __init__(self, base_size: int, starting_player: Player = Player.PLAYER1,
                 starting_occupancy: Optional[Dict[int, Player]] = None,
                 ansi_color_output: bool = False):
        """
        Args:
            base_size: размер основания доски (>= 2)
            starting_player: кто ходит первым
            starting_occupancy: стартовая расстановка {узел: игрок}
            ansi_color_output: цветной вывод в to_string()

        Raises:
            ConfigurationError: невалидный размер, игрок или расстановка,
                а также расстановка, в которой уже есть победная группа
        """
        self.base_size = validate_base_size(base_size)
        self.ansi_color_output = ansi_color_output
        self._starting_player = _coerce_player(starting_player)

        self._initial_board = BoardState(self.base_size, get_neighbors(self.base_size))
        self._place_starting_occupancy(starting_occupancy or {})

        self._board = self._initial_board.clone()
        self._current_player = self._starting_player
        self._outcome = Player.NONE
        self._moves_made = 0
        self._last_move: Optional[int] = None
        self._history: List[HistoryItem] = []

    def _place_starting_occupancy(self, occupancy: Dict[int, Player]) -> None:
        board = self._initial_board
        stones: Dict[int, Player] = {}
        for node, player in occupancy.items():
            try:
                node = validate_action(node, board.num_cells)
            except IllegalMoveError as e:
                raise ConfigurationError(f"Стартовая расстановка: {e}") from None
            stones[node] = _coerce_player(player)

        for node in sorted(stones):
            board.place(node, stones[node])

        for leader in board.leaders():
            if board.edge[leader] == Edge.ALL:
                raise ConfigurationError(
                    f"Стартовая расстановка уже выиграна игроком {board.owner[leader].name}"
                )

    # --------------------
    # СВОЙСТВА
    # --------------------
    @property
    def board(self) -> BoardState:
        return self._board

    @property
    def num_cells(self) -> int:
        return self._board.num_cells

    @property
    def outcome(self) -> Player:
        """Победитель или Player.NONE пока партия идёт."""
        return self._outcome

    @property
    def moves_made(self) -> int:
        return self._moves_made

    @property
    def last_move(self) -> Optional[int]:
        return self._last_move

    @property
    def starting_player(self) -> Player:
        return self._starting_player

    def current_player(self) -> Player:
        """Кто ходит; Player.NONE если партия окончена."""
        return Player.NONE if self.is_terminal() else self._current_player

    def is_terminal(self) -> bool:
        return self._outcome != Player.NONE

    def history(self) -> List[HistoryItem]:
        """Копия истории ходов: [(игрок, действие), ...]."""
        return list(self._history)

    def history_actions(self) -> List[int]:
        return [action for _, action in self._history]

    def history_str(self) -> str:
        return format_history(self.history_actions())

    # --------------------
    # ХОДЫ
    # --------------------
    def legal_actions(self) -> List[int]:
        """Все пустые клетки по возрастанию; пусто после окончания партии."""
        if self.is_terminal():
            return []
        return [node for node, owner in enumerate(self._board.owner) if owner == Player.NONE]

    def apply_action(self, action: int) -> None:
        """
        Ставит камень текущего игрока в клетку action.

        Raises:
            IllegalMoveError: партия окончена, клетка занята или вне доски
        """
        action = validate_action(action, self.num_cells)
        if self.is_terminal():
            raise IllegalMoveError(f"Партия окончена, ход {action} невозможен")
        if not self._board.is_empty(action):
            raise IllegalMoveError(f"Клетка {action} уже занята")

        player = self._current_player
        self._do_apply_action(action)
        self._history.append((player, action))

    def _do_apply_action(self, action: int) -> None:
        player = self._current_player
        edge = self._board.place(action, player)
        self._moves_made += 1
        self._last_move = action

        if edge == Edge.ALL:
            self._outcome = player
            get_logger().debug(
                f"{player.name} wins on move {self._moves_made} (cell {action}, base_size={self.base_size})"
            )
        else:
            self._current_player = opponent_of(player)

    def undo_action(self) -> HistoryItem:
        """
        Отменяет последний ход: сброс доски и переигрывание истории.

        Returns:
            Отменённый ход (игрок, действие)

        Raises:
            IllegalMoveError: история пуста
        """
        if not self._history:
            raise IllegalMoveError("Нет ходов для отмены")

        undone = self._history.pop()
        self._reset()
        for _, action in self._history:
            self._do_apply_action(action)

        get_logger().debug(f"Undo {undone[1]}: replayed {len(self._history)} moves")
        return undone

    def _reset(self) -> None:
        self._board = self._initial_board.clone()
        self._current_player = self._starting_player
        self._outcome = Player.NONE
        self._moves_made = 0
        self._last_move = None

    # --------------------
    # РЕЗУЛЬТАТ И НАБЛЮДЕНИЯ
    # --------------------
    def returns(self) -> Tuple[float, float]:
        if self._outcome == Player.PLAYER1:
            return (1.0, -1.0)
        if self._outcome == Player.PLAYER2:
            return (-1.0, 1.0)
        return (0.0, 0.0)

    def observation_tensor(self, player: int) -> List[float]:
        """
        Плоский тензор [3, N]: свои камни, камни соперника, пустые клетки.
        """
        player = validate_player(player)
        n = self.num_cells
        values = [0.0] * (CELL_STATES * n)
        for node, owner in enumerate(self._board.owner):
            values[player_relative(owner, player) * n + node] = 1.0
        return values

    def observation_string(self, player: int) -> str:
        validate_player(player)
        return self.to_string()

    def information_state_string(self, player: int) -> str:
        # Игра с полной информацией: достаточно истории ходов
        validate_player(player)
        return self.history_str()

    def action_to_string(self, action: int) -> str:
        return str(action)

    def string_to_action(self, text: str) -> int:
        try:
            action = int(text.strip())
        except ValueError:
            raise IllegalMoveError(f"Не удалось разобрать действие: {text!r}") from None
        return validate_action(action, self.num_cells)

    def to_string(self) -> str:
        return format_cells(self._board.owner, ansi=self.ansi_color_output)

    def clone(self) -> 'GeodesicYState':
        """Независимая копия; список соседей и начальная доска общие."""
        new = GeodesicYState.__new__(GeodesicYState)
        new.base_size = self.base_size
        new.ansi_color_output = self.ansi_color_output
        new._starting_player = self._starting_player
        new._initial_board = self._initial_board
        new._board = self._board.clone()
        new._current_player = self._current_player
        new._outcome = self._outcome
        new._moves_made = self._moves_made
        new._last_move = self._last_move
        new._history = list(self._history)
        return new

    def __str__(self) -> str:
        return self.to_string()

    def __repr__(self) -> str:
        return (
            f"GeodesicYState(base_size={self.base_size}, moves={self._moves_made}, "
            f"outcome={self._outcome.name})"
        )
