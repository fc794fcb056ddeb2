"""
core/game.py

Игра Geodesic Y: параметры, метаданные и функциональный интерфейс
для внешних драйверов (поиск, арены, хост-фреймворки).

Правило пирога (pie rule) не реализовано.
"""

from dataclasses import dataclass, field, fields, replace
from typing import Any, Dict, List, Optional, Tuple, Union

from utils.error_handling import ConfigurationError, validate_base_size
from y_io.parser import format_occupancy, parse_game_string, parse_occupancy, parse_player

from .state import GeodesicYState
from .topology import board_size
from .utils import CELL_STATES, DEFAULT_BASE_SIZE, NUM_PLAYERS, Player

GAME_SHORT_NAME = "geodesic_y"
GAME_LONG_NAME = "Geodesic Y Connection Game"


@dataclass
class GameParams:
    """Параметры игры."""
    base_size: int = DEFAULT_BASE_SIZE
    ansi_color_output: bool = False
    starting_player: Player = Player.PLAYER1
    starting_occupancy: Optional[Dict[int, Player]] = field(default=None)

    def validate(self) -> 'GameParams':
        """
        Проверяет и нормализует параметры.

        Строковая расстановка ("p1=0,4 p2=7") разбирается в словарь.

        Raises:
            ConfigurationError: невалидные параметры
        """
        self.base_size = validate_base_size(self.base_size)
        if not isinstance(self.ansi_color_output, bool):
            raise ConfigurationError(
                f"ansi_color_output должен быть bool, получено {self.ansi_color_output!r}"
            )
        self.starting_player = parse_player(self.starting_player)

        if isinstance(self.starting_occupancy, str):
            self.starting_occupancy = parse_occupancy(self.starting_occupancy, self.base_size)
        elif self.starting_occupancy is not None:
            self.starting_occupancy = {
                node: parse_player(player) for node, player in self.starting_occupancy.items()
            }
        return self

    @classmethod
    def from_dict(cls, params: Dict[str, Any]) -> 'GameParams':
        known = {f.name for f in fields(cls)}
        unknown = set(params) - known
        if unknown:
            raise ConfigurationError(f"Неизвестные параметры: {', '.join(sorted(unknown))}")
        return cls(**params).validate()

    def to_string(self) -> str:
        """
        Строка игры: geodesic_y(base_size=3,ansi_color_output=False,...).

        Вызывается на проверенных параметрах (расстановка уже словарь).
        """
        parts = [
            f"base_size={self.base_size}",
            f"ansi_color_output={self.ansi_color_output}",
        ]
        if self.starting_player != Player.PLAYER1:
            parts.append(f"starting_player=p{int(self.starting_player) + 1}")
        if self.starting_occupancy:
            parts.append(f"starting_occupancy={format_occupancy(self.starting_occupancy)}")
        return f"{GAME_SHORT_NAME}({','.join(parts)})"


class GeodesicYGame:
    """
    Фабрика состояний и метаданные игры.

    Список соседей разделяется всеми состояниями одного размера.
    """

    short_name = GAME_SHORT_NAME
    long_name = GAME_LONG_NAME

    def __init__(self, params: Optional[GameParams] = None):
        # Копия: параметры вызывающего не меняются
        self.params = replace(params or GameParams()).validate()
        # Стартовая расстановка проверяется сразу при создании игры
        self.new_initial_state()

    @property
    def base_size(self) -> int:
        return self.params.base_size

    def new_initial_state(self) -> GeodesicYState:
        return GeodesicYState(
            self.params.base_size,
            starting_player=self.params.starting_player,
            starting_occupancy=self.params.starting_occupancy,
            ansi_color_output=self.params.ansi_color_output,
        )

    def num_distinct_actions(self) -> int:
        return board_size(self.base_size)

    def num_players(self) -> int:
        return NUM_PLAYERS

    def min_utility(self) -> float:
        return -1.0

    def max_utility(self) -> float:
        return 1.0

    def utility_sum(self) -> float:
        return 0.0

    def observation_tensor_shape(self) -> List[int]:
        return [CELL_STATES, board_size(self.base_size)]

    def max_game_length(self) -> int:
        # Камни не снимаются, кто-то обязательно победит до заполнения доски
        return board_size(self.base_size)

    def __str__(self) -> str:
        return self.params.to_string()

    def __repr__(self) -> str:
        return f"GeodesicYGame({self.params.to_string()})"


def load_game(spec: Union[str, Dict[str, Any], GameParams, None] = None) -> GeodesicYGame:
    """
    Создаёт игру из строки, словаря или GameParams.

    Примеры:
        load_game("geodesic_y")
        load_game("geodesic_y(base_size=9,ansi_color_output=True)")
        load_game({"base_size": 5})

    Raises:
        ConfigurationError: неизвестная игра или невалидные параметры
    """
    if spec is None:
        return GeodesicYGame()
    if isinstance(spec, GameParams):
        return GeodesicYGame(spec)
    if isinstance(spec, dict):
        return GeodesicYGame(GameParams.from_dict(spec))

    name, params = parse_game_string(spec)
    if name != GAME_SHORT_NAME:
        raise ConfigurationError(f"Неизвестная игра: {name!r}")
    return GeodesicYGame(GameParams.from_dict(params))


# --------------------
# ФУНКЦИОНАЛЬНЫЙ ИНТЕРФЕЙС
# --------------------
def new_game(base_size: int = DEFAULT_BASE_SIZE, starting_player: Any = Player.PLAYER1,
             starting_occupancy: Union[str, Dict[int, Any], None] = None,
             ansi_color_output: bool = False) -> GeodesicYState:
    """Новая партия с заданными параметрами."""
    params = GameParams(
        base_size=base_size,
        ansi_color_output=ansi_color_output,
        starting_player=starting_player,
        starting_occupancy=starting_occupancy,
    )
    return GeodesicYGame(params).new_initial_state()


def legal_actions(state: GeodesicYState) -> List[int]:
    return state.legal_actions()


def apply_action(state: GeodesicYState, action: int) -> GeodesicYState:
    """Применяет ход на месте и возвращает то же состояние."""
    state.apply_action(action)
    return state


def undo(state: GeodesicYState) -> GeodesicYState:
    state.undo_action()
    return state


def is_terminal(state: GeodesicYState) -> bool:
    return state.is_terminal()


def returns(state: GeodesicYState) -> Tuple[float, float]:
    return state.returns()


def observation_tensor(state: GeodesicYState, player: int) -> List[float]:
    return state.observation_tensor(player)


def to_display_string(state: GeodesicYState) -> str:
    return state.to_string()
