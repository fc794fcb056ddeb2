"""
core/board.py

Состояние доски: владельцы клеток и группы камней.

Группы хранятся в union-find структуре из параллельных массивов.
size и edge валидны только для лидера группы — всегда сначала
находите лидера через find_group_leader().
"""

from typing import Dict, List, Optional

from .edges import edge_masks
from .fast import find_leader, join_groups
from .topology import Neighbors, board_size, get_neighbors
from .utils import Edge, Player


class BoardState:
    """
    Клетки одной партии.

    Список соседей общий для всех досок одного размера и не копируется
    при clone().
    """
    __slots__ = ('base_size', 'neighbors', 'owner', 'parent', 'size', 'edge')

    def __init__(self, base_size: int, neighbors: Optional[Neighbors] = None):
        self.base_size = base_size
        self.neighbors = neighbors if neighbors is not None else get_neighbors(base_size)
        self.owner: List[Player] = []
        self.parent: List[int] = []
        self.size: List[int] = []
        self.edge: List[int] = []
        self.reset()

    @property
    def num_cells(self) -> int:
        return len(self.neighbors)

    def reset(self) -> None:
        """Пустая доска: каждая клетка — отдельная группа со своей маской краёв."""
        n = board_size(self.base_size)
        self.owner = [Player.NONE] * n
        self.parent = list(range(n))
        self.size = [1] * n
        self.edge = [int(mask) for mask in edge_masks(self.base_size)]

    def clone(self) -> 'BoardState':
        new = BoardState.__new__(BoardState)
        new.base_size = self.base_size
        new.neighbors = self.neighbors
        new.owner = self.owner[:]
        new.parent = self.parent[:]
        new.size = self.size[:]
        new.edge = self.edge[:]
        return new

    # --------------------
    # UNION-FIND
    # --------------------
    def find_group_leader(self, node: int) -> int:
        return find_leader(self.parent, node)

    def join_groups(self, node_a: int, node_b: int) -> bool:
        """Объединяет группы. True — если они уже были одной группой."""
        return join_groups(self.parent, self.size, self.edge, node_a, node_b)

    def group_edge(self, node: int) -> Edge:
        return Edge(self.edge[self.find_group_leader(node)])

    def group_size(self, node: int) -> int:
        return self.size[self.find_group_leader(node)]

    # --------------------
    # КАМНИ
    # --------------------
    def place(self, node: int, player: Player) -> Edge:
        """
        Ставит камень и сливает его с соседними камнями того же игрока.

        Проверка, что клетка пуста, — на вызывающей стороне.

        Returns:
            Маска краёв получившейся группы
        """
        self.owner[node] = player
        for nbr in self.neighbors[node]:
            if self.owner[nbr] == player:
                self.join_groups(node, nbr)
        return self.group_edge(node)

    def is_empty(self, node: int) -> bool:
        return self.owner[node] == Player.NONE

    def cells_of(self, player: Player) -> List[int]:
        return [node for node, owner in enumerate(self.owner) if owner == player]

    def occupied_count(self) -> int:
        return sum(1 for owner in self.owner if owner != Player.NONE)

    def leaders(self) -> List[int]:
        """Лидеры групп из занятых клеток."""
        return [
            node for node, owner in enumerate(self.owner)
            if owner != Player.NONE and self.parent[node] == node
        ]

    def groups(self) -> Dict[int, List[int]]:
        """Разбиение занятых клеток на группы: лидер -> узлы."""
        result: Dict[int, List[int]] = {}
        for node, owner in enumerate(self.owner):
            if owner != Player.NONE:
                result.setdefault(self.find_group_leader(node), []).append(node)
        return result

    def same_structure(self, other: 'BoardState') -> bool:
        """Одинаковые владельцы и одинаковое разбиение на группы."""
        if self.base_size != other.base_size or self.owner != other.owner:
            return False
        mine = sorted(sorted(nodes) for nodes in self.groups().values())
        theirs = sorted(sorted(nodes) for nodes in other.groups().values())
        return mine == theirs

    def __repr__(self) -> str:
        return f"BoardState(base_size={self.base_size}, stones={self.occupied_count()})"
