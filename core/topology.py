"""
core/topology.py

Генератор графа соседства геодезической доски Y.

Доска состоит из концентрических треугольных колец. Кольцо r занимает
индексы [board_size(r-1), board_size(r)); самое внутреннее кольцо (r=2) —
треугольник из узлов 0, 1, 2. Индекс кольца совпадает с base_size доски,
для которой это кольцо внешнее.

Каждое кольцо обходится по часовой стрелке начиная с верхнего угла:
top → right → left → last → (снова top).
"""

import threading
from typing import Dict, List, Tuple

from utils.error_handling import InternalInvariantError, validate_base_size
from utils.logging import get_logger

Neighbors = Tuple[Tuple[int, ...], ...]


def board_size(base_size: int) -> int:
    """Количество узлов доски: 3·b·(b-1)/2."""
    return 3 * base_size * (base_size - 1) // 2


def top_cell(base_size: int) -> int:
    # Первый узел внешнего кольца равен размеру доски base_size - 1.
    # Работает и для base_size == 2, где внутренняя доска пуста.
    return board_size(base_size - 1)


def right_cell(base_size: int) -> int:
    return top_cell(base_size) + base_size - 1


def left_cell(base_size: int) -> int:
    return right_cell(base_size) + base_size - 1


def ring_of(node: int) -> int:
    """Индекс кольца, которому принадлежит узел (внутренний треугольник — 2)."""
    if node < 0:
        raise ValueError(f"Отрицательный узел: {node}")
    ring = 2
    while node >= board_size(ring):
        ring += 1
    return ring


def ring_nodes(ring: int) -> range:
    """Индексы узлов кольца ring."""
    return range(top_cell(ring), board_size(ring))


def _inward_links(cell: int, ring: int) -> List[int]:
    """
    Соседи узла cell в кольце на уровень глубже.

    Угловые узлы соединены с одним углом внутреннего кольца, остальные —
    с двумя узлами, между которыми они лежат. Последний узел кольца
    замыкается на верхний угол внутреннего кольца.
    """
    top = top_cell(ring)
    right = right_cell(ring)
    left = left_cell(ring)
    last = board_size(ring) - 1

    top_below = top_cell(ring - 1)
    right_below = right_cell(ring - 1)
    left_below = left_cell(ring - 1)

    if cell == top:
        return [top_below]
    elif top < cell < right:
        nhbr = top_below + cell - top
        return [nhbr - 1, nhbr]
    elif cell == right:
        return [right_below]
    elif right < cell < left:
        nhbr = right_below + cell - right
        return [nhbr - 1, nhbr]
    elif cell == left:
        return [left_below]
    elif left < cell < last:
        nhbr = left_below + cell - left
        return [nhbr - 1, nhbr]
    elif cell == last:
        nhbr = left_below + cell - left
        return [nhbr - 1, top_below]

    raise InternalInvariantError(f"Узел {cell} не принадлежит кольцу {ring}")


def generate_neighbors(base_size: int) -> Neighbors:
    """
    Строит список соседей для доски с основанием base_size.

    Args:
        base_size: размер основания (>= 2)

    Returns:
        Кортеж отсортированных кортежей соседей, индекс — номер узла

    Raises:
        ConfigurationError: если base_size < 2
    """
    base_size = validate_base_size(base_size)
    size = board_size(base_size)

    links: List[List[int]] = [[] for _ in range(size)]

    # Внутренний треугольник
    links[0].append(1)
    links[1].append(2)
    links[2].append(0)

    # Для base_size == 2 цикл пропускается
    for ring in range(3, base_size + 1):
        top = top_cell(ring)
        last = board_size(ring) - 1

        for cell in range(top, last + 1):
            # Следующий узел по часовой стрелке
            links[cell].append(top if cell == last else cell + 1)
            links[cell].extend(_inward_links(cell, ring))

    # Делаем граф симметричным
    symmetric: List[set] = [set(nbrs) for nbrs in links]
    for node, nbrs in enumerate(links):
        for other in nbrs:
            symmetric[other].add(node)

    return tuple(tuple(sorted(nbrs)) for nbrs in symmetric)


class NeighborCache:
    """
    Кэш списков соседей по base_size.

    Каждый размер строится не более одного раза; результат неизменяем и
    разделяется между всеми партиями. Первое построение защищено блокировкой.
    """

    def __init__(self):
        self._lists: Dict[int, Neighbors] = {}
        self._lock = threading.Lock()

    def get(self, base_size: int) -> Neighbors:
        neighbors = self._lists.get(base_size)
        if neighbors is not None:
            return neighbors

        with self._lock:
            neighbors = self._lists.get(base_size)
            if neighbors is None:
                neighbors = generate_neighbors(base_size)
                self._lists[base_size] = neighbors
                get_logger().debug(
                    f"Topology generated: base_size={base_size}, nodes={len(neighbors)}"
                )
        return neighbors

    def clear(self) -> None:
        with self._lock:
            self._lists.clear()

    def __contains__(self, base_size: int) -> bool:
        return base_size in self._lists

    def __len__(self) -> int:
        return len(self._lists)


# Общий кэш процесса
NEIGHBOR_CACHE = NeighborCache()


def get_neighbors(base_size: int) -> Neighbors:
    """Список соседей из общего кэша."""
    return NEIGHBOR_CACHE.get(base_size)
