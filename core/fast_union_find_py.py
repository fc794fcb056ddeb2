"""
core/fast_union_find_py.py

Чистая Python версия операций union-find.
Используется если Cython не доступен.

Для максимальной производительности установите Cython:
    pip install cython
    python setup.py build_ext --inplace
"""

from typing import List


def find_leader(parent: List[int], node: int) -> int:
    """
    Лидер группы узла node.

    Сжатие пути только для самого node, без рекурсии.
    """
    leader = parent[node]
    if leader != node:
        while leader != parent[leader]:
            leader = parent[leader]
        parent[node] = leader
    return leader


def join_groups(parent: List[int], size: List[int], edge: List[int],
                node_a: int, node_b: int) -> bool:
    """
    Объединяет группы node_a и node_b (union by size).

    Returns:
        True если узлы уже были в одной группе, иначе False
    """
    leader_a = find_leader(parent, node_a)
    leader_b = find_leader(parent, node_b)

    if leader_a == leader_b:
        return True

    # Группа a не меньше группы b
    if size[leader_a] < size[leader_b]:
        leader_a, leader_b = leader_b, leader_a

    parent[leader_b] = leader_a
    size[leader_a] += size[leader_b]
    edge[leader_a] |= edge[leader_b]
    return False
