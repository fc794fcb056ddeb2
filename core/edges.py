"""
core/edges.py

Классификация узлов по краям доски.

Внешнее кольцо делится тремя углами (top, right, left) на дуги
"правую" [top, right], "нижнюю" [right, left] и "левую" [left, N) ∪ {top}.
Углы лежат сразу на двух дугах. Внутренние узлы не касаются краёв.
"""

from functools import lru_cache
from typing import List, Tuple

from .topology import board_size, top_cell, right_cell, left_cell
from .utils import Edge


def classify_edge(node: int, base_size: int) -> Edge:
    """
    Собственная маска краёв узла.

    Args:
        node: индекс узла
        base_size: размер основания доски

    Returns:
        Edge (комбинация RIGHT / BOTTOM / LEFT)
    """
    top = top_cell(base_size)
    right = right_cell(base_size)
    left = left_cell(base_size)

    edge = Edge.NONE
    if top <= node <= right:
        edge |= Edge.RIGHT
    if right <= node <= left:
        edge |= Edge.BOTTOM
    if left <= node or node == top:
        edge |= Edge.LEFT
    return edge


@lru_cache(maxsize=None)
def edge_masks(base_size: int) -> Tuple[Edge, ...]:
    """Маски всех узлов доски; считаются один раз на размер."""
    return tuple(classify_edge(node, base_size) for node in range(board_size(base_size)))


def edge_nodes(base_size: int, edge: Edge) -> List[int]:
    """Узлы, лежащие на крае edge."""
    return [node for node, mask in enumerate(edge_masks(base_size)) if mask & edge]
