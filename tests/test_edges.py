"""
tests/test_edges.py

Тесты классификации узлов по краям доски.
"""

import sys
import os
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

import pytest

from core.edges import classify_edge, edge_masks, edge_nodes
from core.topology import board_size, left_cell, right_cell, top_cell
from core.utils import Edge


def test_base_size_3_masks():
    """Маски всех узлов base_size=3."""
    assert edge_masks(3) == (
        Edge.NONE, Edge.NONE, Edge.NONE,
        Edge.RIGHT | Edge.LEFT,     # 3: верхний угол
        Edge.RIGHT,
        Edge.RIGHT | Edge.BOTTOM,   # 5: правый угол
        Edge.BOTTOM,
        Edge.BOTTOM | Edge.LEFT,    # 7: левый угол
        Edge.LEFT,
    )


def test_base_size_2_corners():
    """На треугольнике каждый узел — угол и лежит на двух краях."""
    assert classify_edge(0, 2) == Edge.RIGHT | Edge.LEFT
    assert classify_edge(1, 2) == Edge.RIGHT | Edge.BOTTOM
    assert classify_edge(2, 2) == Edge.BOTTOM | Edge.LEFT


def test_edge_nodes():
    assert edge_nodes(3, Edge.RIGHT) == [3, 4, 5]
    assert edge_nodes(3, Edge.BOTTOM) == [5, 6, 7]
    assert edge_nodes(3, Edge.LEFT) == [3, 7, 8]
    assert edge_nodes(2, Edge.LEFT) == [0, 2]


@pytest.mark.parametrize("base_size", range(2, 12))
def test_only_outer_ring_touches_edges(base_size):
    """Внутренние узлы не касаются краёв, узлы внешнего кольца — касаются."""
    top = top_cell(base_size)
    for node, mask in enumerate(edge_masks(base_size)):
        if node < top:
            assert mask == Edge.NONE
        else:
            assert mask != Edge.NONE


@pytest.mark.parametrize("base_size", range(2, 12))
def test_corners_have_two_bits(base_size):
    """Ровно три узла лежат на двух краях — углы."""
    two_bit = [
        node for node, mask in enumerate(edge_masks(base_size))
        if bin(int(mask)).count('1') == 2
    ]
    assert two_bit == [top_cell(base_size), right_cell(base_size), left_cell(base_size)]


@pytest.mark.parametrize("base_size", range(3, 12))
def test_arc_lengths(base_size):
    """Каждая дуга содержит base_size узлов."""
    for edge in (Edge.RIGHT, Edge.BOTTOM, Edge.LEFT):
        assert len(edge_nodes(base_size, edge)) == base_size


def test_no_node_touches_all_edges():
    for base_size in range(2, 12):
        assert all(mask != Edge.ALL for mask in edge_masks(base_size))
        assert len(edge_masks(base_size)) == board_size(base_size)
