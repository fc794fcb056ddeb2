"""
core - Ядро Geodesic Y

Топология доски, классификация краёв, union-find и игровое состояние.
Игра и функциональный интерфейс — в core.game.
"""

from .utils import Player, Edge, NUM_PLAYERS, CELL_STATES, DEFAULT_BASE_SIZE, opponent_of
from .topology import (
    board_size, top_cell, right_cell, left_cell, ring_of, ring_nodes,
    generate_neighbors, get_neighbors, NeighborCache, NEIGHBOR_CACHE
)
from .edges import classify_edge, edge_masks, edge_nodes
from .fast import USING_CYTHON, get_implementation_info
from .board import BoardState
from .state import GeodesicYState

__all__ = [
    'Player', 'Edge', 'NUM_PLAYERS', 'CELL_STATES', 'DEFAULT_BASE_SIZE', 'opponent_of',
    'board_size', 'top_cell', 'right_cell', 'left_cell', 'ring_of', 'ring_nodes',
    'generate_neighbors', 'get_neighbors', 'NeighborCache', 'NEIGHBOR_CACHE',
    'classify_edge', 'edge_masks', 'edge_nodes',
    'USING_CYTHON', 'get_implementation_info',
    'BoardState', 'GeodesicYState'
]
