"""Базовые структуры графа"""

from .base_edge import Edge
from .graph import Graph
from .graph_io import format_adjacency, load_graph, read_graph, to_triples
from .random_graph import RandomGraphGenerator

__all__ = [
    'Edge',
    'Graph',
    'RandomGraphGenerator',
    'format_adjacency',
    'load_graph',
    'read_graph',
    'to_triples',
]
