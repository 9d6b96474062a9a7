"""primforest - минимальный остовный лес алгоритмом Прима"""

from .algorithms.graph import Edge, Graph, RandomGraphGenerator, read_graph
from .algorithms.queue import IndexedMinPQ
from .algorithms.spanning import PrimMST
from .errors import (
    DuplicateKeyError,
    EmptyQueueError,
    GraphParseError,
    InvalidArgumentError,
    NotFoundError,
    PrimForestError,
    SourceNotFoundError,
    SourceReadError,
    VertexOutOfRangeError,
)

__version__ = "1.0.0"

__all__ = [
    'Edge',
    'Graph',
    'IndexedMinPQ',
    'PrimMST',
    'RandomGraphGenerator',
    'read_graph',
    'PrimForestError',
    'VertexOutOfRangeError',
    'InvalidArgumentError',
    'DuplicateKeyError',
    'NotFoundError',
    'SourceNotFoundError',
    'SourceReadError',
    'EmptyQueueError',
    'GraphParseError',
]
