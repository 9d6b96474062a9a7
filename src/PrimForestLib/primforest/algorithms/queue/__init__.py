"""Очереди с приоритетами"""

from .indexed_min_pq import IndexedMinPQ

__all__ = ['IndexedMinPQ']
