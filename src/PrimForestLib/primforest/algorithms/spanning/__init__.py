"""Алгоритмы построения остовных деревьев"""

from .prim_mst import PrimMST

__all__ = ['PrimMST']
