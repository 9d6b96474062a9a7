"""Модуль алгоритмов - граф, очередь с приоритетами, остовный лес"""

from . import graph
from . import queue
from . import spanning

__all__ = ['graph', 'queue', 'spanning']
