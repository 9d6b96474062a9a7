"""Минимальный остовный лес: алгоритм Прима"""

import logging
from typing import List, Optional

from ..graph.base_edge import Edge
from ..graph.graph import Graph
from ..queue.indexed_min_pq import IndexedMinPQ
from ...errors import InvalidArgumentError, VertexOutOfRangeError

logger = logging.getLogger(__name__)


class PrimMST:
    """
    Алгоритм Прима для построения минимального остовного леса
    взвешенного неориентированного графа.

    Дерево строится отдельно для каждой компоненты связности,
    поэтому для несвязного графа результатом будет лес.
    Граф не должен изменяться во время вычисления: результат
    ссылается на ребра, хранящиеся в графе.
    """

    def __init__(self, graph: Graph):
        """
        Инициализация и выполнение алгоритма Прима.

        Args:
            graph: Граф
        """
        self._graph = graph

        # edge_to[v] - кратчайшее ребро от дерева к вершине v
        self._edge_to: List[Optional[Edge]] = [None] * graph.v
        # dist_to[v] - вес этого ребра
        self._dist_to: List[float] = [float('inf')] * graph.v
        # marked[v] - вершина уже в дереве
        self._marked: List[bool] = [False] * graph.v
        self._roots: List[int] = []
        self._pq: IndexedMinPQ[int] = IndexedMinPQ()

        # Запуск из каждой непосещенной вершины дает лес
        for v in range(graph.v):
            if not self._marked[v]:
                self._prim(v)

        logger.info(
            f"Prim MST: {len(self._roots)} component(s), "
            f"{len(self.edges())} edges, total weight {self.total_weight():.4f}"
        )

    def _prim(self, s: int):
        """Вырастить дерево компоненты, содержащей вершину s"""
        self._roots.append(s)
        self._dist_to[s] = 0.0
        self._pq.push(s, 0.0)

        while not self._pq.is_empty():
            v = self._pq.pop_min()
            self._scan(v)

        logger.debug(f"Finished component rooted at {s}")

    def _scan(self, v: int):
        """Добавить v в дерево и ослабить ребра к соседям"""
        self._marked[v] = True

        for edge in self._graph.adj(v):
            w = edge.other(v)
            if self._marked[w]:
                continue  # Ребро v-w устарело

            if edge.w < self._dist_to[w]:
                self._dist_to[w] = edge.w
                self._edge_to[w] = edge
                if self._pq.contains(w):
                    self._pq.decrease_priority(w, edge.w)
                else:
                    self._pq.push(w, edge.w)

    def _validate_vertex(self, v: int):
        if isinstance(v, bool) or not isinstance(v, int):
            raise InvalidArgumentError(f"Индекс вершины должен быть целым: {v!r}")
        if not 0 <= v < self._graph.v:
            raise VertexOutOfRangeError(v, self._graph.v)

    def edges(self) -> List[Edge]:
        """
        Ребра минимального остовного леса.

        Returns:
            Ребра edge_to[v] в порядке номеров вершин
        """
        return [edge for edge in self._edge_to if edge is not None]

    def total_weight(self) -> float:
        """Суммарный вес ребер леса"""
        return sum((edge.w for edge in self.edges()), 0.0)

    @property
    def weight(self) -> float:
        return self.total_weight()

    def dist_to(self, v: int) -> float:
        """Вес ребра, которым вершина v присоединена к дереву"""
        self._validate_vertex(v)
        return self._dist_to[v]

    def edge_to(self, v: int) -> Optional[Edge]:
        """Ребро, которым вершина v присоединена к дереву (None для корня)"""
        self._validate_vertex(v)
        return self._edge_to[v]

    def in_tree(self, v: int) -> bool:
        self._validate_vertex(v)
        return self._marked[v]

    def roots(self) -> List[int]:
        """Корни деревьев леса, по одному на компоненту связности"""
        return list(self._roots)

    def component_count(self) -> int:
        return len(self._roots)
