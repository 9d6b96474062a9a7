"""Взвешенный неориентированный граф на списках смежности"""

import logging
import math
from typing import Iterable, List, Optional, Tuple

from ... import config
from ...errors import (
    GraphParseError,
    InvalidArgumentError,
    NotFoundError,
    VertexOutOfRangeError,
)
from .base_edge import Edge

logger = logging.getLogger(__name__)


class Graph:
    """
    Взвешенный неориентированный граф.

    Вершины представлены плотными индексами [0, V), ребра - объектами Edge.

    Каждое ребро хранится ровно один раз - в списке смежности своей
    начальной вершины (_adj). Дополнительно для каждой вершины ведется
    список инцидентных ребер (_incident), который ссылается на те же
    объекты и позволяет обходить граф в обе стороны.
    """

    def __init__(self, v: Optional[int] = None):
        """
        Инициализация пустого графа.

        Args:
            v: Количество вершин (по умолчанию config.DEFAULT_VERTEX_COUNT)
        """
        if v is None:
            v = config.DEFAULT_VERTEX_COUNT
        if isinstance(v, bool) or not isinstance(v, int):
            raise InvalidArgumentError(f"Количество вершин должно быть целым: {v!r}")
        if v < 0:
            raise InvalidArgumentError(f"Количество вершин не может быть отрицательным: {v}")

        self._v = v  # Количество вершин
        self._e = 0  # Количество ребер
        self._adj: List[List[Edge]] = [[] for _ in range(v)]       # Собственные ребра вершины
        self._incident: List[List[Edge]] = [[] for _ in range(v)]  # Все ребра, касающиеся вершины

    @classmethod
    def from_tokens(cls, tokens: Iterable[str]) -> "Graph":
        """
        Построить граф из последовательности токенов.

        Первый токен - количество вершин, далее тройки (u, v, w).
        Неполная тройка в конце игнорируется.

        Args:
            tokens: Токены входных данных

        Returns:
            Новый граф

        Raises:
            GraphParseError: если токен не является числом
        """
        tokens = list(tokens)
        if not tokens:
            raise GraphParseError("Нет данных: ожидалось количество вершин")

        graph = cls(_parse_number(tokens[0], int, 0))

        body = len(tokens) - 1
        for i in range(1, body - body % 3 + 1, 3):
            u = _parse_number(tokens[i], int, i)
            v = _parse_number(tokens[i + 1], int, i + 1)
            w = _parse_number(tokens[i + 2], float, i + 2)
            graph.add_edge(u, v, w)

        if body % 3:
            logger.warning(
                f"Ignoring {body % 3} trailing token(s) after the last complete triple"
            )

        return graph

    @property
    def v(self) -> int:
        """Количество вершин"""
        return self._v

    @property
    def e(self) -> int:
        """Количество ребер"""
        return self._e

    @property
    def vertex_count(self) -> int:
        return self._v

    @property
    def edge_count(self) -> int:
        return self._e

    def _validate_vertex(self, v: int):
        if isinstance(v, bool) or not isinstance(v, int):
            raise InvalidArgumentError(f"Индекс вершины должен быть целым: {v!r}")
        if not 0 <= v < self._v:
            raise VertexOutOfRangeError(v, self._v)

    def _find(self, x: int, y: int) -> Optional[Edge]:
        for edge in self._incident[x]:
            if edge.joins(x, y):
                return edge
        return None

    def add_edge(self, x: int, y: int, w: float = 0.0) -> bool:
        """
        Добавить ребро x-y, если его еще нет.

        Args:
            x: Вершина-владелец ребра
            y: Вторая вершина
            w: Вес ребра

        Returns:
            True если ребро добавлено, False если оно уже есть или это петля
        """
        self._validate_vertex(x)
        self._validate_vertex(y)
        w = _check_weight(w)

        if x == y:
            logger.debug(f"Rejected self-loop at vertex {x}")
            return False
        if self._find(x, y) is not None:
            return False

        edge = Edge(x, y, w)
        self._adj[x].append(edge)
        self._incident[x].append(edge)
        self._incident[y].append(edge)
        self._e += 1
        return True

    def remove_edge(self, x: int, y: int) -> bool:
        """
        Удалить ребро x-y.

        Returns:
            True если ребро было удалено
        """
        self._validate_vertex(x)
        self._validate_vertex(y)

        edge = self._find(x, y)
        if edge is None:
            return False

        self._adj[edge.start_v].remove(edge)
        self._incident[x].remove(edge)
        self._incident[y].remove(edge)
        self._e -= 1
        return True

    def is_adjacent(self, x: int, y: int) -> bool:
        """Есть ли ребро между вершинами x и y"""
        self._validate_vertex(x)
        self._validate_vertex(y)
        return self._find(x, y) is not None

    def neighbors(self, x: int) -> Tuple[Edge, ...]:
        """
        Получить ребра, исходящие из вершины x (принадлежащие ей).

        Порядок вставки сохраняется.
        """
        self._validate_vertex(x)
        return tuple(self._adj[x])

    def adj(self, v: int) -> Tuple[Edge, ...]:
        """
        Получить все ребра, инцидентные вершине v.

        Args:
            v: Индекс вершины

        Returns:
            Ребра в порядке добавления; другой конец - edge.other(v)
        """
        self._validate_vertex(v)
        return tuple(self._incident[v])

    def degree(self, v: int) -> int:
        """Степень вершины"""
        self._validate_vertex(v)
        return len(self._incident[v])

    def get_edge(self, x: int, y: int) -> Optional[Edge]:
        """Получить ребро x-y или None"""
        self._validate_vertex(x)
        self._validate_vertex(y)
        return self._find(x, y)

    def set_edge_weight(self, x: int, y: int, w: float):
        """Изменить вес существующего ребра x-y"""
        edge = self.get_edge(x, y)
        if edge is None:
            raise NotFoundError(f"Ребро {x}-{y} отсутствует в графе")
        edge.w = _check_weight(w)

    def edges(self) -> List[Edge]:
        """
        Получить все ребра графа.

        Returns:
            Список всех ребер (по вершине-владельцу, затем в порядке добавления)
        """
        all_edges = []
        for v in range(self._v):
            all_edges.extend(self._adj[v])
        return all_edges

    def copy(self) -> "Graph":
        """Глубокая копия графа: ребра копируются по значению"""
        clone = Graph(self._v)
        for edge in self.edges():
            clone.add_edge(edge.start_v, edge.end_v, edge.w)
        return clone

    def __copy__(self):
        return self.copy()

    def __deepcopy__(self, memo):
        return self.copy()

    def __eq__(self, other):
        if not isinstance(other, Graph):
            return NotImplemented
        if self._v != other._v or self._e != other._e:
            return False
        return all(mine == theirs for mine, theirs in zip(self._adj, other._adj))

    __hash__ = None

    def __repr__(self):
        return f"Graph(v={self._v}, e={self._e})"

    def __str__(self):
        from .graph_io import format_adjacency
        return format_adjacency(self)


def _check_weight(w: float) -> float:
    try:
        w = float(w)
    except (TypeError, ValueError):
        raise InvalidArgumentError(f"Вес ребра должен быть числом: {w!r}") from None
    if math.isnan(w):
        raise InvalidArgumentError("Вес ребра не может быть NaN")
    return w


def _parse_number(token: str, kind, position: int):
    try:
        return kind(token)
    except (TypeError, ValueError):
        raise GraphParseError(
            f"Некорректное число: {token!r}", position
        ) from None
