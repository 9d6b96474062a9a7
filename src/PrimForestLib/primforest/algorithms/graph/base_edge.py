"""Ребро неориентированного взвешенного графа"""

from ...errors import InvalidArgumentError


class Edge:
    """
    Ребро взвешенного графа.

    Ребро соединяет две вершины (start_v и end_v) и имеет вес (w).
    Равенство ребер определяется только парой вершин, вес не учитывается.
    """

    __slots__ = ("start_v", "end_v", "w")

    def __init__(self, start_v: int = 0, end_v: int = 0, w: float = 0.0):
        self.start_v = start_v  # Вершина-владелец ребра
        self.end_v = end_v      # Вторая вершина
        self.w = float(w)       # Вес ребра

    def either(self) -> int:
        """Получить одну из вершин ребра (начальную)"""
        return self.start_v

    def other(self, vertex: int) -> int:
        """
        Получить другую вершину ребра.

        Args:
            vertex: Одна из вершин ребра

        Returns:
            Другая вершина

        Raises:
            InvalidArgumentError: если vertex не является концом ребра
        """
        if vertex == self.start_v:
            return self.end_v
        elif vertex == self.end_v:
            return self.start_v
        else:
            raise InvalidArgumentError(
                f"Вершина {vertex} не принадлежит ребру {self.start_v}-{self.end_v}"
            )

    def joins(self, x: int, y: int) -> bool:
        """Соединяет ли ребро вершины x и y (в любом направлении)"""
        return (
            (self.start_v == x and self.end_v == y)
            or (self.start_v == y and self.end_v == x)
        )

    def as_triple(self):
        """Ребро в виде тройки (u, v, w)"""
        return (self.start_v, self.end_v, self.w)

    def __repr__(self):
        return f"Edge({self.start_v} - {self.end_v}, w={self.w:.2f})"

    def __eq__(self, other):
        if not isinstance(other, Edge):
            return NotImplemented
        return self.start_v == other.start_v and self.end_v == other.end_v

    def __hash__(self):
        return hash((self.start_v, self.end_v))
