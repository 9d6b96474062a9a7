"""Генерация случайных графов методом Монте-Карло"""

import logging
import random
from typing import Optional

from ... import config
from ...errors import InvalidArgumentError
from .graph import Graph

logger = logging.getLogger(__name__)


class RandomGraphGenerator:
    """
    Генератор случайных неориентированных графов.

    Пары вершин выбираются случайно, пока количество ребер не достигнет
    density * V(V-1)/2. Петли и уже существующие пары пропускаются.
    Вес ребра равномерно распределен на [min_weight, max_weight].
    """

    def __init__(
        self,
        min_weight: float = config.DEFAULT_MIN_WEIGHT,
        max_weight: float = config.DEFAULT_MAX_WEIGHT,
        rng: Optional[random.Random] = None,
        seed: Optional[int] = None
    ):
        """
        Инициализация генератора.

        Args:
            min_weight: Нижняя граница веса ребра
            max_weight: Верхняя граница веса ребра
            rng: Генератор случайных чисел (имеет приоритет над seed)
            seed: Seed для нового генератора
        """
        if min_weight > max_weight:
            raise InvalidArgumentError(
                f"Нижняя граница веса больше верхней: {min_weight} > {max_weight}"
            )
        self._min_weight = min_weight
        self._max_weight = max_weight
        self._random = rng if rng is not None else random.Random(seed)

    @staticmethod
    def edge_limit(v: int, density: float) -> int:
        """Целевое количество ребер для графа с v вершинами"""
        if not 0.0 <= density <= 1.0:
            raise InvalidArgumentError(f"Плотность должна быть в [0, 1]: {density}")
        max_edges = v * (v - 1) // 2  # Полный граф
        return int(density * max_edges)

    def fill(self, graph: Graph, density: float) -> int:
        """
        Добавить в граф случайные ребра до достижения плотности.

        Args:
            graph: Заполняемый граф
            density: Плотность графа (0-1)

        Returns:
            Количество добавленных ребер
        """
        limit = self.edge_limit(graph.v, density)
        added = 0

        while graph.e < limit:
            x = self._random.randrange(graph.v)
            y = self._random.randrange(graph.v)

            if x == y or graph.is_adjacent(x, y):
                continue  # Пробуем другую пару

            w = self._random.uniform(self._min_weight, self._max_weight)
            graph.add_edge(x, y, w)
            added += 1

        logger.info(f"Random fill: added {added} edges (limit {limit}, density {density})")
        return added

    def generate(self, v: int, density: float = config.DEFAULT_DENSITY) -> Graph:
        """Создать новый случайный граф с v вершинами"""
        graph = Graph(v)
        self.fill(graph, density)
        return graph
