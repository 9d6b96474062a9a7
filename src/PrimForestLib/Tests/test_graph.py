"""
Тесты графа и ребра.

Тестируются:
- Edge - равенство, other(), either()
- Graph - добавление/удаление ребер, смежность, степень, копирование, равенство
"""

import copy

import pytest

from primforest.algorithms.graph.base_edge import Edge
from primforest.algorithms.graph.graph import Graph
from primforest.errors import (
    GraphParseError,
    InvalidArgumentError,
    NotFoundError,
    VertexOutOfRangeError,
)


# ==================== Тесты Edge ====================

class TestEdge:
    """Тесты ребра"""

    def test_other_returns_opposite_endpoint(self):
        edge = Edge(0, 3, 1.5)
        assert edge.other(0) == 3
        assert edge.other(3) == 0
        assert edge.either() == 0

    def test_other_with_foreign_vertex_raises(self):
        """other(2) для ребра (0,3) - ошибка"""
        with pytest.raises(InvalidArgumentError):
            Edge(0, 3).other(2)

    def test_equality_ignores_weight(self):
        assert Edge(1, 2, 5.0) == Edge(1, 2, 7.0)
        assert hash(Edge(1, 2, 5.0)) == hash(Edge(1, 2, 7.0))
        assert Edge(1, 2) != Edge(2, 1)

    def test_default_weight_is_zero(self):
        assert Edge(1, 2).w == 0.0


# ==================== Тесты Graph ====================

class TestGraphConstruction:
    """Создание графа"""

    def test_empty_graph(self):
        graph = Graph(5)
        assert graph.v == 5
        assert graph.e == 0
        assert graph.vertex_count == 5
        assert graph.edge_count == 0
        assert graph.edges() == []

    def test_default_vertex_count(self):
        assert Graph().v == 50

    def test_zero_vertices(self):
        graph = Graph(0)
        assert graph.v == 0
        assert graph.edges() == []

    def test_negative_vertex_count_raises(self):
        with pytest.raises(InvalidArgumentError):
            Graph(-1)

    def test_non_integer_vertex_count_raises(self):
        with pytest.raises(InvalidArgumentError):
            Graph(2.5)

    def test_from_tokens(self):
        graph = Graph.from_tokens(["3", "0", "1", "1.5", "1", "2", "2"])
        assert graph.v == 3
        assert graph.e == 2
        assert graph.get_edge(0, 1).w == 1.5

    def test_from_tokens_ignores_incomplete_triple(self):
        graph = Graph.from_tokens(["3", "0", "1", "1.5", "1", "2"])
        assert graph.e == 1

    def test_from_tokens_bad_number(self):
        with pytest.raises(GraphParseError):
            Graph.from_tokens(["3", "0", "x", "1.5"])

    def test_from_tokens_bad_vertex_count(self):
        with pytest.raises(GraphParseError):
            Graph.from_tokens(["three"])

    def test_from_tokens_empty(self):
        with pytest.raises(GraphParseError):
            Graph.from_tokens([])

    def test_from_tokens_out_of_range_vertex(self):
        with pytest.raises(VertexOutOfRangeError):
            Graph.from_tokens(["2", "0", "5", "1"])


class TestGraphEdges:
    """Добавление и удаление ребер"""

    def test_add_edge(self):
        graph = Graph(3)
        assert graph.add_edge(0, 1, 2.0)
        assert graph.e == 1
        assert graph.is_adjacent(0, 1)
        assert graph.is_adjacent(1, 0)

    def test_add_duplicate_edge_fails(self):
        graph = Graph(3)
        assert graph.add_edge(0, 1, 2.0)
        assert not graph.add_edge(0, 1, 9.0)
        assert not graph.add_edge(1, 0, 9.0)
        assert graph.e == 1
        assert graph.get_edge(0, 1).w == 2.0

    def test_self_loop_rejected(self):
        graph = Graph(3)
        assert not graph.add_edge(1, 1, 1.0)
        assert graph.e == 0
        assert graph.degree(1) == 0

    def test_out_of_range_vertex(self):
        graph = Graph(3)
        with pytest.raises(VertexOutOfRangeError):
            graph.add_edge(0, 3)
        with pytest.raises(VertexOutOfRangeError):
            graph.add_edge(-1, 0)
        with pytest.raises(VertexOutOfRangeError):
            graph.neighbors(7)
        with pytest.raises(IndexError):
            graph.degree(3)

    def test_add_then_remove_restores_state(self):
        """add_edge + remove_edge возвращает граф в исходное состояние"""
        graph = Graph(4)
        graph.add_edge(0, 1, 1.0)
        before = graph.e

        assert graph.add_edge(2, 3, 5.0)
        assert graph.remove_edge(2, 3)

        assert graph.e == before
        assert not graph.is_adjacent(2, 3)
        assert graph.degree(2) == 0
        assert graph.degree(3) == 0

    def test_remove_either_orientation(self):
        graph = Graph(3)
        graph.add_edge(0, 1)
        assert graph.remove_edge(1, 0)
        assert graph.e == 0
        assert graph.neighbors(0) == ()

    def test_remove_missing_edge(self):
        graph = Graph(3)
        assert not graph.remove_edge(0, 1)
        assert graph.e == 0

    def test_negative_and_zero_weights(self):
        graph = Graph(3)
        assert graph.add_edge(0, 1, -2.0)
        assert graph.add_edge(1, 2)
        assert graph.get_edge(1, 0).w == -2.0
        assert graph.get_edge(1, 2).w == 0.0


class TestGraphQueries:
    """Запросы к графу"""

    def test_neighbors_preserve_insertion_order(self, square_graph):
        ends = [edge.end_v for edge in square_graph.neighbors(0)]
        assert ends == [1, 2]

    def test_neighbors_are_owned_edges(self, square_graph):
        for v in range(square_graph.v):
            assert all(edge.start_v == v for edge in square_graph.neighbors(v))

    def test_neighbors_is_read_only(self, square_graph):
        neighbors = square_graph.neighbors(0)
        assert isinstance(neighbors, tuple)

    def test_adj_lists_all_incident_edges(self, square_graph):
        others = sorted(edge.other(2) for edge in square_graph.adj(2))
        assert others == [0, 1, 3]

    def test_degree(self, square_graph):
        assert square_graph.degree(0) == 2
        assert square_graph.degree(2) == 3
        assert square_graph.degree(3) == 1

    def test_edges_count_matches(self, square_graph):
        assert len(square_graph.edges()) == square_graph.e == 4

    def test_get_edge_missing(self, square_graph):
        assert square_graph.get_edge(0, 3) is None

    def test_set_edge_weight(self, square_graph):
        square_graph.set_edge_weight(3, 2, 0.5)
        assert square_graph.get_edge(2, 3).w == 0.5

    def test_set_edge_weight_missing(self, square_graph):
        with pytest.raises(NotFoundError):
            square_graph.set_edge_weight(0, 3, 1.0)

    def test_repr(self, square_graph):
        assert repr(square_graph) == "Graph(v=4, e=4)"


class TestGraphEqualityAndCopy:
    """Структурное равенство и копирование"""

    def test_equal_graphs(self, square_graph):
        other = Graph(4)
        other.add_edge(0, 1, 1.0)
        other.add_edge(1, 2, 2.0)
        other.add_edge(0, 2, 3.0)
        other.add_edge(2, 3, 4.0)
        assert square_graph == other

    def test_different_order_not_equal(self):
        """Равенство учитывает порядок ребер в списках"""
        a = Graph(3)
        a.add_edge(0, 1)
        a.add_edge(0, 2)
        b = Graph(3)
        b.add_edge(0, 2)
        b.add_edge(0, 1)
        assert a != b

    def test_different_sizes_not_equal(self):
        assert Graph(3) != Graph(4)

    def test_copy_is_equal_and_independent(self, square_graph):
        clone = square_graph.copy()
        assert clone == square_graph
        assert clone is not square_graph

        clone.remove_edge(0, 1)
        assert square_graph.is_adjacent(0, 1)
        assert clone != square_graph

    def test_copy_does_not_alias_edges(self, square_graph):
        clone = copy.deepcopy(square_graph)
        clone.set_edge_weight(0, 1, 100.0)
        assert square_graph.get_edge(0, 1).w == 1.0

    def test_graph_is_unhashable(self, square_graph):
        with pytest.raises(TypeError):
            hash(square_graph)


class TestGraphValidation:
    """Некорректные аргументы не меняют граф"""

    def test_float_vertex_rejected_without_mutation(self):
        graph = Graph(3)
        with pytest.raises(InvalidArgumentError):
            graph.add_edge(0, 1.0, 2.0)
        assert graph.e == 0
        assert graph.edges() == []
        assert graph.degree(0) == 0
        assert graph.degree(1) == 0

    def test_float_vertex_in_queries(self, square_graph):
        with pytest.raises(InvalidArgumentError):
            square_graph.is_adjacent(0.0, 1)
        with pytest.raises(InvalidArgumentError):
            square_graph.neighbors(1.5)
        with pytest.raises(InvalidArgumentError):
            square_graph.remove_edge(True, 0)
        assert square_graph.e == len(square_graph.edges()) == 4

    def test_nan_weight_rejected(self):
        graph = Graph(3)
        with pytest.raises(InvalidArgumentError):
            graph.add_edge(0, 1, float('nan'))
        assert graph.e == 0
        assert not graph.is_adjacent(0, 1)

    def test_nan_weight_in_tokens(self):
        with pytest.raises(InvalidArgumentError):
            Graph.from_tokens(["2", "0", "1", "nan"])

    def test_set_nan_weight_rejected(self, square_graph):
        with pytest.raises(InvalidArgumentError):
            square_graph.set_edge_weight(0, 1, float('nan'))
        assert square_graph.get_edge(0, 1).w == 1.0
