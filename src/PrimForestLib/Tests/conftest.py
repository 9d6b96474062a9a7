"""
Конфигурация pytest и общие фикстуры для всех тестов.

Этот файл автоматически загружается pytest перед запуском тестов.
"""

import random
import sys
from pathlib import Path

import pytest

# Добавляем путь к модулю primforest в sys.path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from primforest.algorithms.graph.graph import Graph  # noqa: E402


# ==================== Маркеры тестов ====================

def pytest_configure(config):
    """Регистрация пользовательских маркеров"""
    config.addinivalue_line(
        "markers", "slow: marks tests as slow (deselect with '-m \"not slow\"')"
    )
    config.addinivalue_line(
        "markers", "unit: marks tests as unit tests"
    )
    config.addinivalue_line(
        "markers", "stochastic: marks tests that use randomness"
    )


def pytest_collection_modifyitems(config, items):
    """Автоматически добавляем маркер "unit" к тестам без других маркеров"""
    for item in items:
        if not any(mark.name in ["slow", "stochastic"] for mark in item.iter_markers()):
            item.add_marker(pytest.mark.unit)


# ==================== Общие фикстуры ====================

@pytest.fixture
def rng():
    """Генератор случайных чисел с фиксированным seed"""
    return random.Random(42)


@pytest.fixture
def square_graph():
    """
    Граф из четырех вершин.

        0 --1.0-- 1
         \\        |
          3.0    2.0
            \\     |
              2 --4.0-- 3
    """
    graph = Graph(4)
    graph.add_edge(0, 1, 1.0)
    graph.add_edge(1, 2, 2.0)
    graph.add_edge(0, 2, 3.0)
    graph.add_edge(2, 3, 4.0)
    return graph


@pytest.fixture
def two_triangles():
    """Два несвязных треугольника 0-1-2 и 3-4-5 с весами 1.0"""
    graph = Graph(6)
    for a, b in [(0, 1), (1, 2), (0, 2), (3, 4), (4, 5), (3, 5)]:
        graph.add_edge(a, b, 1.0)
    return graph


@pytest.fixture
def triple_file(tmp_path):
    """Файл графа в формате троек"""
    path = tmp_path / "graph.txt"
    path.write_text(
        "5\n"
        "0 1 2.5\n"
        "0 2 1\n"
        "1 3 4\n"
        "2 3 0.5\n"
        "3 4 7\n",
        encoding="utf-8",
    )
    return path
