"""Чтение графа из списка троек и текстовое представление"""

import logging
from pathlib import Path
from typing import List, TextIO, Tuple, Union

from ... import config
from ...errors import GraphParseError, SourceNotFoundError, SourceReadError
from .graph import Graph

logger = logging.getLogger(__name__)


def tokenize(text: str) -> List[str]:
    """Разбить текст на токены по пробельным символам"""
    return text.split()


def load_graph(stream: TextIO) -> Graph:
    """
    Построить граф из открытого текстового потока.

    Формат: количество вершин V, затем тройки "u v w".
    """
    try:
        text = stream.read()
    except UnicodeDecodeError as e:
        raise GraphParseError(f"Некорректная кодировка данных: {e.reason}") from None
    return Graph.from_tokens(tokenize(text))


def read_graph(path: Union[str, Path]) -> Graph:
    """
    Прочитать граф из файла с тройками (u, v, w).

    Args:
        path: Путь к файлу

    Returns:
        Построенный граф

    Raises:
        SourceNotFoundError: если файл не найден
        SourceReadError: если файл не удается прочитать
        GraphParseError: если данные некорректны
    """
    path = Path(path)
    try:
        with path.open("r", encoding="utf-8") as f:
            graph = load_graph(f)
    except FileNotFoundError:
        raise SourceNotFoundError(str(path)) from None
    except OSError as e:
        raise SourceReadError(str(path), e.strerror or str(e)) from e

    logger.info(f"Loaded graph from {path}: {graph.v} vertices, {graph.e} edges")
    return graph


def to_triples(graph: Graph) -> List[Tuple[int, int, float]]:
    """Экспортировать ребра графа в виде троек (u, v, w)"""
    return [
        edge.as_triple()
        for v in range(graph.v)
        for edge in graph.neighbors(v)
    ]


def format_triples(graph: Graph) -> str:
    """Текст в формате входного файла: V и затем по тройке на строку"""
    lines = [str(graph.v)]
    lines.extend(f"{u} {v} {w!r}" for u, v, w in to_triples(graph))
    return "\n".join(lines) + "\n"


def format_adjacency(graph: Graph) -> str:
    """
    Человекочитаемый дамп списков смежности.

    Пример:
        Graph (3,2)
        The Adjacency List K(3)
        Adjacency List[0]  -> 1(1.5) -> 2(3)
    """
    precision = config.RENDER_PRECISION
    lines = [
        f"Graph ({graph.v},{graph.e})",
        f"The Adjacency List K({graph.v})",
    ]
    for v in range(graph.v):
        row = "".join(
            f" -> {edge.end_v}({edge.w:.{precision}g})"
            for edge in graph.neighbors(v)
        )
        lines.append(f"Adjacency List[{v}] {row}")
    return "\n".join(lines)
