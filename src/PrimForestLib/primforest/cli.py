#!/usr/bin/env python
"""
Командная строка primforest.

Использование:
    primforest graph.txt                      # Граф из файла с тройками
    primforest --random 20 --seed 7           # Случайный граф
    primforest graph.txt --show-graph         # С выводом списков смежности
"""

import argparse
import logging
import sys
from typing import List, Optional

from . import config
from .algorithms.graph.graph_io import format_adjacency, read_graph
from .algorithms.graph.random_graph import RandomGraphGenerator
from .algorithms.spanning.prim_mst import PrimMST
from .errors import PrimForestError

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="primforest",
        description="Минимальный остовный лес алгоритмом Прима",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Примеры использования:
  primforest graph.txt                         # Граф из файла
  primforest --random 50 --density 0.3         # Случайный граф
  primforest --random 10 --seed 42 --show-graph
        """
    )

    source = parser.add_mutually_exclusive_group(required=True)
    source.add_argument(
        "file",
        nargs="?",
        help="Файл: количество вершин, затем тройки 'u v w'"
    )
    source.add_argument(
        "--random", "-r",
        type=int,
        metavar="V",
        help="Сгенерировать случайный граф с V вершинами"
    )

    parser.add_argument(
        "--density",
        type=float,
        default=config.DEFAULT_DENSITY,
        help="Плотность случайного графа (0-1)"
    )
    parser.add_argument(
        "--min-weight",
        type=float,
        default=config.DEFAULT_MIN_WEIGHT,
        help="Нижняя граница веса ребра"
    )
    parser.add_argument(
        "--max-weight",
        type=float,
        default=config.DEFAULT_MAX_WEIGHT,
        help="Верхняя граница веса ребра"
    )
    parser.add_argument(
        "--seed",
        type=int,
        help="Seed генератора для воспроизводимости"
    )
    parser.add_argument(
        "--show-graph", "-g",
        action="store_true",
        help="Показать списки смежности графа"
    )
    parser.add_argument(
        "--log-level",
        type=str.upper,
        default=config.resolve_log_level(config.LOG_LEVEL),
        choices=config.LOG_LEVELS,
        help="Уровень логирования"
    )
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format=config.LOG_FORMAT
    )

    try:
        if args.random is not None:
            generator = RandomGraphGenerator(
                args.min_weight, args.max_weight, seed=args.seed
            )
            graph = generator.generate(args.random, args.density)
        else:
            graph = read_graph(args.file)

        if args.show_graph:
            print(format_adjacency(graph))
            print()

        mst = PrimMST(graph)
    except PrimForestError as e:
        logger.error(f"primforest failed: {e}")
        print(f"Ошибка: {e}", file=sys.stderr)
        return 1

    print(f"Minimum spanning forest ({mst.component_count()} component(s)):")
    for edge in mst.edges():
        print(f"  {edge.start_v} - {edge.end_v}  {edge.w:.4f}")
    print(f"Total weight: {mst.total_weight():.4f}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
