"""Command-line demonstrations of the algorithms."""

from __future__ import annotations

import argparse
from collections.abc import Sequence

from algokit.graphs import INF, floyd_warshall, format_distances, kruskal
from algokit.sorting import (
    bubble_sort,
    format_values,
    heap_sort,
    insertion_sort,
    merge_sort,
    quick_sort,
    selection_sort,
)
from algokit.tsp import tsp_min_cost

__all__ = ["main"]

_SORTS = {
    "bubble": bubble_sort,
    "insertion": insertion_sort,
    "selection": selection_sort,
    "merge": merge_sort,
    "heap": heap_sort,
    "quick": quick_sort,
}

_DEMO_VALUES = [64, 34, 25, 12, 10, 3, 22, 11, 90]

_DEMO_DISTANCES = [
    [0, 5, INF, 10],
    [INF, 0, 3, INF],
    [INF, INF, 0, 1],
    [INF, INF, INF, 0],
]

_DEMO_EDGES = [
    (0, 1, 2),
    (0, 3, 6),
    (1, 2, 3),
    (1, 3, 8),
    (1, 4, 5),
    (2, 4, 7),
    (3, 4, 9),
]

_DEMO_TOUR = [
    [0, 10, 15, 20],
    [10, 0, 35, 25],
    [15, 35, 0, 30],
    [20, 25, 30, 0],
]


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="algokit", description="Run classic algorithms.")
    commands = parser.add_subparsers(dest="command", required=True)

    sort = commands.add_parser("sort", help="sort integers")
    sort.add_argument("values", nargs="*", type=int, help="integers to sort")
    sort.add_argument("--algorithm", choices=sorted(_SORTS), default="bubble")

    commands.add_parser("floyd", help="all-pairs shortest paths on a sample graph")
    commands.add_parser("kruskal", help="minimum spanning tree of a sample graph")
    commands.add_parser("tsp", help="cheapest tour of a sample set of cities")
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Parse ``argv`` and run the chosen demonstration."""
    args = _build_parser().parse_args(argv)

    if args.command == "sort":
        values = args.values or _DEMO_VALUES
        print(f"Original array: {format_values(values)}")
        print(f"Sorted array:   {format_values(_SORTS[args.algorithm](values))}")
    elif args.command == "floyd":
        print("Shortest distances between every pair of vertices:")
        print(format_distances(floyd_warshall(_DEMO_DISTANCES)))
    elif args.command == "kruskal":
        for edge in kruskal(5, _DEMO_EDGES):
            print(edge)
    elif args.command == "tsp":
        print(f"Minimum cost: {tsp_min_cost(_DEMO_TOUR)}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())