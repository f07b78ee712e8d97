"""Classic sorting, graph, backtracking, travelling-salesman and pattern-search algorithms."""

__version__ = "0.1.0"