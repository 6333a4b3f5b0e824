"""
pathsearch - shortest paths over attributed graphs.

Informed best-first search (A*) between two nodes of a weighted graph,
degrading to Dijkstra's algorithm when the heuristic is zero.
"""

from pathsearch.search import AStar, Path, shortest_path

__version__ = "0.1.0"

__all__ = ["AStar", "Path", "shortest_path"]
