"""
Search module.

Provides the A* engine and its per-run state:
- AStar: Session API and best-first search loop
- SearchRecord / SearchNodeStore: Open and closed sets of one run
- Path: Result walk from source to target
"""

from pathsearch.search.engine import AStar, shortest_path
from pathsearch.search.path import Path, build_path
from pathsearch.search.state import SearchNodeStore, SearchRecord, SearchStatus

__all__ = [
    "AStar",
    "shortest_path",
    "Path",
    "build_path",
    "SearchRecord",
    "SearchNodeStore",
    "SearchStatus",
]
