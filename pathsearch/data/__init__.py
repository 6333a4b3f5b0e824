"""
Data loading module.

Reads and writes graph documents (JSON or msgpack) as MemoryGraph instances.

Usage:
    from pathsearch.data import load_graph

    graph = load_graph("data/diamond.json")
"""

from pathsearch.data.loader import graph_from_dict, load_graph, save_graph

__all__ = ["load_graph", "save_graph", "graph_from_dict"]
