"""
Graph module.

Provides the read-only graph interface the search engine consumes:
- Graph: Abstract node lookup + leaving-edge iteration
- Node / Edge: Attributed graph elements with typed numeric accessors
- MemoryGraph: Dict-backed implementation
"""

from pathsearch.graph.base import Edge, Element, Graph, Node
from pathsearch.graph.memory import MemoryGraph

__all__ = [
    "Element",
    "Node",
    "Edge",
    "Graph",
    "MemoryGraph",
]
