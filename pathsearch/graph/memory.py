"""
In-memory adjacency graph.

Usage:
    graph = MemoryGraph()
    graph.add_node("A", x=0, y=0)
    graph.add_node("B", x=3, y=4)
    graph.add_edge("A-B", "A", "B", weight=2.5)
"""

from __future__ import annotations

import logging
from collections.abc import Hashable, Iterator
from typing import Any

from pathsearch.exceptions import NodeNotFoundError
from pathsearch.graph.base import Edge, Graph, Node

logger = logging.getLogger(__name__)


class MemoryGraph(Graph):
    """
    Graph stored as dicts of nodes, edges, and per-node leaving edges.

    Args:
        directed: Default orientation for edges added without an explicit
            `directed` argument
    """

    def __init__(self, directed: bool = False) -> None:
        self._directed = directed
        self._nodes: dict[Hashable, Node] = {}
        self._edges: dict[Hashable, Edge] = {}
        self._leaving: dict[Hashable, list[Edge]] = {}

    @property
    def directed(self) -> bool:
        return self._directed

    def add_node(self, node_id: Hashable, **attributes: Any) -> Node:
        """
        Add a node.

        Raises:
            ValueError: If a node with this identifier already exists
        """
        if node_id in self._nodes:
            raise ValueError(f"Node '{node_id}' already exists")
        node = Node(node_id, dict(attributes))
        self._nodes[node_id] = node
        self._leaving[node_id] = []
        return node

    def add_edge(
        self,
        edge_id: Hashable,
        source_id: Hashable,
        target_id: Hashable,
        directed: bool | None = None,
        **attributes: Any,
    ) -> Edge:
        """
        Add an edge between two existing nodes.

        Args:
            edge_id: Unique edge identifier
            source_id: Identifier of the first endpoint
            target_id: Identifier of the second endpoint
            directed: Override the graph's default orientation
            **attributes: Edge attributes (e.g. weight=2.0)

        Raises:
            ValueError: If an edge with this identifier already exists
            NodeNotFoundError: If either endpoint is missing
        """
        if edge_id in self._edges:
            raise ValueError(f"Edge '{edge_id}' already exists")
        source = self._nodes.get(source_id)
        if source is None:
            raise NodeNotFoundError(source_id, "source")
        target = self._nodes.get(target_id)
        if target is None:
            raise NodeNotFoundError(target_id, "target")

        if directed is None:
            directed = self._directed
        edge = Edge(edge_id, dict(attributes), source=source, target=target, directed=directed)
        self._edges[edge_id] = edge

        self._leaving[source_id].append(edge)
        # Self-loops are listed once
        if not directed and target_id != source_id:
            self._leaving[target_id].append(edge)
        return edge

    def get_node(self, node_id: Hashable) -> Node | None:
        return self._nodes.get(node_id)

    def get_edge(self, edge_id: Hashable) -> Edge | None:
        return self._edges.get(edge_id)

    def leaving_edges(self, node: Node) -> list[Edge]:
        return list(self._leaving.get(node.id, ()))

    def nodes(self) -> Iterator[Node]:
        return iter(self._nodes.values())

    def edges(self) -> Iterator[Edge]:
        return iter(self._edges.values())

    def node_count(self) -> int:
        return len(self._nodes)

    def edge_count(self) -> int:
        return len(self._edges)

    def __contains__(self, node_id: object) -> bool:
        return node_id in self._nodes

    def __repr__(self) -> str:
        kind = "directed" if self._directed else "undirected"
        return f"MemoryGraph({kind}, nodes={self.node_count()}, edges={self.edge_count()})"
