"""
Search result paths and their reconstruction from a parent chain.
"""

from __future__ import annotations

from collections.abc import Hashable, Iterator, Sequence
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from pathsearch.config import DEFAULT_EDGE_COST

if TYPE_CHECKING:
    from pathsearch.graph.base import Edge, Node
    from pathsearch.search.state import SearchRecord


@dataclass
class Path:
    """
    An ordered walk from a source node to a target node.

    Attributes:
        nodes: Nodes from source to target (inclusive)
        edges: Edges between consecutive nodes; one fewer than nodes
        cost: Total cost under the cost model that produced the path
    """

    nodes: list[Node] = field(default_factory=list)
    edges: list[Edge] = field(default_factory=list)
    cost: float = 0.0

    @property
    def head(self) -> Node | None:
        """First node (the source)."""
        return self.nodes[0] if self.nodes else None

    @property
    def tail(self) -> Node | None:
        """Last node (the target)."""
        return self.nodes[-1] if self.nodes else None

    @property
    def empty(self) -> bool:
        return not self.nodes

    @property
    def edge_count(self) -> int:
        return len(self.edges)

    def node_ids(self) -> list[Hashable]:
        return [node.id for node in self.nodes]

    def weight(self, attribute: str, default: float = DEFAULT_EDGE_COST) -> float:
        """Sum of a numeric edge attribute along the path; unusable values count as `default`."""
        total = 0.0
        for edge in self.edges:
            value = edge.get_number(attribute)
            total += default if value is None else value
        return total

    def __len__(self) -> int:
        return len(self.nodes)

    def __iter__(self) -> Iterator[Node]:
        return iter(self.nodes)

    def __contains__(self, item: object) -> bool:
        node_id = getattr(item, "id", item)
        return any(node_id == node.id for node in self.nodes)

    def __str__(self) -> str:
        return " -> ".join(str(node.id) for node in self.nodes)


def build_path(records: Sequence[SearchRecord], terminal: SearchRecord) -> Path:
    """
    Rebuild the path ending at `terminal` by following parent indices.

    Args:
        records: The run's arena
        terminal: Record of the target node

    Returns:
        Path from the source record (parent None) to `terminal`
    """
    chain: list[SearchRecord] = []
    record: SearchRecord | None = terminal
    while record is not None:
        chain.append(record)
        record = records[record.parent] if record.parent is not None else None
    chain.reverse()

    path = Path(nodes=[chain[0].node], cost=terminal.g)
    for step in chain[1:]:
        path.edges.append(step.edge)
        path.nodes.append(step.node)
    return path
