"""
Read-only graph interface consumed by the search engine.

The engine never mutates a graph. Anything that can look up a node by
identifier and enumerate the edges leaving a node can be searched.
"""

from __future__ import annotations

import numbers
from abc import ABC, abstractmethod
from collections.abc import Hashable, Iterable, Mapping
from dataclasses import dataclass, field
from typing import Any


def _as_number(value: Any) -> float | None:
    if isinstance(value, bool) or not isinstance(value, numbers.Real):
        return None
    return float(value)


@dataclass(eq=False)
class Element:
    """
    Graph element (node or edge) with named attributes.

    Attributes:
        id: Stable unique identifier
        attributes: Named attribute values, numeric or otherwise
    """

    id: Hashable
    attributes: dict[str, Any] = field(default_factory=dict)

    def has_attribute(self, name: str) -> bool:
        return name in self.attributes

    def get_attribute(self, name: str, default: Any = None) -> Any:
        return self.attributes.get(name, default)

    def get_number(self, name: str) -> float | None:
        """Return attribute `name` as a float, or None if absent or non-numeric."""
        return _as_number(self.attributes.get(name))

    def get_vector(self, name: str) -> tuple[float, ...] | None:
        """
        Return a multi-component numeric attribute as a tuple of floats.

        Returns None if the attribute is absent, not a sequence, or holds
        any non-numeric component.
        """
        value = self.attributes.get(name)
        if value is None or isinstance(value, (str, bytes, Mapping)):
            return None
        try:
            components = [_as_number(v) for v in value]
        except TypeError:
            return None
        if not components or any(c is None for c in components):
            return None
        return tuple(components)


@dataclass(eq=False)
class Node(Element):
    """A graph node."""

    def __repr__(self) -> str:
        return f"Node({self.id!r})"


@dataclass(eq=False)
class Edge(Element):
    """
    A graph edge between two nodes.

    Attributes:
        source: First endpoint (the tail, for directed edges)
        target: Second endpoint (the head, for directed edges)
        directed: Whether the edge can only be traversed source -> target
    """

    source: Node | None = None
    target: Node | None = None
    directed: bool = False

    def opposite(self, node: Node) -> Node | None:
        """
        Return the endpoint across from `node`, or None if `node` is not an endpoint.

        Endpoints are matched by identifier, so graphs may hand out a fresh
        Node object for the same node on every lookup.
        """
        if self.source is not None and node.id == self.source.id:
            return self.target
        if self.target is not None and node.id == self.target.id:
            return self.source
        return None

    def __repr__(self) -> str:
        arrow = "->" if self.directed else "--"
        source_id = self.source.id if self.source is not None else None
        target_id = self.target.id if self.target is not None else None
        return f"Edge({self.id!r}: {source_id!r} {arrow} {target_id!r})"


class Graph(ABC):
    """
    Abstract read-only graph.

    Implementations must return a finite, exhaustive set of leaving edges
    for every node. Undirected edges leave through both endpoints.
    """

    @abstractmethod
    def get_node(self, node_id: Hashable) -> Node | None:
        """Look up a node by identifier. Returns None if absent."""
        ...

    @abstractmethod
    def leaving_edges(self, node: Node) -> Iterable[Edge]:
        """Edges that can be traversed away from `node`."""
        ...

    def __contains__(self, node_id: object) -> bool:
        return self.get_node(node_id) is not None  # type: ignore[arg-type]
