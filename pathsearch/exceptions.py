"""
Errors raised by the search engine and its collaborators.

"No path found" is a normal search outcome and has no exception.
"""

from __future__ import annotations


class PathSearchError(Exception):
    """Base class for pathsearch errors."""


class UnboundGraphError(PathSearchError, RuntimeError):
    """A search was requested before any graph was bound."""

    def __init__(self) -> None:
        super().__init__("no graph bound; call init(graph) before compute()")


class NodeNotFoundError(PathSearchError, KeyError):
    """A node identifier does not resolve in the graph."""

    def __init__(self, node_id: object, role: str = "node") -> None:
        self.node_id = node_id
        self.role = role
        super().__init__(f"{role} node '{node_id}' does not exist in the graph")

    def __str__(self) -> str:
        # KeyError would repr() the message
        return self.args[0]


class MissingPositionError(PathSearchError, ValueError):
    """A node carries no usable position for a geometric cost model."""

    def __init__(self, node_id: object) -> None:
        self.node_id = node_id
        super().__init__(f"node '{node_id}' has no position attributes")
