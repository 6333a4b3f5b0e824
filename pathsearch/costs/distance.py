"""
Euclidean cost model - geometric edge lengths guided by straight-line distance.

Nodes must carry a position, either as a combined "xyz"/"xy" attribute or
as separate "x", "y" and optional "z" attributes. Positions without a z
component are treated as 2D.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import numpy as np

from pathsearch.config import POSITION_AXIS_ATTRIBUTES, POSITION_VECTOR_ATTRIBUTES
from pathsearch.costs.base import Costs
from pathsearch.exceptions import MissingPositionError

if TYPE_CHECKING:
    from pathsearch.graph.base import Edge, Node


def node_position(node: Node) -> np.ndarray:
    """
    Position of a node as a 2- or 3-component float array.

    Raises:
        MissingPositionError: If the node has no position attributes
    """
    for name in POSITION_VECTOR_ATTRIBUTES:
        vector = node.get_vector(name)
        if vector is not None and len(vector) >= 2:
            return np.asarray(vector[:3], dtype=np.float64)

    x_name, y_name, z_name = POSITION_AXIS_ATTRIBUTES
    x = node.get_number(x_name)
    y = node.get_number(y_name)
    if x is None or y is None:
        raise MissingPositionError(node.id)

    z = node.get_number(z_name)
    if z is None:
        return np.array([x, y], dtype=np.float64)
    return np.array([x, y, z], dtype=np.float64)


def distance(a: np.ndarray, b: np.ndarray) -> float:
    """Euclidean distance; a z component counts only when both points have one."""
    if len(a) != len(b):
        a, b = a[:2], b[:2]
    return float(np.linalg.norm(b - a))


def edge_length(edge: Edge) -> float:
    """Straight-line length of an edge between its endpoints."""
    if edge.source is None or edge.target is None:
        raise ValueError(f"Edge '{edge.id}' has a missing endpoint")
    return distance(node_position(edge.source), node_position(edge.target))


class DistanceCosts(Costs):
    """
    Euclidean costs: edge length as cost, straight-line distance as heuristic.

    The heuristic is admissible as long as no edge is shorter than the
    straight line between its endpoints, which holds by construction here.
    """

    @property
    def name(self) -> str:
        return "distance"

    @property
    def description(self) -> str:
        return "Euclidean edge length, straight-line heuristic"

    def heuristic(self, node: Node, target: Node) -> float:
        return distance(node_position(node), node_position(target))

    def cost(self, parent: Node, edge: Edge | None, next_node: Node) -> float:
        if edge is None:
            return distance(node_position(parent), node_position(next_node))
        return edge_length(edge)
