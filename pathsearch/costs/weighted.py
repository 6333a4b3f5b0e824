"""
Weighted cost model - edge attribute costs with a zero heuristic.

With this model the search is Dijkstra's algorithm.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from pathsearch.config import DEFAULT_EDGE_COST, DEFAULT_WEIGHT_ATTRIBUTE
from pathsearch.costs.base import Costs

if TYPE_CHECKING:
    from pathsearch.graph.base import Edge, Node


class WeightedCosts(Costs):
    """
    Costs read from a numeric edge attribute; no heuristic.

    Edges without the attribute, or with a non-numeric value, cost
    `default_cost`. Missing weights are not an error.
    """

    def __init__(
        self,
        weight_attribute: str = DEFAULT_WEIGHT_ATTRIBUTE,
        default_cost: float = DEFAULT_EDGE_COST,
    ) -> None:
        """
        Initialize the weighted model.

        Args:
            weight_attribute: Edge attribute holding the traversal cost
            default_cost: Cost used when the attribute is unusable
        """
        self._weight_attribute = weight_attribute
        self._default_cost = default_cost

    @property
    def weight_attribute(self) -> str:
        return self._weight_attribute

    @property
    def name(self) -> str:
        return "weighted"

    @property
    def description(self) -> str:
        return f"Edge attribute '{self._weight_attribute}' (default {self._default_cost:g}), zero heuristic"

    def heuristic(self, node: Node, target: Node) -> float:
        return 0.0

    def cost(self, parent: Node, edge: Edge | None, next_node: Node) -> float:
        if edge is None:
            return self._default_cost
        weight = edge.get_number(self._weight_attribute)
        if weight is None:
            return self._default_cost
        return weight
