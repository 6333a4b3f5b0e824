"""
Cost model base class for the search engine.

A cost model supplies the two numbers A* needs at every edge relaxation:
the real cost of traversing an edge and an estimate of the cost still to go.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from pathsearch.graph.base import Edge, Node


class Costs(ABC):
    """
    Abstract base class for cost models.

    The search returns optimal paths only when `cost` is nonnegative and
    `heuristic` never overestimates the true remaining cost (admissible).
    Neither property is checked by the engine.
    """

    @property
    @abstractmethod
    def name(self) -> str:
        """Short identifier for the model (e.g., 'weighted', 'distance')."""
        ...

    @property
    @abstractmethod
    def description(self) -> str:
        """Human-readable description of the model."""
        ...

    @abstractmethod
    def heuristic(self, node: Node, target: Node) -> float:
        """
        Estimate the cost of reaching `target` from `node`.

        Returns:
            A nonnegative estimate
        """
        ...

    @abstractmethod
    def cost(self, parent: Node, edge: Edge | None, next_node: Node) -> float:
        """
        Real cost of traversing `edge` from `parent` to `next_node`.

        Returns:
            A nonnegative cost
        """
        ...

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(name={self.name!r})"
