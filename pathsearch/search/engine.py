"""
A* search engine and session API.

Usage:
    from pathsearch.search.engine import AStar

    astar = AStar(graph)
    astar.compute("A", "D")
    if astar.no_path_found():
        ...
    path = astar.get_shortest_path()

With the default cost model (zero heuristic) the search is Dijkstra's
algorithm. Runs are synchronous; one instance handles one search at a time.
"""

from __future__ import annotations

import logging
from collections.abc import Hashable
from typing import TYPE_CHECKING, Any

from pathsearch.costs.weighted import WeightedCosts
from pathsearch.exceptions import NodeNotFoundError, UnboundGraphError
from pathsearch.search.path import Path, build_path
from pathsearch.search.state import SearchNodeStore, SearchStatus

if TYPE_CHECKING:
    from pathsearch.costs.base import Costs
    from pathsearch.graph.base import Graph, Node

logger = logging.getLogger(__name__)


class AStar:
    """
    Shortest path between two nodes by informed best-first search.

    The engine keeps two sets of per-node search records:
    - open: discovered nodes, ranked by g + h
    - closed: expanded nodes, re-opened only when a strictly better
      record for them turns up

    Path optimality requires nonnegative edge costs and an admissible
    heuristic; neither is checked.
    """

    def __init__(
        self,
        graph: Graph | None = None,
        source: Hashable | None = None,
        target: Hashable | None = None,
        costs: Costs | None = None,
    ) -> None:
        """
        Initialize the engine.

        Args:
            graph: Graph to search (can be bound later with init())
            source: Identifier of the start node
            target: Identifier of the goal node
            costs: Cost model (default: WeightedCosts, i.e. Dijkstra)
        """
        self._graph = graph
        self._source = source
        self._target = target
        self._costs: Costs = costs if costs is not None else WeightedCosts()

        self._store = SearchNodeStore()
        self._result: Path | None = None
        self._no_path_found = False
        self._status = SearchStatus.IDLE
        self._expanded = 0

    # -------------------------------------------------------------------------
    # Configuration
    # -------------------------------------------------------------------------

    @property
    def graph(self) -> Graph | None:
        return self._graph

    @property
    def source(self) -> Hashable | None:
        return self._source

    @property
    def target(self) -> Hashable | None:
        return self._target

    @property
    def costs(self) -> Costs:
        return self._costs

    @property
    def status(self) -> SearchStatus:
        return self._status

    def init(self, graph: Graph) -> None:
        """Bind (or rebind) the graph and discard any previous result."""
        self._clear()
        self._graph = graph

    def set_source(self, node_id: Hashable) -> None:
        """Change the start node and discard any previous result."""
        self._clear()
        self._source = node_id

    def set_target(self, node_id: Hashable) -> None:
        """Change the goal node and discard any previous result."""
        self._clear()
        self._target = node_id

    def set_costs(self, costs: Costs) -> None:
        """
        Replace the cost model.

        The previous result is kept; call compute() again to refresh it.
        """
        self._costs = costs

    # -------------------------------------------------------------------------
    # Search
    # -------------------------------------------------------------------------

    def compute(
        self,
        source: Hashable | None = None,
        target: Hashable | None = None,
    ) -> None:
        """
        Run the search.

        Endpoints passed as arguments replace the configured ones first
        (as set_source / set_target would). Otherwise searches
        between the configured endpoints; if either endpoint is unset this is
        a silent no-op rather than an error, so callers that forget to
        configure an endpoint get no result instead of an exception.

        Raises:
            UnboundGraphError: If no graph has been bound
            NodeNotFoundError: If the source or target is not in the graph
            MissingPositionError: If a geometric cost model meets a node
                without a position
        """
        if source is not None:
            self.set_source(source)
        if target is not None:
            self.set_target(target)

        if self._source is None or self._target is None:
            logger.debug("compute() skipped: source or target not set")
            return

        self._clear()
        if self._graph is None:
            raise UnboundGraphError()

        source_node = self._graph.get_node(self._source)
        if source_node is None:
            logger.warning(f"Source '{self._source}' not in graph")
            raise NodeNotFoundError(self._source, "source")

        target_node = self._graph.get_node(self._target)
        if target_node is None:
            logger.warning(f"Target '{self._target}' not in graph")
            raise NodeNotFoundError(self._target, "target")

        logger.info(
            f"Searching '{self._source}' -> '{self._target}' with {self._costs.name} costs"
        )
        try:
            self._search(source_node, target_node)
        except Exception:
            # A failing cost model leaves no partial run behind
            self._clear()
            raise

        if self._result is not None:
            logger.info(
                f"Found path ({self._result.edge_count} edges, cost {self._result.cost:g}): "
                f"{self._result}"
            )
        else:
            logger.info(f"No path from '{self._source}' to '{self._target}'")
        logger.debug(f"Search stats: {self.get_stats()}")

    def _search(self, source: Node, target: Node) -> None:
        graph = self._graph
        costs = self._costs
        store = self._store
        self._status = SearchStatus.RUNNING

        store.open(store.create(source, None, None, 0.0, costs.heuristic(source, target)))

        while store.has_open():
            current = store.pop_best()

            if current.node.id == target.id:
                self._result = build_path(store.records, current)
                self._status = SearchStatus.FOUND
                return

            store.close(current)
            self._expanded += 1

            for edge in graph.leaving_edges(current.node):
                next_node = edge.opposite(current.node)
                if next_node is None:
                    continue

                h = costs.heuristic(next_node, target)
                g = current.g + costs.cost(current.node, edge, next_node)
                rank = g + h

                # Keep the existing record unless the new one is strictly better
                in_open = store.open_record(next_node.id)
                if in_open is not None and in_open.rank <= rank:
                    continue
                in_closed = store.closed_record(next_node.id)
                if in_closed is not None and in_closed.rank <= rank:
                    continue

                store.open(store.create(next_node, edge, current, g, h))

        self._no_path_found = True
        self._status = SearchStatus.EXHAUSTED

    def _clear(self) -> None:
        self._store.clear()
        self._result = None
        self._no_path_found = False
        self._status = SearchStatus.IDLE
        self._expanded = 0

    # -------------------------------------------------------------------------
    # Results
    # -------------------------------------------------------------------------

    def get_shortest_path(self) -> Path | None:
        """The path found by the last run, or None."""
        return self._result

    def no_path_found(self) -> bool:
        """True exactly when the last run exhausted the graph without reaching the target."""
        return self._no_path_found

    def get_stats(self) -> dict[str, Any]:
        """Counters from the last run."""
        return {
            "status": self._status.value,
            "expanded": self._expanded,
            "reopened": self._store.reopened,
            "open": self._store.open_count,
            "closed": self._store.closed_count,
            "records": len(self._store.records),
        }

    def __repr__(self) -> str:
        return (
            f"AStar(source={self._source!r}, target={self._target!r}, "
            f"costs={self._costs.name!r}, status={self._status.value!r})"
        )


def shortest_path(
    graph: Graph,
    source: Hashable,
    target: Hashable,
    costs: Costs | None = None,
) -> Path | None:
    """
    One-shot search.

    Returns:
        The shortest path, or None if the target is unreachable
    """
    astar = AStar(graph, costs=costs)
    astar.compute(source, target)
    return astar.get_shortest_path()
