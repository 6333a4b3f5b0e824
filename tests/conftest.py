"""
Pytest configuration and shared fixtures.

This file is automatically loaded by pytest and provides
fixtures available to all test files.
"""

from __future__ import annotations

import heapq
import math
import random
from pathlib import Path

import pytest

from pathsearch.costs.base import Costs
from pathsearch.graph import MemoryGraph


class TableCosts(Costs):
    """Costs from explicit tables: edge weights by edge id, heuristic by node id."""

    def __init__(self, heuristics: dict, weights: dict | None = None) -> None:
        self._heuristics = heuristics
        self._weights = weights or {}

    @property
    def name(self) -> str:
        return "table"

    @property
    def description(self) -> str:
        return "Fixed heuristic table"

    def heuristic(self, node, target):
        return self._heuristics.get(node.id, 0.0)

    def cost(self, parent, edge, next_node):
        if edge.id in self._weights:
            return self._weights[edge.id]
        weight = edge.get_number("weight")
        return 1.0 if weight is None else weight


def dijkstra_cost(graph, source_id, target_id, edge_cost) -> float | None:
    """Plain Dijkstra baseline; returns the minimum cost or None if unreachable."""
    source = graph.get_node(source_id)
    best = {source_id: 0.0}
    heap = [(0.0, 0, source)]
    counter = 1
    done = set()
    while heap:
        g, _, node = heapq.heappop(heap)
        if node.id in done:
            continue
        if node.id == target_id:
            return g
        done.add(node.id)
        for edge in graph.leaving_edges(node):
            other = edge.opposite(node)
            candidate = g + edge_cost(edge)
            if candidate < best.get(other.id, math.inf):
                best[other.id] = candidate
                heapq.heappush(heap, (candidate, counter, other))
                counter += 1
    return None


@pytest.fixture
def project_root() -> Path:
    """Return the project root directory."""
    return Path(__file__).parent.parent


@pytest.fixture
def data_dir(project_root: Path) -> Path:
    """Return the data directory."""
    return project_root / "data"


@pytest.fixture
def diamond_graph() -> MemoryGraph:
    """
    A-B (2), B-D (2), A-C (1), C-D (1), plus an isolated node E.

    Nodes carry x/y positions so both cost models apply.
    """
    graph = MemoryGraph()
    graph.add_node("A", x=0, y=0)
    graph.add_node("B", x=1, y=1)
    graph.add_node("C", x=1, y=-1)
    graph.add_node("D", x=2, y=0)
    graph.add_node("E", x=5, y=5)
    graph.add_edge("A-B", "A", "B", weight=2)
    graph.add_edge("B-D", "B", "D", weight=2)
    graph.add_edge("A-C", "A", "C", weight=1)
    graph.add_edge("C-D", "C", "D", weight=1)
    return graph


@pytest.fixture
def grid_graph() -> MemoryGraph:
    """
    6x6 grid with unit spacing, a wall at column 3 except row 5,
    and diagonal shortcuts in the lower-left quadrant.
    """
    size = 6
    graph = MemoryGraph()
    for row in range(size):
        for col in range(size):
            graph.add_node((row, col), xy=(col, row))

    def connect(a, b):
        if a in graph and b in graph:
            graph.add_edge(f"{a}-{b}", a, b)

    wall = {(row, 3) for row in range(size - 1)}
    for row in range(size):
        for col in range(size):
            if (row, col) in wall:
                continue
            for neighbor in ((row + 1, col), (row, col + 1)):
                if neighbor not in wall:
                    connect((row, col), neighbor)
            if row < 2 and col < 2:
                connect((row, col), (row + 1, col + 1))
    return graph


@pytest.fixture
def random_graph_factory():
    """Build a seeded random graph with positions and random weights."""

    def build(seed: int, node_count: int = 30, edge_count: int = 60, directed: bool = False):
        rng = random.Random(seed)
        graph = MemoryGraph(directed=directed)
        for i in range(node_count):
            graph.add_node(i, x=rng.uniform(0, 100), y=rng.uniform(0, 100))
        for i in range(edge_count):
            a = rng.randrange(node_count)
            b = rng.randrange(node_count)
            graph.add_edge(f"e{i}", a, b, weight=rng.randint(0, 20))
        return graph

    return build


@pytest.fixture
def table_costs():
    """Factory for TableCosts."""
    return TableCosts
