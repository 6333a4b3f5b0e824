"""
Per-run search state: records, the open and closed sets, run status.

Records live in an append-only arena and refer to their parent by arena
index, so replacing a node's record never invalidates the chain of any
record created before it.
"""

from __future__ import annotations

import heapq
from collections.abc import Hashable
from dataclasses import dataclass, field
from enum import Enum
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from pathsearch.graph.base import Edge, Node


class SearchStatus(str, Enum):
    """Lifecycle of one search run."""

    IDLE = "idle"
    RUNNING = "running"
    FOUND = "found"
    EXHAUSTED = "exhausted"


@dataclass(frozen=True)
class SearchRecord:
    """
    Best-known state of one node during a run.

    Attributes:
        index: Slot of this record in the run's arena
        node: The graph node
        edge: Edge used to reach the node from its parent (None for the source)
        parent: Arena index of the predecessor record (None for the source)
        g: Accumulated cost from the source
        h: Heuristic estimate of the cost to the target
        rank: g + h, the selection priority
    """

    index: int
    node: Node
    edge: Edge | None
    parent: int | None
    g: float
    h: float
    rank: float = field(init=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "rank", self.g + self.h)


class SearchNodeStore:
    """
    Open and closed sets of one search run.

    Both sets map node id -> record. Selection from the open set uses a
    binary heap of (rank, arena index); entries whose record has since been
    replaced or closed are discarded when popped. The arena index grows with
    every insertion, so equal ranks resolve to the earliest inserted record.
    """

    def __init__(self) -> None:
        self._records: list[SearchRecord] = []
        self._open: dict[Hashable, SearchRecord] = {}
        self._closed: dict[Hashable, SearchRecord] = {}
        self._heap: list[tuple[float, int]] = []
        self.reopened = 0

    def clear(self) -> None:
        self._records.clear()
        self._open.clear()
        self._closed.clear()
        self._heap.clear()
        self.reopened = 0

    @property
    def records(self) -> list[SearchRecord]:
        """The arena; parent indices point into this list."""
        return self._records

    def create(
        self,
        node: Node,
        edge: Edge | None,
        parent: SearchRecord | None,
        g: float,
        h: float,
    ) -> SearchRecord:
        """Allocate a new record in the arena (not yet in either set)."""
        record = SearchRecord(
            index=len(self._records),
            node=node,
            edge=edge,
            parent=parent.index if parent is not None else None,
            g=g,
            h=h,
        )
        self._records.append(record)
        return record

    def open(self, record: SearchRecord) -> None:
        """Insert or replace the open record for the record's node."""
        node_id = record.node.id
        if self._closed.pop(node_id, None) is not None:
            self.reopened += 1
        self._open[node_id] = record
        heapq.heappush(self._heap, (record.rank, record.index))

    def close(self, record: SearchRecord) -> None:
        """Move a record from the open set to the closed set."""
        node_id = record.node.id
        del self._open[node_id]
        self._closed[node_id] = record

    def pop_best(self) -> SearchRecord | None:
        """
        Remove and return the minimal-rank open record from the heap.

        The record stays in the open set until `close` is called.
        Returns None when the open set is empty.
        """
        while self._heap:
            _, index = heapq.heappop(self._heap)
            record = self._records[index]
            if self._open.get(record.node.id) is record:
                return record
        return None

    def open_record(self, node_id: Hashable) -> SearchRecord | None:
        return self._open.get(node_id)

    def closed_record(self, node_id: Hashable) -> SearchRecord | None:
        return self._closed.get(node_id)

    @property
    def open_count(self) -> int:
        return len(self._open)

    @property
    def closed_count(self) -> int:
        return len(self._closed)

    def has_open(self) -> bool:
        return bool(self._open)
