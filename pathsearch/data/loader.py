"""
Graph file loader.

Reads a graph document from JSON or msgpack into a MemoryGraph.

Document shape:
    {
        "directed": false,
        "nodes": [{"id": "A", "attributes": {"x": 0, "y": 0}}, ...],
        "edges": [{"id": "A-B", "source": "A", "target": "B",
                   "directed": false, "attributes": {"weight": 2}}, ...]
    }

Edge "id", "directed" and both "attributes" keys are optional.

Usage:
    from pathsearch.data import load_graph

    graph = load_graph("data/diamond.json")
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

import msgpack

from pathsearch.config import SUPPORTED_GRAPH_SUFFIXES
from pathsearch.graph.memory import MemoryGraph

logger = logging.getLogger(__name__)


def _read_document(path: Path) -> dict[str, Any]:
    suffix = path.suffix.lower()
    if suffix == ".json":
        with open(path, encoding="utf-8") as f:
            return json.load(f)
    if suffix == ".msgpack":
        with open(path, "rb") as f:
            return msgpack.load(f)
    supported = ", ".join(SUPPORTED_GRAPH_SUFFIXES)
    raise ValueError(f"Unsupported graph file '{path.name}'. Supported: {supported}")


def graph_from_dict(document: dict[str, Any]) -> MemoryGraph:
    """
    Build a MemoryGraph from a parsed graph document.

    Raises:
        ValueError: On duplicate node or edge ids
        NodeNotFoundError: If an edge refers to an undeclared node
    """
    graph = MemoryGraph(directed=bool(document.get("directed", False)))

    for entry in document.get("nodes", []):
        graph.add_node(entry["id"], **entry.get("attributes", {}))

    for entry in document.get("edges", []):
        source_id = entry["source"]
        target_id = entry["target"]
        edge_id = entry.get("id")
        if edge_id is None:
            # Parallel edges get a numeric suffix
            edge_id = base_id = f"{source_id}-{target_id}"
            suffix = 1
            while graph.get_edge(edge_id) is not None:
                suffix += 1
                edge_id = f"{base_id}#{suffix}"
        graph.add_edge(
            edge_id,
            source_id,
            target_id,
            directed=entry.get("directed"),
            **entry.get("attributes", {}),
        )

    return graph


def load_graph(path: str | Path) -> MemoryGraph:
    """
    Load a graph from a .json or .msgpack file.

    Raises:
        ValueError: If the file type is not supported
        FileNotFoundError: If the file does not exist
    """
    path = Path(path)
    logger.info(f"Loading graph from {path}...")
    graph = graph_from_dict(_read_document(path))
    logger.info(f"Loaded {graph.node_count():,} nodes and {graph.edge_count():,} edges")
    return graph


def save_graph(graph: MemoryGraph, path: str | Path) -> None:
    """Write a MemoryGraph to a .json or .msgpack file."""
    path = Path(path)
    document = {
        "directed": graph.directed,
        "nodes": [{"id": node.id, "attributes": node.attributes} for node in graph.nodes()],
        "edges": [
            {
                "id": edge.id,
                "source": edge.source.id,
                "target": edge.target.id,
                "directed": edge.directed,
                "attributes": edge.attributes,
            }
            for edge in graph.edges()
        ],
    }

    suffix = path.suffix.lower()
    if suffix == ".json":
        with open(path, "w", encoding="utf-8") as f:
            json.dump(document, f, indent=2)
    elif suffix == ".msgpack":
        with open(path, "wb") as f:
            msgpack.dump(document, f)
    else:
        supported = ", ".join(SUPPORTED_GRAPH_SUFFIXES)
        raise ValueError(f"Unsupported graph file '{path.name}'. Supported: {supported}")
    logger.info(f"Saved graph to {path}")
