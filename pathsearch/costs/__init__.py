"""
Cost models module.

Provides the pluggable cost strategies used by the search engine:
- WeightedCosts: Edge attribute cost, zero heuristic (Dijkstra)
- DistanceCosts: Euclidean edge length, straight-line heuristic
"""

from pathsearch.costs.base import Costs
from pathsearch.costs.distance import DistanceCosts, edge_length, node_position
from pathsearch.costs.weighted import WeightedCosts

__all__ = [
    "Costs",
    "WeightedCosts",
    "DistanceCosts",
    "node_position",
    "edge_length",
]


def get_costs(name: str, **kwargs) -> Costs:
    """
    Get a cost model by name.

    Args:
        name: Model identifier (weighted, distance)
        **kwargs: Additional arguments passed to the model constructor
            (e.g., weight_attribute)

    Returns:
        Instantiated cost model

    Raises:
        ValueError: If model name is unknown
    """
    models = {
        "weighted": WeightedCosts,
        "distance": DistanceCosts,
    }

    if name not in models:
        available = ", ".join(models.keys())
        raise ValueError(f"Unknown cost model '{name}'. Available: {available}")

    return models[name](**kwargs)
