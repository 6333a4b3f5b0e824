"""
Configuration constants for the pathsearch project.

All paths, defaults, and tunable parameters are defined here.
Overrides are read from environment variables (a project-level .env is
loaded first).
"""

import os
from pathlib import Path

from dotenv import load_dotenv

# =============================================================================
# Path Configuration
# =============================================================================

# Project root is parent of pathsearch/
PROJECT_ROOT = Path(__file__).parent.parent

# Sample graph files for the CLI live here
DATA_DIR = PROJECT_ROOT / "data"

load_dotenv(PROJECT_ROOT / ".env")

# =============================================================================
# Cost Configuration
# =============================================================================

# Edge attribute read by the weighted cost model
DEFAULT_WEIGHT_ATTRIBUTE = os.environ.get("PATHSEARCH_WEIGHT_ATTRIBUTE", "weight")

# Cost of an edge that has no usable weight attribute
DEFAULT_EDGE_COST = 1.0

# Node position lookup, in order of preference:
# a combined vector attribute, then one numeric attribute per axis
POSITION_VECTOR_ATTRIBUTES = ("xyz", "xy")
POSITION_AXIS_ATTRIBUTES = ("x", "y", "z")

# =============================================================================
# Loader Configuration
# =============================================================================

SUPPORTED_GRAPH_SUFFIXES = (".json", ".msgpack")

# =============================================================================
# Logging Configuration
# =============================================================================

# Log level (DEBUG, INFO, WARNING, ERROR)
LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO")
