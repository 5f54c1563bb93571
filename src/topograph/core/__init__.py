"""Core domain models for infrastructure topology."""

from topograph.core.errors import GraphvizError, StyleError, TopographError, TopologyError
from topograph.core.schema import Connection, Entity, StyleConfig
from topograph.core.style import default_style, load_style
from topograph.core.topology import Topology
from topograph.core.validation import validate

__all__ = [
    "Topology",
    "Entity",
    "Connection",
    "StyleConfig",
    "default_style",
    "load_style",
    "validate",
    "TopographError",
    "TopologyError",
    "StyleError",
    "GraphvizError",
]
