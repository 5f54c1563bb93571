"""
Topograph - Infrastructure topology diagrams from declarative YAML.

This package provides tools for:
- Declaring infrastructure entities and typed connections in YAML
- Validating topology structure before rendering
- Rendering styled Graphviz DOT diagrams grouped by category
- Rasterizing diagrams with the Graphviz ``dot`` tool
"""

from __future__ import annotations

__version__ = "0.1.0"

from topograph.core.schema import StyleConfig
from topograph.core.style import default_style, load_style
from topograph.core.topology import Topology
from topograph.core.validation import validate
from topograph.generators.dot import generate_dot


def render(topology: Topology, style: StyleConfig | None = None) -> str:
    """Render a topology as DOT text, using the built-in style when none is given."""
    return generate_dot(topology, style or default_style())


__all__ = [
    "__version__",
    "Topology",
    "StyleConfig",
    "default_style",
    "load_style",
    "render",
    "validate",
]
