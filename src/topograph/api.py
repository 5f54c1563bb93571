"""
String-in, dict-out functions for embedding topograph in a host application.

Each function takes YAML text and returns plain data, so results can be
handed to another runtime (JSON, a web frontend, an editor plugin) without
catching exceptions on the caller's side.
"""

from __future__ import annotations

import logging
from importlib import resources
from typing import Any

from topograph.core.errors import TopologyError
from topograph.core.schema import StyleConfig
from topograph.core.style import default_style
from topograph.core.topology import Topology
from topograph.core.validation import validate
from topograph.generators.dot import generate_dot

logger = logging.getLogger(__name__)

TEMPLATE_SUFFIX = ".yml"


def yaml_to_dot(text: str, style: StyleConfig | None = None) -> dict[str, Any]:
    """
    Render a YAML topology to DOT.

    Returns ``{"dot": str, "error": None, "status": "success"}``, or
    ``{"dot": None, "error": message, "status": "error"}`` when the YAML
    cannot be parsed.
    """
    try:
        topology = Topology.from_yaml(text)
    except TopologyError as e:
        logger.debug("yaml_to_dot: %s", e)
        return {"dot": None, "error": f"Failed to parse YAML: {e}", "status": "error"}

    return {
        "dot": generate_dot(topology, style or default_style()),
        "error": None,
        "status": "success",
    }


def validate_yaml(text: str) -> dict[str, Any]:
    """Validate a YAML topology; returns ``{"valid": bool, "errors": [...]}``."""
    try:
        topology = Topology.from_yaml(text)
    except TopologyError as e:
        return {"valid": False, "errors": [f"Invalid YAML: {e}"]}

    errors = validate(topology)
    return {"valid": not errors, "errors": errors}


def get_templates() -> dict[str, str]:
    """Bundled topology templates, name -> YAML text, sorted by name."""
    templates: dict[str, str] = {}
    root = resources.files("topograph").joinpath("templates")
    for entry in sorted(root.iterdir(), key=lambda e: e.name):
        if entry.is_file() and entry.name.endswith(TEMPLATE_SUFFIX):
            templates[entry.name[: -len(TEMPLATE_SUFFIX)]] = entry.read_text(encoding="utf-8")
    logger.debug("Loaded %d templates", len(templates))
    return templates
