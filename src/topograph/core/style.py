"""Style configuration loading and the built-in default style."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from topograph.core.errors import StyleError
from topograph.core.schema import StyleConfig, TooltipConfig

logger = logging.getLogger(__name__)


def default_style() -> StyleConfig:
    """
    Build the built-in style.

    A new object is returned on every call, so callers may derive their
    own variants with ``model_copy(update=...)`` without affecting others.
    """
    return StyleConfig(
        connection_styles={
            "API_Call": {"style": "dashed", "color": "orange"},
            "Internal_API": {"style": "dotted", "color": "gray"},
            "DB_Connection": {"color": "blue"},
            "Service_Call": {"color": "black"},
            "HTTP_Request": {"color": "black"},
            "User_Interaction": {"color": "purple", "style": "bold"},
        },
        categories={
            "USER_FACING": {"display_name": "User Facing"},
            "FRONTEND": {"display_name": "Frontend"},
            "BACKEND": {"display_name": "Backend"},
            "DATABASE": {"display_name": "Database"},
            "NETWORK": {"display_name": "Network"},
            "INTEGRATION": {"display_name": "Integration"},
            "INFRASTRUCTURE": {"display_name": "Infrastructure"},
            "INTERNAL": {"display_name": "Internal"},
            "CI": {"display_name": "CI/CD"},
            "REGISTRY": {"display_name": "Registry"},
            "CONFIG": {"display_name": "Configuration"},
            "CD": {"display_name": "Deployment"},
            "ENVIRONMENT": {"display_name": "Environment"},
            "SCM": {"display_name": "Source Control"},
        },
        tooltip=TooltipConfig(
            include_status=True,
            include_owner=True,
            include_environment=True,
            include_tags=True,
            include_deployment=True,
        ),
    )


def style_from_dict(data: dict[str, Any] | None) -> StyleConfig:
    """Create a style from a dictionary; missing sections take model defaults."""
    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise StyleError(f"Style must be a mapping, got {type(data).__name__}")
    try:
        return StyleConfig(**data)
    except ValidationError as e:
        raise StyleError(f"Invalid style configuration: {e}") from e


def load_style(path: str | Path) -> StyleConfig:
    """Load style configuration from YAML file."""
    path = Path(path)
    try:
        with path.open() as f:
            data = yaml.safe_load(f)
    except OSError as e:
        raise StyleError(f"Cannot read style file {path}: {e}") from e
    except yaml.YAMLError as e:
        raise StyleError(f"Invalid YAML in style file {path}: {e}") from e

    logger.debug("Loaded style from %s", path)
    return style_from_dict(data)
