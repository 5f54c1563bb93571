"""Pydantic schemas for topology and style documents."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

# Used when a style carries no "unknown" status colour
FALLBACK_STATUS_COLOR = "lightgray"

DEFAULT_STATUS_COLORS: dict[str, str] = {
    "healthy": "green",
    "degraded": "yellow",
    "down": "red",
    "unknown": FALLBACK_STATUS_COLOR,
}


def _coerce_text(v: Any) -> Any:
    """Read YAML nulls as empty strings and scalars as text."""
    if v is None:
        return ""
    if isinstance(v, (bool, int, float)):
        return str(v)
    return v


# --- Topology Schemas ---


class Entity(BaseModel):
    """
    A node of the topology.

    Every field is optional at parse time so that missing values are
    reported by the validator instead of failing the whole document.
    """

    model_config = ConfigDict(frozen=True)

    id: str = ""
    category: str = ""
    description: str = ""
    status: str = ""
    owner: str = ""
    environment: str = ""
    tags: list[str] = Field(default_factory=list)
    attributes: dict[str, str] = Field(default_factory=dict)
    deployment_config: dict[str, Any] = Field(default_factory=dict)

    # Rendering hints, kept but not drawn
    shape: str = ""
    icon: str = ""

    @field_validator(
        "id", "category", "description", "status", "owner", "environment", "shape", "icon",
        mode="before",
    )
    @classmethod
    def normalize_text(cls, v: Any) -> Any:
        return _coerce_text(v)

    @field_validator("tags", mode="before")
    @classmethod
    def normalize_tags(cls, v: Any) -> Any:
        """Accept a missing tag list and non-string tags."""
        if v is None:
            return []
        if isinstance(v, list):
            return [_coerce_text(tag) for tag in v]
        return v

    @field_validator("attributes", mode="before")
    @classmethod
    def normalize_attributes(cls, v: Any) -> Any:
        """Attributes are free-form text; numbers and booleans become strings."""
        if v is None:
            return {}
        if isinstance(v, dict):
            return {str(key): _coerce_text(value) for key, value in v.items()}
        return v

    @field_validator("deployment_config", mode="before")
    @classmethod
    def normalize_deployment(cls, v: Any) -> Any:
        return {} if v is None else v


class Connection(BaseModel):
    """A directed, typed edge between two entities."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    from_: str = Field(default="", alias="from")
    to: str = ""
    type: str = ""

    @field_validator("from_", "to", "type", mode="before")
    @classmethod
    def normalize_text(cls, v: Any) -> Any:
        return _coerce_text(v)


class TopologySchema(BaseModel):
    """Schema for a complete topology document."""

    model_config = ConfigDict(frozen=True)

    entities: list[Entity] = Field(default_factory=list)
    connections: list[Connection] = Field(default_factory=list)

    @field_validator("entities", "connections", mode="before")
    @classmethod
    def normalize_sections(cls, v: Any) -> Any:
        return [] if v is None else v


# --- Style Schemas ---


class GraphConfig(BaseModel):
    """Graph-level defaults written into the DOT header."""

    direction: str = "LR"
    font_family: str = "Helvetica"
    node_shape: str = "plaintext"


class ConnectionStyle(BaseModel):
    """Edge attributes for one connection type."""

    color: str | None = None
    style: str | None = None


class CategoryConfig(BaseModel):
    """Display settings for one entity category."""

    display_name: str = ""
    cluster_style: str = ""


class NodeConfig(BaseModel):
    """Node table layout parameters."""

    max_description_length: int = Field(default=24, ge=0)
    truncation_suffix: str = "..."
    border_width: int = Field(default=1, ge=0)
    cell_border: int = Field(default=0, ge=0)
    cell_spacing: int = Field(default=0, ge=0)
    status_bar_height: int = Field(default=8, ge=0)


class TooltipConfig(BaseModel):
    """Which optional lines go into a node tooltip."""

    include_status: bool = False
    include_owner: bool = False
    include_environment: bool = False
    include_tags: bool = False
    include_deployment: bool = False


class StyleConfig(BaseModel):
    """
    Schema for a style document.

    Sections left out of a style file take these defaults. Status colour
    keys are lower-cased so lookups are case-insensitive.
    """

    model_config = ConfigDict(frozen=True)

    graph: GraphConfig = Field(default_factory=GraphConfig)
    status_colors: dict[str, str] = Field(default_factory=lambda: dict(DEFAULT_STATUS_COLORS))
    connection_styles: dict[str, ConnectionStyle] = Field(default_factory=dict)
    categories: dict[str, CategoryConfig] = Field(default_factory=dict)
    node: NodeConfig = Field(default_factory=NodeConfig)
    tooltip: TooltipConfig = Field(default_factory=TooltipConfig)

    @field_validator("status_colors", mode="before")
    @classmethod
    def lowercase_status_keys(cls, v: Any) -> Any:
        if v is None:
            return {}
        if isinstance(v, dict):
            return {str(key).lower(): value for key, value in v.items()}
        return v

    @field_validator("connection_styles", "categories", mode="before")
    @classmethod
    def normalize_tables(cls, v: Any) -> Any:
        """Accept empty entries such as ``Service_Call:`` with no body."""
        if v is None:
            return {}
        if isinstance(v, dict):
            return {key: {} if value is None else value for key, value in v.items()}
        return v
