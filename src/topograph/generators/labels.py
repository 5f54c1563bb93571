"""Category grouping and node label/tooltip construction."""

from __future__ import annotations

import re
from collections import defaultdict
from typing import TYPE_CHECKING

import yaml

from topograph.core.schema import FALLBACK_STATUS_COLOR

if TYPE_CHECKING:
    from topograph.core.schema import Entity, StyleConfig, TooltipConfig

# Runs of letters, digits and underscores count as one word when title-casing
_WORD = re.compile(r"[A-Za-z0-9_]+")


def group_by_category(entities: list[Entity]) -> dict[str, list[Entity]]:
    """
    Group entities by category.

    Categories appear in the order they were first seen, and each group
    keeps the declaration order of its entities.
    """
    groups: dict[str, list[Entity]] = defaultdict(list)
    for entity in entities:
        groups[entity.category].append(entity)
    return dict(groups)


def display_name(category: str, style: StyleConfig) -> str:
    """Human-readable cluster label for a category."""
    config = style.categories.get(category)
    if config and config.display_name:
        return config.display_name
    return _WORD.sub(lambda m: m.group(0)[:1].upper() + m.group(0)[1:], category.lower())


def truncate(description: str, max_length: int, suffix: str) -> str:
    """Cut a description to ``max_length`` characters and mark it with ``suffix``."""
    if len(description) > max_length:
        return description[:max_length] + suffix
    return description


def status_color(status: str, style: StyleConfig) -> str:
    """Resolve a status colour, falling back to the "unknown" entry."""
    colors = style.status_colors
    if color := colors.get(status.lower()):
        return color
    return colors.get("unknown") or FALLBACK_STATUS_COLOR


def build_tooltip(entity: Entity, options: TooltipConfig) -> str:
    """
    Build the plain-text tooltip for an entity.

    The first line is always ``"{id}: {description}"``; the options switch
    on the extra lines. The result is not escaped.
    """
    parts = [f"{entity.id}: {entity.description}"]

    if options.include_status:
        parts.append(f"Status: {entity.status}")

    if options.include_owner:
        parts.append(f"Owner: {entity.owner}")

    if options.include_environment and entity.environment:
        parts.append(f"Environment: {entity.environment}")

    if options.include_tags and entity.tags:
        parts.append(f"Tags: {', '.join(entity.tags)}")

    if options.include_deployment and entity.deployment_config:
        deployment = yaml.safe_dump(
            entity.deployment_config,
            default_flow_style=False,
            sort_keys=False,
        )
        parts.append(f"Deployment:\n{deployment.rstrip()}")

    return "\n".join(parts)
