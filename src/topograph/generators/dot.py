"""Graphviz DOT diagram generation."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from topograph.core.identifiers import dot_identifier, escape_for_markup, escape_html
from topograph.generators.labels import (
    build_tooltip,
    display_name,
    group_by_category,
    status_color,
    truncate,
)

if TYPE_CHECKING:
    from topograph.core.schema import Connection, Entity, StyleConfig
    from topograph.core.topology import Topology

logger = logging.getLogger(__name__)


def generate_dot(topology: Topology, style: StyleConfig) -> str:
    """
    Generate Graphviz DOT diagram.

    Entities are drawn in one cluster per category, connections follow in
    declaration order. Missing style entries fall back to defaults, so this
    never fails; run the validator first when input integrity matters.

    Can be rendered with: dot -Tpng infrastructure.dot -o infrastructure.png
    """
    lines = [
        "digraph Infrastructure {",
        f"  rankdir={style.graph.direction};",
        f'  node [shape={style.graph.node_shape}, fontname="{escape_for_markup(style.graph.font_family)}"];',
    ]

    groups = group_by_category(topology.entities)
    for category, entities in groups.items():
        lines.extend(_cluster_lines(category, entities, style))

    for conn in topology.connections:
        lines.append(_edge_line(conn, style))

    lines.append("}")

    logger.debug(
        "Generated DOT: %d clusters, %d nodes, %d edges",
        len(groups),
        len(topology.entities),
        len(topology.connections),
    )
    return "\n".join(lines) + "\n"


def _cluster_lines(category: str, entities: list[Entity], style: StyleConfig) -> list[str]:
    lines = [
        f"  subgraph cluster_{category} {{",
        f'    label="{escape_for_markup(display_name(category, style))}";',
    ]

    config = style.categories.get(category)
    if config and config.cluster_style:
        lines.append(f"    style={config.cluster_style};")

    for entity in entities:
        lines.extend(_node_lines(entity, style))

    lines.append("  }")
    return lines


def _node_lines(entity: Entity, style: StyleConfig) -> list[str]:
    node = style.node
    tooltip = escape_for_markup(build_tooltip(entity, style.tooltip))
    description = escape_html(
        truncate(entity.description, node.max_description_length, node.truncation_suffix)
    )
    color = status_color(entity.status, style)

    # Node identifier is sanitized (and quoted if a keyword), the label keeps the original id
    return [
        f'    {dot_identifier(entity.id)} [tooltip="{tooltip}" label=<',
        f'      <TABLE BORDER="{node.border_width}" CELLBORDER="{node.cell_border}" CELLSPACING="{node.cell_spacing}">',
        f"        <TR><TD><B>{escape_html(entity.id)}</B></TD></TR>",
        f"        <TR><TD>{description}</TD></TR>",
        f'        <TR><TD BGCOLOR="{color}" HEIGHT="{node.status_bar_height}"></TD></TR>',
        "      </TABLE>",
        "    >];",
    ]


def _edge_line(conn: Connection, style: StyleConfig) -> str:
    source = dot_identifier(conn.from_)
    target = dot_identifier(conn.to)
    attrs = [f'label="{escape_for_markup(conn.type)}"']
    attrs.extend(connection_attributes(conn.type, style))
    return f"  {source} -> {target} [{', '.join(attrs)}];"


def connection_attributes(connection_type: str, style: StyleConfig) -> list[str]:
    """Edge attributes for a connection type; only configured ones are emitted."""
    conn_style = style.connection_styles.get(connection_type)
    if conn_style is None:
        return []

    attrs = []
    if conn_style.color:
        attrs.append(f"color={conn_style.color}")
    if conn_style.style:
        attrs.append(f"style={conn_style.style}")
    return attrs
