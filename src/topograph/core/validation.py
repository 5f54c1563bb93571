"""Structural validation of topologies."""

from __future__ import annotations

from typing import TYPE_CHECKING

from topograph.core.identifiers import is_valid_identifier, sanitize_identifier

if TYPE_CHECKING:
    from topograph.core.topology import Topology

ID_RULES = (
    "IDs must start with a letter and contain only letters, numbers, "
    "underscores, and dashes."
)


def validate(topology: Topology) -> list[str]:
    """
    Check a topology for structural problems.

    Every violation is reported; an empty list means the topology is
    valid. The topology is never modified and no exception is raised for
    bad input.
    """
    errors: list[str] = []

    if not topology.entities:
        errors.append("Topology must have at least one entity")

    seen_ids: set[str] = set()
    # Sanitized id -> first original id that produced it
    node_ids: dict[str, str] = {}
    for index, entity in enumerate(topology.entities):
        if not entity.id:
            errors.append(f"Entity {index}: ID is required")
            continue

        if not is_valid_identifier(entity.id):
            errors.append(
                f"Entity {entity.id}: ID contains invalid characters. {ID_RULES} "
                "Dashes are converted to underscores in the diagram."
            )

        if entity.id in seen_ids:
            errors.append(f"Duplicate entity ID: {entity.id}")
        seen_ids.add(entity.id)

        node_id = sanitize_identifier(entity.id)
        first = node_ids.setdefault(node_id, entity.id)
        if first != entity.id:
            errors.append(
                f"Entity {entity.id}: ID collides with '{first}' once dashes "
                f"are converted to underscores (both become '{node_id}')"
            )

        if not entity.category:
            errors.append(f"Entity {entity.id}: Category is required")
        if not entity.description:
            errors.append(f"Entity {entity.id}: Description is required")
        if not entity.status:
            errors.append(f"Entity {entity.id}: Status is required")

    for index, conn in enumerate(topology.connections):
        errors.extend(_check_endpoint(index, "From", conn.from_, topology))
        errors.extend(_check_endpoint(index, "To", conn.to, topology))

        if not conn.type:
            errors.append(f"Connection {index}: Type is required")

    return errors


def _check_endpoint(index: int, side: str, entity_id: str, topology: Topology) -> list[str]:
    if not entity_id:
        return [f"Connection {index}: {side} is required"]

    errors = []
    if not is_valid_identifier(entity_id):
        errors.append(
            f"Connection {index}: {side} entity ID '{entity_id}' contains invalid characters. {ID_RULES}"
        )
    if entity_id not in topology:
        errors.append(f"Connection {index}: {side} entity '{entity_id}' does not exist")
    return errors
