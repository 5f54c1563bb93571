"""Topology loading and lookup."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Iterator

import yaml
from pydantic import ValidationError

from topograph.core.errors import TopologyError
from topograph.core.schema import Connection, Entity, TopologySchema

logger = logging.getLogger(__name__)


class Topology:
    """
    An ordered set of entities and the connections between them.

    Entity order and connection order are kept exactly as declared; the
    renderer relies on both.
    """

    def __init__(self, entities: list[Entity], connections: list[Connection] | None = None) -> None:
        self._schema = TopologySchema(entities=entities, connections=connections or [])
        self._ids: set[str] = {entity.id for entity in self._schema.entities}

    @classmethod
    def load(cls, path: str | Path) -> Topology:
        """Load topology from YAML file."""
        path = Path(path)
        try:
            text = path.read_text()
        except OSError as e:
            raise TopologyError(f"Cannot read topology file {path}: {e}") from e
        logger.debug("Loading topology from %s", path)
        return cls.from_yaml(text)

    @classmethod
    def from_yaml(cls, text: str) -> Topology:
        """Create topology from a YAML document."""
        try:
            data = yaml.safe_load(text)
        except yaml.YAMLError as e:
            raise TopologyError(f"Invalid YAML: {e}") from e
        return cls.from_dict(data)

    @classmethod
    def from_dict(cls, data: dict[str, Any] | None) -> Topology:
        """Create topology from dictionary."""
        if data is None:
            data = {}
        if not isinstance(data, dict):
            raise TopologyError(f"Topology must be a mapping, got {type(data).__name__}")
        try:
            schema = TopologySchema(**data)
        except ValidationError as e:
            raise TopologyError(f"Invalid topology: {e}") from e
        logger.debug(
            "Parsed topology: %d entities, %d connections",
            len(schema.entities),
            len(schema.connections),
        )
        return cls(schema.entities, schema.connections)

    @property
    def entities(self) -> list[Entity]:
        return self._schema.entities

    @property
    def connections(self) -> list[Connection]:
        return self._schema.connections

    def categories(self) -> list[str]:
        """Get categories in first-seen order."""
        return list(dict.fromkeys(e.category for e in self._schema.entities))

    def connection_types(self) -> list[str]:
        """Get connection types in first-seen order."""
        return list(dict.fromkeys(c.type for c in self._schema.connections))

    def __len__(self) -> int:
        return len(self._schema.entities)

    def __iter__(self) -> Iterator[Entity]:
        return iter(self._schema.entities)

    def __contains__(self, entity_id: str) -> bool:
        """Check an original (unsanitized) identifier against the declared entities."""
        return entity_id in self._ids

    def __repr__(self) -> str:
        return f"Topology({len(self.entities)} entities, {len(self.connections)} connections)"
