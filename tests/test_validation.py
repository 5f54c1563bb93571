"""Tests for topology validation."""

import pytest

from topograph.core.topology import Topology
from topograph.core.validation import validate


@pytest.fixture
def valid_topology_data():
    """A small topology with no problems."""
    return {
        "entities": [
            {
                "id": "Web",
                "category": "FRONTEND",
                "description": "Web frontend",
                "status": "healthy",
            },
            {
                "id": "Orders-DB",
                "category": "DATABASE",
                "description": "Orders database",
                "status": "degraded",
            },
        ],
        "connections": [
            {"from": "Web", "to": "Orders-DB", "type": "DB_Connection"},
        ],
    }


class TestValidate:
    """Tests for validate()."""

    def test_valid_topology(self, valid_topology_data):
        """A well-formed topology has no errors."""
        assert validate(Topology.from_dict(valid_topology_data)) == []

    def test_empty_topology(self):
        """At least one entity is required."""
        errors = validate(Topology.from_dict({}))
        assert errors == ["Topology must have at least one entity"]

    def test_missing_id(self, valid_topology_data):
        """An entity without ID is reported by index and its other checks are skipped."""
        valid_topology_data["entities"].append({"category": "", "description": ""})
        errors = validate(Topology.from_dict(valid_topology_data))
        assert errors == ["Entity 2: ID is required"]

    def test_invalid_id(self, valid_topology_data):
        """IDs must follow the naming rules."""
        valid_topology_data["entities"][0]["id"] = "1web"
        valid_topology_data["connections"] = []
        errors = validate(Topology.from_dict(valid_topology_data))
        assert len(errors) == 1
        assert errors[0].startswith("Entity 1web: ID contains invalid characters.")

    def test_duplicate_ids(self):
        """Duplicates are reported without raising."""
        topology = Topology.from_dict({
            "entities": [
                {"id": "A", "category": "C", "description": "d", "status": "healthy"},
                {"id": "A", "category": "C", "description": "d", "status": "healthy"},
                {"id": "A", "category": "C", "description": "d", "status": "healthy"},
            ]
        })
        errors = validate(topology)
        assert errors.count("Duplicate entity ID: A") == 2

    def test_required_fields(self):
        """Category, description and status are each reported."""
        topology = Topology.from_dict({"entities": [{"id": "Web"}]})
        assert validate(topology) == [
            "Entity Web: Category is required",
            "Entity Web: Description is required",
            "Entity Web: Status is required",
        ]

    def test_missing_connection_target(self, valid_topology_data):
        """A connection to an unknown entity gives exactly one 'does not exist' error."""
        valid_topology_data["connections"].append(
            {"from": "Web", "to": "Ghost", "type": "API_Call"}
        )
        errors = validate(Topology.from_dict(valid_topology_data))
        assert errors == ["Connection 1: To entity 'Ghost' does not exist"]

    def test_connection_required_fields(self, valid_topology_data):
        """Empty endpoints and type are reported separately."""
        valid_topology_data["connections"] = [{}]
        errors = validate(Topology.from_dict(valid_topology_data))
        assert errors == [
            "Connection 0: From is required",
            "Connection 0: To is required",
            "Connection 0: Type is required",
        ]

    def test_connection_invalid_endpoint(self, valid_topology_data):
        """An endpoint with bad characters is both invalid and unknown."""
        valid_topology_data["connections"] = [
            {"from": "Web server", "to": "Web", "type": "API_Call"}
        ]
        errors = validate(Topology.from_dict(valid_topology_data))
        assert len(errors) == 2
        assert errors[0].startswith("Connection 0: From entity ID 'Web server' contains invalid characters.")
        assert errors[1] == "Connection 0: From entity 'Web server' does not exist"

    def test_endpoints_use_original_ids(self, valid_topology_data):
        """References are matched against unsanitized IDs."""
        valid_topology_data["connections"] = [
            {"from": "Web", "to": "Orders_DB", "type": "DB_Connection"}
        ]
        errors = validate(Topology.from_dict(valid_topology_data))
        assert errors == ["Connection 0: To entity 'Orders_DB' does not exist"]

    def test_accumulates_all_errors(self):
        """Validation does not stop at the first problem."""
        topology = Topology.from_dict({
            "entities": [
                {"id": "", "category": "C"},
                {"id": "9lives", "description": "d", "status": "up"},
            ],
            "connections": [{"from": "Nope", "to": "9lives"}],
        })
        errors = validate(topology)
        assert "Entity 0: ID is required" in errors
        assert "Entity 9lives: Category is required" in errors
        assert "Connection 0: From entity 'Nope' does not exist" in errors
        assert "Connection 0: Type is required" in errors
        assert len(errors) == 6

    def test_ids_colliding_after_sanitization(self, valid_topology_data):
        """Distinct ids that map to the same node identifier are reported."""
        valid_topology_data["entities"].append(
            {"id": "Orders_DB", "category": "DATABASE", "description": "Copy", "status": "healthy"}
        )
        errors = validate(Topology.from_dict(valid_topology_data))
        assert errors == [
            "Entity Orders_DB: ID collides with 'Orders-DB' once dashes are "
            "converted to underscores (both become 'Orders_DB')"
        ]

    def test_does_not_modify_topology(self, valid_topology_data):
        topology = Topology.from_dict(valid_topology_data)
        before = [e.model_dump() for e in topology.entities]
        validate(topology)
        assert [e.model_dump() for e in topology.entities] == before
