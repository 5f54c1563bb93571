"""Tests for the host-facing API functions."""

from topograph.api import get_templates, validate_yaml, yaml_to_dot
from topograph.core.schema import StyleConfig
from topograph.core.topology import Topology
from topograph.core.validation import validate

SIMPLE_YAML = """\
entities:
  - id: A
    category: BACKEND
    description: Service A
    status: healthy
  - id: B
    category: BACKEND
    description: Service B
    status: down
connections:
  - from: A
    to: B
    type: DB_Connection
"""


class TestYamlToDot:
    """Tests for yaml_to_dot."""

    def test_success(self):
        result = yaml_to_dot(SIMPLE_YAML)

        assert result["status"] == "success"
        assert result["error"] is None
        assert result["dot"].startswith("digraph Infrastructure {")
        assert '  A -> B [label="DB_Connection", color=blue];' in result["dot"]

    def test_custom_style(self):
        result = yaml_to_dot(SIMPLE_YAML, StyleConfig())
        assert '  A -> B [label="DB_Connection"];' in result["dot"]

    def test_parse_error(self):
        result = yaml_to_dot("entities: [unclosed")

        assert result["status"] == "error"
        assert result["dot"] is None
        assert result["error"].startswith("Failed to parse YAML:")

    def test_renders_invalid_topology(self):
        """Structural problems do not stop rendering."""
        result = yaml_to_dot("connections:\n  - from: A\n    to: Ghost\n    type: X\n")
        assert result["status"] == "success"
        assert "  A -> Ghost [label=\"X\"];" in result["dot"]


class TestValidateYaml:
    """Tests for validate_yaml."""

    def test_valid(self):
        assert validate_yaml(SIMPLE_YAML) == {"valid": True, "errors": []}

    def test_invalid(self):
        result = validate_yaml(SIMPLE_YAML.replace("to: B", "to: Ghost"))
        assert result["valid"] is False
        assert result["errors"] == ["Connection 0: To entity 'Ghost' does not exist"]

    def test_parse_error(self):
        result = validate_yaml("entities: [unclosed")
        assert result["valid"] is False
        assert len(result["errors"]) == 1
        assert result["errors"][0].startswith("Invalid YAML:")


class TestGetTemplates:
    """Tests for get_templates."""

    def test_bundled_templates(self):
        templates = get_templates()
        assert list(templates) == sorted(templates)
        assert {"web-app", "microservices", "ci-cd"} <= set(templates)

    def test_templates_are_valid(self):
        """Every bundled template passes validation."""
        for name, text in get_templates().items():
            assert validate(Topology.from_yaml(text)) == [], name
