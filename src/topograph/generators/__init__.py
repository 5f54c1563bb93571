"""Generators for diagrams."""

from topograph.generators.dot import generate_dot

__all__ = [
    "generate_dot",
]
