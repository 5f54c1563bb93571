"""Exceptions raised while loading documents or calling Graphviz."""


class TopographError(Exception):
    """Base class for topograph errors."""

    pass


class TopologyError(TopographError):
    """Raised when a topology document cannot be read or parsed."""

    pass


class StyleError(TopographError):
    """Raised when a style document cannot be read or parsed."""

    pass


class GraphvizError(TopographError):
    """Raised when the Graphviz ``dot`` tool is missing or fails."""

    pass
