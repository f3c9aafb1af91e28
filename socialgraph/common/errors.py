"""Exception hierarchy for the social-graph core."""

from typing import Any, Optional


class GraphError(Exception):
    """Base class for every error raised by the graph core."""


class NodeNotFound(GraphError, KeyError):
    """Raised when an operation references a node id that was never created."""

    def __init__(self, node_id: Any):
        super().__init__(node_id)
        self.node_id = node_id

    def __str__(self) -> str:
        return f"Node {self.node_id!r} does not exist"


class InvalidEdge(GraphError, ValueError):
    """Raised for edges the store refuses to hold (self-loops)."""

    def __init__(self, source: int, target: int, reason: str = "self-loop"):
        super().__init__(f"Invalid edge {source} - {target}: {reason}")
        self.source = source
        self.target = target
        self.reason = reason


class DegenerateGraph(GraphError):
    """Raised when power iteration produces an all-zero vector (no usable edges)."""

    def __init__(self, relation: str, iteration: int):
        super().__init__(
            f"Centrality vector collapsed to zero at iteration {iteration} "
            f"(relation '{relation}' has no edges)"
        )
        self.relation = relation
        self.iteration = iteration


class NotReady(GraphError):
    """Raised when centrality is read before any successful calculation."""

    def __init__(self, message: Optional[str] = None):
        super().__init__(message or "Centrality has not been calculated yet")
