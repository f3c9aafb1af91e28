"""In-memory social-graph analytics: traversal, friend suggestions, eigenvector centrality."""

from socialgraph.common.errors import (
    DegenerateGraph,
    GraphError,
    InvalidEdge,
    NodeNotFound,
    NotReady,
)
from socialgraph.graph_construction.store import Direction, GraphStore, Node
from socialgraph.network import SocialNetwork
from socialgraph.network_analysis.centrality import (
    CentralityResult,
    CentralityState,
    EigenvectorCentrality,
    uniform_cost,
)
from socialgraph.network_analysis.suggestions import Suggestion, SuggestionRanker
from socialgraph.network_analysis.traversal import TraversalEngine, TraversalResult

__version__ = "0.1.0"

__all__ = [
    "CentralityResult",
    "CentralityState",
    "DegenerateGraph",
    "Direction",
    "EigenvectorCentrality",
    "GraphError",
    "GraphStore",
    "InvalidEdge",
    "Node",
    "NodeNotFound",
    "NotReady",
    "SocialNetwork",
    "Suggestion",
    "SuggestionRanker",
    "TraversalEngine",
    "TraversalResult",
    "uniform_cost",
]
