"""
SocialNetwork: one object carrying the whole embedded API, bulk-load
operations on one side and read-only analytics on the other.
"""

from typing import Any, Dict, Iterable, List, Mapping, Optional, Set

from socialgraph.common.defaults import (
    DEFAULT_MAX_ITERATIONS,
    DEFAULT_RELATION,
    DEFAULT_TOLERANCE,
    INDEXED_ATTRIBUTES,
)
from socialgraph.graph_construction.store import Direction, GraphStore, NodeId
from socialgraph.network_analysis.centrality import (
    CentralityResult,
    EdgeCost,
    EigenvectorCentrality,
    uniform_cost,
)
from socialgraph.network_analysis.suggestions import Suggestion, SuggestionRanker
from socialgraph.network_analysis.traversal import TraversalEngine, TraversalResult


class SocialNetwork:
    def __init__(
        self,
        store: Optional[GraphStore] = None,
        indexed_attributes: Iterable[str] = INDEXED_ATTRIBUTES,
    ):
        self.store = store if store is not None else GraphStore(indexed_attributes)
        self.traversal = TraversalEngine(self.store)
        self.ranker = SuggestionRanker(self.store, self.traversal)
        # relation -> engine of the last calculate() for that relation
        self._centrality: Dict[str, EigenvectorCentrality] = {}

    # ---------- BULK LOAD ----------

    def create_node(self, attributes: Optional[Mapping[str, Any]] = None) -> NodeId:
        return self.store.create_node(attributes)

    def add_edge(self, a: NodeId, b: NodeId, relation: str = DEFAULT_RELATION) -> bool:
        return self.store.add_edge(a, b, relation)

    # ---------- QUERIES ----------

    def get_neighbors(
        self,
        node_id: NodeId,
        relation: str = DEFAULT_RELATION,
        direction: Direction = Direction.BOTH,
    ) -> Set[NodeId]:
        return self.store.get_neighbors(node_id, relation, direction)

    def index_lookup(self, attribute: str, value: Any) -> Set[NodeId]:
        return self.store.index_lookup(attribute, value)

    def traverse(
        self, start: NodeId, max_depth: int, relation: str = DEFAULT_RELATION
    ) -> TraversalResult:
        return self.traversal.traverse(start, max_depth, relation)

    def suggest_friends(
        self,
        start: NodeId,
        relation: str = DEFAULT_RELATION,
        limit: Optional[int] = None,
    ) -> List[Suggestion]:
        return self.ranker.suggest_friends(start, relation, limit)

    # ---------- CENTRALITY ----------

    def calculate(
        self,
        relation: str = DEFAULT_RELATION,
        cost: EdgeCost = uniform_cost,
        tolerance: float = DEFAULT_TOLERANCE,
        max_iterations: int = DEFAULT_MAX_ITERATIONS,
    ) -> CentralityResult:
        engine = self._centrality.get(relation)
        if (
            engine is None
            or engine.cost is not cost
            or engine.tolerance != tolerance
            or engine.max_iterations != max_iterations
        ):
            engine = EigenvectorCentrality(
                self.store,
                relation=relation,
                cost=cost,
                tolerance=tolerance,
                max_iterations=max_iterations,
            )
        result = engine.calculate()
        self._centrality[relation] = engine
        return result

    def centrality_engine(self, relation: str = DEFAULT_RELATION) -> EigenvectorCentrality:
        """Engine for `relation`; an uncalculated one if calculate() never succeeded."""
        engine = self._centrality.get(relation)
        if engine is None:
            engine = EigenvectorCentrality(self.store, relation=relation)
        return engine

    def centrality(self, node_id: NodeId, relation: str = DEFAULT_RELATION) -> float:
        return self.centrality_engine(relation).centrality(node_id)
