"""
Friend suggestions: friends of friends who are not already friends, ranked by
how many friends they share with the user.
"""

from collections import Counter
from dataclasses import dataclass
from typing import List, Optional, Set

from socialgraph.common.defaults import DEFAULT_RELATION, SUGGESTION_DEPTH
from socialgraph.graph_construction.store import GraphStore, NodeId
from socialgraph.network_analysis.traversal import TraversalEngine


@dataclass(frozen=True)
class Suggestion:
    node_id: NodeId
    name: Optional[str]
    score: int


class SuggestionRanker:
    def __init__(self, store: GraphStore, traversal: Optional[TraversalEngine] = None):
        self.store = store
        self.traversal = traversal or TraversalEngine(store)

    def rank(
        self,
        start: NodeId,
        direct: Set[NodeId],
        friends_of_friends: Set[NodeId],
        relation: str = DEFAULT_RELATION,
    ) -> List[Suggestion]:
        """
        Score each candidate in `friends_of_friends` by the number of length-2
        paths start -> friend -> candidate, i.e. friends they have in common.
        """
        candidates = friends_of_friends - direct - {start}

        scores: Counter = Counter()
        for friend in direct:
            for nei in self.store.get_neighbors(friend, relation):
                if nei in candidates:
                    scores[nei] += 1

        suggestions: List[Suggestion] = []
        for c in candidates:
            name = self.store.get_node(c).name
            suggestions.append(
                Suggestion(node_id=c, name=None if name is None else str(name), score=scores[c])
            )
        # Score desc, then name asc; id keeps the order total for equal/missing names.
        suggestions.sort(key=lambda s: (-s.score, s.name is None, s.name or "", s.node_id))
        return suggestions

    def suggest_friends(
        self,
        start: NodeId,
        relation: str = DEFAULT_RELATION,
        limit: Optional[int] = None,
    ) -> List[Suggestion]:
        result = self.traversal.traverse(start, SUGGESTION_DEPTH, relation)
        ranked = self.rank(result.start, result.at_depth(1), result.at_depth(2), relation)
        if limit is not None:
            return ranked[:limit]
        return ranked


def suggest_friends(
    store: GraphStore,
    start: NodeId,
    relation: str = DEFAULT_RELATION,
    limit: Optional[int] = None,
) -> List[Suggestion]:
    return SuggestionRanker(store).suggest_friends(start, relation, limit)
