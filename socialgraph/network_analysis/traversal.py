"""Bounded-depth breadth-first traversal over one relation of a GraphStore."""

from dataclasses import dataclass, field
from typing import Dict, Optional, Set

from socialgraph.common.defaults import DEFAULT_RELATION
from socialgraph.graph_construction.store import GraphStore, NodeId


@dataclass
class TraversalResult:
    """
    Nodes discovered at each depth 1..max_depth. A node appears in exactly one
    frontier (the depth of its shortest path); the start node in none.
    """

    start: NodeId
    max_depth: int
    relation: str
    frontiers: Dict[int, Set[NodeId]] = field(default_factory=dict)

    def at_depth(self, depth: int) -> Set[NodeId]:
        return set(self.frontiers.get(depth, ()))

    def reachable(self) -> Set[NodeId]:
        out: Set[NodeId] = set()
        for frontier in self.frontiers.values():
            out |= frontier
        return out

    def depth_of(self, node_id: NodeId) -> Optional[int]:
        for depth, frontier in self.frontiers.items():
            if node_id in frontier:
                return depth
        return None


class TraversalEngine:
    def __init__(self, store: GraphStore):
        self.store = store

    def traverse(
        self,
        start: NodeId,
        max_depth: int,
        relation: str = DEFAULT_RELATION,
    ) -> TraversalResult:
        start = self.store.resolve(start)
        if max_depth < 0:
            raise ValueError(f"max_depth must be >= 0, got {max_depth}")

        result = TraversalResult(start=start, max_depth=max_depth, relation=relation)
        for depth in range(1, max_depth + 1):
            result.frontiers[depth] = set()

        visited: Set[NodeId] = {start}
        frontier: Set[NodeId] = {start}
        depth = 0
        while frontier and depth < max_depth:
            depth += 1
            next_frontier: Set[NodeId] = set()
            for node in frontier:
                for nei in self.store.get_neighbors(node, relation):
                    if nei not in visited:
                        visited.add(nei)
                        next_frontier.add(nei)
            result.frontiers[depth] = next_frontier
            frontier = next_frontier

        return result


def traverse(
    store: GraphStore,
    start: NodeId,
    max_depth: int,
    relation: str = DEFAULT_RELATION,
) -> TraversalResult:
    return TraversalEngine(store).traverse(start, max_depth, relation)
