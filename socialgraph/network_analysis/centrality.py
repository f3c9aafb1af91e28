"""
Eigenvector centrality by power iteration.

Every node starts at 1.0; each iteration replaces a node's value by the
cost-weighted sum of its neighbors' values, then rescales the vector to unit
L2 norm. Iteration stops when successive vectors are closer than
`tolerance` (L2 distance) or after `max_iterations`; the latter is not an
error and the last vector is kept.
"""

import logging
import math
from dataclasses import dataclass, field
from enum import Enum
from typing import Callable, Dict, List, Optional, Tuple

from socialgraph.common.defaults import (
    DEFAULT_MAX_ITERATIONS,
    DEFAULT_RELATION,
    DEFAULT_TOLERANCE,
)
from socialgraph.common.errors import DegenerateGraph, NodeNotFound, NotReady
from socialgraph.graph_construction.store import GraphStore, NodeId

logger = logging.getLogger(__name__)

# cost(node, neighbor) -> weight of the edge when node collects neighbor's value
EdgeCost = Callable[[NodeId, NodeId], float]


def uniform_cost(node: NodeId, neighbor: NodeId) -> float:
    return 1.0


class CentralityState(str, Enum):
    UNINITIALIZED = "uninitialized"
    ITERATING = "iterating"
    CONVERGED = "converged"
    MAX_ITERATIONS_REACHED = "max_iterations_reached"


@dataclass
class CentralityResult:
    state: CentralityState
    iterations: int
    delta: float
    scores: Dict[NodeId, float] = field(default_factory=dict)

    @property
    def converged(self) -> bool:
        return self.state is CentralityState.CONVERGED


class EigenvectorCentrality:
    def __init__(
        self,
        store: GraphStore,
        relation: str = DEFAULT_RELATION,
        cost: EdgeCost = uniform_cost,
        tolerance: float = DEFAULT_TOLERANCE,
        max_iterations: int = DEFAULT_MAX_ITERATIONS,
    ):
        if tolerance <= 0:
            raise ValueError(f"tolerance must be > 0, got {tolerance}")
        if max_iterations < 1:
            raise ValueError(f"max_iterations must be >= 1, got {max_iterations}")

        self.store = store
        self.relation = relation
        self.cost = cost
        self.tolerance = tolerance
        self.max_iterations = max_iterations

        self._state = CentralityState.UNINITIALIZED
        self._result: Optional[CentralityResult] = None

    @property
    def state(self) -> CentralityState:
        return self._state

    @property
    def result(self) -> Optional[CentralityResult]:
        return self._result

    def _weighted_adjacency(self, nodes: List[NodeId]) -> List[List[Tuple[int, float]]]:
        # nodes are the dense ids 0..n-1, so an id is its own vector index
        weighted: List[List[Tuple[int, float]]] = []
        for node in nodes:
            weighted.append(
                [
                    (nei, float(self.cost(node, nei)))
                    for nei in self.store.get_neighbors(node, self.relation)
                ]
            )
        return weighted

    def calculate(self) -> CentralityResult:
        """
        Run power iteration to convergence or to max_iterations.

        Raises DegenerateGraph if the vector collapses to zero; in that case
        the state and scores of the previous successful run are kept.
        """
        previous_state = self._state
        self._state = CentralityState.ITERATING

        nodes = list(self.store.node_ids())
        n = len(nodes)
        logger.debug(
            "Eigenvector centrality over %d nodes, %d '%s' edges",
            n,
            self.store.edge_count(self.relation),
            self.relation,
        )

        try:
            weighted = self._weighted_adjacency(nodes)
            values = [1.0] * n
            delta = math.inf
            iterations = 0
            state = CentralityState.MAX_ITERATIONS_REACHED

            while iterations < self.max_iterations:
                iterations += 1
                new_values = [0.0] * n
                for i in range(n):
                    acc = 0.0
                    for j, w in weighted[i]:
                        acc += w * values[j]
                    new_values[i] = acc

                norm = math.sqrt(sum(v * v for v in new_values))
                if norm == 0.0:
                    raise DegenerateGraph(self.relation, iterations)
                new_values = [v / norm for v in new_values]

                delta = math.sqrt(sum((a - b) ** 2 for a, b in zip(new_values, values)))
                values = new_values
                logger.debug("  > Iter %d: delta=%.8f", iterations, delta)

                if delta < self.tolerance:
                    state = CentralityState.CONVERGED
                    break
        except DegenerateGraph:
            self._state = previous_state
            logger.error("Centrality aborted: vector collapsed to zero (relation '%s')", self.relation)
            raise
        except Exception:
            self._state = previous_state
            raise

        if state is CentralityState.CONVERGED:
            logger.info("  > Converged after %d iterations (delta=%.3g)", iterations, delta)
        else:
            logger.warning(
                "  > No convergence after %d iterations (delta=%.3g > tolerance=%.3g); keeping last vector",
                iterations,
                delta,
                self.tolerance,
            )

        result = CentralityResult(
            state=state,
            iterations=iterations,
            delta=delta,
            scores={node: values[node] for node in nodes},
        )
        self._result = result
        self._state = state
        return result

    def centrality(self, node_id: NodeId) -> float:
        result = self._result
        if result is None:
            raise NotReady()
        # same id rules as the store: integral, not bool, and scored by the last run
        if not self.store.has_node(node_id) or int(node_id) not in result.scores:
            raise NodeNotFound(node_id)
        return result.scores[int(node_id)]

    def top_nodes(self, k: int = 10) -> List[Tuple[NodeId, float]]:
        result = self._result
        if result is None:
            raise NotReady()
        ranked = sorted(result.scores.items(), key=lambda x: (-x[1], x[0]))
        return ranked[:k]
