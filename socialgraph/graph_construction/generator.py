"""
Synthetic social network: random users (name, gender, age) and random
friendships between them. Always driven by an explicit random.Random so runs
are reproducible.
"""

import logging
import random
from typing import List, Optional

from tqdm import tqdm

from socialgraph.common.defaults import (
    DEFAULT_RELATION,
    GENDERS,
    MAX_AGE,
    NUMBER_OF_RELATIONS,
    NUMBER_OF_USERS,
)
from socialgraph.graph_construction.store import GraphStore, NodeId

logger = logging.getLogger(__name__)


def generate_users(
    store: GraphStore,
    count: int = NUMBER_OF_USERS,
    rng: Optional[random.Random] = None,
    progress: bool = False,
) -> List[NodeId]:
    """Create `count` users named user0..user{count-1}; returns their ids."""
    rng = rng or random.Random()
    offset = store.node_count
    ids: List[NodeId] = []
    for i in tqdm(range(count), desc="Users", unit="node", disable=not progress):
        ids.append(
            store.create_node(
                {
                    "name": f"user{offset + i}",
                    "gender": rng.choice(GENDERS),
                    "age": rng.randrange(MAX_AGE),
                }
            )
        )
    logger.info("  > Users created: %d (total nodes: %d)", len(ids), store.node_count)
    return ids


def generate_friendships(
    store: GraphStore,
    count: int = NUMBER_OF_RELATIONS,
    rng: Optional[random.Random] = None,
    relation: str = DEFAULT_RELATION,
    progress: bool = False,
) -> int:
    """
    Draw `count` random pairs and link them. A pair drawing the same user
    twice is redrawn; a pair that is already linked is a no-op, so the
    returned number of new edges can be lower than `count`.
    """
    n = store.node_count
    if n < 2:
        raise ValueError("Need at least two nodes to create friendships.")

    rng = rng or random.Random()
    created = 0
    duplicates = 0
    for _ in tqdm(range(count), desc="Friendships", unit="edge", disable=not progress):
        a = rng.randrange(n)
        b = rng.randrange(n)
        while b == a:
            b = rng.randrange(n)
        if store.add_edge(a, b, relation):
            created += 1
        else:
            duplicates += 1

    logger.info("  > Friendships requested: %d", count)
    logger.info("  > New edges: %d (duplicates ignored: %d)", created, duplicates)
    return created
