import pytest

from socialgraph.graph_construction.store import GraphStore
from socialgraph.network import SocialNetwork


@pytest.fixture
def store() -> GraphStore:
    return GraphStore(indexed_attributes=("age",))


@pytest.fixture
def square() -> SocialNetwork:
    """u0..u3 with u0-u1, u0-u2, u1-u3, u2-u3."""
    network = SocialNetwork()
    for i, (gender, age) in enumerate([("male", 30), ("female", 33), ("male", 33), ("female", 41)]):
        network.create_node({"name": f"u{i}", "gender": gender, "age": age})
    for a, b in [(0, 1), (0, 2), (1, 3), (2, 3)]:
        network.add_edge(a, b)
    return network


@pytest.fixture
def pair() -> SocialNetwork:
    network = SocialNetwork()
    network.create_node({"name": "u0"})
    network.create_node({"name": "u1"})
    network.add_edge(0, 1)
    return network


@pytest.fixture
def triangle_with_tail() -> GraphStore:
    """0-1-2 triangle, then 2-3-4: connected and not bipartite."""
    g = GraphStore()
    for i in range(5):
        g.create_node({"name": f"n{i}"})
    for a, b in [(0, 1), (1, 2), (2, 0), (2, 3), (3, 4)]:
        g.add_edge(a, b)
    return g
