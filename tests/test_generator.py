import random

import pytest

from socialgraph.common.defaults import GENDERS, MAX_AGE
from socialgraph.graph_construction.generator import generate_friendships, generate_users
from socialgraph.graph_construction.store import GraphStore


def _build(seed, users=100, relations=400):
    g = GraphStore(indexed_attributes=("age",))
    rng = random.Random(seed)
    generate_users(g, users, rng)
    created = generate_friendships(g, relations, rng)
    return g, created


def test_users_have_expected_attributes():
    g, _ = _build(1)
    assert g.node_count == 100
    for node in g:
        assert node.name == f"user{node.id}"
        assert node.get("gender") in GENDERS
        assert 0 <= node.get("age") < MAX_AGE


def test_age_index_covers_every_user():
    g, _ = _build(2)
    total = sum(len(g.index_lookup("age", age)) for age in range(MAX_AGE))
    assert total == g.node_count


def test_same_seed_same_graph():
    a, _ = _build(9)
    b, _ = _build(9)
    assert sorted(a.edges()) == sorted(b.edges())
    assert [n.attributes for n in a] == [n.attributes for n in b]


def test_friendships_skip_self_pairs_and_count_new_edges():
    g, created = _build(4)
    assert created == g.edge_count()
    assert created <= 400
    for tail, head in g.edges():
        assert tail != head


def test_names_continue_after_existing_nodes():
    g = GraphStore()
    g.create_node({"name": "admin"})
    generate_users(g, 2, random.Random(0))
    assert [n.name for n in g] == ["admin", "user1", "user2"]


def test_friendships_need_two_nodes():
    g = GraphStore()
    g.create_node()
    with pytest.raises(ValueError):
        generate_friendships(g, 10, random.Random(0))
