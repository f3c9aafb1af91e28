import random

from socialgraph.graph_construction.store import GraphStore
from socialgraph.network_analysis.suggestions import Suggestion, SuggestionRanker, suggest_friends


def _as_pairs(suggestions):
    return [(s.node_id, s.score) for s in suggestions]


def test_square_suggestion(square):
    assert _as_pairs(square.suggest_friends(0)) == [(3, 2)]
    assert square.suggest_friends(0)[0] == Suggestion(node_id=3, name="u3", score=2)


def _graph(names, edges):
    g = GraphStore()
    for name in names:
        g.create_node({"name": name} if name is not None else {})
    for a, b in edges:
        g.add_edge(a, b)
    return g


# start=0, friends 1 and 2; bob(3) and alice(4) share one friend, carl(5) shares two
NAMES = ["me", "f1", "f2", "bob", "alice", "carl"]
EDGES = [(0, 1), (0, 2), (1, 3), (2, 4), (1, 5), (2, 5)]


def test_ranked_by_score_then_name():
    ranked = suggest_friends(_graph(NAMES, EDGES), 0)
    assert [s.name for s in ranked] == ["carl", "alice", "bob"]
    assert [s.score for s in ranked] == [2, 1, 1]


def test_never_suggests_self_or_direct_friends():
    # f1 and f2 are friends too, so each is also a friend of a friend
    g = _graph(NAMES, EDGES + [(1, 2)])
    ranked = suggest_friends(g, 0)
    ids = {s.node_id for s in ranked}
    assert 0 not in ids
    assert ids.isdisjoint(g.get_neighbors(0))
    assert ids == {3, 4, 5}


def test_order_is_stable_under_edge_permutation():
    expected = _as_pairs(suggest_friends(_graph(NAMES, EDGES), 0))
    rng = random.Random(3)
    for _ in range(10):
        edges = list(EDGES)
        rng.shuffle(edges)
        edges = [(b, a) if rng.random() < 0.5 else (a, b) for a, b in edges]
        assert _as_pairs(suggest_friends(_graph(NAMES, edges), 0)) == expected


def test_same_or_missing_names_fall_back_to_id():
    names = ["me", "f", "x", "x", None]
    edges = [(0, 1), (1, 2), (1, 3), (1, 4)]
    ranked = suggest_friends(_graph(names, edges), 0)
    assert [s.node_id for s in ranked] == [2, 3, 4]
    assert ranked[-1].name is None


def test_no_friends_no_suggestions():
    g = _graph(["me", "other"], [])
    assert suggest_friends(g, 0) == []


def test_limit_is_applied_after_ranking():
    ranked = suggest_friends(_graph(NAMES, EDGES), 0, limit=1)
    assert [s.name for s in ranked] == ["carl"]


def test_rank_from_given_frontiers():
    g = _graph(NAMES, EDGES)
    ranker = SuggestionRanker(g)
    ranked = ranker.rank(0, {1, 2}, {0, 3, 4, 5, 1})
    assert _as_pairs(ranked) == [(5, 2), (4, 1), (3, 1)]


def test_score_counts_mutual_friends():
    g = GraphStore()
    rng = random.Random(11)
    for i in range(60):
        g.create_node({"name": f"user{i}"})
    for _ in range(200):
        a, b = rng.randrange(60), rng.randrange(60)
        if a != b:
            g.add_edge(a, b)

    direct = g.get_neighbors(0)
    for s in suggest_friends(g, 0):
        assert s.score == len(direct & g.get_neighbors(s.node_id))
        assert s.score >= 1
