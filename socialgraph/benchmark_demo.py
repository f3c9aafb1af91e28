import argparse
import logging
import random
import time
from contextlib import contextmanager
from typing import Iterator, Optional

from socialgraph.common.defaults import (
    DEFAULT_MAX_ITERATIONS,
    DEFAULT_RELATION,
    DEFAULT_SEED,
    DEFAULT_TOLERANCE,
    NUMBER_OF_RELATIONS,
    NUMBER_OF_USERS,
)
from socialgraph.common.errors import DegenerateGraph, NodeNotFound
from socialgraph.graph_construction.generator import generate_friendships, generate_users
from socialgraph.graph_construction.loaders import load_from_edges_csv, load_from_json
from socialgraph.network import SocialNetwork


@contextmanager
def timed(label: str) -> Iterator[None]:
    start = time.perf_counter()
    yield
    elapsed_ms = (time.perf_counter() - start) * 1000
    print(f"{label} in {elapsed_ms:.2f} ms")


def build_network(args: argparse.Namespace) -> SocialNetwork:
    if args.edges_csv:
        with timed("Loaded edges CSV"):
            store, _ = load_from_edges_csv(args.edges_csv)
        return SocialNetwork(store)
    if args.nodes_json or args.relationships_json:
        if not (args.nodes_json and args.relationships_json):
            raise SystemExit("--nodes-json and --relationships-json must be given together.")
        with timed("Loaded JSON files"):
            store, _ = load_from_json(args.nodes_json, args.relationships_json)
        return SocialNetwork(store)

    rng = random.Random(args.seed)
    network = SocialNetwork()
    with timed(f"Imported {args.users} users"):
        generate_users(network.store, args.users, rng, progress=args.progress)
    return network


def run(args: argparse.Namespace) -> None:
    network = build_network(args)
    store = network.store

    with timed("Users of age lookup"):
        found = network.index_lookup("age", args.age)
    print(f"{len(found)} users of age {args.age} found")

    # Random mode: relationships are imported after the age lookup.
    if not (args.edges_csv or args.nodes_json):
        rng = random.Random(args.seed + 1)
        with timed(f"Created {args.relations} {args.relation} relationships"):
            generate_friendships(store, args.relations, rng, args.relation, progress=args.progress)

    user = args.user
    print(f"\n--- Analytics for node {user} ---")

    with timed("Friends lookup"):
        friends = network.get_neighbors(user, args.relation)
    print(f"{len(friends)} friends found")

    with timed("Friends of friends traversal"):
        result = network.traverse(user, 2, args.relation)
    print(f"{len(result.reachable())} friends and friends of friends found")

    with timed("Friend suggestions"):
        suggestions = network.suggest_friends(user, args.relation)
    print(f"{len(suggestions)} suggestions, top {args.top}:")
    for s in suggestions[: args.top]:
        print(f"  - {s.name} (id={s.node_id}) | mutual friends={s.score}")

    with timed("Eigenvector centrality"):
        outcome = network.calculate(
            args.relation,
            tolerance=args.tolerance,
            max_iterations=args.max_iterations,
        )
    print(
        f"Centrality of node {user}: {network.centrality(user, args.relation):.8f} "
        f"({outcome.state.value}, {outcome.iterations} iterations, delta={outcome.delta:.3g})"
    )


def main(argv: Optional[list] = None) -> None:
    parser = argparse.ArgumentParser(
        description=(
            "Benchmark: build a social graph (random, or from files), then time "
            "friend lookups, friend-of-friend traversal, suggestions and "
            "eigenvector centrality for one user."
        )
    )
    parser.add_argument("--users", type=int, default=NUMBER_OF_USERS, help="Number of random users.")
    parser.add_argument(
        "--relations", type=int, default=NUMBER_OF_RELATIONS, help="Number of random friendships to draw."
    )
    parser.add_argument("--seed", type=int, default=DEFAULT_SEED, help="Seed for the random generator.")
    parser.add_argument("--user", type=int, default=1000, help="Node id to analyse.")
    parser.add_argument("--age", type=int, default=33, help="Age to look up in the index.")
    parser.add_argument("--relation", default=DEFAULT_RELATION, help="Relation type to analyse.")
    parser.add_argument("--top", type=int, default=10, help="How many suggestions to print.")
    parser.add_argument("--tolerance", type=float, default=DEFAULT_TOLERANCE)
    parser.add_argument("--max-iterations", type=int, default=DEFAULT_MAX_ITERATIONS)
    parser.add_argument("--nodes-json", help="Nodes file (list of attribute objects) instead of random users.")
    parser.add_argument("--relationships-json", help="Relationships file matching --nodes-json.")
    parser.add_argument("--edges-csv", help="Edges CSV (sourceId,targetId[,type]) instead of random data.")
    parser.add_argument("--progress", action="store_true", help="Show progress bars while generating.")
    parser.add_argument("--verbose", action="store_true", help="Log at DEBUG level.")

    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    try:
        run(args)
    except (NodeNotFound, DegenerateGraph) as e:
        print(f"Error: {e}")
    except FileNotFoundError as e:
        print(f"Missing input file: {e}")


if __name__ == "__main__":
    main()
