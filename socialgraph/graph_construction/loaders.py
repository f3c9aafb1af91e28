"""
Bulk loaders: fill a GraphStore from the JSON / CSV files produced by the
data pipeline, and export a relation to NetworkX.
"""

import json
import logging
from typing import Any, Dict, Iterable, List, Tuple

import networkx as nx
import pandas as pd

from socialgraph.common.config_paths import EDGES_CSV, FRIENDSHIPS_JSON, USERS_JSON
from socialgraph.common.defaults import DEFAULT_RELATION, INDEXED_ATTRIBUTES
from socialgraph.graph_construction.store import GraphStore, NodeId

logger = logging.getLogger(__name__)


def _read_json_list(path: str) -> List[Dict]:
    logger.info("Reading %s", path)
    with open(path, "r", encoding="utf-8") as f:
        data = json.load(f)
    if not isinstance(data, list):
        raise ValueError(f"File {path} must contain a list.")
    logger.info("  > Records: %d", len(data))
    return data


def _add_relationships(
    store: GraphStore,
    rels: Iterable[Dict],
    id_map: Dict[Any, NodeId],
) -> int:
    """
    Link every relationship whose endpoints are known. Self-loops, unknown
    endpoints and records without source/target are skipped and counted.
    """
    kept = 0
    duplicates = 0
    skipped = 0
    for r in rels:
        s = r.get("source")
        t = r.get("target")
        if s is None or t is None:
            skipped += 1
            continue
        if s not in id_map or t not in id_map:
            skipped += 1
            continue
        if s == t:
            skipped += 1
            continue
        relation = r.get("type") or DEFAULT_RELATION
        if store.add_edge(id_map[s], id_map[t], relation):
            kept += 1
        else:
            duplicates += 1

    logger.info("  > Edges stored: %d", kept)
    logger.info("  > Duplicate edges ignored: %d", duplicates)
    if skipped:
        logger.warning("  > Relationships skipped (self-loop / unknown node / missing field): %d", skipped)
    return kept


def load_from_json(
    nodes_path: str = USERS_JSON,
    relationships_path: str = FRIENDSHIPS_JSON,
    indexed_attributes: Iterable[str] = INDEXED_ATTRIBUTES,
) -> Tuple[GraphStore, Dict[Any, NodeId]]:
    """
    Build a store from a nodes file (list of attribute objects) and a
    relationships file (list of {"source", "target", "type"}).

    A node's "id" field, when present, is its identifier in the source data
    and is what relationships refer to; otherwise its position in the list
    is used. Returns the store and the source id -> node id map.
    """
    store = GraphStore(indexed_attributes=indexed_attributes)
    id_map: Dict[Any, NodeId] = {}

    for position, record in enumerate(_read_json_list(nodes_path)):
        if not isinstance(record, dict):
            raise ValueError(f"Node record #{position} is not an object.")
        attributes = dict(record)
        source_id = attributes.pop("id", position)
        if source_id in id_map:
            raise ValueError(f"Duplicate node id in {nodes_path}: {source_id!r}")
        id_map[source_id] = store.create_node(attributes)

    _add_relationships(store, _read_json_list(relationships_path), id_map)
    return store, id_map


def load_from_edges_csv(
    edges_path: str = EDGES_CSV,
    indexed_attributes: Iterable[str] = ("name",),
) -> Tuple[GraphStore, Dict[Any, NodeId]]:
    """
    Build a store from an edges CSV with at least sourceId and targetId
    columns (and an optional type column). Nodes are created the first time
    they appear, named after their identifier.
    """
    # ids as text: a numeric column with a blank cell would otherwise turn into floats
    df = pd.read_csv(edges_path, dtype={"sourceId": str, "targetId": str})

    required_cols = {"sourceId", "targetId"}
    missing_cols = required_cols - set(df.columns)
    if missing_cols:
        raise ValueError(f"Missing required columns in CSV: {missing_cols}")

    store = GraphStore(indexed_attributes=indexed_attributes)
    id_map: Dict[Any, NodeId] = {}
    rels: List[Dict] = []
    has_type = "type" in df.columns

    for row in df.itertuples(index=False):
        source = getattr(row, "sourceId")
        target = getattr(row, "targetId")
        if pd.isna(source) or pd.isna(target):
            rels.append({})
            continue
        for key in (source, target):
            if key not in id_map:
                id_map[key] = store.create_node({"name": str(key)})
        rel_type = getattr(row, "type") if has_type else None
        rels.append(
            {
                "source": source,
                "target": target,
                "type": None if rel_type is None or pd.isna(rel_type) else str(rel_type),
            }
        )

    logger.info("Read %d rows from %s", len(df), edges_path)
    logger.info("  > Nodes created: %d", store.node_count)
    _add_relationships(store, rels, id_map)
    return store, id_map


def to_networkx(store: GraphStore, relation: str = DEFAULT_RELATION) -> nx.Graph:
    """Export one relation as an undirected nx.Graph, node attributes included."""
    g = nx.Graph()
    for node in store:
        g.add_node(node.id, **node.attributes)
    for tail, head in store.edges(relation):
        g.add_edge(tail, head, type=relation)
    return g
