"""
In-memory graph store: a dense node table, undirected adjacency per relation
type, and exact-match attribute indexes.

Node ids are plain integers handed out in creation order (0, 1, 2, ...).
Adjacency holds ids only, never node objects, so the store is the single
owner of every node.
"""

import logging
import numbers
from collections import defaultdict
from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import Any, Dict, Iterable, Iterator, List, Mapping, Optional, Set

from socialgraph.common.defaults import DEFAULT_RELATION
from socialgraph.common.errors import InvalidEdge, NodeNotFound

logger = logging.getLogger(__name__)

NodeId = int


class Direction(str, Enum):
    OUTGOING = "outgoing"
    INCOMING = "incoming"
    BOTH = "both"


@dataclass(frozen=True)
class Node:
    id: NodeId
    attributes: Mapping[str, Any] = field(default_factory=dict)

    @property
    def name(self) -> Optional[str]:
        return self.attributes.get("name")

    def get(self, key: str, default: Any = None) -> Any:
        return self.attributes.get(key, default)


class AttributeIndex:
    """Reverse map value -> {node ids} for a single attribute."""

    def __init__(self, attribute: str):
        self.attribute = attribute
        self._entries: Dict[Any, Set[NodeId]] = defaultdict(set)

    def add(self, node: Node) -> None:
        if self.attribute in node.attributes:
            self._entries[node.attributes[self.attribute]].add(node.id)

    def lookup(self, value: Any) -> Set[NodeId]:
        # .get() so lookups never create empty buckets
        return set(self._entries.get(value, ()))

    def __len__(self) -> int:
        return sum(len(ids) for ids in self._entries.values())


class GraphStore:
    """
    Owner of all nodes, edges and indexes.

    Writes (create_node, add_edge, create_index) belong to the bulk-import
    phase. Once analytics start the store is read-only; readers never get
    references to internal sets.
    """

    def __init__(self, indexed_attributes: Iterable[str] = ()):
        self._nodes: List[Node] = []
        # relation -> node id -> neighbor ids (symmetric)
        self._adjacency: Dict[str, Dict[NodeId, Set[NodeId]]] = {}
        # relation -> node id -> ids it points to, in creation orientation
        self._outgoing: Dict[str, Dict[NodeId, Set[NodeId]]] = {}
        self._incoming: Dict[str, Dict[NodeId, Set[NodeId]]] = {}
        self._edge_counts: Dict[str, int] = defaultdict(int)
        self._indexes: Dict[str, AttributeIndex] = {}
        for attribute in indexed_attributes:
            self.create_index(attribute)

    # ---------- NODES ----------

    def create_node(self, attributes: Optional[Mapping[str, Any]] = None) -> NodeId:
        # read-only view, so indexes never go stale
        node = Node(id=len(self._nodes), attributes=MappingProxyType(dict(attributes or {})))
        self._nodes.append(node)
        for index in self._indexes.values():
            index.add(node)
        return node.id

    def has_node(self, node_id: NodeId) -> bool:
        if isinstance(node_id, bool) or not isinstance(node_id, numbers.Integral):
            return False
        return 0 <= int(node_id) < len(self._nodes)

    def resolve(self, node_id: NodeId) -> int:
        """Plain int id for any integral id (numpy included); NodeNotFound otherwise."""
        if not self.has_node(node_id):
            raise NodeNotFound(node_id)
        return int(node_id)

    def get_node(self, node_id: NodeId) -> Node:
        return self._nodes[self.resolve(node_id)]

    @property
    def node_count(self) -> int:
        return len(self._nodes)

    def node_ids(self) -> range:
        return range(len(self._nodes))

    def __iter__(self) -> Iterator[Node]:
        return iter(list(self._nodes))

    def __len__(self) -> int:
        return len(self._nodes)

    # ---------- EDGES ----------

    def add_edge(self, a: NodeId, b: NodeId, relation: str = DEFAULT_RELATION) -> bool:
        """
        Link a and b under `relation`. Returns True if a new edge was stored,
        False if the pair was already linked (in either orientation).
        """
        a = self.resolve(a)
        b = self.resolve(b)
        if a == b:
            raise InvalidEdge(a, b)

        adj = self._adjacency.setdefault(relation, {})
        if b in adj.get(a, ()):
            return False

        adj.setdefault(a, set()).add(b)
        adj.setdefault(b, set()).add(a)
        self._outgoing.setdefault(relation, {}).setdefault(a, set()).add(b)
        self._incoming.setdefault(relation, {}).setdefault(b, set()).add(a)
        self._edge_counts[relation] += 1
        return True

    def get_neighbors(
        self,
        node_id: NodeId,
        relation: str = DEFAULT_RELATION,
        direction: Direction = Direction.BOTH,
    ) -> Set[NodeId]:
        node_id = self.resolve(node_id)
        direction = Direction(direction)
        if direction is Direction.OUTGOING:
            table = self._outgoing
        elif direction is Direction.INCOMING:
            table = self._incoming
        else:
            table = self._adjacency
        return set(table.get(relation, {}).get(node_id, ()))

    def degree(self, node_id: NodeId, relation: str = DEFAULT_RELATION) -> int:
        node_id = self.resolve(node_id)
        return len(self._adjacency.get(relation, {}).get(node_id, ()))

    def has_edge(self, a: NodeId, b: NodeId, relation: str = DEFAULT_RELATION) -> bool:
        if not (self.has_node(a) and self.has_node(b)):
            return False
        return int(b) in self._adjacency.get(relation, {}).get(int(a), ())

    def edge_count(self, relation: Optional[str] = None) -> int:
        if relation is None:
            return sum(self._edge_counts.values())
        return self._edge_counts.get(relation, 0)

    def relations(self) -> List[str]:
        return sorted(self._adjacency.keys())

    def edges(self, relation: str = DEFAULT_RELATION) -> Iterator[tuple]:
        """Yield every edge of `relation` once, as (tail, head) in creation orientation."""
        for tail, heads in self._outgoing.get(relation, {}).items():
            for head in heads:
                yield tail, head

    # ---------- INDEXES ----------

    def create_index(self, attribute: str) -> AttributeIndex:
        """Register an index on `attribute`, backfilled from existing nodes."""
        index = self._indexes.get(attribute)
        if index is not None:
            return index
        index = AttributeIndex(attribute)
        for node in self._nodes:
            index.add(node)
        self._indexes[attribute] = index
        logger.debug("Created index on '%s' (%d entries)", attribute, len(index))
        return index

    def indexed_attributes(self) -> List[str]:
        return sorted(self._indexes.keys())

    def index_lookup(self, attribute: str, value: Any) -> Set[NodeId]:
        index = self._indexes.get(attribute)
        if index is not None:
            return index.lookup(value)

        logger.debug("No index on '%s'; scanning %d nodes", attribute, len(self._nodes))
        return {
            node.id
            for node in self._nodes
            if attribute in node.attributes and node.attributes[attribute] == value
        }
