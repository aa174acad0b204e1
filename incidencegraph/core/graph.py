"""
Core graph data structure: a directed, weighted, modified incidence list.

Every node keeps its own outgoing and incoming edge maps and there is no
global edge table. Removing a node does not scrub its neighbours: the
entries they still hold for it ("ghosts") are purged the next time the slot
is read through ``get_edge``.
"""

import logging
from typing import Callable, Dict, Hashable, List, Optional

from ..classes.node import pynode
from ..classes.edge import pyedge, Number
from ..classes.utils import coerce_weight

logger = logging.getLogger(__name__)

DEFAULT_WEIGHT = 1


class IncidenceGraph:
    """
    Directed graph stored as a modified incidence list.

    This class provides:
    - O(1) node insertion, lookup and removal (removal amortized)
    - O(1) edge insertion, lookup and removal
    - Lazy cleanup of edge slots left behind by removed nodes
    - In/out/all edge queries and node/edge traversal

    Attributes:
        nodes: Mapping node_id -> pynode
        node_size: Number of live nodes
        edge_size: Number of live edges
        default_weight: Weight given to edges added without one
    """

    def __init__(self, default_weight: Number = DEFAULT_WEIGHT):
        """
        Initialize an empty graph.

        Args:
            default_weight: Weight used by add_edge when none is given
        """
        self.default_weight = coerce_weight(default_weight)
        self.nodes: Dict[Hashable, pynode] = {}
        self.node_size = 0
        self.edge_size = 0

    # ------------------------------------------------------------------
    # Nodes
    # ------------------------------------------------------------------

    def add_node(self, node_id: Hashable) -> Optional[pynode]:
        """
        Add a node.

        The id must not change once added; it is used to add, look up and
        delete the node's edges. Ids follow Python hashing, so ``2`` and
        ``2.0`` are the same node while ``2`` and ``"2"`` are not. Keep to a
        single id type per graph.

        Args:
            node_id: Unique hashable identifier

        Returns:
            The new node record, free to carry extra attributes for
            algorithms, or None if the id already exists (nothing is
            overwritten)
        """
        if node_id in self.nodes:
            logger.debug(f"Node {node_id!r} already exists, not added")
            return None

        node = pynode(node_id)
        self.nodes[node_id] = node
        self.node_size += 1
        return node

    def get_node(self, node_id: Hashable) -> Optional[pynode]:
        """Return the node record, or None if not found."""
        return self.nodes.get(node_id)

    def has_node(self, node_id: Hashable) -> bool:
        return node_id in self.nodes

    def remove_node(self, node_id: Hashable) -> Optional[pynode]:
        """
        Remove a node.

        Neighbour maps are left untouched; their slots for this node become
        ghosts and are purged lazily by ``get_edge``. Only the removed
        node's own slots are checked, so that edges already discounted by an
        earlier neighbour removal are not subtracted twice. Each slot is
        checked once in its lifetime, which keeps removal amortized O(1).

        Args:
            node_id: Identifier of the node to remove

        Returns:
            The removed node record, or None if it did not exist
        """
        node = self.nodes.get(node_id)
        if node is None:
            return None

        stale = self._drop_stale_slots(node)
        self.edge_size -= node.edge_count
        self.node_size -= 1
        del self.nodes[node_id]

        logger.debug(f"Removed node {node_id!r} with {node.edge_count} live edges "
                     f"({stale} stale slots dropped)")
        return node

    def _drop_stale_slots(self, node: pynode) -> int:
        """Purge the node's own slots whose counterpart no longer agrees."""
        stale = 0
        for to_id, edge in list(node.out_edges.items()):
            target = self.nodes.get(to_id)
            if target is None or target.in_edges.get(node.id) is not edge:
                stale += self._purge_slot(node, node.out_edges, to_id)
        for from_id, edge in list(node.in_edges.items()):
            source = self.nodes.get(from_id)
            if source is None or source.out_edges.get(node.id) is not edge:
                stale += self._purge_slot(node, node.in_edges, from_id)
        return stale

    # ------------------------------------------------------------------
    # Edges
    # ------------------------------------------------------------------

    def add_edge(self, from_id: Hashable, to_id: Hashable,
                 weight: Optional[Number] = None) -> Optional[pyedge]:
        """
        Add a directed edge from ``from_id`` to ``to_id``.

        Adding A -> B does not create B -> A. Omitting the weight (defaults
        to 1) effectively makes the graph unweighted.

        Args:
            from_id: Tail node id
            to_id: Head node id
            weight: Numeric edge weight, default_weight when omitted

        Returns:
            The edge created, or None if either node is missing or an edge
            already exists between them

        Raises:
            TypeError: If weight is not a real number
        """
        weight = self.default_weight if weight is None else coerce_weight(weight)

        if self.get_edge(from_id, to_id) is not None:
            logger.debug(f"Edge {from_id!r} -> {to_id!r} already exists, not added")
            return None

        from_node = self.nodes.get(from_id)
        to_node = self.nodes.get(to_id)
        if from_node is None or to_node is None:
            return None

        edge = pyedge(from_id, to_id, weight)
        from_node.out_edges[to_id] = edge
        to_node.in_edges[from_id] = edge
        from_node.edge_count += 1
        self.edge_size += 1
        # a self-loop counts once
        if from_node is not to_node:
            to_node.edge_count += 1
        return edge

    def get_edge(self, from_id: Hashable, to_id: Hashable) -> Optional[pyedge]:
        """
        Look up the edge from ``from_id`` to ``to_id``.

        This is where ghost slots are repaired. A slot is stale when the node
        at its other end is gone, or when that node was removed and re-added
        so the two sides no longer hold the same edge. Stale slots touched by
        the lookup are deleted. ``edge_size`` is not changed here; it was
        settled when the node was removed.

        Returns:
            The edge, or None if not found
        """
        from_node = self.nodes.get(from_id)
        to_node = self.nodes.get(to_id)

        if from_node is None and to_node is None:
            return None
        if from_node is None:
            self._purge_slot(to_node, to_node.in_edges, from_id)
            return None
        if to_node is None:
            self._purge_slot(from_node, from_node.out_edges, to_id)
            return None

        out_edge = from_node.out_edges.get(to_id)
        in_edge = to_node.in_edges.get(from_id)
        if out_edge is not None and out_edge is in_edge:
            return out_edge

        self._purge_slot(from_node, from_node.out_edges, to_id)
        self._purge_slot(to_node, to_node.in_edges, from_id)
        return None

    def remove_edge(self, from_id: Hashable, to_id: Hashable) -> Optional[pyedge]:
        """
        Remove the edge from ``from_id`` to ``to_id``.

        Returns:
            The edge removed, or None if it was not found
        """
        edge = self.get_edge(from_id, to_id)
        if edge is None:
            return None

        from_node = self.nodes[from_id]
        to_node = self.nodes[to_id]
        del from_node.out_edges[to_id]
        del to_node.in_edges[from_id]
        self.edge_size -= 1
        from_node.edge_count -= 1
        if from_node is not to_node:
            to_node.edge_count -= 1
        return edge

    def _purge_slot(self, owner: pynode, slots: Dict[Hashable, pyedge], key: Hashable) -> int:
        """Delete a stale slot from one of owner's maps; returns 1 if one was deleted."""
        edge = slots.pop(key, None)
        if edge is None:
            return 0
        owner.edge_count -= 1
        logger.debug(f"Purged stale slot {edge.from_id!r} -> {edge.to_id!r} on node {owner.id!r}")
        return 1

    # ------------------------------------------------------------------
    # Edge queries
    # ------------------------------------------------------------------

    def get_in_edges_of(self, node_id: Hashable) -> List[pyedge]:
        """
        Get the edges directed toward a node.

        Returns:
            List of edges, empty if the node does not exist or has none
        """
        node = self.nodes.get(node_id)
        if node is None:
            return []

        in_edges = []
        for from_id in list(node.in_edges):
            edge = self.get_edge(from_id, node_id)
            if edge is not None:
                in_edges.append(edge)
        return in_edges

    def get_out_edges_of(self, node_id: Hashable) -> List[pyedge]:
        """
        Get the edges leaving a node.

        Returns:
            List of edges, empty if the node does not exist or has none
        """
        node = self.nodes.get(node_id)
        if node is None:
            return []

        out_edges = []
        for to_id in list(node.out_edges):
            edge = self.get_edge(node_id, to_id)
            if edge is not None:
                out_edges.append(edge)
        return out_edges

    def get_all_edges_of(self, node_id: Hashable) -> List[pyedge]:
        """
        Get every edge linked to a node, incoming or outgoing.

        Not the same as concatenating the in and out edges: a self-loop
        would show up in both, here it is kept once. The order of the
        incoming part is not preserved.

        Returns:
            List of edges, empty if the node does not exist or has none
        """
        in_edges = self.get_in_edges_of(node_id)
        out_edges = self.get_out_edges_of(node_id)
        if not in_edges:
            return out_edges

        self_edge = self.get_edge(node_id, node_id)
        if self_edge is not None:
            for i, edge in enumerate(in_edges):
                if edge is self_edge:
                    in_edges[i], in_edges[-1] = in_edges[-1], in_edges[i]
                    in_edges.pop()
                    break
        return in_edges + out_edges

    # ------------------------------------------------------------------
    # Traversal
    # ------------------------------------------------------------------

    def for_each_node(self, visit: Callable[[pynode], None]) -> None:
        """
        Visit each live node once, in arbitrary order.

        Nodes removed by the visitor during the walk are skipped.

        Args:
            visit: Function of the form fn(node)
        """
        if not callable(visit):
            raise TypeError("visit must be callable")

        for node in list(self.nodes.values()):
            if self.nodes.get(node.id) is node:
                visit(node)

    def for_each_edge(self, visit: Callable[[pyedge], None], validate: bool = True) -> None:
        """
        Visit each edge once, in arbitrary order.

        With ``validate`` every slot goes through ``get_edge`` first, so no
        ghost edge is ever visited and ghosts met on the way are purged.
        ``validate=False`` walks the raw out-edge maps; it is cheaper but may
        yield edges whose head node has been removed or replaced.

        Args:
            visit: Function of the form fn(edge)
            validate: Check each edge for consistency before visiting it
        """
        if not callable(visit):
            raise TypeError("visit must be callable")

        for node in list(self.nodes.values()):
            if self.nodes.get(node.id) is not node:
                continue
            for to_id, edge in list(node.out_edges.items()):
                if validate and self.get_edge(node.id, to_id) is not edge:
                    continue
                visit(edge)

    def __repr__(self):
        return f"IncidenceGraph(node_size={self.node_size}, edge_size={self.edge_size})"
