"""
Node record for the incidence-list graph.

A node owns its own incidence maps: outgoing edges keyed by target id and
incoming edges keyed by source id. The graph hands the record out by
reference so graph algorithms can hang their own state on it.
"""

from typing import Any, Dict, Hashable, Optional

from .edge import pyedge


class pynode:
    """
    Graph vertex with its incoming and outgoing edge maps.

    Attributes:
        id: Caller supplied identifier, stable for the node's lifetime
        out_edges: Mapping target id -> edge leaving this node
        in_edges: Mapping source id -> edge entering this node
        edge_count: Live edges currently counted against this node
        data: Free-form payload for algorithm state

    Arbitrary attributes may also be set directly on the record.
    """

    def __init__(self, node_id: Hashable, data: Optional[Dict[str, Any]] = None):
        self.id = node_id
        self.out_edges: Dict[Hashable, pyedge] = {}
        self.in_edges: Dict[Hashable, pyedge] = {}
        self.edge_count = 0
        self.data: Dict[str, Any] = data if data is not None else {}

    def __repr__(self):
        return (f"pynode(id={self.id!r}, out={len(self.out_edges)}, "
                f"in={len(self.in_edges)}, edge_count={self.edge_count})")
