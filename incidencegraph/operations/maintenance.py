"""
Maintenance operations for the incidence-list graph.

Ghost slots are normally purged one at a time as lookups touch them. These
operations audit or purge all of them at once, and cross-check the cached
counters against the maps.
"""

import logging
from typing import Hashable, List, Tuple

from ..core.graph import IncidenceGraph

logger = logging.getLogger(__name__)


class GraphMaintenance:
    """
    Bulk consistency operations.

    This class provides methods for:
    - Counting ghost slots without touching them
    - Purging every ghost slot in one sweep
    - Verifying node_size and edge_size against the maps
    """

    def __init__(self, graph: IncidenceGraph):
        """
        Initialize the maintenance helper.

        Args:
            graph: IncidenceGraph instance to maintain
        """
        self.graph = graph

    def _find_ghost_slots(self) -> List[Tuple[Hashable, Hashable]]:
        """
        Collect the (from_id, to_id) pairs of every slot whose two sides disagree.

        Read-only: a pair is reported once even when both of its slots are stale.
        """
        nodes = self.graph.nodes
        pairs = []
        seen = set()

        for node_id, node in nodes.items():
            for to_id, edge in node.out_edges.items():
                target = nodes.get(to_id)
                if target is None or target.in_edges.get(node_id) is not edge:
                    if (node_id, to_id) not in seen:
                        seen.add((node_id, to_id))
                        pairs.append((node_id, to_id))
            for from_id, edge in node.in_edges.items():
                source = nodes.get(from_id)
                if source is None or source.out_edges.get(node_id) is not edge:
                    if (from_id, node_id) not in seen:
                        seen.add((from_id, node_id))
                        pairs.append((from_id, node_id))
        return pairs

    def count_ghosts(self) -> int:
        """
        Count stale edge slots without purging them.

        Returns:
            Number of (from_id, to_id) pairs with at least one stale slot
        """
        return len(self._find_ghost_slots())

    def purge_ghosts(self) -> int:
        """
        Purge every ghost slot in the graph.

        Equivalent to calling get_edge on every stale pair. edge_size is
        unchanged, since ghost edges were discounted on node removal.

        Returns:
            Number of stale pairs purged
        """
        pairs = self._find_ghost_slots()
        for from_id, to_id in pairs:
            self.graph.get_edge(from_id, to_id)

        if pairs:
            logger.debug(f"Purged {len(pairs)} ghost edge slots")
        return len(pairs)

    def verify_counters(self) -> bool:
        """
        Recompute node and edge counts from the maps and compare them with
        the cached counters.

        Only slots whose two sides agree are counted as edges. Read-only.

        Returns:
            True if node_size and edge_size match, False otherwise
        """
        nodes = self.graph.nodes
        live_edges = 0
        for node_id, node in nodes.items():
            for to_id, edge in node.out_edges.items():
                target = nodes.get(to_id)
                if target is not None and target.in_edges.get(node_id) is edge:
                    live_edges += 1

        ok = True
        if len(nodes) != self.graph.node_size:
            logger.warning(f"node_size is {self.graph.node_size} but {len(nodes)} nodes are stored")
            ok = False
        if live_edges != self.graph.edge_size:
            logger.warning(f"edge_size is {self.graph.edge_size} but {live_edges} live edges are stored")
            ok = False
        return ok
