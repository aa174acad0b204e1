"""
Incidence queries built on top of the core graph.

This module provides neighbourhood, degree and dense-matrix views of a graph.
All lookups go through the core edge queries, so ghost slots are filtered
and purged along the way.
"""

import logging
from typing import Hashable, List, Optional, Sequence, Tuple

import numpy as np

from ..core.graph import IncidenceGraph
from ..classes.utils import build_index, build_weight_matrix

logger = logging.getLogger(__name__)


class IncidenceAnalyzer:
    """
    Read-side queries over an IncidenceGraph.

    This class provides methods for:
    - Getting successors and predecessors of a node
    - Counting in/out/total degree
    - Finding sources and sinks
    - Building a dense weight matrix
    """

    def __init__(self, graph: IncidenceGraph):
        """
        Initialize the analyzer.

        Args:
            graph: IncidenceGraph instance to analyze
        """
        self.graph = graph

    def get_successors(self, node_id: Hashable) -> List[Hashable]:
        """Get the ids of nodes reachable over one outgoing edge."""
        return [edge.to_id for edge in self.graph.get_out_edges_of(node_id)]

    def get_predecessors(self, node_id: Hashable) -> List[Hashable]:
        """Get the ids of nodes with an edge into this node."""
        return [edge.from_id for edge in self.graph.get_in_edges_of(node_id)]

    def get_in_degree(self, node_id: Hashable) -> int:
        return len(self.graph.get_in_edges_of(node_id))

    def get_out_degree(self, node_id: Hashable) -> int:
        return len(self.graph.get_out_edges_of(node_id))

    def get_degree(self, node_id: Hashable) -> int:
        """Number of edges touching the node, a self-loop counted once."""
        return len(self.graph.get_all_edges_of(node_id))

    def get_sources(self) -> List[Hashable]:
        """Get node ids with no incoming edges."""
        return [node_id for node_id in list(self.graph.nodes) if self.get_in_degree(node_id) == 0]

    def get_sinks(self) -> List[Hashable]:
        """Get node ids with no outgoing edges."""
        return [node_id for node_id in list(self.graph.nodes) if self.get_out_degree(node_id) == 0]

    def get_weight_matrix(self, node_ids: Optional[Sequence[Hashable]] = None,
                          fill_value: float = 0.0) -> Tuple[np.ndarray, List[Hashable]]:
        """
        Build a dense weight matrix for the graph.

        Args:
            node_ids: Row/column order. Defaults to every live node in
                insertion order. Ids that are not live nodes give an
                all-``fill_value`` row and column.
            fill_value: Value for node pairs without an edge

        Returns:
            Tuple of (matrix, order) where matrix[i, j] is the weight of the
            edge order[i] -> order[j]

        Raises:
            ValueError: If node_ids contains duplicates
        """
        order = list(self.graph.nodes) if node_ids is None else list(node_ids)
        index = build_index(order)

        edges = []
        for node_id in order:
            edges.extend(self.graph.get_out_edges_of(node_id))

        matrix = build_weight_matrix(edges, index, fill_value=fill_value)
        logger.debug(f"Built {len(order)}x{len(order)} weight matrix from {len(edges)} edges")
        return matrix, order
