"""
Main facade class for the incidence-list graph.

This module provides the pygraph class, which exposes the core graph
operations together with the analysis and maintenance helpers behind one
object.
"""

import logging
from typing import Callable, Hashable, List, Optional, Sequence, Tuple

import numpy as np

from ..classes.node import pynode
from ..classes.edge import pyedge, Number
from .graph import IncidenceGraph, DEFAULT_WEIGHT
from ..analysis.incidence import IncidenceAnalyzer
from ..operations.maintenance import GraphMaintenance

logger = logging.getLogger(__name__)


class pygraph:
    """
    Directed, weighted graph with O(1) amortized node and edge operations.

    Delegates storage and the core operations to IncidenceGraph, read-side
    queries to IncidenceAnalyzer and bulk consistency work to
    GraphMaintenance.

    Example:
        >>> graph = pygraph()
        >>> node = graph.add_node('A')
        >>> node = graph.add_node('B')
        >>> graph.add_edge('A', 'B')
        pyedge('A' -> 'B', weight=1)
        >>> graph.get_edge('B', 'A') is None
        True
        >>> graph.remove_node('B')
        pynode(id='B', out=0, in=1, edge_count=1)
        >>> graph.edge_size
        0
    """

    def __init__(self, default_weight: Number = DEFAULT_WEIGHT):
        """
        Initialize an empty graph.

        Args:
            default_weight: Weight used by add_edge when none is given
        """
        self._graph = IncidenceGraph(default_weight=default_weight)
        self._analyzer = IncidenceAnalyzer(self._graph)
        self._maintenance = GraphMaintenance(self._graph)

    # ========================================================================
    # COUNTERS
    # ========================================================================

    @property
    def node_size(self) -> int:
        """Number of live nodes."""
        return self._graph.node_size

    @property
    def edge_size(self) -> int:
        """Number of live edges."""
        return self._graph.edge_size

    @property
    def default_weight(self) -> Number:
        return self._graph.default_weight

    # ========================================================================
    # CORE OPERATIONS
    # ========================================================================

    def add_node(self, node_id: Hashable) -> Optional[pynode]:
        return self._graph.add_node(node_id)

    def get_node(self, node_id: Hashable) -> Optional[pynode]:
        return self._graph.get_node(node_id)

    def has_node(self, node_id: Hashable) -> bool:
        return self._graph.has_node(node_id)

    def remove_node(self, node_id: Hashable) -> Optional[pynode]:
        return self._graph.remove_node(node_id)

    def add_edge(self, from_id: Hashable, to_id: Hashable,
                 weight: Optional[Number] = None) -> Optional[pyedge]:
        return self._graph.add_edge(from_id, to_id, weight)

    def get_edge(self, from_id: Hashable, to_id: Hashable) -> Optional[pyedge]:
        return self._graph.get_edge(from_id, to_id)

    def remove_edge(self, from_id: Hashable, to_id: Hashable) -> Optional[pyedge]:
        return self._graph.remove_edge(from_id, to_id)

    def get_in_edges_of(self, node_id: Hashable) -> List[pyedge]:
        return self._graph.get_in_edges_of(node_id)

    def get_out_edges_of(self, node_id: Hashable) -> List[pyedge]:
        return self._graph.get_out_edges_of(node_id)

    def get_all_edges_of(self, node_id: Hashable) -> List[pyedge]:
        return self._graph.get_all_edges_of(node_id)

    def for_each_node(self, visit: Callable[[pynode], None]) -> None:
        self._graph.for_each_node(visit)

    def for_each_edge(self, visit: Callable[[pyedge], None], validate: bool = True) -> None:
        self._graph.for_each_edge(visit, validate=validate)

    # ========================================================================
    # ANALYSIS
    # ========================================================================

    def get_successors(self, node_id: Hashable) -> List[Hashable]:
        return self._analyzer.get_successors(node_id)

    def get_predecessors(self, node_id: Hashable) -> List[Hashable]:
        return self._analyzer.get_predecessors(node_id)

    def get_in_degree(self, node_id: Hashable) -> int:
        return self._analyzer.get_in_degree(node_id)

    def get_out_degree(self, node_id: Hashable) -> int:
        return self._analyzer.get_out_degree(node_id)

    def get_degree(self, node_id: Hashable) -> int:
        return self._analyzer.get_degree(node_id)

    def get_sources(self) -> List[Hashable]:
        return self._analyzer.get_sources()

    def get_sinks(self) -> List[Hashable]:
        return self._analyzer.get_sinks()

    def get_weight_matrix(self, node_ids: Optional[Sequence[Hashable]] = None,
                          fill_value: float = 0.0) -> Tuple[np.ndarray, List[Hashable]]:
        return self._analyzer.get_weight_matrix(node_ids, fill_value=fill_value)

    # ========================================================================
    # MAINTENANCE
    # ========================================================================

    def count_ghosts(self) -> int:
        return self._maintenance.count_ghosts()

    def purge_ghosts(self) -> int:
        return self._maintenance.purge_ghosts()

    def verify_counters(self) -> bool:
        return self._maintenance.verify_counters()

    def __contains__(self, node_id: Hashable) -> bool:
        return self._graph.has_node(node_id)

    def __len__(self) -> int:
        return self._graph.node_size

    def __repr__(self):
        return f"pygraph(node_size={self.node_size}, edge_size={self.edge_size})"
