"""
Utility functions for incidencegraph.

This module provides shared helpers used across the incidencegraph package:
edge weight validation and dense weight-matrix construction.
"""

import numbers
import logging
from typing import Dict, Hashable, Iterable

import numpy as np

from .edge import pyedge

logger = logging.getLogger(__name__)


def coerce_weight(weight) -> numbers.Real:
    """
    Validate an edge weight.

    Args:
        weight: Candidate weight (int, float or numpy scalar)

    Returns:
        The weight, unchanged

    Raises:
        TypeError: If the weight is not a real number, or is a bool
    """
    if isinstance(weight, (bool, np.bool_)) or not isinstance(weight, numbers.Real):
        raise TypeError(f"Edge weight must be a real number, got {type(weight).__name__}")
    return weight


def build_index(node_ids: Iterable[Hashable]) -> Dict[Hashable, int]:
    """
    Map node ids to consecutive matrix positions.

    Args:
        node_ids: Node ids in the desired row/column order

    Returns:
        Dictionary mapping node_id -> position

    Raises:
        ValueError: If an id appears more than once
    """
    index: Dict[Hashable, int] = {}
    for position, node_id in enumerate(node_ids):
        if node_id in index:
            raise ValueError(f"Duplicate node id in matrix order: {node_id!r}")
        index[node_id] = position
    return index


def build_weight_matrix(edges: Iterable[pyedge], index: Dict[Hashable, int],
                        fill_value: float = 0.0) -> np.ndarray:
    """
    Build a dense weight matrix from a collection of edges.

    Rows are edge sources and columns edge targets. Edges with an endpoint
    outside ``index`` are skipped.

    Args:
        edges: Edges to place in the matrix
        index: Dictionary mapping node_id -> row/column position
        fill_value: Value for node pairs without an edge

    Returns:
        Square float array of shape (len(index), len(index))
    """
    n = len(index)
    matrix = np.full((n, n), fill_value, dtype=float)
    skipped = 0

    for edge in edges:
        row = index.get(edge.from_id)
        col = index.get(edge.to_id)
        if row is None or col is None:
            skipped += 1
            continue
        matrix[row, col] = edge.weight

    if skipped:
        logger.debug(f"Skipped {skipped} edges outside the {n}-node matrix order")
    return matrix
