"""
Edge record for the incidence-list graph.
"""

from typing import Any, Dict, Hashable, Optional, Tuple, Union

Number = Union[int, float]


class pyedge:
    """
    Directed, weighted connection between two nodes.

    The same object is shared by the tail node's ``out_edges`` and the head
    node's ``in_edges``.
    """

    def __init__(self, from_id: Hashable, to_id: Hashable, weight: Number = 1,
                 data: Optional[Dict[str, Any]] = None):
        self.from_id = from_id
        self.to_id = to_id
        self.weight = weight
        self.data: Dict[str, Any] = data if data is not None else {}

    @property
    def endpoints(self) -> Tuple[Hashable, Hashable]:
        """(from_id, to_id) pair."""
        return self.from_id, self.to_id

    def is_self_loop(self) -> bool:
        return self.from_id == self.to_id

    def __repr__(self):
        return f"pyedge({self.from_id!r} -> {self.to_id!r}, weight={self.weight})"
