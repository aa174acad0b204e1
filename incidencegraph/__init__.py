"""
incidencegraph - Directed Graph as a Modified Incidence List

A Python library providing a mutable, directed, weighted graph with O(1)
node and edge insertion, lookup and removal (node removal amortized).
Meant as a building block for graph algorithms rather than an algorithm
library.

Main Classes:
    pygraph: Main graph class (facade)
    IncidenceGraph: Core incidence-list storage and operations
    pynode: Node record with its incoming and outgoing edge maps
    pyedge: Directed, weighted edge record

Example:
    >>> from incidencegraph import pygraph
    >>> graph = pygraph()
    >>> for node_id in ('A', 'B', 'C'):
    ...     node = graph.add_node(node_id)
    >>> edge = graph.add_edge('A', 'C')
    >>> edge = graph.add_edge('A', 'B')
    >>> graph.get_edge('B', 'A') is None
    True
    >>> len(graph.get_out_edges_of('A'))
    2
    >>> removed = graph.remove_node('C')
    >>> graph.edge_size
    1
"""

__version__ = "0.1.0"
__author__ = "Chang Liao"

from incidencegraph.classes.node import pynode
from incidencegraph.classes.edge import pyedge
from incidencegraph.core.graph import IncidenceGraph, DEFAULT_WEIGHT
from incidencegraph.core.pygraph import pygraph

__all__ = [
    'pygraph',
    'IncidenceGraph',
    'pynode',
    'pyedge',
    'DEFAULT_WEIGHT',
]
