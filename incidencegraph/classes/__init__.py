"""
Core data classes for graph representation.

This module contains the node and edge records shared by the rest of the
incidencegraph library.
"""

from .node import pynode
from .edge import pyedge

__all__ = [
    'pynode',
    'pyedge',
]
