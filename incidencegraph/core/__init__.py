"""
Core graph data structures and management.

This module contains the incidence-list storage with its basic operations,
and the facade class that combines it with the higher-level helpers.
"""

from .graph import IncidenceGraph, DEFAULT_WEIGHT
from .pygraph import pygraph

__all__ = ['IncidenceGraph', 'DEFAULT_WEIGHT', 'pygraph']
