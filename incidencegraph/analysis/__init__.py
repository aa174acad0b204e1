"""
Read-side queries over the graph: neighbourhoods, degrees and matrix views.
"""

from .incidence import IncidenceAnalyzer

__all__ = ['IncidenceAnalyzer']
