"""
Operations that audit or repair graph-wide consistency.
"""

from .maintenance import GraphMaintenance

__all__ = ['GraphMaintenance']
