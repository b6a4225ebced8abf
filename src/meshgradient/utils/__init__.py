"""
Utility functions for the mesh gradient editor
"""

from .colors import clamp01, rgb255_to_unit

__all__ = [
    'clamp01',
    'rgb255_to_unit',
]
