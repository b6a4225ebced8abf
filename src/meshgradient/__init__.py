"""Mesh gradient editor: control-point grid, animation field and export"""

__version__ = "1.0.0"
