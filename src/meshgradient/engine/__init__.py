"""
Point-field engine: topology, constraints, animation field, mesh state, ticker
"""

from .topology import base_positions, classify, point_kinds
from .constraints import constrain, pointer_to_position
from .animation_field import AnimationParameters, evaluate, MOTIONS
from .mesh_state import MeshState, PointNotFoundError
from .renderer import MeshRenderer
from .frame_ticker import FrameTicker

__all__ = [
    "base_positions",
    "classify",
    "point_kinds",
    "constrain",
    "pointer_to_position",
    "AnimationParameters",
    "evaluate",
    "MOTIONS",
    "MeshState",
    "PointNotFoundError",
    "MeshRenderer",
    "FrameTicker",
]
