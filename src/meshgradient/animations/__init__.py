"""
Point-field motions, one class per AnimationKind
"""

from .base import BaseMotion
from .wave import WaveMotion
from .rotate import RotateMotion
from .pulse import PulseMotion
from .bounce import BounceMotion
from .spiral import SpiralMotion

__all__ = [
    "BaseMotion",
    "WaveMotion",
    "RotateMotion",
    "PulseMotion",
    "BounceMotion",
    "SpiralMotion",
]
