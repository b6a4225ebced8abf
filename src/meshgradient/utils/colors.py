"""
Color conversion utilities

Pure functions for channel scaling and clamping.
Preset color data is loaded from config/colors.yaml via ColorManager.
"""

import math
from typing import Tuple


def clamp01(value: float) -> float:
    """Clamp a scalar to [0, 1]; NaN maps to 0.0"""
    if math.isnan(value):
        return 0.0
    return min(max(value, 0.0), 1.0)


def rgb255_to_unit(r: int, g: int, b: int) -> Tuple[float, float, float]:
    """
    Convert 8-bit channels (0-255) to normalized floats (0-1)

    Example:
        rgb255_to_unit(255, 0, 0)  # (1.0, 0.0, 0.0)
    """
    return (clamp01(r / 255.0), clamp01(g / 255.0), clamp01(b / 255.0))
