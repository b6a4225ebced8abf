"""
Wave Motion

Points sway on sine/cosine waves phase-shifted by their position.
"""

import math
from typing import Tuple

from meshgradient.animations.base import BaseMotion
from meshgradient.models.enums import AnimationKind


class WaveMotion(BaseMotion):
    KIND = AnimationKind.WAVE

    def offset(self, x: float, y: float, t: float, k: float) -> Tuple[float, float]:
        return (
            math.sin(t + y * 0.5) * k,
            math.cos(t + x * 0.5) * k,
        )
