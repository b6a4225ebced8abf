"""
Spiral Motion

Like rotate, but the angle grows with distance from the center and the
displacement pulses with sin(t).
"""

import math
from typing import Tuple

from meshgradient.animations.base import BaseMotion
from meshgradient.models.enums import AnimationKind


class SpiralMotion(BaseMotion):
    KIND = AnimationKind.SPIRAL

    CENTER = (0.5, 0.5)
    TWIST = 10.0

    def offset(self, x: float, y: float, t: float, k: float) -> Tuple[float, float]:
        dx = x - self.CENTER[0]
        dy = y - self.CENTER[1]
        distance = math.sqrt(dx * dx + dy * dy)

        angle = t + distance * self.TWIST
        spiral_scale = 1.0 + math.sin(t) * k
        cos_a = math.cos(angle)
        sin_a = math.sin(angle)
        return (
            (cos_a * dx - sin_a * dy) * spiral_scale,
            (sin_a * dx + cos_a * dy) * spiral_scale,
        )
