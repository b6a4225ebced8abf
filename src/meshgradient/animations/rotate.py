"""
Rotate Motion

The offset is the point's center-relative vector rotated by t and doubled,
added on top of the base position. Points therefore orbit rather than spin
in place. Intensity has no effect on this motion.
"""

import math
from typing import Tuple

from meshgradient.animations.base import BaseMotion
from meshgradient.models.enums import AnimationKind


class RotateMotion(BaseMotion):
    KIND = AnimationKind.ROTATE

    CENTER = (0.5, 0.5)

    def offset(self, x: float, y: float, t: float, k: float) -> Tuple[float, float]:
        dx = x - self.CENTER[0]
        dy = y - self.CENTER[1]
        cos_a = math.cos(t)
        sin_a = math.sin(t)
        return (
            (cos_a * dx - sin_a * dy) * 2.0,
            (sin_a * dx + cos_a * dy) * 2.0,
        )
