"""
Pulse Motion

Points breathe in and out from the mesh center.
"""

import math
from typing import Tuple

from meshgradient.animations.base import BaseMotion
from meshgradient.models.enums import AnimationKind


class PulseMotion(BaseMotion):
    KIND = AnimationKind.PULSE

    def offset(self, x: float, y: float, t: float, k: float) -> Tuple[float, float]:
        scale = 1.0 + math.sin(t) * k
        return (
            (x - 0.5) * (scale - 1.0) * 2.0,
            (y - 0.5) * (scale - 1.0) * 2.0,
        )
