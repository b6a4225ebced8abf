"""
Bounce Motion

Vertical hops only; x never changes.
"""

import math
from typing import Tuple

from meshgradient.animations.base import BaseMotion
from meshgradient.models.enums import AnimationKind


class BounceMotion(BaseMotion):
    KIND = AnimationKind.BOUNCE

    def offset(self, x: float, y: float, t: float, k: float) -> Tuple[float, float]:
        return (0.0, abs(math.sin(t + x * 0.3)) * k * 2.0)
