from __future__ import annotations

from meshgradient.models.animation_params.animation_param_id import AnimationParamID
from .float_range_param import FloatRangeParam


class SpeedParam(FloatRangeParam):
    """Animation speed multiplier applied to the clock (0.1x - 3.0x)"""
    key = AnimationParamID.SPEED

    def __init__(self):
        super().__init__(
            label="Speed",
            min_value=0.1,
            max_value=3.0,
            default=1.0,
            step=0.1,
        )
