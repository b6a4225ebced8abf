from __future__ import annotations

from meshgradient.models.animation_params.animation_param_id import AnimationParamID
from .float_range_param import FloatRangeParam


class IntensityParam(FloatRangeParam):
    """
    Intensity parameter - offset magnitude of the animation.
    Range 0.1 to 2.0, scaled by 0.1 inside the animation field.
    """
    key = AnimationParamID.INTENSITY

    def __init__(self):
        super().__init__(
            label="Intensity",
            min_value=0.1,
            max_value=2.0,
            default=1.0,
            step=0.1,
        )
