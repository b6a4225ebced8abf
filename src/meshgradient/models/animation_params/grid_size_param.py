from __future__ import annotations

from meshgradient.models.animation_params.animation_param_id import AnimationParamID
from meshgradient.models.geometry import GridDimensions
from .int_range_param import IntRangeParam


class GridSizeParam(IntRangeParam):
    """Grid width or height stepper (2-5 points)"""

    def __init__(self, key: AnimationParamID = AnimationParamID.GRID_WIDTH):
        self.key = key
        super().__init__(
            label="Width" if key == AnimationParamID.GRID_WIDTH else "Height",
            min_value=GridDimensions.MIN_SIZE,
            max_value=GridDimensions.MAX_SIZE,
            default=3,
            step=1,
        )
