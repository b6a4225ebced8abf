"""Parameter definitions and utilities"""

from .animation_param import AnimationParam
from .animation_param_id import AnimationParamID
from .float_range_param import FloatRangeParam
from .int_range_param import IntRangeParam
from .speed_param import SpeedParam
from .intensity_param import IntensityParam
from .grid_size_param import GridSizeParam

__all__ = [
    "AnimationParam",
    "AnimationParamID",
    "FloatRangeParam",
    "IntRangeParam",
    "SpeedParam",
    "IntensityParam",
    "GridSizeParam",
]
