from enum import Enum


class AnimationParamID(Enum):
    SPEED = "speed"
    INTENSITY = "intensity"
    GRID_WIDTH = "width"
    GRID_HEIGHT = "height"
