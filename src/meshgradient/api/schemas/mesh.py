"""
Mesh schemas - Pydantic models for mesh, point and export requests/responses
"""

from typing import List, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field, model_validator


class ColorResponse(BaseModel):
    mode: str = Field(description="RGB or PRESET")
    rgb: Optional[List[float]] = Field(None, description="Normalized [r, g, b], null when unavailable")
    alpha: float = 1.0
    preset_name: Optional[str] = None


class PointResponse(BaseModel):
    id: str
    index: int = Field(description="Row-major index")
    kind: str = Field(description="CORNER, VERTICAL_EDGE, HORIZONTAL_EDGE or INTERIOR")
    position: List[float] = Field(description="Normalized [x, y]")
    color: ColorResponse


class MeshResponse(BaseModel):
    width: int
    height: int
    smooth: bool
    points: List[PointResponse]

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "width": 2,
                "height": 2,
                "smooth": True,
                "points": [
                    {
                        "id": "8c1e...",
                        "index": 0,
                        "kind": "CORNER",
                        "position": [0.0, 0.0],
                        "color": {"mode": "PRESET", "rgb": [1.0, 0.231, 0.188], "alpha": 1.0, "preset_name": "red"}
                    }
                ]
            }
        }
    )


class DimensionsRequest(BaseModel):
    """Grid size; values outside 2..5 are clamped"""
    width: int
    height: int


class DimensionStepRequest(BaseModel):
    """Step one grid axis by delta (clamped to 2..5)"""
    param: Literal["width", "height"]
    delta: int = Field(description="Number of steps, negative to shrink")


class PositionRequest(BaseModel):
    """Proposed normalized position; constraints are applied server-side"""
    model_config = ConfigDict(allow_inf_nan=False)

    x: float
    y: float


class DragRequest(BaseModel):
    """Pointer location in viewport pixels"""
    model_config = ConfigDict(allow_inf_nan=False)

    px: float
    py: float
    viewport_width: float = Field(gt=0)
    viewport_height: float = Field(gt=0)


class ColorRequest(BaseModel):
    """Either a normalized rgb triple or a preset name"""
    rgb: Optional[List[float]] = Field(None, min_length=3, max_length=3)
    preset: Optional[str] = None

    @model_validator(mode="after")
    def _exactly_one(self):
        if (self.rgb is None) == (self.preset is None):
            raise ValueError("Provide exactly one of 'rgb' or 'preset'")
        return self

    model_config = ConfigDict(
        allow_inf_nan=False,
        json_schema_extra={
            "examples": [
                {"rgb": [0.2, 0.4, 0.9]},
                {"preset": "indigo"}
            ]
        }
    )


class SmoothingRequest(BaseModel):
    smooth: bool


class PositionResponse(BaseModel):
    id: str
    position: List[float]


class FrameResponse(BaseModel):
    width: int
    height: int
    positions: List[List[float]]
    colors: List[ColorResponse]
    smooth: bool
    animated: bool
    timestamp: float


class ExportResponse(BaseModel):
    format: str
    text: str
    notice_until: float = Field(description="Clock time until which the copy confirmation is shown")


class PresetResponse(BaseModel):
    name: str
    rgb: List[int] = Field(description="8-bit [r, g, b]")


class PaletteResponse(BaseModel):
    presets: List[PresetResponse] = Field(description="Picker swatches in display order")
    default_palette: List[str]
