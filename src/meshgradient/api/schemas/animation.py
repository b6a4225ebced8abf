"""
Animation schemas - Pydantic models for animation-related requests/responses
"""

from typing import List, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field


class AnimationResponse(BaseModel):
    enabled: bool
    kind: str = Field(description="Animation kind (e.g., 'Wave')")
    speed: float
    intensity: float


class AnimationUpdateRequest(BaseModel):
    """Partial update; speed is clamped to 0.1..3.0 and intensity to 0.1..2.0"""
    enabled: Optional[bool] = None
    kind: Optional[str] = Field(None, description="Kind name or display value (e.g., 'SPIRAL' or 'Spiral')")
    speed: Optional[float] = None
    intensity: Optional[float] = None

    model_config = ConfigDict(
        allow_inf_nan=False,
        json_schema_extra={
            "example": {"enabled": True, "kind": "Spiral", "speed": 1.5}
        }
    )


class AnimationStepRequest(BaseModel):
    """Step speed or intensity by delta * 0.1 (clamped to range)"""
    param: Literal["speed", "intensity"]
    delta: int


class AnimationKindListResponse(BaseModel):
    kinds: List[str]
    count: int
