"""
Animation endpoints - animation kind, speed, intensity, on/off
"""

from fastapi import APIRouter, Depends

from meshgradient.api.dependencies import get_session
from meshgradient.api.middleware.error_handler import InvalidAnimationKindError
from meshgradient.api.schemas.animation import (
    AnimationKindListResponse,
    AnimationResponse,
    AnimationStepRequest,
    AnimationUpdateRequest,
)
from meshgradient.engine.animation_field import AnimationParameters
from meshgradient.models.animation_params import AnimationParamID
from meshgradient.models.enums import AnimationKind
from meshgradient.services.editor_service import EditorSession
from meshgradient.utils.serialization import Serializer

router = APIRouter(prefix="/animation", tags=["Animation"])


def animation_response(params: AnimationParameters) -> AnimationResponse:
    return AnimationResponse(
        enabled=params.enabled,
        kind=params.kind.value,
        speed=params.speed,
        intensity=params.intensity,
    )


@router.get("", response_model=AnimationResponse, summary="Get animation settings")
async def get_animation(session: EditorSession = Depends(get_session)) -> AnimationResponse:
    return animation_response(session.animation)


@router.put("", response_model=AnimationResponse, summary="Update animation settings")
async def update_animation(
    request: AnimationUpdateRequest,
    session: EditorSession = Depends(get_session)
) -> AnimationResponse:
    """
    Partial update. Omitted fields keep their value.

    **Errors:**
    - 422: Unknown animation kind
    """
    kind = None
    if request.kind is not None:
        try:
            kind = Serializer.str_to_animation_kind(request.kind)
        except ValueError:
            raise InvalidAnimationKindError(request.kind)

    params = await session.set_animation(
        enabled=request.enabled,
        kind=kind,
        speed=request.speed,
        intensity=request.intensity,
    )
    return animation_response(params)


@router.post("/step", response_model=AnimationResponse, summary="Step speed or intensity")
async def step_animation(
    request: AnimationStepRequest,
    session: EditorSession = Depends(get_session)
) -> AnimationResponse:
    """Slider step of 0.1 per delta, clamped to the parameter range."""
    params = await session.step_animation(AnimationParamID(request.param), request.delta)
    return animation_response(params)


@router.get("/kinds", response_model=AnimationKindListResponse, summary="List animation kinds")
async def list_kinds() -> AnimationKindListResponse:
    kinds = [kind.value for kind in AnimationKind]
    return AnimationKindListResponse(kinds=kinds, count=len(kinds))
