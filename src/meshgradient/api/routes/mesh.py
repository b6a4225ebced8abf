"""
Mesh Endpoints - grid size, point moves, colors, randomization

All moves go through the constraint rules: corners never move, edge
points slide along their edge, interior points stay inside [0, 1]^2.
"""

from fastapi import APIRouter, Depends

from meshgradient.api.dependencies import get_service_container, get_session
from meshgradient.api.middleware.error_handler import PresetNotFoundError
from meshgradient.api.schemas.mesh import (
    ColorRequest,
    ColorResponse,
    DimensionStepRequest,
    DimensionsRequest,
    DragRequest,
    MeshResponse,
    PositionRequest,
    PositionResponse,
    SmoothingRequest,
)
from meshgradient.models.animation_params import AnimationParamID
from meshgradient.models.color import Color
from meshgradient.services.editor_service import EditorSession
from meshgradient.services.service_container import ServiceContainer
from meshgradient.utils.serialization import Serializer

router = APIRouter(prefix="/mesh", tags=["Mesh"])


def mesh_response(session: EditorSession) -> MeshResponse:
    return MeshResponse(smooth=session.smooth, **Serializer.snapshot_to_dict(session.mesh.snapshot()))


@router.get("", response_model=MeshResponse, summary="Get the mesh")
async def get_mesh(session: EditorSession = Depends(get_session)) -> MeshResponse:
    """Dimensions, smoothing flag and every point (row-major) with id, kind, position and color."""
    return mesh_response(session)


@router.put("/dimensions", response_model=MeshResponse, summary="Resize the grid")
async def set_dimensions(
    request: DimensionsRequest,
    session: EditorSession = Depends(get_session)
) -> MeshResponse:
    """
    Set grid width and height (each clamped to 2..5).

    A real size change rebuilds the mesh with the default layout and palette;
    previous edits are discarded.
    """
    await session.set_dimensions(request.width, request.height)
    return mesh_response(session)


@router.post("/dimensions/step", response_model=MeshResponse, summary="Step one grid axis")
async def step_dimension(
    request: DimensionStepRequest,
    session: EditorSession = Depends(get_session)
) -> MeshResponse:
    """Width or height stepper; the result stays within 2..5."""
    await session.step_dimension(AnimationParamID(request.param), request.delta)
    return mesh_response(session)


@router.put("/points/{point_id}/position", response_model=PositionResponse, summary="Move a point")
async def move_point(
    point_id: str,
    request: PositionRequest,
    session: EditorSession = Depends(get_session)
) -> PositionResponse:
    """Propose a normalized position; the committed (constrained) position is returned."""
    position = await session.move_point(point_id, request.x, request.y)
    return PositionResponse(id=point_id, position=Serializer.position_to_list(position))


@router.post("/points/{point_id}/drag", response_model=PositionResponse, summary="Drag a point")
async def drag_point(
    point_id: str,
    request: DragRequest,
    session: EditorSession = Depends(get_session)
) -> PositionResponse:
    """Pointer location in viewport pixels, normalized by the viewport size."""
    position = await session.drag_point(
        point_id, request.px, request.py, request.viewport_width, request.viewport_height
    )
    return PositionResponse(id=point_id, position=Serializer.position_to_list(position))


@router.put("/points/{point_id}/color", response_model=ColorResponse, summary="Recolor a point")
async def recolor_point(
    point_id: str,
    request: ColorRequest,
    services: ServiceContainer = Depends(get_service_container)
) -> ColorResponse:
    session = services.session

    if request.preset is not None:
        if not services.color_manager.has_preset(request.preset):
            raise PresetNotFoundError(request.preset, services.color_manager.preset_order)
        color = await session.apply_preset(point_id, request.preset)
    else:
        color = await session.recolor_point(point_id, Color.from_rgb(*request.rgb))

    return ColorResponse(**Serializer.color_to_dict(color))


@router.post("/randomize/colors", response_model=MeshResponse, summary="Randomize colors")
async def randomize_colors(session: EditorSession = Depends(get_session)) -> MeshResponse:
    """Random color for every non-corner point."""
    await session.randomize_colors()
    return mesh_response(session)


@router.post("/randomize/points", response_model=MeshResponse, summary="Randomize points")
async def randomize_points(session: EditorSession = Depends(get_session)) -> MeshResponse:
    """Random color and constrained random position for every non-corner point."""
    await session.randomize_points()
    return mesh_response(session)


@router.put("/smoothing", response_model=MeshResponse, summary="Toggle color smoothing")
async def set_smoothing(
    request: SmoothingRequest,
    session: EditorSession = Depends(get_session)
) -> MeshResponse:
    await session.set_smoothing(request.smooth)
    return mesh_response(session)
