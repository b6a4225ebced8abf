"""
Render endpoints - current frame, export, color palette
"""

from fastapi import APIRouter, Depends, Query

from meshgradient.api.dependencies import get_service_container
from meshgradient.api.middleware.error_handler import InvalidExportFormatError
from meshgradient.api.schemas.mesh import ExportResponse, FrameResponse, PaletteResponse, PresetResponse
from meshgradient.services.service_container import ServiceContainer
from meshgradient.utils.serialization import Serializer

router = APIRouter(tags=["Render"])


@router.get("/frame", response_model=FrameResponse, summary="Current render frame")
async def get_frame(services: ServiceContainer = Depends(get_service_container)) -> FrameResponse:
    """
    The ticker's last frame while it runs; otherwise a frame computed on
    demand from the session clock.
    """
    ticker = services.ticker

    if ticker is not None and ticker.running and ticker.last_frame is not None:
        frame = ticker.last_frame
    else:
        session = services.session
        frame = session.frame_at(session.clock())

    return FrameResponse(**Serializer.frame_to_dict(frame))


@router.get("/export", response_model=ExportResponse, summary="Export the mesh")
async def export_mesh(
    format: str = Query("swiftui", description="swiftui or json"),
    services: ServiceContainer = Depends(get_service_container)
) -> ExportResponse:
    """
    Textual export for the clipboard. Also arms the 2 second copy
    confirmation notice.
    """
    try:
        fmt = Serializer.str_to_export_format(format)
    except ValueError:
        raise InvalidExportFormatError(format)

    result = await services.session.export(fmt)
    return ExportResponse(format=result.format.value, text=result.text, notice_until=result.notice_until)


@router.get("/palette", response_model=PaletteResponse, summary="Color picker swatches")
async def get_palette(services: ServiceContainer = Depends(get_service_container)) -> PaletteResponse:
    color_manager = services.color_manager
    presets = [
        PresetResponse(name=name, rgb=list(color_manager.get_preset_rgb(name)))
        for name in color_manager.preset_order
    ]
    return PaletteResponse(presets=presets, default_palette=color_manager.default_palette)
