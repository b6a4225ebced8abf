"""
Editor Service - the single editing session a front end talks to

Owns the MeshState, the animation parameters, the smoothing flag and the
export confirmation notice. Every mutation is applied synchronously before
the first await, then published on the EventBus, so no reader can observe a
half-applied change.
"""

import random
import time
from dataclasses import dataclass
from typing import Callable, Optional

from meshgradient.engine.animation_field import AnimationParameters, evaluate
from meshgradient.engine.constraints import pointer_to_position
from meshgradient.engine.mesh_state import MeshState
from meshgradient.managers.color_manager import ColorManager
from meshgradient.managers.config_manager import EditorConfig
from meshgradient.models.animation_params import (
    AnimationParamID,
    GridSizeParam,
    IntensityParam,
    SpeedParam,
)
from meshgradient.models.color import Color
from meshgradient.models.enums import AnimationKind, EventSource, ExportFormat
from meshgradient.models.events import Event, EventType
from meshgradient.models.frame import RenderFrame
from meshgradient.models.geometry import GridDimensions, Position
from meshgradient.services.event_bus import EventBus
from meshgradient.services.exporter import export_mesh
from meshgradient.utils.logger import LogCategory, get_logger

log = get_logger().for_category(LogCategory.MESH)

EXPORT_NOTICE_SECONDS = 2.0


@dataclass(frozen=True)
class ExportResult:
    text: str
    format: ExportFormat
    notice_until: float


class EditorSession:
    """
    Mesh editing session

    Example:
        session = EditorSession(config.editor, config.color_manager, event_bus)
        await session.set_dimensions(4, 3)
        await session.drag_point(point_id, 120, 80, 400, 300)
        frame = session.frame_at(time.time())
        result = await session.export(ExportFormat.SWIFTUI)
    """

    def __init__(
        self,
        config: EditorConfig,
        color_manager: ColorManager,
        event_bus: Optional[EventBus] = None,
        rng: Optional[random.Random] = None,
        clock: Callable[[], float] = time.time,
    ):
        self.color_manager = color_manager
        self.event_bus = event_bus or EventBus()
        self.clock = clock

        self._width_param = GridSizeParam(AnimationParamID.GRID_WIDTH)
        self._height_param = GridSizeParam(AnimationParamID.GRID_HEIGHT)

        self.mesh = MeshState(
            GridDimensions(
                self._width_param.clamp(config.width),
                self._height_param.clamp(config.height),
            ),
            color_manager.default_palette_colors(),
            rng=rng,
        )
        self.animation = AnimationParameters().with_changes(
            kind=config.animation_kind,
            speed=config.speed,
            intensity=config.intensity,
            enabled=config.animation_enabled,
        )
        self.smooth = config.smooth
        self._notice_until = 0.0

    # ------------------------------------------------------------
    # Grid
    # ------------------------------------------------------------

    @property
    def dimensions(self) -> GridDimensions:
        return self.mesh.dimensions

    async def set_dimensions(self, width: int, height: int) -> GridDimensions:
        """
        Resize the grid (values clamped to 2..5)

        A real change rebuilds the mesh and discards manual edits.
        """
        dims = GridDimensions(self._width_param.clamp(width), self._height_param.clamp(height))
        if dims == self.mesh.dimensions:
            return dims

        self.mesh.resize(dims.width, dims.height)
        await self._publish(EventType.MESH_RESIZED, width=dims.width, height=dims.height)
        return dims

    async def step_dimension(self, param_id: AnimationParamID, delta: int) -> GridDimensions:
        """
        Stepper for one grid axis

        Raises:
            ValueError: param_id is not GRID_WIDTH or GRID_HEIGHT
        """
        width, height = self.mesh.width, self.mesh.height
        if param_id == AnimationParamID.GRID_WIDTH:
            width = self._width_param.adjust(width, delta)
        elif param_id == AnimationParamID.GRID_HEIGHT:
            height = self._height_param.adjust(height, delta)
        else:
            raise ValueError(f"Not a grid axis: {param_id}")
        return await self.set_dimensions(width, height)

    # ------------------------------------------------------------
    # Points
    # ------------------------------------------------------------

    async def move_point(self, point_id: str, x: float, y: float) -> Position:
        """
        Raises:
            PointNotFoundError: Unknown point id
        """
        position = self.mesh.move_point(point_id, Position(x, y))
        await self._publish(EventType.POINT_MOVED, point_id=point_id, x=position.x, y=position.y)
        return position

    async def drag_point(
        self,
        point_id: str,
        px: float,
        py: float,
        viewport_width: float,
        viewport_height: float,
    ) -> Position:
        """Move a point to a pointer location given in viewport pixels"""
        proposed = pointer_to_position(px, py, viewport_width, viewport_height)
        return await self.move_point(point_id, proposed.x, proposed.y)

    async def recolor_point(self, point_id: str, color: Color) -> Color:
        self.mesh.recolor_point(point_id, color)
        await self._publish(EventType.POINT_RECOLORED, point_id=point_id, color=str(color))
        return color

    async def apply_preset(self, point_id: str, preset_name: str) -> Color:
        """
        Recolor a point with a picker swatch

        Raises:
            KeyError: Unknown preset
            PointNotFoundError: Unknown point id
        """
        color = self.color_manager.get_preset_color(preset_name)
        log.debug(f"Preset '{preset_name}' applied", category=LogCategory.COLOR, point=point_id)
        return await self.recolor_point(point_id, color)

    async def randomize_colors(self) -> None:
        self.mesh.randomize_colors()
        await self._publish(EventType.COLORS_RANDOMIZED)

    async def randomize_points(self) -> None:
        self.mesh.randomize_points()
        await self._publish(EventType.POINTS_RANDOMIZED)

    # ------------------------------------------------------------
    # Animation / rendering
    # ------------------------------------------------------------

    async def set_animation(
        self,
        enabled: Optional[bool] = None,
        kind: Optional[AnimationKind] = None,
        speed: Optional[float] = None,
        intensity: Optional[float] = None,
    ) -> AnimationParameters:
        """Update animation settings; speed and intensity are clamped"""
        self.animation = self.animation.with_changes(
            kind=kind, speed=speed, intensity=intensity, enabled=enabled,
        )
        log.info(
            "Animation updated",
            category=LogCategory.ANIMATION,
            enabled=self.animation.enabled,
            kind=self.animation.kind.value,
            speed=self.animation.speed,
            intensity=self.animation.intensity,
        )
        await self._publish(
            EventType.ANIMATION_CHANGED,
            enabled=self.animation.enabled,
            kind=self.animation.kind.name,
            speed=self.animation.speed,
            intensity=self.animation.intensity,
        )
        return self.animation

    async def step_animation(self, param_id: AnimationParamID, delta: int) -> AnimationParameters:
        """
        Step speed or intensity by delta * 0.1

        Raises:
            ValueError: param_id is not SPEED or INTENSITY
        """
        if param_id == AnimationParamID.SPEED:
            return await self.set_animation(speed=SpeedParam().adjust(self.animation.speed, delta))
        if param_id == AnimationParamID.INTENSITY:
            return await self.set_animation(intensity=IntensityParam().adjust(self.animation.intensity, delta))
        raise ValueError(f"Not an animation parameter: {param_id}")

    async def set_smoothing(self, smooth: bool) -> bool:
        self.smooth = bool(smooth)
        await self._publish(EventType.SMOOTHING_CHANGED, smooth=self.smooth)
        return self.smooth

    def frame_at(self, now: float) -> RenderFrame:
        """
        Render input for one instant

        Takes one snapshot of the mesh; the animation field is only
        evaluated while animation is enabled.
        """
        snapshot = self.mesh.snapshot()
        animated = self.animation.enabled

        positions = snapshot.positions
        if animated:
            positions = tuple(evaluate(snapshot.positions, self.animation, now, snapshot.kinds))

        return RenderFrame(
            width=snapshot.width,
            height=snapshot.height,
            positions=positions,
            colors=snapshot.colors,
            smooth=self.smooth,
            animated=animated,
            timestamp=now,
        )

    # ------------------------------------------------------------
    # Export
    # ------------------------------------------------------------

    async def export(self, fmt: ExportFormat = ExportFormat.SWIFTUI, now: Optional[float] = None) -> ExportResult:
        """
        Export the mesh and arm the copy confirmation notice

        Exports base positions, never animated ones.
        """
        now = self.clock() if now is None else now
        text = export_mesh(self.mesh.snapshot(), self.smooth, fmt)
        self._notice_until = now + EXPORT_NOTICE_SECONDS

        await self._publish(EventType.MESH_EXPORTED, format=fmt.value, chars=len(text))
        return ExportResult(text=text, format=fmt, notice_until=self._notice_until)

    def notice_active(self, now: Optional[float] = None) -> bool:
        """True while the copy confirmation should be shown"""
        now = self.clock() if now is None else now
        return now < self._notice_until

    # ------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------

    async def _publish(self, event_type: EventType, **data) -> None:
        await self.event_bus.publish(Event(type=event_type, source=EventSource.EDITOR, data=data))

    def __repr__(self) -> str:
        return (
            f"EditorSession({self.mesh!r}, animation={self.animation.kind.value}"
            f"{' on' if self.animation.enabled else ' off'}, smooth={self.smooth})"
        )
