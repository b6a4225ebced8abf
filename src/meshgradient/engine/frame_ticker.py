"""
FrameTicker - explicit per-frame scheduler

On every tick:
  1. read the clock once
  2. ask the frame source for a RenderFrame (at most one field evaluation)
  3. push the frame to every registered renderer

The loop runs as a single asyncio task and tick() is synchronous, so two
ticks can never overlap. Stopping the ticker simply ends future ticks;
there is no in-flight work to cancel.
"""

from __future__ import annotations

import asyncio
import time
from collections import deque
from typing import Callable, Deque, Dict, List, Optional

from meshgradient.engine.renderer import MeshRenderer
from meshgradient.models.frame import RenderFrame
from meshgradient.utils.logger import LogCategory, get_logger

log = get_logger().for_category(LogCategory.RENDER)

FrameSource = Callable[[float], RenderFrame]


class FrameTicker:
    """
    Display-clock driven render loop.

    Manages:
    - Registered renderers
    - Tick loop lifecycle (start/stop, pause/resume)
    - FPS control
    - Render metrics
    """

    MIN_FPS = 1
    MAX_FPS = 240

    def __init__(
        self,
        frame_source: FrameSource,
        fps: int = 60,
        clock: Callable[[], float] = time.time,
    ):
        """
        Args:
            frame_source: Callable mapping a clock reading to a RenderFrame
            fps: Target tick frequency (1-240, default 60)
            clock: Time source in seconds (wall clock by default)
        """
        self.frame_source = frame_source
        self.clock = clock
        self.fps = max(self.MIN_FPS, min(fps, self.MAX_FPS))

        self.renderers: List[MeshRenderer] = []

        self.running = False
        self.paused = False
        self.tick_task: Optional[asyncio.Task] = None

        self.frames_rendered = 0
        self.render_errors = 0
        self.frame_times: Deque[float] = deque(maxlen=300)
        self.last_frame: Optional[RenderFrame] = None

    # === Renderers ===

    def add_renderer(self, renderer: MeshRenderer) -> None:
        if renderer not in self.renderers:
            self.renderers.append(renderer)
            log.debug(f"Renderer registered: {type(renderer).__name__}")

    def remove_renderer(self, renderer: MeshRenderer) -> None:
        if renderer in self.renderers:
            self.renderers.remove(renderer)

    # === Controls ===

    def pause(self) -> None: self.paused = True

    def resume(self) -> None: self.paused = False

    def set_fps(self, fps: int) -> None:
        self.fps = max(self.MIN_FPS, min(fps, self.MAX_FPS))
        log.info(f"FrameTicker FPS set to {self.fps}")

    # === Lifecycle ===

    async def start(self) -> None:
        """Start the tick loop."""
        if self.running:
            log.warn("FrameTicker already running")
            return

        self.running = True
        self.tick_task = asyncio.create_task(self._tick_loop())
        log.info(f"FrameTicker started @ {self.fps} FPS", renderers=len(self.renderers))

    async def stop(self) -> None:
        """Stop the tick loop."""
        if not self.running:
            return
        self.running = False
        if self.tick_task:
            self.tick_task.cancel()
            try:
                await self.tick_task
            except asyncio.CancelledError:
                pass
            self.tick_task = None

        log.info(
            "FrameTicker stopped",
            frames_rendered=self.frames_rendered,
            render_errors=self.render_errors,
        )

    # === Tick ===

    def tick(self) -> RenderFrame:
        """
        Run exactly one tick synchronously.

        A renderer that raises is logged and skipped; the others still get
        the frame.
        """
        now = self.clock()
        frame = self.frame_source(now)

        for renderer in list(self.renderers):
            try:
                renderer.render(frame.width, frame.height, frame.positions, frame.colors, frame.smooth)
            except Exception as e:
                self.render_errors += 1
                log.error(f"Renderer {type(renderer).__name__} failed: {e}", exc_info=True)

        self.last_frame = frame
        self.frames_rendered += 1
        self.frame_times.append(time.perf_counter())
        return frame

    async def _tick_loop(self) -> None:
        """Main tick loop @ target FPS."""
        while self.running:
            frame_delay = 1.0 / self.fps

            if not self.paused:
                try:
                    self.tick()
                except Exception as e:
                    log.error(f"Tick error: {e}", exc_info=True)

            await asyncio.sleep(frame_delay)

    # === Metrics ===

    def get_actual_fps(self) -> float:
        """Measured FPS over recent ticks."""
        if len(self.frame_times) < 2:
            return 0.0
        duration = self.frame_times[-1] - self.frame_times[0]
        if duration <= 0:
            return 0.0
        return (len(self.frame_times) - 1) / duration

    def get_metrics(self) -> Dict:
        return {
            "fps_target": self.fps,
            "fps_actual": self.get_actual_fps(),
            "frames_rendered": self.frames_rendered,
            "render_errors": self.render_errors,
            "renderers": len(self.renderers),
            "running": self.running,
            "paused": self.paused,
        }

    def __repr__(self) -> str:
        return f"FrameTicker(fps={self.fps}, running={self.running}, renderers={len(self.renderers)})"
