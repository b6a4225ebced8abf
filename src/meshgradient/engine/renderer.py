"""
Renderer capability

The mesh rasterizer is external. Anything with a matching render() method
can receive frames from the FrameTicker; no base class is required.
"""

from typing import Protocol, Sequence

from meshgradient.models.color import Color
from meshgradient.models.geometry import Position


class MeshRenderer(Protocol):
    def render(
        self,
        width: int,
        height: int,
        positions: Sequence[Position],
        colors: Sequence[Color],
        smooth: bool,
    ) -> None:
        ...
