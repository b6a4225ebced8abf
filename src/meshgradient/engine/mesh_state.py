"""
MeshState - authoritative list of control points

Single owner of point positions and colors. Drag, recolor, randomize and
resize go through the methods below; readers take a MeshSnapshot.
"""

import random
from typing import Iterator, List, Optional, Sequence

from meshgradient.engine.constraints import constrain
from meshgradient.engine.topology import base_positions, classify
from meshgradient.models.color import Color
from meshgradient.models.enums import PointKind
from meshgradient.models.frame import MeshSnapshot
from meshgradient.models.geometry import GridDimensions, Position
from meshgradient.models.mesh_point import MeshPoint
from meshgradient.utils.logger import LogCategory, get_category_logger

log = get_category_logger(LogCategory.MESH)


class PointNotFoundError(KeyError):
    """No control point with the given id"""

    def __init__(self, point_id: str):
        self.point_id = point_id
        super().__init__(point_id)

    def __str__(self) -> str:
        return f"No mesh point with id '{self.point_id}'"


class MeshState:
    """
    Row-major control point list (y outer, x inner)

    Invariants:
    - len(points) == width * height
    - corner points never change position or color after creation
      (except through resize, which rebuilds everything)
    - edge points keep their pinned axis at exactly 0 or 1

    Example:
        mesh = MeshState(GridDimensions(3, 3), palette)
        mesh.move_point(mesh.points[4].id, Position(0.3, 0.7))
        mesh.randomize_points()
        snapshot = mesh.snapshot()
    """

    def __init__(
        self,
        dimensions: GridDimensions,
        palette: Sequence[Color],
        rng: Optional[random.Random] = None,
    ):
        """
        Args:
            dimensions: Grid size, both axes in [2, 5]
            palette: Default colors, assigned cyclically by row-major index
            rng: Random source for randomize_* (default: new Random())
        """
        if not palette:
            raise ValueError("MeshState needs at least one palette color")

        self._palette: List[Color] = list(palette)
        self._rng = rng or random.Random()
        self._dimensions = dimensions
        self._points: List[MeshPoint] = []
        self._rebuild()

    # ------------------------------------------------------------
    # Read access
    # ------------------------------------------------------------

    @property
    def dimensions(self) -> GridDimensions:
        return self._dimensions

    @property
    def width(self) -> int:
        return self._dimensions.width

    @property
    def height(self) -> int:
        return self._dimensions.height

    @property
    def points(self) -> List[MeshPoint]:
        """Shallow copy of the point list"""
        return list(self._points)

    @property
    def palette(self) -> List[Color]:
        return list(self._palette)

    def __len__(self) -> int:
        return len(self._points)

    def __iter__(self) -> Iterator[MeshPoint]:
        return iter(list(self._points))

    def get_point(self, point_id: str) -> MeshPoint:
        for point in self._points:
            if point.id == point_id:
                return point
        raise PointNotFoundError(point_id)

    def positions(self) -> List[Position]:
        return [p.position for p in self._points]

    def colors(self) -> List[Color]:
        return [p.color for p in self._points]

    def kinds(self) -> List[PointKind]:
        return [p.kind for p in self._points]

    def snapshot(self) -> MeshSnapshot:
        return MeshSnapshot(
            width=self.width,
            height=self.height,
            ids=tuple(p.id for p in self._points),
            positions=tuple(p.position for p in self._points),
            colors=tuple(p.color for p in self._points),
            kinds=tuple(p.kind for p in self._points),
        )

    # ------------------------------------------------------------
    # Mutations
    # ------------------------------------------------------------

    def resize(self, width: int, height: int) -> None:
        """
        Rebuild the mesh for new dimensions

        All manual edits (moves, recolors, randomization) are discarded and
        the default layout and palette are restored.
        """
        self._dimensions = GridDimensions(width, height)
        self._rebuild()

    def move_point(self, point_id: str, proposed: Position) -> Position:
        """
        Move a point, applying the constraint rules for its kind

        Returns:
            The committed position (unchanged for corners)
        """
        point = self.get_point(point_id)
        point.position = constrain(point.position, Position(*proposed), point.kind)
        log.debug("Point moved", point=point_id, kind=point.kind.name, position=str(point.position))
        return point.position

    def recolor_point(self, point_id: str, color: Color) -> None:
        point = self.get_point(point_id)
        point.color = color
        log.debug("Point recolored", point=point_id, color=str(color))

    def randomize_colors(self) -> None:
        """Give every non-corner point a uniform random RGB color"""
        for point in self._points:
            if point.is_corner:
                continue
            point.color = Color.random(self._rng)

        log.info("Colors randomized", points=self._movable_count())

    def randomize_points(self) -> None:
        """
        Random color and position for every non-corner point

        Vertical edge points get a new y only, horizontal edge points a new x
        only, interior points both; each coordinate uniform in [0, 1].
        """
        rng = self._rng
        for point in self._points:
            if point.is_corner:
                continue

            point.color = Color.random(rng)

            x, y = point.position
            if point.kind == PointKind.VERTICAL_EDGE:
                point.position = Position(x, rng.uniform(0.0, 1.0))
            elif point.kind == PointKind.HORIZONTAL_EDGE:
                point.position = Position(rng.uniform(0.0, 1.0), y)
            else:
                point.position = Position(rng.uniform(0.0, 1.0), rng.uniform(0.0, 1.0))

        log.info("Points randomized", points=self._movable_count())

    # ------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------

    def _rebuild(self) -> None:
        width, height = self._dimensions.width, self._dimensions.height
        palette = self._palette

        self._points = [
            MeshPoint(
                position=position,
                color=palette[index % len(palette)],
                kind=classify(position),
            )
            for index, position in enumerate(base_positions(width, height))
        ]

        log.info(f"Mesh initialized {width}x{height}", points=len(self._points))

    def _movable_count(self) -> int:
        return sum(1 for p in self._points if not p.is_corner)

    def __repr__(self) -> str:
        return f"MeshState({self.width}x{self.height}, points={len(self._points)})"
