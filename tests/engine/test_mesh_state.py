import random

import pytest

from meshgradient.engine.mesh_state import MeshState, PointNotFoundError
from meshgradient.models.color import Color
from meshgradient.models.enums import PointKind
from meshgradient.models.geometry import GridDimensions, Position


def test_initial_layout(mesh_3x3, palette):
    assert len(mesh_3x3) == 9
    assert mesh_3x3.positions()[4] == Position(0.5, 0.5)
    assert mesh_3x3.colors() == [palette[i % 3] for i in range(9)]
    assert mesh_3x3.kinds().count(PointKind.CORNER) == 4


def test_ids_are_unique(mesh_3x3):
    ids = [p.id for p in mesh_3x3]
    assert len(set(ids)) == len(ids)


def test_empty_palette_rejected():
    with pytest.raises(ValueError):
        MeshState(GridDimensions(3, 3), [])


def test_resize_restores_defaults_with_cyclic_palette(color_manager, rng):
    palette = color_manager.default_palette_colors()
    mesh = MeshState(GridDimensions(3, 3), palette, rng=rng)
    mesh.randomize_points()

    mesh.resize(4, 3)

    assert (mesh.width, mesh.height) == (4, 3)
    assert len(mesh) == 12
    assert mesh.colors() == [palette[i % len(palette)] for i in range(12)]
    assert mesh.colors()[9] == palette[0]
    assert mesh.positions()[1] == Position(1 / 3, 0.0)


def test_resize_assigns_new_ids(mesh_3x3):
    before = {p.id for p in mesh_3x3}
    mesh_3x3.resize(3, 3)
    assert before.isdisjoint(p.id for p in mesh_3x3)


def test_move_interior_point(mesh_3x3):
    center = mesh_3x3.points[4]

    committed = mesh_3x3.move_point(center.id, Position(0.2, 1.4))

    assert committed == Position(0.2, 1.0)
    assert mesh_3x3.get_point(center.id).position == committed


def test_move_corner_is_noop(mesh_3x3):
    corner = mesh_3x3.points[0]
    assert mesh_3x3.move_point(corner.id, Position(0.4, 0.4)) == Position(0.0, 0.0)


def test_edge_point_keeps_kind_at_corner_coordinate(mesh_3x3):
    left_edge = mesh_3x3.points[3]
    assert left_edge.kind == PointKind.VERTICAL_EDGE

    mesh_3x3.move_point(left_edge.id, Position(0.5, 0.0))
    mesh_3x3.move_point(left_edge.id, Position(0.5, 0.6))

    point = mesh_3x3.get_point(left_edge.id)
    assert point.kind == PointKind.VERTICAL_EDGE
    assert point.position == Position(0.0, 0.6)


def test_unknown_point(mesh_3x3):
    with pytest.raises(PointNotFoundError) as exc_info:
        mesh_3x3.move_point("missing", Position(0.5, 0.5))
    assert exc_info.value.point_id == "missing"
    assert isinstance(exc_info.value, KeyError)


def test_recolor_point(mesh_3x3):
    point = mesh_3x3.points[5]
    color = Color.from_rgb(0.1, 0.2, 0.3)

    mesh_3x3.recolor_point(point.id, color)

    assert mesh_3x3.get_point(point.id).color == color


def test_randomize_colors_leaves_corners(mesh_3x3):
    before = mesh_3x3.snapshot()
    mesh_3x3.randomize_colors()
    after = mesh_3x3.snapshot()

    assert after.positions == before.positions
    for kind, old, new in zip(after.kinds, before.colors, after.colors):
        if kind == PointKind.CORNER:
            assert new == old


def test_randomize_points_1000_times_keeps_topology(palette):
    mesh = MeshState(GridDimensions(3, 3), palette, rng=random.Random(7))
    corners_before = [(p.position, p.color) for p in mesh if p.is_corner]

    for _ in range(1000):
        mesh.randomize_points()

        for point in mesh:
            x, y = point.position
            assert 0.0 <= x <= 1.0 and 0.0 <= y <= 1.0
            if point.kind == PointKind.VERTICAL_EDGE:
                assert x in (0.0, 1.0)
            elif point.kind == PointKind.HORIZONTAL_EDGE:
                assert y in (0.0, 1.0)

        assert [(p.position, p.color) for p in mesh if p.is_corner] == corners_before


def test_randomization_is_reproducible(palette):
    a = MeshState(GridDimensions(4, 4), palette, rng=random.Random(99))
    b = MeshState(GridDimensions(4, 4), palette, rng=random.Random(99))

    a.randomize_points()
    b.randomize_points()

    assert a.positions() == b.positions()
    assert a.colors() == b.colors()


def test_snapshot_is_detached(mesh_3x3):
    snapshot = mesh_3x3.snapshot()
    mesh_3x3.move_point(mesh_3x3.points[4].id, Position(0.1, 0.1))

    assert snapshot.positions[4] == Position(0.5, 0.5)
    assert len(snapshot) == 9
