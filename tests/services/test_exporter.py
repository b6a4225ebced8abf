import json
import re

import pytest

from meshgradient.engine.mesh_state import MeshState
from meshgradient.models.color import Color
from meshgradient.models.enums import ColorMode, ExportFormat
from meshgradient.models.geometry import GridDimensions, Position
from meshgradient.services.exporter import export_mesh

NUMBER = r"(-?\d+\.\d{3})"
POINT_RE = re.compile(rf"SIMD2<Float>\({NUMBER}, {NUMBER}\)")
COLOR_RE = re.compile(rf"Color\(red: {NUMBER}, green: {NUMBER}, blue: {NUMBER}\)")


@pytest.fixture
def edited_mesh(color_manager, rng):
    mesh = MeshState(GridDimensions(4, 3), color_manager.default_palette_colors(), rng=rng)
    mesh.randomize_points()
    mesh.move_point(mesh.points[5].id, Position(0.123456, 0.987654))
    return mesh


def test_swiftui_round_trip(edited_mesh):
    snapshot = edited_mesh.snapshot()
    text = export_mesh(snapshot, smooth=True, fmt=ExportFormat.SWIFTUI)

    assert text.startswith("MeshGradient(\n")
    assert "    width: 4,\n" in text
    assert "    height: 3,\n" in text
    assert text.rstrip().endswith("smoothsColors: true\n)")

    points = [(float(x), float(y)) for x, y in POINT_RE.findall(text)]
    colors = [tuple(float(c) for c in match) for match in COLOR_RE.findall(text)]

    assert len(points) == len(colors) == 12
    for (x, y), position in zip(points, snapshot.positions):
        assert abs(x - position.x) <= 0.0005
        assert abs(y - position.y) <= 0.0005
    for parsed, color in zip(colors, snapshot.colors):
        for a, b in zip(parsed, color.to_rgb()):
            assert abs(a - b) <= 0.0005


def test_swiftui_list_punctuation():
    mesh = MeshState(GridDimensions(2, 2), [Color.from_rgb(0.5, 0.25, 1.0)])
    text = export_mesh(mesh.snapshot(), smooth=False)

    lines = text.splitlines()
    point_lines = [line for line in lines if "SIMD2" in line]
    assert point_lines[0] == "        SIMD2<Float>(0.000, 0.000),"
    assert point_lines[-1] == "        SIMD2<Float>(1.000, 1.000)"
    assert "        Color(red: 0.500, green: 0.250, blue: 1.000)" in lines
    assert "    smoothsColors: false" in lines


def test_json_round_trip(edited_mesh):
    snapshot = edited_mesh.snapshot()
    document = json.loads(export_mesh(snapshot, smooth=False, fmt=ExportFormat.JSON))

    assert document["width"] == 4
    assert document["height"] == 3
    assert document["smoothsColors"] is False
    assert len(document["points"]) == len(document["colors"]) == 12

    for (x, y), position in zip(document["points"], snapshot.positions):
        assert abs(x - position.x) <= 0.0005
        assert abs(y - position.y) <= 0.0005
    for exported, color in zip(document["colors"], snapshot.colors):
        r, g, b = color.to_rgb()
        assert abs(exported["red"] - r) <= 0.0005
        assert abs(exported["green"] - g) <= 0.0005
        assert abs(exported["blue"] - b) <= 0.0005


def test_unresolved_color_exports_as_clear(mesh_3x3):
    unresolved = Color.from_dict({"mode": "PRESET", "preset_name": "sunset"})
    assert unresolved.mode == ColorMode.PRESET
    mesh_3x3.recolor_point(mesh_3x3.points[4].id, unresolved)

    swift = export_mesh(mesh_3x3.snapshot(), smooth=True)
    document = json.loads(export_mesh(mesh_3x3.snapshot(), smooth=True, fmt=ExportFormat.JSON))

    assert swift.count("Color(.clear)") == 1
    assert len(COLOR_RE.findall(swift)) == 8
    assert document["colors"][4] == {"red": 0.0, "green": 0.0, "blue": 0.0, "opacity": 0.0}
