"""
Exporter - textual description of a mesh

Produces a copy-paste ready structured literal: dimensions, positions and
RGB colors (3 decimals, no alpha) and the smoothing flag.

Formats:
- SWIFTUI: a MeshGradient(...) literal
- JSON: the same content as a JSON document

Export never fails. A color whose channels cannot be extracted is written
as a fully transparent placeholder and a warning is logged.
"""

import json
from typing import Any, Dict, List, Optional, Tuple

from meshgradient.models.color import Color
from meshgradient.models.enums import ExportFormat
from meshgradient.models.frame import MeshSnapshot
from meshgradient.utils.logger import LogCategory, get_category_logger

log = get_category_logger(LogCategory.EXPORT)

SWIFTUI_CLEAR = "Color(.clear)"
JSON_CLEAR = {"red": 0.0, "green": 0.0, "blue": 0.0, "opacity": 0.0}


def _fmt(value: float) -> str:
    return f"{value:.3f}"


def _round3(value: float) -> float:
    return float(_fmt(value))


def _extract_rgb(color: Color, index: int) -> Optional[Tuple[float, float, float]]:
    """Channels of a color, or None (logged) when they cannot be extracted"""
    try:
        r, g, b = color.to_rgb()
        return float(r), float(g), float(b)
    except (ValueError, TypeError) as e:
        log.warn("Color components unavailable, exporting clear placeholder", index=index, error=str(e))
        return None


def _swiftui(snapshot: MeshSnapshot, smooth: bool) -> str:
    point_lines = [
        f"        SIMD2<Float>({_fmt(p.x)}, {_fmt(p.y)})"
        for p in snapshot.positions
    ]

    color_lines: List[str] = []
    for index, color in enumerate(snapshot.colors):
        rgb = _extract_rgb(color, index)
        if rgb is None:
            color_lines.append(f"        {SWIFTUI_CLEAR}")
        else:
            r, g, b = rgb
            color_lines.append(f"        Color(red: {_fmt(r)}, green: {_fmt(g)}, blue: {_fmt(b)})")

    points = ",\n".join(point_lines)
    colors = ",\n".join(color_lines)

    return (
        "MeshGradient(\n"
        f"    width: {snapshot.width},\n"
        f"    height: {snapshot.height},\n"
        "    points: [\n"
        f"{points}\n"
        "    ],\n"
        "    colors: [\n"
        f"{colors}\n"
        "    ],\n"
        f"    smoothsColors: {'true' if smooth else 'false'}\n"
        ")"
    )


def _json(snapshot: MeshSnapshot, smooth: bool) -> str:
    colors: List[Dict[str, Any]] = []
    for index, color in enumerate(snapshot.colors):
        rgb = _extract_rgb(color, index)
        if rgb is None:
            colors.append(dict(JSON_CLEAR))
        else:
            r, g, b = rgb
            colors.append({"red": _round3(r), "green": _round3(g), "blue": _round3(b)})

    document = {
        "width": snapshot.width,
        "height": snapshot.height,
        "points": [[_round3(p.x), _round3(p.y)] for p in snapshot.positions],
        "colors": colors,
        "smoothsColors": smooth,
    }
    return json.dumps(document, indent=2)


_FORMATTERS = {
    ExportFormat.SWIFTUI: _swiftui,
    ExportFormat.JSON: _json,
}


def export_mesh(snapshot: MeshSnapshot, smooth: bool, fmt: ExportFormat = ExportFormat.SWIFTUI) -> str:
    """
    Serialize a mesh snapshot

    Args:
        snapshot: Mesh to export (base positions, not animated ones)
        smooth: Smoothing flag passed to the renderer
        fmt: Output format

    Returns:
        Export text
    """
    text = _FORMATTERS[fmt](snapshot, smooth)
    log.info(
        f"Mesh exported as {fmt.value}",
        grid=f"{snapshot.width}x{snapshot.height}",
        chars=len(text),
    )
    return text
