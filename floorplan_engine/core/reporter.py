"""Markdown report and flat export built on the geometry functions."""

from __future__ import annotations
from typing import Any

from floorplan_engine.models import Apartment, AnalysisParams
from floorplan_engine.core.geometry import (
    room_area, total_area, wall_length_by_type, get_bounds,
)


def _plain(value: float) -> str:
    """Print a raw coordinate without a spurious trailing `.0`."""
    # Beyond 1e21 keep exponent notation (`1e+21`)
    if isinstance(value, float) and value.is_integer() and abs(value) < 1e21:
        return str(int(value))
    return str(value)


def generate_report(apartment: Apartment, params: AnalysisParams | None = None) -> str:
    if params is None:
        params = AnalysisParams()

    unit = params.length_unit
    area_unit = params.area_unit
    d = params.decimals

    bounds = get_bounds(apartment)
    wall_lengths = wall_length_by_type(apartment)
    name = apartment.meta.name if apartment.meta is not None else ""

    lines = [
        f"# {name} - Floor Plan Report",
        "",
        "## Overall Dimensions",
        f"- Width: {bounds.width:.{d}f} {unit}",
        f"- Height: {bounds.height:.{d}f} {unit}",
        f"- Total Area: {total_area(apartment):.{d}f} {area_unit}",
        "",
        "## Rooms",
    ]

    for room in apartment.rooms:
        b = room.bounds
        lines.append(f"### {room.name} ({room.type})")
        lines.append(f"- Dimensions: {_plain(b.width)} × {_plain(b.height)} {unit}")
        lines.append(f"- Area: {room_area(room):.{d}f} {area_unit}")
        lines.append(f"- Position: ({_plain(b.x)}, {_plain(b.y)})")
        if room.openings:
            lines.append(f"- Openings: {', '.join(o.type for o in room.openings)}")
        lines.append("")

    lines.append("## Wall Summary")
    lines.append(f"- Building walls: {wall_lengths['building']:.{d}f} {unit}")
    lines.append(f"- Exterior walls: {wall_lengths['exterior']:.{d}f} {unit}")
    lines.append(f"- Interior walls: {wall_lengths['interior']:.{d}f} {unit}")

    return "\n".join(lines) + "\n"


def to_simple_format(apartment: Apartment) -> list[dict[str, Any]]:
    """
    Flatten rooms into records for CAD import.

    `walls` and `openings` are the room's own lists, not copies.
    """
    return [
        {
            "name": room.name,
            "type": room.type,
            "x": room.bounds.x,
            "y": room.bounds.y,
            "width": room.bounds.width,
            "height": room.bounds.height,
            "area": room_area(room),
            "walls": room.walls,
            "openings": room.openings,
        }
        for room in apartment.rooms
    ]
