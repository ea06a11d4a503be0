"""Geometric analysis — areas, wall lengths, bounding box, room relations."""

from __future__ import annotations
import math

from floorplan_engine.models import (
    Apartment, Room, BoundingBox, WallType, is_horizontal_side,
)


def room_area(room: Room) -> float:
    return room.bounds.width * room.bounds.height


def total_area(apartment: Apartment) -> float:
    return sum((room_area(room) for room in apartment.rooms), 0)


def room_perimeter(room: Room) -> float:
    return 2 * (room.bounds.width + room.bounds.height)


def wall_length_by_type(apartment: Apartment) -> dict[str, float]:
    """
    Sum wall lengths per construction type.

    North/south walls contribute the room width, east/west walls its height.
    Walls of type `none` are skipped. All three real types are always present.
    """
    lengths: dict[str, float] = {
        WallType.BUILDING.value: 0,
        WallType.EXTERIOR.value: 0,
        WallType.INTERIOR.value: 0,
    }

    for room in apartment.rooms:
        for wall in room.walls:
            if wall.type == WallType.NONE:
                continue
            length = room.bounds.width if is_horizontal_side(wall.side) else room.bounds.height
            lengths[wall.type.value] += length

    return lengths


def get_bounds(apartment: Apartment) -> BoundingBox:
    """Bounding box of every room. Infinite extents when there are no rooms."""
    min_x = min_y = math.inf
    max_x = max_y = -math.inf

    for room in apartment.rooms:
        b = room.bounds
        min_x = min(min_x, b.x)
        min_y = min(min_y, b.y)
        max_x = max(max_x, b.right)
        max_y = max(max_y, b.bottom)

    return BoundingBox.from_extents(min_x, min_y, max_x, max_y)


def _coincide(a: float, b: float, tolerance: float) -> bool:
    if tolerance <= 0:
        return a == b
    return abs(a - b) <= tolerance


def are_adjacent(room1: Room, room2: Room, tolerance: float = 0.0) -> bool:
    """True if the two rooms share an edge segment of positive length."""
    r1 = room1.bounds
    r2 = room2.bounds

    # Side by side: right edge of one on the left edge of the other
    if _coincide(r1.right, r2.x, tolerance) or _coincide(r2.right, r1.x, tolerance):
        overlap_y = max(0, min(r1.bottom, r2.bottom) - max(r1.y, r2.y))
        if overlap_y > 0:
            return True

    # Stacked: bottom edge of one on the top edge of the other
    if _coincide(r1.bottom, r2.y, tolerance) or _coincide(r2.bottom, r1.y, tolerance):
        overlap_x = max(0, min(r1.right, r2.right) - max(r1.x, r2.x))
        if overlap_x > 0:
            return True

    return False


def rooms_overlap(room1: Room, room2: Room) -> bool:
    """True if the rooms intersect with positive area. Touching edges don't count."""
    r1 = room1.bounds
    r2 = room2.bounds

    return not (
        r1.right <= r2.x
        or r2.right <= r1.x
        or r1.bottom <= r2.y
        or r2.bottom <= r1.y
    )
