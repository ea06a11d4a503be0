"""Room lookup and filtering."""

from __future__ import annotations

from floorplan_engine.models import Apartment, Room
from floorplan_engine.core.geometry import are_adjacent


def find_room(apartment: Apartment, room_id: str) -> Room | None:
    for room in apartment.rooms:
        if room.id == room_id:
            return room
    return None


def get_rooms_by_type(apartment: Apartment, room_type: str) -> list[Room]:
    return [room for room in apartment.rooms if room.type == room_type]


def get_adjacent_rooms(
    apartment: Apartment, room_id: str, tolerance: float = 0.0,
) -> list[Room]:
    """Rooms sharing an edge with `room_id`. Empty if the id is unknown."""
    target = find_room(apartment, room_id)
    if target is None:
        return []

    return [
        room for room in apartment.rooms
        if room.id != room_id and are_adjacent(target, room, tolerance)
    ]
