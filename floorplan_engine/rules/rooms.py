"""Per-room checks: identity, bounds, and openings."""

from __future__ import annotations

from floorplan_engine.rules.base import ValidationRule
from floorplan_engine.models import (
    ValidationContext, Room, VALID_SIDES, is_horizontal_side,
)


class RoomIntegrityRule(ValidationRule):
    """Bounds and opening checks, reported room by room."""

    rule_id = "room.integrity"
    name = "Room Integrity"
    priority = 40

    def applies(self, context: ValidationContext) -> bool:
        return len(context.apartment.rooms) > 0

    def check(self, context: ValidationContext) -> None:
        for room in context.apartment.rooms:
            self._check_bounds(room, context)
            self._check_openings(room, context)

    def _check_bounds(self, room: Room, context: ValidationContext) -> None:
        if not room.id:
            context.add_error("Room missing ID")
        if room.bounds is None:
            context.add_error(f"Room {room.id} missing bounds")
            return
        if room.bounds.width <= 0:
            context.add_error(f"Room {room.id} has invalid width")
        if room.bounds.height <= 0:
            context.add_error(f"Room {room.id} has invalid height")

    def _check_openings(self, room: Room, context: ValidationContext) -> None:
        for opening in room.openings:
            if opening.wall not in VALID_SIDES:
                context.add_error(
                    f"Room {room.id} has opening on invalid wall: {opening.wall}"
                )

            # Extent check runs even for an invalid side (falls back to height)
            if room.bounds is None:
                continue
            wall_length = (
                room.bounds.width if is_horizontal_side(opening.wall)
                else room.bounds.height
            )
            if opening.position + opening.width > wall_length:
                context.add_warning(f"Room {room.id}: opening extends beyond wall")
