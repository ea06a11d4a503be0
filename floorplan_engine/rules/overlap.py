"""Pairwise overlap detection between rooms."""

from __future__ import annotations

from floorplan_engine.rules.base import ValidationRule
from floorplan_engine.models import ValidationContext
from floorplan_engine.core.geometry import rooms_overlap


class RoomOverlapRule(ValidationRule):
    rule_id = "room.overlap"
    name = "Room Overlap"
    priority = 60

    def applies(self, context: ValidationContext) -> bool:
        return len(context.apartment.rooms) > 1

    def check(self, context: ValidationContext) -> None:
        # Rooms without bounds are already reported by room.integrity
        rooms = [r for r in context.apartment.rooms if r.bounds is not None]
        for i in range(len(rooms)):
            for j in range(i + 1, len(rooms)):
                if rooms_overlap(rooms[i], rooms[j]):
                    context.add_warning(
                        f"Rooms {rooms[i].id} and {rooms[j].id} overlap"
                    )
