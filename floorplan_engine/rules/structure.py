"""Document-level structure checks: metadata, room list, id uniqueness."""

from __future__ import annotations

from floorplan_engine.rules.base import ValidationRule
from floorplan_engine.models import ValidationContext


class MetaPresentRule(ValidationRule):
    rule_id = "structure.meta"
    name = "Meta Section Present"
    priority = 10

    def check(self, context: ValidationContext) -> None:
        if context.apartment.meta is None:
            context.add_error("Missing meta section")


class RoomsPresentRule(ValidationRule):
    rule_id = "structure.rooms"
    name = "Rooms Defined"
    priority = 20

    def check(self, context: ValidationContext) -> None:
        if not context.apartment.rooms:
            context.add_error("No rooms defined")


class DuplicateIdRule(ValidationRule):
    """
    Lists every id whose first occurrence is at an earlier index, so an id
    used three times appears twice. A missing id counts as a value like any
    other and is rendered as `None`.
    """

    rule_id = "structure.duplicate_ids"
    name = "Unique Room IDs"
    priority = 30

    def check(self, context: ValidationContext) -> None:
        ids = [room.id for room in context.apartment.rooms]
        duplicates = [str(room_id) for i, room_id in enumerate(ids) if ids.index(room_id) != i]

        if duplicates:
            context.add_error(f"Duplicate room IDs: {', '.join(duplicates)}")
