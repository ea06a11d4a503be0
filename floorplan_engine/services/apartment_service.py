"""High-level apartment analysis service — facade for the API layer."""

from __future__ import annotations
from collections import Counter
from typing import Any

from floorplan_engine.models import (
    Apartment, Room, AnalysisParams, ApartmentStats, ValidationConfig, ValidationResult,
)
from floorplan_engine.core import geometry, mutation, query, reporter
from floorplan_engine.core.registry import RuleRegistry, create_default_registry
from floorplan_engine.core.validator import ApartmentValidator


class IncompleteGeometryError(ValueError):
    """Raised when rooms lack the bounds a geometric operation needs."""

    def __init__(self, errors: list[str]) -> None:
        super().__init__("; ".join(errors))
        self.errors = errors


class ApartmentService:
    """Binds analysis parameters and the rule registry to every operation."""

    def __init__(
        self,
        registry: RuleRegistry | None = None,
        params: AnalysisParams | None = None,
    ) -> None:
        self.registry = registry or create_default_registry()
        self.params = params or AnalysisParams()
        self.validator = ApartmentValidator(self.registry)

    def ensure_geometry(self, apartment: Apartment) -> None:
        """Geometry, reporting and mutation read every room's bounds."""
        errors = [
            f"Room {room.id} missing bounds"
            for room in apartment.rooms if room.bounds is None
        ]
        if errors:
            raise IncompleteGeometryError(errors)

    def validate(
        self, apartment: Apartment, config: ValidationConfig | None = None,
    ) -> ValidationResult:
        return self.validator.validate(apartment, config)

    def report(self, apartment: Apartment) -> str:
        return reporter.generate_report(apartment, self.params)

    def export(self, apartment: Apartment) -> list[dict[str, Any]]:
        return reporter.to_simple_format(apartment)

    def stats(self, apartment: Apartment) -> ApartmentStats:
        rooms = apartment.rooms
        return ApartmentStats(
            room_count=len(rooms),
            total_area=geometry.total_area(apartment),
            bounds=geometry.get_bounds(apartment) if rooms else None,
            wall_lengths=geometry.wall_length_by_type(apartment),
            rooms_by_type=dict(Counter(room.type for room in rooms)),
        )

    def find_room(self, apartment: Apartment, room_id: str) -> Room | None:
        return query.find_room(apartment, room_id)

    def rooms_by_type(self, apartment: Apartment, room_type: str) -> list[Room]:
        return query.get_rooms_by_type(apartment, room_type)

    def adjacent_rooms(self, apartment: Apartment, room_id: str) -> list[Room]:
        return query.get_adjacent_rooms(
            apartment, room_id, self.params.adjacency_tolerance,
        )

    def move_room(self, apartment: Apartment, room_id: str, dx: float, dy: float) -> Apartment:
        return mutation.move_room(apartment, room_id, dx, dy)

    def resize_room(
        self, apartment: Apartment, room_id: str, width: float, height: float,
    ) -> Apartment:
        return mutation.resize_room(apartment, room_id, width, height)

    def list_rules(self) -> list[dict[str, str]]:
        return [
            {"id": r.rule_id, "name": r.name}
            for r in self.registry.list_rules()
        ]
