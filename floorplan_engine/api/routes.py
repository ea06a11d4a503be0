"""FastAPI route definitions."""

from __future__ import annotations

from fastapi import APIRouter

from floorplan_engine.models import Apartment, ApartmentStats, Room, ValidationResult
from floorplan_engine.services.apartment_service import ApartmentService
from floorplan_engine.api.schemas import (
    ExportRecord, MoveRequest, ReportResponse, ResizeRequest, RuleInfo,
)

router = APIRouter()

# Shared service instance
_service = ApartmentService()


@router.post("/validate", response_model=ValidationResult)
async def validate_apartment(apartment: Apartment) -> ValidationResult:
    """Run every validation rule and return errors and warnings."""
    return _service.validate(apartment)


# Everything below reads room bounds; IncompleteGeometryError maps to 422 in main.

@router.post("/report", response_model=ReportResponse)
async def report(apartment: Apartment) -> ReportResponse:
    """Render the Markdown floor-plan report."""
    _service.ensure_geometry(apartment)
    return ReportResponse(report=_service.report(apartment))


@router.post("/export", response_model=list[ExportRecord])
async def export(apartment: Apartment) -> list[ExportRecord]:
    """Flatten rooms into CAD import records."""
    _service.ensure_geometry(apartment)
    return [ExportRecord(**record) for record in _service.export(apartment)]


@router.post("/stats", response_model=ApartmentStats)
async def stats(apartment: Apartment) -> ApartmentStats:
    _service.ensure_geometry(apartment)
    return _service.stats(apartment)


@router.post("/rooms/{room_id}/adjacent", response_model=list[Room])
async def adjacent_rooms(room_id: str, apartment: Apartment) -> list[Room]:
    """Rooms sharing an edge with the given room (empty if unknown)."""
    _service.ensure_geometry(apartment)
    return _service.adjacent_rooms(apartment, room_id)


@router.post("/rooms/{room_id}/move", response_model=Apartment)
async def move_room(room_id: str, request: MoveRequest) -> Apartment:
    _service.ensure_geometry(request.apartment)
    return _service.move_room(request.apartment, room_id, request.dx, request.dy)


@router.post("/rooms/{room_id}/resize", response_model=Apartment)
async def resize_room(room_id: str, request: ResizeRequest) -> Apartment:
    _service.ensure_geometry(request.apartment)
    return _service.resize_room(request.apartment, room_id, request.width, request.height)


@router.get("/rules", response_model=list[RuleInfo])
async def list_rules() -> list[RuleInfo]:
    """List validation rules in the order they run."""
    return [RuleInfo(**r) for r in _service.list_rules()]


@router.get("/health")
async def health() -> dict[str, str]:
    return {"status": "ok"}
