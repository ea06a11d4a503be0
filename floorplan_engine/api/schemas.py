"""API request/response schemas."""

from __future__ import annotations
from pydantic import BaseModel

from floorplan_engine.models import Apartment, Wall, Opening


class MoveRequest(BaseModel):
    """Request body for the /rooms/{id}/move endpoint."""
    apartment: Apartment
    dx: float
    dy: float


class ResizeRequest(BaseModel):
    """Request body for the /rooms/{id}/resize endpoint."""
    apartment: Apartment
    width: float
    height: float


class ReportResponse(BaseModel):
    report: str


class ExportRecord(BaseModel):
    """One flattened room as handed to CAD import."""
    name: str
    type: str
    x: float
    y: float
    width: float
    height: float
    area: float
    walls: list[Wall]
    openings: list[Opening]


class RuleInfo(BaseModel):
    id: str
    name: str
