"""Analysis output models."""

from __future__ import annotations
from pydantic import BaseModel

from .geometry import BoundingBox


class ValidationResult(BaseModel):
    """Outcome of a validation pass. Warnings never affect `valid`."""
    valid: bool
    errors: list[str] = []
    warnings: list[str] = []


class ApartmentStats(BaseModel):
    """Summary statistics for an apartment."""
    room_count: int = 0
    total_area: float = 0.0
    bounds: BoundingBox | None = None
    wall_lengths: dict[str, float] = {}
    rooms_by_type: dict[str, int] = {}
