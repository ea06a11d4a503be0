from .geometry import Bounds, BoundingBox
from .building import (
    Apartment, ApartmentMeta, Room, Wall, Opening, WallSide, WallType,
    VALID_SIDES, is_horizontal_side,
)
from .analysis import ValidationResult, ApartmentStats
from .parameters import AnalysisParams, ValidationConfig
from .context import ValidationContext

__all__ = [
    "Bounds", "BoundingBox",
    "Apartment", "ApartmentMeta", "Room", "Wall", "Opening", "WallSide", "WallType",
    "VALID_SIDES", "is_horizontal_side",
    "ValidationResult", "ApartmentStats",
    "AnalysisParams", "ValidationConfig",
    "ValidationContext",
]
