"""Analysis parameters and validation configuration."""

from __future__ import annotations
from pydantic import BaseModel


class AnalysisParams(BaseModel):
    """User-adjustable parameters for analysis and reporting."""
    adjacency_tolerance: float = 0.0  # 0 = exact edge coincidence
    length_unit: str = "m"
    area_unit: str = "m²"
    decimals: int = 2                 # Rounding for derived figures in reports


class ValidationConfig(BaseModel):
    """Controls which validation rules are applied."""
    enabled_rules: list[str] = []        # Empty = use all registered defaults
    disabled_rules: list[str] = []       # Explicitly disable specific rules
