"""Validation context — accumulates diagnostics during a validation pass."""

from __future__ import annotations
from pydantic import BaseModel, Field

from .building import Apartment
from .parameters import ValidationConfig


class ValidationContext(BaseModel):
    """
    Holds all state during a single validation pass.

    Rules read the apartment and append errors or warnings.
    The validator orchestrates the flow.
    """
    # Input
    apartment: Apartment
    config: ValidationConfig = Field(default_factory=ValidationConfig)

    # Output (populated by rules)
    errors: list[str] = []
    warnings: list[str] = []

    def add_error(self, message: str) -> None:
        self.errors.append(message)

    def add_warning(self, message: str) -> None:
        self.warnings.append(message)
