"""Apartment validator — runs registered rules and collects diagnostics."""

from __future__ import annotations
import logging

from floorplan_engine.models import (
    Apartment, ValidationConfig, ValidationContext, ValidationResult,
)
from floorplan_engine.core.registry import RuleRegistry, create_default_registry

logger = logging.getLogger(__name__)


class ApartmentValidator:
    """
    Stateless validator.

    Builds a context for the apartment, executes applicable rules in
    order, and returns every error and warning they reported.
    """

    def __init__(self, registry: RuleRegistry | None = None) -> None:
        self.registry = registry or create_default_registry()

    def validate(
        self,
        apartment: Apartment,
        config: ValidationConfig | None = None,
    ) -> ValidationResult:
        if config is None:
            config = ValidationConfig()

        context = ValidationContext(apartment=apartment, config=config)

        for rule in self.registry.rules_for(context):
            logger.debug("Running validation rule %s", rule.rule_id)
            rule.check(context)

        logger.info(
            "Validated %d rooms: %d errors, %d warnings",
            len(apartment.rooms), len(context.errors), len(context.warnings),
        )
        return ValidationResult(
            valid=not context.errors,
            errors=context.errors,
            warnings=context.warnings,
        )


def validate(apartment: Apartment) -> ValidationResult:
    """Validate with the default rule set."""
    return ApartmentValidator().validate(apartment)
