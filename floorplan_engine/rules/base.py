"""Validation rule interface.

A rule inspects one aspect of an apartment and reports into the
validation context. Rules never raise on malformed documents; anything
they cannot check is left to the rule that owns that concern.
"""

from __future__ import annotations
from abc import ABC, abstractmethod

from floorplan_engine.models.context import ValidationContext


class ValidationRule(ABC):
    """
    Base class for apartment checks.

    `rule_id` is the key used by ValidationConfig to enable or disable
    the rule. `priority` fixes where its diagnostics land in the result.
    """

    rule_id: str
    name: str

    # Lower priority = reported first.
    priority: int = 100

    def applies(self, context: ValidationContext) -> bool:
        """Return False to skip the rule for this apartment."""
        return True

    @abstractmethod
    def check(self, context: ValidationContext) -> None:
        ...
