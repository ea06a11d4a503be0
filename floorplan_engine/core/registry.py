"""Ordered set of validation rules.

Diagnostics are reported in rule order, so the registry is what fixes the
order of errors and warnings in a validation result: ascending priority,
ties broken by registration order.
"""

from __future__ import annotations

from floorplan_engine.models import ValidationConfig, ValidationContext
from floorplan_engine.rules.base import ValidationRule


class RuleRegistry:
    def __init__(self) -> None:
        self._rules: list[ValidationRule] = []

    def register(self, rule: ValidationRule) -> None:
        """Add a rule, replacing any rule already registered under its id."""
        for i, existing in enumerate(self._rules):
            if existing.rule_id == rule.rule_id:
                self._rules[i] = rule
                return
        self._rules.append(rule)

    def unregister(self, rule_id: str) -> None:
        self._rules = [r for r in self._rules if r.rule_id != rule_id]

    def get_rule(self, rule_id: str) -> ValidationRule | None:
        return next((r for r in self._rules if r.rule_id == rule_id), None)

    def list_rules(self) -> list[ValidationRule]:
        """All rules in execution order."""
        return sorted(self._rules, key=lambda r: r.priority)

    def is_enabled(self, rule: ValidationRule, config: ValidationConfig) -> bool:
        if config.enabled_rules and rule.rule_id not in config.enabled_rules:
            return False
        return rule.rule_id not in config.disabled_rules

    def rules_for(self, context: ValidationContext) -> list[ValidationRule]:
        """Enabled rules that apply to this apartment, in execution order."""
        return [
            r for r in self.list_rules()
            if self.is_enabled(r, context.config) and r.applies(context)
        ]


def create_default_registry() -> RuleRegistry:
    """Registry with the standard checks: structure first, then rooms, then overlaps."""
    from floorplan_engine.rules.structure import (
        MetaPresentRule, RoomsPresentRule, DuplicateIdRule,
    )
    from floorplan_engine.rules.rooms import RoomIntegrityRule
    from floorplan_engine.rules.overlap import RoomOverlapRule

    registry = RuleRegistry()
    for rule in (
        MetaPresentRule(),
        RoomsPresentRule(),
        DuplicateIdRule(),
        RoomIntegrityRule(),
        RoomOverlapRule(),
    ):
        registry.register(rule)
    return registry
