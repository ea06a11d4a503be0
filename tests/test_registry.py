from floorplan_engine.models import Apartment, ValidationConfig, ValidationContext
from floorplan_engine.core.registry import RuleRegistry, create_default_registry
from floorplan_engine.rules.base import ValidationRule
from floorplan_engine.rules.structure import MetaPresentRule


class _NoteRule(ValidationRule):
    rule_id = "custom.note"
    name = "Note"
    priority = 10

    def check(self, context) -> None:
        context.add_warning("note")


def _ids(rules):
    return [r.rule_id for r in rules]


def test_default_order(make_room):
    registry = create_default_registry()
    context = ValidationContext(
        apartment=Apartment(rooms=[make_room("a", 0, 0, 1, 1), make_room("b", 2, 0, 1, 1)]),
    )
    assert _ids(registry.rules_for(context)) == [
        "structure.meta",
        "structure.rooms",
        "structure.duplicate_ids",
        "room.integrity",
        "room.overlap",
    ]


def test_rules_skip_when_not_applicable():
    registry = create_default_registry()
    context = ValidationContext(apartment=Apartment())
    assert _ids(registry.rules_for(context)) == [
        "structure.meta", "structure.rooms", "structure.duplicate_ids",
    ]


def test_equal_priority_keeps_registration_order():
    registry = create_default_registry()
    registry.register(_NoteRule())
    context = ValidationContext(
        apartment=Apartment(),
        config=ValidationConfig(enabled_rules=["custom.note", "structure.meta"]),
    )
    assert _ids(registry.rules_for(context)) == ["structure.meta", "custom.note"]


def test_register_replaces_same_id():
    registry = RuleRegistry()
    registry.register(MetaPresentRule())
    replacement = MetaPresentRule()
    registry.register(replacement)
    assert registry.list_rules() == [replacement]
    assert registry.get_rule("structure.meta") is replacement


def test_unregister():
    registry = RuleRegistry()
    registry.register(_NoteRule())
    assert registry.get_rule("custom.note") is not None
    registry.unregister("custom.note")
    assert registry.list_rules() == []
    assert registry.get_rule("custom.note") is None


def test_disabled_rules_are_filtered():
    registry = create_default_registry()
    context = ValidationContext(
        apartment=Apartment(),
        config=ValidationConfig(disabled_rules=["structure.rooms"]),
    )
    assert "structure.rooms" not in _ids(registry.rules_for(context))
