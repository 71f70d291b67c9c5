"""Registry for the readiness classification chain.

Every concrete ReadinessRule found under ``fuel_engine.rules`` becomes one
link in the chain. The scorer asks for the links in Priority order and stops
at the first verdict, so the registry owns nothing but discovery and order.
"""

from __future__ import annotations

import importlib
import pkgutil
from types import ModuleType

from fuel_engine.rules.base import ReadinessRule


def _concrete_rules(module: ModuleType) -> list[type[ReadinessRule]]:
    """ReadinessRule subclasses defined in *module* that can be instantiated."""
    found = []
    for value in vars(module).values():
        if (
            isinstance(value, type)
            and issubclass(value, ReadinessRule)
            and value is not ReadinessRule
            and value.__module__ == module.__name__
            and not getattr(value, "__abstractmethods__", None)
        ):
            found.append(value)
    return found


class ReadinessRuleRegistry:
    """Holds one instance per readiness rule, keyed by ``rule_id``.

    Usage:
        registry = ReadinessRuleRegistry()
        registry.discover_rules()
        for rule in registry.get_all_rules():  # missing_assessment first
            ...

    Adding a status branch means dropping a module into rules/readiness/
    with an unused Priority tier; nothing else needs to change.
    """

    def __init__(self) -> None:
        self._rules: dict[str, ReadinessRule] = {}

    def discover_rules(self) -> None:
        """Import every module below ``fuel_engine.rules`` and register its rules."""
        import fuel_engine.rules as rules_pkg

        for module_info in pkgutil.walk_packages(
            rules_pkg.__path__, prefix=rules_pkg.__name__ + "."
        ):
            module = importlib.import_module(module_info.name)
            for rule_cls in _concrete_rules(module):
                self.register(rule_cls())

    def register(self, rule: ReadinessRule) -> None:
        """Add *rule*, replacing any rule already registered under its id."""
        self._rules[rule.rule_id] = rule

    def get(self, rule_id: str) -> ReadinessRule | None:
        return self._rules.get(rule_id)

    def get_all_rules(self) -> list[ReadinessRule]:
        """Rules in evaluation order: prerequisite first, on-target baseline last."""
        return sorted(self._rules.values(), key=lambda r: r.priority)

    @property
    def rule_ids(self) -> list[str]:
        return list(self._rules.keys())
