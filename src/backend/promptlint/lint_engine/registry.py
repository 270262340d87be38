from __future__ import annotations

from typing import Dict, Iterable, List, Optional, Type

from .rule import Rule


class RuleRegistry:
    def __init__(self):
        # Insertion order is evaluation order.
        self._rules: Dict[str, Type[Rule]] = {}

    def register(self, rule_cls: Type[Rule]) -> None:
        rule_id = getattr(rule_cls, "rule_id", None)
        if not rule_id:
            raise ValueError("Rule class missing rule_id")
        if rule_id in self._rules:
            raise ValueError(f"Duplicate rule_id registered: {rule_id}")
        self._rules[rule_id] = rule_cls

    def create_all(self, rule_ids: Optional[Iterable[str]] = None) -> List[Rule]:
        """
        Instantiate registered rules in evaluation order.

        `rule_ids` selects a subset; the registry order is kept whatever order
        the ids are given in. Unknown ids raise ValueError.
        """
        if rule_ids is None:
            return [cls() for cls in self._rules.values()]
        wanted = set(rule_ids)
        unknown = sorted(wanted - self._rules.keys())
        if unknown:
            raise ValueError(f"Unknown lint rule id(s): {', '.join(unknown)}")
        return [cls() for rule_id, cls in self._rules.items() if rule_id in wanted]

    def get(self, rule_id: str) -> Type[Rule]:
        return self._rules[rule_id]

    def ids(self) -> Iterable[str]:
        return self._rules.keys()


registry = RuleRegistry()


def register_rule(rule_cls: Type[Rule]) -> Type[Rule]:
    registry.register(rule_cls)
    return rule_cls
