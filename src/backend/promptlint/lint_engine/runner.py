from __future__ import annotations

import uuid
from datetime import datetime, timezone
from typing import Iterable, List, Optional

from .context import EvaluationContext
from .models import Issue, LintRunReport, Severity
from .registry import registry


class LintRunner:
    def __init__(self, rules: Optional[Iterable] = None, *, rule_ids: Optional[Iterable[str]] = None):
        if rules is None:
            rules = registry.create_all(rule_ids)
        elif rule_ids is not None:
            wanted = set(rule_ids)
            rules = [rule for rule in rules if rule.rule_id in wanted]
        self._rules = list(rules)

    @property
    def rule_ids(self) -> List[str]:
        return [rule.rule_id for rule in self._rules]

    def evaluate(self, ctx: EvaluationContext, *, rule_ids: Optional[set[str]] = None) -> List[Issue]:
        # Rules do not raise; an exception escaping here is a defect in that rule.
        issues: List[Issue] = []
        for rule in self._rules:
            if rule_ids is not None and rule.rule_id not in rule_ids:
                continue
            issues.extend(rule.evaluate(ctx))
        return issues

    def run(self, ctx: EvaluationContext, *, rule_ids: Optional[set[str]] = None) -> LintRunReport:
        issues = self.evaluate(ctx, rule_ids=rule_ids)

        totals: dict[Severity, int] = {}
        for issue in issues:
            totals[issue.severity] = totals.get(issue.severity, 0) + 1

        return LintRunReport(
            run_id=str(uuid.uuid4()),
            generated_at=datetime.now(timezone.utc),
            issues=issues,
            totals=totals,
        )


def evaluate(ctx: EvaluationContext) -> List[Issue]:
    return LintRunner().evaluate(ctx)
