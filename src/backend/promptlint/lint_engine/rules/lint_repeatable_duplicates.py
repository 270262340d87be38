from __future__ import annotations

from typing import Dict, List

from ..config import RuleConfigBase
from ..context import EvaluationContext
from ..models import Issue, IssueTarget, RepeatableTextValue, Severity, TargetKind
from ..registry import register_rule
from ..rule import Rule
from ..text import normalize_text


@register_rule
class LINT_REPEATABLE_DUPLICATES(Rule):
    rule_id = "lint-repeatable-duplicates"
    rule_title = "Repeated scene content"
    rationale = "Repeated scenes reduce narrative variety and visual interest."
    severity = Severity.WARNING
    config_model = RuleConfigBase

    def evaluate(self, ctx: EvaluationContext) -> List[Issue]:
        cfg = ctx.lint_config.get_rule_config(self.rule_id, RuleConfigBase)
        if not cfg.enabled:
            return []

        issues: List[Issue] = []
        for section in ctx.text_sections(repeatable=True):
            value = ctx.section_value(section.id)
            if not isinstance(value, RepeatableTextValue):
                continue

            # normalized text -> index of its first occurrence
            seen: Dict[str, int] = {}
            for index, entry in enumerate(value.entries):
                text = normalize_text(entry)
                if not text:
                    continue
                first = seen.get(text)
                if first is None:
                    seen[text] = index
                    continue
                issues.append(
                    Issue(
                        id=f"{self.rule_id}-{section.id}[{index}]",
                        rule_id=self.rule_id,
                        severity=self.severity,
                        title=self.rule_title,
                        message=(
                            f"Scene {index + 1} repeats Scene {first + 1}. "
                            "Consider differentiating them."
                        ),
                        rationale=self.rationale,
                        target=IssueTarget(kind=TargetKind.SECTION, id=section.id, index=index),
                    )
                )
        return issues
