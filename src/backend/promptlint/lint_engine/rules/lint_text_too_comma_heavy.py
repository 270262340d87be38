from __future__ import annotations

from typing import List

from ..config import CommaHeavyRuleConfig
from ..context import EvaluationContext
from ..models import Issue, IssueTarget, Severity, TargetKind
from ..registry import register_rule
from ..rule import Rule
from ..text import count_commas, value_to_text


@register_rule
class LINT_TEXT_TOO_COMMA_HEAVY(Rule):
    rule_id = "lint-text-too-comma-heavy"
    rule_title = "Too many comma-separated tokens"
    rationale = "Long comma chains can reduce clarity and make edits harder."
    severity = Severity.WARNING
    config_model = CommaHeavyRuleConfig

    def evaluate(self, ctx: EvaluationContext) -> List[Issue]:
        cfg = ctx.lint_config.get_rule_config(self.rule_id, CommaHeavyRuleConfig)
        if not cfg.enabled:
            return []

        issues: List[Issue] = []
        for section in ctx.text_sections(repeatable=False):
            text = value_to_text(ctx.section_value(section.id))
            if not text or count_commas(text) < cfg.comma_threshold:
                continue
            issues.append(
                Issue(
                    id=f"{self.rule_id}-{section.id}",
                    rule_id=self.rule_id,
                    severity=self.severity,
                    title=self.rule_title,
                    message="Consider moving lists into a list-style section for clarity.",
                    rationale=self.rationale,
                    target=IssueTarget(kind=TargetKind.SECTION, id=section.id),
                )
            )
        return issues
