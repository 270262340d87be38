from __future__ import annotations

from typing import List

from ..config import MainTooShortRuleConfig
from ..context import EvaluationContext
from ..models import Issue, IssueTarget, Severity, TargetKind
from ..registry import register_rule
from ..rule import Rule
from ..text import value_to_text


@register_rule
class LINT_MAIN_TOO_SHORT(Rule):
    rule_id = "lint-main-too-short"
    rule_title = "Main prompt is short"
    rationale = "Short prompts often under-specify the scene and lead to inconsistent outputs."
    severity = Severity.SUGGESTION
    config_model = MainTooShortRuleConfig

    def evaluate(self, ctx: EvaluationContext) -> List[Issue]:
        cfg = ctx.lint_config.get_rule_config(self.rule_id, MainTooShortRuleConfig)
        if not cfg.enabled:
            return []

        main = ctx.primary_text_section()
        if main is None:
            return []

        text = value_to_text(ctx.section_value(main.id))
        # Nothing to critique yet.
        if len(text) == 0 or len(text) >= cfg.min_length:
            return []

        return [
            Issue(
                id=self.rule_id,
                rule_id=self.rule_id,
                severity=self.severity,
                title=self.rule_title,
                message="Consider adding more detail to the main description (subject, setting, lighting).",
                rationale=self.rationale,
                target=IssueTarget(kind=TargetKind.SECTION, id=main.id),
            )
        ]
