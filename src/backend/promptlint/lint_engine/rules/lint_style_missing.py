from __future__ import annotations

from typing import List

from ..config import RuleConfigBase
from ..context import EvaluationContext
from ..models import Issue, IssueTarget, Severity, TargetKind
from ..registry import register_rule
from ..rule import Rule
from ..text import is_value_empty


@register_rule
class LINT_STYLE_MISSING(Rule):
    rule_id = "lint-style-missing"
    rule_title = "Style is empty"
    rationale = "Style guidance helps the model converge on a consistent aesthetic."
    severity = Severity.SUGGESTION
    config_model = RuleConfigBase

    def evaluate(self, ctx: EvaluationContext) -> List[Issue]:
        cfg = ctx.lint_config.get_rule_config(self.rule_id, RuleConfigBase)
        if not cfg.enabled:
            return []

        style = ctx.find_section_by_label("style")
        if style is None or not is_value_empty(ctx.section_value(style.id)):
            return []

        # Stay quiet on a blank form: the main prompt has to be started first.
        # Schemas without a primary text section have nothing to wait for.
        main = ctx.primary_text_section()
        if main is not None and is_value_empty(ctx.section_value(main.id)):
            return []

        return [
            Issue(
                id=self.rule_id,
                rule_id=self.rule_id,
                severity=self.severity,
                title=self.rule_title,
                message="Add a style or medium to make the output more consistent.",
                rationale=self.rationale,
                target=IssueTarget(kind=TargetKind.SECTION, id=style.id),
            )
        ]
