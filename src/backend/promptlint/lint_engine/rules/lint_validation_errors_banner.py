from __future__ import annotations

from typing import List

from ..config import RuleConfigBase
from ..context import EvaluationContext
from ..models import Issue, Severity
from ..registry import register_rule
from ..rule import Rule


@register_rule
class LINT_VALIDATION_ERRORS_BANNER(Rule):
    rule_id = "lint-validation-errors-banner"
    rule_title = "Fix validation errors first"
    rationale = "Missing required fields can make prompts invalid or incomplete."
    severity = Severity.INFO
    config_model = RuleConfigBase

    def evaluate(self, ctx: EvaluationContext) -> List[Issue]:
        cfg = ctx.lint_config.get_rule_config(self.rule_id, RuleConfigBase)
        if not cfg.enabled or not ctx.validation.has_errors:
            return []

        # The field-level errors are rendered elsewhere; this only points at them.
        return [
            Issue(
                id=self.rule_id,
                rule_id=self.rule_id,
                severity=self.severity,
                title=self.rule_title,
                message="There are required fields missing. Fix them before refining the prompt.",
                rationale=self.rationale,
            )
        ]
