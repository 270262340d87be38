from __future__ import annotations

from typing import List

from ..config import NegativeTooGenericRuleConfig
from ..context import EvaluationContext
from ..models import Issue, IssueTarget, Severity, TargetKind
from ..registry import register_rule
from ..rule import Rule
from ..text import normalize_text

NEGATIVE_PROMPT_TARGET_ID = "negativePrompt"


@register_rule
class LINT_NEGATIVE_TOO_GENERIC(Rule):
    rule_id = "lint-negative-too-generic"
    rule_title = "Negative prompt is short"
    rationale = "Specific negatives reduce recurring artifacts more effectively than generic terms."
    severity = Severity.INFO
    config_model = NegativeTooGenericRuleConfig

    def evaluate(self, ctx: EvaluationContext) -> List[Issue]:
        cfg = ctx.lint_config.get_rule_config(self.rule_id, NegativeTooGenericRuleConfig)
        if not cfg.enabled or not ctx.schema.negative_prompt.enabled:
            return []

        text = normalize_text(ctx.state.negative_prompt)
        if len(text) == 0 or len(text) >= cfg.min_length:
            return []

        return [
            Issue(
                id=self.rule_id,
                rule_id=self.rule_id,
                severity=self.severity,
                title=self.rule_title,
                message="Consider adding specific artifacts you want to avoid.",
                rationale=self.rationale,
                target=IssueTarget(kind=TargetKind.NEGATIVE, id=NEGATIVE_PROMPT_TARGET_ID),
            )
        ]
