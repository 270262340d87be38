from __future__ import annotations

from typing import List

from ..config import RuleConfigBase
from ..context import EvaluationContext
from ..models import Issue, IssueTarget, Severity, TargetKind
from ..registry import register_rule
from ..rule import Rule
from ..text import is_value_empty


@register_rule
class LINT_METADATA_ASPECT_RATIO(Rule):
    rule_id = "lint-metadata-aspect-ratio"
    rule_title = "Aspect ratio not set"
    rationale = "Aspect ratio influences composition and framing."
    severity = Severity.SUGGESTION
    config_model = RuleConfigBase

    def evaluate(self, ctx: EvaluationContext) -> List[Issue]:
        cfg = ctx.lint_config.get_rule_config(self.rule_id, RuleConfigBase)
        if not cfg.enabled:
            return []

        field = ctx.find_metadata_field(label_keyword="aspect ratio", id_keyword="aspect_ratio")
        if field is None or not is_value_empty(ctx.metadata_value(field.id)):
            return []

        return [
            Issue(
                id=self.rule_id,
                rule_id=self.rule_id,
                severity=self.severity,
                title=self.rule_title,
                message="Choose an aspect ratio for predictable framing.",
                rationale=self.rationale,
                target=IssueTarget(kind=TargetKind.METADATA, id=field.id),
            )
        ]
