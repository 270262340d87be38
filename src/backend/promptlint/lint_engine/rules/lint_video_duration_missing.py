from __future__ import annotations

from typing import List

from ..config import RuleConfigBase
from ..context import EvaluationContext
from ..models import Issue, IssueTarget, Severity, TargetKind
from ..registry import register_rule
from ..rule import Rule
from ..text import is_value_empty


@register_rule
class LINT_VIDEO_DURATION_MISSING(Rule):
    rule_id = "lint-video-duration-missing"
    rule_title = "Total duration missing"
    rationale = "Total duration helps the model align timing across scenes."
    severity = Severity.SUGGESTION
    config_model = RuleConfigBase

    def evaluate(self, ctx: EvaluationContext) -> List[Issue]:
        cfg = ctx.lint_config.get_rule_config(self.rule_id, RuleConfigBase)
        if not cfg.enabled:
            return []

        duration_section = ctx.find_section_by_label("duration")
        total_field = ctx.find_metadata_field(label_keyword="total duration", id_keyword="total_duration")
        if duration_section is None or total_field is None:
            return []

        if is_value_empty(ctx.section_value(duration_section.id)):
            return []
        if not is_value_empty(ctx.metadata_value(total_field.id)):
            return []

        return [
            Issue(
                id=self.rule_id,
                rule_id=self.rule_id,
                severity=self.severity,
                title=self.rule_title,
                message="Scenes have durations but total duration is not set.",
                rationale=self.rationale,
                target=IssueTarget(kind=TargetKind.METADATA, id=total_field.id),
            )
        ]
