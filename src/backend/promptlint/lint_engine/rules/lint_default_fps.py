from __future__ import annotations

from typing import Callable, List

from ..config import RuleConfigBase
from ..context import EvaluationContext
from ..fixes import with_metadata_value
from ..models import Fix, Issue, IssueTarget, MetadataScalar, PromptState, Severity, TargetKind
from ..registry import register_rule
from ..rule import Rule
from ..text import is_value_empty


def _set_default_fix(field_id: str, default: MetadataScalar) -> Callable[[PromptState], PromptState]:
    def apply(state: PromptState) -> PromptState:
        if not is_value_empty(state.metadata.get(field_id)):
            return state
        return with_metadata_value(state, field_id, default)

    return apply


@register_rule
class LINT_DEFAULT_FPS(Rule):
    rule_id = "lint-default-fps"
    rule_title = "FPS not set"
    rationale = "FPS controls motion smoothness and timing."
    severity = Severity.SUGGESTION
    config_model = RuleConfigBase
    offers_fix = True

    def evaluate(self, ctx: EvaluationContext) -> List[Issue]:
        cfg = ctx.lint_config.get_rule_config(self.rule_id, RuleConfigBase)
        if not cfg.enabled:
            return []

        fps_field = ctx.find_metadata_field(label_keyword="fps", id_keyword="fps")
        if fps_field is None or not is_value_empty(ctx.metadata_value(fps_field.id)):
            return []
        default = fps_field.default
        if is_value_empty(default):
            return []

        return [
            Issue(
                id=self.rule_id,
                rule_id=self.rule_id,
                severity=self.severity,
                title=self.rule_title,
                message="Use the default FPS for smoother video output.",
                rationale=self.rationale,
                target=IssueTarget(kind=TargetKind.METADATA, id=fps_field.id),
                fix_preview=f"Set FPS to {default}.",
                fixes=[
                    Fix(
                        id="fix-default-fps",
                        label=f"Set FPS to {default}",
                        apply=_set_default_fix(fps_field.id, default),
                    )
                ],
            )
        ]
