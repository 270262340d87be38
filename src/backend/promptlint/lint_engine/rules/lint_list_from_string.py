from __future__ import annotations

from typing import Callable, List

from ..config import RuleConfigBase
from ..context import EvaluationContext
from ..fixes import with_section_value
from ..models import Fix, Issue, IssueTarget, ListValue, PromptState, Severity, TargetKind, TextValue
from ..registry import register_rule
from ..rule import Rule
from ..text import split_comma_list


def _split_list_fix(section_id: str) -> Callable[[PromptState], PromptState]:
    def apply(state: PromptState) -> PromptState:
        current = state.sections.get(section_id)
        if not isinstance(current, TextValue):
            return state
        return with_section_value(state, section_id, ListValue(items=split_comma_list(current.text)))

    return apply


@register_rule
class LINT_LIST_FROM_STRING(Rule):
    rule_id = "lint-list-from-string"
    rule_title = "List field contains comma-separated text"
    rationale = "List fields render more predictably and are easier to edit."
    severity = Severity.SUGGESTION
    config_model = RuleConfigBase
    offers_fix = True

    def evaluate(self, ctx: EvaluationContext) -> List[Issue]:
        cfg = ctx.lint_config.get_rule_config(self.rule_id, RuleConfigBase)
        if not cfg.enabled:
            return []

        issues: List[Issue] = []
        for section in ctx.list_sections():
            # A raw string stored where the schema expects a list.
            if not isinstance(ctx.section_value(section.id), TextValue):
                continue
            issues.append(
                Issue(
                    id=f"lint-list-string-{section.id}",
                    rule_id=self.rule_id,
                    severity=self.severity,
                    title=self.rule_title,
                    message="Convert to a list for clearer rendering.",
                    rationale=self.rationale,
                    target=IssueTarget(kind=TargetKind.SECTION, id=section.id),
                    fix_preview="Split comma-separated items into a list.",
                    fixes=[
                        Fix(
                            id=f"fix-list-{section.id}",
                            label="Convert to list",
                            apply=_split_list_fix(section.id),
                        )
                    ],
                )
            )
        return issues
