from __future__ import annotations

from typing import Callable, List

from ..config import RuleConfigBase
from ..context import EvaluationContext
from ..fixes import with_section_value
from ..models import (
    Fix,
    Issue,
    IssueTarget,
    PromptState,
    RepeatableTextValue,
    Severity,
    TargetKind,
    TextValue,
)
from ..registry import register_rule
from ..rule import Rule
from ..text import normalize_text

FIX_PREVIEW = "Trim whitespace and collapse multiple spaces."


def _collapse_text_fix(section_id: str) -> Callable[[PromptState], PromptState]:
    def apply(state: PromptState) -> PromptState:
        current = state.sections.get(section_id)
        if not isinstance(current, TextValue):
            return state
        collapsed = normalize_text(current.text)
        if collapsed == current.text:
            return state
        return with_section_value(state, section_id, TextValue(text=collapsed))

    return apply


def _collapse_entry_fix(section_id: str, index: int) -> Callable[[PromptState], PromptState]:
    def apply(state: PromptState) -> PromptState:
        current = state.sections.get(section_id)
        if not isinstance(current, RepeatableTextValue) or index >= len(current.entries):
            return state
        entry = current.entries[index]
        collapsed = normalize_text(entry)
        if collapsed == entry:
            return state
        entries = current.entries[:index] + (collapsed,) + current.entries[index + 1 :]
        return with_section_value(state, section_id, RepeatableTextValue(entries=entries))

    return apply


@register_rule
class LINT_TRIM_WHITESPACE(Rule):
    rule_id = "lint-trim-whitespace"
    rule_title = "Extra whitespace"
    rationale = "Cleaner text improves readability and reduces token noise."
    severity = Severity.SUGGESTION
    config_model = RuleConfigBase
    offers_fix = True

    def evaluate(self, ctx: EvaluationContext) -> List[Issue]:
        cfg = ctx.lint_config.get_rule_config(self.rule_id, RuleConfigBase)
        if not cfg.enabled:
            return []

        issues: List[Issue] = []
        for section in ctx.text_sections():
            value = ctx.section_value(section.id)
            if isinstance(value, TextValue):
                if value.text != normalize_text(value.text):
                    issues.append(
                        self._issue(
                            issue_id=f"lint-trim-{section.id}",
                            fix_id=f"fix-trim-{section.id}",
                            target=IssueTarget(kind=TargetKind.SECTION, id=section.id),
                            apply=_collapse_text_fix(section.id),
                        )
                    )
            elif isinstance(value, RepeatableTextValue):
                for index, entry in enumerate(value.entries):
                    if entry == normalize_text(entry):
                        continue
                    issues.append(
                        self._issue(
                            issue_id=f"lint-trim-{section.id}[{index}]",
                            fix_id=f"fix-trim-{section.id}[{index}]",
                            target=IssueTarget(kind=TargetKind.SECTION, id=section.id, index=index),
                            apply=_collapse_entry_fix(section.id, index),
                        )
                    )
        return issues

    def _issue(
        self,
        *,
        issue_id: str,
        fix_id: str,
        target: IssueTarget,
        apply: Callable[[PromptState], PromptState],
    ) -> Issue:
        return Issue(
            id=issue_id,
            rule_id=self.rule_id,
            severity=self.severity,
            title=self.rule_title,
            message="Trim repeated spaces for cleaner prompts.",
            rationale=self.rationale,
            target=target,
            fix_preview=FIX_PREVIEW,
            fixes=[Fix(id=fix_id, label="Trim whitespace", apply=apply)],
        )
