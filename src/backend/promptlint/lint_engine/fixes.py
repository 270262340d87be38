"""Pure state-construction helpers used by fixes.

Every helper returns a new `PromptState`; untouched sections and metadata
values are shared with the input by reference.
"""

from __future__ import annotations

from typing import Any, Optional

from .models import Fix, Issue, PromptState


def with_section_value(state: PromptState, section_id: str, value: Any) -> PromptState:
    sections = dict(state.sections)
    sections[section_id] = value
    return state.model_copy(update={"sections": sections})


def with_metadata_value(state: PromptState, field_id: str, value: Any) -> PromptState:
    metadata = dict(state.metadata)
    metadata[field_id] = value
    return state.model_copy(update={"metadata": metadata})


def find_fix(issue: Issue, fix_id: Optional[str] = None) -> Fix:
    if not issue.fixes:
        raise KeyError(f"Issue {issue.id} offers no fixes")
    if fix_id is None:
        return issue.fixes[0]
    for fix in issue.fixes:
        if fix.id == fix_id:
            return fix
    raise KeyError(f"Issue {issue.id} has no fix {fix_id}")


def apply_fix(state: PromptState, issue: Issue, fix_id: Optional[str] = None) -> PromptState:
    return find_fix(issue, fix_id).apply(state)
