import pytest

from promptlint.lint_engine.fixes import find_fix, with_metadata_value, with_section_value
from promptlint.lint_engine.models import Fix, Issue, PromptState, Severity, TextValue


def _issue(*fixes: Fix) -> Issue:
    return Issue(
        id="x",
        rule_id="x",
        severity=Severity.SUGGESTION,
        title="t",
        message="m",
        fixes=list(fixes),
    )


def test_with_section_value_builds_new_state():
    state = PromptState(sections={"a": TextValue(text="1"), "b": TextValue(text="2")}, metadata={"fps": 24})
    updated = with_section_value(state, "a", TextValue(text="one"))
    assert updated is not state
    assert updated.sections is not state.sections
    assert state.sections["a"] == TextValue(text="1")
    assert updated.sections["b"] is state.sections["b"]
    assert updated.metadata is state.metadata


def test_with_metadata_value_builds_new_state():
    state = PromptState(metadata={"fps": None})
    updated = with_metadata_value(state, "fps", 24)
    assert updated.metadata == {"fps": 24}
    assert state.metadata == {"fps": None}
    assert updated.sections is state.sections


def test_find_fix_by_id_or_first():
    first = Fix(id="f1", label="one", apply=lambda s: s)
    second = Fix(id="f2", label="two", apply=lambda s: s)
    issue = _issue(first, second)
    assert find_fix(issue) is first
    assert find_fix(issue, "f2") is second
    with pytest.raises(KeyError):
        find_fix(issue, "missing")
    with pytest.raises(KeyError):
        find_fix(_issue())


def test_fix_apply_is_not_serialized():
    issue = _issue(Fix(id="f1", label="one", apply=lambda s: s))
    dumped = issue.model_dump(mode="json")
    assert dumped["fixes"] == [{"id": "f1", "label": "one"}]
