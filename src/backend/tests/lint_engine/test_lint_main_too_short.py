import pytest

from promptlint.lint_engine.models import Severity, TargetKind
from promptlint.lint_engine.rules.lint_main_too_short import LINT_MAIN_TOO_SHORT


@pytest.mark.parametrize(
    "text, fires",
    [
        ("", False),
        ("   ", False),
        ("a", True),
        ("a" * 19, True),
        ("a" * 20, False),
        # Normalization happens before measuring.
        ("  " + "a" * 19 + "   ", True),
        ("a  b", True),
    ],
)
def test_main_too_short_threshold(make_ctx, text, fires):
    issues = LINT_MAIN_TOO_SHORT().evaluate(make_ctx(sections={"main": text}))
    assert bool(issues) is fires


def test_main_too_short_targets_primary_section(make_ctx):
    issues = LINT_MAIN_TOO_SHORT().evaluate(make_ctx(sections={"main": "a cat"}))
    assert len(issues) == 1
    assert issues[0].id == "lint-main-too-short"
    assert issues[0].severity == Severity.SUGGESTION
    assert issues[0].target.kind == TargetKind.SECTION
    assert issues[0].target.id == "main"


def test_main_too_short_ignores_absent_entry(make_ctx):
    assert LINT_MAIN_TOO_SHORT().evaluate(make_ctx(sections={})) == []


def test_main_too_short_abstains_without_primary_section(make_schema, make_ctx):
    schema = make_schema(sections=[{"id": "scenes", "label": "Scenes", "input_type": "text", "repeatable": True}])
    ctx = make_ctx(schema=schema, sections={"scenes": ["fog"]})
    assert LINT_MAIN_TOO_SHORT().evaluate(ctx) == []


def test_main_too_short_threshold_configurable(make_ctx):
    ctx = make_ctx(
        sections={"main": "a" * 25},
        lint_rules={"lint-main-too-short": {"min_length": 40}},
    )
    assert len(LINT_MAIN_TOO_SHORT().evaluate(ctx)) == 1
