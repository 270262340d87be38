from promptlint.lint_engine.models import Severity
from promptlint.lint_engine.rules.lint_text_too_comma_heavy import LINT_TEXT_TOO_COMMA_HEAVY


def test_six_commas_fire(make_ctx):
    text = "a, b, c, d, e, f, g"
    assert text.count(",") == 6
    issues = LINT_TEXT_TOO_COMMA_HEAVY().evaluate(make_ctx(sections={"main": text}))
    assert len(issues) == 1
    assert issues[0].id == "lint-text-too-comma-heavy-main"
    assert issues[0].severity == Severity.WARNING


def test_five_commas_do_not_fire(make_ctx):
    text = "a, b, c, d, e, f"
    assert LINT_TEXT_TOO_COMMA_HEAVY().evaluate(make_ctx(sections={"main": text})) == []


def test_one_issue_per_offending_section(make_ctx):
    heavy = ",,,,,,"
    issues = LINT_TEXT_TOO_COMMA_HEAVY().evaluate(
        make_ctx(sections={"main": heavy, "style": "oil paint", "camera": heavy})
    )
    assert [i.target.id for i in issues] == ["main", "camera"]


def test_repeatable_sections_are_not_checked(make_ctx):
    issues = LINT_TEXT_TOO_COMMA_HEAVY().evaluate(make_ctx(sections={"scenes": ["a,b,c,d,e,f,g"]}))
    assert issues == []
