from promptlint.lint_engine.fixes import apply_fix
from promptlint.lint_engine.models import RepeatableTextValue, Severity, TextValue
from promptlint.lint_engine.rules.lint_trim_whitespace import LINT_TRIM_WHITESPACE


def test_whitespace_fix_collapses_text(make_ctx):
    ctx = make_ctx(sections={"main": "a   b\tc"})
    issues = LINT_TRIM_WHITESPACE().evaluate(ctx)
    assert len(issues) == 1
    issue = issues[0]
    assert issue.id == "lint-trim-main"
    assert issue.severity == Severity.SUGGESTION
    assert issue.fix_preview
    assert [f.id for f in issue.fixes] == ["fix-trim-main"]

    fixed = apply_fix(ctx.state, issue)
    assert fixed.sections["main"] == TextValue(text="a b c")
    # Idempotent: a second application is a no-op.
    assert apply_fix(fixed, issue) is fixed


def test_whitespace_fix_leaves_input_state_untouched(make_ctx):
    ctx = make_ctx(sections={"main": "  padded  ", "style": "oil paint"})
    issue = LINT_TRIM_WHITESPACE().evaluate(ctx)[0]
    fixed = issue.fixes[0].apply(ctx.state)

    assert fixed is not ctx.state
    assert ctx.state.sections["main"] == TextValue(text="  padded  ")
    assert fixed.sections["main"] == TextValue(text="padded")
    # Untouched sections are shared, not copied.
    assert fixed.sections["style"] is ctx.state.sections["style"]


def test_clean_text_has_no_issue(make_ctx):
    assert LINT_TRIM_WHITESPACE().evaluate(make_ctx(sections={"main": "a b c"})) == []


def test_fix_reads_current_state_not_issue_snapshot(make_ctx, make_state, video_schema):
    ctx = make_ctx(sections={"main": "a   b"})
    issue = LINT_TRIM_WHITESPACE().evaluate(ctx)[0]

    # The user kept typing before accepting the fix.
    later = make_state(video_schema, sections={"main": "a   b   c  "})
    fixed = apply_fix(later, issue)
    assert fixed.sections["main"] == TextValue(text="a b c")


def test_repeatable_entries_flagged_per_index(make_ctx):
    ctx = make_ctx(sections={"scenes": ["fog", " rain  at dusk", "snow"]})
    issues = LINT_TRIM_WHITESPACE().evaluate(ctx)
    assert [i.id for i in issues] == ["lint-trim-scenes[1]"]
    assert issues[0].target.index == 1

    fixed = apply_fix(ctx.state, issues[0])
    assert fixed.sections["scenes"] == RepeatableTextValue(entries=("fog", "rain at dusk", "snow"))
    assert apply_fix(fixed, issues[0]) is fixed


def test_list_sections_are_not_checked(make_ctx):
    assert LINT_TRIM_WHITESPACE().evaluate(make_ctx(sections={"tags": ["red  ", " blue"]})) == []


def test_entry_ids_do_not_collide_with_suffixed_section_ids(make_schema, make_ctx):
    schema = make_schema(
        sections=[
            {"id": "x-0", "label": "First", "input_type": "text"},
            {"id": "x", "label": "Shots", "input_type": "text", "repeatable": True},
        ]
    )
    ctx = make_ctx(schema=schema, sections={"x-0": "a  b", "x": ["c  d"]})
    issues = LINT_TRIM_WHITESPACE().evaluate(ctx)
    assert [i.id for i in issues] == ["lint-trim-x-0", "lint-trim-x[0]"]
    assert [i.fixes[0].id for i in issues] == ["fix-trim-x-0", "fix-trim-x[0]"]

    fixed = apply_fix(ctx.state, issues[1])
    assert fixed.sections["x"] == RepeatableTextValue(entries=("c d",))
    assert fixed.sections["x-0"] is ctx.state.sections["x-0"]
