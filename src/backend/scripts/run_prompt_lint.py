from __future__ import annotations

import argparse
import dataclasses
import json
import logging
import sys
from pathlib import Path
from typing import Any, Optional


logger = logging.getLogger(__name__)


def _ensure_backend_on_path() -> None:
    backend_dir = Path(__file__).resolve().parents[1]
    if str(backend_dir) not in sys.path:
        sys.path.insert(0, str(backend_dir))


def lint_document(
    document: dict[str, Any],
    *,
    lint_config=None,
    rule_ids: Optional[set[str]] = None,
):
    _ensure_backend_on_path()
    from promptlint.adapters.prompt_document import build_context
    from promptlint.lint_engine.runner import LintRunner

    ctx = build_context(document, lint_config=lint_config)
    return LintRunner(rule_ids=rule_ids).run(ctx)


def apply_all_fixes(
    document: dict[str, Any],
    *,
    lint_config=None,
    rule_ids: Optional[set[str]] = None,
    max_passes: int = 25,
) -> tuple[dict[str, Any], list[str]]:
    """
    Accept fixes the way an interactive caller would: evaluate, apply the first
    fix of the first fixable issue, rebuild the context, repeat.

    Returns the document with its state replaced, plus the ids of applied fixes.
    """
    _ensure_backend_on_path()
    from promptlint.adapters.prompt_document import (
        build_context,
        state_to_payload,
        validation_summary_for,
    )
    from promptlint.lint_engine.fixes import apply_fix
    from promptlint.lint_engine.runner import LintRunner

    runner = LintRunner(rule_ids=rule_ids)
    ctx = build_context(document, lint_config=lint_config)
    recompute_validation = document.get("validation") is None
    applied: list[str] = []

    for _ in range(max_passes):
        issue = next((i for i in runner.evaluate(ctx) if i.fixes), None)
        if issue is None:
            break
        fix = issue.fixes[0]
        new_state = apply_fix(ctx.state, issue, fix.id)
        if new_state is ctx.state:
            logger.warning("Fix %s left the state unchanged; stopping.", fix.id)
            break
        logger.debug("Applied %s for %s", fix.id, issue.id)
        applied.append(fix.id)
        validation = validation_summary_for(ctx.schema, new_state) if recompute_validation else ctx.validation
        ctx = dataclasses.replace(ctx, state=new_state, validation=validation)
    else:
        logger.warning("Stopped after %d fix passes; fixable issues may remain.", max_passes)

    fixed = dict(document)
    fixed["state"] = state_to_payload(ctx.state)
    return fixed, applied


def render_markdown(report) -> str:
    _ensure_backend_on_path()
    from promptlint.lint_engine.models import SeverityOrdering

    lines = [
        "# Prompt Lint",
        "",
        f"- Run: {report.run_id}",
        f"- Generated: {report.generated_at.isoformat()}",
        "",
        "## Totals",
    ]
    if not report.totals:
        lines.append("- No issues found.")
    for severity, count in report.totals.items():
        lines.append(f"- {severity.value}: {count}")

    lines.extend(["", "## Issues"])
    for issue in SeverityOrdering.default().sort(report.issues):
        lines.append(f"### [{issue.severity.value}] {issue.title}")
        lines.append(f"- Issue: `{issue.id}`")
        if issue.target is not None:
            target = f"{issue.target.kind.value}:{issue.target.id}"
            if issue.target.index is not None:
                target = f"{target}[{issue.target.index}]"
            lines.append(f"- Target: {target}")
        lines.append(f"- {issue.message}")
        if issue.rationale:
            lines.append(f"- Why: {issue.rationale}")
        if issue.fix_preview:
            lines.append(f"- Fix: {issue.fix_preview}")
        lines.append("")
    return "\n".join(lines).rstrip() + "\n"


def main(argv: list[str] | None = None) -> int:
    _ensure_backend_on_path()
    from promptlint.adapters.prompt_document import (
        load_prompt_document,
        load_rules_config,
    )
    from promptlint.settings import get_lint_settings

    parser = argparse.ArgumentParser(
        description="Lint a structured prompt document (YAML/JSON) and write JSON/MD reports."
    )
    parser.add_argument("document", help="Path to a prompt document with 'schema' and 'state'.")
    parser.add_argument(
        "--rules-config",
        default=None,
        help="YAML/JSON per-rule configuration (defaults to PROMPT_LINT_RULES_CONFIG).",
    )
    parser.add_argument(
        "--rule",
        action="append",
        dest="rules",
        default=None,
        help="Only run this rule id (repeatable).",
    )
    parser.add_argument(
        "--output-dir",
        default=None,
        help="Output directory for report files (defaults to the document's directory).",
    )
    parser.add_argument(
        "--format",
        choices=("markdown", "json", "both"),
        default="both",
        help="Report format (default: both).",
    )
    parser.add_argument(
        "--apply-fixes",
        action="store_true",
        help="Accept every offered fix and write the fixed document.",
    )
    parser.add_argument(
        "--max-fix-passes",
        type=int,
        default=None,
        help="Upper bound on fixes applied with --apply-fixes (defaults to PROMPT_LINT_MAX_FIX_PASSES).",
    )
    args = parser.parse_args(argv)

    try:
        settings = get_lint_settings()
    except ValueError as exc:
        raise SystemExit(str(exc)) from exc
    logging.basicConfig(level=settings.log_level, format="%(levelname)s %(name)s: %(message)s")

    document_path = Path(args.document).resolve()
    rules_config_path = Path(args.rules_config).resolve() if args.rules_config else settings.rules_config_path
    try:
        document = load_prompt_document(document_path)
        lint_config = load_rules_config(rules_config_path) if rules_config_path else None
    except ValueError as exc:
        raise SystemExit(str(exc)) from exc

    rule_ids = set(args.rules) if args.rules else None
    output_dir = Path(args.output_dir).resolve() if args.output_dir else document_path.parent
    output_dir.mkdir(parents=True, exist_ok=True)

    try:
        if args.apply_fixes:
            max_passes = args.max_fix_passes or settings.max_fix_passes
            document, applied = apply_all_fixes(
                document,
                lint_config=lint_config,
                rule_ids=rule_ids,
                max_passes=max_passes,
            )
            out_fixed = output_dir / "prompt_lint_fixed.json"
            out_fixed.write_text(json.dumps(document, indent=2))
            logger.info("Applied %d fix(es)", len(applied))
            print(f"Wrote {out_fixed}")

        report = lint_document(document, lint_config=lint_config, rule_ids=rule_ids)
    except ValueError as exc:
        raise SystemExit(str(exc)) from exc

    if args.format in ("json", "both"):
        out_json = output_dir / "prompt_lint.json"
        out_json.write_text(json.dumps(report.model_dump(mode="json"), indent=2))
        print(f"Wrote {out_json}")
    if args.format in ("markdown", "both"):
        out_md = output_dir / "prompt_lint.md"
        out_md.write_text(render_markdown(report))
        print(f"Wrote {out_md}")

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
