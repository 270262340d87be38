"""Diagnostic rule engine for structured generation prompts.

This package intentionally contains only domain logic:
- Rule inputs are a prompt schema + the current prompt state + a validation summary.
- Rules return issues (optionally carrying pure fixes); nothing here performs I/O.
"""

from .config import LintRulesConfig
from .context import EvaluationContext
from .fixes import apply_fix
from .models import (
    Fix,
    Issue,
    IssueTarget,
    LintRunReport,
    ListValue,
    PromptSchema,
    PromptState,
    RepeatableTextValue,
    Severity,
    SeverityOrdering,
    TextValue,
    ValidationSummary,
)
from .runner import LintRunner, evaluate

# Import built-in rules so they self-register with the global registry.
from . import rules as _builtin_rules  # noqa: F401
