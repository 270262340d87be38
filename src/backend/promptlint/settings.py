from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv


load_dotenv()

DEFAULT_MAX_FIX_PASSES = 25


@dataclass(frozen=True)
class LintSettings:
    log_level: str
    rules_config_path: Optional[Path]
    max_fix_passes: int


def get_lint_settings() -> LintSettings:
    """
    Load prompt-lint process settings from environment variables (and `.env`).

    Reads:
      PROMPT_LINT_LOG_LEVEL, PROMPT_LINT_RULES_CONFIG, PROMPT_LINT_MAX_FIX_PASSES
    """
    rules_config = os.getenv("PROMPT_LINT_RULES_CONFIG", "").strip()
    return LintSettings(
        log_level=_log_level("PROMPT_LINT_LOG_LEVEL", "INFO"),
        rules_config_path=Path(rules_config) if rules_config else None,
        max_fix_passes=_positive_int("PROMPT_LINT_MAX_FIX_PASSES", DEFAULT_MAX_FIX_PASSES),
    )


def _log_level(name: str, default: str) -> str:
    value = os.getenv(name, default).strip().upper() or default
    if not isinstance(logging.getLevelName(value), int):
        raise ValueError(f"{name} must be a logging level name (got {value!r}).")
    return value


def _positive_int(name: str, default: int) -> int:
    raw = os.getenv(name, "").strip()
    if not raw:
        return default
    try:
        value = int(raw)
    except ValueError as exc:
        raise ValueError(f"{name} must be an integer (got {raw!r}).") from exc
    if value <= 0:
        raise ValueError(f"{name} must be positive (got {value}).")
    return value
