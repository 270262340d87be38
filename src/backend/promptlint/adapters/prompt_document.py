from __future__ import annotations

import logging
import re
from pathlib import Path
from typing import Any, Optional

import yaml
from pydantic import TypeAdapter

from promptlint.lint_engine.config import LintRulesConfig
from promptlint.lint_engine.context import EvaluationContext
from promptlint.lint_engine.models import (
    InputType,
    ListValue,
    PromptSchema,
    PromptState,
    RepeatableTextValue,
    SectionSchema,
    SectionValue,
    TextValue,
    ValidationSummary,
)
from promptlint.lint_engine.text import is_value_empty

logger = logging.getLogger(__name__)

_SECTION_VALUE = TypeAdapter(SectionValue)

_INT_TAG = "tag:yaml.org,2002:int"
_FLOAT_TAG = "tag:yaml.org,2002:float"


class _DocumentLoader(yaml.SafeLoader):
    """SafeLoader without YAML 1.1 base-60 numbers: `16:9` loads as a string, not 969."""


_DocumentLoader.yaml_implicit_resolvers = {
    first: [(tag, regexp) for tag, regexp in resolvers if tag not in (_INT_TAG, _FLOAT_TAG)]
    for first, resolvers in yaml.SafeLoader.yaml_implicit_resolvers.items()
}
_DocumentLoader.add_implicit_resolver(
    _INT_TAG,
    re.compile(
        r"""^(?:[-+]?0b[0-1_]+
        |[-+]?0[0-7_]+
        |[-+]?(?:0|[1-9][0-9_]*)
        |[-+]?0x[0-9a-fA-F_]+)$""",
        re.X,
    ),
    list("-+0123456789"),
)
_DocumentLoader.add_implicit_resolver(
    _FLOAT_TAG,
    re.compile(
        r"""^(?:[-+]?(?:[0-9][0-9_]*)\.[0-9_]*(?:[eE][-+][0-9]+)?
        |\.[0-9_]+(?:[eE][-+][0-9]+)?
        |[-+]?\.(?:inf|Inf|INF)
        |\.(?:nan|NaN|NAN))$""",
        re.X,
    ),
    list("-+0123456789."),
)


class PromptDocumentError(ValueError):
    pass


def coerce_section_value(section: SectionSchema, raw: Any) -> Optional[Any]:
    """
    Turn a raw JSON-like section value into its tagged form.

    The tag records what is stored, not what the schema expects: a plain
    string in a list-typed section stays a TextValue so the lint rules can
    flag it.
    """
    if raw is None:
        return None
    if isinstance(raw, (TextValue, ListValue, RepeatableTextValue)):
        return raw
    if isinstance(raw, dict) and "kind" in raw:
        return _SECTION_VALUE.validate_python(raw)
    if isinstance(raw, str):
        return TextValue(text=raw)
    if isinstance(raw, (list, tuple)):
        parts = tuple("" if part is None else str(part) for part in raw)
        if section.input_type == InputType.TEXT and section.repeatable:
            return RepeatableTextValue(entries=parts)
        return ListValue(items=parts)
    return TextValue(text=str(raw))


def state_from_payload(schema: PromptSchema, payload: Optional[dict[str, Any]]) -> PromptState:
    """
    Build a PromptState from a plain payload.

    Expected shape (camelCase keys are accepted too):
      {
        "sections": {"<section id>": "text" | ["entry", ...]},
        "negative_prompt": "...",
        "metadata": {"<field id>": "16:9" | 24}
      }
    """
    payload = payload or {}
    if not isinstance(payload, dict):
        raise PromptDocumentError("Prompt state must be an object.")

    raw_sections = payload.get("sections") or {}
    if not isinstance(raw_sections, dict):
        raise PromptDocumentError("Prompt state 'sections' must be an object.")

    sections: dict[str, Any] = {}
    for section_id, raw in raw_sections.items():
        section = schema.get_section(section_id)
        if section is None:
            logger.debug("Dropping state for unknown section %s", section_id)
            continue
        value = coerce_section_value(section, raw)
        if value is not None:
            sections[section_id] = value

    negative = payload.get("negative_prompt", payload.get("negativePrompt"))
    return PromptState(
        sections=sections,
        negative_prompt=negative or "",
        metadata=dict(payload.get("metadata") or {}),
    )


def state_to_payload(state: PromptState) -> dict[str, Any]:
    sections: dict[str, Any] = {}
    for section_id, value in state.sections.items():
        if isinstance(value, TextValue):
            sections[section_id] = value.text
        elif isinstance(value, ListValue):
            sections[section_id] = list(value.items)
        elif isinstance(value, RepeatableTextValue):
            sections[section_id] = list(value.entries)
    return {
        "sections": sections,
        "negative_prompt": state.negative_prompt,
        "metadata": dict(state.metadata),
    }


def validation_summary_for(schema: PromptSchema, state: PromptState) -> ValidationSummary:
    """Required-field completeness, as computed by the question flow."""
    for section in schema.sections:
        if section.required and is_value_empty(state.sections.get(section.id)):
            return ValidationSummary(has_errors=True)
    for meta in schema.metadata_fields:
        if meta.required and is_value_empty(state.metadata.get(meta.id)):
            return ValidationSummary(has_errors=True)
    return ValidationSummary(has_errors=False)


def build_context(
    document: dict[str, Any],
    *,
    lint_config: Optional[LintRulesConfig] = None,
) -> EvaluationContext:
    if not isinstance(document, dict) or "schema" not in document:
        raise PromptDocumentError("Prompt document must be an object with a 'schema' key.")

    schema = PromptSchema.model_validate(document["schema"])
    state = state_from_payload(schema, document.get("state"))

    validation_raw = document.get("validation")
    if validation_raw is None:
        validation = validation_summary_for(schema, state)
    else:
        validation = ValidationSummary.model_validate(validation_raw)

    return EvaluationContext(
        schema=schema,
        state=state,
        validation=validation,
        lint_config=lint_config or LintRulesConfig(),
    )


def _load_mapping(path: Path, what: str) -> dict[str, Any]:
    if not path.exists():
        raise PromptDocumentError(f"{what} not found: {path}")
    try:
        raw = yaml.load(path.read_text(encoding="utf-8"), Loader=_DocumentLoader)
    except yaml.YAMLError as exc:
        raise PromptDocumentError(f"Could not parse {what} {path}: {exc}") from exc
    if not isinstance(raw, dict):
        raise PromptDocumentError(f"{what} must contain an object at the top level: {path}")
    return raw


def load_prompt_document(path: Path) -> dict[str, Any]:
    """
    Read a YAML or JSON prompt document ({schema, state, validation?}).

    Unquoted ratios such as `aspect_ratio: 16:9` stay strings; YAML 1.1 would
    otherwise read them as base-60 integers.
    """
    document = _load_mapping(path, "Prompt document")
    if "schema" not in document:
        raise PromptDocumentError(f"Prompt document is missing 'schema': {path}")
    logger.info("Loaded prompt document %s", path)
    return document


def load_rules_config(path: Path) -> LintRulesConfig:
    raw = _load_mapping(path, "Rules config")
    if "rules" not in raw:
        raw = {"rules": raw}
    logger.info("Loaded rules config %s", path)
    return LintRulesConfig.model_validate(raw)
