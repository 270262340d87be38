import os
import sys


# Ensure `src/backend` is on sys.path so imports like `import promptlint...` work.
BACKEND_DIR = os.path.abspath(os.path.join(os.path.dirname(__file__), "../.."))
if BACKEND_DIR not in sys.path:
    sys.path.insert(0, BACKEND_DIR)

import pytest

from promptlint.adapters.prompt_document import coerce_section_value
from promptlint.lint_engine.config import LintRulesConfig
from promptlint.lint_engine.context import EvaluationContext
from promptlint.lint_engine.models import (
    PromptSchema,
    PromptState,
    ValidationSummary,
)


@pytest.fixture
def make_schema():
    def _make(*, sections=(), metadata_fields=(), negative_enabled: bool = False) -> PromptSchema:
        return PromptSchema(
            sections=list(sections),
            metadata_fields=list(metadata_fields),
            negative_prompt={"enabled": negative_enabled},
        )

    return _make


@pytest.fixture
def video_schema(make_schema) -> PromptSchema:
    return make_schema(
        sections=[
            {"id": "main", "label": "Main prompt", "input_type": "text", "required": True},
            {"id": "style", "label": "Style / medium", "input_type": "text"},
            {"id": "scenes", "label": "Scenes", "input_type": "text", "repeatable": True},
            {"id": "durations", "label": "Shot duration", "input_type": "text", "repeatable": True},
            {"id": "camera", "label": "Global camera", "input_type": "text"},
            {"id": "tags", "label": "Tags", "input_type": "list"},
        ],
        metadata_fields=[
            {"id": "aspect_ratio", "label": "Aspect ratio"},
            {"id": "fps", "label": "FPS", "default": 24},
            {"id": "total_duration", "label": "Total duration"},
        ],
        negative_enabled=True,
    )


@pytest.fixture
def make_state():
    def _make(schema: PromptSchema, *, sections=None, negative_prompt: str = "", metadata=None) -> PromptState:
        values = {}
        for section_id, raw in (sections or {}).items():
            section = schema.get_section(section_id)
            assert section is not None, f"fixture references unknown section {section_id}"
            values[section_id] = coerce_section_value(section, raw)
        return PromptState(sections=values, negative_prompt=negative_prompt, metadata=metadata or {})

    return _make


@pytest.fixture
def make_ctx(video_schema, make_state):
    def _make(
        *,
        schema: PromptSchema | None = None,
        sections=None,
        negative_prompt: str = "",
        metadata=None,
        has_errors: bool = False,
        lint_rules: dict | None = None,
    ) -> EvaluationContext:
        schema = schema or video_schema
        return EvaluationContext(
            schema=schema,
            state=make_state(schema, sections=sections, negative_prompt=negative_prompt, metadata=metadata),
            validation=ValidationSummary(has_errors=has_errors),
            lint_config=LintRulesConfig(rules=lint_rules or {}),
        )

    return _make
