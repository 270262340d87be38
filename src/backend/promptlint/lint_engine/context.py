from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, List, Optional

from .config import LintRulesConfig
from .models import (
    InputType,
    MetadataField,
    PromptSchema,
    PromptState,
    SectionSchema,
    ValidationSummary,
)


@dataclass(frozen=True)
class EvaluationContext:
    schema: PromptSchema
    state: PromptState
    validation: ValidationSummary = field(default_factory=ValidationSummary)
    lint_config: LintRulesConfig = field(default_factory=LintRulesConfig)

    def section_value(self, section_id: str) -> Optional[Any]:
        # A schema section with no state entry is simply empty.
        return self.state.sections.get(section_id)

    def metadata_value(self, field_id: str) -> Optional[Any]:
        return self.state.metadata.get(field_id)

    def find_section_by_label(self, keyword: str) -> Optional[SectionSchema]:
        needle = keyword.lower()
        for section in self.schema.sections:
            if needle in (section.label or "").lower():
                return section
        return None

    def find_metadata_field(
        self,
        *,
        label_keyword: str,
        id_keyword: str,
    ) -> Optional[MetadataField]:
        label_needle = label_keyword.lower()
        for meta in self.schema.metadata_fields:
            if label_needle in (meta.label or "").lower() or id_keyword in meta.id:
                return meta
        return None

    def primary_text_section(self) -> Optional[SectionSchema]:
        for section in self.schema.sections:
            if section.input_type == InputType.TEXT and not section.repeatable:
                return section
        return None

    def text_sections(self, *, repeatable: Optional[bool] = None) -> List[SectionSchema]:
        return [
            s
            for s in self.schema.sections
            if s.input_type == InputType.TEXT and (repeatable is None or s.repeatable == repeatable)
        ]

    def list_sections(self) -> List[SectionSchema]:
        return [s for s in self.schema.sections if s.input_type == InputType.LIST]
