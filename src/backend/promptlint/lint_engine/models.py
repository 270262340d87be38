from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from typing import Annotated, Callable, Dict, Iterable, List, Literal, Optional, Tuple, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel


class Severity(str, Enum):
    INFO = "info"
    SUGGESTION = "suggestion"
    WARNING = "warning"


class InputType(str, Enum):
    TEXT = "text"
    LIST = "list"


class TargetKind(str, Enum):
    SECTION = "section"
    METADATA = "metadata"
    NEGATIVE = "negative"


MetadataScalar = Union[str, int, float]


class _SchemaModel(BaseModel):
    # Schema/state files are authored in camelCase; snake_case is accepted too.
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, frozen=True)


class SectionSchema(_SchemaModel):
    id: str
    label: str
    input_type: InputType = InputType.TEXT
    repeatable: bool = False
    required: bool = False


class MetadataField(_SchemaModel):
    id: str
    label: str
    # None means the schema declares no default.
    default: Optional[MetadataScalar] = None
    required: bool = False


class NegativePromptConfig(_SchemaModel):
    enabled: bool = False


class PromptSchema(_SchemaModel):
    sections: List[SectionSchema] = Field(default_factory=list)
    metadata_fields: List[MetadataField] = Field(default_factory=list)
    negative_prompt: NegativePromptConfig = Field(default_factory=NegativePromptConfig)

    @field_validator("sections", "metadata_fields")
    @classmethod
    def _ids_unique(cls, value):
        seen: set[str] = set()
        for item in value:
            if item.id in seen:
                raise ValueError(f"Duplicate id in schema: {item.id}")
            seen.add(item.id)
        return value

    def get_section(self, section_id: str) -> Optional[SectionSchema]:
        for section in self.sections:
            if section.id == section_id:
                return section
        return None


class TextValue(BaseModel):
    model_config = ConfigDict(frozen=True)

    kind: Literal["text"] = "text"
    text: str = ""


class ListValue(BaseModel):
    model_config = ConfigDict(frozen=True)

    kind: Literal["list"] = "list"
    items: Tuple[str, ...] = ()


class RepeatableTextValue(BaseModel):
    model_config = ConfigDict(frozen=True)

    kind: Literal["repeatable_text"] = "repeatable_text"
    entries: Tuple[str, ...] = ()


SectionValue = Annotated[
    Union[TextValue, ListValue, RepeatableTextValue],
    Field(discriminator="kind"),
]


class PromptState(_SchemaModel):
    sections: Dict[str, SectionValue] = Field(default_factory=dict)
    negative_prompt: str = ""
    metadata: Dict[str, Optional[MetadataScalar]] = Field(default_factory=dict)


class ValidationSummary(_SchemaModel):
    has_errors: bool = False


class IssueTarget(BaseModel):
    model_config = ConfigDict(frozen=True)

    kind: TargetKind
    id: str
    # Only set when the target is one entry of a repeatable section.
    index: Optional[int] = None


class Fix(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str
    label: str
    apply: Callable[[PromptState], PromptState] = Field(exclude=True, repr=False)


class Issue(BaseModel):
    id: str
    rule_id: str
    severity: Severity
    title: str
    message: str
    rationale: str = ""
    target: Optional[IssueTarget] = None
    fix_preview: Optional[str] = None
    fixes: List[Fix] = Field(default_factory=list)


class LintRunReport(BaseModel):
    run_id: str
    generated_at: datetime

    issues: List[Issue] = Field(default_factory=list)
    totals: Dict[Severity, int] = Field(default_factory=dict)


@dataclass(frozen=True)
class SeverityOrdering:
    order: Dict[Severity, int]

    @classmethod
    def default(cls) -> "SeverityOrdering":
        # Higher is more urgent.
        return cls(
            order={
                Severity.WARNING: 30,
                Severity.SUGGESTION: 20,
                Severity.INFO: 10,
            }
        )

    def most_urgent(self, severities: Iterable[Severity]) -> Optional[Severity]:
        severities = list(severities)
        if not severities:
            return None
        return max(severities, key=lambda s: self.order.get(s, 0))

    def sort(self, issues: Iterable[Issue]) -> List[Issue]:
        """Most urgent first; issues of equal severity keep their evaluation order."""
        return sorted(issues, key=lambda i: -self.order.get(i.severity, 0))
