from __future__ import annotations

from abc import ABC, abstractmethod
from typing import List, Type

from pydantic import BaseModel

from .context import EvaluationContext
from .models import Issue, Severity


class Rule(ABC):
    rule_id: str
    rule_title: str
    rationale: str
    severity: Severity
    config_model: Type[BaseModel]
    # True when the rule's issues carry fixes.
    offers_fix: bool = False

    def __init__(self):
        if not getattr(self, "rule_id", None):
            raise ValueError("Rule must define rule_id")

    @abstractmethod
    def evaluate(self, ctx: EvaluationContext) -> List[Issue]:  # pragma: no cover
        raise NotImplementedError
