from __future__ import annotations

from typing import Any, Dict, Optional, Type, TypeVar

from pydantic import BaseModel, Field

T = TypeVar("T", bound=BaseModel)


class RuleConfigBase(BaseModel):
    enabled: bool = True


class MainTooShortRuleConfig(RuleConfigBase):
    # Normalized length below this (and above zero) is flagged.
    min_length: int = Field(default=20, ge=1)


class NegativeTooGenericRuleConfig(RuleConfigBase):
    min_length: int = Field(default=25, ge=1)


class CommaHeavyRuleConfig(RuleConfigBase):
    # Literal comma count, not clause count.
    comma_threshold: int = Field(default=6, ge=1)


class MultiSceneRuleConfig(RuleConfigBase):
    min_scenes: int = Field(default=2, ge=2)


class LintRulesConfig(BaseModel):
    """Per-rule configuration for a lint run.

    Rules pull their typed config via `get_rule_config`. A rule id that is not
    present gets its model's defaults, which reproduce the built-in behavior.
    """

    rules: Dict[str, Dict[str, Any]] = Field(default_factory=dict)

    def get_rule_config(
        self,
        rule_id: str,
        model: Type[T],
        default: Optional[T] = None,
    ) -> T:
        if rule_id not in self.rules:
            if default is not None:
                return default
            return model()  # type: ignore[call-arg]
        raw = self.rules.get(rule_id, {})
        return model.model_validate(raw)
