from __future__ import annotations

from typing import List

from ..config import MultiSceneRuleConfig
from ..context import EvaluationContext
from ..models import Issue, IssueTarget, ListValue, RepeatableTextValue, Severity, TargetKind
from ..registry import register_rule
from ..rule import Rule
from ..text import is_value_empty


@register_rule
class LINT_MULTIPLE_SCENES_NO_GLOBAL_CAMERA(Rule):
    rule_id = "lint-multiple-scenes-no-global-camera"
    rule_title = "Global camera rules missing"
    rationale = "Global camera guidance keeps scenes visually cohesive."
    severity = Severity.SUGGESTION
    config_model = MultiSceneRuleConfig

    def evaluate(self, ctx: EvaluationContext) -> List[Issue]:
        cfg = ctx.lint_config.get_rule_config(self.rule_id, MultiSceneRuleConfig)
        if not cfg.enabled:
            return []

        scene_section = ctx.find_section_by_label("scene")
        camera_section = ctx.find_section_by_label("camera")
        if scene_section is None or camera_section is None:
            return []

        scenes = ctx.section_value(scene_section.id)
        if isinstance(scenes, RepeatableTextValue):
            scene_count = len(scenes.entries)
        elif isinstance(scenes, ListValue):
            scene_count = len(scenes.items)
        else:
            # A single text value is at most one scene.
            return []
        if scene_count < cfg.min_scenes:
            return []

        if not is_value_empty(ctx.section_value(camera_section.id)):
            return []

        return [
            Issue(
                id=self.rule_id,
                rule_id=self.rule_id,
                severity=self.severity,
                title=self.rule_title,
                message="Multiple scenes benefit from a consistent camera style.",
                rationale=self.rationale,
                target=IssueTarget(kind=TargetKind.SECTION, id=camera_section.id),
            )
        ]
