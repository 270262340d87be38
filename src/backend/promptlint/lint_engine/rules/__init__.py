# Import order is registry order, which is evaluation order.
from .lint_validation_errors_banner import LINT_VALIDATION_ERRORS_BANNER
from .lint_main_too_short import LINT_MAIN_TOO_SHORT
from .lint_style_missing import LINT_STYLE_MISSING
from .lint_metadata_aspect_ratio import LINT_METADATA_ASPECT_RATIO
from .lint_negative_too_generic import LINT_NEGATIVE_TOO_GENERIC
from .lint_text_too_comma_heavy import LINT_TEXT_TOO_COMMA_HEAVY
from .lint_video_duration_missing import LINT_VIDEO_DURATION_MISSING
from .lint_multiple_scenes_no_global_camera import (
    LINT_MULTIPLE_SCENES_NO_GLOBAL_CAMERA,
)
from .lint_repeatable_duplicates import LINT_REPEATABLE_DUPLICATES
from .lint_trim_whitespace import LINT_TRIM_WHITESPACE
from .lint_list_from_string import LINT_LIST_FROM_STRING
from .lint_default_fps import LINT_DEFAULT_FPS

__all__ = [
    "LINT_VALIDATION_ERRORS_BANNER",
    "LINT_MAIN_TOO_SHORT",
    "LINT_STYLE_MISSING",
    "LINT_METADATA_ASPECT_RATIO",
    "LINT_NEGATIVE_TOO_GENERIC",
    "LINT_TEXT_TOO_COMMA_HEAVY",
    "LINT_VIDEO_DURATION_MISSING",
    "LINT_MULTIPLE_SCENES_NO_GLOBAL_CAMERA",
    "LINT_REPEATABLE_DUPLICATES",
    "LINT_TRIM_WHITESPACE",
    "LINT_LIST_FROM_STRING",
    "LINT_DEFAULT_FPS",
]
