"""Public façade for the weathermood.core package.

This module exposes logging helpers, JSON file utilities, the domain models
and the weather -> mood classifier. Other packages should import these from
the façade instead of the internal submodules.
"""

from .fs_utils import ensure_parent_dir, read_json, remove_file, write_json
from .logging_config import configure_logging
from .logging_utils import (
    log_error,
    log_info,
    log_section,
    log_step,
    log_success,
    log_warning,
)
from .models import CollectionRef, MoodQuery, RetrievalOutcome, StrategyUsed, Track
from .moods import (
    DEFAULT_CATEGORY,
    MoodDescription,
    classify_condition,
    describe_mood,
)

__all__ = [
    "configure_logging",
    "log_section",
    "log_info",
    "log_step",
    "log_success",
    "log_warning",
    "log_error",
    "ensure_parent_dir",
    "write_json",
    "read_json",
    "remove_file",
    "Track",
    "CollectionRef",
    "MoodQuery",
    "RetrievalOutcome",
    "StrategyUsed",
    "DEFAULT_CATEGORY",
    "MoodDescription",
    "classify_condition",
    "describe_mood",
]
