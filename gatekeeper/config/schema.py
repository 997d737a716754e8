"""
Configuration schema for the content validator.

Thresholds used by the business rules and warnings, the size of the
top-errors list kept by the statistics tracker, and the logging level.
"""

from dataclasses import dataclass
from enum import Enum
from typing import List


class LogLevel(Enum):
    """Supported logging levels."""
    DEBUG = "debug"
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"


@dataclass
class ValidatorConfig:
    """Complete validator configuration.

    Attributes:
        duration_tolerance_seconds: Allowed gap between the declared total
            duration and the sum of scene durations
        short_scene_seconds: Scenes shorter than this get a warning
        max_quiz_questions: Quizzes with more questions get a warning
        top_errors_limit: Number of entries in the top-errors list
        enforce_character_references: Treat dialogue turns that reference an
            undeclared character as errors instead of warnings
        manifest_size_warning_kb: Serialized size above which a valid
            manifest gets a warning (0 disables the check)
        log_level: Logging level (debug, info, warning, error)
    """
    duration_tolerance_seconds: float = 60.0
    short_scene_seconds: float = 60.0
    max_quiz_questions: int = 20
    top_errors_limit: int = 5
    enforce_character_references: bool = False
    manifest_size_warning_kb: int = 500
    log_level: str = LogLevel.INFO.value

    def validate(self) -> List[str]:
        """Validate configuration and return list of errors."""
        errors = []

        try:
            LogLevel(self.log_level)
        except ValueError:
            valid_levels = [l.value for l in LogLevel]
            errors.append(f"Invalid log_level '{self.log_level}'. Valid options: {valid_levels}")

        if self.duration_tolerance_seconds < 0:
            errors.append("duration_tolerance_seconds must be non-negative")
        if self.short_scene_seconds < 0:
            errors.append("short_scene_seconds must be non-negative")
        if self.max_quiz_questions < 1:
            errors.append("max_quiz_questions must be positive")
        if self.top_errors_limit < 1:
            errors.append("top_errors_limit must be positive")
        if self.manifest_size_warning_kb < 0:
            errors.append("manifest_size_warning_kb must be non-negative")

        return errors
