"""
Environment variable integration for the validator configuration.

Centralizes environment variable names, their documentation, and the
conversion of their string values into configuration values.
"""

import os
from typing import Any, Callable, Dict, List, Tuple


def _parse_bool(value: str) -> bool:
    normalized = value.strip().lower()
    if normalized in ("1", "true", "yes", "on"):
        return True
    if normalized in ("0", "false", "no", "off"):
        return False
    raise ValueError(f"expected a boolean, got '{value}'")


class EnvironmentVariables:
    """Centralized environment variable definitions and utilities."""

    LOG_LEVEL = "GATEKEEPER_LOG_LEVEL"
    DURATION_TOLERANCE = "GATEKEEPER_DURATION_TOLERANCE"
    SHORT_SCENE_SECONDS = "GATEKEEPER_SHORT_SCENE_SECONDS"
    MAX_QUIZ_QUESTIONS = "GATEKEEPER_MAX_QUIZ_QUESTIONS"
    TOP_ERRORS_LIMIT = "GATEKEEPER_TOP_ERRORS_LIMIT"
    ENFORCE_CHARACTER_REFS = "GATEKEEPER_ENFORCE_CHARACTER_REFS"
    SIZE_WARNING_KB = "GATEKEEPER_SIZE_WARNING_KB"

    # variable -> (config key, converter)
    _MAPPING: Dict[str, Tuple[str, Callable[[str], Any]]] = {
        LOG_LEVEL: ("log_level", lambda v: v.strip().lower()),
        DURATION_TOLERANCE: ("duration_tolerance_seconds", float),
        SHORT_SCENE_SECONDS: ("short_scene_seconds", float),
        MAX_QUIZ_QUESTIONS: ("max_quiz_questions", int),
        TOP_ERRORS_LIMIT: ("top_errors_limit", int),
        ENFORCE_CHARACTER_REFS: ("enforce_character_references", _parse_bool),
        SIZE_WARNING_KB: ("manifest_size_warning_kb", int),
    }

    @classmethod
    def get_all_variables(cls) -> List[str]:
        """Get list of all supported environment variables."""
        return list(cls._MAPPING)

    @classmethod
    def get_variable_documentation(cls) -> Dict[str, str]:
        """Get documentation for all environment variables."""
        return {
            cls.LOG_LEVEL: "Logging level (debug, info, warning, error)",
            cls.DURATION_TOLERANCE: "Allowed total duration mismatch in seconds (default: 60)",
            cls.SHORT_SCENE_SECONDS: "Scenes shorter than this many seconds get a warning (default: 60)",
            cls.MAX_QUIZ_QUESTIONS: "Quizzes with more questions get a warning (default: 20)",
            cls.TOP_ERRORS_LIMIT: "Number of most frequent errors reported in statistics (default: 5)",
            cls.ENFORCE_CHARACTER_REFS: "Reject dialogue turns referencing undeclared characters (default: false)",
            cls.SIZE_WARNING_KB: "Warn when a manifest is larger than this many KB, 0 disables (default: 500)",
        }

    @classmethod
    def load_overrides(cls) -> Dict[str, Any]:
        """Read configuration overrides from the environment.

        Returns:
            Dict of config key -> converted value for every variable set.

        Raises:
            ValueError: If a variable holds a value that cannot be converted.
        """
        overrides: Dict[str, Any] = {}
        for variable, (key, convert) in cls._MAPPING.items():
            raw = os.environ.get(variable)
            if raw is None or raw == "":
                continue
            try:
                overrides[key] = convert(raw)
            except ValueError as e:
                raise ValueError(f"Invalid {variable}: {e}") from e
        return overrides
