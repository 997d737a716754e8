"""
Unit tests for environment variable integration.
"""

import os
from unittest.mock import patch

import pytest

from gatekeeper.config.environment import EnvironmentVariables


class TestEnvironmentVariables:
    """Test EnvironmentVariables functionality."""

    def test_all_variables_documented(self):
        """Test every supported variable has documentation."""
        docs = EnvironmentVariables.get_variable_documentation()

        assert set(docs) == set(EnvironmentVariables.get_all_variables())
        assert all(name.startswith("GATEKEEPER_") for name in docs)

    def test_no_overrides(self):
        assert EnvironmentVariables.load_overrides() == {}

    def test_overrides_converted(self):
        env = {
            "GATEKEEPER_LOG_LEVEL": " DEBUG ",
            "GATEKEEPER_DURATION_TOLERANCE": "12.5",
            "GATEKEEPER_SHORT_SCENE_SECONDS": "45",
            "GATEKEEPER_MAX_QUIZ_QUESTIONS": "30",
            "GATEKEEPER_TOP_ERRORS_LIMIT": "3",
            "GATEKEEPER_ENFORCE_CHARACTER_REFS": "yes",
            "GATEKEEPER_SIZE_WARNING_KB": "0",
        }

        with patch.dict(os.environ, env):
            overrides = EnvironmentVariables.load_overrides()

        assert overrides == {
            "log_level": "debug",
            "duration_tolerance_seconds": 12.5,
            "short_scene_seconds": 45.0,
            "max_quiz_questions": 30,
            "top_errors_limit": 3,
            "enforce_character_references": True,
            "manifest_size_warning_kb": 0,
        }

    def test_empty_value_ignored(self):
        with patch.dict(os.environ, {"GATEKEEPER_MAX_QUIZ_QUESTIONS": ""}):
            assert EnvironmentVariables.load_overrides() == {}

    @pytest.mark.parametrize("value,expected", [
        ("1", True), ("true", True), ("On", True),
        ("0", False), ("false", False), ("no", False),
    ])
    def test_boolean_values(self, value, expected):
        with patch.dict(os.environ, {"GATEKEEPER_ENFORCE_CHARACTER_REFS": value}):
            overrides = EnvironmentVariables.load_overrides()

        assert overrides["enforce_character_references"] is expected

    def test_invalid_boolean(self):
        with patch.dict(os.environ, {"GATEKEEPER_ENFORCE_CHARACTER_REFS": "maybe"}):
            with pytest.raises(ValueError, match="Invalid GATEKEEPER_ENFORCE_CHARACTER_REFS"):
                EnvironmentVariables.load_overrides()

    def test_invalid_number(self):
        with patch.dict(os.environ, {"GATEKEEPER_DURATION_TOLERANCE": "a minute"}):
            with pytest.raises(ValueError, match="Invalid GATEKEEPER_DURATION_TOLERANCE"):
                EnvironmentVariables.load_overrides()
