"""
Configuration for the content validator: the ValidatorConfig dataclass and
the manager that merges defaults, YAML files, environment and CLI values.
"""

from gatekeeper.config.schema import LogLevel, ValidatorConfig
from gatekeeper.config.environment import EnvironmentVariables
from gatekeeper.config.manager import ConfigurationManager

__all__ = [
    "ValidatorConfig",
    "LogLevel",
    "EnvironmentVariables",
    "ConfigurationManager",
]
