"""
Configuration Manager for the content validator.

Loads and merges configuration from multiple sources:
- System defaults
- User configuration (~/.content-gatekeeper/config.yaml)
- Project configuration (./.content-gatekeeper/config.yaml)
- Explicit configuration (--config file.yaml)
- Environment variables
- CLI arguments (highest precedence)
"""

import logging
import os
import re
from dataclasses import asdict, fields
from pathlib import Path
from typing import Any, Dict, List, Optional

import yaml

from gatekeeper.config.environment import EnvironmentVariables
from gatekeeper.config.schema import ValidatorConfig
from gatekeeper.errors import ConfigurationError


logger = logging.getLogger(__name__)

CONFIG_DIR_NAME = ".content-gatekeeper"
CONFIG_FILE_NAME = "config.yaml"


class ConfigurationManager:
    """Manages configuration loading, validation, and environment variable integration."""

    def __init__(
        self,
        user_config_path: Optional[Path] = None,
        project_config_path: Optional[Path] = None,
    ):
        self.user_config_path = user_config_path or Path.home() / CONFIG_DIR_NAME / CONFIG_FILE_NAME
        self.project_config_path = project_config_path or Path.cwd() / CONFIG_DIR_NAME / CONFIG_FILE_NAME

    def load_configuration(
        self,
        config_file: Optional[str] = None,
        cli_overrides: Optional[Dict[str, Any]] = None,
    ) -> ValidatorConfig:
        """
        Load configuration from all sources with proper precedence.

        Precedence order (highest to lowest):
        1. CLI arguments (cli_overrides)
        2. Environment variables
        3. Explicit config file (--config)
        4. Project config (./.content-gatekeeper/config.yaml)
        5. User config (~/.content-gatekeeper/config.yaml)
        6. System defaults

        Args:
            config_file: Optional explicit configuration file path
            cli_overrides: Dictionary of CLI argument overrides; None values
                are ignored

        Returns:
            ValidatorConfig: Merged and validated configuration

        Raises:
            ConfigurationError: If a file is invalid YAML, a key is unknown,
                or a value is invalid
        """
        config_dict = asdict(ValidatorConfig())

        if self.user_config_path.exists():
            config_dict.update(self._load_yaml_file(self.user_config_path))

        if self.project_config_path.exists():
            config_dict.update(self._load_yaml_file(self.project_config_path))

        if config_file:
            path = Path(config_file)
            if not path.exists():
                raise ConfigurationError(f"Configuration file not found: {config_file}")
            config_dict.update(self._load_yaml_file(path))

        try:
            config_dict.update(EnvironmentVariables.load_overrides())
        except ValueError as e:
            raise ConfigurationError(str(e)) from e

        if cli_overrides:
            config_dict.update({k: v for k, v in cli_overrides.items() if v is not None})

        config_dict = self.substitute_environment_variables(config_dict)
        config = self._dict_to_config(config_dict)

        errors = self.validate_configuration(config)
        if errors:
            raise ConfigurationError("Invalid configuration: " + "; ".join(errors))

        logger.debug(f"Configuration loaded: {asdict(config)}")
        return config

    def validate_configuration(self, config: ValidatorConfig) -> List[str]:
        """Validate configuration and return any errors."""
        return config.validate()

    def substitute_environment_variables(self, config_dict: Dict[str, Any]) -> Dict[str, Any]:
        """
        Substitute ${VAR} and ${VAR:-default} syntax with environment variable values.

        Raises:
            ConfigurationError: If a referenced variable without default is not set
        """
        pattern = re.compile(r'\$\{([^}]+)\}')

        def replace_var(match):
            var_expr = match.group(1)
            if ':-' in var_expr:
                var_name, default_value = var_expr.split(':-', 1)
                return os.environ.get(var_name, default_value)
            if var_expr not in os.environ:
                raise ConfigurationError(f"Required environment variable '{var_expr}' is not set")
            return os.environ[var_expr]

        return {
            key: pattern.sub(replace_var, value) if isinstance(value, str) else value
            for key, value in config_dict.items()
        }

    def _load_yaml_file(self, path: Path) -> Dict[str, Any]:
        """Load a YAML configuration file into a flat dictionary."""
        try:
            with open(path, "r", encoding="utf-8") as f:
                data = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise ConfigurationError(f"Invalid YAML syntax in {path}: {e}") from e
        except IOError as e:
            raise ConfigurationError(f"Cannot read configuration file {path}: {e}") from e

        if data is None:
            return {}
        if not isinstance(data, dict):
            raise ConfigurationError(f"Configuration file {path} must contain a mapping")

        logger.debug(f"Loaded configuration file {path}")
        return data

    def _dict_to_config(self, config_dict: Dict[str, Any]) -> ValidatorConfig:
        """Build a ValidatorConfig, converting values to the declared types."""
        known = {f.name: f for f in fields(ValidatorConfig)}
        unknown = sorted(set(config_dict) - set(known))
        if unknown:
            raise ConfigurationError(f"Unknown configuration keys: {', '.join(unknown)}")

        values = {}
        for name, value in config_dict.items():
            values[name] = self._coerce(name, value, type(getattr(ValidatorConfig, name)))
        return ValidatorConfig(**values)

    def _coerce(self, name: str, value: Any, target: type) -> Any:
        if target is bool:
            if isinstance(value, bool):
                return value
            if isinstance(value, str) and value.strip().lower() in ("true", "false"):
                return value.strip().lower() == "true"
            raise ConfigurationError(f"Invalid value for '{name}': expected true or false, got {value!r}")
        if target in (int, float):
            if isinstance(value, bool):
                raise ConfigurationError(f"Invalid value for '{name}': expected a number, got {value!r}")
            try:
                return target(value)
            except (TypeError, ValueError):
                raise ConfigurationError(f"Invalid value for '{name}': expected a number, got {value!r}")
        return str(value)
