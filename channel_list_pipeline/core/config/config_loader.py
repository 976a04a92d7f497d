"""
Configuration Loader
Loads and validates YAML configuration files
"""

from pathlib import Path
from typing import Any, Dict, Optional
import yaml

from .app_config import AppConfig


DEFAULT_CHANNELS_PATH = "channels.json"
DEFAULT_README_PATH = "readme.md"
DEFAULT_LOGS_DIR = "logs"


class ConfigValidationError(Exception):
    """Raised when configuration validation fails."""
    pass


class ConfigLoader:
    """
    Loads and validates configuration from YAML files.

    Responsibilities:
    - Read YAML configuration file
    - Validate the API key and path fields
    - Resolve relative paths against the config file's directory
    - Return validated AppConfig instance
    """

    def __init__(self, config_path: Path, require_api_key: bool = True):
        """
        Initialize ConfigLoader with path to config file.

        Args:
            config_path: Path to YAML configuration file
            require_api_key: Whether a missing api_key is an error
        """
        self._config_path = Path(config_path)
        self._require_api_key = require_api_key

    def load(self) -> AppConfig:
        """
        Load and validate configuration from YAML file.

        Returns:
            AppConfig: Validated configuration object

        Raises:
            ConfigValidationError: If configuration is invalid
            FileNotFoundError: If config file doesn't exist
        """
        config_data = self._load_yaml()

        api_key = self._validate_api_key(config_data)
        channels_path = self._validate_path(config_data, "channels_path", DEFAULT_CHANNELS_PATH)
        readme_path = self._validate_path(config_data, "readme_path", DEFAULT_README_PATH)
        logs_dir = self._validate_path(config_data, "logs_dir", DEFAULT_LOGS_DIR)

        return AppConfig(
            api_key=api_key,
            channels_path=channels_path,
            readme_path=readme_path,
            logs_dir=logs_dir
        )

    def _load_yaml(self) -> Dict[str, Any]:
        """Load YAML file and return parsed data."""
        if not self._config_path.exists():
            raise FileNotFoundError(
                f"Configuration file not found: {self._config_path}"
            )

        try:
            with open(self._config_path, 'r', encoding='utf-8') as f:
                data = yaml.safe_load(f)

            if data is None:
                raise ConfigValidationError("Configuration file is empty")

            if not isinstance(data, dict):
                raise ConfigValidationError(
                    "Configuration must be a YAML mapping/dictionary"
                )

            return data

        except yaml.YAMLError as e:
            raise ConfigValidationError(f"Invalid YAML syntax: {e}")

    def _validate_api_key(self, config: Dict[str, Any]) -> Optional[str]:
        """Validate api_key field."""
        if "api_key" not in config or config["api_key"] is None:
            if self._require_api_key:
                raise ConfigValidationError("Missing required field: 'api_key'")
            return None

        api_key = config["api_key"]

        if not isinstance(api_key, str):
            raise ConfigValidationError(
                f"Field 'api_key' must be a string, got {type(api_key).__name__}"
            )

        if not api_key.strip():
            if self._require_api_key:
                raise ConfigValidationError("Field 'api_key' cannot be empty")
            return None

        return api_key.strip()

    def _validate_path(self, config: Dict[str, Any], field: str, default: str) -> Path:
        """Validate an optional path field and resolve it next to the config file."""
        value = config.get(field, default)
        if value is None:
            value = default

        if not isinstance(value, str):
            raise ConfigValidationError(
                f"Field '{field}' must be a string, got {type(value).__name__}"
            )

        if not value.strip():
            raise ConfigValidationError(f"Field '{field}' cannot be empty")

        path = Path(value.strip()).expanduser()
        if not path.is_absolute():
            path = self._config_path.resolve().parent / path
        return path
