"""
Configuration Loader
Loads and validates YAML configuration files
"""

from pathlib import Path
from typing import Any, Dict
import yaml

from .app_config import AppConfig

EXPORT_FORMATS = ("csv", "zip")
MAX_COMMENT_PAGE_SIZE = 100


class ConfigValidationError(Exception):
    """Raised when configuration validation fails."""
    pass


class ConfigLoader:
    """
    Loads and validates configuration from YAML files.

    Responsibilities:
    - Read YAML configuration file
    - Validate all required fields
    - Validate types and value ranges
    - Return validated AppConfig instance
    """

    def __init__(self, config_path: Path):
        """
        Initialize ConfigLoader with path to config file.

        Args:
            config_path: Path to YAML configuration file
        """
        self._config_path = config_path

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

        api_key = self._validate_required_string(config_data, "api_key")
        channel = self._validate_required_string(config_data, "channel")
        export_meta = self._validate_export_config(config_data)
        storage_root = self._validate_storage_config(config_data)

        return AppConfig(
            api_key=api_key,
            channel=channel,
            export_format=export_meta["format"],
            refresh=export_meta["refresh"],
            comment_page_size=export_meta["comment_page_size"],
            storage_root=storage_root
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

    def _validate_required_string(self, config: Dict[str, Any], name: str) -> str:
        """Validate a required, non-empty string field."""
        if name not in config:
            raise ConfigValidationError(f"Missing required field: '{name}'")

        value = config[name]

        if not isinstance(value, str):
            raise ConfigValidationError(
                f"Field '{name}' must be a string, got {type(value).__name__}"
            )

        if not value.strip():
            raise ConfigValidationError(f"Field '{name}' cannot be empty")

        return value.strip()

    def _validate_export_config(self, config: Dict[str, Any]) -> Dict[str, Any]:
        """Validate export section."""
        defaults = {
            "format": "zip",
            "refresh": False,
            "comment_page_size": MAX_COMMENT_PAGE_SIZE
        }

        if "export" not in config:
            return defaults

        export = config["export"]
        if not isinstance(export, dict):
            raise ConfigValidationError(
                f"Section 'export' must be a mapping, got {type(export).__name__}"
            )

        export_format = export.get("format", defaults["format"])
        refresh = export.get("refresh", defaults["refresh"])
        page_size = export.get("comment_page_size", defaults["comment_page_size"])

        if not isinstance(export_format, str) or export_format.strip().lower() not in EXPORT_FORMATS:
            raise ConfigValidationError(
                f"export.format must be one of {', '.join(EXPORT_FORMATS)}, got {export_format!r}"
            )
        if not isinstance(refresh, bool):
            raise ConfigValidationError(f"export.refresh must be boolean, got {type(refresh).__name__}")
        # bool is an int subclass; reject it explicitly
        if isinstance(page_size, bool) or not isinstance(page_size, int):
            raise ConfigValidationError(
                f"export.comment_page_size must be an integer, got {type(page_size).__name__}"
            )
        if not (1 <= page_size <= MAX_COMMENT_PAGE_SIZE):
            raise ConfigValidationError(
                f"export.comment_page_size must be between 1 and {MAX_COMMENT_PAGE_SIZE}, got {page_size}"
            )

        return {
            "format": export_format.strip().lower(),
            "refresh": refresh,
            "comment_page_size": page_size
        }

    def _validate_storage_config(self, config: Dict[str, Any]) -> str:
        """Validate storage section; returns the storage root."""
        default_root = "./storage"

        if "storage" not in config:
            return default_root

        storage = config["storage"]
        if not isinstance(storage, dict):
            return default_root

        root = storage.get("root", default_root)
        if not isinstance(root, str):
            raise ConfigValidationError(f"storage.root must be string, got {type(root).__name__}")
        if not root.strip():
            raise ConfigValidationError("storage.root cannot be empty")

        return root.strip()
