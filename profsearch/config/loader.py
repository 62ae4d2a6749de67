"""Configuration loader for the teacher search service."""

from pathlib import Path
from typing import List, Optional

import yaml
from pydantic import ValidationError

from profsearch.logging import get_logger

from .environment import EnvironmentConfig, load_environment_config
from .exceptions import ConfigurationError
from .models import AppConfig
from .validators import check_for_warnings, emit_warnings

logger = get_logger(__name__, component="config")

DEFAULT_CONFIG_LOCATIONS = (
    Path("profsearch.yaml"),
    Path("config") / "profsearch.yaml",
)


def load_config(config_path: Optional[Path] = None) -> tuple[AppConfig, EnvironmentConfig]:
    """
    Load and validate configuration from YAML file and environment variables.

    Implements fallback logic for config file location:
    1. Use provided config_path if given (must exist)
    2. Try profsearch.yaml in current directory
    3. Try ./config/profsearch.yaml
    4. Fall back to built-in defaults

    Args:
        config_path: Optional path to configuration file

    Returns:
        Tuple of (AppConfig, EnvironmentConfig) with validated configuration

    Raises:
        ConfigurationError: If configuration is invalid or an explicit file is missing
    """
    config_file = _find_config_file(config_path)

    if config_file is None:
        logger.debug(
            "No configuration file found, using defaults",
            extra={"event": "config.defaults_used"},
        )
        app_config = AppConfig()
    else:
        app_config = _load_app_config(config_file)

    # Load and validate environment variables
    try:
        env_config = load_environment_config()
    except ConfigurationError:
        raise
    except Exception as e:
        raise ConfigurationError(
            f"Failed to load environment configuration: {e}",
            suggestions=["Check the variables exported in your shell or .env file"],
        ) from e

    return app_config, env_config


def _load_app_config(config_file: Path) -> AppConfig:
    """Read, check and validate one YAML configuration file."""
    try:
        with open(config_file, "r", encoding="utf-8") as f:
            config_dict = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise ConfigurationError(
            f"Failed to parse YAML configuration: {e}",
            suggestions=[
                "Check YAML syntax in your config file",
                "Ensure proper indentation (use spaces, not tabs)",
            ],
        ) from e
    except OSError as e:
        raise ConfigurationError(
            f"Failed to read configuration file: {e}",
            suggestions=[
                f"Ensure {config_file} is readable",
                "Check file permissions",
            ],
        ) from e

    # An empty file means "all defaults"
    if config_dict is None:
        return AppConfig()

    if not isinstance(config_dict, dict):
        raise ConfigurationError(
            "Configuration file must contain a mapping at the top level",
            suggestions=["Review profsearch.example.yaml for the expected format"],
        )

    warnings = check_for_warnings(config_dict)
    if warnings:
        emit_warnings(warnings)

    try:
        return AppConfig.model_validate(config_dict)
    except ValidationError as e:
        raise ConfigurationError(
            "Configuration validation failed",
            errors=format_validation_errors(e),
            suggestions=[
                "Review profsearch.example.yaml for correct format",
                "Verify field types match the expected schema",
            ],
        ) from e


def format_validation_errors(error: ValidationError) -> List[str]:
    """
    Convert Pydantic validation errors into user-friendly messages.

    Args:
        error: ValidationError raised by model_validate

    Returns:
        One message per validation problem, prefixed with the field path
    """
    messages = []
    for item in error.errors():
        field_path = " -> ".join(str(loc) for loc in item["loc"]) or "(root)"
        error_type = item["type"]

        if error_type == "missing":
            messages.append(f"Missing required field: {field_path}")
        elif error_type in ("string_type", "int_type", "int_parsing", "bool_type", "dict_type"):
            expected_type = error_type.split("_")[0]
            messages.append(
                f"Invalid type for '{field_path}': expected {expected_type}, got {item.get('input')!r}"
            )
        elif "enum" in error_type:
            messages.append(f"Invalid value for '{field_path}': {item['msg']}")
        else:
            messages.append(f"{field_path}: {item['msg']}")
    return messages


def _find_config_file(config_path: Optional[Path] = None) -> Optional[Path]:
    """
    Find configuration file using fallback logic.

    Args:
        config_path: Optional explicit path to config file

    Returns:
        Path to configuration file, or None when no default location exists

    Raises:
        ConfigurationError: If an explicit config_path does not exist
    """
    if config_path:
        if not config_path.exists():
            raise ConfigurationError(
                f"Specified configuration file not found: {config_path}",
                suggestions=[
                    f"Ensure {config_path} exists",
                    "Copy profsearch.example.yaml to profsearch.yaml",
                ],
            )
        return config_path

    for candidate in DEFAULT_CONFIG_LOCATIONS:
        if candidate.exists():
            return candidate

    return None


def validate_config_file(config_path: Path) -> bool:
    """
    Validate a configuration file without loading environment variables.

    Args:
        config_path: Path to configuration file

    Returns:
        True if valid, False otherwise (errors printed to stdout)
    """
    try:
        _load_app_config(config_path)
    except ConfigurationError as e:
        print(f"✗ Configuration validation failed:\n{e}")
        return False
    print(f"✓ Configuration file {config_path} is valid")
    return True
