"""Configuration management module for the teacher search service."""

from .environment import EnvironmentConfig, load_environment_config
from .exceptions import ConfigurationError
from .loader import format_validation_errors, load_config, validate_config_file
from .models import (
    AppConfig,
    LogFormat,
    LogLevel,
    LoggingConfig,
    MatchingConfig,
)

__all__ = [
    # Main loader functions
    "load_config",
    "validate_config_file",
    "load_environment_config",
    "format_validation_errors",
    # Configuration models
    "AppConfig",
    "MatchingConfig",
    "LoggingConfig",
    "EnvironmentConfig",
    # Enums
    "LogLevel",
    "LogFormat",
    # Exceptions
    "ConfigurationError",
]
