"""Environment variable loading and validation."""

import os
from pathlib import Path
from typing import Optional

from .exceptions import ConfigurationError

VALID_LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


class EnvironmentConfig:
    """Environment variable configuration holder."""

    def __init__(
        self,
        log_level: Optional[str] = None,
        environment: Optional[str] = None,
        catalog_path: Optional[Path] = None,
    ):
        """Initialize environment configuration."""
        self.log_level = log_level
        self.environment = environment or "local"
        self.catalog_path = catalog_path


def load_environment_config() -> EnvironmentConfig:
    """
    Load and validate environment variables.

    All variables are optional:
    - LOG_LEVEL: Override log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
    - ENVIRONMENT: Environment label attached to log records (default: local)
    - PROFSEARCH_CATALOG: Catalog snapshot file to search

    Returns:
        EnvironmentConfig object with validated values

    Raises:
        ConfigurationError: If a variable is set to an invalid value
    """
    errors = []

    log_level = os.getenv("LOG_LEVEL")
    environment = os.getenv("ENVIRONMENT")
    catalog_path_str = os.getenv("PROFSEARCH_CATALOG")

    if log_level:
        log_level = log_level.strip().upper()
        if log_level not in VALID_LOG_LEVELS:
            errors.append(
                f"Invalid LOG_LEVEL: '{log_level}'. Must be one of: {', '.join(VALID_LOG_LEVELS)}"
            )

    catalog_path = None
    if catalog_path_str and catalog_path_str.strip():
        catalog_path = Path(catalog_path_str.strip())
        if catalog_path.is_dir():
            errors.append(
                f"Invalid PROFSEARCH_CATALOG: '{catalog_path}' is a directory, expected a file"
            )

    if errors:
        raise ConfigurationError(
            "Environment variable validation failed",
            errors=errors,
            suggestions=[
                "Check the variables exported in your shell or .env file",
                "Unset variables you do not need; all of them are optional",
            ],
        )

    return EnvironmentConfig(
        log_level=log_level or None,
        environment=environment.strip() if environment else None,
        catalog_path=catalog_path,
    )
