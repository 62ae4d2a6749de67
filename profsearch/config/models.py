"""Configuration schema models using Pydantic."""

from enum import Enum
from pathlib import Path
from typing import Dict, Mapping, Optional

from pydantic import BaseModel, Field, field_validator

from profsearch.normalization import (
    COMMON_ABBREVIATIONS,
    COMMON_CORRECTIONS,
    build_table,
    normalize_text,
)


class LogLevel(str, Enum):
    """Logging levels."""

    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"


class LogFormat(str, Enum):
    """Log output formats."""

    JSON = "json"
    KEY_VALUE = "key-value"


class MatchingConfig(BaseModel):
    """Thresholds and table extensions for the matching layer."""

    max_distance: int = Field(
        2, ge=0, le=5, description="Inclusive edit-distance threshold for the fuzzy tier"
    )
    max_suggestions: int = Field(
        4, ge=1, le=50, description="Maximum number of quick search results"
    )
    abbreviations: Dict[str, str] = Field(
        default_factory=dict,
        description="Extra abbreviation entries merged over the built-in table",
    )
    corrections: Dict[str, str] = Field(
        default_factory=dict,
        description="Extra correction entries merged over the built-in table",
    )

    @field_validator("abbreviations", "corrections")
    @classmethod
    def validate_table_entries(cls, v: Dict[str, str]) -> Dict[str, str]:
        """Reject keys that normalize to nothing and blank expansions."""
        for key, value in v.items():
            if not normalize_text(key):
                raise ValueError(f"Table key '{key}' is empty after normalization")
            if not value or not value.strip():
                raise ValueError(f"Table entry '{key}' has an empty expansion")
        return {key: value.strip() for key, value in v.items()}

    def abbreviation_table(self) -> Mapping[str, str]:
        """Built-in abbreviations with configured extras merged in."""
        return build_table(COMMON_ABBREVIATIONS, self.abbreviations)

    def correction_table(self) -> Mapping[str, str]:
        """Built-in corrections with configured extras merged in."""
        return build_table(COMMON_CORRECTIONS, self.corrections)


class LoggingConfig(BaseModel):
    """Logging configuration."""

    level: LogLevel = Field(LogLevel.INFO, description="Log level")
    format: LogFormat = Field(
        LogFormat.KEY_VALUE, description="Log output format (json or key-value)"
    )

    model_config = {"use_enum_values": True}


class AppConfig(BaseModel):
    """Root configuration object for the teacher search service."""

    matching: MatchingConfig = Field(
        default_factory=MatchingConfig, description="Matching thresholds and tables"
    )
    logging: LoggingConfig = Field(
        default_factory=LoggingConfig, description="Logging configuration"
    )
    catalog_path: Optional[Path] = Field(None, description="Default catalog snapshot file")

    @field_validator("catalog_path", mode="before")
    @classmethod
    def blank_catalog_path(cls, v):
        """Treat an empty catalog_path as unset."""
        if isinstance(v, str) and not v.strip():
            return None
        return v
