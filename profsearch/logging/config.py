"""Logging configuration for the teacher search service."""

import json
import logging
import sys
from datetime import datetime, timezone
from typing import Any, Dict, Literal, Optional, TextIO

from .context import get_log_context

LogFormat = Literal["json", "key-value"]

SERVICE_NAME = "profsearch"
VALID_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")

# Attributes every LogRecord carries; anything else came from extra or context
RESERVED_ATTRS = frozenset({
    "name", "msg", "args", "created", "filename", "funcName", "levelname",
    "levelno", "lineno", "module", "msecs", "message", "pathname", "process",
    "processName", "relativeCreated", "thread", "threadName", "asctime",
    "exc_info", "exc_text", "stack_info", "taskName",
})


def _extra_fields(record: logging.LogRecord, skip: frozenset = frozenset()) -> Dict[str, Any]:
    """Collect the non-standard attributes of a record."""
    return {
        key: value
        for key, value in record.__dict__.items()
        if key not in RESERVED_ATTRS and key not in skip and not key.startswith("_")
    }


class ContextualFilter(logging.Filter):
    """Filter that enriches log records with static metadata and active context.

    Explicit extra fields on the log call win over context fields.
    """

    def __init__(self, service: str = SERVICE_NAME, environment: str = "local"):
        """Initialize contextual filter.

        Args:
            service: Service name (static field)
            environment: Environment label (production, staging, local)
        """
        super().__init__()
        self.service = service
        self.environment = environment

    def filter(self, record: logging.LogRecord) -> bool:
        """Enrich record with static metadata and active context."""
        record.service = self.service
        record.environment = self.environment

        for key, value in get_log_context().items():
            if not hasattr(record, key):
                setattr(record, key, value)

        return True


class JSONFormatter(logging.Formatter):
    """JSON formatter for structured logging.

    Produces single-line JSON objects with stable field names.
    """

    def format(self, record: logging.LogRecord) -> str:
        """Format log record as JSON."""
        log_obj: Dict[str, Any] = {
            "timestamp": self._format_timestamp(record.created),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }

        for key, value in _extra_fields(record).items():
            if isinstance(value, datetime):
                log_obj[key] = value.isoformat()
            elif isinstance(value, (str, int, float, bool, list, dict, type(None))):
                log_obj[key] = value
            else:
                log_obj[key] = str(value)

        if record.exc_info:
            log_obj["exc_info"] = self.formatException(record.exc_info)

        return json.dumps(log_obj, ensure_ascii=False, default=str)

    @staticmethod
    def _format_timestamp(created: float) -> str:
        """Format a unix timestamp as ISO-8601 UTC with millisecond precision and 'Z'."""
        dt = datetime.fromtimestamp(created, tz=timezone.utc)
        return dt.strftime("%Y-%m-%dT%H:%M:%S.%f")[:-3] + "Z"


class KeyValueFormatter(logging.Formatter):
    """Key-value formatter for human-readable logs.

    Produces logs in format:
    timestamp [level] logger: message key1=value1 key2=value2
    """

    SKIP_ATTRS = frozenset({"service", "environment"})

    def format(self, record: logging.LogRecord) -> str:
        """Format log record as key-value pairs."""
        base = super().format(record)

        extras = [
            f"{key}={self._format_value(value)}"
            for key, value in sorted(_extra_fields(record, self.SKIP_ATTRS).items())
        ]

        if extras:
            return f"{base} {' '.join(extras)}"
        return base

    @staticmethod
    def _format_value(value: Any) -> str:
        if isinstance(value, str):
            # Quote strings with spaces or special chars
            if not value or " " in value or "=" in value or "," in value:
                return f'"{value}"'
            return value
        if isinstance(value, datetime):
            return value.isoformat()
        if isinstance(value, bool):
            return str(value).lower()
        if value is None:
            return "null"
        if isinstance(value, (dict, list, tuple)):
            # Compact JSON keeps one token per key
            return json.dumps(value, separators=(",", ":"), default=str, ensure_ascii=False)
        return str(value)


def configure_logging(
    level: str = "INFO",
    format_type: LogFormat = "key-value",
    environment: str = "local",
    stream: Optional[TextIO] = None,
) -> None:
    """
    Configure the root logger with the specified level and format.

    Logs go to stderr by default so command output on stdout stays clean.

    Args:
        level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        format_type: Output format - 'json' for JSON logs or 'key-value' for human-readable
        environment: Environment label (production, staging, local)
        stream: Output stream (defaults to sys.stderr)

    Raises:
        ValueError: If level or format_type is invalid
    """
    if not isinstance(level, str) or level.upper() not in VALID_LEVELS:
        raise ValueError(f"Invalid log level: {level}")
    numeric_level = getattr(logging, level.upper())

    if format_type not in ("json", "key-value"):
        raise ValueError(f"Invalid log format: {format_type}. Must be 'json' or 'key-value'")

    handler = logging.StreamHandler(stream or sys.stderr)

    if format_type == "json":
        formatter = JSONFormatter()
    else:
        formatter = KeyValueFormatter(
            "%(asctime)s [%(levelname)s] %(name)s: %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )

    handler.setFormatter(formatter)
    handler.addFilter(ContextualFilter(service=SERVICE_NAME, environment=environment))

    root_logger = logging.getLogger()
    root_logger.setLevel(numeric_level)

    # Remove existing handlers to avoid duplicates
    root_logger.handlers.clear()
    root_logger.addHandler(handler)

    logging.getLogger(__name__).debug(
        "Logging configured",
        extra={
            "event": "logging.configured",
            "component": "logging",
            "log_level": level.upper(),
            "log_format": format_type,
        },
    )
