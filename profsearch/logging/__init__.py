"""Structured logging helpers for the teacher search service."""

import logging
from typing import Optional, Union


class ComponentLoggerAdapter(logging.LoggerAdapter):
    """LoggerAdapter that merges its component field with per-call extra fields."""

    def process(self, msg, kwargs):
        """Merge adapter extra with call extra; call extra wins."""
        kwargs["extra"] = {**self.extra, **kwargs.get("extra", {})}
        return msg, kwargs


def get_logger(
    name: str, component: Optional[str] = None
) -> Union[logging.Logger, ComponentLoggerAdapter]:
    """Get a logger with an optional default component field.

    Args:
        name: Logger name (typically __name__)
        component: Optional component identifier to inject into all logs

    Returns:
        Logger or ComponentLoggerAdapter instance

    Example:
        >>> logger = get_logger(__name__, component="matching")
        >>> logger.debug("Suggestions resolved", extra={"event": "matching.suggestions.resolved"})
    """
    logger = logging.getLogger(name)

    if component:
        return ComponentLoggerAdapter(logger, {"component": component})

    return logger
