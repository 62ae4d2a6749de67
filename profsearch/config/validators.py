"""Additional validation utilities for configuration."""

import warnings
from typing import Any, Dict, List

from profsearch.normalization import normalize_text


def check_for_warnings(config_dict: Dict[str, Any]) -> List[str]:
    """
    Check configuration for potential issues and return warnings.

    Args:
        config_dict: Raw configuration dictionary

    Returns:
        List of warning messages
    """
    warning_messages = []

    matching = config_dict.get("matching", {})
    if not isinstance(matching, dict):
        return warning_messages

    # Large thresholds make the fuzzy tier match almost any short field
    max_distance = matching.get("max_distance", 2)
    if isinstance(max_distance, int) and max_distance > 3:
        warning_messages.append(
            f"Large max_distance ({max_distance}) may return many unrelated fuzzy matches"
        )

    # Table keys are looked up in normalized form
    for table_name in ("abbreviations", "corrections"):
        table = matching.get(table_name, {})
        if not isinstance(table, dict):
            continue
        for key in table:
            if not isinstance(key, str):
                continue
            normalized = normalize_text(key)
            if normalized and normalized != key:
                warning_messages.append(
                    f"{table_name} key '{key}' will be stored as '{normalized}'"
                )

    return warning_messages


def emit_warnings(warning_messages: List[str]) -> None:
    """
    Emit warning messages using Python's warnings module.

    Args:
        warning_messages: List of warning messages to emit
    """
    for message in warning_messages:
        warnings.warn(message, UserWarning, stacklevel=2)
