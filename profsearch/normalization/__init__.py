"""Text normalization layer for accent- and typo-tolerant search.

This module provides:
- normalize_text: Canonical lowercase, accent-free, punctuation-free form
- COMMON_ABBREVIATIONS / COMMON_CORRECTIONS: Static lookup tables
- expand_abbreviations / apply_common_corrections: Lookup-or-passthrough helpers
- MatchableRecord: Normalized field variants of a catalog record
"""

from .models import MatchableRecord
from .tables import (
    COMMON_ABBREVIATIONS,
    COMMON_CORRECTIONS,
    apply_common_corrections,
    build_table,
    expand_abbreviations,
)
from .text import normalize_text, strip_accents

__all__ = [
    "normalize_text",
    "strip_accents",
    "COMMON_ABBREVIATIONS",
    "COMMON_CORRECTIONS",
    "apply_common_corrections",
    "expand_abbreviations",
    "build_table",
    "MatchableRecord",
]
