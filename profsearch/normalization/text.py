"""Text normalization for accent- and punctuation-insensitive matching.

Every comparison in the matching layer happens between normalized strings:
- Lowercase
- Accents stripped (canonical decomposition, combining marks removed)
- Anything outside [a-z0-9 ] removed
- Whitespace runs collapsed to a single space, ends trimmed
"""

import re
import unicodedata
from typing import Optional

_NON_ALNUM_PATTERN = re.compile(r"[^a-z0-9\s]")
_WHITESPACE_PATTERN = re.compile(r"\s+")


def strip_accents(text: str) -> str:
    """Remove diacritical marks, keeping the base letters.

    Example:
        >>> strip_accents("Economía")
        'Economia'
    """
    decomposed = unicodedata.normalize("NFD", text)
    return "".join(ch for ch in decomposed if not unicodedata.combining(ch))


def normalize_text(text: Optional[str]) -> str:
    """Normalize text for comparison.

    Total over any input: None and the empty string both normalize to "".
    The result is idempotent, so normalizing twice yields the same value.

    Args:
        text: Raw text (query, option, or record field)

    Returns:
        Normalized text

    Example:
        >>> normalize_text("  Ingeniería   Civil! ")
        'ingenieria civil'
    """
    if not text:
        return ""

    # Convert to lowercase
    normalized = text.lower()

    # Remove accents
    normalized = strip_accents(normalized)

    # Remove special characters (hyphens and apostrophes included)
    normalized = _NON_ALNUM_PATTERN.sub("", normalized)

    # Collapse whitespace and trim
    return _WHITESPACE_PATTERN.sub(" ", normalized).strip()
