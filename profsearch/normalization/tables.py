"""Static abbreviation and correction tables.

Both tables are keyed by normalized text and map to the canonical,
accented display form. Lookups never fail: text with no entry is returned
exactly as it was given.
"""

from types import MappingProxyType
from typing import Dict, Mapping, Optional

from .text import normalize_text

COMMON_ABBREVIATIONS: Mapping[str, str] = MappingProxyType(
    {
        "ing": "ingeniería",
        "eco": "economía",
        "adm": "administración",
        "ucab": "universidad católica andrés bello",
        "unimet": "universidad metropolitana",
        "usb": "universidad simón bolívar",
        "ucv": "universidad central de venezuela",
        "uneg": "universidad de oriente",
        "ula": "universidad de los andes",
        "unefa": "universidad nacional experimental de la fuerza armada",
    }
)

COMMON_CORRECTIONS: Mapping[str, str] = MappingProxyType(
    {
        "ingenieria": "ingeniería",
        "economia": "economía",
        "administracion": "administración",
        "matematicas": "matemáticas",
        "fisica": "física",
        "quimica": "química",
        "electronica": "electrónica",
        "computacion": "computación",
        "programacion": "programación",
        "estadistica": "estadística",
    }
)


def build_table(
    base: Mapping[str, str], extra: Optional[Mapping[str, str]] = None
) -> Mapping[str, str]:
    """Merge extra entries over a base table.

    Extra keys are normalized before merging so lookups keep working on
    normalized text. The base table is left untouched.

    Args:
        base: Built-in table
        extra: Additional entries (e.g. from configuration); these win on conflict

    Returns:
        New read-only mapping
    """
    merged: Dict[str, str] = dict(base)
    for key, value in (extra or {}).items():
        normalized_key = normalize_text(key)
        if normalized_key:
            merged[normalized_key] = value
    return MappingProxyType(merged)


def _lookup(text: str, table: Mapping[str, str]) -> str:
    return table.get(normalize_text(text)) or text


def apply_common_corrections(
    text: str, corrections: Mapping[str, str] = COMMON_CORRECTIONS
) -> str:
    """Replace a known misspelling or unaccented form with its canonical spelling.

    Example:
        >>> apply_common_corrections("Ingenieria")
        'ingeniería'
        >>> apply_common_corrections("Derecho")
        'Derecho'
    """
    return _lookup(text, corrections)


def expand_abbreviations(
    text: str, abbreviations: Mapping[str, str] = COMMON_ABBREVIATIONS
) -> str:
    """Expand a known abbreviation to its full form.

    Only whole-input abbreviations are expanded; "ucab" expands but
    "profesor ucab" is returned unchanged.

    Example:
        >>> expand_abbreviations("UCAB")
        'universidad católica andrés bello'
    """
    return _lookup(text, abbreviations)
