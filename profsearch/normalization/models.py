"""Data models for the normalization layer.

This module defines the text variants of a catalog record that the
matching engine compares against a normalized query.
"""

from dataclasses import dataclass
from typing import Tuple

from profsearch.domain.models import SearchableRecord

from .text import normalize_text


@dataclass(frozen=True)
class MatchableRecord:
    """Normalized field variants of one catalog record.

    The record itself is carried by reference so callers get back the exact
    object they supplied. Missing fields normalize to the empty string.

    Attributes:
        record: Original record (identity preserved)
        name_normalized: Normalized teacher name
        university_normalized: Normalized institution name
        department_normalized: Normalized department name
    """

    record: SearchableRecord
    name_normalized: str
    university_normalized: str
    department_normalized: str

    @classmethod
    def from_record(cls, record: SearchableRecord) -> "MatchableRecord":
        """Create a MatchableRecord by normalizing the three searchable fields.

        Args:
            record: Catalog record

        Returns:
            MatchableRecord with normalized variants
        """
        return cls(
            record=record,
            name_normalized=normalize_text(record.name),
            university_normalized=normalize_text(record.university),
            department_normalized=normalize_text(record.department),
        )

    def fields(self) -> Tuple[str, str, str]:
        """Normalized fields in matching order: name, university, department."""
        return (
            self.name_normalized,
            self.university_normalized,
            self.department_normalized,
        )
