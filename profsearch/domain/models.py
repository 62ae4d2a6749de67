"""Core domain models for catalog records and universities.

This module defines the data structures handed to the matching layer:
- SearchableRecord: one teacher entry from the catalog snapshot
- University: display settings for one institution (abbreviation, visibility)
"""

import re
from typing import Any, Optional

from pydantic import BaseModel, Field, field_validator


class SearchableRecord(BaseModel):
    """A teacher entry with three searchable text fields.

    The document store owns these records; the matching layer only reads
    them. Keys beyond the searchable fields (ratings, tags, ...) are kept
    as-is so the caller gets back the same data it supplied.
    """

    id: str = Field(..., description="Opaque record identity from the document store")
    name: Optional[str] = Field(None, description="Teacher's full name")
    university: Optional[str] = Field(None, description="Institution name")
    department: Optional[str] = Field(None, description="Department or faculty")

    @field_validator("id", mode="before")
    @classmethod
    def coerce_id(cls, v: Any) -> str:
        """Accept numeric ids from JSON/YAML sources."""
        if v is None or (isinstance(v, str) and not v.strip()):
            raise ValueError("Record id cannot be empty")
        return str(v).strip()

    model_config = {
        "extra": "allow",
        "json_schema_extra": {
            "example": {
                "id": "t-001",
                "name": "Juan Pérez",
                "university": "Universidad Católica Andrés Bello",
                "department": "Ingeniería Informática",
            }
        },
    }


class University(BaseModel):
    """Display settings for one institution.

    The id used by the university dropdown is the lowercase abbreviation
    when one is configured, otherwise a slug of the name.
    """

    name: str = Field(..., min_length=1, description="Full institution name")
    abbreviation: Optional[str] = Field(None, description="Short name, e.g. UCAB")
    is_active: bool = Field(True, description="Whether the institution is offered in search")

    @field_validator("name")
    @classmethod
    def strip_name(cls, v: str) -> str:
        """Strip whitespace from the name."""
        stripped = v.strip()
        if not stripped:
            raise ValueError("Field cannot be empty or whitespace-only")
        return stripped

    @field_validator("abbreviation")
    @classmethod
    def strip_abbreviation(cls, v: Optional[str]) -> Optional[str]:
        """Treat blank abbreviations as absent."""
        if v is None:
            return None
        stripped = v.strip()
        return stripped if stripped else None

    @property
    def id(self) -> str:
        """Dropdown identifier for this university."""
        if self.abbreviation:
            return self.abbreviation.lower()
        return re.sub(r"\s+", "-", self.name.lower())
