"""Catalog snapshot model.

A Catalog is the in-memory copy of the teacher collection (and optional
university settings) that a single search call works against.
"""

from typing import Dict, List

from pydantic import BaseModel, Field

from profsearch.domain.models import SearchableRecord, University
from profsearch.normalization import normalize_text


class Catalog(BaseModel):
    """Teacher records plus university display settings."""

    teachers: List[SearchableRecord] = Field(
        default_factory=list, description="Searchable teacher records"
    )
    universities: List[University] = Field(
        default_factory=list, description="Per-university settings (abbreviation, visibility)"
    )

    def university_options(self) -> List[University]:
        """Build the university dropdown entries.

        Universities are collected from the teacher records and overlaid
        with the configured settings, both keyed by normalized name so
        accent and case variants collapse into one entry. The first
        spelling seen in the records is the one displayed. Inactive
        entries are dropped and the rest sorted by normalized name.

        Returns:
            Active universities sorted by name
        """
        settings: Dict[str, University] = {}
        for university in self.universities:
            settings.setdefault(normalize_text(university.name), university)

        options: Dict[str, University] = {}
        for record in self.teachers:
            name = (record.university or "").strip()
            key = normalize_text(name)
            if not key or key in options:
                continue
            setting = settings.get(key)
            if setting is None:
                options[key] = University(name=name)
            else:
                options[key] = University(
                    name=name,
                    abbreviation=setting.abbreviation,
                    is_active=setting.is_active,
                )

        active = [university for university in options.values() if university.is_active]
        return sorted(active, key=lambda u: (normalize_text(u.name), u.name))

    def university_names(self) -> List[str]:
        """Names of the active universities, in dropdown order."""
        return [university.name for university in self.university_options()]

    def get_record(self, record_id: str) -> SearchableRecord:
        """Look up a teacher record by id.

        Raises:
            KeyError: If no record has this id
        """
        for record in self.teachers:
            if record.id == record_id:
                return record
        raise KeyError(record_id)
