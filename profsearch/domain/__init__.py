"""Domain models for the teacher search catalog."""

from .models import SearchableRecord, University

__all__ = ["SearchableRecord", "University"]
