"""Typo-, accent- and abbreviation-tolerant search over a teacher catalog."""

__version__ = "0.1.0"
