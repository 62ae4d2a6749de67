"""Catalog snapshot loading.

This module provides:
- Catalog: Teacher records plus university settings for one search call
- load_catalog: Read a YAML/JSON snapshot into a Catalog
- CatalogError: Raised when a snapshot cannot be loaded
"""

from .exceptions import CatalogError
from .loader import load_catalog
from .models import Catalog

__all__ = ["Catalog", "CatalogError", "load_catalog"]
