"""Catalog snapshot exceptions."""

from profsearch.config.exceptions import ConfigurationError


class CatalogError(ConfigurationError):
    """Raised when a catalog snapshot file cannot be loaded.

    Examples:
    - File missing or unreadable
    - Invalid YAML/JSON syntax
    - Record without an id, or a non-mapping record
    """
