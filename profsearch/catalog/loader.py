"""Catalog snapshot loader.

Reads a YAML or JSON export of the teacher collection. JSON is valid YAML,
so both go through yaml.safe_load.
"""

from pathlib import Path

import yaml
from pydantic import ValidationError

from profsearch.config.loader import format_validation_errors
from profsearch.logging import get_logger

from .exceptions import CatalogError
from .models import Catalog

logger = get_logger(__name__, component="catalog")


def load_catalog(catalog_path: Path) -> Catalog:
    """
    Load and validate a catalog snapshot.

    The file holds either a mapping with ``teachers`` (and optionally
    ``universities``) or a bare list of teacher records.

    Args:
        catalog_path: Path to the YAML/JSON snapshot

    Returns:
        Validated Catalog

    Raises:
        CatalogError: If the file is missing, unparsable, empty or invalid
    """
    try:
        with open(catalog_path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except FileNotFoundError as e:
        raise CatalogError(
            f"Catalog file not found: {catalog_path}",
            suggestions=[
                "Pass --catalog with the path of an exported snapshot",
                "Set PROFSEARCH_CATALOG or catalog_path in profsearch.yaml",
            ],
        ) from e
    except yaml.YAMLError as e:
        raise CatalogError(
            f"Failed to parse catalog file: {e}",
            suggestions=["Check the YAML/JSON syntax of the snapshot"],
        ) from e
    except OSError as e:
        raise CatalogError(
            f"Failed to read catalog file: {e}",
            suggestions=[f"Ensure {catalog_path} is a readable file"],
        ) from e

    if not data:
        raise CatalogError(
            f"Catalog file is empty: {catalog_path}",
            suggestions=["Export the teacher collection before searching"],
        )

    if isinstance(data, list):
        data = {"teachers": data}

    if not isinstance(data, dict):
        raise CatalogError(
            "Catalog must be a list of teachers or a mapping with a 'teachers' key",
            suggestions=["See README.md for the snapshot format"],
        )

    try:
        catalog = Catalog.model_validate(data)
    except ValidationError as e:
        raise CatalogError(
            "Catalog validation failed",
            errors=format_validation_errors(e),
            suggestions=["Every teacher needs an id; name, university and department are optional"],
        ) from e

    logger.info(
        "Catalog loaded",
        extra={
            "event": "catalog.loaded",
            "catalog_path": str(catalog_path),
            "teacher_count": len(catalog.teachers),
            "university_setting_count": len(catalog.universities),
        },
    )

    return catalog
