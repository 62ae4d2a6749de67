"""Shared fixtures for the test suite."""

import logging
from pathlib import Path

import pytest

from profsearch.domain.models import SearchableRecord
from profsearch.logging.context import clear_log_context

FIXTURES_DIR = Path(__file__).parent / "fixtures"


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Remove environment variables that change configuration loading."""
    for name in ("LOG_LEVEL", "ENVIRONMENT", "PROFSEARCH_CATALOG"):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture(autouse=True)
def restore_root_logger():
    """Undo configure_logging() side effects after each test."""
    root_logger = logging.getLogger()
    handlers = list(root_logger.handlers)
    level = root_logger.level
    clear_log_context()
    yield
    root_logger.handlers[:] = handlers
    root_logger.setLevel(level)
    clear_log_context()


@pytest.fixture
def fixtures_dir():
    """Directory holding YAML/JSON fixtures."""
    return FIXTURES_DIR


@pytest.fixture
def catalog_path():
    """Path of the sample catalog snapshot."""
    return FIXTURES_DIR / "catalog.yaml"


@pytest.fixture
def teachers():
    """Catalog records covering the three searchable fields."""
    return [
        SearchableRecord(
            id="t1",
            name="Juan Pérez",
            university="Universidad Católica Andrés Bello",
            department="Ingeniería Informática",
        ),
        SearchableRecord(
            id="t2",
            name="María González",
            university="Universidad Metropolitana",
            department="Economía",
        ),
        SearchableRecord(
            id="t3",
            name="José García",
            university="Universidad Central de Venezuela",
            department="Ingeniería Civil",
        ),
        SearchableRecord(
            id="t4",
            name="Ana Rodríguez",
            university="Universidad Católica Andrés Bello",
            department="Administración",
        ),
    ]
