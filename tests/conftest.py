"""Shared fixtures for folio tests."""

import shutil
from datetime import date
from pathlib import Path

import pytest

from folio.contexts.cv import load_cv
from folio.utils.config import load_site_config

FIXTURES_PATH = Path(__file__).parent / "fixtures"


@pytest.fixture
def cv_path() -> Path:
    return FIXTURES_PATH / "cv.json"


@pytest.fixture
def cv(cv_path):
    return load_cv(cv_path)


@pytest.fixture
def site_config(tmp_path):
    """Built-in defaults (no YAML file)."""
    return load_site_config(tmp_path / "missing.yaml")


@pytest.fixture
def blog_dir(tmp_path) -> Path:
    """Writable copy of the fixture blog posts."""
    target = tmp_path / "blog"
    shutil.copytree(FIXTURES_PATH / "blog", target)
    return target


@pytest.fixture
def reference_date() -> date:
    return date(2024, 6, 15)
