"""
Module: conftest.py

Date: 2026-10-19

Global pytest configuration and fixtures for the artgrid test suite.
Includes CI-friendly setup for PyQt5 testing and common fixtures.
"""

import os
import sys

# Add project root to sys.path so 'artgrid' imports without installation
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), "..")))

# Headless Qt for GUI tests
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

import pytest

from tests.mocks import FakePageSource, make_records


def pytest_configure(config):
    """Configure pytest with custom settings."""
    config.addinivalue_line("markers", "gui: mark test as requiring GUI")
    config.addinivalue_line("markers", "local_only: mark test as local environment only")


def pytest_collection_modifyitems(session, config, items):
    """Skip local-only tests on CI."""
    _ = session
    _ = config

    is_ci = "CI" in os.environ or "GITHUB_ACTIONS" in os.environ
    if not is_ci:
        return

    skip_local = pytest.mark.skip(reason="Local-only tests skipped on CI")
    for item in items:
        if "local_only" in item.keywords:
            item.add_marker(skip_local)


@pytest.fixture(scope="session")
def ci_environment():
    """Fixture to detect CI environment."""
    return "CI" in os.environ or "GITHUB_ACTIONS" in os.environ


@pytest.fixture(autouse=True)
def isolated_data_dir(tmp_path, monkeypatch):
    """Point the user data directory at a temp dir so tests never touch ~/.local."""
    from artgrid.utils.paths import AppPaths

    monkeypatch.setenv("ARTGRID_DATA_DIR", str(tmp_path / "userdata"))
    AppPaths.reset()
    yield
    AppPaths.reset()


@pytest.fixture
def records_97():
    """97 artworks with ids 1..97."""
    return make_records(97)


@pytest.fixture
def source_97(records_97):
    """Page source over 97 records (10 pages of 10, last page 7)."""
    return FakePageSource(records_97)


@pytest.fixture
def sample_artwork_json():
    """One element of the artworks `data` array as the API returns it."""
    return {
        "id": 27992,
        "title": "A Sunday on La Grande Jatte — 1884",
        "place_of_origin": "France",
        "artist_display": "Georges Seurat\nFrench, 1859-1891",
        "inscriptions": None,
        "date_start": 1884,
        "date_end": 1886,
    }

