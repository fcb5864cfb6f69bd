"""
Pytest Configuration and Shared Fixtures

Provides common test fixtures and configuration for the entire test suite.
"""

import tempfile
from pathlib import Path
from typing import Any

import pytest

from mailtxn.core import config as config_module
from tests.fixtures.alert_samples import sample_inbox


@pytest.fixture
def temp_dir():
    """Create a temporary directory for test files."""
    with tempfile.TemporaryDirectory() as temp_path:
        yield Path(temp_path)


@pytest.fixture
def inbox() -> list[dict[str, Any]]:
    """Mixed inbox of provider-shaped messages."""
    return sample_inbox()


@pytest.fixture(autouse=True)
def setup_test_environment(monkeypatch, tmp_path):
    """Set up test environment variables and drop any cached configuration."""
    monkeypatch.setenv("MAILTXN_ENV", "test")
    monkeypatch.setenv("MAILTXN_DATA_DIR", str(tmp_path / "mailtxn_data"))
    monkeypatch.setenv("LOG_LEVEL", "INFO")

    # Keep real credentials from a developer's .env out of the tests
    for name in [
        "GMAIL_ACCESS_TOKEN",
        "GMAIL_REFRESH_TOKEN",
        "GOOGLE_CLIENT_ID",
        "GOOGLE_CLIENT_SECRET",
        "MAILTXN_QUERY_FROM",
        "MAILTXN_QUERY_SUBJECTS",
        "MAILTXN_QUERY_AFTER",
        "MAILTXN_QUERY_BEFORE",
        "MAILTXN_QUERY_MAX_RESULTS",
    ]:
        monkeypatch.delenv(name, raising=False)

    monkeypatch.setattr(config_module, "_config", None)


# Test markers for categorizing tests
def pytest_configure(config):
    """Configure custom pytest markers."""
    config.addinivalue_line("markers", "unit: Unit tests for individual components")
    config.addinivalue_line("markers", "integration: Integration tests for complete workflows")
    config.addinivalue_line("markers", "extraction: Tests for the transaction extraction pipeline")
    config.addinivalue_line("markers", "gmail: Tests for the Gmail query builder and client")
