"""Pytest configuration and fixtures."""

import os

import pytest

from signal_os.core.config import get_settings
from signal_os.db.storage import MemoryStorage, get_storage


@pytest.fixture(scope="session", autouse=True)
def setup_test_env():
    """Set up test environment variables."""
    os.environ["SIGNAL_OS_ENV"] = "test"
    os.environ.pop("TRANSMIT_ENDPOINT", None)


@pytest.fixture(autouse=True)
def isolated_settings(tmp_path, monkeypatch):
    """Point storage and exports at a temp dir and rebuild cached settings."""
    monkeypatch.setenv("STORAGE_DIR", str(tmp_path / "storage"))
    monkeypatch.setenv("EXPORT_DIR", str(tmp_path / "exports"))
    monkeypatch.delenv("TRANSMIT_ENDPOINT", raising=False)
    get_settings.cache_clear()
    get_storage.cache_clear()
    yield
    get_settings.cache_clear()
    get_storage.cache_clear()


@pytest.fixture
def storage():
    """Fresh in-memory storage slot."""
    return MemoryStorage()
