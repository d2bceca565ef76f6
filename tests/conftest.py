"""Shared fixtures for Inventory Board tests."""

import pytest
import structlog

from inventory_board.config import get_settings
from inventory_board.core import view_model


@pytest.fixture(autouse=True)
def clean_settings(monkeypatch, tmp_path):
    """Isolate tests from a local .env file and cached settings."""
    monkeypatch.chdir(tmp_path)
    for name in ("INVENTORY_DEFAULT_LOW_STOCK_THRESHOLD", "INVENTORY_LOCATIONS", "LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)
    get_settings.cache_clear()
    monkeypatch.setattr(view_model, "_view_model", None)
    structlog.reset_defaults()
    yield
    structlog.reset_defaults()
    get_settings.cache_clear()

