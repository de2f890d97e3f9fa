# tests/conftest.py

from __future__ import annotations

import pytest

from src.config import Settings
from src.data.seed import demo_snapshot
from src.data.store import DataStore


@pytest.fixture()
def settings() -> Settings:
    """Settings built explicitly so tests never depend on the developer's .env."""
    return Settings(
        app_name="Infoco Test",
        log_level="DEBUG",
        log_dir=None,
        seed_demo_data=True,
        ai_api_key="test-key",
        ai_base_url="http://localhost:9/v1/",
        ai_model="test-model",
        ai_timeout_seconds=5.0,
        ai_max_retries=0,
    )


@pytest.fixture()
def store() -> DataStore:
    return DataStore(demo_snapshot())


@pytest.fixture()
def empty_store() -> DataStore:
    return DataStore()
