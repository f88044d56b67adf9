"""Shared pytest fixtures for Reclaim tests."""

from __future__ import annotations

from collections.abc import Generator

import pytest

from reclaim.auth import clear_config_cache


@pytest.fixture(autouse=True)
def _isolated_settings(monkeypatch: pytest.MonkeyPatch) -> Generator[None]:
    """Drop cached settings and clients so each test sees its own environment."""
    for name in ("API__URL", "API__TIMEOUT_SECONDS", "GOOGLE__CLIENT_ID", "DEV__AUTH_MOCK"):
        monkeypatch.delenv(name, raising=False)
    clear_config_cache()
    yield
    clear_config_cache()
