"""Fixtures shared by every test suite in the monorepo."""

from __future__ import annotations

import pytest

from swc_shared.config import settings
from swc_shared.db import reset_engine


@pytest.fixture()
def database_url(tmp_path, monkeypatch) -> str:
    """Point the engine singleton at a fresh SQLite file for one test."""
    url = f"sqlite+aiosqlite:///{tmp_path / 'swc-test.db'}"
    monkeypatch.setattr(settings, "database_url", url)
    reset_engine()
    yield url
    reset_engine()
