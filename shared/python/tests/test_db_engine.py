"""Tests for the engine and session-factory singletons."""

from __future__ import annotations

import pytest

from swc_shared import db


def test_sessionmaker_follows_engine(database_url):
    assert db.get_sessionmaker() is db.get_sessionmaker()
    assert db.get_sessionmaker().kw["bind"] is db.get_engine()


def test_sessionmaker_missing_raises(database_url, monkeypatch):
    db.reset_engine()
    monkeypatch.setattr(db, "get_engine", lambda: None)
    with pytest.raises(RuntimeError):
        db.get_sessionmaker()


def test_reset_forgets_engine(database_url):
    first = db.get_engine()
    db.reset_engine()
    assert db.get_engine() is not first
