"""Shared fixtures for unit tests."""

from __future__ import annotations

import os
import sys

import pytest

sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

from idpairs import settings as settings_module  # noqa: E402


@pytest.fixture(autouse=True)
def fresh_settings(monkeypatch):
    """Clear the cached Settings and any IDPAIRS_* env vars around every test."""
    for key in list(os.environ):
        if key.startswith("IDPAIRS_"):
            monkeypatch.delenv(key)
    settings_module.reset_settings()
    yield
    settings_module.reset_settings()
