"""Shared fixtures."""

from __future__ import annotations

import pytest

from ghpull.config import Settings


@pytest.fixture
def settings() -> Settings:
    return Settings(
        token="ghp_secret_token",
        project_id="7",
        organization_name="acme",
        assignee="alice",
        status="In Progress",
        labels="bug,urgent",
    )


@pytest.fixture
def no_config(tmp_path, monkeypatch):
    """An environment with no config file anywhere on the search path."""
    monkeypatch.setenv("HOME", str(tmp_path / "home"))
    return {"GHPULL_WORKSPACE": str(tmp_path)}
