"""
Shared fixtures.
"""

from __future__ import annotations

import pytest

from fakes import FakeStore


@pytest.fixture(autouse=True)
def _self_url(monkeypatch):
    monkeypatch.setenv("SELF_URL", "https://api.example.com")
    monkeypatch.delenv("RELATIONS_TOLERATE_STORAGE_ERRORS", raising=False)


@pytest.fixture
def store() -> FakeStore:
    return FakeStore(
        {
            "Team": [{"id": "t1", "name": "acme", "organization_id": "o1"}],
            "User": [
                {"id": "u1", "username": "bob", "hashed_password": "x", "accounts": [{"type": "github"}]},
                {"id": "u2", "username": "alice"},
            ],
            "Organization": [{"id": "o1", "name": "acme-org"}],
            "Report": [
                {"id": "r1", "name": "q3-results", "team_id": "t1", "user_id": "u1"},
                {"id": "r2", "name": "draft", "team_id": "t-missing", "user_id": "u2"},
            ],
            "Comment": [{"id": "c1", "text": "nice", "report_id": "r1", "user_id": "u2"}],
        }
    )
