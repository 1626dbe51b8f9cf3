"""Shared fixtures: application client and a frozen clock."""

from __future__ import annotations

import pytest
from fastapi.testclient import TestClient

from springmon.main import create_app

FROZEN_MILLIS = 1_700_000_000_123


@pytest.fixture
def client():
    with TestClient(create_app()) as test_client:
        yield test_client


@pytest.fixture
def frozen_clock(monkeypatch):
    """Pin ``current_millis`` so timestamp fields are predictable."""
    monkeypatch.setattr("springmon.core.clock.current_millis", lambda: FROZEN_MILLIS)
    return FROZEN_MILLIS
