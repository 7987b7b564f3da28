"""Pytest fixtures for server module testing."""

from collections.abc import Iterator

import pytest
from fastapi.testclient import TestClient

from server.main import app

RMC_VALID = "$GNRMC,211041.00,A,4024.98796,N,00340.22512,W,0.027,,010218,,,D*7B"
ZDA_VALID = "$GPZDA,201530.00,04,07,2002,00,00*60"


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("GPSLIB_QUEUE_MAX_SIZE", raising=False)
    monkeypatch.delenv("GPSLIB_WS_TIMEOUT_SECONDS", raising=False)


@pytest.fixture
def client() -> Iterator[TestClient]:
    with TestClient(app) as test_client:
        yield test_client
