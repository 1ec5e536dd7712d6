# tests/conftest.py
from datetime import datetime, timezone

import pytest
from fastapi.testclient import TestClient

TEST_TOKEN = "test-token"


@pytest.fixture()
def fixed_now():
    # 2025-10-20 15:30:00 UTC
    return datetime(2025, 10, 20, 15, 30, 0, tzinfo=timezone.utc)


@pytest.fixture()
def board_store():
    from board.store import Store

    return Store()


@pytest.fixture()
def auth_headers():
    return {"Authorization": f"Bearer {TEST_TOKEN}"}


@pytest.fixture()
def anon_client(monkeypatch, fixed_now, board_store):
    import api

    # Token esperado e relógio congelado
    monkeypatch.setattr(api, "API_TOKEN", TEST_TOKEN, raising=True)
    monkeypatch.setattr(api, "utc_now", lambda: fixed_now, raising=True)

    # Store isolado por teste
    api.app.dependency_overrides[api.get_store] = lambda: board_store
    client = TestClient(api.app)

    yield client

    api.app.dependency_overrides = {}


@pytest.fixture()
def app_client(anon_client, auth_headers):
    anon_client.headers.update(auth_headers)
    return anon_client
