from collections.abc import Generator

import pytest
from fastapi.testclient import TestClient

from tdoc_api.core.config import get_settings
from tdoc_api.main import create_app


@pytest.fixture
def client(monkeypatch) -> Generator[TestClient, None, None]:
    monkeypatch.delenv("TDOC_API_PREFIX", raising=False)
    get_settings.cache_clear()
    with TestClient(create_app()) as test_client:
        yield test_client
    get_settings.cache_clear()
