"""
Shared fixtures for the redirect resolver tests.

HTTP-level tests never touch a real database: the store and the redirect
status code are swapped in through FastAPI dependency overrides.
"""

from typing import Optional

import pytest
from fastapi.testclient import TestClient

from redirector.api.dependencies import get_redirect_status_code, get_redirect_store
from redirector.main import app
from redirector.services.redirect_store import InMemoryRedirectStore, RedirectStore
from tests.fakes import SAMPLE_REDIRECTS


@pytest.fixture
def sample_store() -> InMemoryRedirectStore:
    return InMemoryRedirectStore(SAMPLE_REDIRECTS)


@pytest.fixture
def make_client():
    """
    Build a TestClient wired to the given store.

    redirect_status_code=None keeps the real settings-based dependency.
    """
    def _make(store: RedirectStore, redirect_status_code: Optional[int] = None) -> TestClient:
        app.dependency_overrides[get_redirect_store] = lambda: store
        if redirect_status_code is not None:
            app.dependency_overrides[get_redirect_status_code] = lambda: redirect_status_code
        return TestClient(app, follow_redirects=False)

    yield _make
    app.dependency_overrides.clear()


@pytest.fixture
def client(make_client, sample_store) -> TestClient:
    return make_client(sample_store)
