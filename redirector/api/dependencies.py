"""
FastAPI Dependencies

The resolver receives its store handle and redirect status code through
these dependency functions rather than reading settings directly. Tests
replace them via ``app.dependency_overrides``.
"""

from functools import lru_cache

from fastapi import Depends

from redirector.core.setting import (
    RedirectStoreOptions,
    effective_redirect_status_code,
    settings,
)
from redirector.db.session import async_session_maker
from redirector.services.redirect_service import RedirectService
from redirector.services.redirect_store import (
    InMemoryRedirectStore,
    RedirectStore,
    SQLRedirectStore,
)


@lru_cache
def get_redirect_store() -> RedirectStore:
    """
    Get the configured redirect store.

    Built once per process; the store is read-only and shared by all requests.
    """
    if settings.REDIRECT_STORE is RedirectStoreOptions.memory:
        return InMemoryRedirectStore(settings.REDIRECTS)
    return SQLRedirectStore(async_session_maker)


def get_redirect_status_code() -> int:
    """Get the redirect status code, falling back to 302 when unset or 0."""
    return effective_redirect_status_code(settings.REDIRECT_STATUS_CODE)


def get_redirect_service(
    store: RedirectStore = Depends(get_redirect_store),
    redirect_status_code: int = Depends(get_redirect_status_code),
) -> RedirectService:
    return RedirectService(store, redirect_status_code)
