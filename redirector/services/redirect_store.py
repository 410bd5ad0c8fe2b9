"""
Redirect Store

This module defines the key-value capability the redirect service reads from.

A lookup has exactly three outcomes, made explicit by LookupResult:
- FOUND: the path has a stored target (value is set)
- MISSING: the path has no stored target
- FAILED: the store could not answer (error is set)

Backends only implement ``get()``, which returns the value or None and may
raise. ``lookup()`` turns that into a LookupResult so callers never need a
try/except around store access.

The store is shared read-only across concurrent requests and inherits the
backend's consistency guarantees (writes by an external process may not be
visible immediately).
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum
from typing import Mapping, Optional

from sqlmodel import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import async_sessionmaker
from sqlmodel.ext.asyncio.session import AsyncSession

from redirector.core.exceptions import StoreError
from redirector.db.models import RedirectMapping


class LookupOutcome(Enum):
    """Possible outcomes of a store lookup."""
    FOUND = "found"
    MISSING = "missing"
    FAILED = "failed"


@dataclass(frozen=True)
class LookupResult:
    """Result of looking up one key in a RedirectStore."""
    outcome: LookupOutcome
    value: Optional[str] = None
    error: Optional[StoreError] = None

    @classmethod
    def found(cls, value: str) -> "LookupResult":
        return cls(LookupOutcome.FOUND, value=value)

    @classmethod
    def missing(cls) -> "LookupResult":
        return cls(LookupOutcome.MISSING)

    @classmethod
    def failed(cls, error: StoreError) -> "LookupResult":
        return cls(LookupOutcome.FAILED, error=error)


class RedirectStore(ABC):
    """
    Read-only key-value store mapping request paths to target URLs.

    To add a new backend:
    1. Subclass RedirectStore
    2. Implement get()
    3. Wire it up in redirector.api.dependencies.get_redirect_store()
    """

    @abstractmethod
    async def get(self, key: str) -> Optional[str]:
        """
        Fetch the stored value for a key.

        Args:
            key: Exact-match lookup key (request path)

        Returns:
            The stored value, or None if the key is absent

        Raises:
            Exception: Any backend-specific failure
        """
        pass

    async def lookup(self, key: str) -> LookupResult:
        """
        Look up a key and classify the outcome.

        No retries are attempted; a failing backend yields a FAILED result
        for this lookup only.

        Args:
            key: Exact-match lookup key (request path)

        Returns:
            LookupResult describing the outcome
        """
        try:
            value = await self.get(key)
        except StoreError as e:
            return LookupResult.failed(e)
        except Exception as e:
            return LookupResult.failed(StoreError(key, e))

        # Only an absent key is a miss; an empty string is a (bad) stored value
        if value is None:
            return LookupResult.missing()
        return LookupResult.found(value)


class InMemoryRedirectStore(RedirectStore):
    """
    Store backed by a static mapping.

    The mapping is copied on construction, so later changes to the source
    dict are not observed.
    """

    def __init__(self, mapping: Optional[Mapping[str, str]] = None):
        self._mapping = dict(mapping or {})

    async def get(self, key: str) -> Optional[str]:
        return self._mapping.get(key)


class SQLRedirectStore(RedirectStore):
    """
    Store backed by the ``http_redirects`` table.

    Each lookup opens a short-lived session from the given factory and runs a
    single primary-key SELECT.
    """

    def __init__(self, session_factory: async_sessionmaker[AsyncSession]):
        """
        Initialize the store with a session factory.

        Args:
            session_factory: Factory producing async database sessions
        """
        self.session_factory = session_factory

    async def get(self, key: str) -> Optional[str]:
        statement = select(RedirectMapping.target_url).where(RedirectMapping.path == key)
        try:
            async with self.session_factory() as session:
                result = await session.exec(statement)
                return result.one_or_none()
        except SQLAlchemyError as e:
            raise StoreError(key, e) from e
