"""
Database Session Management

This module creates the async engine and session factory used by the sql
redirect store. Engine creation is delegated to the database adapter so the
backend can be switched without touching the store.

The engine connects lazily: nothing touches the database until the first
lookup, so importing this module is cheap even when the memory store is used.
"""

from sqlalchemy.ext.asyncio import async_sessionmaker
from sqlmodel.ext.asyncio.session import AsyncSession as SQLModelAsyncSession

from redirector.core.setting import settings
from redirector.db.sqlite_adapter import get_database_adapter

db_adapter = get_database_adapter()

engine = db_adapter.create_engine(
    settings.DATABASE_URL
)

# Read-only sessions: no autoflush, nothing to expire
async_session_maker = async_sessionmaker(
    engine,
    class_=SQLModelAsyncSession,
    expire_on_commit=False,
    autoflush=False,
)


async def dispose_engine() -> None:
    """Close all pooled connections (called on application shutdown)."""
    await engine.dispose()
