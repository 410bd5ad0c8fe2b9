"""
SQLite Database Adapter

Engine configuration for serving redirect lookups from a SQLite file.

The redirect table is written by an external process and only read here,
so every lookup opens a fresh connection (NullPool) and sees the latest
committed rows without holding a connection between requests.
"""

from sqlalchemy.ext.asyncio import AsyncEngine, create_async_engine
from sqlalchemy.pool import NullPool

from redirector.db.interface import DatabaseAdapter


class SQLiteAdapter(DatabaseAdapter):
    """
    SQLite database adapter for the read-only redirect store.
    """

    def create_engine(self, database_url: str, **kwargs) -> AsyncEngine:
        """
        Create the SQLite async engine.

        - NullPool: one short-lived connection per lookup
        - check_same_thread=False: Required for async SQLite operations

        Args:
            database_url: SQLite connection string (sqlite+aiosqlite:///...)
            **kwargs: Extra engine options, e.g. echo=True for SQL debugging

        Returns:
            Configured AsyncEngine for SQLite
        """
        kwargs.setdefault("echo", False)

        return create_async_engine(
            database_url,
            poolclass=NullPool,
            connect_args={"check_same_thread": False},
            **kwargs
        )


def get_database_adapter() -> DatabaseAdapter:
    """
    Factory function to get the database adapter.

    Returns SQLiteAdapter by default. To switch to PostgreSQL, create a
    PostgreSQLAdapter class and update this function.
    """
    return SQLiteAdapter()
