"""
Database Abstraction Interface

This module defines the database abstraction layer that allows switching between
different database backends (SQLite, PostgreSQL, etc.) for the sql redirect
store without changing the rest of the codebase.
"""

from abc import ABC, abstractmethod
from sqlalchemy.ext.asyncio import AsyncEngine


class DatabaseAdapter(ABC):
    """
    Abstract base class for database adapters.

    An adapter owns every backend-specific engine option (pooling, driver
    connect arguments). The redirect store only ever reads through the engine
    it returns.

    To add a new database backend:
    1. Create a new class inheriting from DatabaseAdapter
    2. Implement create_engine()
    3. Update the factory function to return the new adapter
    """

    @abstractmethod
    def create_engine(self, database_url: str, **kwargs) -> AsyncEngine:
        """
        Create and configure the async database engine.

        Args:
            database_url: Connection string for the database
            **kwargs: Additional engine configuration options

        Returns:
            Configured AsyncEngine instance
        """
        pass
