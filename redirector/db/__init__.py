"""
Database module with abstraction layer.

This module provides:
- DatabaseAdapter interface: Abstract base class for database implementations
- SQLiteAdapter: SQLite-specific implementation (default)
- Session management: engine and session factory for the sql redirect store

To add a new database backend:
1. Create a new adapter class inheriting from DatabaseAdapter
2. Implement all abstract methods
3. Update get_database_adapter() in sqlite_adapter.py to return the new adapter
"""

from redirector.db.interface import DatabaseAdapter
from redirector.db.session import async_session_maker, dispose_engine, engine

__all__ = [
    "DatabaseAdapter",
    "async_session_maker",
    "dispose_engine",
    "engine",
]
