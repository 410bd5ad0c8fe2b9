"""
Database Models for the Redirect Resolver

This module defines the SQLModel schema backing the sql redirect store:
- RedirectMapping: exact-match path -> target URL association

Design Decisions:
- The path itself is the primary key (lookups are always by exact path)
- target_url is stored verbatim; it is validated at read time, not write time
- The table is populated by an external process, this service only reads it
"""

from sqlmodel import SQLModel, Field, Column
from sqlalchemy import Text


class RedirectMapping(SQLModel, table=True):
    """
    Table storing redirect mappings.

    Fields:
    - path: Request path used as lookup key (e.g. "/old-page")
    - target_url: Absolute URL the path redirects to
    """
    __tablename__ = "http_redirects"

    path: str = Field(sa_column=Column(Text, primary_key=True))
    target_url: str = Field(sa_column=Column(Text, nullable=False))
