"""
Public façade for character storage
===================================

Open the persistent registry with::

    from adventurer_registry.registry import open_registry
    registry = open_registry()
"""

from __future__ import annotations
from typing import Optional
import asyncio

from .sql import db as _db
from .sql.repositories import CharactersRepo
from .memory import InMemoryRegistry, ReadWriteLock

__all__ = [
    "open_registry",
    "CharactersRepo",
    "InMemoryRegistry",
    "ReadWriteLock",
]


def open_registry(path: Optional[str] = None) -> CharactersRepo:
    """
    Connect to the character database, apply the schema and return a repository.

    :param path: SQLite file path or ``":memory:"``; defaults to the configured path.
    :returns: Repository bound to a fresh connection.
    """
    conn = _db.connect(path)
    _db.migrate(conn)
    return CharactersRepo(conn, asyncio.Lock())
