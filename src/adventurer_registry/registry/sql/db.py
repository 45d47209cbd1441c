"""
SQLite bootstrap and connection helpers
=======================================

- Autocommit connection; writers open their own ``BEGIN IMMEDIATE`` blocks.
- WAL + busy timeout for file-backed databases.
"""

from __future__ import annotations
from adventurer_registry.config import Config
import logging
import pathlib
import sqlite3
from typing import Optional

logger = logging.getLogger(__name__)

MEMORY_PATH = ":memory:"


def db_path() -> str:
    return Config.storage.DB_PATH


def connect(path: Optional[str] = None) -> sqlite3.Connection:
    target = path or db_path()
    if target != MEMORY_PATH:
        pathlib.Path(target).parent.mkdir(parents=True, exist_ok=True)

    conn = sqlite3.connect(
        target,
        isolation_level=None,
        check_same_thread=False,
    )

    if target != MEMORY_PATH:
        conn.execute("PRAGMA journal_mode=WAL;")
        conn.execute("PRAGMA synchronous=NORMAL;")
    # Reduce SQLITE_BUSY errors under contention
    conn.execute("PRAGMA busy_timeout=3000;")    # 3s

    # dict-like rows
    conn.row_factory = sqlite3.Row

    logger.info("Opened character database at %s", target)
    return conn


def migrate(conn: sqlite3.Connection) -> None:
    """
    Execute schema.sql (idempotent). Every statement uses IF NOT EXISTS.
    """
    schema_file = pathlib.Path(__file__).with_name("schema.sql")
    sql = schema_file.read_text(encoding="utf-8")
    with conn:
        conn.executescript(sql)
