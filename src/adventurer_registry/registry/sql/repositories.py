"""
Character repository (SQL-only)
===============================
- Async CRUD over the ``characters`` table.
- Writes run inside ``BEGIN IMMEDIATE`` so the existence check and the write
  are one atomic step; unique-index violations map to ``AlreadyExists``.
- The asyncio lock only serializes use of the shared connection object.
"""

from __future__ import annotations
from datetime import datetime, timedelta, timezone
from typing import List, Optional
import asyncio
import logging
import sqlite3

from adventurer_registry.characters import (
    AlreadyExists,
    Character,
    NotFound,
    PermissionDenied,
)

logger = logging.getLogger(__name__)

_COLUMNS = "author_id, guild_id, name, profile, created_at, updated_at"


def _now() -> datetime:
    return datetime.now(timezone.utc)


def _next_stamp(previous: datetime) -> datetime:
    """Return the current time, nudged past ``previous`` if the clock has not moved."""
    stamp = _now()
    if stamp <= previous:
        stamp = previous + timedelta(microseconds=1)
    return stamp


def _parse_stamp(raw: str) -> datetime:
    parsed = datetime.fromisoformat(raw)
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed


def _to_character(row: sqlite3.Row) -> Character:
    return Character(
        author_id=row["author_id"],
        guild_id=row["guild_id"],
        name=row["name"],
        profile=row["profile"],
        created_at=_parse_stamp(row["created_at"]),
        updated_at=_parse_stamp(row["updated_at"]),
    )


def _require_text(field: str, value: str) -> None:
    if not value or not value.strip():
        raise ValueError(f"{field} must not be empty")


class CharactersRepo:
    """Async CRUD helpers for the ``characters`` table."""

    def __init__(self, conn: sqlite3.Connection, lock: asyncio.Lock):
        self.conn = conn
        self._lock = lock

    # ------------------------------------------------------------------ #
    # Reads
    # ------------------------------------------------------------------ #

    def _select_one(self, where: str, params: tuple) -> Optional[sqlite3.Row]:
        sql = f"SELECT {_COLUMNS} FROM characters WHERE {where} LIMIT 1"
        return self.conn.execute(sql, params).fetchone()

    def _select_many(self, where: str, params: tuple) -> List[Character]:
        sql = f"SELECT {_COLUMNS} FROM characters WHERE {where} ORDER BY name"
        return [_to_character(r) for r in self.conn.execute(sql, params).fetchall()]

    async def list_by_guild(self, guild_id: str) -> List[Character]:
        """
        Return every character registered in ``guild_id``.

        :param guild_id: Guild id, or ``""`` for the direct-message scope.
        :returns: Characters ordered by name; empty when none exist.
        """
        def _query() -> List[Character]:
            return self._select_many("guild_id=?", (guild_id,))

        async with self._lock:
            return await asyncio.to_thread(_query)  # blocking sqlite call

    async def list_by_author(self, author_id: str) -> List[Character]:
        """
        Return every character created by ``author_id`` across all guilds.

        :param author_id: Discord user id.
        :returns: Characters ordered by name; empty when none exist.
        """
        def _query() -> List[Character]:
            return self._select_many("author_id=?", (author_id,))

        async with self._lock:
            return await asyncio.to_thread(_query)  # blocking sqlite call

    async def find_by_name_and_guild(self, name: str, guild_id: str) -> Character:
        """Return the character called ``name`` in ``guild_id`` or raise ``NotFound``."""
        def _query() -> Optional[sqlite3.Row]:
            return self._select_one("name=? AND guild_id=?", (name, guild_id))

        async with self._lock:
            row = await asyncio.to_thread(_query)  # blocking sqlite call
        if row is None:
            raise NotFound()
        return _to_character(row)

    async def find_by_name_and_author(self, name: str, author_id: str) -> Character:
        """Return the character called ``name`` owned by ``author_id`` or raise ``NotFound``."""
        def _query() -> Optional[sqlite3.Row]:
            return self._select_one("name=? AND author_id=?", (name, author_id))

        async with self._lock:
            row = await asyncio.to_thread(_query)  # blocking sqlite call
        if row is None:
            raise NotFound()
        return _to_character(row)

    # ------------------------------------------------------------------ #
    # Writes
    # ------------------------------------------------------------------ #

    async def create(self, character: Character) -> Character:
        """
        Insert ``character`` unless its ``(guild_id, name)`` is taken.

        :param character: Record to store; its timestamps are ignored.
        :returns: The stored row, read back from the table.
        :raises AlreadyExists: When the name is already registered in the guild.
        """
        _require_text("name", character.name)
        _require_text("profile", character.profile)

        sql = f"""
            INSERT INTO characters ({_COLUMNS})
            VALUES (?, ?, ?, ?, ?, ?)
            ON CONFLICT(guild_id, name) DO NOTHING
        """

        def _run() -> sqlite3.Row:
            stamp = _now().isoformat()
            with self.conn:
                self.conn.execute("BEGIN IMMEDIATE")
                try:
                    cur = self.conn.execute(
                        sql,
                        (
                            character.author_id,
                            character.guild_id,
                            character.name,
                            character.profile,
                            stamp,
                            stamp,
                        ),
                    )
                except sqlite3.IntegrityError as exc:
                    raise AlreadyExists() from exc
                if cur.rowcount == 0:
                    raise AlreadyExists()
                return self._select_one(
                    "name=? AND guild_id=?", (character.name, character.guild_id)
                )

        async with self._lock:
            row = await asyncio.to_thread(_run)  # blocking sqlite call

        logger.info(
            "Registered character %r in guild %r for author %s",
            character.name,
            character.guild_id,
            character.author_id,
        )
        return _to_character(row)

    async def update(self, name: str, profile: str, guild_id: str) -> Character:
        """
        Replace the profile of ``name`` in ``guild_id``.

        ``updated_at`` always moves strictly forward; ``created_at`` is kept.

        :raises NotFound: When no such character exists. Nothing is written.
        """
        _require_text("profile", profile)

        def _run() -> sqlite3.Row:
            with self.conn:
                self.conn.execute("BEGIN IMMEDIATE")
                row = self._select_one("name=? AND guild_id=?", (name, guild_id))
                if row is None:
                    raise NotFound()
                stamp = _next_stamp(_parse_stamp(row["updated_at"]))
                self.conn.execute(
                    """
                    UPDATE characters
                    SET profile=?, updated_at=?
                    WHERE name=? AND guild_id=?
                    """,
                    (profile, stamp.isoformat(), name, guild_id),
                )
                return self._select_one("name=? AND guild_id=?", (name, guild_id))

        async with self._lock:
            row = await asyncio.to_thread(_run)  # blocking sqlite call
        return _to_character(row)

    async def delete(self, name: str, guild_id: str, requesting_author_id: str) -> None:
        """
        Remove ``name`` from ``guild_id`` on behalf of ``requesting_author_id``.

        Missing characters are ignored so repeated unregisters stay harmless.

        :raises PermissionDenied: When the character belongs to someone else.
        """
        def _run() -> bool:
            with self.conn:
                self.conn.execute("BEGIN IMMEDIATE")
                row = self._select_one("name=? AND guild_id=?", (name, guild_id))
                if row is None:
                    return False
                if row["author_id"] != requesting_author_id:
                    raise PermissionDenied()
                self.conn.execute(
                    "DELETE FROM characters WHERE name=? AND guild_id=?",
                    (name, guild_id),
                )
                return True

        async with self._lock:
            removed = await asyncio.to_thread(_run)  # blocking sqlite call
        if removed:
            logger.info("Deleted character %r from guild %r", name, guild_id)

    async def delete_by_author(self, name: str, author_id: str) -> None:
        """
        Remove every character called ``name`` owned by ``author_id``.

        Missing characters are ignored.

        :raises PermissionDenied: When the matched row belongs to someone else.
        """
        def _run() -> bool:
            with self.conn:
                self.conn.execute("BEGIN IMMEDIATE")
                row = self._select_one("name=? AND author_id=?", (name, author_id))
                if row is None:
                    return False
                if row["author_id"] != author_id:
                    raise PermissionDenied()
                self.conn.execute(
                    "DELETE FROM characters WHERE name=? AND author_id=?",
                    (name, author_id),
                )
                return True

        async with self._lock:
            removed = await asyncio.to_thread(_run)  # blocking sqlite call
        if removed:
            logger.info("Deleted character %r for author %s", name, author_id)

    def close(self) -> None:
        """Close the underlying connection."""
        self.conn.close()
