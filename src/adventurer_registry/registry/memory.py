"""
Volatile, name-keyed character storage.

:class:`InMemoryRegistry` keeps ``name -> content`` pairs in a dict. It has no
guild or author scoping and is meant for tests and throwaway runs. Unlike the
SQL repository, deleting a missing name is an error.
"""

from __future__ import annotations

import threading
from contextlib import contextmanager
from typing import Dict, Iterator, List

from adventurer_registry.characters import AlreadyExists, NotFound


class ReadWriteLock:
    """Many concurrent readers or a single writer.

    Waiting writers block new readers, so a steady stream of reads cannot
    starve a write.
    """

    def __init__(self) -> None:
        self._cond = threading.Condition(threading.Lock())
        self._readers = 0
        self._writers_waiting = 0
        self._writing = False

    @contextmanager
    def read(self) -> Iterator[None]:
        with self._cond:
            while self._writing or self._writers_waiting:
                self._cond.wait()
            self._readers += 1
        try:
            yield
        finally:
            with self._cond:
                self._readers -= 1
                if self._readers == 0:
                    self._cond.notify_all()

    @contextmanager
    def write(self) -> Iterator[None]:
        with self._cond:
            self._writers_waiting += 1
            try:
                while self._writing or self._readers:
                    self._cond.wait()
            finally:
                self._writers_waiting -= 1
            self._writing = True
        try:
            yield
        finally:
            with self._cond:
                self._writing = False
                self._cond.notify_all()


class InMemoryRegistry:
    """Thread-safe ``name -> content`` registry."""

    def __init__(self) -> None:
        self._characters: Dict[str, str] = {}
        self._lock = ReadWriteLock()

    def names(self) -> List[str]:
        """Return every registered name (unordered)."""

        with self._lock.read():
            return list(self._characters)

    def find(self, name: str) -> str:
        """Return the content stored for ``name``."""

        with self._lock.read():
            try:
                return self._characters[name]
            except KeyError as exc:
                raise NotFound(f"character with name {name} does not exist") from exc

    def create(self, name: str, content: str) -> str:
        """Store ``content`` under a new ``name`` and return the name."""

        # The existence check and the insert share one exclusive section.
        with self._lock.write():
            if name in self._characters:
                raise AlreadyExists(f"character with the name {name} already exists")
            self._characters[name] = content
        return name

    def update(self, name: str, content: str) -> str:
        """Replace the content of an existing ``name`` and return the name."""

        with self._lock.write():
            if name not in self._characters:
                raise NotFound(f"character with name {name} does not exist")
            self._characters[name] = content
        return name

    def delete(self, name: str) -> None:
        """Remove ``name``; raises ``NotFound`` when it is not registered."""

        with self._lock.write():
            try:
                del self._characters[name]
            except KeyError as exc:
                raise NotFound(f"character with name {name} does not exist") from exc
