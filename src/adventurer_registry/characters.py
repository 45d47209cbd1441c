"""
Character records and the domain errors shared by the registries and commands.

Every :class:`CharacterError` carries a message that is safe to show to the
person who issued the command.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime


class CharacterError(Exception):
    """Base class for user-facing registry errors."""

    default_message = "character registry error"

    def __init__(self, message: str | None = None) -> None:
        super().__init__(message or self.default_message)


class AlreadyExists(CharacterError):
    default_message = "character by that name already exists"


class NotFound(CharacterError):
    default_message = "character by that name could not be found"


class PermissionDenied(CharacterError):
    default_message = "you do not have permission to do that"


@dataclass(frozen=True)
class Character:
    """A named profile owned by ``author_id`` within ``guild_id``.

    ``guild_id`` is the empty string for characters created in direct messages.
    """

    author_id: str
    guild_id: str
    name: str
    profile: str
    created_at: datetime | None = None
    updated_at: datetime | None = None


__all__ = [
    "Character",
    "CharacterError",
    "AlreadyExists",
    "NotFound",
    "PermissionDenied",
]
