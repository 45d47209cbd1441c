"""
Value types exchanged between the router, its handlers and the Discord glue.

Handlers never talk to Discord directly. They receive a
:class:`CommandContext` describing who asked and where, and return a
:class:`CommandResponse` describing what to send back and to whom.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Tuple

import discord

DEFAULT_PREFIX = "!ar"


@dataclass(frozen=True)
class ExportFile:
    """File attachment delivered alongside a response."""

    filename: str
    data: bytes
    content_type: str = "text/plain"


@dataclass(frozen=True)
class CommandResponse:
    """Replies produced by a command.

    ``public`` goes to the channel the command came from; ``private`` and
    ``private_file`` go to the author's direct-message channel.
    """

    public: str | None = None
    private: str | None = None
    private_file: ExportFile | None = None


@dataclass(frozen=True)
class CommandContext:
    """Who issued a command and where."""

    author_id: str
    author_name: str = ""
    guild_id: str = ""
    is_direct: bool = False
    from_bot: bool = False
    attachments: Tuple[str, ...] = field(default_factory=tuple)
    prefix: str = DEFAULT_PREFIX

    @classmethod
    def from_message(
        cls, message: discord.Message, bot_user: discord.abc.User | None = None
    ) -> "CommandContext":
        """Build a context from an incoming Discord message."""

        author = message.author
        guild = getattr(message, "guild", None)

        is_self = bot_user is not None and getattr(author, "id", None) == getattr(
            bot_user, "id", None
        )
        urls = tuple(
            getattr(attachment, "proxy_url", None) or attachment.url
            for attachment in (getattr(message, "attachments", None) or [])
        )

        return cls(
            author_id=str(author.id),
            author_name=str(getattr(author, "name", "") or ""),
            guild_id=str(guild.id) if guild is not None else "",
            is_direct=guild is None,
            from_bot=is_self or bool(getattr(author, "bot", False)),
            attachments=urls,
        )
