"""
Deliver :class:`CommandResponse` objects through Discord.

Public replies go to the channel the command came from. Private replies and
export files go to the author's DM channel. Long texts are split to stay under
Discord's message length limit.
"""

from __future__ import annotations

import io
import logging
from typing import List

import discord

from adventurer_registry.commands import CommandResponse, ExportFile

logger = logging.getLogger(__name__)

DISCORD_MAX_MESSAGE_LEN = 1900  # keep under 2000 hard limit


def chunk_text(text: str, limit: int = DISCORD_MAX_MESSAGE_LEN) -> List[str]:
    """Split ``text`` into pieces no longer than ``limit``."""
    text = text or ""
    if len(text) <= limit:
        return [text]

    chunks: List[str] = []
    remaining = text

    while len(remaining) > limit:
        # Prefer splitting on paragraph, then newline, then space
        split_at = remaining.rfind("\n\n", 0, limit)
        if split_at <= 0:
            split_at = remaining.rfind("\n", 0, limit)
        if split_at <= 0:
            split_at = remaining.rfind(" ", 0, limit)
        if split_at <= 0:
            split_at = limit

        chunk = remaining[:split_at].strip()
        if chunk:
            chunks.append(chunk)

        remaining = remaining[split_at:].strip()

    if remaining:
        chunks.append(remaining)

    return chunks


async def send_chunked(channel: discord.abc.Messageable, text: str) -> None:
    for part in chunk_text(text):
        await channel.send(part)


def to_discord_file(export: ExportFile) -> discord.File:
    return discord.File(io.BytesIO(export.data), filename=export.filename)


async def deliver(message: discord.Message, response: CommandResponse) -> None:
    """Send every part of ``response`` for the command in ``message``."""

    if response.public:
        try:
            await send_chunked(message.channel, response.public)
        except discord.HTTPException:
            logger.exception("Failed to send reply in channel %s", message.channel.id)

    if not (response.private or response.private_file):
        return

    author = message.author
    try:
        dm = author.dm_channel or await author.create_dm()
        if response.private:
            await send_chunked(dm, response.private)
        if response.private_file:
            await dm.send(file=to_discord_file(response.private_file))
    except discord.HTTPException:
        # Most often the user has DMs from server members disabled.
        logger.exception("Failed to send private reply to user %s", author.id)
