import asyncio
from types import SimpleNamespace

import discord

from adventurer_registry.clients import delivery
from adventurer_registry.commands import CommandResponse


def test_chunk_text_keeps_short_text_whole():
    assert delivery.chunk_text("hello") == ["hello"]


def test_chunk_text_prefers_line_breaks():
    lines = [f"Character {i:04d}" for i in range(400)]
    text = "\n".join(lines)

    chunks = delivery.chunk_text(text, limit=200)

    assert all(len(c) <= 200 for c in chunks)
    assert "\n".join(chunks).split("\n") == lines


def test_chunk_text_splits_unbroken_text():
    chunks = delivery.chunk_text("x" * 450, limit=200)

    assert [len(c) for c in chunks] == [200, 200, 50]


class _Channel:
    def __init__(self, fail=False):
        self.id = 1
        self.sent = []
        self.fail = fail

    async def send(self, content=None, *, file=None):
        if self.fail:
            raise discord.HTTPException(SimpleNamespace(status=403, reason="Forbidden"), "DMs closed")
        self.sent.append(content if file is None else file)


def test_private_failures_are_logged_and_public_reply_still_sent(caplog):
    public = _Channel()
    dm = _Channel(fail=True)
    author = SimpleNamespace(id=5, dm_channel=dm)
    message = SimpleNamespace(channel=public, author=author)

    asyncio.run(delivery.deliver(message, CommandResponse(public="hi", private="secret")))

    assert public.sent == ["hi"]
    assert "Failed to send private reply to user 5" in caplog.text


def test_existing_dm_channel_is_reused():
    dm = _Channel()

    async def create_dm():
        raise AssertionError("create_dm should not be called")

    author = SimpleNamespace(id=5, dm_channel=dm, create_dm=create_dm)
    message = SimpleNamespace(channel=_Channel(), author=author)

    asyncio.run(delivery.deliver(message, CommandResponse(private="secret")))

    assert dm.sent == ["secret"]
