import asyncio
from types import SimpleNamespace

from adventurer_registry.commands import CommandRouter
from adventurer_registry.event_hooks import message_hook


class FakeChannel:
    def __init__(self, channel_id):
        self.id = channel_id
        self.sent = []

    async def send(self, content=None, *, file=None):
        self.sent.append(content if file is None else file)


def _fake_author(author_id=10, bot=False):
    dm = FakeChannel(f"dm-{author_id}")

    async def create_dm():
        return dm

    return SimpleNamespace(
        id=author_id, name="alice", bot=bot, dm_channel=None, create_dm=create_dm, dm=dm
    )


def _message(content, *, author=None, guild_id=7, attachments=()):
    author = author or _fake_author()
    return SimpleNamespace(
        id=1,
        content=content,
        author=author,
        guild=SimpleNamespace(id=guild_id) if guild_id is not None else None,
        channel=FakeChannel(1),
        attachments=list(attachments),
    )


CLIENT = SimpleNamespace(user=SimpleNamespace(id=999))


def test_register_reply_goes_to_channel(registry):
    router = CommandRouter(registry)
    message = _message('!ar register "Thundar" A brave knight')

    asyncio.run(message_hook.handle(CLIENT, message, router))

    assert message.channel.sent == ["Thundar has been registered!"]
    stored = asyncio.run(registry.find_by_name_and_guild("Thundar", "7"))
    assert stored.author_id == "10"


def test_attachment_urls_reach_the_profile(registry):
    router = CommandRouter(registry)
    attachment = SimpleNamespace(proxy_url="https://media/1.png", url="https://cdn/1.png")
    message = _message('!ar register "Thundar" A brave knight', attachments=[attachment])

    asyncio.run(message_hook.handle(CLIENT, message, router))

    stored = asyncio.run(registry.find_by_name_and_guild("Thundar", "7"))
    assert stored.profile.endswith("\n\nhttps://media/1.png")


def test_character_profile_is_sent_privately(registry):
    router = CommandRouter(registry)
    author = _fake_author()
    asyncio.run(message_hook.handle(CLIENT, _message('!ar register "Thundar" Brave', author=author), router))

    message = _message("!ar character Thundar", author=author)
    asyncio.run(message_hook.handle(CLIENT, message, router))

    assert message.channel.sent == []
    assert author.dm.sent == ["Thundar\n\nBrave"]


def test_messages_from_bots_are_ignored(registry):
    router = CommandRouter(registry)
    message = _message("!ar help", author=_fake_author(author_id=999))

    asyncio.run(message_hook.handle(CLIENT, message, router))

    assert message.channel.sent == []

    other_bot = _message("!ar help", author=_fake_author(author_id=55, bot=True))
    asyncio.run(message_hook.handle(CLIENT, other_bot, router))
    assert other_bot.channel.sent == []


def test_dm_commands_use_author_scope(registry):
    router = CommandRouter(registry)
    author = _fake_author()
    asyncio.run(message_hook.handle(CLIENT, _message('!ar register "Thundar" Brave', author=author), router))

    message = _message("!ar list", author=author, guild_id=None)
    asyncio.run(message_hook.handle(CLIENT, message, router))

    assert author.dm.sent == ["All characters currently registered:\nThundar"]


def test_export_file_is_sent_to_dm(registry):
    router = CommandRouter(registry)
    author = _fake_author()
    asyncio.run(message_hook.handle(CLIENT, _message('!ar register "Thundar" Brave', author=author), router))

    asyncio.run(message_hook.handle(CLIENT, _message("!ar export", author=author), router))

    (sent_file,) = author.dm.sent
    assert sent_file.filename == "alice character export.txt"
    assert sent_file.fp.read().decode("utf-8").startswith("**Thundar**\nBrave")
