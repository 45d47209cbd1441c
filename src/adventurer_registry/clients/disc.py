"""Discord bot bootstrap utilities."""

from __future__ import annotations

import logging

import discord

from adventurer_registry.commands import CommandRouter
from adventurer_registry.config import core, storage
from adventurer_registry.event_hooks import message_hook, ready_hook
from adventurer_registry.registry import CharactersRepo, open_registry

logger = logging.getLogger(__name__)

# --- Intents --------------------------------------------------------------- #
intents = discord.Intents.none()
intents.guilds = True
intents.guild_messages = True
intents.dm_messages = True
intents.message_content = True


class ARClient(discord.Client):
    """Primary Discord client routing prefixed commands to the registry."""

    def __init__(self, db_path: str | None = None, prefix: str | None = None) -> None:
        super().__init__(intents=intents)
        self._db_path = db_path or storage.DB_PATH
        self._prefix = prefix or core.COMMAND_PREFIX
        self.registry: CharactersRepo | None = None
        self.router: CommandRouter | None = None

    async def setup_hook(self) -> None:
        """Open the character database before the gateway connects."""

        self.registry = open_registry(self._db_path)
        self.router = CommandRouter(self.registry, prefix=self._prefix)
        logger.info("Command router ready with prefix %r", self._prefix)

    async def on_ready(self) -> None:
        await ready_hook.handle(self)

    async def on_message(self, message: discord.Message) -> None:
        if self.router is None:
            return
        await message_hook.handle(self, message, self.router)

    async def close(self) -> None:
        await super().close()
        if self.registry is not None:
            self.registry.close()
            self.registry = None


def run() -> None:
    """Start the Discord client using configuration from the environment."""

    if not core.DISCORD_API_TOKEN:
        logger.error("No DISCORD_TOKEN configured. Cannot run client.")
        return

    client = ARClient()
    try:
        client.run(core.DISCORD_API_TOKEN, log_handler=None)
    except discord.LoginFailure as exc:
        logger.error("Login failed: %s", exc)
    except Exception as exc:  # pragma: no cover
        logger.exception("Unexpected error while running client: %s", exc)
