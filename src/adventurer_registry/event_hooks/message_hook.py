import logging

import discord

from adventurer_registry.clients.delivery import deliver
from adventurer_registry.commands import CommandContext, CommandRouter

logger = logging.getLogger(__name__)


async def handle(client: discord.Client, message: discord.Message, router: CommandRouter):
    """
    Handle incoming discord messages.
    - client: Discord bot client instance
    - message: The incoming message object
    - router: Command router bound to the character registry
    """
    ctx = CommandContext.from_message(message, bot_user=client.user)
    response = await router.route(message.content or "", ctx)
    if response is None:
        return

    await deliver(message, response)
