import discord

import logging

logger = logging.getLogger(__name__)


async def handle(client: discord.Client):
    """Log the identity the bot connected as."""
    logger.info(f"Logged in as {client.user.name} (ID: {client.user.id})")
    logger.info(f"Serving {len(client.guilds)} guild(s)")
