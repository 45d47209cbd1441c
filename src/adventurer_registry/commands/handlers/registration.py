from __future__ import annotations

import logging

from . import register
from ..model import CommandContext, CommandResponse
from ..parsing import CommandFormatError, append_attachments, parse_name_and_profile
from adventurer_registry.characters import Character
from adventurer_registry.registry import CharactersRepo

logger = logging.getLogger(__name__)


@register
class RegisterCommand:
    """
    Command: ``!ar register "Character Name" profile``

    Effect
    ------
    - Creates a character owned by the caller in the current server (or in the
      DM scope when sent privately).
    - Message attachments are appended to the profile as URLs.
    """

    command_str = "register"

    @staticmethod
    async def handle(
        registry: CharactersRepo, ctx: CommandContext, args: str
    ) -> CommandResponse:
        try:
            name, profile = parse_name_and_profile(args)
        except CommandFormatError as exc:
            logger.debug("Rejected register arguments %r: %s", args, exc)
            raise CommandFormatError(
                "A character must be registered with both a name and a content, in format: \n"
                f'`{ctx.prefix} register "Character Name" Character description,\n'
                "optionally with newlines`"
            ) from exc

        created = await registry.create(
            Character(
                author_id=ctx.author_id,
                guild_id=ctx.guild_id,
                name=name,
                profile=append_attachments(profile, ctx.attachments),
            )
        )
        return CommandResponse(public=f"{created.name} has been registered!")
