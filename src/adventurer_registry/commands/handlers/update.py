from __future__ import annotations

import logging

from . import register
from ..model import CommandContext, CommandResponse
from ..parsing import CommandFormatError, append_attachments, parse_name_and_profile
from adventurer_registry.registry import CharactersRepo

logger = logging.getLogger(__name__)


@register
class UpdateCommand:
    """
    Command: ``!ar update "Character Name" profile``

    Effect
    ------
    - Replaces the profile of a character in the current scope.
    - Message attachments are appended to the new profile as URLs.
    """

    command_str = "update"

    @staticmethod
    async def handle(
        registry: CharactersRepo, ctx: CommandContext, args: str
    ) -> CommandResponse:
        try:
            name, profile = parse_name_and_profile(args)
        except CommandFormatError as exc:
            logger.debug("Rejected update arguments %r: %s", args, exc)
            raise CommandFormatError(
                "A character must be updated with both a name and a content, in format: \n"
                f'`{ctx.prefix} update "Character Name" Character description,\n'
                "optionally with newlines`"
            ) from exc

        await registry.update(
            name, append_attachments(profile, ctx.attachments), ctx.guild_id
        )
        return CommandResponse(public=f"'{name}' has been updated!")
