from __future__ import annotations

from . import register
from ..model import CommandContext, CommandResponse
from ..parsing import CommandFormatError
from adventurer_registry.characters import NotFound
from adventurer_registry.registry import CharactersRepo


@register
class CharacterCommand:
    """
    Command: ``!ar character Character Name``

    Effect
    ------
    - Sends the full profile to the caller as a DM.
    - Server lookups are scoped to the server; DM lookups to the caller.
    """

    command_str = "character"

    @staticmethod
    async def handle(
        registry: CharactersRepo, ctx: CommandContext, args: str
    ) -> CommandResponse:
        name = args.strip()
        if not name:
            raise CommandFormatError(
                f"Tell me which character to show: `{ctx.prefix} character Character Name`"
            )

        try:
            if ctx.is_direct:
                found = await registry.find_by_name_and_author(name, ctx.author_id)
            else:
                found = await registry.find_by_name_and_guild(name, ctx.guild_id)
        except NotFound:
            return CommandResponse(
                public=f"No character by the name of '{name}' exists in the Adventurer Registry!"
            )

        return CommandResponse(private=f"{found.name}\n\n{found.profile}")
