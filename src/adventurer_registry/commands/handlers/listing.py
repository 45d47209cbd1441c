from __future__ import annotations

from . import register
from ..model import CommandContext, CommandResponse
from adventurer_registry.registry import CharactersRepo


@register
class ListCommand:
    """
    Command: ``!ar list``

    Effect
    ------
    - In a server, lists every character registered there.
    - In a DM, lists every character the caller registered anywhere.
    - Names are sent privately, one per line.
    """

    command_str = "list"

    @staticmethod
    async def handle(
        registry: CharactersRepo, ctx: CommandContext, args: str
    ) -> CommandResponse:
        if ctx.is_direct:
            characters = await registry.list_by_author(ctx.author_id)
        else:
            characters = await registry.list_by_guild(ctx.guild_id)

        if not characters:
            return CommandResponse(
                public=(
                    "No characters have been registered yet! Register the first with:\n"
                    f' `{ctx.prefix} register "Character Name" a full character description,\n'
                    "newlines included`"
                )
            )

        names = "\n".join(c.name for c in characters)
        return CommandResponse(private=f"All characters currently registered:\n{names}")
