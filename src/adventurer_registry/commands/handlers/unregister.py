from __future__ import annotations

from . import register
from ..model import CommandContext, CommandResponse
from ..parsing import CommandFormatError
from adventurer_registry.registry import CharactersRepo


@register
class UnregisterCommand:
    """
    Command: ``!ar unregister Character Name``

    Effect
    ------
    - Permanently removes one of the caller's characters from the current
      scope: the server it was sent in, or the DM scope when sent privately.
    - Characters with the same name in other servers are left alone.
    - Confirms even when nothing matched, so repeating it is harmless.
    """

    command_str = "unregister"

    @staticmethod
    async def handle(
        registry: CharactersRepo, ctx: CommandContext, args: str
    ) -> CommandResponse:
        name = args.strip()
        if not name:
            raise CommandFormatError(
                f"Tell me which character to remove: `{ctx.prefix} unregister Character Name`"
            )

        await registry.delete(name, ctx.guild_id, ctx.author_id)

        return CommandResponse(public=f"'{name}' has been unregistered!")
