from __future__ import annotations

from . import register
from ..model import CommandContext, CommandResponse
from adventurer_registry.registry import CharactersRepo


def help_text(prefix: str) -> str:
    """Return the usage summary for ``prefix``."""
    return "\n".join(
        [
            "AdventureRegistry command help:",
            "**Characters registered with this bot are linked to you and the server you are in. "
            "Expect that characters you create in DMs with this bot will not be available in any "
            "servers, however all characters you create anywhere will be available to you in DMs.**",
            "",
            f"`{prefix}` - is the bots command prefix. All commands will be prefixed with this",
            f"`{prefix} list` - will list the names of all currently registered characters. "
            "Use this to confirm spelling when looking up a character",
            f'`{prefix} register "Character Name" TypeFullDescriptionHere` - will allow you to add a '
            "character to the list",
            f"`{prefix} unregister Character Name` - Removes a character from the registry, this is permanent",
            f'`{prefix} update "Character Name" TypeFullDescriptionHere` - Updates a characters profile '
            "in the registry",
            f"`{prefix} character Character Name` - Fetch a characters profile by name as a DM",
            f"`{prefix} export` - Export all characters created by you",
            f"`{prefix} help` shows this help screen",
        ]
    )


@register
class HelpCommand:
    """List available commands. Unknown commands land here too."""

    command_str = "help"

    @staticmethod
    async def handle(
        registry: CharactersRepo, ctx: CommandContext, args: str
    ) -> CommandResponse:
        return CommandResponse(public=help_text(ctx.prefix))
