from __future__ import annotations

from typing import Sequence

from . import register
from ..model import CommandContext, CommandResponse, ExportFile
from adventurer_registry.characters import Character
from adventurer_registry.registry import CharactersRepo


def render_export(characters: Sequence[Character]) -> str:
    """Render one ``**Name**`` block per character, separated by blank lines."""
    blocks = [f"**{c.name}**\n{c.profile}" for c in characters]
    return "\n\n\n".join(blocks) + "\n"

@register
class ExportCommand:
    """
    Command: ``!ar export``

    Effect
    ------
    - DMs the caller a text file holding every character they registered.
    """

    command_str = "export"

    @staticmethod
    async def handle(
        registry: CharactersRepo, ctx: CommandContext, args: str
    ) -> CommandResponse:
        characters = await registry.list_by_author(ctx.author_id)
        if not characters:
            return CommandResponse(
                private="You don't seem to have any characters registered yet."
            )

        owner = ctx.author_name or ctx.author_id
        return CommandResponse(
            private_file=ExportFile(
                filename=f"{owner} character export.txt",
                data=render_export(characters).encode("utf-8"),
                content_type="text/plain",
            )
        )
