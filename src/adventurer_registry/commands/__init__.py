"""Command dispatch utilities."""

from __future__ import annotations

import dataclasses
import logging
import re
from typing import List, NamedTuple

from adventurer_registry.characters import CharacterError
from adventurer_registry.registry import CharactersRepo

from .handlers import CommandHandler, all_commands, get as get_handler
from .model import DEFAULT_PREFIX, CommandContext, CommandResponse, ExportFile
from .parsing import CommandFormatError, append_attachments, parse_name_and_profile

logger = logging.getLogger(__name__)

FALLBACK_COMMAND = "help"

GENERIC_ERROR_MESSAGE = (
    "Whoops! Something's gone wrong!\n"
    "We're not sure what's happened but this issue has been logged and will be "
    "investigated in case a fix is needed."
)

# Spaces and tabs only; newlines belong to multi-line profiles.
_TOKEN_SPLIT_RE = re.compile(r"[ \t]+")


class CommandInvocation(NamedTuple):
    """Resolved command data for downstream consumers."""

    handler: CommandHandler
    name: str
    args: str


def _tokenize(content: str) -> List[str]:
    return [token for token in _TOKEN_SPLIT_RE.split(content.strip()) if token]


def resolve_command(content: str, prefix: str = DEFAULT_PREFIX) -> CommandInvocation | None:
    """
    Return the handler, command name, and args if ``content`` is a command.

    Unknown command names resolve to the help handler.
    """

    tokens = _tokenize(content or "")
    if len(tokens) < 2 or tokens[0] != prefix:
        return None

    command = tokens[1].lower()
    args = " ".join(tokens[2:])
    handler = get_handler(command) or get_handler(FALLBACK_COMMAND)
    return CommandInvocation(handler=handler, name=command, args=args)


class CommandRouter:
    """Turn prefixed chat messages into registry calls and reply text."""

    def __init__(self, registry: CharactersRepo, prefix: str = DEFAULT_PREFIX) -> None:
        self.registry = registry
        self.prefix = prefix

    async def route(self, content: str, ctx: CommandContext) -> CommandResponse | None:
        """
        Execute the command in ``content`` on behalf of ``ctx``.

        :returns: Replies to deliver, or ``None`` when the message is ignored.
        """

        if ctx.from_bot:
            return None

        invocation = resolve_command(content, self.prefix)
        if invocation is None:
            logger.debug("Ignoring non-command message from %s", ctx.author_id)
            return None

        handler, command, args = invocation
        ctx = dataclasses.replace(ctx, prefix=self.prefix)
        logger.info(
            "Dispatching command '%s' for author %s (guild=%r, dm=%s)",
            command,
            ctx.author_id,
            ctx.guild_id,
            ctx.is_direct,
        )

        try:
            return await handler.handle(self.registry, ctx, args)
        except (CharacterError, CommandFormatError) as exc:
            return CommandResponse(public=str(exc))
        except Exception:
            logger.exception("Command '%s' failed for author %s", command, ctx.author_id)
            return CommandResponse(public=GENERIC_ERROR_MESSAGE)


__all__ = [
    "CommandRouter",
    "CommandContext",
    "CommandResponse",
    "CommandInvocation",
    "CommandFormatError",
    "ExportFile",
    "DEFAULT_PREFIX",
    "GENERIC_ERROR_MESSAGE",
    "all_commands",
    "append_attachments",
    "parse_name_and_profile",
    "resolve_command",
]
