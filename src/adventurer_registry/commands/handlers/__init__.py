"""
Registry of prefix command handlers.

Each module in this package declares one or more handler classes::

    from . import register

    @register
    class PingCommand:
        command_str = "ping"

        @staticmethod
        async def handle(registry, ctx, args) -> CommandResponse: ...

Modules are imported when the package loads, so dropping a file here is all
it takes to add a command. ``command_str`` must be lowercase and unique.
"""
from __future__ import annotations
from typing import Protocol, Dict
from importlib import import_module
from pkgutil import iter_modules
from pathlib import Path

from adventurer_registry.registry import CharactersRepo
from ..model import CommandContext, CommandResponse


class CommandHandler(Protocol):
    """Protocol for command handler classes."""

    command_str: str

    @staticmethod
    async def handle(
        registry: CharactersRepo, ctx: CommandContext, args: str
    ) -> CommandResponse:
        """Coroutine invoked when the command is dispatched.

        :param registry: Character repository to act on.
        :param ctx: Who issued the command and where.
        :param args: Raw argument string.
        :returns: Replies to deliver.
        """


_REGISTRY: Dict[str, CommandHandler] = {}


def register(cls: CommandHandler):
    """Decorator that registers a ``CommandHandler`` implementation.

    :param cls: Class implementing the handler protocol.
    :returns: The class unchanged.
    """
    if cls.command_str in _REGISTRY:
        raise ValueError(f"Duplicate command handler for '{cls.command_str}'")
    _REGISTRY[cls.command_str] = cls
    return cls


def get(command: str) -> CommandHandler | None:
    """Return handler class for ``command`` or ``None``."""
    return _REGISTRY.get(command)


def all_commands() -> Dict[str, CommandHandler]:
    """Return copy of the command registry."""
    return dict(_REGISTRY)


# ------------------------------------------------------------------ #
# Auto-import sibling modules to populate registry
# ------------------------------------------------------------------ #
_pkg_path = Path(__file__).resolve().parent
for _, modname, _ in iter_modules([str(_pkg_path)]):
    if modname != "__init__":
        import_module(f"{__name__}.{modname}")
