"""Argument parsing for ``register`` and ``update``."""

from __future__ import annotations

from typing import Sequence, Tuple


class CommandFormatError(ValueError):
    """Command arguments were malformed; the message is shown to the user."""


def parse_name_and_profile(args: str) -> Tuple[str, str]:
    """
    Split ``"Character Name" profile text`` into its name and profile.

    The name is everything between the first two ``"`` characters. The profile
    is the rest of the string after the closing quote, minus one leading
    separator.

    :raises CommandFormatError: When fewer than two quotes are present or
        either part is blank.
    """
    first = args.find('"')
    if first == -1:
        raise CommandFormatError("character name must be passed in quotes")
    second = args.find('"', first + 1)
    if second == -1:
        raise CommandFormatError("character name must be passed in quotes")

    name = args[first + 1 : second].strip()
    profile = args[second + 1 :]
    if profile[:1].isspace():
        profile = profile[1:]

    if not name or not profile.strip():
        raise CommandFormatError("a character needs both a name and a profile")

    return name, profile


def append_attachments(profile: str, urls: Sequence[str]) -> str:
    """Append attachment URLs to ``profile``, one per line after a blank line."""
    if not urls:
        return profile
    return profile + "\n" + "".join(f"\n{url}" for url in urls)


__all__ = ["CommandFormatError", "parse_name_and_profile", "append_attachments"]
