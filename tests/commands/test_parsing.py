import pytest

from adventurer_registry.commands import (
    CommandFormatError,
    append_attachments,
    parse_name_and_profile,
    resolve_command,
)


def test_parse_name_and_profile():
    assert parse_name_and_profile('"Thundar" A brave knight') == ("Thundar", "A brave knight")


def test_parse_keeps_multi_word_names_and_newlines():
    name, profile = parse_name_and_profile('"Sir Thundar the Bold"\nLine one\nLine two')

    assert name == "Sir Thundar the Bold"
    assert profile == "Line one\nLine two"


@pytest.mark.parametrize(
    "args",
    [
        "Thundar A brave knight",
        '"Thundar A brave knight',
        '"Thundar"',
        '"Thundar"   ',
        '"" A brave knight',
        "",
    ],
)
def test_parse_rejects_malformed_arguments(args):
    with pytest.raises(CommandFormatError):
        parse_name_and_profile(args)


def test_append_attachments_adds_blank_line_then_urls_in_order():
    assert append_attachments("Profile", ["https://a/1.png", "https://a/2.png"]) == (
        "Profile\n\nhttps://a/1.png\nhttps://a/2.png"
    )
    assert append_attachments("Profile", []) == "Profile"


def test_resolve_command_splits_command_and_args():
    invocation = resolve_command('!ar register   "Thundar"  A brave\tknight', "!ar")

    assert invocation.name == "register"
    assert invocation.args == '"Thundar" A brave knight'
    assert invocation.handler.command_str == "register"


@pytest.mark.parametrize("content", ["", "!ar", "hello !ar list", "!arlist", "?ar list"])
def test_resolve_command_ignores_non_commands(content):
    assert resolve_command(content, "!ar") is None


def test_resolve_command_falls_back_to_help():
    invocation = resolve_command("!ar dance wildly", "!ar")

    assert invocation.name == "dance"
    assert invocation.handler.command_str == "help"
