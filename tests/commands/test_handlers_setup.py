from adventurer_registry import commands


def test_all_handlers_are_discovered():
    assert set(commands.all_commands()) == {
        "list",
        "register",
        "unregister",
        "update",
        "character",
        "export",
        "help",
    }


def test_register_decorator_survives_handler_discovery():
    from adventurer_registry.commands import handlers

    assert callable(handlers.register)
    assert handlers.get("register").command_str == "register"
    assert handlers.get("unregister").command_str == "unregister"
