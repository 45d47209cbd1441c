"""Discord bot for registering character profiles per server."""
