import logging
import os

from .loader import section

logger = logging.getLogger(__name__)

DEFAULT_COMMAND_PREFIX = "!ar"


class Core:
    def __init__(self, config: dict | None = None) -> None:
        discord_cfg = section(config, "discord")

        token_env = str(discord_cfg.get("token_env", "DISCORD_TOKEN"))

        self.DISCORD_API_TOKEN: str | None = os.getenv(token_env)
        self.COMMAND_PREFIX: str = str(
            discord_cfg.get("command_prefix") or os.getenv("COMMAND_PREFIX", DEFAULT_COMMAND_PREFIX)
        ).strip()

        required = [
            (token_env, self.DISCORD_API_TOKEN),
            ("COMMAND_PREFIX", self.COMMAND_PREFIX),
        ]
        missing = [name for name, val in required if not val]
        if missing:
            raise ValueError(f"Missing environment variables: {', '.join(missing)}")

        if any(ch.isspace() for ch in self.COMMAND_PREFIX):
            raise ValueError(f"COMMAND_PREFIX must be a single token, got {self.COMMAND_PREFIX!r}")

        logger.debug("Command prefix set to %r", self.COMMAND_PREFIX)
