import os
from pathlib import Path

from .loader import section

_DEFAULT_SQLITE_PATH = Path("data") / "registry.db"


class Storage:
    def __init__(self, config: dict | None = None) -> None:
        storage_cfg = section(config, "storage")
        self.DB_PATH: str = str(storage_cfg.get("db_path", os.getenv("DB_PATH", str(_DEFAULT_SQLITE_PATH))))
