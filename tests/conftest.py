import os, sys
import warnings
from pathlib import Path

import pytest

# Add src/ to sys.path for imports
sys.path.insert(0, str(Path(__file__).resolve().parent.parent / "src"))

# Ensure required environment variables for config.Core
os.environ.setdefault("DISCORD_TOKEN", "test-token")
os.environ.setdefault("COMMAND_PREFIX", "!ar")
os.environ.setdefault("DB_PATH", ":memory:")

# Silence deprecation warnings surfaced from third-party dependencies during tests
warnings.filterwarnings(
    "ignore", category=DeprecationWarning, module=r"^discord\\.player$"
)
warnings.filterwarnings("ignore", "'audioop' is deprecated", DeprecationWarning)


def pytest_configure(config):
    warnings.filterwarnings(
        "ignore", category=DeprecationWarning, module=r"^discord\\.player$"
    )
    warnings.filterwarnings("ignore", "'audioop' is deprecated", DeprecationWarning)


@pytest.fixture
def registry():
    from adventurer_registry.registry import open_registry

    repo = open_registry(":memory:")
    try:
        yield repo
    finally:
        repo.close()
