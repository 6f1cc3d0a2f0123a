"""
Sandbox configuration from environment variables.

Usage:
    from fsunit.config import get_settings

    settings = get_settings()
    print(settings.root, settings.encoding)
"""

from functools import lru_cache
from pathlib import Path
import os
import tempfile


def _env_truthy(value: str) -> bool:
    return value.strip().lower() in {"1", "true", "yes", "on"}


class Settings:
    """Sandbox configuration loaded from environment variables."""

    def __init__(self) -> None:
        # Location
        root = os.getenv("FSUNIT_ROOT")
        self.root: Path = (
            Path(root).expanduser() if root else Path(tempfile.gettempdir()) / "unit"
        )

        # Text content I/O
        self.encoding: str = os.getenv("FSUNIT_ENCODING", "utf-8")

        # Leave the tree on disk after clear_sandbox() for inspection
        self.keep: bool = _env_truthy(os.getenv("FSUNIT_KEEP", ""))

        # Default depth of snapshot() trees
        self.snapshot_depth: int = int(os.getenv("FSUNIT_SNAPSHOT_DEPTH", "3"))


@lru_cache()
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()


def reset_settings() -> None:
    """Clear settings cache. For testing only."""
    get_settings.cache_clear()
