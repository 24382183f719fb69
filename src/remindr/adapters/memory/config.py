"""In-memory configuration adapter for testing.

Satisfies the LoadConfigFile protocol without touching the filesystem.
"""

from __future__ import annotations

from pathlib import Path

from lib_layered_config import Config


def load_config_file_in_memory(path: str | Path) -> Config:
    """Return an empty Config regardless of ``path``."""
    return Config({}, {})


__all__ = ["load_config_file_in_memory"]
