"""In-memory logging adapters for testing.

Contents:
    * :func:`init_logging_in_memory` - No-op InitLogging implementation.
    * :class:`LoggingSpy` - Records the config every initialisation received.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from lib_layered_config import Config


def init_logging_in_memory(config: Config) -> None:
    """Accept ``config`` and leave the lib_log_rich runtime untouched."""


def _empty_config_list() -> list[Config]:
    return []


@dataclass
class LoggingSpy:
    """Captures the configs handed to logging initialisation.

    The CLI initialises logging with the config-file layer, or with an empty
    config when no file was given or the file was rejected.

    Example:
        >>> spy = LoggingSpy()
        >>> spy.init_logging(Config({"lib_log_rich": {"environment": "test"}}, {}))
        >>> spy.configs[0].get("lib_log_rich.environment")
        'test'
    """

    configs: list[Config] = field(default_factory=_empty_config_list)

    def init_logging(self, config: Config) -> None:
        """Record ``config`` instead of starting the logging runtime."""
        self.configs.append(config)


__all__ = ["LoggingSpy", "init_logging_in_memory"]
