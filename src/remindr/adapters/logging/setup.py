"""Centralized logging initialization for all entry points.

Maps the optional ``[lib_log_rich]`` section of the config file onto a
lib_log_rich RuntimeConfig and bridges the standard ``logging`` module so
that every ``logging.getLogger(__name__)`` in the package reaches it.

Contents:
    * :func:`init_logging` - idempotent logging initialization.
"""

from __future__ import annotations

from typing import cast

import lib_log_rich.runtime
from lib_layered_config import Config
from pydantic import BaseModel, ConfigDict

from remindr import __init__conf__


class LoggingConfigModel(BaseModel):
    """Pydantic model for the [lib_log_rich] config section.

    Extra fields pass through to lib_log_rich.RuntimeConfig.

    Example:
        >>> LoggingConfigModel().environment
        'prod'
        >>> LoggingConfigModel(service="reminders").service
        'reminders'
    """

    service: str | None = None
    environment: str = "prod"

    model_config = ConfigDict(extra="allow")


def _build_runtime_config(config: Config) -> lib_log_rich.runtime.RuntimeConfig:
    """Build RuntimeConfig from the config-file layer.

    The service name defaults to the package name when not configured.
    """
    log_raw: object = config.get("lib_log_rich", default={})
    parsed = LoggingConfigModel.model_validate(cast("dict[str, object]", log_raw) if log_raw else {})
    extra_config = parsed.model_dump(exclude={"service", "environment"}, exclude_none=True)

    return lib_log_rich.runtime.RuntimeConfig(
        service=parsed.service or __init__conf__.name,
        environment=parsed.environment,
        **extra_config,
    )


def init_logging(config: Config) -> None:
    """Initialize the lib_log_rich runtime once per process.

    Args:
        config: Config-file layer; only its ``[lib_log_rich]`` section is read.

    Side Effects:
        Initializes the global lib_log_rich runtime on first invocation and
        attaches standard logging to it. Later calls return immediately.

    Example:
        >>> from lib_layered_config import Config
        >>> init_logging(Config({"lib_log_rich": {"environment": "test"}}, {}))  # doctest: +SKIP
    """
    if lib_log_rich.runtime.is_initialised():
        return
    lib_log_rich.runtime.init(_build_runtime_config(config))
    lib_log_rich.runtime.attach_std_logging()


__all__ = [
    "LoggingConfigModel",
    "init_logging",
]
