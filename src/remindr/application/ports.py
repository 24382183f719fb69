"""Application ports: callable Protocol definitions for adapter functions.

Each Protocol class defines a ``__call__`` method whose signature matches
the corresponding adapter function, so module-level functions satisfy them
through structural subtyping (PEP 544).
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING, Protocol

from ..domain.models import OutboundRequest

if TYPE_CHECKING:
    from lib_layered_config import Config


class LoadConfigFile(Protocol):
    """Read the config file given on the command line into a Config."""

    def __call__(self, path: str | Path) -> Config: ...


class SendMail(Protocol):
    """Deliver one outbound request through the mail transport."""

    def __call__(self, request: OutboundRequest) -> None: ...


class InitLogging(Protocol):
    """Initialize lib_log_rich runtime with the provided configuration."""

    def __call__(self, config: Config) -> None: ...


__all__ = [
    "InitLogging",
    "LoadConfigFile",
    "SendMail",
]
