"""Application layer - port definitions.

Contents:
    * :mod:`.ports` - Callable Protocol definitions for adapter functions
"""

from __future__ import annotations

from .ports import InitLogging, LoadConfigFile, SendMail

__all__ = [
    "InitLogging",
    "LoadConfigFile",
    "SendMail",
]
