"""Exit codes for CLI error paths.

Every reminder failure (config file, validation, transport) exits with
:attr:`ExitCode.GENERAL_ERROR`. Usage errors detected by Click itself keep
Click's own code.
"""

from __future__ import annotations

from enum import IntEnum


class ExitCode(IntEnum):
    """Exit codes used by this application.

    Example:
        >>> int(ExitCode.GENERAL_ERROR)
        1
    """

    SUCCESS = 0
    GENERAL_ERROR = 1
    USAGE_ERROR = 2


__all__ = ["ExitCode"]
