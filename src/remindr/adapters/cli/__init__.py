"""CLI package providing the command-line interface.

Contents:
    * Root command from :mod:`.root`
    * Entry point from :mod:`.main`
    * Traceback state management from :mod:`.context`
    * Exit codes from :mod:`.exit_codes`
"""

from __future__ import annotations

from .constants import CLICK_CONTEXT_SETTINGS, TRACEBACK_SUMMARY_LIMIT, TRACEBACK_VERBOSE_LIMIT
from .context import (
    TracebackState,
    apply_traceback_preferences,
    restore_traceback_state,
    snapshot_traceback_state,
)
from .exit_codes import ExitCode
from .main import main
from .root import cli

__all__ = [
    # Constants
    "CLICK_CONTEXT_SETTINGS",
    "TRACEBACK_SUMMARY_LIMIT",
    "TRACEBACK_VERBOSE_LIMIT",
    "ExitCode",
    # Traceback management
    "TracebackState",
    "apply_traceback_preferences",
    "restore_traceback_state",
    "snapshot_traceback_state",
    # Root command
    "cli",
    # Entry point
    "main",
]
