"""Static package metadata shared by the CLI, logging and packaging checks."""

from __future__ import annotations

#: Distribution and import name.
name = "remindr"
#: One-line description shown as CLI help.
title = "Notify people to do their timesheets"
#: Package version; keep in sync with pyproject.toml.
version = "1.0.0"
#: Console script name.
shell_command = "remindr"

__all__ = [
    "name",
    "shell_command",
    "title",
    "version",
]
