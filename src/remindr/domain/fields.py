"""Canonical configuration fields, their command-line aliases and defaults.

Each field is known by one canonical name, the key used both on the command
line (``--smtp.host``) and in config files (``smtp.host``). Aliases are only
accepted on the command line.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Final

DEFAULT_SMTP_PORT: Final[int] = 25
DEFAULT_SUBJECT: Final[str] = "REMINDER"
DEFAULT_BODY: Final[str] = "This is an automated reminder notification"


@dataclass(frozen=True, slots=True)
class ConfigField:
    """One configurable value and the external names that reach it.

    Attributes:
        name: Canonical dotted name (``smtp.host``).
        attr: Python identifier the value travels under (``smtp_host``).
        aliases: Additional command-line names, without leading dashes.
        help: One-line description shown in ``--help``.
        multiple: Whether the option may repeat and collects a list.
        is_int: Whether the value is an integer.
    """

    name: str
    attr: str
    aliases: tuple[str, ...]
    help: str
    multiple: bool = False
    is_int: bool = False

    @property
    def flags(self) -> tuple[str, ...]:
        """Return every command-line spelling of this field.

        Example:
            >>> FIELDS_BY_NAME["config"].flags
            ('--config', '-c', '--cfg', '--confg')
        """
        return tuple(_as_flag(name) for name in (self.name, *self.aliases))


def _as_flag(name: str) -> str:
    return f"-{name}" if len(name) == 1 else f"--{name}"


FIELDS: Final[tuple[ConfigField, ...]] = (
    ConfigField("config", "config_file", ("c", "cfg", "confg"), "Optional path to a config file"),
    ConfigField(
        "user",
        "user",
        ("u",),
        "Auth username for the email server (uses the from address when not given)",
    ),
    ConfigField("password", "password", ("passwd", "p"), "Auth password for the email server"),
    ConfigField("from.address", "from_address", ("from-addr", "fa"), "Email address the reminder is sent from"),
    ConfigField(
        "to.addresses",
        "to_addresses",
        ("to-addrs", "ta"),
        "Email addresses to send the reminder to (repeatable or comma separated)",
        multiple=True,
    ),
    ConfigField("smtp.host", "smtp_host", ("sh", "host"), "Host of the email server"),
    ConfigField(
        "smtp.port",
        "smtp_port",
        ("sp", "port"),
        f"Port of the email server  [default: {DEFAULT_SMTP_PORT}]",
        is_int=True,
    ),
    ConfigField(
        "message.subject",
        "subject",
        ("s",),
        f"Subject of the reminder  [default: {DEFAULT_SUBJECT}]",
    ),
    ConfigField("message.body", "body", ("m",), "Reminder message to send"),
)

FIELDS_BY_NAME: Final[dict[str, ConfigField]] = {field.name: field for field in FIELDS}
FIELDS_BY_ATTR: Final[dict[str, ConfigField]] = {field.attr: field for field in FIELDS}


__all__ = [
    "DEFAULT_BODY",
    "DEFAULT_SMTP_PORT",
    "DEFAULT_SUBJECT",
    "FIELDS",
    "FIELDS_BY_ATTR",
    "FIELDS_BY_NAME",
    "ConfigField",
]
