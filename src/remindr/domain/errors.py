"""Domain-specific exceptions for typed error handling at boundaries."""

from __future__ import annotations


class RemindrError(Exception):
    """Base class for every failure that aborts a reminder invocation."""


class ConfigParseError(RemindrError):
    """Config file missing, unreadable, malformed, or holding mistyped values.

    Example:
        >>> err = ConfigParseError("cannot parse reminder.toml")
        >>> str(err)
        'cannot parse reminder.toml'
    """


class RequestValidationError(RemindrError, ValueError):
    """Effective configuration violates a required-field rule.

    Inherits from ValueError so generic ``except ValueError`` handlers at
    the CLI boundary still catch it.
    """


class MissingFromAddressError(RequestValidationError):
    """No sender address was configured.

    Example:
        >>> isinstance(MissingFromAddressError("x"), ValueError)
        True
    """


class MissingRecipientsError(RequestValidationError):
    """No recipient address was configured."""


class MissingHostError(RequestValidationError):
    """No SMTP host was configured."""


class TransportError(RemindrError):
    """The SMTP relay refused or failed the send attempt.

    Example:
        >>> err = TransportError("Connection refused by mail.example.com:25")
        >>> str(err)
        'Connection refused by mail.example.com:25'
    """


__all__ = [
    "ConfigParseError",
    "MissingFromAddressError",
    "MissingHostError",
    "MissingRecipientsError",
    "RemindrError",
    "RequestValidationError",
    "TransportError",
]
