"""Immutable value objects flowing from configuration to the transport."""

from __future__ import annotations

from dataclasses import dataclass, field

from .fields import DEFAULT_SMTP_PORT, DEFAULT_SUBJECT


@dataclass(frozen=True, slots=True)
class EffectiveConfig:
    """Merged and defaulted configuration for one invocation.

    Every field holds a value or its absent state: ``None`` for the
    optional credentials and config path, ``""`` for missing strings and an
    empty tuple for missing recipients. ``auth_user`` is left ``None`` when
    not supplied; the request builder defaults it to ``from_address``.

    Example:
        >>> cfg = EffectiveConfig(from_address="ops@example.com")
        >>> (cfg.smtp_port, cfg.subject, cfg.auth_user)
        (25, 'REMINDER', None)
    """

    config_file: str | None = None
    auth_user: str | None = None
    auth_password: str | None = field(default=None, repr=False)
    from_address: str = ""
    to_addresses: tuple[str, ...] = ()
    smtp_host: str = ""
    smtp_port: int = DEFAULT_SMTP_PORT
    subject: str = DEFAULT_SUBJECT
    body: str = ""


@dataclass(frozen=True, slots=True)
class Credential:
    """Plain username/password pair bound to the SMTP host it is meant for.

    Example:
        >>> cred = Credential(user="ops@example.com", password="hunter2", host="mail.example.com")
        >>> "hunter2" in repr(cred)
        False
    """

    user: str
    password: str
    host: str

    def __repr__(self) -> str:
        return f"Credential(user={self.user!r}, password='[REDACTED]', host={self.host!r})"


@dataclass(frozen=True, slots=True)
class OutboundRequest:
    """Validated, ready-to-send reminder.

    Attributes:
        server_address: ``host:port`` of the SMTP relay.
        credential: Present only when a password was configured.
        from_address: Envelope sender.
        to_addresses: Envelope recipients, never empty.
        message: Raw message bytes handed to the relay verbatim.
    """

    server_address: str
    credential: Credential | None
    from_address: str
    to_addresses: tuple[str, ...]
    message: bytes

    @property
    def host(self) -> str:
        """Host part of :attr:`server_address`.

        Example:
            >>> OutboundRequest("mail.x.com:25", None, "a@x.com", ("b@x.com",), b"").host
            'mail.x.com'
        """
        return self.server_address.rpartition(":")[0]

    @property
    def port(self) -> int:
        """Port part of :attr:`server_address`."""
        return int(self.server_address.rpartition(":")[2])


__all__ = [
    "Credential",
    "EffectiveConfig",
    "OutboundRequest",
]
