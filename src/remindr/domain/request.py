"""Validate an effective configuration and build the outbound request.

Rules are checked in a fixed order and the first violation aborts; no
partially built request ever leaves this module.
"""

from __future__ import annotations

from .errors import MissingFromAddressError, MissingHostError, MissingRecipientsError
from .fields import DEFAULT_BODY
from .models import Credential, EffectiveConfig, OutboundRequest


def compose_message(subject: str, body: str) -> bytes:
    r"""Assemble the raw message: a subject header, a blank line, the body.

    An empty body is replaced by the fixed reminder sentence. No trailing
    line terminator is added.

    Example:
        >>> compose_message("REMINDER", "")
        b'Subject: REMINDER\r\n\r\nThis is an automated reminder notification'
        >>> compose_message("Timesheets", "Due Friday")
        b'Subject: Timesheets\r\n\r\nDue Friday'
    """
    content = body if body else DEFAULT_BODY
    return f"Subject: {subject}\r\n\r\n{content}".encode()


def _resolve_credential(config: EffectiveConfig, user: str) -> Credential | None:
    # An empty password counts as "not configured".
    if not config.auth_password:
        return None
    return Credential(user=user, password=config.auth_password, host=config.smtp_host)


def build_request(config: EffectiveConfig) -> OutboundRequest:
    """Validate ``config`` and construct the request handed to the transport.

    Args:
        config: Merged configuration produced by the config resolver.

    Returns:
        Fully populated request.

    Raises:
        MissingFromAddressError: ``from_address`` is empty.
        MissingRecipientsError: ``to_addresses`` is empty.
        MissingHostError: ``smtp_host`` is empty.

    Example:
        >>> request = build_request(
        ...     EffectiveConfig(from_address="a@x.com", to_addresses=("b@x.com",), smtp_host="mail.x.com")
        ... )
        >>> request.server_address
        'mail.x.com:25'
        >>> request.credential is None
        True
    """
    if not config.from_address:
        raise MissingFromAddressError("a valid from address must be provided")

    user = config.auth_user or config.from_address

    if not config.to_addresses:
        raise MissingRecipientsError("at least 1 to address must be provided")

    if not config.smtp_host:
        raise MissingHostError("a valid SMTP host must be provided")

    return OutboundRequest(
        server_address=f"{config.smtp_host}:{config.smtp_port}",
        credential=_resolve_credential(config, user),
        from_address=config.from_address,
        to_addresses=tuple(config.to_addresses),
        message=compose_message(config.subject, config.body),
    )


__all__ = [
    "build_request",
    "compose_message",
]
