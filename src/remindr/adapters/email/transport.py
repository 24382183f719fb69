"""SMTP transport delivering an OutboundRequest in one transaction.

The raw message bytes are handed to the relay verbatim. Recipients are
all-or-nothing: when the relay refuses any of them the transaction is reset
before ``DATA`` so nobody receives the message.
"""

from __future__ import annotations

import ipaddress
import logging
import smtplib
import ssl
from typing import Final

from remindr.domain.errors import TransportError
from remindr.domain.models import OutboundRequest

logger = logging.getLogger(__name__)

#: Socket timeout in seconds for the whole SMTP conversation.
SMTP_TIMEOUT: Final[float] = 30.0

_ACCEPTED_RCPT_CODES: Final[frozenset[int]] = frozenset({250, 251})

_LOOPBACK_NAMES: Final[frozenset[str]] = frozenset({"localhost"})


def _sanitize_exception_message(exc: BaseException, request: OutboundRequest) -> str:
    """Return the exception text with the configured password scrubbed.

    Example:
        >>> from remindr.domain.models import Credential
        >>> req = OutboundRequest("h:25", Credential("u", "s3cret", "h"), "a@x.com", ("b@x.com",), b"")
        >>> _sanitize_exception_message(RuntimeError("login s3cret rejected"), req)
        'login [REDACTED] rejected'
        >>> _sanitize_exception_message(ConnectionRefusedError("Connection refused"), req)
        'Connection refused'
    """
    message = str(exc) or type(exc).__name__
    if request.credential is not None and request.credential.password:
        message = message.replace(request.credential.password, "[REDACTED]")
    return message


def _connect_host(request: OutboundRequest) -> str:
    # Bracketed IPv6 literals are passed to the socket layer without brackets.
    return request.host.strip("[]")


def _is_loopback(host: str) -> bool:
    """Return whether ``host`` names the local machine.

    Examples:
        >>> _is_loopback("localhost"), _is_loopback("127.0.0.1"), _is_loopback("::1")
        (True, True, True)
        >>> _is_loopback("mail.x.com"), _is_loopback("10.0.0.1")
        (False, False)
    """
    if host.lower() in _LOOPBACK_NAMES:
        return True
    try:
        return ipaddress.ip_address(host).is_loopback
    except ValueError:
        return False


def _deliver(client: smtplib.SMTP, request: OutboundRequest) -> None:
    client.ehlo()
    encrypted = False
    if client.has_extn("starttls"):
        client.starttls(context=ssl.create_default_context())
        client.ehlo()
        encrypted = True

    if request.credential is not None:
        # Credentials only travel over TLS or to the local machine.
        if not encrypted and not _is_loopback(_connect_host(request)):
            raise smtplib.SMTPNotSupportedError("unencrypted connection")
        client.login(request.credential.user, request.credential.password)

    code, response = client.mail(request.from_address)
    if code != 250:
        client.rset()
        raise smtplib.SMTPSenderRefused(code, response, request.from_address)

    refused: dict[str, tuple[int, bytes]] = {}
    for recipient in request.to_addresses:
        code, response = client.rcpt(recipient)
        if code not in _ACCEPTED_RCPT_CODES:
            refused[recipient] = (code, response)
    if refused:
        client.rset()
        raise smtplib.SMTPRecipientsRefused(refused)

    code, response = client.data(request.message)
    if code != 250:
        client.rset()
        raise smtplib.SMTPDataError(code, response)


def send_mail(request: OutboundRequest) -> None:
    """Deliver ``request`` to its SMTP relay.

    Opens a connection to ``request.server_address``, upgrades to TLS when the
    relay offers STARTTLS, authenticates when a credential is attached and
    submits the raw message to every recipient.

    Args:
        request: Validated request from the request builder.

    Raises:
        TransportError: Connection, TLS, authentication or SMTP command
            failure, a credential over an unencrypted link to a remote
            relay, or an address smtplib cannot encode. The password never
            appears in the message.

    Side Effects:
        Network I/O. Logs the attempt at INFO and failures at ERROR.
    """
    logger.info(
        "Sending reminder",
        extra={
            "server": request.server_address,
            "sender": request.from_address,
            "recipients": list(request.to_addresses),
            "authenticated": request.credential is not None,
        },
    )

    try:
        with smtplib.SMTP(_connect_host(request), request.port, timeout=SMTP_TIMEOUT) as client:
            _deliver(client, request)
    except (smtplib.SMTPException, OSError, UnicodeError) as exc:
        message = _sanitize_exception_message(exc, request)
        logger.error(
            "SMTP delivery failed",
            extra={"server": request.server_address, "error": message, "error_type": type(exc).__name__},
        )
        raise TransportError(message) from exc

    logger.info("email sent...", extra={"server": request.server_address, "recipients": list(request.to_addresses)})


__all__ = [
    "SMTP_TIMEOUT",
    "send_mail",
]
