"""In-memory mail transport for testing.

Contents:
    * :class:`MailSpy` - Captures send_mail calls for test assertions.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from remindr.domain.models import OutboundRequest


def _empty_request_list() -> list[OutboundRequest]:
    """Create an empty typed list for captured requests."""
    return []


@dataclass
class MailSpy:
    """Captures outbound requests instead of talking to an SMTP relay.

    Each test should create its own MailSpy instance to avoid cross-test
    pollution. :meth:`send_mail` matches the SendMail port.

    Attributes:
        sent: Requests handed to :meth:`send_mail`, in call order.
        raise_exception: When set, :meth:`send_mail` records the request and
            then raises this exception.

    Example:
        >>> spy = MailSpy()
        >>> spy.send_mail(OutboundRequest("mail.x.com:25", None, "a@x.com", ("b@x.com",), b"Subject: Hi\\r\\n\\r\\nx"))
        >>> len(spy.sent)
        1
    """

    sent: list[OutboundRequest] = field(default_factory=_empty_request_list)
    raise_exception: Exception | None = None

    def clear(self) -> None:
        """Reset captured data for the next test."""
        self.sent.clear()
        self.raise_exception = None

    def send_mail(self, request: OutboundRequest) -> None:
        """Record ``request``; raise the configured exception if any."""
        self.sent.append(request)
        if self.raise_exception is not None:
            raise self.raise_exception


__all__ = ["MailSpy"]
