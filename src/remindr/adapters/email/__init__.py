"""Email adapter - SMTP delivery of reminder requests.

Contents:
    * :func:`.transport.send_mail` - Deliver an OutboundRequest over SMTP
"""

from __future__ import annotations

from .transport import send_mail

__all__ = ["send_mail"]
