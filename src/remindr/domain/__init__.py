"""Domain layer - pure business logic with no I/O or framework dependencies.

Contents:
    * :mod:`.fields` - Canonical field table, aliases and defaults
    * :mod:`.models` - Effective configuration and outbound request value objects
    * :mod:`.request` - Request validation and message assembly
    * :mod:`.errors` - Domain exception types
"""

from __future__ import annotations

from .errors import (
    ConfigParseError,
    MissingFromAddressError,
    MissingHostError,
    MissingRecipientsError,
    RemindrError,
    RequestValidationError,
    TransportError,
)
from .fields import DEFAULT_BODY, DEFAULT_SMTP_PORT, DEFAULT_SUBJECT, FIELDS, ConfigField
from .models import Credential, EffectiveConfig, OutboundRequest
from .request import build_request, compose_message

__all__ = [
    # Fields
    "DEFAULT_BODY",
    "DEFAULT_SMTP_PORT",
    "DEFAULT_SUBJECT",
    "FIELDS",
    "ConfigField",
    # Models
    "Credential",
    "EffectiveConfig",
    "OutboundRequest",
    # Behaviors
    "build_request",
    "compose_message",
    # Errors
    "ConfigParseError",
    "MissingFromAddressError",
    "MissingHostError",
    "MissingRecipientsError",
    "RemindrError",
    "RequestValidationError",
    "TransportError",
]
