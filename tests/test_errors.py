"""Domain error types: hierarchy and message preservation."""

from __future__ import annotations

import pytest

from remindr.domain.errors import (
    ConfigParseError,
    MissingFromAddressError,
    MissingHostError,
    MissingRecipientsError,
    RemindrError,
    RequestValidationError,
    TransportError,
)


@pytest.mark.os_agnostic
def test_config_parse_error_preserves_message() -> None:
    """Instantiation stores the message for display."""
    exc = ConfigParseError("cannot parse config file remindr.toml")
    assert str(exc) == "cannot parse config file remindr.toml"


@pytest.mark.os_agnostic
def test_transport_error_preserves_message() -> None:
    """Instantiation stores the SMTP failure detail."""
    exc = TransportError("Connection refused")
    assert str(exc) == "Connection refused"


@pytest.mark.os_agnostic
@pytest.mark.parametrize("error_type", [MissingFromAddressError, MissingRecipientsError, MissingHostError])
def test_every_missing_field_error_is_a_request_validation_error(error_type: type[Exception]) -> None:
    """Each required-field failure shares one base the CLI can catch."""
    assert issubclass(error_type, RequestValidationError)


@pytest.mark.os_agnostic
def test_request_validation_error_is_value_error() -> None:
    """Validation failures are ValueErrors for generic handlers."""
    with pytest.raises(ValueError, match="from address"):
        raise MissingFromAddressError("a valid from address must be provided")


@pytest.mark.os_agnostic
@pytest.mark.parametrize("error_type", [ConfigParseError, RequestValidationError, TransportError])
def test_every_failure_derives_from_remindr_error(error_type: type[Exception]) -> None:
    """One base class covers every fatal failure."""
    assert issubclass(error_type, RemindrError)
