"""Composition root and in-memory adapter stories."""

from __future__ import annotations

import pytest

from remindr.adapters.email import send_mail as smtp_send_mail
from remindr.adapters.memory import MailSpy, init_logging_in_memory, load_config_file_in_memory
from remindr.composition import AppServices, build_production, build_testing
from remindr.domain.errors import TransportError
from remindr.domain.models import OutboundRequest


def _request() -> OutboundRequest:
    return OutboundRequest("mail.x.com:25", None, "a@x.com", ("b@x.com",), b"Subject: REMINDER\r\n\r\n")


@pytest.mark.os_agnostic
def test_build_production_wires_the_smtp_transport() -> None:
    """Production services talk to a real relay."""
    services = build_production()

    assert services.send_mail is smtp_send_mail


@pytest.mark.os_agnostic
def test_build_testing_uses_in_memory_adapters() -> None:
    """Test services never touch the network, filesystem or logging runtime."""
    services = build_testing()

    assert services.load_config_file is load_config_file_in_memory
    assert services.init_logging is init_logging_in_memory


@pytest.mark.os_agnostic
def test_build_testing_routes_sends_to_the_given_spy() -> None:
    """A supplied spy captures every request."""
    spy = MailSpy()
    services = build_testing(spy=spy)

    services.send_mail(_request())

    assert spy.sent == [_request()]


@pytest.mark.os_agnostic
def test_app_services_is_frozen() -> None:
    """Wiring cannot be swapped after construction."""
    services = build_testing()

    with pytest.raises(AttributeError):
        services.send_mail = smtp_send_mail  # type: ignore[misc]


@pytest.mark.os_agnostic
def test_mail_spy_records_then_raises_configured_exception() -> None:
    """A failing spy behaves like a failed transport."""
    spy = MailSpy(raise_exception=TransportError("Connection refused"))

    with pytest.raises(TransportError, match="Connection refused"):
        spy.send_mail(_request())

    assert spy.sent == [_request()]


@pytest.mark.os_agnostic
def test_mail_spy_clear_forgets_captured_requests() -> None:
    spy = MailSpy()
    spy.send_mail(_request())

    spy.clear()

    assert spy.sent == []


@pytest.mark.os_agnostic
def test_in_memory_loader_returns_empty_config() -> None:
    assert load_config_file_in_memory("ignored.toml").as_dict() == {}


@pytest.mark.os_agnostic
def test_app_services_accepts_custom_callables() -> None:
    """Any callables matching the ports can be wired."""
    spy = MailSpy()
    services = AppServices(
        load_config_file=load_config_file_in_memory,
        send_mail=spy.send_mail,
        init_logging=init_logging_in_memory,
    )

    services.send_mail(_request())

    assert len(spy.sent) == 1
