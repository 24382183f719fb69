"""Composition root wiring adapters to application ports."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from ..adapters.config.loader import load_config_file
from ..adapters.email.transport import send_mail
from ..adapters.logging.setup import init_logging

# Static conformance assertions: pyright verifies that each adapter function
# structurally satisfies its corresponding Protocol at type-check time.
if TYPE_CHECKING:
    from ..adapters.memory.email import MailSpy
    from ..application.ports import InitLogging, LoadConfigFile, SendMail

    _assert_load_config_file: LoadConfigFile = load_config_file
    _assert_send_mail: SendMail = send_mail
    _assert_init_logging: InitLogging = init_logging


@dataclass(frozen=True, slots=True)
class AppServices:
    """Frozen container holding all application port implementations."""

    load_config_file: LoadConfigFile
    send_mail: SendMail
    init_logging: InitLogging


def build_production() -> AppServices:
    """Wire production adapters into an AppServices container."""
    return AppServices(
        load_config_file=load_config_file,
        send_mail=send_mail,
        init_logging=init_logging,
    )


def build_testing(*, spy: MailSpy | None = None) -> AppServices:
    """Wire in-memory adapters into an AppServices container.

    Args:
        spy: Optional MailSpy capturing outbound requests. When None, a
            fresh MailSpy is created; pass your own to assert on it.

    Returns:
        AppServices container with in-memory adapters.
    """
    from ..adapters.memory import MailSpy, init_logging_in_memory, load_config_file_in_memory

    mail_spy = spy if spy is not None else MailSpy()

    return AppServices(
        load_config_file=load_config_file_in_memory,
        send_mail=mail_spy.send_mail,
        init_logging=init_logging_in_memory,
    )


__all__ = [
    "load_config_file",
    "send_mail",
    "init_logging",
    "AppServices",
    "build_production",
    "build_testing",
]
