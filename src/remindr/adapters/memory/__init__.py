"""In-memory adapter implementations for testing.

Provides lightweight implementations of all application ports that operate
entirely in memory -- no filesystem, no SMTP, no logging framework.

Contents:
    * :mod:`.config` - In-memory config-file loader
    * :mod:`.email` - In-memory mail transport (MailSpy class)
    * :mod:`.logging` - No-op logging adapter and LoggingSpy
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from .config import load_config_file_in_memory
from .email import MailSpy
from .logging import LoggingSpy, init_logging_in_memory

# Static conformance assertions
if TYPE_CHECKING:
    from remindr.application.ports import InitLogging, LoadConfigFile, SendMail

    _assert_load_config_file: LoadConfigFile = load_config_file_in_memory
    _assert_send_mail: SendMail = MailSpy().send_mail
    _assert_init_logging: InitLogging = init_logging_in_memory
    _assert_logging_spy: InitLogging = LoggingSpy().init_logging

__all__ = [
    "LoggingSpy",
    "MailSpy",
    "init_logging_in_memory",
    "load_config_file_in_memory",
]
