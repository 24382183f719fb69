"""Shared pytest fixtures for CLI, resolver and transport tests.

Centralizes test infrastructure:
- All shared fixtures live here
- Tests import fixtures implicitly via pytest's conftest discovery
- Fixtures use descriptive names that read as plain English
"""

from __future__ import annotations

import re
from collections.abc import Callable, Iterator
from dataclasses import dataclass, fields
from pathlib import Path
from typing import TYPE_CHECKING, Any
from unittest.mock import MagicMock, patch

import lib_cli_exit_tools
import orjson
import pytest
from click.testing import CliRunner

if TYPE_CHECKING:
    from remindr.adapters.memory.email import MailSpy
    from remindr.composition import AppServices

ANSI_ESCAPE_PATTERN = re.compile(r"\x1B\[[0-?]*[ -/]*[@-~]")
CONFIG_FIELDS: tuple[str, ...] = tuple(field.name for field in fields(type(lib_cli_exit_tools.config)))

#: Minimal flags that pass every validation rule.
VALID_FLAGS: tuple[str, ...] = (
    "--from.address=a@x.com",
    "--to.addresses=b@x.com",
    "--smtp.host=mail.x.com",
)


def _remove_ansi_codes(text: str) -> str:
    """Return *text* stripped of ANSI escape sequences."""
    return ANSI_ESCAPE_PATTERN.sub("", text)


def _snapshot_cli_config() -> dict[str, object]:
    """Capture every attribute from ``lib_cli_exit_tools.config``."""
    return {name: getattr(lib_cli_exit_tools.config, name) for name in CONFIG_FIELDS}


def _restore_cli_config(snapshot: dict[str, object]) -> None:
    """Reapply a configuration snapshot captured by ``_snapshot_cli_config``."""
    for name, value in snapshot.items():
        setattr(lib_cli_exit_tools.config, name, value)


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a fresh CliRunner per test.

    Use ``result.stdout`` and ``result.stderr`` separately: errors are
    printed on stderr, the success line on stdout.
    """
    return CliRunner()


@pytest.fixture
def valid_flags() -> tuple[str, ...]:
    """Return command-line flags that satisfy every validation rule."""
    return VALID_FLAGS


@pytest.fixture
def strip_ansi() -> Callable[[str], str]:
    """Return a helper that strips ANSI escape sequences from a string."""

    def _strip(value: str) -> str:
        return _remove_ansi_codes(value)

    return _strip


@pytest.fixture
def managed_traceback_state() -> Iterator[None]:
    """Reset traceback flags to a known baseline and restore after the test.

    Use this whenever a test reads or mutates the global
    ``lib_cli_exit_tools.config`` traceback flags.
    """
    lib_cli_exit_tools.reset_config()
    lib_cli_exit_tools.config.traceback = False
    lib_cli_exit_tools.config.traceback_force_color = False
    snapshot = _snapshot_cli_config()
    try:
        yield
    finally:
        _restore_cli_config(snapshot)


@pytest.fixture
def write_toml(tmp_path: Path) -> Callable[[str], Path]:
    """Return a helper writing TOML text to a fresh config file.

    Example:
        def test_host(write_toml: Callable[[str], Path]) -> None:
            path = write_toml('[smtp]\\nhost = "file-host.com"\\n')
    """

    def _write(text: str, name: str = "remindr.toml") -> Path:
        path = tmp_path / name
        path.write_text(text, encoding="utf-8")
        return path

    return _write


@pytest.fixture
def write_json(tmp_path: Path) -> Callable[[dict[str, Any]], Path]:
    """Return a helper serialising a dict to a JSON config file."""

    def _write(data: dict[str, Any], name: str = "remindr.json") -> Path:
        path = tmp_path / name
        path.write_bytes(orjson.dumps(data))
        return path

    return _write


@pytest.fixture
def write_yaml(tmp_path: Path) -> Callable[[str], Path]:
    """Return a helper writing YAML text to a fresh config file."""

    def _write(text: str, name: str = "remindr.yaml") -> Path:
        path = tmp_path / name
        path.write_text(text, encoding="utf-8")
        return path

    return _write


@pytest.fixture
def smtp_client() -> Iterator[MagicMock]:
    """Patch smtplib.SMTP and yield the client used inside the ``with`` block.

    The client accepts every command and offers no extensions; the patched
    class is reachable as ``client.smtp_class``.
    """
    client = MagicMock()
    client.__enter__.return_value = client
    client.__exit__.return_value = False
    client.has_extn.return_value = False
    client.mail.return_value = (250, b"OK")
    client.rcpt.return_value = (250, b"OK")
    client.data.return_value = (250, b"queued")
    with patch("smtplib.SMTP", return_value=client) as smtp_class:
        client.smtp_class = smtp_class
        yield client

@dataclass
class MailCliContext:
    """Container for CLI test setup.

    Attributes:
        factory: Callable that returns wired AppServices for CLI invocation.
        spy: MailSpy instance for asserting on captured requests.
    """

    factory: Callable[[], Any]
    spy: MailSpy


@pytest.fixture
def mail_cli_context() -> Callable[[], MailCliContext]:
    """Create a CLI context that reads real config files but captures mail.

    The config-file loader stays the production one so ``--config`` is
    exercised end to end; only the SMTP transport and logging runtime are
    replaced by in-memory adapters.

    Example:
        def test_send(cli_runner: CliRunner, mail_cli_context: Callable[[], MailCliContext]) -> None:
            ctx = mail_cli_context()
            result = cli_runner.invoke(cli, [...], obj=ctx.factory)
            assert ctx.spy.sent[0].server_address == "mail.x.com:25"
    """
    from remindr.adapters.memory import MailSpy as MailSpyImpl
    from remindr.adapters.memory import init_logging_in_memory
    from remindr.composition import AppServices, build_production

    def _create() -> MailCliContext:
        spy = MailSpyImpl()
        prod = build_production()
        services = AppServices(
            load_config_file=prod.load_config_file,
            send_mail=spy.send_mail,
            init_logging=init_logging_in_memory,
        )
        return MailCliContext(factory=lambda: services, spy=spy)

    return _create


@pytest.fixture
def inject_test_services() -> Callable[[], Callable[[], AppServices]]:
    """Return the build_testing factory for full in-memory testing."""
    from remindr.composition import build_testing

    def _inject() -> Callable[[], AppServices]:
        return build_testing

    return _inject


@pytest.fixture
def smtp_cli_context(smtp_client: MagicMock) -> Callable[[], Any]:
    """Return a services factory that runs the real SMTP transport.

    Pair with ``smtp_client`` to script relay replies; config files and
    logging behave as in ``mail_cli_context``.
    """
    from remindr.adapters.memory import init_logging_in_memory
    from remindr.composition import AppServices, build_production

    prod = build_production()
    services = AppServices(
        load_config_file=prod.load_config_file,
        send_mail=prod.send_mail,
        init_logging=init_logging_in_memory,
    )
    return lambda: services
