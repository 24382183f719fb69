"""Root ``remindr`` command: resolve configuration, build and send the reminder.

One invocation performs exactly one send attempt. Every failure prints a
single ``Error:`` line on stderr and exits with
:attr:`~.exit_codes.ExitCode.GENERAL_ERROR`.

Contents:
    * :func:`cli` - The reminder command.
    * :func:`reminder_options` - Options generated from the field table.
"""

from __future__ import annotations

import functools
import logging
from collections.abc import Callable
from typing import TYPE_CHECKING, Any, NoReturn

import rich_click as click
from lib_layered_config import Config

from remindr import __init__conf__
from remindr.adapters.config import collect_cli_values, empty_config, merge_layers, resolve_config
from remindr.domain.errors import ConfigParseError, RequestValidationError, TransportError
from remindr.domain.fields import FIELDS, ConfigField
from remindr.domain.request import build_request

from .constants import CLICK_CONTEXT_SETTINGS
from .context import apply_traceback_preferences
from .exit_codes import ExitCode

if TYPE_CHECKING:
    from remindr.composition import AppServices

logger = logging.getLogger(__name__)


def _option_for(field: ConfigField) -> Callable[[Callable[..., Any]], Callable[..., Any]]:
    kwargs: dict[str, Any] = {"default": None, "help": field.help}
    if field.multiple:
        kwargs.update(multiple=True, default=())
    if field.is_int:
        kwargs["type"] = int
    return click.option(*field.flags, field.attr, **kwargs)


def reminder_options(func: Callable[..., Any]) -> Callable[..., Any]:
    """Apply one option per configurable field, with all of its aliases.

    Options default to ``None`` (or ``()`` when repeatable) so the resolver
    can tell supplied values from unset ones.
    """
    options = [_option_for(field) for field in FIELDS]
    return functools.reduce(lambda f, opt: opt(f), reversed(options), func)


def _fail(exc: Exception, log_message: str, user_message: str) -> NoReturn:
    """Log ``exc``, print one error line and exit with GENERAL_ERROR."""
    logger.error(log_message, extra={"error": str(exc), "error_type": type(exc).__name__})
    click.echo(f"Error: {user_message} - {exc}", err=True)
    raise SystemExit(ExitCode.GENERAL_ERROR)


def _load_file_layer(services: AppServices, config_file: str | None) -> Config:
    if not config_file:
        services.init_logging(empty_config())
        return empty_config()
    try:
        file_config = services.load_config_file(config_file)
    except ConfigParseError as exc:
        services.init_logging(empty_config())
        _fail(exc, "Config file rejected", "Configuration error")
    services.init_logging(file_config)
    return file_config


@click.command(
    __init__conf__.shell_command,
    help=__init__conf__.title,
    context_settings=CLICK_CONTEXT_SETTINGS,
)
@click.version_option(
    version=__init__conf__.version,
    prog_name=__init__conf__.shell_command,
    message=f"{__init__conf__.shell_command} version {__init__conf__.version}",
)
@click.option(
    "--traceback/--no-traceback",
    is_flag=True,
    default=False,
    help="Show full Python traceback on errors",
)
@reminder_options
@click.pass_context
def cli(ctx: click.Context, traceback: bool, **params: Any) -> None:
    """Send one reminder email built from the config file and command line.

    Example:
        >>> from click.testing import CliRunner
        >>> from remindr.composition import build_testing
        >>> result = CliRunner().invoke(
        ...     cli,
        ...     ["--from.address=a@x.com", "--to.addresses=b@x.com", "--smtp.host=mail.x.com"],
        ...     obj=build_testing,
        ... )
        >>> result.exit_code
        0
    """
    # ctx.obj is always the services factory (production or test)
    if not callable(ctx.obj):
        raise RuntimeError("Services factory not provided. This is a bug.")
    services: AppServices = ctx.obj()  # type: ignore[assignment]  # Click's obj is typed as Any
    apply_traceback_preferences(traceback)

    file_config = _load_file_layer(services, params.get("config_file"))
    cli_values = collect_cli_values(**params)

    try:
        effective = resolve_config(merge_layers(file_config, cli_values))
    except ConfigParseError as exc:
        _fail(exc, "Configuration rejected", "Configuration error")

    try:
        request = build_request(effective)
    except RequestValidationError as exc:
        _fail(exc, "Reminder settings rejected", "Invalid reminder settings")

    try:
        services.send_mail(request)
    except TransportError as exc:
        _fail(exc, "SMTP delivery failed", "Failed to send reminder")

    logger.info("Reminder sent via CLI", extra={"recipients": list(request.to_addresses)})
    click.echo(f"Reminder sent to {len(request.to_addresses)} recipient(s).")


__all__ = ["cli", "reminder_options"]
