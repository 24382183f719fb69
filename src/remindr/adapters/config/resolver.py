"""Merge the file layer with command-line values into an EffectiveConfig.

Precedence is file < command line. Only values the invoker actually
supplied on the command line override the file; defaults are applied after
the merge so that a default never masks a file value.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any, cast

from lib_layered_config import Config
from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from remindr.domain.errors import ConfigParseError
from remindr.domain.fields import DEFAULT_SMTP_PORT, DEFAULT_SUBJECT, FIELDS, FIELDS_BY_ATTR
from remindr.domain.models import EffectiveConfig

from .loader import nest_dotted_keys

logger = logging.getLogger(__name__)


def _split_addresses(value: str) -> list[str]:
    return [part.strip() for part in value.split(",") if part.strip()]


class RawConfig(BaseModel):
    """Values gathered from one or more sources, each optionally present.

    Field aliases are the canonical dotted names so that config documents and
    command-line overrides validate through the same model.

    Example:
        >>> raw = RawConfig.model_validate({"smtp.host": "mail.x.com", "to.addresses": "a@x.com, b@x.com"})
        >>> raw.smtp_host, raw.to_addresses
        ('mail.x.com', ('a@x.com', 'b@x.com'))
        >>> raw.smtp_port is None
        True
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="ignore")

    config_file: str | None = Field(default=None, alias="config")
    user: str | None = None
    password: str | None = None
    from_address: str | None = Field(default=None, alias="from.address")
    to_addresses: tuple[str, ...] | None = Field(default=None, alias="to.addresses")
    smtp_host: str | None = Field(default=None, alias="smtp.host")
    smtp_port: int | None = Field(default=None, alias="smtp.port")
    subject: str | None = Field(default=None, alias="message.subject")
    body: str | None = Field(default=None, alias="message.body")

    @field_validator("to_addresses", mode="before")
    @classmethod
    def _split_address_lists(cls, v: Any) -> Any:
        """Accept a single string or a list, splitting entries on commas.

        Examples:
            >>> RawConfig._split_address_lists("a@x.com,b@x.com")
            ['a@x.com', 'b@x.com']
            >>> RawConfig._split_address_lists(["a@x.com", "b@x.com, c@x.com"])
            ['a@x.com', 'b@x.com', 'c@x.com']
            >>> RawConfig._split_address_lists("")
            []
        """
        if isinstance(v, str):
            return _split_addresses(v)
        if isinstance(v, (list, tuple)):
            items = cast(list[Any], list(v))
            result: list[Any] = []
            for item in items:
                if isinstance(item, str):
                    result.extend(_split_addresses(item))
                else:
                    result.append(item)
            return result
        return v

    def to_effective(self) -> EffectiveConfig:
        """Apply post-merge defaults and return the effective configuration.

        ``auth_user`` stays ``None`` when unset; it depends on the sender
        address and is resolved when the request is built.

        Example:
            >>> RawConfig().to_effective().subject
            'REMINDER'
        """
        return EffectiveConfig(
            config_file=self.config_file or None,
            auth_user=self.user or None,
            auth_password=self.password,
            from_address=self.from_address or "",
            to_addresses=self.to_addresses or (),
            smtp_host=self.smtp_host or "",
            smtp_port=self.smtp_port if self.smtp_port is not None else DEFAULT_SMTP_PORT,
            subject=self.subject or DEFAULT_SUBJECT,
            body=self.body or "",
        )


def collect_cli_values(**params: Any) -> dict[str, Any]:
    """Keep the command-line values the invoker supplied, keyed by canonical name.

    Unset options arrive as ``None`` (or an empty tuple for repeatable ones)
    and are dropped so they cannot mask file values. Tuples become lists.
    Unknown parameter names are ignored.

    Examples:
        >>> collect_cli_values(smtp_host="cli-host.com", smtp_port=None, to_addresses=())
        {'smtp.host': 'cli-host.com'}
        >>> collect_cli_values(to_addresses=("a@x.com",), password="")
        {'password': '', 'to.addresses': ['a@x.com']}
    """
    result: dict[str, Any] = {}
    for attr, value in sorted(params.items()):
        field = FIELDS_BY_ATTR.get(attr)
        if field is None or value is None or value == ():
            continue
        if isinstance(value, tuple):
            result[field.name] = list(cast(tuple[Any, ...], value))
        else:
            result[field.name] = value
    return result


def merge_layers(file_config: Config, cli_values: Mapping[str, Any]) -> Config:
    """Deep-merge command-line values on top of the file layer.

    Args:
        file_config: Values read from ``--config`` (or an empty Config).
        cli_values: Output of :func:`collect_cli_values`.

    Returns:
        New Config with command-line values winning, or ``file_config``
        itself when nothing was supplied on the command line.

    Example:
        >>> base = Config({"smtp": {"host": "file-host.com", "port": 2525}}, {})
        >>> merged = merge_layers(base, {"smtp.host": "cli-host.com"})
        >>> merged.get("smtp.host"), merged.get("smtp.port")
        ('cli-host.com', 2525)
    """
    if not cli_values:
        return file_config
    return file_config.with_overrides(nest_dotted_keys(cli_values))


def _format_validation_error(exc: ValidationError) -> str:
    parts: list[str] = []
    for error in exc.errors():
        location = ".".join(str(part) for part in error["loc"])
        parts.append(f"{location}: {error['msg']}")
    return "; ".join(parts)


def resolve_config(merged: Config) -> EffectiveConfig:
    """Validate the merged layers and apply defaults.

    Args:
        merged: Output of :func:`merge_layers`.

    Returns:
        Effective configuration; required fields are not checked here.

    Raises:
        ConfigParseError: When a value has the wrong type, e.g. a
            non-integer ``smtp.port`` in the config file.

    Example:
        >>> effective = resolve_config(Config({"smtp": {"host": "mail.x.com"}}, {}))
        >>> effective.smtp_host, effective.smtp_port
        ('mail.x.com', 25)
    """
    values = {field.name: merged.get(field.name, default=None) for field in FIELDS}
    present = {name: value for name, value in values.items() if value is not None}
    try:
        raw = RawConfig.model_validate(present)
    except ValidationError as exc:
        raise ConfigParseError(f"invalid configuration value - {_format_validation_error(exc)}") from exc

    effective = raw.to_effective()
    logger.debug(
        "Resolved configuration",
        extra={
            "config_file": effective.config_file,
            "from_address": effective.from_address,
            "recipients": list(effective.to_addresses),
            "smtp_host": effective.smtp_host,
            "smtp_port": effective.smtp_port,
            "has_password": bool(effective.auth_password),
        },
    )
    return effective


__all__ = [
    "RawConfig",
    "collect_cli_values",
    "merge_layers",
    "resolve_config",
]
