"""Config-file loader producing the file layer of the configuration."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from pathlib import Path
from typing import Any, cast

import orjson
import rtoml
import yaml
from lib_layered_config import Config
from lib_layered_config.domain.config import SourceInfo

from remindr.domain.errors import ConfigParseError

logger = logging.getLogger(__name__)

#: Provenance layer name recorded for values read from ``--config``.
FILE_LAYER = "file"


def empty_config() -> Config:
    """Return a Config without any values, used when no file was given.

    Example:
        >>> empty_config().as_dict()
        {}
    """
    return Config({}, {})


def nest_dotted_keys(data: Mapping[str, Any]) -> dict[str, Any]:
    """Expand dotted keys into nested tables.

    Config files may spell a key as a quoted dotted name (``"smtp.host"``) or
    as a nested table (``[smtp] host``); both normalise to the same shape.

    Raises:
        ValueError: When a dotted key collides with a non-table value.

    Examples:
        >>> nest_dotted_keys({"smtp.host": "a", "smtp": {"port": 25}})
        {'smtp': {'host': 'a', 'port': 25}}
        >>> nest_dotted_keys({"user": "u"})
        {'user': 'u'}
    """
    result: dict[str, Any] = {}
    for key, value in data.items():
        *parents, leaf = str(key).split(".")
        node = result
        for part in parents:
            existing = node.setdefault(part, {})
            if not isinstance(existing, dict):
                raise ValueError(f"key {key!r} conflicts with non-table value at {part!r}")
            node = cast(dict[str, Any], existing)
        if isinstance(value, Mapping):
            nested = nest_dotted_keys(cast(Mapping[str, Any], value))
            existing = node.setdefault(leaf, {})
            if not isinstance(existing, dict):
                raise ValueError(f"key {key!r} conflicts with non-table value")
            _merge_into(cast(dict[str, Any], existing), nested, key=str(key))
        else:
            if isinstance(node.get(leaf), dict):
                raise ValueError(f"key {key!r} conflicts with table of the same name")
            node[leaf] = value
    return result


def _merge_into(target: dict[str, Any], source: dict[str, Any], *, key: str) -> None:
    for name, value in source.items():
        current = target.get(name)
        if isinstance(current, dict) and isinstance(value, dict):
            _merge_into(cast(dict[str, Any], current), cast(dict[str, Any], value), key=f"{key}.{name}")
        elif name in target:
            raise ValueError(f"key {key}.{name!s} is defined twice")
        else:
            target[name] = value


def _provenance(data: Mapping[str, Any], path: Path, prefix: str = "") -> dict[str, SourceInfo]:
    meta: dict[str, SourceInfo] = {}
    for key, value in data.items():
        dotted = f"{prefix}{key}"
        if isinstance(value, Mapping):
            meta.update(_provenance(cast(Mapping[str, Any], value), path, f"{dotted}."))
        else:
            meta[dotted] = {"layer": FILE_LAYER, "path": str(path), "key": dotted}
    return meta


_TOML_SUFFIXES = frozenset({".toml"})
_JSON_SUFFIXES = frozenset({".json"})


def _parse(text: str, path: Path) -> object:
    suffix = path.suffix.lower()
    if suffix in _JSON_SUFFIXES:
        return orjson.loads(text)
    if suffix in _TOML_SUFFIXES:
        return rtoml.loads(text)
    # YAML (.yaml, .yml or no suffix); an empty document holds no settings.
    parsed = yaml.safe_load(text)
    return {} if parsed is None else parsed


def load_config_file(path: str | Path) -> Config:
    """Read and parse the config file at ``path``.

    ``.toml`` files are parsed with rtoml and ``.json`` files with orjson;
    anything else (``.yaml``, ``.yml``, no suffix) is read as YAML. Keys
    are the canonical flag names.

    Args:
        path: Location of the config file as given on the command line.

    Returns:
        Config holding the file values, with per-key provenance.

    Raises:
        ConfigParseError: When the file cannot be read or parsed, or its
            top level is not a table.

    Example:
        >>> import tempfile
        >>> with tempfile.TemporaryDirectory() as tmp:
        ...     cfg_path = Path(tmp) / "remindr.toml"
        ...     _ = cfg_path.write_text('[smtp]\\nhost = "mail.example.com"\\n', encoding="utf-8")
        ...     load_config_file(cfg_path).get("smtp.host")
        'mail.example.com'
    """
    file_path = Path(path)
    try:
        text = file_path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise ConfigParseError(f"cannot read config file {file_path}: {exc}") from exc

    try:
        parsed = _parse(text, file_path)
    except (rtoml.TomlParsingError, yaml.YAMLError, ValueError) as exc:
        raise ConfigParseError(f"cannot parse config file {file_path}: {exc}") from exc

    if not isinstance(parsed, Mapping):
        raise ConfigParseError(f"config file {file_path} must contain a table of settings")

    try:
        data = nest_dotted_keys(cast(Mapping[str, Any], parsed))
    except ValueError as exc:
        raise ConfigParseError(f"invalid config file {file_path}: {exc}") from exc

    logger.debug("Loaded config file", extra={"path": str(file_path), "keys": sorted(data)})
    return Config(data, _provenance(data, file_path))


__all__ = [
    "FILE_LAYER",
    "empty_config",
    "load_config_file",
    "nest_dotted_keys",
]
