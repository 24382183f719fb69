"""Configuration adapter - config-file loading and layer resolution.

Contents:
    * :mod:`.loader` - Config file parsing into a lib_layered_config Config
    * :mod:`.resolver` - Merging file and command-line layers into an EffectiveConfig
"""

from __future__ import annotations

from .loader import empty_config, load_config_file
from .resolver import RawConfig, collect_cli_values, merge_layers, resolve_config

__all__ = [
    "RawConfig",
    "collect_cli_values",
    "empty_config",
    "load_config_file",
    "merge_layers",
    "resolve_config",
]
