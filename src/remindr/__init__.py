"""Public package surface for building and sending reminder emails.

- Domain exports: request validation and message assembly
- Adapter exports: configuration resolution
"""

from __future__ import annotations

# Adapter exports
from .adapters.config import collect_cli_values, load_config_file, merge_layers, resolve_config

# Domain exports
from .domain import (
    EffectiveConfig,
    OutboundRequest,
    build_request,
    compose_message,
)

__all__ = [
    "EffectiveConfig",
    "OutboundRequest",
    "build_request",
    "collect_cli_values",
    "compose_message",
    "load_config_file",
    "merge_layers",
    "resolve_config",
]
