"""Adapters layer - infrastructure and framework integrations.

Contents:
    * :mod:`.config` - Config-file loading and layer resolution
    * :mod:`.email` - Reminder delivery via SMTP
    * :mod:`.logging` - Logging setup with lib_log_rich
    * :mod:`.memory` - In-memory adapters for tests
    * :mod:`.cli` - rich-click CLI integration
"""

from __future__ import annotations

__all__: list[str] = []
