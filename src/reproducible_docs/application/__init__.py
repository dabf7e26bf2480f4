"""Application layer - port definitions.

Contents:
    * :mod:`.ports` - Callable Protocols for configuration, logging and runtime lookups
"""

from __future__ import annotations

from .ports import GetConfig, GetRuntimeIdentity, InitLogging

__all__ = ["GetConfig", "GetRuntimeIdentity", "InitLogging"]
