"""Platform adapter - host runtime and operating-system lookups.

Contents:
    * :func:`.runtime.get_runtime_identity` - Interpreter version and OS name
    * :func:`.runtime.get_build_info` - Build-info line for the current host
"""

from __future__ import annotations

from .runtime import get_build_info, get_runtime_identity

__all__ = ["get_build_info", "get_runtime_identity"]
