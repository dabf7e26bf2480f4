"""Public package surface: greeter, build info, configuration.

Imports are routed through the architectural layers:
- Domain exports: Greeter, identity constants, pure formatting
- Composition exports: wired adapters (build info, configuration)
"""

from __future__ import annotations

# Composition exports (wired adapters)
from .composition import get_build_info, get_config, get_runtime_identity

# Domain exports
from .domain.behaviors import build_greeting, format_build_info
from .domain.errors import InvalidNameError
from .domain.greeter import Greeter
from .domain.identity import DEFAULT_NAME, VERSION, RuntimeIdentity

__all__ = [
    "DEFAULT_NAME",
    "VERSION",
    "Greeter",
    "InvalidNameError",
    "RuntimeIdentity",
    "build_greeting",
    "format_build_info",
    "get_build_info",
    "get_config",
    "get_runtime_identity",
]
