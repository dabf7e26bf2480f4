"""Domain layer - pure business logic with no I/O or framework dependencies.

Contents:
    * :mod:`.identity` - Product identity constants and RuntimeIdentity
    * :mod:`.behaviors` - Greeting and build-info formatting
    * :mod:`.greeter` - The Greeter entity
    * :mod:`.errors` - Domain exception types
"""

from __future__ import annotations

from .behaviors import (
    BUILD_INFO_TEMPLATE,
    GREETING_TEMPLATE,
    build_greeting,
    format_build_info,
)
from .errors import InvalidNameError
from .greeter import NAME_REQUIRED_MESSAGE, Greeter
from .identity import DEFAULT_NAME, VERSION, RuntimeIdentity

__all__ = [
    # Identity
    "DEFAULT_NAME",
    "VERSION",
    "RuntimeIdentity",
    # Behaviors
    "BUILD_INFO_TEMPLATE",
    "GREETING_TEMPLATE",
    "build_greeting",
    "format_build_info",
    # Entities
    "NAME_REQUIRED_MESSAGE",
    "Greeter",
    # Errors
    "InvalidNameError",
]
