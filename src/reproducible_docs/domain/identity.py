"""Product identity constants and the host runtime identity value object."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Final

#: Name used when no custom name is supplied.
DEFAULT_NAME: Final[str] = "Reproducible Docs"

#: Product version embedded in greetings and build-info lines.
VERSION: Final[str] = "1.0.0"


@dataclass(frozen=True, slots=True)
class RuntimeIdentity:
    """Host runtime and operating-system identifiers.

    Both fields fall back to the empty string when the host cannot supply
    them, so formatting never has to deal with missing values.

    Attributes:
        runtime_version: Interpreter version string (e.g. ``"3.12.4"``).
        os_name: Operating-system name (e.g. ``"Linux"``).

    Example:
        >>> RuntimeIdentity(runtime_version="3.12.4", os_name="Linux").os_name
        'Linux'
        >>> RuntimeIdentity().runtime_version
        ''
    """

    runtime_version: str = ""
    os_name: str = ""


__all__ = [
    "DEFAULT_NAME",
    "VERSION",
    "RuntimeIdentity",
]
