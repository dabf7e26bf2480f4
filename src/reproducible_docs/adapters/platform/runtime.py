"""Host runtime lookups backing the build-info line.

Reads the interpreter version and operating-system name from the
:mod:`platform` module on every call. A lookup the host cannot answer
degrades to the empty string; the build-info line is still produced.

Contents:
    * :func:`get_runtime_identity` - Current :class:`RuntimeIdentity`.
    * :func:`get_build_info` - Formatted build-info line for this host.
"""

from __future__ import annotations

import logging
import platform
from collections.abc import Callable

from reproducible_docs.domain.behaviors import format_build_info
from reproducible_docs.domain.identity import RuntimeIdentity

logger = logging.getLogger(__name__)


def _lookup(field: str, probe: Callable[[], str]) -> str:
    """Return ``probe()`` or the empty string when the host cannot answer."""
    try:
        value = probe()
    except (OSError, ValueError) as exc:
        logger.debug("Runtime lookup unavailable", extra={"field": field, "error": str(exc)})
        return ""
    return value or ""


def get_runtime_identity() -> RuntimeIdentity:
    """Read the interpreter version and OS name from the host.

    Example:
        >>> identity = get_runtime_identity()
        >>> identity.runtime_version == platform.python_version()
        True
    """
    return RuntimeIdentity(
        runtime_version=_lookup("runtime_version", platform.python_version),
        os_name=_lookup("os_name", platform.system),
    )


def get_build_info() -> str:
    """Return the build-info line for the current host.

    Example:
        >>> get_build_info().startswith("Build Info: Reproducible Docs v1.0.0 | Java ")
        True
    """
    return format_build_info(get_runtime_identity())


__all__ = [
    "get_build_info",
    "get_runtime_identity",
]
