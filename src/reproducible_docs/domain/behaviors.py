"""Pure domain functions with no I/O or framework dependencies."""

from __future__ import annotations

from typing import Final

from .identity import DEFAULT_NAME, VERSION, RuntimeIdentity

GREETING_TEMPLATE: Final[str] = "Hello from {name} (v{version})!"

# The "Java" token is part of the published, reproducible output format.
BUILD_INFO_TEMPLATE: Final[str] = "Build Info: {name} v{version} | Java {runtime_version} | {os_name}"


def build_greeting(name: str = DEFAULT_NAME) -> str:
    r"""Return the greeting for ``name``.

    Placeholders are substituted literally: no escaping, no locale-aware
    formatting, no trimming. Validation of ``name`` belongs to
    :class:`~reproducible_docs.domain.greeter.Greeter`.

    Args:
        name: Name inserted verbatim into the greeting template.

    Returns:
        The formatted greeting string.

    Example:
        >>> build_greeting()
        'Hello from Reproducible Docs (v1.0.0)!'
        >>> build_greeting("MyApp")
        'Hello from MyApp (v1.0.0)!'
    """
    return GREETING_TEMPLATE.format(name=name, version=VERSION)


def format_build_info(identity: RuntimeIdentity) -> str:
    """Render the single-line build-info summary for ``identity``.

    Missing identity fields render as the empty string.

    Example:
        >>> format_build_info(RuntimeIdentity(runtime_version="3.12.4", os_name="Linux"))
        'Build Info: Reproducible Docs v1.0.0 | Java 3.12.4 | Linux'
        >>> format_build_info(RuntimeIdentity())
        'Build Info: Reproducible Docs v1.0.0 | Java  | '
    """
    return BUILD_INFO_TEMPLATE.format(
        name=DEFAULT_NAME,
        version=VERSION,
        runtime_version=identity.runtime_version or "",
        os_name=identity.os_name or "",
    )


__all__ = [
    "BUILD_INFO_TEMPLATE",
    "GREETING_TEMPLATE",
    "build_greeting",
    "format_build_info",
]
