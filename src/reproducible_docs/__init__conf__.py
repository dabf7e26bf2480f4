"""Static package metadata for the CLI, logging and configuration paths.

Values here are kept in sync with ``pyproject.toml`` by the release tooling;
the ``LAYEREDCONF_*`` identifiers drive platform-specific configuration paths
resolved by ``lib_layered_config``.
"""

from __future__ import annotations

name = "reproducible_docs"
title = "Greeter and build-info reporter for reproducible documentation builds"
version = "1.0.0"
shell_command = "reproducible-docs"

#: Vendor identifier used for macOS/Windows configuration directories.
LAYEREDCONF_VENDOR = "reproducible-docs"
#: Application identifier used for macOS/Windows configuration directories.
LAYEREDCONF_APP = "Reproducible Docs"
#: XDG slug used for Linux configuration directories and env var prefixes.
LAYEREDCONF_SLUG = "reproducible-docs"


__all__ = [
    "LAYEREDCONF_APP",
    "LAYEREDCONF_SLUG",
    "LAYEREDCONF_VENDOR",
    "name",
    "shell_command",
    "title",
    "version",
]
