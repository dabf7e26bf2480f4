"""Layered configuration feeding the logging runtime.

Only the ``[lib_log_rich]`` section is read by this package. The greeting
and the build-info line are fixed and never come from configuration.
"""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path

from lib_layered_config import Config, read_config

from reproducible_docs import __init__conf__

_DEFAULT_CONFIG = Path(__file__).parent / "defaultconfig.toml"


def get_default_config_path() -> Path:
    """Return the path to the bundled ``defaultconfig.toml``.

    Example:
        >>> get_default_config_path().name
        'defaultconfig.toml'
    """
    return _DEFAULT_CONFIG


@lru_cache(maxsize=4)
def get_config(*, start_dir: str | None = None) -> Config:
    """Merge the bundled defaults with the host's configuration layers.

    Layers, lowest precedence first: bundled defaults, app, host, user,
    ``.env`` (searched upward from ``start_dir`` or the working directory),
    environment variables.
    Results are cached per ``start_dir``; call ``get_config.cache_clear()``
    to force a re-read.

    Example:
        >>> get_config().get("nonexistent", default="fallback")
        'fallback'
    """
    return read_config(
        vendor=__init__conf__.LAYEREDCONF_VENDOR,
        app=__init__conf__.LAYEREDCONF_APP,
        slug=__init__conf__.LAYEREDCONF_SLUG,
        default_file=_DEFAULT_CONFIG,
        start_dir=start_dir,
    )


__all__ = ["get_config", "get_default_config_path"]
