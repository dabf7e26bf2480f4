"""In-memory configuration: no files, no environment, no ``.env`` lookup."""

from __future__ import annotations

from lib_layered_config import Config


def get_config_in_memory(*, start_dir: str | None = None) -> Config:
    """Return an empty Config, leaving logging on the library defaults."""
    return Config({}, {})


__all__ = ["get_config_in_memory"]
