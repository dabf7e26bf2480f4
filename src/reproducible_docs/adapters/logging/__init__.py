"""Logging adapter - lib_log_rich runtime setup shared by every entry point.

Contents:
    * :class:`.setup.LoggingConfigModel` - ``[lib_log_rich]`` section model
    * :func:`.setup.init_logging` - Idempotent logging initialization
"""

from __future__ import annotations

from .setup import LoggingConfigModel, init_logging

__all__ = ["LoggingConfigModel", "init_logging"]
