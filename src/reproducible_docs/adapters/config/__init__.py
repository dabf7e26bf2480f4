"""Configuration adapter - layered loading via lib_layered_config.

Contents:
    * :func:`.loader.get_config` - Cached layered configuration
    * :func:`.loader.get_default_config_path` - Bundled defaults file
"""

from __future__ import annotations

from .loader import get_config, get_default_config_path

__all__ = ["get_config", "get_default_config_path"]
