"""In-memory adapters that touch neither disk, host nor logging runtime.

Contents:
    * :mod:`.config` - Empty configuration
    * :mod:`.logging` - No-op logging start
    * :mod:`.platform` - Fixed runtime identity
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from .config import get_config_in_memory
from .logging import init_logging_in_memory
from .platform import IN_MEMORY_RUNTIME_IDENTITY, get_runtime_identity_in_memory

if TYPE_CHECKING:
    from reproducible_docs.application.ports import GetConfig, GetRuntimeIdentity, InitLogging

    _assert_get_config: GetConfig = get_config_in_memory
    _assert_init_logging: InitLogging = init_logging_in_memory
    _assert_get_runtime_identity: GetRuntimeIdentity = get_runtime_identity_in_memory

__all__ = [
    "IN_MEMORY_RUNTIME_IDENTITY",
    "get_config_in_memory",
    "get_runtime_identity_in_memory",
    "init_logging_in_memory",
]
