"""Composition root: one place where ports meet their adapters."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from ..adapters.config.loader import get_config
from ..adapters.logging.setup import init_logging
from ..adapters.platform.runtime import get_build_info, get_runtime_identity

if TYPE_CHECKING:
    from ..application.ports import GetConfig, GetRuntimeIdentity, InitLogging


@dataclass(frozen=True, slots=True)
class AppServices:
    """The three boundaries the welcome command reaches through."""

    get_config: GetConfig
    init_logging: InitLogging
    get_runtime_identity: GetRuntimeIdentity


def build_production() -> AppServices:
    """Layered config from disk, lib_log_rich logging, live host lookups."""
    return AppServices(
        get_config=get_config,
        init_logging=init_logging,
        get_runtime_identity=get_runtime_identity,
    )


def build_testing() -> AppServices:
    """Empty config, no logging runtime, and a fixed runtime identity.

    Build-info output is ``... | Java 3.0.0-test | TestOS`` (see
    :data:`~reproducible_docs.adapters.memory.IN_MEMORY_RUNTIME_IDENTITY`).
    """
    from ..adapters.memory import (
        get_config_in_memory,
        get_runtime_identity_in_memory,
        init_logging_in_memory,
    )

    return AppServices(
        get_config=get_config_in_memory,
        init_logging=init_logging_in_memory,
        get_runtime_identity=get_runtime_identity_in_memory,
    )


__all__ = [
    "AppServices",
    "build_production",
    "build_testing",
    "get_build_info",
    "get_config",
    "get_runtime_identity",
    "init_logging",
]
