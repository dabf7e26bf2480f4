"""Application ports - callable Protocols the composition root fills in.

Each Protocol's ``__call__`` matches the signature of the adapter function
wired behind it, so plain module-level functions satisfy it structurally.
``Config`` is imported for type checking only; nothing here touches
lib_layered_config at runtime.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

from ..domain.identity import RuntimeIdentity

if TYPE_CHECKING:
    from lib_layered_config import Config


class GetConfig(Protocol):
    """Return the layered configuration whose ``[lib_log_rich]`` section drives logging."""

    def __call__(self, *, start_dir: str | None = ...) -> Config: ...


class InitLogging(Protocol):
    """Start the logging runtime from a loaded configuration."""

    def __call__(self, config: Config) -> None: ...


class GetRuntimeIdentity(Protocol):
    """Read the host runtime version and operating-system name."""

    def __call__(self) -> RuntimeIdentity: ...


__all__ = ["GetConfig", "GetRuntimeIdentity", "InitLogging"]
