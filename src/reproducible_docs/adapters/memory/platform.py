"""In-memory platform adapter returning a fixed runtime identity."""

from __future__ import annotations

from typing import Final

from ...domain.identity import RuntimeIdentity

IN_MEMORY_RUNTIME_IDENTITY: Final[RuntimeIdentity] = RuntimeIdentity(runtime_version="3.0.0-test", os_name="TestOS")


def get_runtime_identity_in_memory() -> RuntimeIdentity:
    """Return :data:`IN_MEMORY_RUNTIME_IDENTITY` without consulting the host."""
    return IN_MEMORY_RUNTIME_IDENTITY


__all__ = [
    "IN_MEMORY_RUNTIME_IDENTITY",
    "get_runtime_identity_in_memory",
]
