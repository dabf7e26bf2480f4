"""Shared pytest fixtures for CLI, adapter and module-entry tests.

Fixtures use descriptive names that read as plain English; tests receive them
implicitly via pytest's conftest discovery.
"""

from __future__ import annotations

import contextlib
import dataclasses
import os
import re
import tempfile
from collections.abc import Callable, Iterator
from pathlib import Path
from typing import TYPE_CHECKING, Any

import pytest
from click.testing import CliRunner

from reproducible_docs.domain.identity import RuntimeIdentity

if TYPE_CHECKING:
    from reproducible_docs.composition import AppServices

_COVERAGE_BASENAME = ".coverage.reproducible_docs"

ANSI_ESCAPE_PATTERN = re.compile(r"\x1B\[[0-?]*[ -/]*[@-~]")

#: Runtime identity injected by ``fixed_identity_factory``.
FIXED_IDENTITY = RuntimeIdentity(runtime_version="3.12.4", os_name="Linux")


def _purge_stale_coverage_files(cov_path: Path) -> None:
    """Delete leftover SQLite database and journal files from crashed runs."""
    for suffix in ("", "-journal", "-wal", "-shm"):
        with contextlib.suppress(FileNotFoundError):
            Path(str(cov_path) + suffix).unlink()


def pytest_configure(config: pytest.Config) -> None:
    """Keep the coverage database on a local temp directory."""
    if "COVERAGE_FILE" not in os.environ:
        cov_path = Path(tempfile.gettempdir()) / _COVERAGE_BASENAME
        _purge_stale_coverage_files(cov_path)
        os.environ["COVERAGE_FILE"] = str(cov_path)


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a fresh CliRunner per test.

    ``result.stdout`` holds program output only; log records land on stderr.
    """
    return CliRunner()


@pytest.fixture
def production_factory() -> Callable[[], AppServices]:
    """Provide the production services factory for tests."""
    from reproducible_docs.composition import build_production

    return build_production


@pytest.fixture
def strip_ansi() -> Callable[[str], str]:
    """Return a helper that strips ANSI escape sequences from a string."""

    def _strip(value: str) -> str:
        return ANSI_ESCAPE_PATTERN.sub("", value)

    return _strip


@pytest.fixture
def clear_config_cache() -> Iterator[None]:
    """Clear the get_config lru_cache around the test."""
    from reproducible_docs.adapters.config.loader import get_config

    get_config.cache_clear()
    yield
    get_config.cache_clear()


@pytest.fixture
def services_factory_with(clear_config_cache: None) -> Callable[..., Callable[[], AppServices]]:
    """Return a builder replacing selected production services.

    Only the named ports are swapped; every other port keeps its production
    adapter, so the CLI path stays real apart from the injected boundary.

    Example:
        def test_identity(cli_runner, services_factory_with) -> None:
            factory = services_factory_with(get_runtime_identity=lambda: FIXED_IDENTITY)
            result = cli_runner.invoke(cli, [], obj=factory)
    """
    from reproducible_docs.composition import build_production

    def _build(**overrides: Any) -> Callable[[], AppServices]:
        services = dataclasses.replace(build_production(), **overrides)
        return lambda: services

    return _build


@pytest.fixture
def fixed_identity_factory(
    services_factory_with: Callable[..., Callable[[], AppServices]],
) -> Callable[[], AppServices]:
    """Production services with the runtime identity pinned to ``FIXED_IDENTITY``."""
    return services_factory_with(get_runtime_identity=lambda: FIXED_IDENTITY)
