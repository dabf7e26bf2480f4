"""Run the ``reproducible-docs`` command and turn its outcome into an exit code.

Shared by the console script and ``python -m`` so both paths report errors
and shut logging down the same way.
"""

from __future__ import annotations

import sys
import threading
from collections.abc import Callable, Sequence
from typing import TYPE_CHECKING, Final

import click
import lib_cli_exit_tools
import lib_log_rich.runtime

from reproducible_docs import __init__conf__

from .welcome import cli

if TYPE_CHECKING:
    from reproducible_docs.composition import AppServices

#: Character budget for the one-line error summary.
TRACEBACK_SUMMARY_LIMIT: Final[int] = 500

#: Character budget when ``lib_cli_exit_tools.config.traceback`` is switched on.
TRACEBACK_VERBOSE_LIMIT: Final[int] = 10_000


def _report_failure(exc: BaseException) -> int:
    tracebacks_enabled = bool(getattr(lib_cli_exit_tools.config, "traceback", False))
    length_limit = TRACEBACK_VERBOSE_LIMIT if tracebacks_enabled else TRACEBACK_SUMMARY_LIMIT
    lib_cli_exit_tools.print_exception_message(trace_back=tracebacks_enabled, length_limit=length_limit)
    return lib_cli_exit_tools.get_system_exit_code(exc)


def _run_cli(argv: Sequence[str] | None, *, services_factory: Callable[[], AppServices]) -> int:
    # lib_cli_exit_tools.run_cli cannot pass ctx.obj, so Click is driven
    # directly and lib_cli_exit_tools only formats failures.
    args = list(argv) if argv is not None else sys.argv[1:]
    try:
        cli.main(
            args=args,
            prog_name=__init__conf__.shell_command,
            obj=services_factory,
            standalone_mode=False,
        )
    except click.exceptions.Exit as exc:
        return exc.exit_code
    except SystemExit as exc:
        # A deliberate integer exit already carries its message, if any.
        if isinstance(exc.code, int):
            return exc.code
        return _report_failure(exc)
    except BaseException as exc:
        return _report_failure(exc)
    return 0


def main(
    argv: Sequence[str] | None = None,
    *,
    services_factory: Callable[[], AppServices] | None = None,
) -> int:
    """Print the welcome lines and return the process exit code.

    Args:
        argv: Command-line arguments, accepted and ignored. None uses
            ``sys.argv[1:]``.
        services_factory: Factory returning AppServices. Required; callers
            outside the adapters layer pass ``build_production``.

    Returns:
        0 after a normal run; the code chosen by ``lib_cli_exit_tools``
        when an unexpected error escapes.

    Raises:
        ValueError: If services_factory is not provided.

    Example:
        >>> from reproducible_docs.composition import build_production
        >>> main(["--version"], services_factory=build_production)  # doctest: +SKIP
        Hello from Reproducible Docs (v1.0.0)!
        Build Info: Reproducible Docs v1.0.0 | Java 3.12.4 | Linux
        0
    """
    if services_factory is None:
        raise ValueError("services_factory is required. Pass build_production from composition layer.")

    try:
        return _run_cli(argv, services_factory=services_factory)
    finally:
        # Shutting down from a worker thread would stop logging for the whole process.
        if threading.current_thread() is threading.main_thread() and lib_log_rich.runtime.is_initialised():
            lib_log_rich.runtime.shutdown()


__all__ = ["TRACEBACK_SUMMARY_LIMIT", "TRACEBACK_VERBOSE_LIMIT", "main"]
