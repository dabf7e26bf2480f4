"""Console script entry point with production wiring.

Lives at package level, outside the adapters layer, so composition can be
wired into the CLI without the adapters importing it.
"""

from __future__ import annotations

from collections.abc import Sequence

from .adapters.cli.main import main as cli_main
from .composition import build_production


def main(argv: Sequence[str] | None = None) -> int:
    """Run ``reproducible-docs`` with production services.

    Prints the greeting and the build-info line and returns 0. The
    executable has no flags and no subcommands: every argument is ignored.

    Args:
        argv: Command-line arguments, ignored. None uses ``sys.argv[1:]``.

    Returns:
        Exit code from CLI execution.
    """
    return cli_main(argv, services_factory=build_production)


__all__ = ["main"]
