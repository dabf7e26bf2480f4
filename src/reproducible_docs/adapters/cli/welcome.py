"""The ``reproducible-docs`` command: greeting line, then build-info line.

The command takes no options and no help flag. Every token on the command
line, whether it looks like a word, an option or a subcommand, is collected
as an extra argument and dropped.

Contents:
    * :func:`emit_welcome` - Write the two output lines.
    * :func:`cli` - The rich-click command wrapping :func:`emit_welcome`.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any, Final

import lib_log_rich.runtime
import rich_click as click

from reproducible_docs import __init__conf__
from reproducible_docs.domain.behaviors import format_build_info
from reproducible_docs.domain.greeter import Greeter

if TYPE_CHECKING:
    from reproducible_docs.composition import AppServices

logger = logging.getLogger(__name__)

#: No help option; unknown options and stray words become ``ctx.args``.
IGNORE_ARGUMENTS_SETTINGS: Final[dict[str, Any]] = {
    "help_option_names": [],
    "ignore_unknown_options": True,
    "allow_extra_args": True,
}


def emit_welcome(services: AppServices) -> None:
    """Write the default greeting and the build-info line to stdout, in that order."""
    click.echo(Greeter().greeting())
    click.echo(format_build_info(services.get_runtime_identity()))


@click.command(
    __init__conf__.shell_command,
    help=__init__conf__.title,
    context_settings=IGNORE_ARGUMENTS_SETTINGS,
)
@click.pass_context
def cli(ctx: click.Context) -> None:
    """Load configuration, start logging and print the welcome lines.

    Example:
        >>> from click.testing import CliRunner
        >>> from reproducible_docs.composition import build_production
        >>> result = CliRunner().invoke(cli, ["info", "--help"], obj=build_production)
        >>> result.exit_code
        0
        >>> result.stdout.splitlines()[0]
        'Hello from Reproducible Docs (v1.0.0)!'
    """
    # ctx.obj is always the services factory (production or test)
    if not callable(ctx.obj):
        raise RuntimeError("Services factory not provided. This is a bug.")
    services: AppServices = ctx.obj()  # type: ignore[assignment]  # Click's obj is typed as Any
    services.init_logging(services.get_config())

    with lib_log_rich.runtime.bind(job_id="cli-welcome", extra={"ignored_args": len(ctx.args)}):
        logger.info("Emitting greeting and build info")
        emit_welcome(services)


__all__ = ["IGNORE_ARGUMENTS_SETTINGS", "cli", "emit_welcome"]
