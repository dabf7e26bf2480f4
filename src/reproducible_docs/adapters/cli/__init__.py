"""rich-click adapter for the ``reproducible-docs`` executable.

Contents:
    * :func:`.welcome.cli` - The argument-ignoring command
    * :func:`.welcome.emit_welcome` - The two output lines
    * :func:`.main.main` - Exit-code and logging-shutdown wrapper
"""

from __future__ import annotations

from .main import main
from .welcome import cli, emit_welcome

__all__ = ["cli", "emit_welcome", "main"]
