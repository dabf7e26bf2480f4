"""lib_log_rich runtime setup, done once per process.

Standard output belongs to the greeting and build-info lines. Console log
records therefore go to stderr at ``WARNING`` and above unless the
``[lib_log_rich]`` configuration section says otherwise.

Contents:
    * :class:`LoggingConfigModel` - Typed view of the ``[lib_log_rich]`` section.
    * :func:`init_logging` - Start the runtime and bridge stdlib logging.
"""

from __future__ import annotations

from typing import Any, cast

import lib_log_rich.config
import lib_log_rich.runtime
from lib_layered_config import Config
from pydantic import BaseModel, ConfigDict

from reproducible_docs import __init__conf__


class LoggingConfigModel(BaseModel):
    """The ``[lib_log_rich]`` section, with defaults that keep stdout clean.

    Keys not declared here are forwarded untouched to
    ``lib_log_rich.runtime.RuntimeConfig``.

    Example:
        >>> LoggingConfigModel().console_stream
        'stderr'
        >>> LoggingConfigModel(console_level="DEBUG").console_level
        'DEBUG'
    """

    model_config = ConfigDict(extra="allow")

    service: str = __init__conf__.name
    environment: str = "prod"
    console_level: str = "WARNING"
    console_stream: str = "stderr"

    def to_runtime_config(self) -> lib_log_rich.runtime.RuntimeConfig:
        """Build the RuntimeConfig, passing extra keys straight through."""
        return lib_log_rich.runtime.RuntimeConfig(**self.model_dump())


def _logging_section(config: Config) -> dict[str, Any]:
    section: object = config.get("lib_log_rich", default={})
    return dict(cast("dict[str, Any]", section)) if section else {}


def init_logging(config: Config) -> None:
    """Start the lib_log_rich runtime from ``config``; later calls are no-ops.

    ``.env`` files are loaded first so ``LOG_*`` variables apply, and stdlib
    :mod:`logging` is bridged so modules keep ``logging.getLogger(__name__)``.

    Example:
        >>> init_logging(Config({"lib_log_rich": {"environment": "test"}}, {}))  # doctest: +SKIP
    """
    if lib_log_rich.runtime.is_initialised():
        return
    settings = LoggingConfigModel.model_validate(_logging_section(config))
    lib_log_rich.config.enable_dotenv()
    lib_log_rich.runtime.init(settings.to_runtime_config())
    lib_log_rich.runtime.attach_std_logging()


__all__ = ["LoggingConfigModel", "init_logging"]
