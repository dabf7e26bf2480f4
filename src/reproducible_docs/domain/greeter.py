"""Greeter entity holding a validated, immutable name."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Final

from .behaviors import build_greeting
from .errors import InvalidNameError
from .identity import DEFAULT_NAME

NAME_REQUIRED_MESSAGE: Final[str] = "Name must not be null or empty"


@dataclass(frozen=True, slots=True)
class Greeter:
    """Produce greetings for a fixed, non-blank name.

    Accepted names are stored verbatim (never trimmed); only names that are
    ``None``, empty or whitespace-only are rejected. Instances are frozen and
    therefore safe to share.

    Attributes:
        name: The name inserted into the greeting.

    Raises:
        InvalidNameError: If ``name`` is ``None``, empty or whitespace-only.

    Example:
        >>> Greeter().greeting()
        'Hello from Reproducible Docs (v1.0.0)!'
        >>> Greeter("MyApp").is_default_name()
        False
        >>> Greeter("   ")
        Traceback (most recent call last):
        ...
        reproducible_docs.domain.errors.InvalidNameError: Name must not be null or empty
    """

    name: str = DEFAULT_NAME

    def __post_init__(self) -> None:
        if not isinstance(self.name, str) or not self.name.strip():
            raise InvalidNameError(NAME_REQUIRED_MESSAGE)

    def greeting(self) -> str:
        """Return ``"Hello from {name} (v{version})!"`` for this instance."""
        return build_greeting(self.name)

    def is_default_name(self) -> bool:
        """Return True when the stored name equals :data:`DEFAULT_NAME` exactly."""
        return self.name == DEFAULT_NAME


__all__ = [
    "NAME_REQUIRED_MESSAGE",
    "Greeter",
]
