"""Domain-specific exceptions for typed error handling at boundaries."""

from __future__ import annotations


class InvalidNameError(ValueError):
    """Greeter name is missing, empty, or whitespace-only.

    A programmer-error signal raised by
    :class:`~reproducible_docs.domain.greeter.Greeter` and propagated to the
    caller without recovery. Inherits from ValueError so generic argument
    handlers keep catching it.

    Example:
        >>> from reproducible_docs.domain.errors import InvalidNameError
        >>> err = InvalidNameError("Name must not be null or empty")
        >>> str(err)
        'Name must not be null or empty'
        >>> isinstance(err, ValueError)
        True
    """


__all__ = ["InvalidNameError"]
