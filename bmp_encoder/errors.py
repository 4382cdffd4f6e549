"""Exception types raised by the bitmap encoder."""

from __future__ import annotations


class InvalidArgumentError(ValueError):
    """Raised when a required argument is missing or empty."""


class UnsupportedFormatError(ValueError):
    """Raised when no registered encoder handles a file extension."""


def require(value: object, name: str) -> None:
    """Raise :class:`InvalidArgumentError` if ``value`` is ``None``."""

    if value is None:
        raise InvalidArgumentError(f"{name} must not be None")


def require_text(value: str | None, name: str) -> None:
    if value is None or value == "":
        raise InvalidArgumentError(f"{name} must not be None or empty")
