"""Custom exception types raised by the formatting helpers."""

from __future__ import annotations


class FormattingError(Exception):
    """Base class for every error raised by :mod:`codeformat`."""


class InvalidArgumentError(FormattingError, ValueError):
    """Raised when ``None`` is passed where a text value is required."""

    def __init__(self, message: str) -> None:
        super().__init__(message)


class PreconditionViolationError(FormattingError, ValueError):
    """Raised for negative repeat counts or indentation depths."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
