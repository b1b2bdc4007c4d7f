"""Exceptions raised by fluent comparisons."""
from __future__ import annotations

from typing import Any, Optional


class FluentCompareError(Exception):
    """Base class for every error raised by this package."""


class InvalidArgumentError(FluentCompareError, ValueError):
    """Raised when a query is not defined for the held value's kind."""


class NotNumericError(InvalidArgumentError):
    def __init__(self, value: Any) -> None:
        self.kind = type(value)
        super().__init__(
            f"Zero test requires a number, got {self.kind.__name__}: {value!r}"
        )


class UnsupportedNumericKindError(InvalidArgumentError):
    def __init__(self, value: Any) -> None:
        self.kind = type(value)
        super().__init__(
            f"Zero test is not supported for numeric kind {self.kind.__name__}; "
            "expected a signed integer, a floating point number or a Decimal"
        )


class IncomparableError(FluentCompareError, ValueError):
    """Raised when two values have no order relation to each other."""

    def __init__(self, left: Any, right: Any, reason: Optional[str] = None) -> None:
        self.left = left
        self.right = right
        message = reason or "values are neither less than, equal to nor greater than each other"
        super().__init__(f"Cannot order {left!r} against {right!r}: {message}")


__all__ = [
    "FluentCompareError",
    "InvalidArgumentError",
    "NotNumericError",
    "UnsupportedNumericKindError",
    "IncomparableError",
]
