"""Readable syntax for ordering comparisons: ``is_(a).less_than(b)``."""
from __future__ import annotations

from .config import DEFAULT_CONFIG, CompareConfig
from .core.compare_to import CompareTo, is_
from .core.ordering import Orderable, compare
from .errors import (
    FluentCompareError,
    IncomparableError,
    InvalidArgumentError,
    NotNumericError,
    UnsupportedNumericKindError,
)

__all__ = [
    "CompareConfig",
    "DEFAULT_CONFIG",
    "CompareTo",
    "is_",
    "Orderable",
    "compare",
    "FluentCompareError",
    "IncomparableError",
    "InvalidArgumentError",
    "NotNumericError",
    "UnsupportedNumericKindError",
]
