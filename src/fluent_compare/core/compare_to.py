"""Fluent wrapper around three-way comparison.

Examples::

    from fluent_compare import is_

    one_is_zero = is_(1).equal_to(0)
    a_is_not_zero = is_(a).ne(0)

    if is_(a).less_than_or_equal_to(b):
        ...

    date1_after_date2 = is_(date1).after(date2)
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, Optional

from ..config import DEFAULT_CONFIG, CompareConfig
from ..errors import IncomparableError
from . import numeric
from .ordering import T, compare


@dataclass(slots=True, frozen=True)
class CompareTo(Generic[T]):
    """Holds one value and answers comparison queries against another."""

    held: Optional[T]
    config: CompareConfig = DEFAULT_CONFIG

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.held!r})"

    # Equality

    def equal_to(self, other: Optional[T]) -> bool:
        """Is the held value equal to ``other``?

        ``None`` equals ``None`` but nothing else, unless the config says
        ``none_equals_none=False``. Values without an order relation, such
        as NaN, are never equal.
        """
        if self.held is None or other is None:
            if not self.config.none_equals_none:
                return False
            return self.held is None and other is None
        try:
            return compare(self.held, other) == 0
        except IncomparableError:
            return False

    def not_equal_to(self, other: Optional[T]) -> bool:
        return not self.equal_to(other)

    eq = equal_to
    ne = not_equal_to

    # Less

    def less_than(self, other: T) -> bool:
        return self._compare(other) < 0

    def less_than_or_equal_to(self, other: T) -> bool:
        return self._compare(other) <= 0

    lt = less_than
    le = less_than_or_equal_to
    before = less_than

    # Greater

    def greater_than(self, other: T) -> bool:
        return self._compare(other) > 0

    def greater_than_or_equal_to(self, other: T) -> bool:
        return self._compare(other) >= 0

    gt = greater_than
    ge = greater_than_or_equal_to
    after = greater_than

    # Zero

    def is_zero(self) -> bool:
        """Is the held number zero? Raises InvalidArgumentError for other kinds."""
        return numeric.is_zero(self.held)

    zero = is_zero

    def _compare(self, other: Optional[T]) -> int:
        if self.config.strict_absent and (self.held is None or other is None):
            raise IncomparableError(self.held, other, "absent values have no order")
        return compare(self.held, other)


def is_(value: Optional[T], config: Optional[CompareConfig] = None) -> CompareTo[T]:
    """Create a wrapper that allows for chained comparison."""
    return CompareTo(value, config or DEFAULT_CONFIG)


__all__ = ["CompareTo", "is_"]
