"""Zero test dispatch over the supported numeric kinds."""
from __future__ import annotations

import logging
import numbers
from decimal import Decimal
from functools import singledispatch
from typing import Any

import numpy as np

from ..errors import IncomparableError, NotNumericError, UnsupportedNumericKindError
from .ordering import compare

logger = logging.getLogger(__name__)


@singledispatch
def canonical_zero(value: Any) -> Any:
    """Return the zero of ``value``'s kind, or raise for kinds without one."""
    if isinstance(value, numbers.Number):
        logger.debug("Rejecting unsupported numeric kind %s", type(value).__name__)
        raise UnsupportedNumericKindError(value)
    logger.debug("Rejecting non-numeric kind %s", type(value).__name__)
    raise NotNumericError(value)


@canonical_zero.register
def _(value: bool) -> Any:
    logger.debug("Rejecting unsupported numeric kind %s", type(value).__name__)
    raise UnsupportedNumericKindError(value)


@canonical_zero.register
def _(value: int) -> int:
    return 0


@canonical_zero.register
def _(value: float) -> float:
    return 0.0


@canonical_zero.register
def _(value: Decimal) -> Decimal:
    return Decimal(0)


@canonical_zero.register(np.signedinteger)
@canonical_zero.register(np.floating)
def _(value: Any) -> Any:
    return value.dtype.type(0)


def is_zero(value: Any) -> bool:
    """True if ``value`` compares equal to its kind's canonical zero.

    Scale is ignored for decimals: ``Decimal("0.000000")`` is zero. NaN is
    not zero.
    """
    zero = canonical_zero(value)
    try:
        return compare(value, zero) == 0
    except IncomparableError:
        return False


__all__ = ["canonical_zero", "is_zero"]
