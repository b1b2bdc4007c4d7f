"""Three-way comparison built on the operands' own ordering."""
from __future__ import annotations

import logging
from typing import Any, Protocol, TypeVar

from ..errors import IncomparableError

logger = logging.getLogger(__name__)


class Orderable(Protocol):
    """Minimal interface a held value must support.

    Static typing only: ``object`` defines ``__lt__``, so an ``isinstance``
    check could not reject anything.
    """

    def __lt__(self, other: Any) -> bool:
        ...


T = TypeVar("T", bound=Orderable)


def compare(left: Any, right: Any) -> int:
    """Return -1, 0 or 1 as ``left`` is less than, equal to or greater than ``right``.

    ``TypeError`` from the operators (``None`` operands, unrelated types)
    propagates unchanged.
    """
    if left < right:
        return -1
    if left > right:
        return 1
    if left == right:
        return 0
    logger.debug("No order relation between %r and %r", left, right)
    raise IncomparableError(left, right)


__all__ = ["Orderable", "T", "compare"]
