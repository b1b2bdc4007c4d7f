"""Configuration dataclasses for fluent comparisons."""
from __future__ import annotations

from dataclasses import dataclass


@dataclass(slots=True, frozen=True)
class CompareConfig:
    none_equals_none: bool = True
    strict_absent: bool = False  # raise IncomparableError instead of TypeError on None


DEFAULT_CONFIG = CompareConfig()
