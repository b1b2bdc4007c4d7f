"""Comparison primitives and the fluent wrapper built on them."""
from __future__ import annotations

from importlib import import_module
from typing import Any

__all__ = [
    "CompareTo",
    "is_",
    "Orderable",
    "compare",
    "canonical_zero",
    "is_zero",
]


def __getattr__(name: str) -> Any:  # pragma: no cover - import side effects
    if name in {"CompareTo", "is_"}:
        module = import_module(".compare_to", __name__)
        return getattr(module, name)
    if name in {"Orderable", "compare"}:
        module = import_module(".ordering", __name__)
        return getattr(module, name)
    if name in {"canonical_zero", "is_zero"}:
        module = import_module(".numeric", __name__)
        return getattr(module, name)
    raise AttributeError(f"module '{__name__}' has no attribute '{name}'")
