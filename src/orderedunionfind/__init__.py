"""Insertion-ordered union-find package."""

from __future__ import annotations

from importlib import import_module
from typing import Any

__all__ = [
    "ElementNotFoundError",
    "EquivalenceClassView",
    "StandardUnionFind",
    "component_labels",
    "equivalence_classes",
]

_EXPORTS = {
    "ElementNotFoundError": "orderedunionfind.errors",
    "EquivalenceClassView": "orderedunionfind.views",
    "StandardUnionFind": "orderedunionfind.union_find",
    "component_labels": "orderedunionfind.closure",
    "equivalence_classes": "orderedunionfind.closure",
}


def __getattr__(name: str) -> Any:  # pragma: no cover - simple lazy import shim
    if name in _EXPORTS:
        module = import_module(_EXPORTS[name])
        return getattr(module, name)
    raise AttributeError(f"module 'orderedunionfind' has no attribute {name!r}")


def __dir__() -> list[str]:  # pragma: no cover - cosmetic helper
    return sorted(__all__)
