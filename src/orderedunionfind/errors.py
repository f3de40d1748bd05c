"""Exceptions raised by the union-find structure."""

from __future__ import annotations

from typing import Hashable


class ElementNotFoundError(KeyError):
    """Raised when a query names an element that was never registered."""

    def __init__(self, element: Hashable) -> None:
        super().__init__(element)
        self.element = element

    def __str__(self) -> str:
        return f"Element does not exist: {self.element!r}"


__all__ = ["ElementNotFoundError"]
