"""Live, read-only views over a single equivalence class."""

from __future__ import annotations

from collections.abc import Set
from typing import TYPE_CHECKING, Any, Hashable, Iterable, Iterator

if TYPE_CHECKING:  # pragma: no cover
    from .union_find import StandardUnionFind


class EquivalenceClassView(Set):
    """Members of the class containing ``value``, evaluated against current state.

    Nothing is cached: membership, iteration and ``len`` all consult the owning
    structure on every call, so a union performed between two iterations is
    visible to the second one. Mutating the owner while an iteration is in
    progress is unsupported.
    """

    __slots__ = ("_owner", "_value", "_node")

    def __init__(self, owner: StandardUnionFind, value: Hashable) -> None:
        self._owner = owner
        self._value = value
        self._node = owner._lookup(value)

    @classmethod
    def _from_iterable(cls, it: Iterable[Any]) -> frozenset:
        return frozenset(it)

    def __contains__(self, item: object) -> bool:
        if item == self._value:
            return True
        other = self._owner._nodes.get(item)
        if other is None:
            return False
        find_root = self._owner._find_root
        self._node = find_root(self._node)
        return find_root(other) == self._node

    def __iter__(self) -> Iterator[Hashable]:
        find_root = self._owner._find_root
        for element, node in self._owner._nodes.items():
            if find_root(node) == find_root(self._node):
                yield element

    def __len__(self) -> int:
        owner = self._owner
        return int(owner._size[owner._find_root(self._node)])

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._value!r})"


__all__ = ["EquivalenceClassView"]
