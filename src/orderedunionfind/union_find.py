"""Union-Find data structure over hashable elements, preserving insertion order."""

from __future__ import annotations

from typing import Any, Hashable, Iterable, KeysView

import numpy as np

from .errors import ElementNotFoundError
from .views import EquivalenceClassView


class StandardUnionFind:
    """Union-Find with union by rank and full path compression.

    Nodes are stored in an index arena: ``_parent``, ``_rank`` and ``_size``
    are ``int64`` arrays indexed by node, and ``_element`` holds the value that
    currently represents each node. ``_nodes`` maps every registered element to
    its node in first-registration order.

    ``union(a, b)`` always keeps the representative of ``a``'s class. When rank
    balancing forces ``b``'s root to stay on top, the two roots exchange their
    ``_element`` entries so the surviving root carries ``a``'s representative.
    """

    def __init__(self, elements: Iterable[Hashable] | None = None, *, initial_capacity: int = 16) -> None:
        if initial_capacity < 0:
            raise ValueError("initial_capacity must be non-negative")
        self._nodes: dict[Hashable, int] = {}
        self._element: list[Any] = []
        self._parent = np.zeros(initial_capacity, dtype=np.int64)
        self._rank = np.zeros(initial_capacity, dtype=np.int64)
        self._size = np.zeros(initial_capacity, dtype=np.int64)
        self._num_classes = 0
        if elements is not None:
            for element in elements:
                self.add(element)

    def __len__(self) -> int:
        return len(self._nodes)

    def __contains__(self, element: object) -> bool:
        return element in self._nodes

    def __repr__(self) -> str:
        return f"{type(self).__name__}(elements={len(self._nodes)}, classes={self._num_classes})"

    @property
    def num_classes(self) -> int:
        return self._num_classes

    def add(self, element: Hashable) -> None:
        self.union(element, element)

    def elements(self) -> KeysView[Hashable]:
        """Registered elements in first-registration order (read-only view)."""
        return self._nodes.keys()

    def find(self, element: Hashable) -> Any:
        """Return the current representative of ``element``'s class."""
        return self._element[self._find_root(self._lookup(element))]

    def union(self, a: Hashable, b: Hashable) -> Any:
        """Merge the classes of ``a`` and ``b``, registering either if needed.

        Returns the representative of the merged class, which is whatever
        represented ``a``'s class before the call.
        """
        ra = self._root_or_create(a)
        rb = self._root_or_create(b)
        if ra == rb:
            return self._element[ra]
        rank = self._rank
        size = self._size
        self._num_classes -= 1
        if rank[ra] >= rank[rb]:
            self._parent[rb] = ra
            size[ra] += size[rb]
            if rank[ra] == rank[rb]:
                rank[ra] += 1
            return self._element[ra]
        self._parent[ra] = rb
        size[rb] += size[ra]
        element = self._element
        element[ra], element[rb] = element[rb], element[ra]
        return element[rb]

    def are_equivalent(self, a: Hashable, b: Hashable) -> bool:
        na = self._lookup(a)
        nb = self._lookup(b)
        return self._find_root(na) == self._find_root(nb)

    def find_all(self, element: Hashable) -> EquivalenceClassView:
        """Live read-only view of the class currently containing ``element``."""
        self._lookup(element)
        return EquivalenceClassView(self, element)

    def class_size(self, element: Hashable) -> int:
        return int(self._size[self._find_root(self._lookup(element))])

    def all_equivalence_classes(self) -> list[frozenset]:
        """Snapshot of the partition, classes ordered by first member registered."""
        return [frozenset(members) for members in self._members_by_root().values()]

    def representatives(self) -> list[Any]:
        return [self._element[root] for root in self._members_by_root()]

    def groups(self) -> dict[Any, list[Hashable]]:
        return {self._element[root]: members for root, members in self._members_by_root().items()}

    def _members_by_root(self) -> dict[int, list[Hashable]]:
        result: dict[int, list[Hashable]] = {}
        for element, node in self._nodes.items():
            result.setdefault(self._find_root(node), []).append(element)
        return result

    def _lookup(self, element: Hashable) -> int:
        try:
            return self._nodes[element]
        except KeyError:
            raise ElementNotFoundError(element) from None

    def _root_or_create(self, element: Hashable) -> int:
        node = self._nodes.get(element)
        if node is not None:
            return self._find_root(node)
        node = len(self._element)
        if node == self._parent.size:
            self._grow()
        self._parent[node] = node
        self._rank[node] = 0
        self._size[node] = 1
        self._element.append(element)
        self._nodes[element] = node
        self._num_classes += 1
        return node

    def _grow(self) -> None:
        capacity = max(16, 2 * self._parent.size)
        for name in ("_parent", "_rank", "_size"):
            old = getattr(self, name)
            new = np.zeros(capacity, dtype=np.int64)
            new[: old.size] = old
            setattr(self, name, new)

    def _find_root(self, node: int) -> int:
        parent = self._parent
        root = node
        while parent[root] != root:
            root = int(parent[root])
        while parent[node] != root:
            nxt = int(parent[node])
            parent[node] = root
            node = nxt
        return root


__all__ = ["StandardUnionFind"]
