"""Transitive closure of pairwise relations."""

from __future__ import annotations

from typing import Hashable, Iterable, Sequence

import numpy as np

from .union_find import StandardUnionFind


def equivalence_classes(
    pairs: Iterable[tuple[Hashable, Hashable]],
    elements: Iterable[Hashable] = (),
    *,
    verbose: bool = False,
) -> list[frozenset]:
    """Group elements connected through ``pairs``.

    ``elements`` are registered first, which fixes their position in the
    output and lets isolated elements appear as singleton classes.
    """
    uf = StandardUnionFind(elements)
    n_pairs = 0
    for a, b in pairs:
        uf.union(a, b)
        n_pairs += 1
    classes = uf.all_equivalence_classes()
    if verbose:
        print(f"[CLOSURE] elements={len(uf)}, pairs={n_pairs}, classes={len(classes)}")
    return classes


def _as_edge_array(name: str, values: Sequence[int] | np.ndarray) -> np.ndarray:
    arr = np.asarray(values)
    if arr.ndim != 1:
        raise ValueError(f"{name} must be one-dimensional, got shape {arr.shape}")
    if arr.size and not np.issubdtype(arr.dtype, np.integer):
        raise ValueError(f"{name} must hold integer node indices, got dtype {arr.dtype}")
    return arr.astype(np.int64, copy=False)


def component_labels(
    n_nodes: int,
    rows: Sequence[int] | np.ndarray,
    cols: Sequence[int] | np.ndarray,
    *,
    verbose: bool = False,
) -> np.ndarray:
    """Label the connected components of an undirected edge list.

    Labels run from 0 and are assigned in order of each component's first node.
    """
    if n_nodes < 0:
        raise ValueError("n_nodes must be non-negative")
    rows = _as_edge_array("rows", rows)
    cols = _as_edge_array("cols", cols)
    if rows.shape != cols.shape:
        raise ValueError(f"rows and cols differ in length ({rows.size} != {cols.size})")
    if rows.size and (min(rows.min(), cols.min()) < 0 or max(rows.max(), cols.max()) >= n_nodes):
        raise ValueError(f"edge endpoints must lie in [0, {n_nodes})")
    uf = StandardUnionFind(range(n_nodes), initial_capacity=n_nodes)
    for i in range(rows.size):
        uf.union(int(rows[i]), int(cols[i]))
    labels = np.empty(n_nodes, dtype=np.int64)
    label_of: dict[int, int] = {}
    for node in range(n_nodes):
        labels[node] = label_of.setdefault(uf.find(node), len(label_of))
    if verbose:
        print(f"[CLOSURE] nodes={n_nodes}, edges={rows.size}, components={len(label_of)}")
    return labels


__all__ = ["equivalence_classes", "component_labels"]
