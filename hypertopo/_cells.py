"""
Ordering, canonical form and lookup for complexes stored as cell lists.

A complex is a sequence of cells and a cell is a sequence of non-negative
integer vertex indices. Two cells are equal when they contain the same
vertices in any order. The functions here establish a total order over cells
that respects this equality, put a complex into canonical form (every cell
ascending, cells sorted by that order) and search canonical complexes.

No input validation is done on the hot paths: non-integer vertex ids or
ragged inputs where uniform arity is assumed give deterministic but
undefined results.

Usage::

    from hypertopo import normalize, find_cell

    cells = [[2, 1, 0], [3, 2, 1]]
    normalize(cells)           # [[0, 1, 2], [1, 2, 3]], sorted in place
    find_cell(cells, (3, 1, 2))  # 1
"""
from __future__ import annotations

import copy

import numpy as np


def cell_key(c):
    """Sort key inducing the same order as :func:`compare_cells`."""
    return len(c), tuple(sorted(c))


def _compare_sorted(a, b) -> int:
    """Compare two cells whose vertices are already ascending."""
    d = len(a) - len(b)
    if d:
        return d
    for x, y in zip(a, b):
        if x != y:
            return -1 if x < y else 1
    return 0


def compare_cells(a, b) -> int:
    """
    Permutation invariant comparison of two cells.

    Shorter cells rank before longer ones, cells of the same length compare
    element-wise after sorting. Neither argument is modified.

    :param a: sequence of vertex indices
    :param b: sequence of vertex indices
    :return: int, negative if a < b, 0 if a and b hold the same vertices,
             positive if a > b
    """
    if len(a) != len(b):
        return len(a) - len(b)
    return _compare_sorted(sorted(a), sorted(b))


def _sort_cell(c):
    # Lists sort in place; immutable cells are replaced by a sorted copy
    if hasattr(c, 'sort'):
        c.sort()
        return c
    return type(c)(sorted(c))


def normalize(cells, attr=None):
    """
    Canonicalize a complex in place.

    Every cell is sorted ascending and the cells are then stably sorted by
    :func:`compare_cells`. If ``attr`` is given it is permuted identically,
    so that ``attr[i]`` keeps describing ``cells[i]``.

    This mutates ``cells`` (and ``attr``); use :func:`normalized` to keep the
    original order.

    :param cells: list of cells, or a 2-D numpy integer array
    :param attr: list or numpy array parallel to cells, optional
    :return: cells, the same object in canonical form
    """
    if attr is not None and len(attr) != len(cells):
        raise ValueError(f"attr has {len(attr)} entries but the complex has "
                         f"{len(cells)} cells")

    if isinstance(cells, np.ndarray):
        if cells.size == 0:
            return cells
        cells.sort(axis=1)
        # lexsort takes its primary key last
        order = np.lexsort(cells.T[::-1])
        cells[:] = cells[order]
        if attr is not None:
            _permute(attr, order)
        return cells

    for i, c in enumerate(cells):
        cells[i] = _sort_cell(c)

    order = sorted(range(len(cells)), key=lambda i: (len(cells[i]),
                                                     tuple(cells[i])))
    cells[:] = [cells[i] for i in order]
    if attr is not None:
        _permute(attr, order)
    return cells


def _permute(attr, order):
    if isinstance(attr, np.ndarray):
        attr[:] = attr[np.asarray(order)]
    else:
        attr[:] = [attr[i] for i in order]


def normalized(cells, attr=None):
    """Non-mutating variant of :func:`normalize`.

    :return: the canonical copy of cells, or a tuple (cells, attr) of copies
             when attr is given
    """
    cells = clone_cells(cells)
    if attr is None:
        return normalize(cells)
    attr = copy.copy(attr)
    return normalize(cells, attr), attr


def unique(cells):
    """
    Remove adjacent duplicates from a canonical complex.

    Lists are compacted in place and returned, numpy arrays cannot shrink in
    place so a new array is returned for them.
    """
    if len(cells) == 0:
        return cells

    if isinstance(cells, np.ndarray):
        keep = np.ones(len(cells), dtype=bool)
        keep[1:] = np.any(cells[1:] != cells[:-1], axis=1)
        return cells[keep]

    ptr = 1
    for i in range(1, len(cells)):
        if _compare_sorted(cells[i], cells[ptr - 1]):
            cells[ptr] = cells[i]
            ptr += 1
    del cells[ptr:]
    return cells


def find_cell(cells, c) -> int:
    """
    Locate a cell in a canonical complex by binary search.

    :param cells: complex in canonical form (see :func:`normalize`)
    :param c: query cell, vertices in any order
    :return: int, leftmost index i with cells[i] equal to c, or -1
    """
    c = sorted(c)
    lo, hi = 0, len(cells)
    while lo < hi:
        mid = (lo + hi) // 2
        if _compare_sorted(cells[mid], c) < 0:
            lo = mid + 1
        else:
            hi = mid
    if lo < len(cells) and _compare_sorted(cells[lo], c) == 0:
        return lo
    return -1


def dimension(cells) -> int:
    """Largest cell dimension in the complex, -1 for an empty complex."""
    d = 0
    for c in cells:
        d = max(d, len(c))
    return d - 1


def count_vertices(cells) -> int:
    """Number of vertices of a dense complex (largest vertex index + 1)."""
    vc = -1
    for c in cells:
        for v in c:
            vc = max(vc, v)
    return int(vc) + 1


def clone_cells(cells):
    """Deep copy of a complex, keeping the container and cell types."""
    if isinstance(cells, np.ndarray):
        return cells.copy()
    return [c.copy() if hasattr(c, 'copy') else type(c)(c) for c in cells]
