"""
Incidence and star (dual) indices between complexes.

``incidence`` is the general neighbourhood query: for every cell of a
canonical complex it lists the cells of a second complex containing it as a
face, e.g. which triangles touch a given edge. It works by enumerating the
vertex subsets of every target cell, so its cost grows as 2^(d+1) in the cell
dimension d. ``dual`` is the fast path for 0-cells.
"""
from __future__ import annotations

import itertools
import logging

from hypertopo._cells import _compare_sorted, find_cell

# Above this arity the unrestricted subset enumeration is reported
MAX_SUBSET_ARITY = 16


def _subsets(c, sizes):
    for k in sizes:
        yield from itertools.combinations(c, k)


def incidence(from_cells, to_cells, restrict=True):
    """
    Build the incidence index from one complex into another.

    :param from_cells: complex in canonical form (the faces being queried)
    :param to_cells: complex of target cells, any order
    :param restrict: bool, if True only enumerate subsets of the sizes that
                     occur in from_cells, otherwise enumerate every non-empty
                     subset of each target cell. The result is the same.
    :return: list parallel to from_cells, entry i is the ascending list of
             indices j with from_cells[i] a vertex subset of to_cells[j]
    """
    index = [[] for _ in range(len(from_cells))]
    if len(from_cells) == 0:
        return index

    if restrict:
        sizes = sorted({len(c) for c in from_cells})
    else:
        arity = max((len(c) for c in to_cells), default=0)
        if arity > MAX_SUBSET_ARITY:
            logging.warning(f"Enumerating 2^{arity} vertex subsets per cell, "
                            f"consider restrict=True")
        sizes = range(1, arity + 1)

    nfrom = len(from_cells)
    for j, c in enumerate(to_cells):
        c = sorted(c)
        for b in _subsets(c, sizes):
            idx = find_cell(from_cells, b)
            if idx < 0:
                continue
            # Duplicated faces share the same target cells
            while True:
                if not index[idx] or index[idx][-1] != j:
                    index[idx].append(j)
                idx += 1
                if idx >= nfrom or _compare_sorted(from_cells[idx], b) != 0:
                    break

    return index


def dual(cells, vertex_count=None):
    """
    Vertex stars of a complex: the cells incident to every vertex.

    :param cells: complex, any order
    :param vertex_count: int, optional. If given the vertices are taken to be
                         0..vertex_count-1, otherwise one entry is returned
                         per distinct vertex in ascending vertex order
    :return: list of lists of cell indices
    """
    if vertex_count is not None:
        res = [[] for _ in range(vertex_count)]
        slot = None
    else:
        vertices = sorted({v for c in cells for v in c})
        res = [[] for _ in vertices]
        slot = {v: i for i, v in enumerate(vertices)}

    for i, c in enumerate(cells):
        for v in c:
            s = res[v] if slot is None else res[slot[v]]
            if not s or s[-1] != i:
                s.append(i)
    return res


def st(cells, v):
    """Star of a single vertex v, the indices of the cells containing it."""
    return [i for i, c in enumerate(cells) if v in c]
