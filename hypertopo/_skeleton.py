"""Skeletons and mod-2 boundaries of complexes."""
from __future__ import annotations

import itertools
import logging

from hypertopo._cells import _compare_sorted, dimension, normalize, unique


def _check_dim(n):
    if n < 0:
        raise ValueError(f"Dimension must be non-negative, got {n}")


def subcells(cells, n):
    """
    All n-dimensional faces of every cell, duplicates included.

    Cells of dimension lower than n contribute nothing. Faces keep the
    relative vertex order of their parent cell.

    :param cells: complex
    :param n: int, face dimension
    :return: list of n-cells (lists of n + 1 vertices)
    """
    _check_dim(n)
    k = n + 1
    res = []
    for c in cells:
        for b in itertools.combinations(c, k):
            res.append(list(b))
    return res


def skeleton(cells, n):
    """
    The unique n-dimensional faces of a complex in canonical order.

    ex. skeleton(triangles, 1) gives all edges, skeleton(cells, 0) all
    vertices.
    """
    res = unique(normalize(subcells(cells, n)))
    logging.debug(f"{n}-skeleton of {len(cells)} cells has {len(res)} cells")
    return res


def explode(cells):
    """Every face of every cell, across all dimensions, canonical and unique."""
    res = []
    for c in cells:
        for k in range(1, len(c) + 1):
            for b in itertools.combinations(c, k):
                res.append(list(b))
    return unique(normalize(res))


def boundary(cells, n=None):
    """
    Mod-2 boundary of a complex.

    Faces of dimension n shared by an even number of cells cancel and the
    ones shared by an odd number survive. For a single simplex every face is
    on the boundary, for a closed manifold the boundary is empty.

    :param cells: complex
    :param n: int, dimension of the boundary faces. Defaults to one less
              than the dimension of the complex.
    :return: list of n-cells, canonical and without duplicates
    """
    if n is None:
        n = dimension(cells) - 1
        if n < 0:
            return []
    faces = normalize(subcells(cells, n))

    res = []
    start = 0
    for i in range(1, len(faces) + 1):
        if i < len(faces) and _compare_sorted(faces[i], faces[start]) == 0:
            continue
        if (i - start) % 2:
            res.append(faces[start])
        start = i

    logging.debug(f"Boundary of {len(cells)} cells has {len(res)} "
                  f"{n}-cells")
    return res
