"""
Connected components of a complex.

Two cells belong to the same component when a chain of cells, each sharing
at least one vertex with the next, joins them. The vertex classes are built
with a union-find backend (see :mod:`hypertopo._backend`): an array-backed
one when the vertex ids are known to be ``0..vertex_count-1`` and a
map-backed one otherwise.
"""
from __future__ import annotations

import logging

from hypertopo._backend import get_backend


def _label_cells(cells, labels):
    """Union the vertices of every cell, then group cells by class root."""
    for c in cells:
        if len(c) == 0:
            continue
        v0 = c[0]
        for v in c[1:]:
            labels.link(v0, v)

    components = []
    slot = {}
    for c in cells:
        if len(c) == 0:
            continue
        root = labels.find(c[0])
        if root not in slot:
            slot[root] = len(components)
            components.append([])
        components[slot[root]].append(c.copy() if hasattr(c, 'copy')
                                   else type(c)(c))

    logging.debug(f"{len(cells)} cells split into {len(components)} "
                  f"components using the {labels.name} backend")
    return components


def connected_components_dense(cells, vertex_count):
    """
    Connected components of a complex with vertex ids 0..vertex_count-1.

    :param cells: complex
    :param vertex_count: int, number of vertices (every id must be smaller)
    :return: list of components, each a list of copies of the input cells.
             Components appear in order of their first cell, and cells keep
             their input order.
    """
    return _label_cells(cells, get_backend("dense", vertex_count=vertex_count))


def connected_components_sparse(cells):
    """
    Connected components of a complex with arbitrary vertex ids.

    Same output as :func:`connected_components_dense`, at the cost of a hash
    lookup per vertex access.
    """
    return _label_cells(cells, get_backend("sparse"))


def connected_components(cells, vertex_count=None, method=None):
    """
    Partition a complex into its connected components.

    :param cells: complex
    :param vertex_count: int, optional, number of vertices when the ids are
                         known to be 0..vertex_count-1
    :param method: str, ``"dense"`` (array-backed, requires vertex_count) or
                   ``"sparse"`` (map-backed, any non-negative vertex ids).
                   Defaults to dense when vertex_count is given and sparse
                   otherwise.
    :return: list of components, each a list of cells
    """
    if method is None:
        method = "sparse" if vertex_count is None else "dense"
    if method == "dense":
        if vertex_count is None:
            raise ValueError("The dense method requires vertex_count")
        return connected_components_dense(cells, vertex_count)
    if method == "sparse":
        if vertex_count is not None:
            raise ValueError("The sparse method does not take vertex_count, "
                             "use method='dense'")
        return connected_components_sparse(cells)
    raise ValueError(
        f"Unknown method {method!r}. Available: ['dense', 'sparse']"
    )
