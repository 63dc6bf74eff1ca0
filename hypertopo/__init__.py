"""
hypertopo: combinatorial topology of abstract simplicial complexes.

A complex is a list of cells and a cell is a list of integer vertex ids.

Usage::

    from hypertopo import normalize, skeleton, boundary, connected_components

    cells = [[0, 1, 2], [1, 2, 3]]
    skeleton(cells, 1)   # every edge
    boundary(cells, 1)   # [[0, 1], [0, 2], [1, 3], [2, 3]]
    connected_components([[0, 1], [2, 3]])  # [[[0, 1]], [[2, 3]]]
"""
from ._cells import (
    cell_key,
    clone_cells,
    compare_cells,
    count_vertices,
    dimension,
    find_cell,
    normalize,
    normalized,
    unique,
)
from ._complex import Complex
from ._components import (
    connected_components,
    connected_components_dense,
    connected_components_sparse,
)
from ._incidence import dual, incidence, st
from ._skeleton import boundary, explode, skeleton, subcells

__all__ = [
    "Complex",
    "cell_key",
    "clone_cells",
    "compare_cells",
    "count_vertices",
    "dimension",
    "find_cell",
    "normalize",
    "normalized",
    "unique",
    "incidence",
    "dual",
    "st",
    "subcells",
    "skeleton",
    "explode",
    "boundary",
    "connected_components",
    "connected_components_dense",
    "connected_components_sparse",
]
