"""
Object interface to a simplicial complex stored as a list of cells.

The functions in :mod:`hypertopo._cells`, :mod:`hypertopo._incidence`,
:mod:`hypertopo._skeleton` and :mod:`hypertopo._components` work on plain
cell lists; ``Complex`` bundles a cell list with its (optional) vertex count
and exposes the same queries as methods, returning new ``Complex`` objects
for derived complexes.
"""
# Std. Library
import logging
# Required modules:
import numpy

# Module specific imports
from hypertopo._cells import (clone_cells, count_vertices, dimension,
                              find_cell, normalize)
from hypertopo._components import connected_components
from hypertopo._incidence import dual, incidence, st
from hypertopo._skeleton import boundary, explode, skeleton


# Main complex class:
class Complex:
    def __init__(self, cells=None, vertex_count=None):
        """
        A simplicial complex described by a list of cells, each cell a
        sequence of integer vertex indices.

        Important methods:
            Canonical form and lookup:
                    Complex.normalize, Complex.find
            Neighbourhoods:
                    Complex.incidence, Complex.star, Complex.st
            Derived complexes:
                    Complex.skeleton, Complex.boundary, Complex.explode
            Connectivity:
                    Complex.components

        Important objects:
            HC.cells: The list of cells, shared with the caller (not copied)

        :param cells: list of cells, or 2-D numpy integer array, optional
        :param vertex_count: int, optional
                If the vertex ids are known to be 0..vertex_count-1 then
                star() returns exactly vertex_count entries and components()
                uses the array-backed union-find
        """
        self.cells = [] if cells is None else cells
        self.vertex_count = vertex_count

    def __len__(self):
        return len(self.cells)

    def __iter__(self):
        return iter(self.cells)

    def __getitem__(self, i):
        return self.cells[i]

    def __repr__(self):
        return f"Complex(dim={self.dim}, ncells={len(self.cells)})"

    @property
    def dim(self):
        """Dimension of the highest dimensional cell, -1 if empty"""
        return dimension(self.cells)

    @property
    def nverts(self):
        if self.vertex_count is not None:
            return self.vertex_count
        return count_vertices(self.cells)

    def copy(self):
        return Complex(clone_cells(self.cells), vertex_count=self.vertex_count)

    # %% Canonical form
    def normalize(self, attr=None):
        """
        Put the cells in canonical form in place (see hypertopo.normalize).

        :param attr: list or numpy array parallel to the cells, optional,
                     permuted along with them
        :return: self
        """
        normalize(self.cells, attr)
        return self

    def find(self, c):
        """Index of cell c in a normalized complex, -1 if absent"""
        return find_cell(self.cells, c)

    # %% Neighbourhoods
    def incidence(self, to, restrict=True):
        """
        Incidence index from the cells of this (normalized) complex into the
        cells of ``to``.

        ex. edges.incidence(triangles)[i] lists the triangles touching edge i

        :param to: Complex or list of cells
        :return: list of lists of indices into to
        """
        if isinstance(to, Complex):
            to = to.cells
        return incidence(self.cells, to, restrict=restrict)

    def star(self):
        """Vertex stars, one list of incident cell indices per vertex."""
        return dual(self.cells, self.vertex_count)

    def st(self, v):
        """
        Returns the star domain st(v) of the vertex.

        :param v: The vertex v in st(v)
        :return: st, list of the indices of all cells containing v
        """
        return st(self.cells, v)

    # %% Derived complexes
    def skeleton(self, n):
        return Complex(skeleton(self.cells, n), vertex_count=self.vertex_count)

    def boundary(self, n=None):
        """Mod-2 boundary complex (see hypertopo.boundary)."""
        return Complex(boundary(self.cells, n), vertex_count=self.vertex_count)

    def explode(self):
        return Complex(explode(self.cells), vertex_count=self.vertex_count)

    # %% Connectivity
    def components(self):
        """
        Connected components of the complex.

        The array-backed union-find is used when vertex_count is known.

        :return: list of Complex objects
        """
        comps = connected_components(self.cells, self.vertex_count)
        return [Complex(c, vertex_count=self.vertex_count) for c in comps]

    # %% Conversion
    def cells_array(self):
        """
        Convert the complex to an (ncells, dim + 1) integer array.

        :return: numpy.ndarray
        """
        if isinstance(self.cells, numpy.ndarray):
            return self.cells.copy()
        arities = {len(c) for c in self.cells}
        if len(arities) > 1:
            raise ValueError(f"Cells of mixed arity {sorted(arities)} can not "
                             f"be stored in a single array")
        if not arities:
            logging.debug("Converting an empty complex to an array")
            return numpy.empty((0, 0), dtype=int)
        return numpy.array([list(c) for c in self.cells], dtype=int)
