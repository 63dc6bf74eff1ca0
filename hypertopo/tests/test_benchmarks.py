"""Benchmark suite for hypertopo performance tracking.

Uses pytest-benchmark. Run with:
    pytest hypertopo/tests/test_benchmarks.py --benchmark-only

Save results:
    pytest hypertopo/tests/test_benchmarks.py --benchmark-save=v0.1.0

Skip during normal test runs:
    pytest --benchmark-skip
"""
import itertools

import numpy
import pytest

from hypertopo._cells import clone_cells, normalize
from hypertopo._components import (connected_components_dense,
                                   connected_components_sparse)
from hypertopo._incidence import dual, incidence
from hypertopo._skeleton import boundary, skeleton


def grid_triangles(n):
    """Triangulated n x n vertex grid, 2 (n - 1)^2 triangles."""
    cells = []
    for i, j in itertools.product(range(n - 1), repeat=2):
        v = n * i + j
        cells.append([v, v + 1, v + n + 1])
        cells.append([v, v + n + 1, v + n])
    return cells


def random_tets(ncells, nverts, seed=0):
    rng = numpy.random.default_rng(seed)
    cells = []
    for _ in range(ncells):
        cells.append(rng.choice(nverts, size=4, replace=False).tolist())
    return cells


# --- Canonical form ---

class TestBenchNormalize:
    """Benchmark canonicalization of a copied complex."""

    @pytest.mark.parametrize("n", [10, 40])
    def test_bench_normalize(self, benchmark, n):
        cells = grid_triangles(n)
        cells.reverse()
        benchmark(lambda: normalize(clone_cells(cells)))


# --- Skeleton and boundary ---

class TestBenchSkeleton:
    """Benchmark skeleton and boundary extraction."""

    @pytest.mark.parametrize("dim", [0, 1])
    def test_bench_skeleton(self, benchmark, dim):
        cells = grid_triangles(40)
        benchmark(skeleton, cells, dim)

    def test_bench_boundary(self, benchmark):
        cells = grid_triangles(40)
        result = benchmark(boundary, cells, 1)
        assert len(result) == 4 * 39


# --- Incidence ---

class TestBenchIncidence:
    """Benchmark the general incidence index against the dual fast path."""

    @pytest.mark.parametrize("restrict", [True, False])
    def test_bench_incidence_edges(self, benchmark, restrict):
        cells = random_tets(500, 200)
        edges = skeleton(cells, 1)
        benchmark(incidence, edges, cells, restrict)

    def test_bench_dual(self, benchmark):
        cells = random_tets(500, 200)
        benchmark(dual, cells, 200)


# --- Components ---

class TestBenchComponents:
    """Benchmark dense and sparse connected components."""

    def test_bench_dense(self, benchmark):
        cells = random_tets(2000, 5000)
        benchmark(connected_components_dense, cells, 5000)

    def test_bench_sparse(self, benchmark):
        cells = random_tets(2000, 5000)
        benchmark(connected_components_sparse, cells)
