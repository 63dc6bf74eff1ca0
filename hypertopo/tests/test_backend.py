"""Tests for union-find backends and the vertex cache they use."""
import numpy
import pytest

from hypertopo._backend import (ComponentBackend, DenseBackend, SparseBackend,
                                get_backend)
from hypertopo._vertex import VertexCacheIndex, VertexLabel


# --- Backend protocol and registry ---

class TestGetBackend:
    """Tests for the backend registry."""

    def test_default_is_sparse(self):
        assert isinstance(get_backend(), SparseBackend)

    def test_dense_by_name(self):
        b = get_backend("dense", vertex_count=4)
        assert isinstance(b, DenseBackend)
        assert b.vertex_count == 4

    def test_unknown_name(self):
        with pytest.raises(ValueError):
            get_backend("gpu")

    @pytest.mark.parametrize("backend", [DenseBackend(5), SparseBackend()])
    def test_protocol(self, backend):
        assert isinstance(backend, ComponentBackend)


@pytest.fixture(params=["dense", "sparse"])
def labels(request):
    if request.param == "dense":
        return get_backend("dense", vertex_count=8)
    return get_backend("sparse")


class TestUnionFind:
    """Behaviour shared by both backends."""

    def test_singletons(self, labels):
        assert labels.find(3) != labels.find(4)
        assert labels.find(3) == labels.find(3)

    def test_link_merges(self, labels):
        labels.link(1, 2)
        assert labels.find(1) == labels.find(2)

    def test_transitive(self, labels):
        labels.link(0, 1)
        labels.link(2, 3)
        assert labels.find(0) != labels.find(3)
        labels.link(1, 2)
        assert labels.find(0) == labels.find(3)

    def test_self_link(self, labels):
        labels.link(5, 5)
        assert labels.find(5) != labels.find(6)

    def test_long_chain(self, labels):
        for v in range(7):
            labels.link(v, v + 1)
        roots = {labels.find(v) for v in range(8)}
        assert len(roots) == 1


class TestDenseBackend:
    """Tests specific to the array-backed union-find."""

    def test_lists_initialised(self):
        """parent and rank are plain lists, not numpy arrays."""
        b = DenseBackend(4)
        assert b.parent == [0, 1, 2, 3]
        assert b.rank == [0, 0, 0, 0]
        assert type(b.parent) is list
        assert type(b.rank) is list

    def test_numpy_vertex_ids(self):
        """numpy integer ids index the lists and give int labels."""
        b = DenseBackend(4)
        b.link(numpy.int64(0), numpy.int64(3))
        assert b.find(numpy.int64(3)) == b.find(0)
        assert type(b.find(numpy.int64(3))) is int

    def test_negative_count(self):
        with pytest.raises(ValueError):
            DenseBackend(-1)

    def test_find_returns_int(self):
        b = DenseBackend(3)
        b.link(0, 2)
        assert isinstance(b.find(2), int)


# --- Vertex cache ---

class TestVertexCacheIndex:
    """Tests for the lazily populated vertex cache."""

    def test_created_on_access(self):
        V = VertexCacheIndex()
        assert 7 not in V.cache
        v = V[7]
        assert V.cache[7] is v
        assert isinstance(v, VertexLabel)
        assert v.x == 7

    def test_same_vertex_returned(self):
        V = VertexCacheIndex()
        assert V[3] is V[3]
        assert V.size == 1

    def test_indices_in_access_order(self):
        V = VertexCacheIndex()
        assert [V[x].index for x in (40, 2, 40, 9)] == [0, 1, 0, 2]


class TestVertexLabel:
    """Tests for VertexLabel.connect() and root()."""

    def test_fresh_vertex_is_root(self):
        v = VertexLabel(1, index=0)
        assert v.root() is v

    def test_connect(self):
        a, b, c = VertexLabel(0), VertexLabel(1), VertexLabel(2)
        a.connect(b)
        assert a.root() is b.root()
        assert c.root() is not a.root()
        c.connect(b)
        assert c.root() is a.root()

    def test_union_by_rank(self):
        a, b, c = VertexLabel(0), VertexLabel(1), VertexLabel(2)
        a.connect(b)
        root = a.root()
        c.connect(a)
        assert a.root() is root
        assert root.rank == 1
