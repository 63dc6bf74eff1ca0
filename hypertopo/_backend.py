"""
Union-find backends used for connected component labelling.

Two backings are available, chosen by what the caller knows about the vertex
ids of the complex:

- ``DenseBackend``: ``parent``/``rank`` lists indexed by the contiguous ids
  ``0..vertex_count-1``. Ids of vertex_count or more raise ``IndexError``.
- ``SparseBackend``: a :class:`~hypertopo._vertex.VertexCacheIndex` keyed by
  the raw vertex id, for ids with gaps or an unknown upper bound.

Usage::

    from hypertopo._backend import get_backend

    labels = get_backend("dense", vertex_count=10)
    labels = get_backend("sparse")
"""
from __future__ import annotations

from typing import Protocol, runtime_checkable, Any, Hashable

from hypertopo._vertex import VertexCacheIndex


# ---------------------------------------------------------------------------
# Protocol (structural typing interface)
# ---------------------------------------------------------------------------
@runtime_checkable
class ComponentBackend(Protocol):
    """Protocol for union-find backends."""

    name: str

    def link(self, a: Hashable, b: Hashable) -> None:
        """Merge the classes of vertices a and b."""
        ...

    def find(self, a: Hashable) -> int:
        """Return the integer label of the class holding vertex a.

        Labels are stable until the next ``link`` call.
        """
        ...


# ---------------------------------------------------------------------------
# Dense backend (array-backed)
# ---------------------------------------------------------------------------
class DenseBackend:
    """Array-backed union-find over vertex ids 0..vertex_count-1, stored in
    plain lists (numpy scalar indexing is slower for this element walk)."""

    name = "dense"

    def __init__(self, vertex_count: int):
        if vertex_count < 0:
            raise ValueError(
                f"vertex_count must be non-negative, got {vertex_count}"
            )
        self.vertex_count = vertex_count
        self.parent = list(range(vertex_count))
        self.rank = [0] * vertex_count

    def find(self, a: int) -> int:
        parent = self.parent
        while parent[a] != a:
            parent[a] = parent[parent[a]]
            a = parent[a]
        return int(a)

    def link(self, a: int, b: int) -> None:
        ra, rb = self.find(a), self.find(b)
        if ra == rb:
            return
        if self.rank[ra] < self.rank[rb]:
            ra, rb = rb, ra
        self.parent[rb] = ra
        if self.rank[ra] == self.rank[rb]:
            self.rank[ra] += 1


# ---------------------------------------------------------------------------
# Sparse backend (map-backed)
# ---------------------------------------------------------------------------
class SparseBackend:
    """Map-backed union-find keyed by raw vertex id."""

    name = "sparse"

    def __init__(self):
        self.V = VertexCacheIndex()

    def find(self, a: Hashable) -> int:
        return self.V[a].root().index

    def link(self, a: Hashable, b: Hashable) -> None:
        self.V[a].connect(self.V[b])


# ---------------------------------------------------------------------------
# Backend registry
# ---------------------------------------------------------------------------
_BACKENDS: dict[str, type] = {
    "dense": DenseBackend,
    "sparse": SparseBackend,
}


def get_backend(name: str | None = None, **kwargs: Any) -> ComponentBackend:
    """Get a union-find backend by name.

    Parameters
    ----------
    name : str or None
        Backend name: ``"dense"``, ``"sparse"`` or ``None`` (sparse default).
    **kwargs
        Passed to the backend constructor (e.g. ``vertex_count=10`` for
        dense).

    Returns
    -------
    ComponentBackend
        An instance satisfying the :class:`ComponentBackend` protocol.
    """
    if name is None:
        name = "sparse"
    if name not in _BACKENDS:
        raise ValueError(
            f"Unknown backend {name!r}. Available: {list(_BACKENDS.keys())}"
        )
    return _BACKENDS[name](**kwargs)
