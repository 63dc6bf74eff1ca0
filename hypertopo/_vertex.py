from abc import ABC, abstractmethod


"""Vertex objects"""
class VertexBase(ABC):
    def __init__(self, x, index=None):
        self.x = x  # raw vertex id, any hashable
        self.index = index

    @abstractmethod
    def connect(self, v):
        raise NotImplementedError("This method is only implemented with an "
                                  "associated child of the base class.")

    @abstractmethod
    def root(self):
        raise NotImplementedError("This method is only implemented with an "
                                  "associated child of the base class.")


class VertexLabel(VertexBase):
    """Vertex carrying a link in a disjoint-set forest. Connected vertices
    share the same root."""
    def __init__(self, x, index=None):
        super().__init__(x, index=index)
        self.parent = self
        self.rank = 0

    def root(self):
        v = self
        while v.parent is not v:
            v.parent = v.parent.parent  # path halving
            v = v.parent
        return v

    def connect(self, v):
        a, b = self.root(), v.root()
        if a is b:
            return
        if a.rank < b.rank:
            a, b = b, a
        b.parent = a
        if a.rank == b.rank:
            a.rank += 1


"""
Cache objects
"""
class VertexCacheBase(object):
    def __init__(self):

        self.cache = {}
        self.size = 0  # Total size of cache
        self.index = -1


class VertexCacheIndex(VertexCacheBase):
    """Vertices are created on first access and numbered in that order."""
    def __init__(self):
        super().__init__()
        self.Vertex = VertexLabel

    def __getitem__(self, x):
        try:
            return self.cache[x]
        except KeyError:
            self.index += 1
            self.size += 1
            xval = self.Vertex(x, index=self.index)
            self.cache[x] = xval
            return self.cache[x]
