"""
Topology queries on a small triangle mesh.

Builds the edges of a triangulated square with a hole-free interior, finds
the triangles on each side of every edge and extracts the boundary loop.
"""
from hypertopo import Complex, boundary, incidence, normalize, skeleton

# A 3x3 vertex grid split into 8 triangles
#   6 - 7 - 8
#   | / | / |
#   3 - 4 - 5
#   | / | / |
#   0 - 1 - 2
triangles = []
for i in range(2):
    for j in range(2):
        v = 3 * i + j
        triangles.append([v, v + 1, v + 4])
        triangles.append([v, v + 4, v + 3])

normalize(triangles)
edges = skeleton(triangles, 1)
print(f"{len(triangles)} triangles, {len(edges)} edges")

# Interior edges touch two triangles, boundary edges only one
index = incidence(edges, triangles)
interior = [e for e, t in zip(edges, index) if len(t) == 2]
print(f"{len(interior)} interior edges")

loop = boundary(triangles, 1)
print(f"Boundary has {len(loop)} edges: {loop}")

# The same queries through the object interface
HC = Complex(triangles, vertex_count=9)
print(f"Vertex 4 lies in triangles {HC.st(4)}")
print(f"Boundary vertices: {HC.boundary().skeleton(0).cells}")
