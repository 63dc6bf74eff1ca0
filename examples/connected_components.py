"""
Connected components of a complex with dense and sparse vertex ids.

Dense ids (0..vertex_count-1) use the array-backed union-find, arbitrary ids
use the map-backed one. Both give the same partition.
"""
from hypertopo import connected_components

# Two tetrahedra sharing a vertex plus a separate edge
cells = [[0, 1, 2, 3], [3, 4, 5, 6], [7, 8]]

dense = connected_components(cells, 9)
print(f"dense:  {len(dense)} components")
for comp in dense:
    print(f"  {comp}")

# Relabel the vertices to sparse ids and repeat
relabel = {v: 1000 * v + 17 for c in cells for v in c}
sparse_cells = [[relabel[v] for v in c] for c in cells]

sparse = connected_components(sparse_cells)
print(f"sparse: {len(sparse)} components")
for comp in sparse:
    print(f"  {comp}")
