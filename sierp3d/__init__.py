"""
sierp3d — тетраедр Серпінського (Py 3): рекурсивне розбиття на кутові тетри,
злиття в одну трикутну сітку з дедуплікацією, відображення через matplotlib.
"""

__version__ = "0.1.0"

from sierp3d.geom import Pt, DEDUP_TOL, root_summits
from sierp3d.cell import Cell, subdivide
from sierp3d.mesh import Mesh, mesh_from_cells
from sierp3d.builder import InvalidArgument, build, build_cells
from sierp3d.pipeline import MeshSizeWarning, sierpinski_tetrahedron

__all__ = [
    "Pt", "DEDUP_TOL", "root_summits",
    "Cell", "subdivide",
    "Mesh", "mesh_from_cells",
    "InvalidArgument", "build", "build_cells",
    "MeshSizeWarning", "sierpinski_tetrahedron", "__version__",
]
