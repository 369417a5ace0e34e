# sierp3d/cell.py
from __future__ import annotations
from dataclasses import dataclass
from typing import Tuple

from .geom import Pt, midpoint

Tri = Tuple[int, int, int]

# порядок граней: (V1,V2,V3), (V1,V3,V4), (V1,V4,V2), (V2,V3,V4)
FACES: Tuple[Tri, ...] = ((0, 1, 2), (0, 2, 3), (0, 3, 1), (1, 2, 3))
# порядок ребер для середин: 12, 13, 14, 23, 24, 34
EDGES: Tuple[Tuple[int, int], ...] = ((0, 1), (0, 2), (0, 3), (1, 2), (1, 3), (2, 3))


@dataclass(frozen=True)
class Cell:
    """
    Один живий тетраедр на поточному рівні рекурсії.
    summits   — 4 вершини тетра (порядок важливий для детермінізму);
    vertices  — 12 вершин: 4 блоки по 3, по блоку на грань (див. FACES);
    triangles — 4 трикутники з локальними 0-індексами у vertices;
    midpoints — 6 середин ребер у порядку EDGES.
    """
    summits: Tuple[Pt, Pt, Pt, Pt]
    vertices: Tuple[Pt, ...]
    triangles: Tuple[Tri, ...]
    midpoints: Tuple[Pt, ...]


def subdivide(v1: Pt, v2: Pt, v3: Pt, v4: Pt) -> Cell:
    """Поверхня тетра (v1,v2,v3,v4) та середини його ребер. Вироджений вхід не перевіряється."""
    s = (v1, v2, v3, v4)
    vertices = tuple(s[i] for face in FACES for i in face)
    triangles = tuple((3*k, 3*k + 1, 3*k + 2) for k in range(len(FACES)))
    midpoints = tuple(midpoint(s[a], s[b]) for a, b in EDGES)
    return Cell(s, vertices, triangles, midpoints)
