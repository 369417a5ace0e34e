# sierp3d/mesh.py
from __future__ import annotations
import logging
from dataclasses import dataclass
from typing import Dict, List, Sequence, Tuple

import numpy as np
from scipy.spatial import cKDTree

from .cell import Cell
from .geom import DEDUP_TOL

logger = logging.getLogger(__name__)


@dataclass
class Mesh:
    """
    Трикутна сітка:
      vertices  — (N, 3) float64;
      triangles — (M, 3) int, 0-індекси у vertices.
    """
    vertices: np.ndarray
    triangles: np.ndarray

    def __iter__(self):
        yield self.vertices; yield self.triangles

    # ---------- валідація ----------
    def validate(self, tol: float = DEDUP_TOL) -> dict:
        """
        Перевірка сітки:
          - індекси в межах [0, N);
          - три різні індекси у кожному трикутнику;
          - немає однакових трикутників (з точністю до порядку вершин);
          - немає вершин, ближчих за tol по кожній координаті.
        """
        V, T = self.vertices, self.triangles
        n = len(V)

        bad_index = [tuple(int(i) for i in tri) for tri in T if np.any((tri < 0) | (tri >= n))]
        degenerate = [tuple(int(i) for i in tri) for tri in T
                      if tri[0] == tri[1] or tri[1] == tri[2] or tri[0] == tri[2]]

        seen = set()
        duplicate_triangles: List[Tuple[int, int, int]] = []
        for tri in T:
            key = tuple(sorted(int(i) for i in tri))
            if key in seen:
                duplicate_triangles.append(key)
            seen.add(key)

        close_vertices: List[Tuple[int, int]] = []
        if n > 1:
            pairs = cKDTree(V).query_pairs(r=tol, p=np.inf, output_type="ndarray")
            close_vertices = [(int(i), int(j)) for i, j in pairs]

        return {
            "vertices": n,
            "triangles": len(T),
            "bad_index": bad_index,
            "degenerate": degenerate,
            "duplicate_triangles": duplicate_triangles,
            "close_vertices": close_vertices,
        }

    # ---------- OFF-експорт ----------
    def to_off(self) -> str:
        lines = ["OFF", f"{len(self.vertices)} {len(self.triangles)} 0"]
        for x, y, z in self.vertices:
            lines.append(f"{x:.17g} {y:.17g} {z:.17g}")
        for a, b, c in self.triangles:
            lines.append(f"3 {a} {b} {c}")
        return "\n".join(lines)

    def write_off(self, path: str) -> None:
        with open(path, "w", encoding="utf-8") as f:
            f.write(self.to_off())


def merge_cells(cells: Sequence[Cell]) -> Tuple[np.ndarray, np.ndarray]:
    """
    Склеює локальні блоки клітин у глобальні масиви.
    Трикутники кожної клітини зсуваються на кількість уже доданих вершин.
    """
    vertices: List[Tuple[float, float, float]] = []
    triangles: List[Tuple[int, int, int]] = []
    for cell in cells:
        offset = len(vertices)
        triangles.extend((a + offset, b + offset, c + offset) for a, b, c in cell.triangles)
        vertices.extend(tuple(p) for p in cell.vertices)
    V = np.array(vertices, dtype=float).reshape(-1, 3)
    T = np.array(triangles, dtype=np.int64).reshape(-1, 3)
    return V, T


def remove_duplicated_vertices(
    V: np.ndarray, T: np.ndarray, tol: float = DEDUP_TOL
) -> Tuple[np.ndarray, np.ndarray]:
    """
    Зливає вершини, що відрізняються не більше ніж на tol по кожній координаті.
    Лишається перша зустрінута вершина; трикутники переіндексовуються на неї.
    """
    n = len(V)
    if n == 0:
        return V.copy(), T.copy()

    # пари (i < j) у межах допуску, через k-d дерево замість O(n^2)
    pairs = cKDTree(V).query_pairs(r=tol, p=np.inf, output_type="ndarray")
    later: Dict[int, List[int]] = {}
    for i, j in pairs.tolist():
        later.setdefault(i, []).append(j)

    new_idx = [-1] * n
    keep: List[int] = []
    for i in range(n):
        if new_idx[i] != -1:
            continue
        new_idx[i] = len(keep)
        keep.append(i)
        for j in later.get(i, ()):
            if new_idx[j] == -1:
                new_idx[j] = new_idx[i]

    remap = np.array(new_idx, dtype=np.int64)
    logger.debug("vertex dedup: %d -> %d", n, len(keep))
    return V[keep], remap[T]


def remove_duplicated_triangles(T: np.ndarray) -> np.ndarray:
    """Сортує індекси кожного трикутника і прибирає повтори (перше входження лишається)."""
    S = np.sort(T, axis=1)
    if len(S) == 0:
        return S
    _, first = np.unique(S, axis=0, return_index=True)
    out = S[np.sort(first)]
    logger.debug("triangle dedup: %d -> %d", len(T), len(out))
    return out


def mesh_from_cells(cells: Sequence[Cell], tol: float = DEDUP_TOL) -> Mesh:
    V, T = merge_cells(cells)
    V, T = remove_duplicated_vertices(V, T, tol)
    T = remove_duplicated_triangles(T)
    return Mesh(V, T)
