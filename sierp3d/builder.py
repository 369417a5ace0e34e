# sierp3d/builder.py
from __future__ import annotations
import logging
from numbers import Integral, Real
from typing import List, Sequence, Tuple

from .cell import Cell, subdivide
from .geom import Pt, dist, root_summits
from .mesh import Mesh, mesh_from_cells

logger = logging.getLogger(__name__)


class InvalidArgument(ValueError):
    """Неприйнятний аргумент; обчислення не починається."""


def check_nb_it(nb_it) -> int:
    """Кількість ітерацій: ціле число >= 0 (3.0 теж годиться, True ні)."""
    if isinstance(nb_it, bool) or not isinstance(nb_it, Real):
        raise InvalidArgument(f"nb_it must be a non-negative integer, got {nb_it!r}")
    if not isinstance(nb_it, Integral) and not float(nb_it).is_integer():
        raise InvalidArgument(f"nb_it must be a non-negative integer, got {nb_it!r}")
    if nb_it < 0:
        raise InvalidArgument(f"nb_it must be a non-negative integer, got {nb_it!r}")
    return int(nb_it)


def nearest_midpoints(summit: Pt, midpoints: Sequence[Pt], k: int = 3) -> List[Pt]:
    """k найближчих до summit середин; при рівності відстаней виграє менший індекс (сортування стабільне)."""
    order = sorted(range(len(midpoints)), key=lambda i: dist(summit, midpoints[i]))
    return [midpoints[i] for i in order[:k]]


def _first(pts: Sequence[Pt], coord: str, pick) -> Pt:
    target = pick(getattr(p, coord) for p in pts)
    return next(p for p in pts if getattr(p, coord) == target)


def canonical_order(pts: Sequence[Pt]) -> Tuple[Pt, Pt, Pt, Pt]:
    """
    Канонічний порядок вершин нового тетра:
      zmax, xmax, ymax, ymin (при рівності перша в поточному порядку).
    """
    return (
        _first(pts, "z", max),
        _first(pts, "x", max),
        _first(pts, "y", max),
        _first(pts, "y", min),
    )


def children(cell: Cell) -> List[Cell]:
    """4 кутові під-тетри: кожна вершина + 3 найближчі до неї середини."""
    out: List[Cell] = []
    for s in cell.summits:
        candidate = [s, *nearest_midpoints(s, cell.midpoints)]
        out.append(subdivide(*canonical_order(candidate)))
    return out


def iterate(cells: Sequence[Cell]) -> List[Cell]:
    """Один раунд: кожна клітина -> 4 дочірні, у порядку батьків."""
    return [child for cell in cells for child in children(cell)]


def build_cells(nb_it: int) -> List[Cell]:
    """
    Клітини після nb_it раундів.
    Перший розподіл кореня на 4 кути виконується завжди, тож клітин 4**(nb_it+1).
    """
    nb_it = check_nb_it(nb_it)
    cells = [subdivide(*root_summits())]
    for p in range(nb_it + 1):
        cells = iterate(cells)
        logger.debug("round %d: %d live cells", p, len(cells))
    return cells


def build(nb_it: int) -> Mesh:
    """Повний пайплайн без відображення: рекурсія -> злиття -> дедуплікація."""
    cells = build_cells(nb_it)
    mesh = mesh_from_cells(cells)
    logger.info(
        "Sierpinski tetrahedron, nb_it=%s: %d vertices, %d triangles",
        nb_it, len(mesh.vertices), len(mesh.triangles),
    )
    return mesh
