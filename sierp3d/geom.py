from __future__ import annotations
from dataclasses import dataclass
from math import sqrt
from typing import Tuple

import numpy as np

DEDUP_TOL = 1e4 * np.finfo(float).eps  # допуск злиття вершин (по кожній координаті)

DEFAULT_NB_IT = 3
DEFAULT_DISPLAY = True
DISPLAY_WARN_DEPTH = 6  # глибше цього рівня малювати вже важко


@dataclass(frozen=True)
class Pt:
    x: float
    y: float
    z: float
    def __iter__(self):
        yield self.x; yield self.y; yield self.z

def sub(a: Pt, b: Pt) -> Pt:
    return Pt(a.x - b.x, a.y - b.y, a.z - b.z)

def dot(a: Pt, b: Pt) -> float:
    return a.x*b.x + a.y*b.y + a.z*b.z

def norm(a: Pt) -> float:
    return sqrt(dot(a, a))

def dist(a: Pt, b: Pt) -> float:
    return norm(sub(a, b))

def midpoint(a: Pt, b: Pt) -> Pt:
    return Pt(0.5*(a.x + b.x), 0.5*(a.y + b.y), 0.5*(a.z + b.z))

def root_summits() -> Tuple[Pt, Pt, Pt, Pt]:
    """
    Вершини правильного тетраедра, вписаного в одиничну сферу R(O,1).
    Порядок: верхня вершина, далі три вершини основи (z = -1/3).
    """
    return (
        Pt(0.0, 0.0, 1.0),
        Pt(2*sqrt(2)/3, 0.0, -1/3),
        Pt(-sqrt(2)/3, sqrt(6)/3, -1/3),
        Pt(-sqrt(2)/3, -sqrt(6)/3, -1/3),
    )
