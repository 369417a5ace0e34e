# sierp3d/render.py
from __future__ import annotations

import numpy as np
from matplotlib.colors import LightSource
from mpl_toolkits.mplot3d import Axes3D  # noqa: F401  # потрібен для 'projection="3d"'

SURFACE_COLOR = (0.0, 0.0, 1.0)
VIEW_AZIM = -43.7058
VIEW_ELEV = 21.3485


def draw_mesh(ax, vertices: np.ndarray, triangles: np.ndarray):
    """
    Намалювати трикутну поверхню на готових 3D-осях.
    Однакові масштаби по осях, світло зліва, фіксований ракурс.
    """
    ax.clear()
    if len(triangles) == 0:
        ax.set_title("Немає трикутників")
        return ax

    V = np.asarray(vertices, dtype=float)
    ax.plot_trisurf(
        V[:, 0], V[:, 1], V[:, 2],
        triangles=np.asarray(triangles),
        color=SURFACE_COLOR,
        edgecolor=SURFACE_COLOR,
        linewidth=0.1,
        shade=True,
        lightsource=LightSource(azdeg=135, altdeg=30),
    )

    # однакові масштаби, щільно навколо сітки
    lo, hi = V.min(axis=0), V.max(axis=0)
    mid = 0.5 * (lo + hi)
    half = 0.5 * float(np.max(hi - lo)) or 0.5
    ax.set_xlim(mid[0] - half, mid[0] + half)
    ax.set_ylim(mid[1] - half, mid[1] + half)
    ax.set_zlim(mid[2] - half, mid[2] + half)
    ax.set_box_aspect((1, 1, 1))

    ax.set_xlabel("X")
    ax.set_ylabel("Y")
    ax.set_zlabel("Z")
    ax.view_init(elev=VIEW_ELEV, azim=VIEW_AZIM)
    return ax


def show_mesh(vertices: np.ndarray, triangles: np.ndarray, ax=None, show: bool = True):
    """Окреме вікно з сіткою (або малювання на переданих осях). Повертає осі."""
    import matplotlib.pyplot as plt

    if ax is None:
        fig = plt.figure()
        ax = fig.add_subplot(111, projection="3d")
    draw_mesh(ax, vertices, triangles)
    if show:
        plt.show()
    return ax
