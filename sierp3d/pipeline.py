from __future__ import annotations
import logging
import warnings
from numbers import Real
from typing import Tuple

import numpy as np

from .builder import InvalidArgument, build, check_nb_it
from .geom import DEFAULT_DISPLAY, DEFAULT_NB_IT, DISPLAY_WARN_DEPTH
from .render import show_mesh

logger = logging.getLogger(__name__)


class MeshSizeWarning(UserWarning):
    """Сітка може не вміститися у пам'ять відеокарти."""


def check_display(display) -> bool:
    """display: bool або число (0/1) як логічний прапорець."""
    if not isinstance(display, (bool, np.bool_, Real)):
        raise InvalidArgument(f"display must be a boolean or a number, got {display!r}")
    return bool(display)


def sierpinski_tetrahedron(
    nb_it: int = DEFAULT_NB_IT,
    display: bool = DEFAULT_DISPLAY,
) -> Tuple[np.ndarray, np.ndarray]:
    """
    Повний пайплайн:
      - перевіряє аргументи (до будь-яких обчислень);
      - попереджає, якщо малювати доведеться надто багато трикутників;
      - будує тетраедр Серпінського з nb_it рівнями в одиничній сфері;
      - за потреби малює його (вже після дедуплікації).

    Повертає:
      V — (N, 3) координати вершин;
      T — (M, 3) трикутники, 0-індекси у V.
    """
    nb_it = check_nb_it(nb_it)
    display = check_display(display)

    if display and nb_it > DISPLAY_WARN_DEPTH:
        warnings.warn(
            f"{24 * 12**nb_it} triangles to display! "
            "Make sure your graphics card has enough memory.",
            MeshSizeWarning,
            stacklevel=2,
        )

    mesh = build(nb_it)

    if display:
        logger.debug("rendering %d triangles", len(mesh.triangles))
        show_mesh(mesh.vertices, mesh.triangles)

    return mesh.vertices, mesh.triangles
