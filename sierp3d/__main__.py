"""A very tiny CLI.

Invoke using e.g. ``python -m sierp3d 4 --no-display --off sierpinski.off``.
"""

import argparse
import logging
import sys

from sierp3d.builder import InvalidArgument
from sierp3d.geom import DEFAULT_NB_IT
from sierp3d.mesh import Mesh
from sierp3d.pipeline import sierpinski_tetrahedron


def main(argv=None):
    if argv is None:
        argv = sys.argv[1:]

    parser = argparse.ArgumentParser(
        prog="sierp3d",
        description="Compute (and display) a Sierpinski tetrahedron inscribed in the unit sphere",
    )
    parser.add_argument(
        "nb_it", nargs="?", type=int, default=DEFAULT_NB_IT,
        help=f"number of iterations / depth level (default {DEFAULT_NB_IT})",
    )
    parser.add_argument("--no-display", action="store_true", help="do not open a plot window")
    parser.add_argument("--off", metavar="PATH", help="write the mesh to an OFF file")
    parser.add_argument("-v", "--verbose", action="store_true", help="debug logging")

    args = parser.parse_args(argv)
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.INFO)

    try:
        V, T = sierpinski_tetrahedron(args.nb_it, display=not args.no_display)
    except InvalidArgument as e:
        parser.error(str(e))

    print(f"Vertices:  {len(V)}")
    print(f"Triangles: {len(T)}")

    if args.off:
        Mesh(V, T).write_off(args.off)
        print(f"{args.off} written.")


if __name__ == "__main__":
    main()
