# examples/main.py
from __future__ import annotations

from sierp3d.builder import build_cells
from sierp3d.mesh import mesh_from_cells
from sierp3d.pipeline import sierpinski_tetrahedron


def main():
    # --- 1) Глибина ---
    nb_it = 3

    # --- 2) Клітини після всіх раундів (до злиття) ---
    cells = build_cells(nb_it)
    print(f"Клітин:            {len(cells)}")
    print(f"Сирих трикутників: {sum(len(c.triangles) for c in cells)}")

    # --- 3) Злиття + дедуплікація ---
    mesh = mesh_from_cells(cells)
    print(f"Вершини:           {len(mesh.vertices)}")
    print(f"Трикутники:        {len(mesh.triangles)}")

    # --- 4) Валідація ---
    report = mesh.validate()
    print("VALIDATION:", {k: v if isinstance(v, int) else len(v) for k, v in report.items()})

    # --- 5) sierpinski.off (MeshLab/ParaView) ---
    mesh.write_off("sierpinski.off")
    print("sierpinski.off записано.")

    # --- 6) Те саме одним викликом, з вікном matplotlib ---
    V, T = sierpinski_tetrahedron(nb_it, display=True)


if __name__ == "__main__":
    main()
