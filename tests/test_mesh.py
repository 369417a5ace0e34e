import numpy as np
import pytest
from scipy.spatial.distance import pdist

from sierp3d.builder import build, build_cells
from sierp3d.cell import subdivide
from sierp3d.geom import DEDUP_TOL, Pt, root_summits
from sierp3d.mesh import (
    Mesh,
    merge_cells,
    mesh_from_cells,
    remove_duplicated_triangles,
    remove_duplicated_vertices,
)


def test_merge_cells_offsets_triangles():
    a = subdivide(Pt(0, 0, 0), Pt(1, 0, 0), Pt(0, 1, 0), Pt(0, 0, 1))
    b = subdivide(Pt(5, 0, 0), Pt(6, 0, 0), Pt(5, 1, 0), Pt(5, 0, 1))
    V, T = merge_cells([a, b])
    assert V.shape == (24, 3)
    assert T.shape == (8, 3)
    assert T[:4].tolist() == [[0, 1, 2], [3, 4, 5], [6, 7, 8], [9, 10, 11]]
    assert T[4:].tolist() == [[12, 13, 14], [15, 16, 17], [18, 19, 20], [21, 22, 23]]
    assert V[12].tolist() == [5, 0, 0]


def test_remove_duplicated_vertices_keeps_first_occurrence():
    V = np.array([
        [0.0, 0.0, 0.0],
        [1.0, 0.0, 0.0],
        [1e-13, 0.0, 0.0],  # копія вершини 0 у межах допуску
        [0.0, 1.0, 0.0],
        [1.0, 0.0, 1e-13],  # копія вершини 1
    ])
    T = np.array([[0, 1, 3], [2, 4, 3]])
    V2, T2 = remove_duplicated_vertices(V, T)
    assert V2.tolist() == [[0, 0, 0], [1, 0, 0], [0, 1, 0]]
    assert T2.tolist() == [[0, 1, 2], [0, 1, 2]]


def test_remove_duplicated_vertices_respects_tolerance():
    V = np.array([[0.0, 0.0, 0.0], [10 * DEDUP_TOL, 0.0, 0.0]])
    T = np.zeros((0, 3), dtype=np.int64)
    V2, _ = remove_duplicated_vertices(V, T)
    assert len(V2) == 2


def test_remove_duplicated_vertices_empty():
    V2, T2 = remove_duplicated_vertices(np.zeros((0, 3)), np.zeros((0, 3), dtype=np.int64))
    assert V2.shape == (0, 3)
    assert T2.shape == (0, 3)


def test_remove_duplicated_triangles():
    T = np.array([[2, 1, 0], [3, 4, 5], [0, 1, 2], [5, 3, 4], [1, 2, 3]])
    assert remove_duplicated_triangles(T).tolist() == [[0, 1, 2], [3, 4, 5], [1, 2, 3]]


def test_nb_it_zero_mesh():
    V, T = build(0)
    assert V.shape == (10, 3)
    assert T.shape == (16, 3)


@pytest.mark.parametrize("nb_it", [0, 1, 2, 3])
def test_build_counts(nb_it):
    V, T = build(nb_it)
    n_cells = 4 ** (nb_it + 1)
    assert len(V) == 2 * n_cells + 2
    # кутові тетри мають спільні лише вершини, не грані
    assert len(T) == 4 * n_cells


@pytest.mark.parametrize("nb_it", [0, 1, 2])
def test_build_mesh_invariants(nb_it):
    mesh = build(nb_it)
    V, T = mesh
    assert T.min() >= 0
    assert T.max() < len(V)
    assert np.all(T[:, 0] != T[:, 1])
    assert np.all(T[:, 1] != T[:, 2])
    assert np.all(T[:, 0] != T[:, 2])
    assert len(np.unique(np.sort(T, axis=1), axis=0)) == len(T)
    assert pdist(V).min() > DEDUP_TOL

    report = mesh.validate()
    assert report["vertices"] == len(V)
    assert report["triangles"] == len(T)
    for key in ("bad_index", "degenerate", "duplicate_triangles", "close_vertices"):
        assert report[key] == []


def test_build_is_deterministic():
    V1, T1 = build(2)
    V2, T2 = build(2)
    assert np.array_equal(V1, V2)
    assert np.array_equal(T1, T2)


def test_build_vertices_in_unit_ball():
    V, _ = build(2)
    assert np.all(np.linalg.norm(V, axis=1) <= 1.0 + 1e-12)
    # 4 вершини кореня лишаються у сітці
    for p in root_summits():
        assert np.any(np.all(np.abs(V - np.array(tuple(p))) < 1e-12, axis=1))


def test_validate_reports_problems():
    V = np.array([[0.0, 0.0, 0.0], [1.0, 0.0, 0.0], [0.0, 1.0, 0.0], [0.0, 0.0, 0.0]])
    T = np.array([[0, 1, 2], [2, 1, 0], [0, 0, 1], [0, 1, 7]])
    report = Mesh(V, T).validate()
    assert report["bad_index"] == [(0, 1, 7)]
    assert report["degenerate"] == [(0, 0, 1)]
    assert report["duplicate_triangles"] == [(0, 1, 2)]
    assert report["close_vertices"] == [(0, 3)]


def test_mesh_from_cells_matches_build():
    mesh = mesh_from_cells(build_cells(1))
    V, T = build(1)
    assert np.array_equal(mesh.vertices, V)
    assert np.array_equal(mesh.triangles, T)


def test_to_off():
    mesh = build(0)
    lines = mesh.to_off().splitlines()
    assert lines[0] == "OFF"
    assert lines[1] == "10 16 0"
    assert len(lines) == 2 + 10 + 16
    assert lines[-1].startswith("3 ")
    assert [float(x) for x in lines[2].split()] == mesh.vertices[0].tolist()


def test_write_off(tmp_path):
    path = tmp_path / "s.off"
    mesh = build(0)
    mesh.write_off(str(path))
    assert path.read_text(encoding="utf-8") == mesh.to_off()
