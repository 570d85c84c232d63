# -*- coding: utf-8 -*-
from pathlib import Path

import numpy as np
import pytest

from meshview.errors import DegenerateMeshError, ParseError
from meshview.parsing.mtl import parse_mtl
from meshview.parsing.obj import MeshBuilder, build_mesh, fan_triangulate, newell_normal


def _assert_partition(mesh):
    groups = sorted(mesh.groups.values(), key=lambda g: g.start_index)
    cursor = mesh.ungrouped_count
    for g in groups:
        assert g.start_index == cursor
        cursor = g.end_index
    assert cursor == mesh.index_count


# ---------------------------------------------------------------------------
# Сценарии
# ---------------------------------------------------------------------------
def test_square_is_split_into_two_triangles(square_obj):
    mesh = build_mesh(square_obj)
    assert mesh.triangles.tolist() == [[0, 1, 2], [0, 2, 3]]
    assert np.allclose(mesh.normals, [[0, 0, 1]] * 4)
    # габарит 1 -> 2, центр в начале координат
    assert np.allclose(mesh.positions, [[-1, -1, 0], [1, -1, 0], [1, 1, 0], [-1, 1, 0]])


def test_clockwise_square_faces_down():
    mesh = build_mesh("v 0 0 0\nv 0 1 0\nv 1 1 0\nv 1 0 0\nf 1 2 3 4\n")
    assert np.allclose(mesh.normals, [[0, 0, -1]] * 4)


def test_face_index_out_of_range_fails():
    with pytest.raises(ParseError) as err:
        build_mesh("v 0 0 0\nv 1 0 0\nv 0 1 0\nf 1 2 99\n")
    assert err.value.lineno == 4


def test_two_materials_make_two_groups(two_materials_obj, two_materials_mtl):
    materials = parse_mtl(two_materials_mtl)
    mesh = build_mesh(two_materials_obj, materials)
    red, green = mesh.groups["Red"], mesh.groups["Green"]
    assert list(mesh.groups) == ["Red", "Green"]
    assert (red.start_index, red.index_count) == (0, 3)
    assert (green.start_index, green.index_count) == (3, 3)
    assert red.material is materials["Red"]
    assert green.material.shininess == 10.0
    _assert_partition(mesh)


# ---------------------------------------------------------------------------
# Свойства
# ---------------------------------------------------------------------------
@pytest.mark.parametrize("k", [3, 4, 5, 8])
def test_ngon_produces_k_minus_2_triangles(k):
    angles = np.linspace(0.0, 2.0 * np.pi, k, endpoint=False)
    lines = [f"v {np.cos(a):.6f} {np.sin(a):.6f} 0" for a in angles]
    lines.append("f " + " ".join(str(i + 1) for i in range(k)))
    mesh = build_mesh("\n".join(lines))
    tris = mesh.triangles
    assert len(tris) == k - 2
    assert all(t[0] == 0 for t in tris)


def test_fan_triangulate_helper():
    assert fan_triangulate([4, 5, 6, 7, 8]) == [4, 5, 6, 4, 6, 7, 4, 7, 8]


def test_cube_normals_are_unit_and_positions_fill_cube():
    obj = (Path(__file__).resolve().parents[1] / "examples" / "assets" / "cube.obj").read_text()
    mesh = build_mesh(obj)
    assert len(mesh.normals) == len(mesh.positions) == 8
    assert np.allclose(np.linalg.norm(mesh.normals, axis=1), 1.0, atol=1e-5)
    # вершина куба – среднее трёх граней
    assert np.allclose(mesh.normals, np.sign(mesh.positions) / np.sqrt(3.0), atol=1e-5)
    assert np.isclose(np.abs(mesh.positions).max(), 1.0, atol=1e-5)
    assert mesh.material_libraries == ("cube.mtl",)
    assert mesh.groups["Red"].index_count == 18
    assert mesh.groups["Blue"].start_index == 18
    _assert_partition(mesh)


def test_orphan_vertex_gets_fallback_normal():
    mesh = build_mesh("v 0 0 0\nv 1 0 0\nv 0 0 1\nv 5 5 5\nf 1 3 2\n")
    assert np.allclose(mesh.normals[3], [0, 0, 1])
    assert np.allclose(mesh.normals[:3], [[0, 1, 0]] * 3)
    assert mesh.index_count == 3
    assert int(mesh.indices.max()) < mesh.vertex_count


def test_newell_is_robust_for_non_planar_quad():
    pts = np.array([[0, 0, 0], [1, 0, 0.1], [1, 1, 0], [0, 1, 0.1]], dtype=np.float64)
    n = newell_normal(pts)
    assert np.isclose(np.linalg.norm(n), 1.0)
    assert n[2] > 0.99


def test_newell_survives_huge_coordinates():
    mesh = build_mesh("v 0 0 0\nv 1e200 0 0\nv 1e200 1e200 0\nf 1 2 3\n")
    assert np.all(np.isfinite(mesh.normals))
    assert np.allclose(mesh.normals, [[0, 0, 1]] * 3)
    assert np.all(np.isfinite(mesh.positions))


def test_degenerate_face_leaves_zero_normal():
    n = newell_normal(np.array([[0, 0, 0], [1, 1, 1], [2, 2, 2]], dtype=np.float64))
    assert np.allclose(n, 0.0)


def test_face_token_forms_use_position_index_only():
    text = "v 0 0 0\nv 1 0 0\nv 1 1 0\nvt 0 0\nvn 0 0 -1\nf 1/1/1 2//1 3/1\n"
    mesh = build_mesh(text)
    assert mesh.triangles.tolist() == [[0, 1, 2]]
    # vn игнорируется – нормаль пересчитана
    assert np.allclose(mesh.normals, [[0, 0, 1]] * 3)


def test_unknown_directives_are_ignored():
    text = "o thing\ng grp\ns 1\ncurv 0 1 2\nv 0 0 0\nv 2 0 0\nv 0 2 0\nf 1 2 3\n"
    assert build_mesh(text).index_count == 3


def test_trailing_comments_are_dropped():
    text = "v 0 0 0 # origin\nv 2 0 0\nv 0 2 0\nusemtl Red # colour\nf 1 2 3 # tri\n"
    mesh = build_mesh(text)
    assert mesh.triangles.tolist() == [[0, 1, 2]]
    assert list(mesh.groups) == ["Red"]


def test_unknown_directive_is_logged_at_debug(caplog):
    with caplog.at_level("DEBUG", logger="meshview"):
        build_mesh("curv 0 1 2\nv 0 0 0\nv 2 0 0\nv 0 2 0\nf 1 2 3\n")
    assert "unknown directive 'curv'" in caplog.text


def test_faces_before_usemtl_stay_ungrouped():
    text = "v 0 0 0\nv 1 0 0\nv 0 1 0\nf 1 2 3\nusemtl A\nf 1 3 2\n"
    mesh = build_mesh(text)
    assert mesh.ungrouped_count == 3
    assert (mesh.groups["A"].start_index, mesh.groups["A"].index_count) == (3, 3)
    assert mesh.groups["A"].material is None
    _assert_partition(mesh)


def test_reentered_material_stays_contiguous():
    text = """
    v 0 0 0
    v 1 0 0
    v 0 1 0
    v 0 0 1
    usemtl A
    f 1 2 3
    usemtl B
    f 1 2 4
    usemtl A
    f 1 3 4
    """
    mesh = build_mesh(text)
    assert list(mesh.groups) == ["A", "B"]
    a, b = mesh.groups["A"], mesh.groups["B"]
    assert (a.start_index, a.index_count) == (0, 6)
    assert (b.start_index, b.index_count) == (6, 3)
    assert mesh.triangles.tolist() == [[0, 1, 2], [0, 2, 3], [0, 1, 3]]
    _assert_partition(mesh)


def test_missing_material_logs_warning(caplog, two_materials_obj):
    with caplog.at_level("WARNING", logger="meshview"):
        mesh = build_mesh(two_materials_obj, parse_mtl("newmtl Red\n"))
    assert mesh.groups["Green"].material is None
    assert "Green" in caplog.text


def test_many_vertices_grow_buffers():
    n = 300
    lines = [f"v {i} {i % 7} {i % 3}" for i in range(n)]
    lines += [f"f {i + 1} {i + 2} {i + 3}" for i in range(0, n - 2, 3)]
    mesh = build_mesh("\n".join(lines))
    assert mesh.vertex_count == n
    assert len(mesh.normals) == n


def test_builder_can_be_reused(square_obj, two_materials_obj):
    builder = MeshBuilder()
    first = builder.build(two_materials_obj)
    second = builder.build(square_obj)
    assert len(first.groups) == 2
    assert second.groups == {}
    assert second.vertex_count == 4


def test_result_arrays_are_read_only(square_obj):
    mesh = build_mesh(square_obj)
    with pytest.raises(ValueError):
        mesh.positions[0, 0] = 5.0


# ---------------------------------------------------------------------------
# Ошибки
# ---------------------------------------------------------------------------
@pytest.mark.parametrize("text", [
    "v 1 2\n",
    "v 1 x 3\n",
    "v 1 nan 3\n",
    "v 0 0 0\nv 1 0 0\nf 1 2\n",
    "v 0 0 0\nv 1 0 0\nv 0 1 0\nf 1 2 a\n",
    "v 0 0 0\nv 1 0 0\nv 0 1 0\nf 0 1 2\n",
    "v 0 0 0\nv 1 0 0\nv 0 1 0\nf -1 1 2\n",
    "f 1 2 3\nv 0 0 0\nv 1 0 0\nv 0 1 0\n",
    "v 0 0 0\nv 1 0 0\nv 0 1 0\nusemtl\nf 1 2 3\n",
])
def test_malformed_input_raises_parse_error(text):
    with pytest.raises(ParseError):
        build_mesh(text)


def test_single_point_is_degenerate():
    with pytest.raises(DegenerateMeshError):
        build_mesh("v 3 3 3\nv 3 3 3\n")


def test_empty_mesh_is_degenerate():
    with pytest.raises(DegenerateMeshError):
        build_mesh("# nothing here\n")


def test_degenerate_is_a_parse_error():
    assert issubclass(DegenerateMeshError, ParseError)


def test_subnormal_extent_is_degenerate():
    with pytest.raises(DegenerateMeshError):
        build_mesh("v 0 0 0\nv 5e-324 0 0\nv 0 5e-324 0\nf 1 2 3\n")


def test_overflowing_extent_is_degenerate():
    with pytest.raises(DegenerateMeshError):
        build_mesh("v -1e308 0 0\nv 1e308 0 0\nv 0 1 0\nf 1 2 3\n")


def test_tiny_but_normal_extent_still_normalizes():
    mesh = build_mesh("v 0 0 0\nv 1e-300 0 0\nv 0 1e-300 0\nf 1 2 3\n")
    lo, hi = mesh.bounds()
    assert np.allclose(lo, [-1, -1, 0])
    assert np.allclose(hi, [1, 1, 0])
