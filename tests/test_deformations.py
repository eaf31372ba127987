import random

import pytest

from meshsculpt.deformations import (
    FreeFormDeform,
    MeshDeform,
    attenuation,
    translate_point,
    twist_mesh,
    twist_normal_z,
    twist_point,
    warp_mesh_on_sphere,
    write_mesh_deform,
)
from meshsculpt.geometry import Vector

TOL = 1e-6


def grid(size=2, origin=Vector(0, 0, 0)):
    ffd = FreeFormDeform()
    ffd.create_grid(origin, 2, size, size, size)
    return ffd


def test_create_grid_points():
    ffd = grid(2)
    assert len(ffd.control_points) == 2
    assert list(ffd.control_points[1][1][1]) == pytest.approx([0.5, 0.5, 0.5], abs=TOL)
    assert list(ffd.control_points[0][1][0]) == pytest.approx([0, 0.5, 0], abs=TOL)


def test_create_grid_frame():
    ffd = grid(3)
    assert list(ffd.repere[0]) == pytest.approx([1, 0, 0], abs=TOL)
    assert list(ffd.repere[2]) == pytest.approx([0, 0, 1], abs=TOL)
    assert list(ffd.repere_normal[1]) == pytest.approx([0, -1, 0], abs=TOL)


def test_create_grid_too_small():
    with pytest.raises(ValueError):
        grid(1)


def test_local_coordinates_offset():
    ffd = grid(2, Vector(1, 2, 3))
    result = ffd.local_coordinates(Vector(1.5, 2.5, 3.5))
    assert list(result) == pytest.approx([0.5, 0.5, 0.5], abs=TOL)


def test_warp_point_corner():
    ffd = grid(2)
    result = ffd.warp_point(Vector(1, 1, 1))
    assert list(result) == pytest.approx([0.5, 0.5, 0.5], abs=TOL)


def test_warp_point_linear_precision():
    ffd = grid(10)
    result = ffd.warp_point(Vector(0.3, 0.7, 0.2))
    assert list(result) == pytest.approx([0.27, 0.63, 0.18], abs=TOL)


def test_ffd_case_grid_counts():
    ffd = grid(10)
    vertices, indices = ffd.output_grid()
    assert len(vertices) == 1000
    assert len(indices) == 5400


def test_output_grid_small():
    vertices, indices = grid(2).output_grid()
    assert len(vertices) == 8
    assert len(indices) == 24
    assert indices[:6] == [0, 1, 0, 2, 0, 4]


def test_ffd_case_modif_point():
    ffd = grid(10)
    before = list(ffd.control_points[0][0][1])
    ffd.modif_point(0, 0, 1, Vector(-0.2, 0.0, 1.0))
    expected = [before[0] - 0.2, before[1], before[2] + 1.0]
    assert list(ffd.control_points[0][0][1]) == pytest.approx(expected, abs=TOL)
    assert list(ffd.warp_point(Vector(0, 0, 0))) == pytest.approx([0, 0, 0], abs=TOL)
    moved = ffd.warp_point(Vector(0, 0, 0.5))
    assert list(moved) != pytest.approx([0, 0, 0.45], abs=TOL)


def test_warp_mesh_keeps_indices():
    ffd = grid(2)
    mesh = ffd.warp_mesh([Vector(1, 1, 1), Vector(0, 0, 0)], [0, 1, 0], [Vector(0, 0, 1)])
    assert mesh.indices == [0, 1, 0]
    assert mesh.normals == []
    assert list(mesh.positions[0]) == pytest.approx([0.5, 0.5, 0.5], abs=TOL)


def test_bounding_grid():
    pts = [Vector(0, 0, 0), Vector(2, 2, 2), Vector(1, 0.5, 1)]
    ffd = FreeFormDeform()
    ffd.create_bounding_grid(pts, 2)
    assert len(ffd.control_points[0][0]) == 2
    assert list(ffd.control_points[1][1][1]) == pytest.approx([1, 1, 1], abs=TOL)


def test_bounding_grid_empty():
    with pytest.raises(ValueError):
        FreeFormDeform().create_bounding_grid([], 2)


def test_random_modif_ranges_and_seed():
    a, b = grid(2), grid(2)
    original = [p for plane in a.control_points for row in plane for p in row]
    a.random_modif(random.Random(7))
    b.random_modif(random.Random(7))
    moved = [p for plane in a.control_points for row in plane for p in row]
    assert moved == [p for plane in b.control_points for row in plane for p in row]
    for old, new in zip(original, moved):
        assert 0.01 <= new.x - old.x <= 0.3
        assert 0.01 <= new.y - old.y <= 0.3
        assert 0.01 <= old.z - new.z <= 0.3


def test_twist_point_axis_x_on_axis():
    result = twist_point(Vector(1, 0, 0), 0, 350)
    assert list(result) == pytest.approx([1, 0, 0], abs=TOL)


def test_twist_point_axis_z():
    result = twist_point(Vector(1, 0, 1), 2, 4)
    assert list(result) == pytest.approx([0, 1, 1], abs=TOL)


def test_twist_point_axis_y():
    result = twist_point(Vector(1, 1, 0), 1, 4)
    assert list(result) == pytest.approx([0, 1, -1], abs=TOL)


def test_twist_point_bad_axis():
    with pytest.raises(ValueError):
        twist_point(Vector(1, 0, 0), 3, 4)


def test_twist_normal_z():
    result = twist_normal_z(Vector(0, 3, 0), Vector(1, 0, 0), 2 * 3.14)
    assert list(result) == pytest.approx([1, 0, 3], abs=TOL)


def test_deformations_case_twist_mesh():
    positions = [Vector(1, 0, 0), Vector(0, 1, 0), Vector(0, 0, 1)]
    normals = [Vector(0, 0, 1)] * 3
    mesh = twist_mesh(positions, [0, 1, 2], normals, 0, 350)
    assert mesh.indices == [0, 1, 2]
    assert len(mesh.normals) == 3
    assert list(mesh.positions[0]) == pytest.approx([1, 0, 0], abs=TOL)
    assert list(mesh.normals[0]) == pytest.approx([0, 0, 0], abs=TOL)


def test_twist_mesh_too_many_normals():
    with pytest.raises(ValueError):
        twist_mesh([Vector()], [], [Vector(), Vector()], 0, 1)


def test_attenuation():
    assert attenuation(Vector(0.5, 0, 0), Vector(), 1) == pytest.approx(0.75)
    assert attenuation(Vector(2, 0, 0), Vector(), 1) == 0
    assert attenuation(Vector(1, 0, 0), Vector(), 1) == 0


def test_translate_point():
    moved = translate_point(Vector(0.5, 0, 0), Vector(0, 1, 0), Vector(), 1)
    assert list(moved) == pytest.approx([0.5, 0.75, 0], abs=TOL)


def test_warp_mesh_on_sphere():
    normals = [Vector(0, 1, 0), Vector(1, 0, 0)]
    mesh = warp_mesh_on_sphere(
        [Vector(), Vector(5, 0, 0)], [0, 1, 1], normals, Vector(0, 1, 0), Vector(), 0.2
    )
    assert list(mesh.positions[0]) == pytest.approx([0, 1, 0], abs=TOL)
    assert list(mesh.positions[1]) == pytest.approx([5, 0, 0], abs=TOL)
    assert mesh.normals == normals
    assert mesh.indices == [0, 1, 1]


def test_write_with_normals(tmp_path):
    path = tmp_path / "m.obj"
    mesh = MeshDeform([Vector(0, 0, 0), Vector(1, 0, 0), Vector(0, 1, 0)], [0, 1, 2, 0],
                      [Vector(0, 0, 1)] * 3)
    write_mesh_deform(str(path), mesh)
    lines = path.read_text().splitlines()
    assert lines[0] == "v 0 0 0"
    assert lines[3] == "vn 0 0 1"
    assert lines[-1] == "f 1 2 3"
    assert len(lines) == 7


def test_write_without_normals(tmp_path):
    path = tmp_path / "m.obj"
    write_mesh_deform(str(path), MeshDeform([Vector(0.5, 1, 2)], [0, 0, 0]))
    assert path.read_text().splitlines() == ["v 0.5 1 2", "f 1//1 1//1 1//1"]