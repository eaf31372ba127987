"""Mesh deformations: free-form lattices, twists and local sphere warps."""

from __future__ import annotations

import math
import random
from dataclasses import dataclass, field
from typing import Sequence

from .bernstein import bernstein_basis
from .geometry import Vector, cross, dot, length, normalize, rotation_x, rotation_y, rotation_z

_ROTATIONS = (rotation_x, rotation_y, rotation_z)


@dataclass
class MeshDeform:
    """A deformed mesh: positions, triangle indices and normals."""

    positions: list[Vector] = field(default_factory=list)
    indices: list[int] = field(default_factory=list)
    normals: list[Vector] = field(default_factory=list)


@dataclass
class FreeFormDeform:
    """A Bezier lattice that warps points placed in its local frame."""

    control_points: list[list[list[Vector]]] = field(default_factory=list)
    repere: list[Vector] = field(default_factory=lambda: [Vector()] * 3)
    repere_normal: list[Vector] = field(default_factory=lambda: [Vector()] * 3)

    def _compute_frame(self) -> None:
        cp = self.control_points
        if len(cp) < 2 or len(cp[0]) < 2 or len(cp[0][0]) < 2:
            raise ValueError("a lattice needs at least 2 points along each axis")
        origin = cp[0][0][0]
        s = normalize(cp[1][0][0] - origin)
        t = normalize(cp[0][1][0] - origin)
        u = normalize(cp[0][0][1] - origin)
        self.repere = [s, t, u]
        self.repere_normal = [
            normalize(cross(t, u)),
            normalize(cross(s, u)),
            normalize(cross(s, t)),
        ]

    def create_grid(
        self,
        position: Vector,
        step: float,
        size_x: int,
        size_y: int,
        size_z: int,
    ) -> None:
        """Build a size_x x size_y x size_z lattice starting at ``position``."""
        self.control_points = [
            [
                [
                    position + Vector(i / size_x, j / size_y, k / size_z)
                    for k in range(int(size_z))
                ]
                for j in range(int(size_y))
            ]
            for i in range(int(size_x))
        ]
        self._compute_frame()

    def create_bounding_grid(self, positions: Sequence[Vector], div: int) -> None:
        """Build a div^3 lattice from the lower corner of the points' bounds."""
        if not positions:
            raise ValueError("cannot bound an empty set of positions")
        pmin = Vector(
            min(p.x for p in positions),
            min(p.y for p in positions),
            min(p.z for p in positions),
        )
        pmax = Vector(
            max(p.x for p in positions),
            max(p.y for p in positions),
            max(p.z for p in positions),
        )
        distance = (pmax - pmin) / div
        self.control_points = [
            [
                [
                    pmin + Vector(i * distance.x, j * distance.y, k * distance.z)
                    for k in range(div)
                ]
                for j in range(div)
            ]
            for i in range(div)
        ]
        self._compute_frame()

    def local_coordinates(self, point: Vector) -> Vector:
        """Coordinates (s, t, u) of ``point`` in the lattice frame."""
        offset = point - self.control_points[0][0][0]
        s, t, u = (
            dot(n, offset) / dot(n, axis)
            for n, axis in zip(self.repere_normal, self.repere)
        )
        return Vector(s, t, u)

    def warp_point(self, point: Vector) -> Vector:
        """Image of ``point`` through the trivariate Bezier lattice."""
        cp = self.control_points
        x_size, y_size, z_size = len(cp), len(cp[0]), len(cp[0][0])
        stu = self.local_coordinates(point)
        result = Vector()
        for i, plane in enumerate(cp):
            bu = bernstein_basis(x_size - 1, stu.x, i)
            for j, row in enumerate(plane):
                bv = bernstein_basis(y_size - 1, stu.y, j)
                for k, control in enumerate(row):
                    bw = bernstein_basis(z_size - 1, stu.z, k)
                    result = result + (bu * bv * bw) * control
        return result

    def random_modif(self, rng: random.Random | None = None) -> None:
        """Jitter every control point: +x, +y and -z by amounts in [0.01, 0.3]."""
        rng = rng or random.Random()
        for plane in self.control_points:
            for row in plane:
                for k, p in enumerate(row):
                    dx = rng.uniform(0.01, 0.3)
                    dy = rng.uniform(0.01, 0.3)
                    dz = rng.uniform(0.01, 0.3)
                    row[k] = Vector(p.x + dx, p.y + dy, p.z - dz)

    def modif_point(self, i: int, j: int, k: int, direction: Vector) -> None:
        """Move one control point by ``direction``."""
        self.control_points[i][j][k] = self.control_points[i][j][k] + direction

    def output_grid(self) -> tuple[list[Vector], list[int]]:
        """Lattice points, flattened, and line indices joining neighbours."""
        cp = self.control_points
        vertices = [p for plane in cp for row in plane for p in row]
        slices, rows, cols = len(cp), len(cp[0]), len(cp[0][0])
        indices: list[int] = []
        for i in range(slices):
            for j in range(rows):
                for k in range(cols):
                    here = i * rows * cols + j * cols + k
                    if k < cols - 1:
                        indices.extend((here, here + 1))
                    if j < rows - 1:
                        indices.extend((here, here + cols))
                    if i < slices - 1:
                        indices.extend((here, here + rows * cols))
        return vertices, indices

    def warp_mesh(
        self,
        positions: Sequence[Vector],
        indices: Sequence[int],
        normals: Sequence[Vector],
    ) -> MeshDeform:
        """Warp every position; indices are kept, normals are not carried over."""
        return MeshDeform(
            positions=[self.warp_point(p) for p in positions],
            indices=list(indices),
        )


def twist_point(point: Vector, axis: int, period: float) -> Vector:
    """Rotate ``point`` around ``axis`` by 360 degrees per ``period`` along it."""
    if axis not in (0, 1, 2):
        raise ValueError(f"axis must be 0, 1 or 2, not {axis}")
    alpha = 360 * point[axis] / period
    return _ROTATIONS[axis](alpha).apply_point(point)


def twist_normal_z(point: Vector, normal: Vector, period: float) -> Vector:
    """Transform a normal by the Jacobian of a twist around z."""
    alpha_deriv = (2 * 3.14) / period
    alpha = point.z * alpha_deriv
    s, c = math.sin(alpha), math.cos(alpha)
    return Vector(
        c * normal.x - s * normal.y,
        s * normal.x + c * normal.y,
        point.y * alpha_deriv * normal.x - point.x * alpha_deriv * normal.y,
    )


def twist_mesh(
    positions: Sequence[Vector],
    indices: Sequence[int],
    normals: Sequence[Vector],
    axis: int,
    period: float,
) -> MeshDeform:
    """Twist every position around ``axis`` and adjust the normals."""
    if len(normals) > len(positions):
        raise ValueError("more normals than positions")
    return MeshDeform(
        positions=[twist_point(p, axis, period) for p in positions],
        indices=list(indices),
        normals=[twist_normal_z(p, n, period) for p, n in zip(positions, normals)],
    )


def attenuation(point: Vector, center: Vector, radius: float) -> float:
    """Weight 1 - d^2 inside the sphere, 0 outside."""
    d = length(point - center)
    return 1 - d * d if d < radius else 0.0


def translate_point(point: Vector, translation: Vector, center: Vector, radius: float) -> Vector:
    """Move ``point`` by ``translation`` scaled by its attenuation."""
    return point + translation * attenuation(point, center, radius)


def warp_mesh_on_sphere(
    positions: Sequence[Vector],
    indices: Sequence[int],
    normals: Sequence[Vector],
    translation: Vector,
    center: Vector,
    radius: float,
) -> MeshDeform:
    """Translate the points near ``center``, keeping indices and normals."""
    return MeshDeform(
        positions=[translate_point(p, translation, center, radius) for p in positions],
        indices=list(indices),
        normals=list(normals),
    )


def write_mesh_deform(filename: str, mesh: MeshDeform) -> None:
    """Write a deformed mesh as a Wavefront OBJ file."""
    with open(filename, "w", encoding="utf-8") as out:
        for p in mesh.positions:
            out.write(f"v {p.x:g} {p.y:g} {p.z:g}\n")
        for n in mesh.normals:
            out.write(f"vn {n.x:g} {n.y:g} {n.z:g}\n")
        idx = mesh.indices
        for start in range(0, len(idx) - 2, 3):
            a, b, c = (i + 1 for i in idx[start:start + 3])
            if mesh.normals:
                out.write(f"f {a} {b} {c}\n")
            else:
                out.write(f"f {a}//{a} {b}//{b} {c}//{c}\n")