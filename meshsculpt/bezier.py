"""Bezier patches: evaluation, tessellation and OBJ output."""

from __future__ import annotations

import math
from dataclasses import dataclass, field

from .bernstein import bernstein_basis
from .geometry import Vector, cross, length, normalize


@dataclass
class BezierMesh:
    """A tessellated patch: vertices, triangle indices and per-vertex normals."""

    vertices: list[Vector] = field(default_factory=list)
    faces: list[tuple[int, int, int]] = field(default_factory=list)
    normals: list[Vector] = field(default_factory=list)


@dataclass
class BezierPatch:
    """A tensor-product Bezier patch over a grid of control points."""

    control_points: list[list[Vector]] = field(default_factory=list)

    def add_control_point(self, x: float, y: float, z: float, axis: int) -> None:
        self.control_points[axis].append(Vector(x, y, z))

    def create_patch(self, degree_m: int, degree_n: int) -> None:
        """Fill a flat grid of control points with a single raised point at (2, 2)."""
        self.control_points = [
            [
                Vector(m / 5, 2.0 if (m == 2 and n == 2) else 0.0, n / 5)
                for n in range(degree_n)
            ]
            for m in range(degree_m)
        ]

    def partial_derivative_u(self, u: float, v: float) -> Vector:
        cp = self.control_points
        m = len(cp)
        result = Vector()
        for i, (row, next_row) in enumerate(zip(cp, cp[1:])):
            n = len(row)
            bu = bernstein_basis(m - 2, u, i)
            for j, (current, following) in enumerate(zip(row, next_row)):
                bv = bernstein_basis(n - 1, v, j)
                result = result + m * (following - current) * bu * bv
        return result

    def partial_derivative_v(self, u: float, v: float) -> Vector:
        cp = self.control_points
        m = len(cp)
        result = Vector()
        for i, row in enumerate(cp):
            n = len(row)
            bu = bernstein_basis(m - 1, u, i)
            for j, (current, following) in enumerate(zip(row, row[1:])):
                bv = bernstein_basis(n - 2, v, j)
                result = result + m * (following - current) * bu * bv
        return result

    def point(self, u: float, v: float) -> Vector:
        """Point of the patch at parameters (u, v)."""
        cp = self.control_points
        m = len(cp)
        n = len(cp[0])
        result = Vector()
        for i, row in enumerate(cp):
            bu = bernstein_basis(m - 1, u, i)
            for j in range(n):
                bv = bernstein_basis(n - 1, v, j)
                result = result + row[j] * bu * bv
        return result

    def to_mesh(self, nb_vertex: int) -> BezierMesh:
        """Sample an nb_vertex x nb_vertex grid and triangulate its interior."""
        mesh = BezierMesh()
        if nb_vertex < 2:
            return mesh
        step = 1.0 / (nb_vertex - 1)
        for i in range(nb_vertex):
            u = i * step
            for j in range(nb_vertex):
                v = j * step
                mesh.vertices.append(self.point(u, v))
                normal = cross(self.partial_derivative_u(u, v), self.partial_derivative_v(u, v))
                norm = length(normal)
                if norm == 0 or math.isnan(norm):
                    mesh.normals.append(Vector(0.0, 0.0, 0.0))
                else:
                    mesh.normals.append(normalize(normal))
        for i in range(1, nb_vertex - 1):
            for j in range(1, nb_vertex - 1):
                a = i * nb_vertex + j
                below = (i + 1) * nb_vertex + j
                mesh.faces.append((a, below, below + 1))
                mesh.faces.append((a, below + 1, a + 1))
        return mesh

    def control_grid(self) -> tuple[list[Vector], list[int]]:
        """Scaled control points and the triangle indices joining them."""
        cp = self.control_points
        vertices = [
            Vector(1.2 * p.x, 0.5 * p.y, 1.2 * p.z) for row in cp for p in row[:-1]
        ]
        rows = len(cp[0])
        cols = len(cp)
        indices: list[int] = []
        for i in range(cols - 1):
            for j in range(rows - 1):
                top = j * cols + i
                bottom = (j + 1) * cols + i
                indices.extend((top, bottom, top + 1, top + 1, bottom, bottom + 1))
        return vertices, indices

    def write_obj(self, filename: str, mesh: BezierMesh) -> None:
        """Write the mesh as a Wavefront OBJ file."""
        with open(filename, "w", encoding="utf-8") as out:
            for p in mesh.vertices:
                out.write(f"v {p.x:g} {p.y:g} {p.z:g}\n")
            if mesh.normals:
                for n in mesh.normals:
                    out.write(f"vn {n.x:g} {n.y:g} {n.z:g}\n")
                for a, b, c in mesh.faces:
                    out.write(f"f {a}//{a} {b}//{b} {c}//{c}\n")
            else:
                for a, b, c in mesh.faces:
                    out.write(f"f {a} {b} {c}\n")