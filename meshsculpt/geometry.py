"""Small 3D vector, transform and axis-aligned box types."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import ClassVar, Iterator


@dataclass(frozen=True)
class Vector:
    """A 3D vector, also used to hold points."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    def __add__(self, other: Vector) -> Vector:
        return Vector(self.x + other.x, self.y + other.y, self.z + other.z)

    def __sub__(self, other: Vector) -> Vector:
        return Vector(self.x - other.x, self.y - other.y, self.z - other.z)

    def __neg__(self) -> Vector:
        return Vector(-self.x, -self.y, -self.z)

    def __mul__(self, scalar: float) -> Vector:
        if not isinstance(scalar, (int, float)):
            return NotImplemented
        return Vector(self.x * scalar, self.y * scalar, self.z * scalar)

    __rmul__ = __mul__

    def __truediv__(self, scalar: float) -> Vector:
        if not isinstance(scalar, (int, float)):
            return NotImplemented
        return Vector(self.x / scalar, self.y / scalar, self.z / scalar)

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y
        yield self.z

    def __getitem__(self, axis: int) -> float:
        return (self.x, self.y, self.z)[axis]

    def __str__(self) -> str:
        return f"Vector({self.x:g}, {self.y:g}, {self.z:g})"


def dot(a: Vector, b: Vector) -> float:
    """Dot product."""
    return a.x * b.x + a.y * b.y + a.z * b.z


def cross(a: Vector, b: Vector) -> Vector:
    """Cross product."""
    return Vector(
        a.y * b.z - a.z * b.y,
        a.z * b.x - a.x * b.z,
        a.x * b.y - a.y * b.x,
    )


def length(v: Vector) -> float:
    """Euclidean length."""
    return math.sqrt(dot(v, v))


def normalize(v: Vector) -> Vector:
    """Unit vector with the direction of ``v``."""
    norm = length(v)
    if norm == 0:
        raise ValueError("cannot normalize a zero-length vector")
    return v / norm


_IDENTITY = (
    (1.0, 0.0, 0.0, 0.0),
    (0.0, 1.0, 0.0, 0.0),
    (0.0, 0.0, 1.0, 0.0),
    (0.0, 0.0, 0.0, 1.0),
)


@dataclass(frozen=True)
class Transform:
    """A 4x4 homogeneous transform stored row by row."""

    m: tuple[tuple[float, ...], ...] = _IDENTITY

    def __post_init__(self) -> None:
        rows = tuple(tuple(float(value) for value in row) for row in self.m)
        if len(rows) != 4 or any(len(row) != 4 for row in rows):
            raise ValueError("a transform needs 4 rows of 4 values")
        object.__setattr__(self, "m", rows)

    def __matmul__(self, other: Transform) -> Transform:
        if not isinstance(other, Transform):
            return NotImplemented
        columns = list(zip(*other.m))
        return Transform(
            tuple(
                tuple(sum(a * b for a, b in zip(row, column)) for column in columns)
                for row in self.m
            )
        )

    def apply_point(self, point: Vector) -> Vector:
        """Transform a point, dividing by the homogeneous coordinate."""
        x, y, z = point
        xt, yt, zt, w = (r[0] * x + r[1] * y + r[2] * z + r[3] for r in self.m)
        if w == 1:
            return Vector(xt, yt, zt)
        if w == 0:
            raise ValueError("homogeneous coordinate is zero")
        return Vector(xt / w, yt / w, zt / w)

    def apply_vector(self, vector: Vector) -> Vector:
        """Transform a direction, ignoring translation."""
        x, y, z = vector
        xt, yt, zt = (r[0] * x + r[1] * y + r[2] * z for r in self.m[:3])
        return Vector(xt, yt, zt)


def rotation_x(degrees: float) -> Transform:
    """Rotation around the x axis."""
    s, c = math.sin(math.radians(degrees)), math.cos(math.radians(degrees))
    return Transform(((1, 0, 0, 0), (0, c, -s, 0), (0, s, c, 0), (0, 0, 0, 1)))


def rotation_y(degrees: float) -> Transform:
    """Rotation around the y axis."""
    s, c = math.sin(math.radians(degrees)), math.cos(math.radians(degrees))
    return Transform(((c, 0, s, 0), (0, 1, 0, 0), (-s, 0, c, 0), (0, 0, 0, 1)))


def rotation_z(degrees: float) -> Transform:
    """Rotation around the z axis."""
    s, c = math.sin(math.radians(degrees)), math.cos(math.radians(degrees))
    return Transform(((c, -s, 0, 0), (s, c, 0, 0), (0, 0, 1, 0), (0, 0, 0, 1)))


@dataclass
class Box:
    """An axis-aligned box stored as its lower and upper corners."""

    a: Vector = field(default_factory=Vector)
    b: Vector = field(default_factory=Vector)

    EPSILON: ClassVar[float] = 1.0e-5
    EDGES: ClassVar[tuple[int, ...]] = (
        0, 1, 2, 3, 4, 5, 6, 7,
        0, 2, 1, 3, 4, 6, 5, 7,
        0, 4, 1, 5, 2, 6, 3, 7,
    )
    NORMALS: ClassVar[tuple[Vector, ...]] = (
        Vector(-1.0, 0.0, 0.0),
        Vector(0.0, -1.0, 0.0),
        Vector(0.0, 0.0, -1.0),
        Vector(1.0, 0.0, 0.0),
        Vector(0.0, 1.0, 0.0),
        Vector(0.0, 0.0, 1.0),
    )

    @classmethod
    def from_center(cls, center: Vector, radius: float) -> Box:
        """Box of half side ``radius`` around ``center``."""
        r = Vector(radius, radius, radius)
        return cls(center - r, center + r)

    def __getitem__(self, index: int) -> Vector:
        return self.a if index == 0 else self.b

    def __str__(self) -> str:
        return f"Box({self.a},{self.b})"

    def center(self) -> Vector:
        return 0.5 * (self.a + self.b)

    def diagonal(self) -> Vector:
        return self.b - self.a

    def size(self) -> Vector:
        return self.b - self.a

    def radius(self) -> float:
        """Half the length of the diagonal."""
        return 0.5 * length(self.b - self.a)

    def volume(self) -> float:
        side = self.b - self.a
        return side.x * side.y * side.z

    def area(self) -> float:
        side = self.b - self.a
        return 2.0 * (side.x * side.y + side.x * side.z + side.y * side.z)

    def contains(self, point: Vector) -> bool:
        """True when ``point`` is strictly inside the box."""
        a, b = self.a, self.b
        return (
            a.x < point.x and a.y < point.y and a.z < point.z
            and b.x > point.x and b.y > point.y and b.z > point.z
        )

    def contains_box(self, box: Box) -> bool:
        """True when both corners of ``box`` are strictly inside."""
        return self.contains(box.a) and self.contains(box.b)

    def translate(self, translation: Vector) -> None:
        self.a = self.a + translation
        self.b = self.b + translation

    def scale(self, factor: float) -> None:
        """Scale both corners, swapping them for a negative factor."""
        self.a = self.a * factor
        self.b = self.b * factor
        if factor < 0.0:
            self.a, self.b = self.b, self.a