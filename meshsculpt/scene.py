"""Scene helpers: smooth normals, bounds, terrain map choice and region culling."""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Callable, Sequence, TypeVar

from .geometry import Box, Vector, cross, length, normalize

T = TypeVar("T")
R = TypeVar("R")

DEFAULT_REGIONS_DIVIDE = 16
DEFAULT_MAP_TYPE = 0

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


@dataclass(frozen=True)
class TerrainMaps:
    """Image files a terrain is built from; no biome map for a plain height map."""

    height_map: str
    biome_map: str | None = None


def vertex_normals(positions: Sequence[Vector], indices: Sequence[int]) -> list[Vector]:
    """Per-vertex normals: the normalized sum of the unit normals of adjacent triangles.

    Degenerate triangles add nothing; a vertex with no contribution gets a zero vector.
    """
    if len(indices) % 3:
        raise ValueError("triangle indices must come in groups of 3")
    sums = [Vector() for _ in positions]
    for start in range(0, len(indices), 3):
        a, b, c = indices[start:start + 3]
        v0, v1, v2 = positions[a], positions[b], positions[c]
        face = cross(v1 - v0, v2 - v0)
        if length(face) == 0:
            continue
        face = normalize(face)
        for index in (a, b, c):
            sums[index] = sums[index] + face
    return [normalize(n) if length(n) > 0 else Vector() for n in sums]


def bounds(positions: Sequence[Vector]) -> Box:
    """Axis-aligned box spanning every position."""
    if not positions:
        raise ValueError("cannot bound an empty set of positions")
    lower = Vector(
        min(p.x for p in positions),
        min(p.y for p in positions),
        min(p.z for p in positions),
    )
    upper = Vector(
        max(p.x for p in positions),
        max(p.y for p in positions),
        max(p.z for p in positions),
    )
    return Box(lower, upper)


def terrain_map_paths(map_type: int) -> TerrainMaps:
    """Height and biome maps for a map type: 1 medium, 2 full, 3 plain terrain, else small."""
    if map_type == 3:
        return TerrainMaps("./data/terrain/terrain.png")
    if map_type == 2:
        return TerrainMaps("./data/terrain/hmapfull.png", "./data/terrain/mapfull.png")
    if map_type == 1:
        return TerrainMaps("./data/terrain/hmapmedium.png", "./data/terrain/mapmedium.png")
    return TerrainMaps("./data/terrain/hmapsmall.png", "./data/terrain/mapsmall.png")


def visible_instances(
    instances: Sequence[T],
    regions: Sequence[R],
    region_size: int,
    is_visible: Callable[[R], bool],
) -> list[T]:
    """Instances of the regions that pass ``is_visible``, region by region in order."""
    if region_size < 0:
        raise ValueError("region size cannot be negative")
    visible: list[T] = []
    for i, region in enumerate(regions):
        if is_visible(region):
            visible.extend(instances[i * region_size:(i + 1) * region_size])
    return visible


def _atoi(text: str) -> int:
    match = _LEADING_INT.match(text)
    return int(match.group(1)) if match else 0


def parse_world_args(argv: Sequence[str] | None = None) -> tuple[int, int]:
    """Map type and region division from command arguments (program name excluded)."""
    args = list(argv or ())
    map_type = _atoi(args[0]) if len(args) > 0 else DEFAULT_MAP_TYPE
    regions_divide = _atoi(args[1]) if len(args) > 1 else DEFAULT_REGIONS_DIVIDE
    return map_type, regions_divide