"""Bounding boxes and point transformation."""

from __future__ import annotations

from dataclasses import dataclass, field

from skinrig.matrix import Matrix
from skinrig.vector import Float3

PI = 3.14159265359


@dataclass
class AABB:
    """Axis-aligned bounding box."""

    min: Float3 = field(default_factory=Float3)
    max: Float3 = field(default_factory=Float3)


def is_collision(aabb: AABB, point: Float3) -> bool:
    """True when ``point`` lies inside ``aabb``, boundaries included."""
    return (
        aabb.min.x <= point.x <= aabb.max.x
        and aabb.min.y <= point.y <= aabb.max.y
        and aabb.min.z <= point.z <= aabb.max.z
    )


def transform_point(vector: Float3, matrix: Matrix) -> Float3:
    """Transform a point as a row vector with w=1 and divide by the resulting w."""
    r = matrix.r
    x = vector.x * r[0][0] + vector.y * r[1][0] + vector.z * r[2][0] + r[3][0]
    y = vector.x * r[0][1] + vector.y * r[1][1] + vector.z * r[2][1] + r[3][1]
    z = vector.x * r[0][2] + vector.y * r[1][2] + vector.z * r[2][2] + r[3][2]
    w = vector.x * r[0][3] + vector.y * r[1][3] + vector.z * r[2][3] + r[3][3]
    if w == 0.0:
        raise ValueError("transformed point has w == 0")
    return Float3(x / w, y / w, z / w)