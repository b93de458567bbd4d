"""Two-, three- and four-component float vectors and spline helpers."""

from __future__ import annotations

import math
from dataclasses import dataclass
from numbers import Real
from typing import Sequence


@dataclass
class Float2:
    """A two-component vector, typically a texture coordinate."""

    x: float = 0.0
    y: float = 0.0

    def __iadd__(self, other: Float2) -> Float2:
        self.x += other.x
        self.y += other.y
        return self


@dataclass
class Float3:
    """A three-component vector."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    def __add__(self, other: Float3) -> Float3:
        if not isinstance(other, Float3):
            return NotImplemented
        return Float3(self.x + other.x, self.y + other.y, self.z + other.z)

    def __sub__(self, other: Float3) -> Float3:
        if not isinstance(other, Float3):
            return NotImplemented
        return Float3(self.x - other.x, self.y - other.y, self.z - other.z)

    def __mul__(self, scalar: float) -> Float3:
        if not isinstance(scalar, Real):
            return NotImplemented
        return Float3(self.x * scalar, self.y * scalar, self.z * scalar)

    def __rmul__(self, scalar: float) -> Float3:
        return self.__mul__(scalar)

    def __iadd__(self, other: Float3) -> Float3:
        self.x += other.x
        self.y += other.y
        self.z += other.z
        return self

    def __isub__(self, other: Float3) -> Float3:
        self.x -= other.x
        self.y -= other.y
        self.z -= other.z
        return self


@dataclass
class Float4:
    """A four-component vector, used for homogeneous positions and colours."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0
    w: float = 0.0


def length(v: Float3) -> float:
    """Euclidean norm of ``v``."""
    return math.sqrt(v.x * v.x + v.y * v.y + v.z * v.z)


def normalize(v: Float3) -> Float3:
    """Return ``v`` scaled to unit length; a zero vector raises ZeroDivisionError."""
    norm = length(v)
    return Float3(v.x / norm, v.y / norm, v.z / norm)


def lerp(a: Float3, b: Float3, t: float) -> Float3:
    """Linear interpolation between ``a`` and ``b``."""
    return Float3(
        a.x * (1.0 - t) + b.x * t,
        a.y * (1.0 - t) + b.y * t,
        a.z * (1.0 - t) + b.z * t,
    )


def catmull_rom_interpolation(
    p0: Float3, p1: Float3, p2: Float3, p3: Float3, t: float
) -> Float3:
    """Catmull-Rom interpolation between ``p1`` and ``p2``."""
    s = 0.5
    t2 = t * t
    t3 = t2 * t

    e3 = (p0 * -1.0) + (p1 * 3.0) - (p2 * 3.0) + p3
    e2 = (p0 * 2.0) - (p1 * 5.0) + (p2 * 4.0) - p3
    e1 = (p0 * -1.0) + p2
    e0 = p1 * 2.0

    return (e3 * t3 + e2 * t2 + e1 * t + e0) * s


def catmull_rom_position(points: Sequence[Float3], t: float) -> Float3:
    """Point on the Catmull-Rom spline through ``points`` at overall parameter ``t``."""
    if len(points) < 4:
        raise ValueError("at least four control points are required")

    division = len(points) - 1
    area_width = 1.0 / division

    local_t = math.fmod(t, area_width) * division
    local_t = min(max(local_t, 0.0), 1.0)

    index = max(0, min(int(t / area_width), division - 1))

    index0 = index - 1 if index > 0 else index
    index1 = index
    index2 = index + 1
    index3 = index + 2
    if index3 >= len(points):
        index3 = index2

    return catmull_rom_interpolation(
        points[index0], points[index1], points[index2], points[index3], local_t
    )