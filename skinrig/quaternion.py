"""Quaternions for rotations and their interpolation."""

from __future__ import annotations

import math
from dataclasses import dataclass
from numbers import Real

from skinrig.vector import Float3, normalize

_DOT_THRESHOLD = 0.9995


@dataclass
class Quaternion:
    """A rotation quaternion; the default is the identity rotation."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0
    w: float = 1.0

    def __add__(self, other: Quaternion) -> Quaternion:
        if not isinstance(other, Quaternion):
            return NotImplemented
        return Quaternion(
            self.x + other.x, self.y + other.y, self.z + other.z, self.w + other.w
        )

    def __sub__(self, other: Quaternion) -> Quaternion:
        if not isinstance(other, Quaternion):
            return NotImplemented
        return Quaternion(
            self.x - other.x, self.y - other.y, self.z - other.z, self.w - other.w
        )

    def __mul__(self, scalar: float) -> Quaternion:
        if not isinstance(scalar, Real):
            return NotImplemented
        return Quaternion(self.x * scalar, self.y * scalar, self.z * scalar, self.w * scalar)

    def __rmul__(self, scalar: float) -> Quaternion:
        return self.__mul__(scalar)

    def __iadd__(self, other: Quaternion) -> Quaternion:
        self.x += other.x
        self.y += other.y
        self.z += other.z
        self.w += other.w
        return self

    def __isub__(self, other: Quaternion) -> Quaternion:
        self.x -= other.x
        self.y -= other.y
        self.z -= other.z
        self.w -= other.w
        return self


def _dot(a: Quaternion, b: Quaternion) -> float:
    return a.x * b.x + a.y * b.y + a.z * b.z + a.w * b.w


def make_rotate_axis_angle_quaternion(axis: Float3, angle: float) -> Quaternion:
    """Quaternion rotating by ``angle`` radians about ``axis``."""
    unit = normalize(axis)
    half = angle * 0.5
    s = math.sin(half)
    return Quaternion(unit.x * s, unit.y * s, unit.z * s, math.cos(half))


def slerp(a: Quaternion, b: Quaternion, t: float) -> Quaternion:
    """Spherical linear interpolation from ``a`` to ``b``."""
    dot = _dot(a, b)

    if dot > _DOT_THRESHOLD:
        result = a + t * (b - a)
        norm = math.sqrt(_dot(result, result))
        return result * (1.0 / norm)

    if dot < 0.0:
        return slerp(a, b * -1.0, t)

    theta = math.acos(dot) * t

    c = b - a * dot
    c = c * (1.0 / math.sqrt(_dot(c, c)))

    return a * math.cos(theta) + c * math.sin(theta)