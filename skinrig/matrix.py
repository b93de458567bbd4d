"""Row-major 4x4 matrices for a left-handed, row-vector convention."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Iterable

from skinrig.quaternion import Quaternion
from skinrig.vector import Float3


class Matrix:
    """A 4x4 float matrix stored as ``r[row][column]``; the default is identity."""

    __slots__ = ("r",)

    def __init__(self, *values: float) -> None:
        if not values:
            self.r = [[1.0 if i == j else 0.0 for j in range(4)] for i in range(4)]
        elif len(values) == 16:
            self.r = [[float(v) for v in values[i * 4:(i + 1) * 4]] for i in range(4)]
        else:
            raise TypeError(f"Matrix takes 0 or 16 values, got {len(values)}")

    @classmethod
    def _from_rows(cls, rows: Iterable[Iterable[float]]) -> Matrix:
        m = cls.__new__(cls)
        m.r = [[float(v) for v in row] for row in rows]
        return m

    def __repr__(self) -> str:
        return f"Matrix({self.r!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Matrix):
            return NotImplemented
        return self.r == other.r

    __hash__ = None  # type: ignore[assignment]

    def __neg__(self) -> Matrix:
        """Inverse by Gauss-Jordan elimination without pivoting."""
        temp = [
            row[:] + [1.0 if i == j else 0.0 for j in range(4)]
            for i, row in enumerate(self.r)
        ]
        for k in range(4):
            scale = 1.0 / temp[k][k]
            pivot = [v * scale for v in temp[k]]
            temp[k] = pivot
            for i, row in enumerate(temp):
                if i == k:
                    continue
                factor = -row[k]
                temp[i] = [v + p * factor for v, p in zip(row, pivot)]
        return Matrix._from_rows(row[4:] for row in temp)

    def __add__(self, other: Matrix) -> Matrix:
        if not isinstance(other, Matrix):
            return NotImplemented
        return Matrix._from_rows(
            [a + b for a, b in zip(ra, rb)] for ra, rb in zip(self.r, other.r)
        )

    def __sub__(self, other: Matrix) -> Matrix:
        if not isinstance(other, Matrix):
            return NotImplemented
        return Matrix._from_rows(
            [a - b for a, b in zip(ra, rb)] for ra, rb in zip(self.r, other.r)
        )

    def __mul__(self, other: Matrix) -> Matrix:
        if not isinstance(other, Matrix):
            return NotImplemented
        columns = list(zip(*other.r))
        return Matrix._from_rows(
            [sum(a * b for a, b in zip(row, col)) for col in columns] for row in self.r
        )

    def __iadd__(self, other: Matrix) -> Matrix:
        self.r = (self + other).r
        return self

    def __isub__(self, other: Matrix) -> Matrix:
        self.r = (self - other).r
        return self

    def __imul__(self, other: Matrix) -> Matrix:
        self.r = (self * other).r
        return self


@dataclass
class Matrix3x3:
    """A 3x3 float matrix stored as ``r[row][column]``."""

    r: list = field(default_factory=lambda: [[0.0] * 3 for _ in range(3)])


def identity() -> Matrix:
    return Matrix()


def inverse(m: Matrix) -> Matrix:
    return -m


def transpose(m: Matrix) -> Matrix:
    return Matrix._from_rows(zip(*m.r))


def perspective_fov_lh(fov: float, aspect_ratio: float, near_z: float, far_z: float) -> Matrix:
    """Left-handed perspective projection."""
    result = Matrix()
    result.r[1][1] = 1.0 / math.tan(fov / 2.0)
    result.r[0][0] = result.r[1][1] / aspect_ratio
    result.r[2][2] = far_z / (far_z - near_z)
    result.r[3][2] = (far_z * -near_z) / (far_z - near_z)
    result.r[2][3] = 1.0
    result.r[3][3] = 0.0
    return result


def orthographic(width: float, height: float, near_clip: float, far_clip: float) -> Matrix:
    """Orthographic projection with the origin at the top-left corner."""
    return Matrix(
        2.0 / width, 0.0, 0.0, 0.0,
        0.0, 2.0 / -height, 0.0, 0.0,
        0.0, 0.0, 1.0 / (far_clip - near_clip), 0.0,
        -1.0, 1.0, near_clip / (near_clip - far_clip), 1.0,
    )


def scaling(scale: Float3) -> Matrix:
    m = Matrix()
    m.r[0][0] = scale.x
    m.r[1][1] = scale.y
    m.r[2][2] = scale.z
    return m


def translation(offset: Float3) -> Matrix:
    m = Matrix()
    m.r[3][0] = offset.x
    m.r[3][1] = offset.y
    m.r[3][2] = offset.z
    return m


def pitch(rad: float) -> Matrix:
    """Rotation about the X axis."""
    m = Matrix()
    c, s = math.cos(rad), math.sin(rad)
    m.r[1][1] = c
    m.r[2][1] = -s
    m.r[1][2] = s
    m.r[2][2] = c
    return m


def yaw(rad: float) -> Matrix:
    """Rotation about the Y axis."""
    m = Matrix()
    c, s = math.cos(rad), math.sin(rad)
    m.r[0][0] = c
    m.r[0][2] = -s
    m.r[2][0] = s
    m.r[2][2] = c
    return m


def roll(rad: float) -> Matrix:
    """Rotation about the Z axis."""
    m = Matrix()
    c, s = math.cos(rad), math.sin(rad)
    m.r[0][0] = c
    m.r[1][0] = -s
    m.r[0][1] = s
    m.r[1][1] = c
    return m


def rotation_x(rad: float) -> Matrix:
    return pitch(rad)


def rotation_y(rad: float) -> Matrix:
    return yaw(rad)


def rotation_z(rad: float) -> Matrix:
    return roll(rad)


def rotation_roll_pitch_yaw(roll_rad: float, pitch_rad: float, yaw_rad: float) -> Matrix:
    """Roll, then pitch, then yaw."""
    return identity() * roll(roll_rad) * pitch(pitch_rad) * yaw(yaw_rad)


def quaternion_to_rotation(q: Quaternion) -> Matrix:
    x, y, z, w = q.x, q.y, q.z, q.w
    return Matrix(
        w * w + x * x - y * y - z * z, 2.0 * (x * y + w * z), 2.0 * (x * z - w * y), 0.0,
        2.0 * (x * y - w * z), w * w - x * x + y * y - z * z, 2.0 * (y * z + w * x), 0.0,
        2.0 * (x * z + w * y), 2.0 * (y * z - w * x), w * w - x * x - y * y + z * z, 0.0,
        0.0, 0.0, 0.0, 1.0,
    )


def make_affine(scale: Float3, rotate: Quaternion, translate: Float3) -> Matrix:
    """Scale, rotate, then translate."""
    result = Matrix()
    result *= scaling(scale)
    result *= quaternion_to_rotation(rotate)
    result *= translation(translate)
    return result