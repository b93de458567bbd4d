"""Scale-rotate-translate transforms."""

from __future__ import annotations

from dataclasses import dataclass, field

from skinrig.matrix import (
    Matrix,
    identity,
    quaternion_to_rotation,
    rotation_roll_pitch_yaw,
    scaling,
    translation,
)
from skinrig.quaternion import Quaternion
from skinrig.vector import Float3


def _unit_scale() -> Float3:
    return Float3(1.0, 1.0, 1.0)


@dataclass
class Transform:
    """Transform with Euler-angle rotation in radians."""

    scale: Float3 = field(default_factory=_unit_scale)
    rotate: Float3 = field(default_factory=Float3)
    translate: Float3 = field(default_factory=Float3)

    def make_affine_matrix(self) -> Matrix:
        """Matrix applying scale, then roll-pitch-yaw rotation, then translation."""
        result = identity()
        result *= scaling(self.scale)
        result *= rotation_roll_pitch_yaw(self.rotate.z, self.rotate.x, self.rotate.y)
        result *= translation(self.translate)
        return result


@dataclass
class QuaternionTransform:
    """Transform with quaternion rotation."""

    scale: Float3 = field(default_factory=_unit_scale)
    rotate: Quaternion = field(default_factory=Quaternion)
    translate: Float3 = field(default_factory=Float3)

    def make_affine_matrix(self) -> Matrix:
        """Matrix applying scale, then rotation, then translation."""
        result = identity()
        result *= scaling(self.scale)
        result *= quaternion_to_rotation(self.rotate)
        result *= translation(self.translate)
        return result