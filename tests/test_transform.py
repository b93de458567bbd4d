import pytest

from skinrig.matrix import identity, pitch, roll, rotation_x, rotation_y, yaw
from skinrig.quaternion import make_rotate_axis_angle_quaternion
from skinrig.transform import QuaternionTransform, Transform
from skinrig.vector import Float3


def _flat(m):
    return [v for row in m.r for v in row]


def test_default_transform_is_identity():
    assert Transform().make_affine_matrix() == identity()
    assert QuaternionTransform().make_affine_matrix() == identity()


def test_scale_only_sets_diagonal():
    m = Transform(scale=Float3(2.0, 3.0, 4.0)).make_affine_matrix()
    assert [m.r[i][i] for i in range(4)] == [2.0, 3.0, 4.0, 1.0]


def test_translation_row_survives_scale_and_rotation():
    move = Float3(4.0, -5.0, 6.0)
    t = Transform(Float3(2.0, 0.5, 3.0), Float3(0.3, 1.2, -0.7), move)
    m = t.make_affine_matrix()
    assert m.r[3] == pytest.approx([move.x, move.y, move.z, 1.0])


@pytest.mark.parametrize(
    "rotate, expected",
    [
        (Float3(0.6, 0.0, 0.0), rotation_x(0.6)),
        (Float3(0.0, 0.6, 0.0), rotation_y(0.6)),
    ],
)
def test_single_axis_rotation(rotate, expected):
    m = Transform(rotate=rotate).make_affine_matrix()
    assert _flat(m) == pytest.approx(_flat(expected))


def test_euler_rotation_order_is_roll_pitch_yaw():
    m = Transform(rotate=Float3(0.2, 0.4, 0.9)).make_affine_matrix()
    assert _flat(m) == pytest.approx(_flat(roll(0.9) * pitch(0.2) * yaw(0.4)))


def test_quaternion_transform_rotation_matches_pitch():
    q = make_rotate_axis_angle_quaternion(Float3(1.0, 0.0, 0.0), 0.8)
    m = QuaternionTransform(rotate=q).make_affine_matrix()
    assert _flat(m) == pytest.approx(_flat(pitch(0.8)), abs=1e-12)


def test_quaternion_transform_translation_row():
    move = Float3(-1.0, 2.5, 3.0)
    q = make_rotate_axis_angle_quaternion(Float3(0.0, 1.0, 1.0), 1.3)
    m = QuaternionTransform(Float3(2.0, 2.0, 2.0), q, move).make_affine_matrix()
    assert m.r[3] == pytest.approx([move.x, move.y, move.z, 1.0])