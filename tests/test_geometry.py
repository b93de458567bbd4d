import pytest

from skinrig.geometry import AABB, PI, is_collision, transform_point
from skinrig.matrix import Matrix, identity, perspective_fov_lh, rotation_z, scaling, translation
from skinrig.vector import Float3


def _tup(v):
    return (v.x, v.y, v.z)


BOX = AABB(Float3(-1.0, -1.0, -1.0), Float3(1.0, 1.0, 1.0))


@pytest.mark.parametrize(
    "point",
    [Float3(0.0, 0.0, 0.0), Float3(1.0, -1.0, 1.0), Float3(0.5, 0.9, -0.99)],
)
def test_points_inside_or_on_boundary(point):
    assert is_collision(BOX, point) is True


@pytest.mark.parametrize(
    "point",
    [Float3(1.01, 0.0, 0.0), Float3(0.0, -1.5, 0.0), Float3(0.0, 0.0, 2.0)],
)
def test_points_outside(point):
    assert is_collision(BOX, point) is False


def test_identity_leaves_point():
    p = Float3(1.5, -2.0, 3.0)
    assert transform_point(p, identity()) == p


def test_translation_then_inverse_round_trip():
    p = Float3(1.5, -2.0, 3.0)
    move = Float3(4.0, 5.0, -6.0)
    moved = transform_point(p, translation(move))
    assert _tup(moved - move) == pytest.approx(_tup(p))
    assert _tup(transform_point(moved, translation(move * -1.0))) == pytest.approx(_tup(p))


def test_scaling_scales_components():
    p = Float3(1.5, -2.0, 3.0)
    s = transform_point(p, scaling(Float3(2.0, 2.0, 2.0)))
    assert _tup(s) == pytest.approx(_tup(p * 2.0))


def test_zero_w_raises():
    m = Matrix()
    m.r[3][3] = 0.0
    with pytest.raises(ValueError):
        transform_point(Float3(0.0, 0.0, 0.0), m)


def test_perspective_maps_near_and_far_planes():
    near, far = 0.5, 50.0
    proj = perspective_fov_lh(1.0, 1.0, near, far)
    assert transform_point(Float3(0.0, 0.0, near), proj).z == pytest.approx(0.0, abs=1e-12)
    assert transform_point(Float3(0.0, 0.0, far), proj).z == pytest.approx(1.0)


def test_half_turn_by_pi_flips_x_axis():
    result = transform_point(Float3(1.0, 0.0, 0.0), rotation_z(PI))
    assert _tup(result) == pytest.approx((-1.0, 0.0, 0.0), abs=1e-6)