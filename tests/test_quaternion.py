import math

import pytest

from skinrig.quaternion import Quaternion, make_rotate_axis_angle_quaternion, slerp
from skinrig.vector import Float3


def _tup(q):
    return (q.x, q.y, q.z, q.w)


def _norm(q):
    return math.sqrt(sum(c * c for c in _tup(q)))


P = Quaternion(0.1, -0.4, 0.25, 0.8)
Q = Quaternion(-0.3, 0.2, 0.6, 0.5)


def test_default_is_identity():
    assert _tup(Quaternion()) == (0.0, 0.0, 0.0, 1.0)


def test_add_sub_round_trip():
    assert _tup((P + Q) - Q) == pytest.approx(_tup(P))
    assert P + Q == Q + P


def test_scalar_multiplication_both_sides():
    assert P * 2.0 == 2.0 * P
    assert P * 1.0 == P


def test_mul_accepts_int_scalar():
    assert _tup(P * 2) == pytest.approx(_tup(P * 2.0))
    assert _tup(2 * P) == pytest.approx((0.2, -0.8, 0.5, 1.6))


def test_iadd_isub_in_place():
    q = Quaternion(P.x, P.y, P.z, P.w)
    alias = q
    q += Q
    assert q is alias
    assert q == P + Q
    q -= Q
    assert q is alias
    assert _tup(q) == pytest.approx(_tup(P))


def test_axis_angle_zero_is_identity():
    q = make_rotate_axis_angle_quaternion(Float3(1.0, 2.0, 3.0), 0.0)
    assert _tup(q) == pytest.approx(_tup(Quaternion()))


def test_axis_angle_is_unit_and_ignores_axis_length():
    q1 = make_rotate_axis_angle_quaternion(Float3(1.0, 2.0, -2.0), 1.2)
    q2 = make_rotate_axis_angle_quaternion(Float3(5.0, 10.0, -10.0), 1.2)
    assert _norm(q1) == pytest.approx(1.0)
    assert _tup(q1) == pytest.approx(_tup(q2))


def _rot_z(angle):
    return make_rotate_axis_angle_quaternion(Float3(0.0, 0.0, 1.0), angle)


def test_slerp_endpoints():
    a = Quaternion()
    b = _rot_z(math.pi / 2)
    assert _tup(slerp(a, b, 0.0)) == pytest.approx(_tup(a))
    assert _tup(slerp(a, b, 1.0)) == pytest.approx(_tup(b))


def test_slerp_midpoint_is_half_rotation():
    a = Quaternion()
    b = _rot_z(math.pi / 2)
    mid = slerp(a, b, 0.5)
    assert _tup(mid) == pytest.approx(_tup(_rot_z(math.pi / 4)))
    assert _norm(mid) == pytest.approx(1.0)


@pytest.mark.parametrize("t", [0.2, 0.5, 0.9])
def test_slerp_takes_short_path_for_negated_target(t):
    a = Quaternion()
    b = _rot_z(2.0)
    assert _tup(slerp(a, b * -1.0, t)) == pytest.approx(_tup(slerp(a, b, t)))


def test_slerp_nearly_equal_quaternions_stays_normalized():
    a = _rot_z(0.3)
    b = _rot_z(0.31)
    result = slerp(a, b, 0.5)
    assert _norm(result) == pytest.approx(1.0)
    assert _tup(result) == pytest.approx(_tup(_rot_z(0.305)), abs=1e-6)