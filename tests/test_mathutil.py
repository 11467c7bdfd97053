import math

import pytest

from dome.mathutil import Vec, fmid, gcd, lerp, mid


def test_length_of_three_four():
    assert Vec(3, 4).length() == 5


def test_add_then_sub_round_trips():
    a, b = Vec(1.5, -2.0), Vec(7.0, 3.25)
    assert (a + b) - b == a


def test_add_is_commutative():
    a, b = Vec(1.0, 2.0), Vec(-3.0, 5.0)
    assert a + b == b + a


def test_neg_equals_scale_by_minus_one():
    v = Vec(2.0, -9.0)
    assert -v == v * -1
    assert v + (-v) == Vec(0.0, 0.0)


def test_scale_multiplies_length():
    v = Vec(3.0, 4.0)
    assert (v * 2).length() == pytest.approx(2 * v.length())


def test_perp_is_orthogonal_and_same_length():
    v = Vec(2.0, 7.0)
    p = v.perp()
    assert v.dot(p) == 0
    assert p.length() == pytest.approx(v.length())


def test_dot_with_self_is_length_squared():
    v = Vec(1.5, -2.5)
    assert v.dot(v) == pytest.approx(v.length() ** 2)


def test_lerp_endpoints():
    assert lerp(2.0, 10.0, 0.0) == 2.0
    assert lerp(2.0, 10.0, 1.0) == 10.0


def test_lerp_midpoint_is_average():
    assert lerp(2.0, 10.0, 0.5) == (2.0 + 10.0) / 2


@pytest.mark.parametrize(
    "values",
    [(1, 2, 3), (3, 2, 1), (2, 1, 3), (2, 3, 1), (1, 3, 2), (3, 1, 2), (5, 5, 1), (0, 0, 0)],
)
def test_mid_is_median(values):
    assert mid(*values) == sorted(values)[1]


def test_mid_clamps_to_range():
    assert mid(0, -5, 10) == 0
    assert mid(0, 15, 10) == 10
    assert mid(0, 7, 10) == 7


@pytest.mark.parametrize("values", [(0.5, 2.5, 1.5), (-1.0, -3.0, 4.0), (9.0, 9.0, 9.0)])
def test_fmid_is_median(values):
    assert fmid(*values) == sorted(values)[1]


@pytest.mark.parametrize("a,b", [(12, 18), (17, 5), (0, 9), (9, 0), (0, 0), (2**40, 2**20)])
def test_gcd_agrees_with_stdlib(a, b):
    assert gcd(a, b) == math.gcd(a, b)


def test_gcd_rejects_negative():
    with pytest.raises(ValueError):
        gcd(-4, 2)