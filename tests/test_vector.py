import math

import pytest

from emfield.vector import Vector2D


COORDS = [
    (1.5, -2.0),
    (-3.0, 7.25),
    (0.0, 4.0),
    (12.0, 0.5),
]


def test_defaults_are_zero():
    v = Vector2D()
    assert (v.x, v.y) == (0.0, 0.0)


@pytest.mark.parametrize("a_xy", COORDS)
@pytest.mark.parametrize("b_xy", COORDS)
def test_add_then_subtract_round_trips(a_xy, b_xy):
    a = Vector2D(*a_xy)
    b = Vector2D(*b_xy)
    result = (a + b) - b
    assert result.x == pytest.approx(a_xy[0])
    assert result.y == pytest.approx(a_xy[1])


@pytest.mark.parametrize("a_xy", COORDS)
@pytest.mark.parametrize("b_xy", COORDS)
def test_addition_is_commutative(a_xy, b_xy):
    a = Vector2D(*a_xy)
    b = Vector2D(*b_xy)
    assert a + b == b + a


@pytest.mark.parametrize("a_xy", COORDS)
def test_scalar_multiplication_matches_repeated_addition(a_xy):
    a = Vector2D(*a_xy)
    assert a * 2 == a + a
    assert 3 * a == a + a + a


@pytest.mark.parametrize("a_xy", COORDS)
def test_negation_matches_minus_one(a_xy):
    a = Vector2D(*a_xy)
    assert -a == a * -1
    assert a + (-a) == Vector2D()


def test_magnitude_of_three_four():
    assert Vector2D(3, 4).magnitude() == pytest.approx(5.0)


@pytest.mark.parametrize("a_xy", COORDS)
def test_normalized_has_unit_length_and_same_direction(a_xy):
    a = Vector2D(*a_xy)
    n = a.normalized()
    assert n.magnitude() == pytest.approx(1.0)
    assert n.angle() == pytest.approx(a.angle())
    scaled = n * a.magnitude()
    assert scaled.x == pytest.approx(a_xy[0])
    assert scaled.y == pytest.approx(a_xy[1])


def test_normalized_zero_is_zero():
    assert Vector2D().normalized() == Vector2D()


def test_angle_of_axes():
    assert Vector2D(1, 0).angle() == pytest.approx(0.0)
    assert Vector2D(0, 1).angle() == pytest.approx(90.0)


@pytest.mark.parametrize("a_xy", COORDS)
def test_angle_matches_atan2_in_degrees(a_xy):
    a = Vector2D(*a_xy)
    assert math.radians(a.angle()) == pytest.approx(math.atan2(a_xy[1], a_xy[0]))


def test_negation_flips_angle_by_half_turn():
    a = Vector2D(2.0, 1.0)
    diff = (a.angle() - (-a).angle()) % 360
    assert diff == pytest.approx(180.0)


def test_unpacking():
    x, y = Vector2D(1.5, -2.0)
    assert (x, y) == (1.5, -2.0)


def test_vectors_are_immutable():
    v = Vector2D(1, 2)
    with pytest.raises(AttributeError):
        v.x = 5  # type: ignore[misc]
    assert (v.x, v.y) == (1, 2)


def test_adding_non_vector_raises():
    with pytest.raises(TypeError):
        Vector2D(1, 2) + 3  # type: ignore[operator]