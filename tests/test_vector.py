import numpy as np
import pytest

from impulse.vector import Vector, Vector3


def test_dimensions():
    x, y, z = 1.0, 2.0, 3.0
    v = Vector3(x, y, z)
    assert (v.x, v.y, v.z) == (x, y, z)
    assert (v[0], v[1], v[2]) == (x, y, z)
    assert len(v) == 3


def test_zero_and_axes():
    assert Vector.zero() == Vector3(0.0, 0.0, 0.0)
    assert len(Vector.zero(5)) == 5
    assert Vector.x_axis().cross(Vector.y_axis()) == Vector.z_axis()
    with pytest.raises(ValueError):
        Vector.zero(0)
    with pytest.raises(ValueError):
        Vector()


def test_inverse_does_not_mutate():
    v = Vector3(1.0, 2.0, 3.0)
    assert v.inverse() == Vector3(-1.0, -2.0, -3.0)
    assert -v == Vector3(-1.0, -2.0, -3.0)
    assert v == Vector3(1.0, 2.0, 3.0)


def test_magnitude():
    x, y, z = 1.0, 2.0, 3.0
    mag_sq = x * x + y * y + z * z
    v = Vector3(x, y, z)
    assert v.magnitude_squared() == mag_sq
    assert v.magnitude() == pytest.approx(np.sqrt(mag_sq))


def test_normalize():
    x, y, z = 1.0, 2.0, 3.0
    mag = np.sqrt(x * x + y * y + z * z)
    n = Vector3(x, y, z).normalize()
    assert n.isclose(Vector3(x / mag, y / mag, z / mag))
    assert n.magnitude() == pytest.approx(1.0)


def test_normalize_zero_vector_is_unchanged():
    zero = Vector.zero()
    n = zero.normalize()
    assert n == zero
    assert not np.any(np.isnan(n.to_numpy()))
    # Returned as a copy, not the same object.
    n[0] = 5.0
    assert zero == Vector.zero()


def test_add_sub():
    assert Vector3(1.0, 2.0, 3.0) + Vector3(1.0, 2.0, 3.0) == Vector3(2.0, 4.0, 6.0)
    assert Vector3(2.0, 4.0, 6.0) - Vector3(1.0, 2.0, 3.0) == Vector3(1.0, 2.0, 3.0)


def test_add_assign_sub_assign_in_place():
    v = Vector3(1.0, 2.0, 3.0)
    alias = v
    v += Vector3(1.0, 2.0, 3.0)
    assert v is alias
    assert v == Vector3(2.0, 4.0, 6.0)
    v -= Vector3(2.0, 2.0, 2.0)
    assert v == Vector3(0.0, 2.0, 4.0)


def test_scalar_product():
    assert Vector3(1.0, 2.0, -3.0) * 3.0 == Vector3(3.0, 6.0, -9.0)
    assert 3.0 * Vector3(1.0, 2.0, -3.0) == Vector3(3.0, 6.0, -9.0)
    assert np.float64(2.0) * Vector3(1.0, 2.0, 3.0) == Vector3(2.0, 4.0, 6.0)
    v = Vector3(1.5, -2.5, 7.0)
    assert v * 1.0 == v


def test_mul_assign_scalar():
    v = Vector3(1.0, 2.0, -3.0)
    v *= 3.0
    assert v == Vector3(3.0, 6.0, -9.0)


def test_component_product():
    a = Vector3(1.0, 2.0, -3.0)
    b = Vector3(3.0, 3.0, 3.0)
    assert a * b == Vector3(3.0, 6.0, -9.0)
    assert a.component_product(b) == Vector3(3.0, 6.0, -9.0)
    a *= b
    assert a == Vector3(3.0, 6.0, -9.0)


def test_index():
    v = Vector3(1.0, 2.0, 3.0)
    assert v[1] == 2.0
    v[1] = 0.0
    assert v[1] == 0.0
    v.z = 9.0
    assert v == Vector3(1.0, 0.0, 9.0)


def test_index_out_of_range():
    v = Vector3(1.0, 2.0, 3.0)
    with pytest.raises(IndexError):
        v[3]
    with pytest.raises(IndexError):
        v[-1]
    with pytest.raises(IndexError):
        v[3] = 1.0


def test_named_accessors_need_three_components():
    with pytest.raises(ValueError):
        Vector(1.0, 2.0).z
    with pytest.raises(ValueError):
        Vector(1.0, 2.0, 3.0, 4.0).x
    v = Vector(1.0, 2.0, 3.0, 4.0)
    with pytest.raises(ValueError):
        v.y = 0.0
    assert v == Vector(1.0, 2.0, 3.0, 4.0)


def test_vector3_takes_exactly_three_components():
    assert Vector3(1.0, 2.0, 3.0) == Vector(1.0, 2.0, 3.0)
    with pytest.raises(TypeError):
        Vector3(1.0, 2.0)
    with pytest.raises(TypeError):
        Vector3(1.0, 2.0, 3.0, 4.0)


def test_length_mismatch_rejected():
    a = Vector(1.0, 2.0)
    b = Vector3(1.0, 2.0, 3.0)
    with pytest.raises(ValueError):
        a + b
    with pytest.raises(ValueError):
        a.dot(b)
    with pytest.raises(ValueError):
        b -= Vector(1.0, 1.0)
    with pytest.raises(TypeError):
        b + 1.0


def test_dot_product():
    assert Vector3(1.0, 2.0, 3.0).dot(Vector3(3.0, 2.0, 1.0)) == 10.0


def test_cross_product():
    assert Vector3(1.0, 2.0, 3.0).cross(Vector3(3.0, 3.0, 3.0)) == Vector3(-3.0, 6.0, -3.0)
    with pytest.raises(ValueError):
        Vector(1.0, 2.0).cross(Vector(3.0, 4.0))


def test_value_semantics():
    v = Vector3(1.0, 2.0, 3.0)
    w = v.copy()
    w.x = 10.0
    assert v.x == 1.0
    arr = v.to_numpy()
    arr[0] = 10.0
    assert v.x == 1.0
    assert Vector.from_iterable(np.array([1, 2, 3])) == v
    assert Vector.from_iterable(float(c) for c in (1, 2, 3)) == v
    assert Vector.from_iterable(range(1, 4)) == v
    with pytest.raises(TypeError):
        hash(v)


def test_algebraic_properties():
    """
    For random vectors a, b and scalar s:
      (a + b) - b == a,  a + b == b + a,  (a * s) * (1/s) == a
      a × a == 0,        a · a == |a|²,  |normalize(a)| == 1
    """
    rng = np.random.default_rng(12345)
    for _ in range(50):
        a = Vector.from_iterable(rng.uniform(-100, 100, 3))
        b = Vector.from_iterable(rng.uniform(-100, 100, 3))
        s = float(rng.uniform(0.1, 10.0)) * (1 if rng.random() < 0.5 else -1)

        assert ((a + b) - b).isclose(a)
        assert a + b == b + a
        assert ((a * s) * (1.0 / s)).isclose(a)
        assert a.cross(a) == Vector.zero()
        assert a.dot(a) == pytest.approx(a.magnitude_squared())
        assert a.normalize().magnitude() == pytest.approx(1.0)
