"""
Тесты векторов Vector2 / Vector3 / Vector4.
"""

import numpy as np
import pytest

from vector import Vector2, Vector3, Vector4


ALL_TYPES = [Vector2, Vector3, Vector4]


class TestConstruction:

    @pytest.mark.parametrize("cls", ALL_TYPES)
    def test_default_is_zero(self, cls):
        v = cls()
        assert np.array_equal(v.data(), np.zeros(len(cls.names), dtype=np.float32))

    def test_full_arguments(self):
        v = Vector4(1.0, 2.0, 3.0, 4.0)
        assert (v.x, v.y, v.z, v.w) == (1.0, 2.0, 3.0, 4.0)

    def test_from_array(self):
        v = Vector3.from_array(np.array([1.5, -2.0, 0.25]))
        assert v == Vector3(1.5, -2.0, 0.25)

    @pytest.mark.parametrize("cls,values", [(Vector2, [1.0]), (Vector3, [1.0, 2.0]), (Vector4, [1.0, 2.0, 3.0, 4.0, 5.0])])
    def test_from_array_wrong_length(self, cls, values):
        with pytest.raises(ValueError):
            cls.from_array(values)

    def test_unpacking(self):
        x, y, z = Vector3(1.0, 2.0, 3.0)
        assert (x, y, z) == (1.0, 2.0, 3.0)
        assert len(Vector2()) == 2

    def test_repr(self):
        assert repr(Vector2(1.0, -0.5)) == "Vector2(x=1.0, y=-0.5)"


class TestComponentAccess:
    """data() - непрерывный view float32 в объявленном порядке."""

    @pytest.mark.parametrize("cls", ALL_TYPES)
    def test_data_is_contiguous_float32(self, cls):
        arr = cls().data()
        assert arr.dtype == np.float32
        assert arr.flags['C_CONTIGUOUS']
        assert arr.shape == (len(cls.names),)

    def test_data_order(self):
        assert list(Vector4(1.0, 2.0, 3.0, 4.0).data()) == [1.0, 2.0, 3.0, 4.0]

    def test_write_through_data(self):
        v = Vector3(1.0, 2.0, 3.0)
        v.data()[2] = 7.0
        assert v.z == 7.0

    def test_property_setter(self):
        v = Vector2()
        v.y = 3.5
        assert v.data()[1] == np.float32(3.5)

    def test_unhashable(self):
        with pytest.raises(TypeError):
            hash(Vector3())


class TestArithmetic:

    def test_add_sub(self):
        a = Vector3(1.0, 2.0, 3.0)
        b = Vector3(0.5, -1.0, 4.0)
        assert a + b == Vector3(1.5, 1.0, 7.0)
        assert a - b == Vector3(0.5, 3.0, -1.0)

    def test_operands_not_modified(self):
        a = Vector2(1.0, 2.0)
        b = Vector2(3.0, 4.0)
        _ = a + b
        _ = a * 2.0
        assert a == Vector2(1.0, 2.0)
        assert b == Vector2(3.0, 4.0)

    @pytest.mark.parametrize("cls", ALL_TYPES)
    def test_scalar_scale_both_sides(self, cls):
        v = cls(*range(1, len(cls.names) + 1))
        expected = cls(*[2.0 * i for i in range(1, len(cls.names) + 1)])
        assert v * 2.0 == expected
        assert 2.0 * v == expected
        assert np.float32(2.0) * v == expected

    def test_mixed_types_rejected(self):
        with pytest.raises(TypeError):
            Vector2() + Vector3()
        with pytest.raises(TypeError):
            Vector3() - Vector4()

    def test_equality_is_structural(self):
        assert Vector3(1.0, 2.0, 3.0) == Vector3(1.0, 2.0, 3.0)
        assert Vector3(1.0, 2.0, 3.0) != Vector3(1.0, 2.0, 3.5)
        assert Vector2(0.0, 0.0) != Vector3()


class TestMagnitude:

    @pytest.mark.parametrize("v,expected", [
        (Vector2(3.0, 4.0), 5.0),
        (Vector3(2.0, 3.0, 6.0), 7.0),
        (Vector4(1.0, 1.0, 1.0, 1.0), 2.0),
    ])
    def test_known_lengths(self, v, expected):
        assert v.magnitude() == pytest.approx(expected, abs=1e-4)

    @pytest.mark.parametrize("cls", ALL_TYPES)
    def test_zero_vector_has_zero_length(self, cls):
        assert cls().magnitude() == 0.0

    def test_never_negative(self):
        assert Vector3(-3.0, -4.0, 0.0).magnitude() == pytest.approx(5.0, abs=1e-4)


class TestNormalize:

    def test_unit_length(self, random_vectors):
        for v in random_vectors:
            assert v.normalize().magnitude() == pytest.approx(1.0, abs=1e-4)

    def test_direction_kept(self):
        n = Vector3(0.0, 0.0, -5.0).normalize()
        assert np.allclose(n.data(), [0.0, 0.0, -1.0], atol=1e-4)

    @pytest.mark.parametrize("cls", ALL_TYPES)
    def test_zero_vector_normalizes_to_zero(self, cls):
        """Нулевая длина: нулевой вектор той же размерности, без деления на 0."""
        n = cls().normalize()
        assert type(n) is cls
        assert n == cls()

    def test_small_vector(self):
        n = Vector2(1e-3, 0.0).normalize()
        assert n.x == pytest.approx(1.0, abs=1e-2)
