"""
Tests for the column-major matrix product kernels.

Reference results come from plain numpy on the equivalent 4x4 ndarrays
(order='F' reshapes of the flat buffers).
"""

import numpy as np
import pytest
from numpy.testing import assert_allclose, assert_array_equal

from pymat4 import array
from pymat4.core.exceptions import DimensionError


IDENTITY = np.array([1, 0, 0, 0, 0, 1, 0, 0, 0, 0, 1, 0, 0, 0, 0, 1], dtype=np.float64)
SEQUENCE = np.arange(1, 17, dtype=np.float64)


def reference_product(a, b):
    product = a.reshape((4, 4), order='F') @ b.reshape((4, 4), order='F')
    return product.ravel(order='F')


class TestLayout:
    """as_mat4 views a flat buffer as a column-major 4x4 array."""

    def test_as_mat4_is_column_major(self):
        m = array.as_mat4(SEQUENCE)
        assert_array_equal(m[:, 0], [1.0, 2.0, 3.0, 4.0])
        assert_array_equal(m[0, :], [1.0, 5.0, 9.0, 13.0])

    def test_as_mat4_is_a_view(self):
        buf = np.zeros(16)
        array.as_mat4(buf)[1, 2] = 7.0
        # row 2, column 3 (1-based) -> position 1 + 2*4
        assert buf[9] == 7.0


class TestMat4Mat4:
    """4x4 . 4x4 product, including aliased and non-float64 targets."""

    def test_identity_left(self):
        assert_array_equal(array.matrix_product_mat4_mat4(IDENTITY, SEQUENCE), SEQUENCE)

    def test_identity_right(self):
        assert_array_equal(array.matrix_product_mat4_mat4(SEQUENCE, IDENTITY), SEQUENCE)

    def test_matches_reference(self, rng):
        a = rng.standard_normal(16)
        b = rng.standard_normal(16)
        assert_allclose(array.matrix_product_mat4_mat4(a, b), reference_product(a, b), rtol=1e-12)

    def test_known_element(self):
        # (row 1, col 1) = row 1 of a . column 1 of b = 1*1 + 5*2 + 9*3 + 13*4
        result = array.matrix_product_mat4_mat4(SEQUENCE, SEQUENCE)
        assert result[0] == 90.0

    def test_into_fresh_buffer(self, rng):
        a = rng.standard_normal(16)
        b = rng.standard_normal(16)
        buf = np.zeros(16)
        result = array.matrix_product_mat4_mat4(a, b, buf)
        assert result is buf
        assert_allclose(buf, reference_product(a, b), rtol=1e-12)

    def test_into_aliases_left(self, rng):
        a = rng.standard_normal(16)
        b = rng.standard_normal(16)
        expected = reference_product(a, b)
        result = array.matrix_product_mat4_mat4(a, b, a)
        assert result is a
        assert_allclose(a, expected, rtol=1e-12)

    def test_into_aliases_right(self, rng):
        a = rng.standard_normal(16)
        b = rng.standard_normal(16)
        expected = reference_product(a, b)
        array.matrix_product_mat4_mat4(a, b, b)
        assert_allclose(b, expected, rtol=1e-12)

    def test_into_aliases_both(self, rng):
        a = rng.standard_normal(16)
        expected = reference_product(a, a)
        array.matrix_product_mat4_mat4(a, a, a)
        assert_allclose(a, expected, rtol=1e-12)

    def test_into_float32_is_filled(self, rng):
        a = rng.standard_normal(16)
        b = rng.standard_normal(16)
        buf = np.zeros(16, dtype=np.float32)
        result = array.matrix_product_mat4_mat4(a, b, buf)
        assert result is buf
        assert_allclose(buf, reference_product(a, b), rtol=1e-5, atol=1e-6)

    def test_into_list_is_filled(self, rng):
        a = rng.standard_normal(16)
        b = rng.standard_normal(16)
        buf = [0.0] * 16
        result = array.matrix_product_mat4_mat4(a, b, buf)
        assert result is buf
        assert_allclose(np.asarray(buf), reference_product(a, b), rtol=1e-12)

    def test_into_strided_view_is_filled(self, rng):
        a = rng.standard_normal(16)
        backing = np.zeros(32)
        view = backing[::2]
        array.matrix_product_mat4_mat4(a, IDENTITY, view)
        assert_allclose(backing[::2], a, rtol=1e-12)
        assert_array_equal(backing[1::2], np.zeros(16))

    def test_wrong_length_a_rejected(self):
        with pytest.raises(DimensionError, match="a: expected 16 elements, got 9"):
            array.matrix_product_mat4_mat4(np.zeros(9), np.zeros(16))

    def test_wrong_length_b_rejected(self):
        with pytest.raises(DimensionError, match="b: expected 16 elements, got 15"):
            array.matrix_product_mat4_mat4(np.zeros(16), np.zeros(15))

    def test_inputs_unchanged(self, rng):
        a = rng.standard_normal(16)
        b = rng.standard_normal(16)
        a0, b0 = a.copy(), b.copy()
        array.matrix_product_mat4_mat4(a, b)
        assert_array_equal(a, a0)
        assert_array_equal(b, b0)


class TestMat4Vec3:
    """Affine point transform with implicit w = 1."""

    def test_translation_column_added(self):
        m = IDENTITY.copy()
        m[12:15] = [1.0, 2.0, 3.0]
        result = array.matrix_product_mat4_vec3(m, np.zeros(3))
        assert_array_equal(result, [1.0, 2.0, 3.0])

    def test_formula(self):
        v = np.array([1.0, 2.0, 3.0])
        a = SEQUENCE
        expected = [
            a[0] * v[0] + a[4] * v[1] + a[8] * v[2] + a[12],
            a[1] * v[0] + a[5] * v[1] + a[9] * v[2] + a[13],
            a[2] * v[0] + a[6] * v[1] + a[10] * v[2] + a[14],
        ]
        assert_allclose(array.matrix_product_mat4_vec3(a, v), expected)

    def test_bottom_row_ignored(self):
        m = IDENTITY.copy()
        m[3] = m[7] = m[11] = 5.0
        m[15] = 9.0
        v = np.array([1.0, 2.0, 3.0])
        assert_array_equal(array.matrix_product_mat4_vec3(m, v), v)

    def test_returns_three_elements(self):
        assert len(array.matrix_product_mat4_vec3(IDENTITY, np.ones(3))) == 3

    def test_wrong_length_matrix_rejected(self):
        with pytest.raises(DimensionError, match="a: expected 16 elements, got 12"):
            array.matrix_product_mat4_vec3(np.zeros(12), np.zeros(3))

    def test_into_is_input(self):
        v = np.array([1.0, 0.0, 0.0])
        rotate90 = np.array([0, 1, 0, 0, -1, 0, 0, 0, 0, 0, 1, 0, 0, 0, 0, 1], dtype=np.float64)
        result = array.matrix_product_mat4_vec3(rotate90, v, v)
        assert result is v
        assert_allclose(v, [0.0, 1.0, 0.0], atol=1e-15)


class TestDispatch:
    """matrix_product picks a kernel from the operand lengths."""

    def test_mat4_mat4(self, rng):
        a = rng.standard_normal(16)
        b = rng.standard_normal(16)
        assert_allclose(array.matrix_product(a, b), reference_product(a, b), rtol=1e-12)

    def test_mat4_vec3(self):
        result = array.matrix_product(SEQUENCE, np.array([1.0, 2.0, 3.0]))
        assert len(result) == 3

    def test_into_is_forwarded(self):
        buf = np.zeros(16)
        assert array.matrix_product(IDENTITY, SEQUENCE, buf) is buf

    @pytest.mark.parametrize("len_a,len_b", [(16, 4), (3, 16), (9, 9), (0, 0)])
    def test_unsupported_lengths(self, len_a, len_b):
        with pytest.raises(DimensionError, match=rf"\({len_a}, {len_b}\)"):
            array.matrix_product(np.zeros(len_a), np.zeros(len_b))
