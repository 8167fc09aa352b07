"""
4x4 matrix over a flat column-major buffer.

Matrix4 owns one 16-element float64 array, `data`. The element at 1-based
(row, col) is data[(row - 1) + (col - 1) * 4], i.e. columns are stored one
after another. Rendering code may hand `data` straight to an API that
expects a column-major float array; that layout is part of the contract.

Operations come in two families:

    In place (mutate self, return self):
        sset, mset, swap, set, addi, subi, elementwise_muli,
        elementwise_divi, mmuli

    Allocating (self unchanged, return a new matrix):
        add, sub, elementwise_mul, elementwise_div, mmul, copy

mmul and vmul also accept an explicit `into` target which is overwritten
and returned; this is safe even when the target is one of the operands.

Arithmetic operators are not defined here. OperatorMatrix4 (see
_operators.py) opts in to them.
"""

from __future__ import annotations

from typing import Any, Callable

import numpy as np
from numpy.typing import NDArray

from pymat4 import array
from pymat4.array import MAT4_LENGTH
from pymat4.core.exceptions import ValidationError
from pymat4.core.validation import (
    check_array,
    check_float_array,
    check_instance,
    check_length,
    is_scalar,
)
from pymat4.matrix._transforms import (
    rotation_values,
    scale_values,
    translation_values,
)
from pymat4.vector import Vector3


def _index(row: int, col: int) -> int:
    # 1-based (row, col) -> 0-based position in the column-major buffer
    return (row - 1) + (col - 1) * 4


def _elements(m: Any, name: str) -> NDArray[np.float64]:
    """Resolve a Matrix4 or 16-element array operand to its buffer."""
    if isinstance(m, Matrix4):
        return m.data
    if isinstance(m, np.ndarray):
        check_length(m, MAT4_LENGTH, name)
        return m
    raise ValidationError(
        f"{name}: expected number, Matrix4 or {MAT4_LENGTH}-element array, "
        f"got {type(m).__name__}"
    )


def _xyz(v_or_x: Any, y: Any, z: Any, name: str) -> tuple[float, float, float]:
    if isinstance(v_or_x, Vector3):
        return v_or_x.unpack()
    if is_scalar(v_or_x) and is_scalar(y) and is_scalar(z):
        return v_or_x, y, z
    raise ValidationError(
        f"{name}: expected Vector3 or three numbers, got {type(v_or_x).__name__}"
    )


class Matrix4:
    """
    4x4 matrix of float64 values, column-major.

    Construction:
        Matrix4()                    zero matrix
        Matrix4(m11, m21, ..., m44)  sixteen numbers in column order,
                                     packed into a fresh buffer
        Matrix4(data)                adopt a 16-element float64 ndarray;
                                     no copy, so changes to `data` made
                                     elsewhere show through the matrix

    Prefer the named constructors when passing an array: Matrix4.adopt
    (shares the array) or Matrix4.from_array (copies any sequence).

    Raises:
        ValidationError: Unsupported constructor argument
        DimensionError: Wrong number of values, or wrong array length
    """

    __slots__ = ("data",)

    def __init__(self, *args: Any):
        if not args:
            self.data: NDArray[np.float64] = array.zero(MAT4_LENGTH)
        elif len(args) == 1 and isinstance(args[0], np.ndarray):
            check_float_array(args[0], "data")
            check_length(args[0], MAT4_LENGTH, "data")
            self.data = args[0]
        elif is_scalar(args[0]):
            self.data = np.empty(MAT4_LENGTH, dtype=np.float64)
            self.sset(*args)
        else:
            raise ValidationError(
                f"Matrix4: unsupported constructor argument {args[0]!r} "
                f"of type {type(args[0]).__name__}"
            )

    # ───────────────────────────────────────────────────────────────────
    # Explicit constructors
    # ───────────────────────────────────────────────────────────────────

    @classmethod
    def adopt(cls, data: NDArray[np.float64]) -> Matrix4:
        """Wrap `data` (16-element float64 ndarray) without copying it."""
        check_instance(data, np.ndarray, "data")
        return cls(data)

    @classmethod
    def from_array(cls, values: Any) -> Matrix4:
        """New matrix holding a copy of 16 column-major values."""
        data = check_array(values, "values")
        check_length(data, MAT4_LENGTH, "values")
        return cls(data)

    def copy(self) -> Matrix4:
        return type(self)(array.copy(self.data))

    @classmethod
    def zero(cls) -> Matrix4:
        return cls()

    @classmethod
    def one(cls) -> Matrix4:
        return cls(array.fill(MAT4_LENGTH, 1.0))

    @classmethod
    def identity(cls) -> Matrix4:
        return cls(1, 0, 0, 0, 0, 1, 0, 0, 0, 0, 1, 0, 0, 0, 0, 1)

    # ───────────────────────────────────────────────────────────────────
    # Geometric transforms
    # ───────────────────────────────────────────────────────────────────

    @classmethod
    def translation(cls, v_or_x: Any, y: float | None = None, z: float | None = None) -> Matrix4:
        """Matrix translating by (x, y, z), given as numbers or a Vector3."""
        return cls(*translation_values(*_xyz(v_or_x, y, z, "v_or_x")))

    @classmethod
    def scale(cls, v_or_x: Any, y: float | None = None, z: float | None = None) -> Matrix4:
        """Matrix scaling by (x, y, z), given as numbers or a Vector3."""
        return cls(*scale_values(*_xyz(v_or_x, y, z, "v_or_x")))

    @classmethod
    def rotation(cls, axis: Vector3, angle: float) -> Matrix4:
        """
        Matrix rotating by `angle` radians about `axis`.

        `axis` must already be unit length; it is not normalised.
        """
        check_instance(axis, Vector3, "axis")
        return cls(*rotation_values(*axis.unpack(), angle))

    # ───────────────────────────────────────────────────────────────────
    # Element access and whole-matrix assignment
    # ───────────────────────────────────────────────────────────────────

    def sset(self, *values: float) -> Matrix4:
        """Overwrite all 16 elements, given in column order m11, m21, ..., m44."""
        check_length(values, MAT4_LENGTH, "values")
        for k, value in enumerate(values):
            if not is_scalar(value):
                raise ValidationError(
                    f"values[{k}]: expected number, got {type(value).__name__}"
                )
        array.pack(self.data, *values)
        return self

    def mset(self, m: Matrix4 | NDArray[np.float64]) -> Matrix4:
        """Copy m's elements into this matrix's own buffer."""
        array.copy(_elements(m, "m"), self.data)
        return self

    def swap(self, m: Matrix4) -> Matrix4:
        """Exchange buffers with m. No elements are copied."""
        check_instance(m, Matrix4, "m")
        self.data, m.data = m.data, self.data
        return self

    def get(self, row: int, col: int) -> float:
        """Element at 1-based (row, col). Indices are not range checked."""
        return float(self.data[_index(row, col)])

    def set(self, row: int, col: int, value: float) -> Matrix4:
        """Set the element at 1-based (row, col). Indices are not range checked."""
        self.data[_index(row, col)] = value
        return self

    # ───────────────────────────────────────────────────────────────────
    # Arithmetic
    # ───────────────────────────────────────────────────────────────────

    def _combine(
        self,
        m: Any,
        scalar_op: Callable[..., NDArray[np.float64]],
        array_op: Callable[..., NDArray[np.float64]],
        into: NDArray[np.float64] | None,
    ) -> NDArray[np.float64]:
        if is_scalar(m):
            return scalar_op(self.data, m, into)
        return array_op(self.data, _elements(m, "m"), into)

    # in place

    def addi(self, m: Any) -> Matrix4:
        self._combine(m, array.sadd, array.add, self.data)
        return self

    def subi(self, m: Any) -> Matrix4:
        self._combine(m, array.ssub, array.sub, self.data)
        return self

    def elementwise_muli(self, m: Any) -> Matrix4:
        self._combine(m, array.smul, array.mul, self.data)
        return self

    def elementwise_divi(self, m: Any) -> Matrix4:
        self._combine(m, array.sdiv, array.div, self.data)
        return self

    def mmuli(self, m: Matrix4) -> Matrix4:
        """Replace self with the matrix product self . m."""
        return self.mmul(m, self)

    # allocating

    def add(self, m: Any) -> Matrix4:
        return type(self)(self._combine(m, array.sadd, array.add, None))

    def sub(self, m: Any) -> Matrix4:
        return type(self)(self._combine(m, array.ssub, array.sub, None))

    def elementwise_mul(self, m: Any) -> Matrix4:
        return type(self)(self._combine(m, array.smul, array.mul, None))

    def elementwise_div(self, m: Any) -> Matrix4:
        return type(self)(self._combine(m, array.sdiv, array.div, None))

    # ───────────────────────────────────────────────────────────────────
    # Products
    # ───────────────────────────────────────────────────────────────────

    def mmul(self, m: Matrix4, into: Matrix4 | None = None) -> Matrix4:
        """
        Matrix product self . m.

        Applying the result to a vector is the same as applying m first
        and then self.

        Args:
            m: Right operand
            into: Optional target, may be self or m

        Returns:
            `into` if given, otherwise a new matrix
        """
        check_instance(m, Matrix4, "m")
        if into is None:
            into = type(self)()
        else:
            check_instance(into, Matrix4, "into")
        array.matrix_product_mat4_mat4(self.data, m.data, into.data)
        return into

    def vmul(self, v: Vector3, into: Vector3 | None = None) -> Vector3:
        """
        Transform the point v (implicit w = 1) by this matrix.

        Args:
            v: Point to transform
            into: Optional target, may be v

        Returns:
            `into` if given, otherwise a new Vector3
        """
        check_instance(v, Vector3, "v")
        if into is None:
            into = Vector3.zero()
        else:
            check_instance(into, Vector3, "into")
        array.matrix_product_mat4_vec3(self.data, v.data, into.data)
        return into

    # ───────────────────────────────────────────────────────────────────
    # Equality comparison
    # ───────────────────────────────────────────────────────────────────

    @staticmethod
    def equals(a: Matrix4, b: Matrix4) -> bool:
        """True if all 16 element pairs differ by at most EQUALS_EPSILON."""
        check_instance(a, Matrix4, "a")
        check_instance(b, Matrix4, "b")
        return array.almost_equals(a.data, b.data)

    @staticmethod
    def nequals(a: Matrix4, b: Matrix4) -> bool:
        return not Matrix4.equals(a, b)

    def __repr__(self) -> str:
        columns = ", ".join(
            "({:.2f}, {:.2f}, {:.2f}, {:.2f})".format(*self.data[k:k + 4])
            for k in range(0, MAT4_LENGTH, 4)
        )
        return f"{type(self).__name__}({columns})"
