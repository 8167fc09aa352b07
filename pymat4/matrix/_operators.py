"""
Opt-in arithmetic operators for Matrix4.

Matrix4 itself defines no operators because every operator allocates a
new result. Code that prefers `a * b` over `a.mmul(b)` can use
OperatorMatrix4, or mix MatrixOperators into its own Matrix4 subclass.

    +   add              (scalar, Matrix4 or 16-element array)
    -   sub              (scalar, Matrix4 or 16-element array)
    *   scalar  -> elementwise_mul
        Matrix4 -> mmul
        Vector3 -> vmul
"""

from typing import Any

import numpy as np

from pymat4.core.validation import is_scalar
from pymat4.matrix.mat4 import Matrix4
from pymat4.vector import Vector3


def _is_elementwise_operand(other: Any) -> bool:
    return is_scalar(other) or isinstance(other, (Matrix4, np.ndarray))


class MatrixOperators:
    """Operator methods for a Matrix4 subclass. Each call allocates."""

    __slots__ = ()

    # Keep numpy from broadcasting over the matrix when an ndarray is
    # the left operand.
    __array_ufunc__ = None

    def __add__(self, other: Any) -> Any:
        if _is_elementwise_operand(other):
            return self.add(other)
        return NotImplemented

    def __radd__(self, other: Any) -> Any:
        if is_scalar(other):
            return self.add(other)
        return NotImplemented

    def __sub__(self, other: Any) -> Any:
        if _is_elementwise_operand(other):
            return self.sub(other)
        return NotImplemented

    def __mul__(self, other: Any) -> Any:
        if is_scalar(other):
            return self.elementwise_mul(other)
        if isinstance(other, Matrix4):
            return self.mmul(other)
        if isinstance(other, Vector3):
            return self.vmul(other)
        return NotImplemented

    def __rmul__(self, other: Any) -> Any:
        if is_scalar(other):
            return self.elementwise_mul(other)
        return NotImplemented


class OperatorMatrix4(MatrixOperators, Matrix4):
    """Matrix4 with arithmetic operators enabled."""

    __slots__ = ()
