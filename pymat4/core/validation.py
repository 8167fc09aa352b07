"""
Input validation utilities for pymat4.

These validators follow the "fail fast, fail loud" principle. They raise
immediately with clear error messages rather than silently correcting
or making assumptions about caller intent.

Design principles:
    - Each function validates ONE thing
    - Parameter names included in all error messages
    - Only used at type/shape seams (constructors, typed operands);
      the array kernels themselves stay unchecked
"""

from numbers import Real
from typing import Any

import numpy as np
from numpy.typing import ArrayLike, NDArray

from pymat4.core.exceptions import ValidationError, DimensionError


def check_array(
    array: ArrayLike,
    name: str,
) -> NDArray[np.float64]:
    """
    Validate and convert input to a 1-D float64 numpy array (copying).

    Args:
        array: Sequence of numbers
        name: Parameter name for error messages

    Returns:
        New float64 ndarray

    Raises:
        ValidationError: If input is not a flat sequence of numbers
    """
    try:
        result = np.array(array, dtype=np.float64)
    except (ValueError, TypeError) as e:
        raise ValidationError(f"{name}: cannot convert to array: {e}") from e

    if result.ndim != 1:
        raise ValidationError(
            f"{name}: expected a flat sequence, got {result.ndim}D with shape {result.shape}"
        )
    return result


def check_float_array(array: Any, name: str) -> None:
    """
    Verify input is a 1-D float64 numpy array.

    Used where an array is adopted by reference and must work as an
    in-place output buffer for the float64 kernels.

    Args:
        array: Object to check
        name: Parameter name for error messages

    Raises:
        ValidationError: If input is not a flat float64 ndarray
    """
    if not isinstance(array, np.ndarray):
        raise ValidationError(
            f"{name}: expected numpy.ndarray, got {type(array).__name__}"
        )
    if array.ndim != 1:
        raise ValidationError(
            f"{name}: expected 1D array, got {array.ndim}D with shape {array.shape}"
        )
    if array.dtype != np.float64:
        raise ValidationError(
            f"{name}: dtype {array.dtype}, expected float64"
        )


def check_length(array: Any, length: int, name: str) -> None:
    """
    Verify a sequence has exactly the specified length.

    Args:
        array: Sequence to check
        length: Required length
        name: Parameter name for error messages

    Raises:
        DimensionError: If the length differs
    """
    n = len(array)
    if n != length:
        raise DimensionError(
            f"{name}: expected {length} elements, got {n}",
            lengths=(n,),
        )


def check_instance(value: Any, cls: type, name: str) -> None:
    """
    Verify a value is an instance of the given type.

    Args:
        value: Object to check
        cls: Required type
        name: Parameter name for error messages

    Raises:
        ValidationError: If value is not an instance of cls
    """
    if not isinstance(value, cls):
        raise ValidationError(
            f"{name}: expected {cls.__name__}, got {type(value).__name__}"
        )


def is_scalar(value: Any) -> bool:
    """True for real numbers (including numpy scalars), False for bool."""
    return isinstance(value, Real) and not isinstance(value, bool)
