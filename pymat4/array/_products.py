"""
Matrix product kernels over flat column-major buffers.

A 4x4 matrix is a 16-element array storing columns one after another:
the element at 1-based (row, col) sits at position (row-1) + (col-1)*4.
A 3-vector is a 3-element array, treated as the homogeneous point
(x, y, z, 1) by the affine product.

Kernels:
    matrix_product             - dispatch on operand lengths
    matrix_product_mat4_mat4   - 4x4 . 4x4
    matrix_product_mat4_vec3   - 4x4 . (x, y, z, 1), dropping w
"""

import numpy as np
from numpy.typing import ArrayLike, NDArray

from pymat4.core.exceptions import DimensionError
from pymat4.core.validation import check_length
from pymat4.array._creation import copy_range, pack

MAT4_LENGTH = 16
VEC3_LENGTH = 3


def as_mat4(a: ArrayLike) -> NDArray[np.float64]:
    """
    View a flat column-major buffer as a 4x4 ndarray.

    For a contiguous float64 buffer this is a view: writes to the result
    land in `a`.
    """
    return np.asarray(a, dtype=np.float64).reshape((4, 4), order='F')


def matrix_product(
    a: ArrayLike,
    b: ArrayLike,
    into: NDArray[np.float64] | None = None,
) -> NDArray[np.float64]:
    """
    Product of two flat buffers, selected by their lengths.

    Supported combinations:
        (16, 16) -> matrix_product_mat4_mat4
        (16, 3)  -> matrix_product_mat4_vec3

    Raises:
        DimensionError: For any other pair of lengths
    """
    len_a, len_b = len(a), len(b)
    if len_a == MAT4_LENGTH and len_b == MAT4_LENGTH:
        return matrix_product_mat4_mat4(a, b, into)
    if len_a == MAT4_LENGTH and len_b == VEC3_LENGTH:
        return matrix_product_mat4_vec3(a, b, into)
    raise DimensionError(
        f"matrix_product: unsupported operand lengths ({len_a}, {len_b}); "
        f"expected ({MAT4_LENGTH}, {MAT4_LENGTH}) or ({MAT4_LENGTH}, {VEC3_LENGTH})",
        lengths=(len_a, len_b),
    )


def matrix_product_mat4_mat4(
    a: ArrayLike,
    b: ArrayLike,
    into: NDArray[np.float64] | None = None,
) -> NDArray[np.float64]:
    """
    Matrix product a . b of two column-major 4x4 buffers.

    `into` may be `a` or `b` (or share memory with either). Every output
    element reads a whole row of a and a whole column of b, so writing in
    place would clobber inputs that are still needed; in that case the
    product goes to a temporary buffer which is then copied into `into`.

    Args:
        a: Left operand, 16 elements
        b: Right operand, 16 elements
        into: Optional 16-element target. A float64 ndarray is written
            directly; any other buffer (list, float32 array) is filled
            from a temporary

    Returns:
        `into` if given, otherwise a new 16-element array

    Raises:
        DimensionError: If a or b does not have 16 elements
    """
    check_length(a, MAT4_LENGTH, "a")
    check_length(b, MAT4_LENGTH, "b")
    if into is None:
        into = np.empty(MAT4_LENGTH, dtype=np.float64)
        direct = True
    else:
        direct = (
            isinstance(into, np.ndarray)
            and into.dtype == np.float64
            and into.flags.c_contiguous
            and not np.shares_memory(into, a)
            and not np.shares_memory(into, b)
        )

    target = into if direct else np.empty(MAT4_LENGTH, dtype=np.float64)
    np.matmul(as_mat4(a), as_mat4(b), out=as_mat4(target))

    if not direct:
        copy_range(target, 0, into, 0, MAT4_LENGTH)
    return into


def matrix_product_mat4_vec3(
    a: ArrayLike,
    v: ArrayLike,
    into: NDArray[np.float64] | None = None,
) -> NDArray[np.float64]:
    """
    Affine transform of the point v by the column-major 4x4 buffer a.

        x' = a[0]*v[0] + a[4]*v[1] + a[8]*v[2]  + a[12]
        y' = a[1]*v[0] + a[5]*v[1] + a[9]*v[2]  + a[13]
        z' = a[2]*v[0] + a[6]*v[1] + a[10]*v[2] + a[14]

    The bottom row of a is ignored. All three outputs are computed before
    anything is written, so `into` may be `v`.

    Returns:
        `into` (first three slots overwritten) if given, otherwise a new
        3-element array

    Raises:
        DimensionError: If a does not have 16 elements
    """
    check_length(a, MAT4_LENGTH, "a")
    m = as_mat4(a)
    v = np.asarray(v, dtype=np.float64)[:VEC3_LENGTH]
    result = m[:3, :3] @ v + m[:3, 3]
    if into is None:
        return result
    return pack(into, *result)
