"""
Array programming primitives.

These functions work on flat, one-dimensional float64 numpy arrays. Most
binary functions assume both operands have (at least) the length of the
first one. Functions with an `into` argument write to that buffer instead
of allocating and return it.

Public API:
    zero, fill, copy, generate            - creation
    fill_range, copy_range, pack,
    pack_range                            - writes into existing buffers
    add, sub, mul, div                    - elementwise arithmetic
    sadd, ssub, smul, sdiv                - scalar broadcast arithmetic
    equals, almost_equals                 - exact / epsilon equality
    inner_product, length,
    length_squared, normalise             - norms
    matrix_product,
    matrix_product_mat4_mat4,
    matrix_product_mat4_vec3              - column-major 4x4 products
"""

from pymat4.core.tolerances import EQUALS_EPSILON
from pymat4.array._creation import (
    zero, fill, copy, generate, fill_range, copy_range, pack, pack_range,
)
from pymat4.array._arithmetic import (
    add, sub, mul, div,
    sadd, ssub, smul, sdiv,
    equals, almost_equals,
    inner_product, length, length_squared, normalise,
)
from pymat4.array._products import (
    MAT4_LENGTH,
    VEC3_LENGTH,
    as_mat4,
    matrix_product,
    matrix_product_mat4_mat4,
    matrix_product_mat4_vec3,
)

__all__ = [
    "EQUALS_EPSILON",
    "MAT4_LENGTH",
    "VEC3_LENGTH",
    # Creation
    "zero",
    "fill",
    "copy",
    "generate",
    "fill_range",
    "copy_range",
    "pack",
    "pack_range",
    # Arithmetic
    "add",
    "sub",
    "mul",
    "div",
    "sadd",
    "ssub",
    "smul",
    "sdiv",
    # Equality
    "equals",
    "almost_equals",
    # Linear algebra
    "inner_product",
    "length",
    "length_squared",
    "normalise",
    "as_mat4",
    "matrix_product",
    "matrix_product_mat4_mat4",
    "matrix_product_mat4_vec3",
]
