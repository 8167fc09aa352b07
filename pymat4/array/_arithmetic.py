"""
Elementwise arithmetic, equality and vector norms over flat arrays.

All binary operations iterate over the length of the first operand `a`;
the second operand must be at least as long (extra elements are ignored).
This precondition is not checked here: a shorter `b` surfaces as numpy's
own broadcasting error.

Pointwise operations are alias-safe: `into` may be `a` or `b` because each
output slot depends only on the input slots at the same position.

Division runs with numpy floating point warnings suppressed: dividing by
zero yields Inf/NaN silently, and those values propagate.
"""

from typing import Any, Callable

import numpy as np
from numpy.typing import ArrayLike, NDArray

from pymat4.core.tolerances import EQUALS_EPSILON


def _elementwise(
    op: Callable[..., Any],
    a: ArrayLike,
    rhs: Any,
    into: NDArray[np.float64] | None,
) -> NDArray[np.float64]:
    a = np.asarray(a, dtype=np.float64)
    if into is None:
        return op(a, rhs)
    op(a, rhs, out=into[:len(a)])
    return into


def _leading(b: ArrayLike, n: int) -> NDArray[Any]:
    return np.asarray(b)[:n]


# ═══════════════════════════════════════════════════════════════════════
# Array (op) array
# ═══════════════════════════════════════════════════════════════════════


def add(a: ArrayLike, b: ArrayLike, into: NDArray[np.float64] | None = None) -> NDArray[np.float64]:
    """into[i] = a[i] + b[i]"""
    return _elementwise(np.add, a, _leading(b, len(a)), into)


def sub(a: ArrayLike, b: ArrayLike, into: NDArray[np.float64] | None = None) -> NDArray[np.float64]:
    """into[i] = a[i] - b[i]"""
    return _elementwise(np.subtract, a, _leading(b, len(a)), into)


def mul(a: ArrayLike, b: ArrayLike, into: NDArray[np.float64] | None = None) -> NDArray[np.float64]:
    """into[i] = a[i] * b[i]"""
    return _elementwise(np.multiply, a, _leading(b, len(a)), into)


def div(a: ArrayLike, b: ArrayLike, into: NDArray[np.float64] | None = None) -> NDArray[np.float64]:
    """into[i] = a[i] / b[i]"""
    with np.errstate(divide='ignore', invalid='ignore'):
        return _elementwise(np.divide, a, _leading(b, len(a)), into)


# ═══════════════════════════════════════════════════════════════════════
# Array (op) scalar
# ═══════════════════════════════════════════════════════════════════════


def sadd(a: ArrayLike, scalar: float, into: NDArray[np.float64] | None = None) -> NDArray[np.float64]:
    """into[i] = a[i] + scalar"""
    return _elementwise(np.add, a, scalar, into)


def ssub(a: ArrayLike, scalar: float, into: NDArray[np.float64] | None = None) -> NDArray[np.float64]:
    """into[i] = a[i] - scalar"""
    return _elementwise(np.subtract, a, scalar, into)


def smul(a: ArrayLike, scalar: float, into: NDArray[np.float64] | None = None) -> NDArray[np.float64]:
    """into[i] = a[i] * scalar"""
    return _elementwise(np.multiply, a, scalar, into)


def sdiv(a: ArrayLike, scalar: float, into: NDArray[np.float64] | None = None) -> NDArray[np.float64]:
    """into[i] = a[i] / scalar"""
    with np.errstate(divide='ignore', invalid='ignore'):
        return _elementwise(np.divide, a, scalar, into)


# ═══════════════════════════════════════════════════════════════════════
# Equality comparison
# ═══════════════════════════════════════════════════════════════════════


def equals(a: ArrayLike, b: ArrayLike) -> bool:
    """True if a[0:len(a)] and b[0:len(a)] are exactly equal."""
    a = np.asarray(a)
    return bool(np.array_equal(a, _leading(b, len(a))))


def almost_equals(a: ArrayLike, b: ArrayLike) -> bool:
    """
    True if every a[i] and b[i] differ by at most EQUALS_EPSILON.

    The tolerance is absolute: for components of large magnitude it is
    stricter than rounding error. NaN components never compare equal.
    See also equals().
    """
    a = np.asarray(a, dtype=np.float64)
    diff = np.abs(a - _leading(b, len(a)))
    return bool(np.all(diff <= EQUALS_EPSILON))


# ═══════════════════════════════════════════════════════════════════════
# Norms
# ═══════════════════════════════════════════════════════════════════════


def inner_product(a: ArrayLike, b: ArrayLike) -> float:
    """Sum of a[i] * b[i] over the length of a."""
    a = np.asarray(a, dtype=np.float64)
    return float(np.dot(a, _leading(b, len(a))))


def length_squared(a: ArrayLike) -> float:
    return inner_product(a, a)


def length(a: ArrayLike) -> float:
    """Euclidean length of a."""
    return float(np.sqrt(length_squared(a)))


def normalise(a: ArrayLike, into: NDArray[np.float64] | None = None) -> NDArray[np.float64]:
    """
    Scale a to unit length.

    A zero-length input is not guarded against and yields NaN elements.
    """
    return sdiv(a, length(a), into)
