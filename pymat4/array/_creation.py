"""
Creation and bulk-copy primitives for flat numeric arrays.

Every function returns a 1-D float64 ndarray. Functions taking an `into`
buffer write there instead of allocating and return it, so hot loops can
reuse caller-owned storage. Positions are ordinary 0-based Python indices.
"""

from typing import Callable

import numpy as np
from numpy.typing import ArrayLike, NDArray


def zero(n: int, into: NDArray[np.float64] | None = None) -> NDArray[np.float64]:
    """Length-n array of zeros (or the first n slots of `into` zeroed)."""
    return fill(n, 0.0, into)


def fill(
    n: int,
    c: float,
    into: NDArray[np.float64] | None = None,
) -> NDArray[np.float64]:
    """Length-n array of c (or the first n slots of `into` set to c)."""
    if into is None:
        return np.full(n, c, dtype=np.float64)
    return fill_range(c, into, 0, n)


def copy(
    a: ArrayLike,
    into: NDArray[np.float64] | None = None,
) -> NDArray[np.float64]:
    """
    Independent duplicate of `a`.

    With `into`, the elements of `a` are copied into its leading slots
    and `into` is returned.
    """
    if into is None:
        return np.array(a, dtype=np.float64)
    return copy_range(a, 0, into, 0, len(a))


def generate(n: int, f: Callable[[int], float]) -> NDArray[np.float64]:
    """
    Length-n array with element i = f(i).

    i runs over Python positions 0..n-1, not 1..n: f(0) fills the first
    slot. Elements are computed eagerly, in order.
    """
    return np.fromiter((f(i) for i in range(n)), dtype=np.float64, count=n)


def fill_range(
    c: float,
    into: NDArray[np.float64],
    index: int,
    count: int,
) -> NDArray[np.float64]:
    """Write `count` copies of c starting at into[index]; returns `into`."""
    into[index:index + count] = c
    return into


def copy_range(
    a: ArrayLike,
    a_index: int,
    into: NDArray[np.float64],
    into_index: int,
    count: int,
) -> NDArray[np.float64]:
    """
    Copy a[a_index:a_index+count] to into[into_index:into_index+count].

    Overlapping source and destination ranges of the same buffer are
    handled by numpy's overlap detection.

    Returns:
        `into`
    """
    into[into_index:into_index + count] = np.asarray(a)[a_index:a_index + count]
    return into


def pack(into: NDArray[np.float64], *values: float) -> NDArray[np.float64]:
    """Overwrite into[0], into[1], ... with `values`; returns `into`."""
    return pack_range(into, 0, *values)


def pack_range(
    into: NDArray[np.float64],
    index: int,
    *values: float,
) -> NDArray[np.float64]:
    """Overwrite consecutive slots from into[index] with `values`; returns `into`."""
    into[index:index + len(values)] = values
    return into
