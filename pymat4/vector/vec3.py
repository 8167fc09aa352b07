"""
Three-component vector.

A thin wrapper over a 3-element float64 array, providing the component
access Matrix4 needs for its matrix-vector products and transform
builders. Arithmetic on vectors is out of scope here.
"""

from __future__ import annotations

import numpy as np
from numpy.typing import NDArray

from pymat4 import array


class Vector3:
    """
    Vector (x, y, z) stored in `data`, a 3-element float64 array.

    When used with Matrix4.vmul it is the homogeneous point (x, y, z, 1).
    """

    __slots__ = ("data",)

    def __init__(self, x: float = 0.0, y: float = 0.0, z: float = 0.0):
        self.data: NDArray[np.float64] = np.array([x, y, z], dtype=np.float64)

    @classmethod
    def zero(cls) -> Vector3:
        return cls()

    @property
    def x(self) -> float:
        return float(self.data[0])

    @x.setter
    def x(self, value: float) -> None:
        self.data[0] = value

    @property
    def y(self) -> float:
        return float(self.data[1])

    @y.setter
    def y(self, value: float) -> None:
        self.data[1] = value

    @property
    def z(self) -> float:
        return float(self.data[2])

    @z.setter
    def z(self, value: float) -> None:
        self.data[2] = value

    def sset(self, x: float, y: float, z: float) -> Vector3:
        """Overwrite all three components in place."""
        array.pack(self.data, x, y, z)
        return self

    def unpack(self) -> tuple[float, float, float]:
        return self.x, self.y, self.z

    @staticmethod
    def equals(a: Vector3, b: Vector3) -> bool:
        """True if each component of a and b differs by at most EQUALS_EPSILON."""
        return array.almost_equals(a.data, b.data)

    def __repr__(self) -> str:
        return f"Vector3({self.x:.3f}, {self.y:.3f}, {self.z:.3f})"
