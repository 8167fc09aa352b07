"""
pymat4: flat numeric arrays and 4x4 matrices for 3D transforms.

Submodules:
    array: Flat float64 array primitives and column-major product kernels
    vector: Vector3
    matrix: Matrix4, transform builders, opt-in operators
    core: Exceptions, validation, tolerances
"""

__version__ = "0.1.0"

from pymat4 import array
from pymat4.core.exceptions import Mat4Error, ValidationError, DimensionError
from pymat4.vector import Vector3
from pymat4.matrix import Matrix4, OperatorMatrix4

__all__ = [
    "__version__",
    "array",
    "Vector3",
    "Matrix4",
    "OperatorMatrix4",
    "Mat4Error",
    "ValidationError",
    "DimensionError",
]
