"""
4x4 matrices for 3D transforms.

Public API:
    Matrix4            - column-major 4x4 matrix
    OperatorMatrix4    - Matrix4 with +, -, * operators
    MatrixOperators    - mixin providing those operators
    translation(x, y, z) / translation(v)
    scale(x, y, z) / scale(v)
    rotation(axis, angle)
"""

from pymat4.matrix.mat4 import Matrix4
from pymat4.matrix._operators import MatrixOperators, OperatorMatrix4

translation = Matrix4.translation
scale = Matrix4.scale
rotation = Matrix4.rotation

__all__ = [
    "Matrix4",
    "OperatorMatrix4",
    "MatrixOperators",
    "translation",
    "scale",
    "rotation",
]
