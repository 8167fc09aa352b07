"""
Vector types.

Public API:
    Vector3 - (x, y, z) point/direction used by Matrix4 products
"""

from pymat4.vector.vec3 import Vector3

__all__ = [
    "Vector3",
]
