"""
Column-major element values for the geometric transform builders.

Each function returns the 16 elements m11, m21, m31, m41, m12, ..., m44
in the order Matrix4's constructor takes them.
"""

import math


def translation_values(x: float, y: float, z: float) -> tuple[float, ...]:
    """Identity linear part, (x, y, z) in the fourth column."""
    return (
        1.0, 0.0, 0.0, 0.0,
        0.0, 1.0, 0.0, 0.0,
        0.0, 0.0, 1.0, 0.0,
        x, y, z, 1.0,
    )


def scale_values(x: float, y: float, z: float) -> tuple[float, ...]:
    """diag(x, y, z, 1)"""
    return (
        x, 0.0, 0.0, 0.0,
        0.0, y, 0.0, 0.0,
        0.0, 0.0, z, 0.0,
        0.0, 0.0, 0.0, 1.0,
    )


def rotation_values(
    l: float,
    m: float,
    n: float,
    angle: float,
) -> tuple[float, ...]:
    """
    Rotation by `angle` radians about the axis (l, m, n), Rodrigues' formula.

    The axis must be unit length. It is used as given: a non-unit axis
    yields a matrix that is not orthogonal.
    """
    s = math.sin(angle)
    c = math.cos(angle)
    oc = 1.0 - c
    return (
        l * l * oc + c, l * m * oc + n * s, l * n * oc - m * s, 0.0,
        m * l * oc - n * s, m * m * oc + c, m * n * oc + l * s, 0.0,
        n * l * oc + m * s, n * m * oc - l * s, n * n * oc + c, 0.0,
        0.0, 0.0, 0.0, 1.0,
    )
