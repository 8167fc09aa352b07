"""
Core infrastructure for pymat4.

Shared abstractions used by the array, vector and matrix subpackages.

Key components:
    exceptions: Exception hierarchy
    validation: Input validators
    tolerances: Epsilon-equality constants
"""

from pymat4.core.exceptions import (
    Mat4Error,
    ValidationError,
    DimensionError,
)
from pymat4.core.tolerances import EQUALS_EPSILON, ToleranceTier

__all__ = [
    # Exceptions
    "Mat4Error",
    "ValidationError",
    "DimensionError",
    # Tolerances
    "EQUALS_EPSILON",
    "ToleranceTier",
]
