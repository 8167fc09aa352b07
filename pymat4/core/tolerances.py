"""
Tolerance constants for numerical comparison.

A single absolute tier is used throughout: epsilon-equality of arrays,
matrices and vectors compares every component pair against EQUALS_EPSILON.
The tolerance is absolute, not relative, so values of large magnitude
need to agree to more significant digits than small ones.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class ToleranceTier:
    """Tolerance specification for numerical comparison."""
    atol: float
    name: str
    description: str


# Per-component threshold for almost_equals / Matrix4.equals
EQUALS = ToleranceTier(
    atol=1e-9,
    name='equals',
    description='absolute per-component difference, IEEE-754 double',
)

EQUALS_EPSILON = EQUALS.atol
