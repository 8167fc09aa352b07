"""
Exception hierarchy for pymat4.

All exceptions inherit from Mat4Error to allow catching any
library-specific error.

Design principles:
    - Exceptions carry diagnostic information as attributes
    - Error messages are actionable with actual vs expected values
    - Arithmetic degeneracy (division by zero) is NOT an error: Inf/NaN
      propagate silently
"""


class Mat4Error(Exception):
    """Base exception for all pymat4 errors."""
    pass


class ValidationError(Mat4Error):
    """
    Input validation failed.

    Raised when an argument is of a kind the operation does not accept,
    e.g. a non-Matrix4 operand to mmul or an unsupported constructor
    argument.
    """
    pass


class DimensionError(ValidationError):
    """
    Array lengths are incorrect or unsupported.

    Raised when a flat array does not have the length an operation
    requires, or when a pair of lengths has no matching product kernel.

    Attributes:
        lengths: The offending length(s), in argument order
    """

    def __init__(
        self,
        message: str,
        lengths: tuple[int, ...] | None = None,
    ):
        super().__init__(message)
        self.lengths = lengths
