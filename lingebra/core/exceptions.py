"""
Exception hierarchy for lingebra.

All exceptions inherit from LingebraError to allow catching any
library-specific error. Every condition here is a programming error on
the caller's side: the library fails fast and never pads, clamps or
defaults its way around bad input.

Design principles:
    - Exceptions carry diagnostic information as attributes
    - Error messages are actionable with actual vs expected values
    - Never catch and re-raise with less information
"""


class LingebraError(Exception):
    """Base exception for all lingebra errors."""
    pass


class ValidationError(LingebraError):
    """
    Input validation failed.

    Raised when user-provided inputs fail validation checks
    (non-numeric data, non-positive sizes).
    """
    pass


class ShapeError(ValidationError):
    """
    Dimensions are incorrect or inconsistent.

    Raised on ragged rows at construction, on dimension mismatch between
    the operands of a binary matrix operator, on matrix-vector length
    mismatch, on transposing a non-square matrix and on vectors of the
    wrong dimensionality.

    Attributes:
        expected: Expected shape or length, if known
        actual: Shape or length that was found, if known
    """

    def __init__(
        self,
        message: str,
        expected: tuple[int, ...] | int | None = None,
        actual: tuple[int, ...] | int | None = None,
    ):
        super().__init__(message)
        self.expected = expected
        self.actual = actual


class PreconditionError(ValidationError):
    """
    A documented precondition on the inputs does not hold.

    Raised by change_base when the basis vectors are not mutually
    orthogonal.
    """
    pass


class MatrixIndexError(LingebraError, IndexError):
    """
    Row, column or element index out of range.

    Also an IndexError, so callers treating matrices like sequences
    catch it the usual way.

    Attributes:
        index: The offending index
        axis: 'row' or 'column'
        size: Number of valid positions along that axis
    """

    def __init__(self, message: str, index: int, axis: str, size: int):
        super().__init__(message)
        self.index = index
        self.axis = axis
        self.size = size
