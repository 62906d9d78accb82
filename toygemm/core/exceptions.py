"""
Errors and warnings raised by toygemm.

Everything derives from ToyGemmError. Shape and arity problems are
DimensionErrors carrying the expected and supplied counts; bad indices
are IndexOutOfBoundsErrors, which also subclass IndexError so a plain
`except IndexError` still sees them. Writes into a frozen matrix or a
read-only view raise ReadOnlyError. Narrowing casts are not errors: they
emit ElementCastWarning and the store goes ahead.
"""


class ToyGemmError(Exception):
    """Base exception for all toygemm errors."""
    pass


class ValidationError(ToyGemmError):
    """
    Input validation failed.

    Raised when user-provided inputs (element values, element types,
    shape parameters) fail validation checks.
    """
    pass


class DimensionError(ValidationError):
    """
    Shape or arity mismatch.

    Raised when a constructor receives the wrong number of values, the
    wrong number of rows, or a row of the wrong length, and when two
    matrices of incompatible shapes are multiplied.

    Attributes:
        expected: The count (or shape) that was required
        actual: The count (or shape) that was supplied
    """

    def __init__(
        self,
        message: str,
        expected: int | tuple[int, ...] | None = None,
        actual: int | tuple[int, ...] | None = None,
    ):
        super().__init__(message)
        self.expected = expected
        self.actual = actual


class IndexOutOfBoundsError(ToyGemmError, IndexError):
    """
    Row or column index outside the matrix.

    Indices are never wrapped: anything outside [0, bound) is rejected,
    negative values included.

    Attributes:
        index: The offending index
        bound: Exclusive upper bound for that axis
        axis: 'row' or 'column'
    """

    def __init__(
        self,
        message: str,
        index: int | None = None,
        bound: int | None = None,
        axis: str | None = None,
    ):
        super().__init__(message)
        self.index = index
        self.bound = bound
        self.axis = axis


class ReadOnlyError(ToyGemmError):
    """Write attempted through a frozen matrix or a read-only view."""
    pass


class ElementCastWarning(UserWarning):
    """
    Values were coerced into the element type with possible loss.

    Emitted when, e.g., floating point values are stored in an integer
    matrix and get truncated.
    """
    pass
