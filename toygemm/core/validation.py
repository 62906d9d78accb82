"""
Argument checks shared by matrix construction and access.

Every check runs before any storage is touched: a constructor validates
the whole argument list before building its array, and assignment paths
validate before writing, so a failed call leaves nothing half-done.

Indices must fall in [0, bound); negative values are rejected rather
than counted from the end. Messages name the offending axis or row and
quote the required and supplied counts.
"""

from typing import Any, Iterable, Sequence

import numpy as np

from toygemm.core.exceptions import (
    DimensionError,
    IndexOutOfBoundsError,
    ValidationError,
)


def is_scalar(value: Any) -> bool:
    """True for a single element value, False for a row-like iterable."""
    if isinstance(value, np.ndarray):
        return value.ndim == 0
    return not isinstance(value, Iterable)


def check_dimension(value: Any, name: str) -> int:
    """
    Verify a shape parameter is a non-negative integer.

    Args:
        value: Candidate dimension
        name: Parameter name for error messages

    Returns:
        The dimension as a plain int

    Raises:
        ValidationError: If value is not a non-negative integer
    """
    if isinstance(value, bool) or not isinstance(value, (int, np.integer)):
        raise ValidationError(f"{name}: expected a non-negative int, got {value!r}")
    if value < 0:
        raise ValidationError(f"{name}: expected a non-negative int, got {value}")
    return int(value)


def check_arity(n_values: int, elem_count: int) -> None:
    """
    Verify an element-pack argument count.

    Exactly one value (uniform fill) or exactly elem_count values
    (row-major element list) are accepted.

    Raises:
        DimensionError: For any other count
    """
    if n_values != 1 and n_values != elem_count:
        raise DimensionError(
            f"expected either 1 or {elem_count} values, got {n_values}",
            expected=elem_count,
            actual=n_values,
        )


def check_row_count(rows: Sequence[Any], n_rows: int) -> None:
    """
    Verify a row list has exactly n_rows rows.

    Raises:
        DimensionError: If the number of rows differs
    """
    if len(rows) != n_rows:
        raise DimensionError(
            f"expected {n_rows} rows, got {len(rows)}",
            expected=n_rows,
            actual=len(rows),
        )


def check_row_length(row: Any, n_cols: int, index: int) -> None:
    """
    Verify one row of a row list has exactly n_cols values.

    Args:
        row: The row sequence
        n_cols: Required length
        index: Position of the row, for error messages

    Raises:
        DimensionError: If the row length differs
    """
    length = len(row)
    if length != n_cols:
        raise DimensionError(
            f"row {index}: expected {n_cols} values, got {length}",
            expected=n_cols,
            actual=length,
        )


def check_index(index: Any, bound: int, axis: str) -> int:
    """
    Verify a runtime index lies in [0, bound).

    Args:
        index: Candidate index (any integral value)
        bound: Exclusive upper bound
        axis: 'row' or 'column', for error messages

    Returns:
        The index as a plain int

    Raises:
        TypeError: If index is not integral
        IndexOutOfBoundsError: If index is outside [0, bound)
    """
    if isinstance(index, bool) or not isinstance(index, (int, np.integer)):
        raise TypeError(f"{axis} index must be an int, got {type(index).__name__}")
    if not 0 <= index < bound:
        raise IndexOutOfBoundsError(
            f"{axis} index {index} out of range [0, {bound})",
            index=int(index),
            bound=bound,
            axis=axis,
        )
    return int(index)


def check_constant_index(index: Any, bound: int, axis: str) -> int:
    """
    Verify a constant index: a plain, non-negative int below bound.

    Stricter than check_index: numpy integers and other integral-like
    objects are refused, so the call site has to spell the index out.

    Raises:
        TypeError: If index is not a plain int
        IndexOutOfBoundsError: If index is outside [0, bound)
    """
    if type(index) is not int:
        raise TypeError(f"constant {axis} index must be a plain int, got {type(index).__name__}")
    return check_index(index, bound, axis)
