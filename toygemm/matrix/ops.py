"""
Matrix algorithms built on rows and zero-copy column views.

multiply() and transpose() never materialise a full intermediate column:
the right-hand operand's columns (and the source columns of a transpose)
are read through ColumnView, and the result is assembled through the
element-pack constructor in row-major order.
"""

from __future__ import annotations

import itertools
import operator
from functools import reduce
from typing import Any, Iterable

from toygemm.core.elements import DEFAULT_ELEM, common_type, zero
from toygemm.core.exceptions import DimensionError
from toygemm.matrix.mat import Mat


def inner_product(left: Iterable[Any], right: Iterable[Any], init: Any) -> Any:
    """
    Sum of pairwise products, seeded at init.

    Args:
        left: First sequence
        right: Second sequence, same length as left
        init: Starting value of the sum (the additive identity for a dot product)

    Raises:
        DimensionError: If the sequences differ in length
    """
    left = tuple(left)
    right = tuple(right)
    if len(left) != len(right):
        raise DimensionError(
            f"inner product of sequences of length {len(left)} and {len(right)}",
            expected=len(left),
            actual=len(right),
        )
    return reduce(operator.add, map(operator.mul, left, right), init)


def multiply(a: Mat, b: Mat) -> Mat:
    """
    Matrix product a @ b.

    Output element (r, c) is the dot product of row r of a with column c
    of b. The element type is the type of a.ELEM * b.ELEM.

    Args:
        a: (R x C) matrix
        b: (C x OC) matrix

    Returns:
        New (R x OC) matrix

    Raises:
        TypeError: If an operand is not a Mat
        DimensionError: If a.COLS != b.ROWS
    """
    if not isinstance(a, Mat) or not isinstance(b, Mat):
        raise TypeError(
            f"multiply expects two Mat operands, got {type(a).__name__} and {type(b).__name__}"
        )
    if a.COLS != b.ROWS:
        raise DimensionError(
            f"cannot multiply {a.ROWS}x{a.COLS} by {b.ROWS}x{b.COLS}: "
            f"left has {a.COLS} columns, right has {b.ROWS} rows",
            expected=a.COLS,
            actual=b.ROWS,
        )
    elem = common_type(a.ELEM, b.ELEM)
    seed = zero(elem)
    columns = [b.col_view(c, readonly=True) for c in range(b.COLS)]
    values = [
        inner_product(a.row(r, readonly=True), column, seed)
        for r in range(a.ROWS)
        for column in columns
    ]
    return Mat[a.ROWS, b.COLS, elem](*values)


def transpose(a: Mat) -> Mat:
    """(C x R) matrix whose row i is column i of the (R x C) matrix a."""
    columns = (a.col_view(c, readonly=True) for c in range(a.COLS))
    return Mat[a.COLS, a.ROWS, a.ELEM](*itertools.chain.from_iterable(columns))


def zeros(rows: int, cols: int, elem: Any = DEFAULT_ELEM) -> Mat:
    """(rows x cols) matrix of additive identities."""
    return Mat[rows, cols, elem].zeros()


def identity(n: int, elem: Any = DEFAULT_ELEM) -> Mat:
    """(n x n) identity matrix."""
    return Mat[n, n, elem].identity()
