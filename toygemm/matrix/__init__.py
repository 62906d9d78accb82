"""
Fixed-shape dense matrices.

Public API:
    Mat[R, C, Elem]         specialised matrix class
    ColumnView              zero-copy column accessor returned by Mat.col_view()
    multiply(a, b)          matrix product (also a @ b)
    transpose(a)            transposed copy (also a.T)
    zeros(rows, cols, elem) all-zero matrix
    identity(n, elem)       square identity matrix
    inner_product(l, r, i)  seeded sum of pairwise products

Example:
    >>> from toygemm.matrix import Mat
    >>> A = Mat[2, 2]((1, 2), (3, 4))
    >>> A @ Mat[2, 2].identity() == A
    True
"""

from toygemm.matrix.mat import Mat
from toygemm.matrix.views import ColumnView
from toygemm.matrix.ops import inner_product, multiply, transpose, zeros, identity

__all__ = [
    "Mat",
    "ColumnView",
    "inner_product",
    "multiply",
    "transpose",
    "zeros",
    "identity",
]
