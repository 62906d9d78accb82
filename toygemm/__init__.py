"""
toygemm: fixed-dimension dense matrices for Python.

A matrix's shape and element type are part of its class: Mat[2, 3] and
Mat[3, 2] are distinct types, and every shape rule (constructor arity,
row lengths, index bounds, product compatibility) is checked eagerly.

Submodules:
    matrix: Mat, column views, multiply/transpose and builders
    core: Exceptions, validation, element type capabilities
"""

__version__ = "0.1.0"

from toygemm.core.exceptions import (
    ToyGemmError,
    ValidationError,
    DimensionError,
    IndexOutOfBoundsError,
    ReadOnlyError,
    ElementCastWarning,
)
from toygemm.matrix import (
    Mat,
    ColumnView,
    inner_product,
    multiply,
    transpose,
    zeros,
    identity,
)

__all__ = [
    "__version__",
    "Mat",
    "ColumnView",
    "inner_product",
    "multiply",
    "transpose",
    "zeros",
    "identity",
    "ToyGemmError",
    "ValidationError",
    "DimensionError",
    "IndexOutOfBoundsError",
    "ReadOnlyError",
    "ElementCastWarning",
]
