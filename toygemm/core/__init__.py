"""
Core infrastructure for toygemm.

Shared abstractions used by the matrix type.

Key components:
    exceptions: Exception and warning hierarchy
    validation: Fail-fast input validators
    elements: Element type capabilities (storage dtype, identities, promotion)
"""

from toygemm.core.exceptions import (
    ToyGemmError,
    ValidationError,
    DimensionError,
    IndexOutOfBoundsError,
    ReadOnlyError,
    ElementCastWarning,
)

__all__ = [
    "ToyGemmError",
    "ValidationError",
    "DimensionError",
    "IndexOutOfBoundsError",
    "ReadOnlyError",
    "ElementCastWarning",
]
