"""
Element type capabilities.

A matrix element type must be copyable, comparable, and support addition
and multiplication, with an additive identity (and a multiplicative one
for identity matrices). This module maps a user-facing element type to
the storage that carries it and provides those identities.

Types numpy understands natively (int, float, complex, bool and the numpy
scalar types) are canonicalised to their numpy scalar type and stored in
a typed array. Anything else (Fraction, Decimal, user classes) is stored
in an object array and relies on its own operators.
"""

from __future__ import annotations

import warnings
from typing import Any, Iterable

import numpy as np
from numpy.typing import NDArray

from toygemm.core.exceptions import ElementCastWarning, ValidationError


# Element type used when a shape is given without one: Mat[3, 3] == Mat[3, 3, int]
DEFAULT_ELEM: type = int

# Builtin types with a native numpy dtype
NATIVE_TYPES: frozenset[type] = frozenset({int, float, complex, bool})


def is_native(elem: type) -> bool:
    """True if elem is stored in a typed (non-object) numpy array."""
    return elem in NATIVE_TYPES or (
        isinstance(elem, type) and issubclass(elem, np.generic) and elem is not np.object_
    )


def canonical_elem(elem: Any) -> type:
    """
    Canonical element type used as part of a matrix class identity.

    int and np.int64 (on most platforms) name the same storage, so both
    map to np.int64; object-stored types are returned unchanged.

    Args:
        elem: Element type, numpy dtype, or dtype string

    Returns:
        numpy scalar type, or elem itself for object storage

    Raises:
        ValidationError: If elem is not a type, or has no additive identity
    """
    if isinstance(elem, (np.dtype, str)):
        try:
            elem = np.dtype(elem).type
        except TypeError as e:
            raise ValidationError(f"elem: unknown dtype {elem!r}: {e}") from e
    if not isinstance(elem, type):
        raise ValidationError(f"elem: expected a type, got {elem!r}")
    if is_native(elem):
        return np.dtype(elem).type
    if elem is np.object_ or elem is object:
        raise ValidationError("elem: bare object is not a numeric element type")
    try:
        elem(0)
    except (TypeError, ValueError, ArithmeticError) as e:
        raise ValidationError(
            f"elem: {elem.__name__} has no additive identity ({elem.__name__}(0) failed: {e})"
        ) from e
    return elem


def storage_dtype(elem: type) -> np.dtype:
    """numpy dtype backing a canonical element type."""
    return np.dtype(elem) if is_native(elem) else np.dtype(object)


def zero(elem: type) -> Any:
    """Additive identity of elem."""
    return elem(0)


def one(elem: type) -> Any:
    """Multiplicative identity of elem."""
    return elem(1)


def common_type(left: type, right: type) -> type:
    """
    Element type of a product between two element types.

    Promotion is deferred to the element types' own multiply: the result
    is the type of zero(left) * zero(right).

    Examples:
        >>> common_type(np.int64, np.float64)
        <class 'numpy.float64'>
        >>> common_type(Fraction, Fraction)
        <class 'fractions.Fraction'>
    """
    if left is right:
        return left
    try:
        product = zero(left) * zero(right)
    except TypeError as e:
        raise ValidationError(
            f"elem: {left.__name__} * {right.__name__} is not defined: {e}"
        ) from e
    # Python scalars coming back from object arithmetic (e.g. int * Decimal)
    return canonical_elem(type(product))


def coerce(
    values: Iterable[Any],
    elem: type,
    shape: tuple[int, int],
    stacklevel: int = 2,
) -> NDArray[Any]:
    """
    Build fresh (rows x cols) storage from row-major values.

    Args:
        values: Exactly rows*cols values in row-major order
        elem: Canonical element type
        shape: (rows, cols)
        stacklevel: Caller depth the cast warning is attributed to

    Returns:
        New numpy array owning the converted values

    Raises:
        ValidationError: If a value cannot be converted to elem

    Warns:
        ElementCastWarning: If a native conversion is not same-kind safe
    """
    values = list(values)
    dtype = storage_dtype(elem)

    if dtype == object:
        try:
            converted = [v if isinstance(v, elem) else elem(v) for v in values]
        except (TypeError, ValueError, ArithmeticError) as e:
            raise ValidationError(f"values: cannot convert to {elem.__name__}: {e}") from e
        storage = np.empty(len(converted), dtype=object)
        storage[:] = converted
        try:
            return storage.reshape(shape)
        except ValueError as e:
            raise ValidationError(f"values: cannot reshape to {shape}: {e}") from e

    try:
        source = np.asarray(values)
    except (TypeError, ValueError) as e:
        raise ValidationError(f"values: cannot convert to array: {e}") from e

    if source.dtype.kind in 'USVMm':
        raise ValidationError(
            f"values: non-numeric dtype {source.dtype}, expected numeric data"
        )

    if source.dtype == object:
        # Fractions and friends: let numpy ask each value to convert itself
        try:
            return np.array(values, dtype=dtype).reshape(shape)
        except (TypeError, ValueError, OverflowError) as e:
            raise ValidationError(
                f"values: cannot convert to {dtype}: {e}"
            ) from e

    if source.size and not np.can_cast(source.dtype, dtype, casting='same_kind'):
        warnings.warn(
            f"values of dtype {source.dtype} stored as {dtype}; precision may be lost",
            ElementCastWarning,
            stacklevel=stacklevel,
        )
    try:
        return source.astype(dtype).reshape(shape)
    except (TypeError, ValueError) as e:
        raise ValidationError(f"values: cannot convert to {dtype}: {e}") from e
