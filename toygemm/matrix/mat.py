"""
Fixed-shape dense matrix.

Mat[R, C, Elem] is a specialised subclass of Mat whose shape and element
type are part of its class identity: Mat[2, 3] and Mat[3, 2] are different
classes, and the same subscription always returns the same class object.

Storage is a row-major (R x C) numpy array owned exclusively by each
instance. Shape never changes; only element contents mutate.

Construction:
    Mat[3, 3]()                         # all zeros
    Mat[3, 3](7)                        # uniform fill
    Mat[3, 2](1, 2, 3, 4, 5, 6)         # element pack, row-major
    Mat[3, 2]((1, 2), (3, 4), (5, 6))   # row list
    Mat[2, 2, Fraction]((1, 2), (3, 4)) # object-stored element type

Python has no compile time, so every shape and arity rule is enforced
eagerly: at subscription, at construction and at call time of the
accessors. Nothing is ever partially constructed.
"""

from __future__ import annotations

import copy as _copy
import itertools
from functools import lru_cache
from typing import Any, Iterator, Sequence

import numpy as np
from numpy.typing import NDArray

from toygemm.core.elements import (
    DEFAULT_ELEM,
    canonical_elem,
    coerce,
    one,
    storage_dtype,
    zero,
)
from toygemm.core.exceptions import DimensionError, ReadOnlyError, ValidationError
from toygemm.core.validation import (
    check_arity,
    check_constant_index,
    check_dimension,
    check_index,
    check_row_count,
    check_row_length,
    is_scalar,
)
from toygemm.matrix.views import ColumnView


class Mat:
    """
    Dense matrix with a shape fixed at the class level.

    Never instantiate Mat directly; subscript it first: Mat[rows, cols]
    or Mat[rows, cols, elem]. elem defaults to int.

    Class attributes (set on specialisations):
        ROWS: Number of rows
        COLS: Number of columns
        ELEM: Canonical element type (numpy scalar type or object-stored type)
        ELEM_COUNT: ROWS * COLS
        dtype: numpy dtype of the storage

    Square specialisations additionally provide identity().
    """

    ROWS: int | None = None
    COLS: int | None = None
    ELEM: type | None = None
    ELEM_COUNT: int | None = None
    dtype: np.dtype | None = None

    __slots__ = ('_elems',)

    def __class_getitem__(cls, params: Any) -> type[Mat]:
        if cls.ROWS is not None:
            raise TypeError(f"{cls.__name__} is already specialised")
        if not isinstance(params, tuple):
            params = (params,)
        if len(params) == 2:
            rows, cols = params
            elem = DEFAULT_ELEM
        elif len(params) == 3:
            rows, cols, elem = params
        else:
            raise ValidationError(
                f"Mat[...] expects (rows, cols) or (rows, cols, elem), got {len(params)} parameters"
            )
        return _specialise(
            check_dimension(rows, 'rows'),
            check_dimension(cols, 'cols'),
            canonical_elem(elem),
        )

    # === Construction ===

    def __init__(self, *values: Any):
        """
        Build a matrix from nothing, one value, ROWS*COLS values, or ROWS rows.

        Raises:
            DimensionError: On a wrong value count, row count or row length
            ValidationError: On unspecialised Mat, mixed scalars and rows,
                or values that cannot be converted to ELEM

        Warns:
            ElementCastWarning: If values are narrowed into ELEM
        """
        if self.ROWS is None:
            raise ValidationError("Mat: shape not given, use Mat[rows, cols](...)")
        flat = self._flatten(values)
        if flat is None:
            storage = np.full(self.shape, zero(self.ELEM), dtype=self.dtype)
        else:
            storage = coerce(flat, self.ELEM, self.shape, stacklevel=3)
        self._elems = storage

    @classmethod
    def _flatten(cls, values: tuple[Any, ...]) -> list[Any] | None:
        """Validate constructor arguments; return row-major values (None for zeros)."""
        if not values:
            return None
        if len(values) == 1 and isinstance(values[0], Mat):
            source = values[0]
            if source.shape != cls.shape:
                raise DimensionError(
                    f"cannot copy a {source.ROWS}x{source.COLS} matrix into {cls.ROWS}x{cls.COLS}",
                    expected=cls.shape,
                    actual=source.shape,
                )
            # Another matrix is its own row list
            values = tuple(source)
        scalars = [is_scalar(v) for v in values]
        if all(scalars):
            check_arity(len(values), cls.ELEM_COUNT)
            if len(values) == 1:
                return list(values) * cls.ELEM_COUNT
            return list(values)
        if any(scalars):
            raise ValidationError(
                "cannot mix single values and rows in one constructor call"
            )
        rows = [tuple(row) for row in values]
        check_row_count(rows, cls.ROWS)
        for i, row in enumerate(rows):
            check_row_length(row, cls.COLS, i)
        return list(itertools.chain.from_iterable(rows))

    @classmethod
    def is_constructible(cls, *values: Any) -> bool:
        """True if cls(*values) passes the arity and row-shape checks."""
        if cls.ROWS is None:
            return False
        try:
            cls._flatten(values)
        except ValidationError:
            return False
        return True

    @classmethod
    def _from_storage(cls, storage: NDArray[Any]) -> Mat:
        """Wrap an already validated (ROWS x COLS) array without copying."""
        mat = cls.__new__(cls)
        mat._elems = storage
        return mat

    @classmethod
    def zeros(cls) -> Mat:
        """Matrix with every element at the additive identity."""
        return cls()

    def copy(self) -> Mat:
        """Independent, mutable copy."""
        return self._from_storage(self._elems.copy())

    def __copy__(self) -> Mat:
        return self.copy()

    def __deepcopy__(self, memo: dict) -> Mat:
        return self._from_storage(_copy.deepcopy(self._elems, memo))

    def __reduce__(self):
        return (_rebuild, (self.ROWS, self.COLS, self.ELEM, self.tolist()))

    # === Shape ===

    @property
    def shape(self) -> tuple[int, int]:
        return (self.ROWS, self.COLS)

    def __len__(self) -> int:
        return self.ROWS

    # === Access ===

    def at(self, row: int, col: int | None = None) -> Any:
        """
        Bounds-checked access by runtime index.

        Args:
            row: Row index in [0, ROWS)
            col: Column index in [0, COLS); omit for the whole row

        Returns:
            The row as a 1-D view (writes go through), or a single element

        Raises:
            IndexOutOfBoundsError: If an index is out of range
        """
        r = check_index(row, self.ROWS, 'row')
        if col is None:
            return self._elems[r]
        return self._elems[r, check_index(col, self.COLS, 'column')]

    def get(self, row: int, col: int | None = None) -> Any:
        """
        Access by constant index.

        Same as at(), but the indices must be spelled as plain ints.

        Raises:
            TypeError: If an index is not a plain int
            IndexOutOfBoundsError: If an index is out of range
        """
        r = check_constant_index(row, self.ROWS, 'row')
        if col is None:
            return self._elems[r]
        return self._elems[r, check_constant_index(col, self.COLS, 'column')]

    def row(self, index: int, readonly: bool = False) -> NDArray[Any]:
        """Row `index` as a view of COLS elements."""
        view = self._elems[check_index(index, self.ROWS, 'row')]
        return _readonly(view) if readonly else view

    def rows(self, readonly: bool = False) -> NDArray[Any]:
        """Full (ROWS x COLS) storage as a view; iterating it yields rows."""
        return _readonly(self._elems) if readonly else self._elems

    def __getitem__(self, key: int | tuple[int, int]) -> Any:
        if isinstance(key, tuple):
            if len(key) != 2:
                raise TypeError(f"expected (row, col), got {len(key)} indices")
            return self.at(*key)
        return self.at(key)

    def __setitem__(self, key: int | tuple[int, int], value: Any) -> None:
        self._check_writeable()
        if isinstance(key, tuple):
            if len(key) != 2:
                raise TypeError(f"expected (row, col), got {len(key)} indices")
            r = check_index(key[0], self.ROWS, 'row')
            c = check_index(key[1], self.COLS, 'column')
            self._elems[r, c] = coerce([value], self.ELEM, (1, 1), stacklevel=3)[0, 0]
            return
        r = check_index(key, self.ROWS, 'row')
        if is_scalar(value):
            raise ValidationError(f"row {r}: expected a sequence of {self.COLS} values")
        values = tuple(value)
        check_row_length(values, self.COLS, r)
        self._elems[r] = coerce(values, self.ELEM, (1, self.COLS), stacklevel=3)[0]

    def __iter__(self) -> Iterator[NDArray[Any]]:
        return iter(self._elems)

    # === Columns ===

    def get_col(self, col: int) -> NDArray[Any]:
        """Column `col` as a new, owned array of ROWS elements."""
        return self._elems[:, check_constant_index(col, self.COLS, 'column')].copy()

    def col_view(self, col: int, readonly: bool = False) -> ColumnView:
        """
        Zero-copy view of column `col`.

        Writes through the view mutate this matrix. A frozen matrix only
        hands out read-only views.
        """
        view = self._elems[:, check_constant_index(col, self.COLS, 'column')]
        return ColumnView(_readonly(view) if readonly else view, col, self.ELEM)

    # === Mutability ===

    @property
    def frozen(self) -> bool:
        return not self._elems.flags.writeable

    def freeze(self) -> Mat:
        """
        Make this matrix immutable and return it.

        Views obtained afterwards are read-only; views obtained before
        keep writing.
        """
        self._elems.flags.writeable = False
        return self

    def _check_writeable(self) -> None:
        if self.frozen:
            raise ReadOnlyError(f"{type(self).__name__}: matrix is frozen")

    # === Operators ===

    def __eq__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return bool(np.array_equal(self._elems, other._elems))

    __hash__ = None

    def __matmul__(self, other: Mat) -> Mat:
        if not isinstance(other, Mat):
            return NotImplemented
        from toygemm.matrix.ops import multiply
        return multiply(self, other)

    def transpose(self) -> Mat:
        """(COLS x ROWS) matrix whose row i is column i of this one."""
        from toygemm.matrix.ops import transpose
        return transpose(self)

    @property
    def T(self) -> Mat:
        return self.transpose()

    # === Conversion ===

    def tolist(self) -> list[list[Any]]:
        return self._elems.tolist()

    def to_numpy(self) -> NDArray[Any]:
        """Copy of the storage."""
        return self._elems.copy()

    def __array__(self, dtype=None, copy=None) -> NDArray[Any]:
        return np.array(self._elems, dtype=dtype)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._elems.tolist()})"


def _readonly(view: NDArray[Any]) -> NDArray[Any]:
    view = view.view()
    view.flags.writeable = False
    return view


def _identity(cls: type[Mat]) -> Mat:
    """Zero matrix with the multiplicative identity on the diagonal."""
    ident = cls()
    unit = one(cls.ELEM)
    for i in range(cls.ROWS):
        ident._elems[i, i] = unit
    return ident


@lru_cache(maxsize=None)
def _specialise(rows: int, cols: int, elem: type) -> type[Mat]:
    name = f"Mat[{rows}, {cols}, {elem.__name__}]"
    namespace: dict[str, Any] = {
        '__slots__': (),
        '__module__': Mat.__module__,
        '__qualname__': name,
        'ROWS': rows,
        'COLS': cols,
        'ELEM': elem,
        'ELEM_COUNT': rows * cols,
        'dtype': storage_dtype(elem),
    }
    if rows == cols:
        namespace['identity'] = classmethod(_identity)
    return type(name, (Mat,), namespace)


def _rebuild(rows: int, cols: int, elem: type, values: Sequence[Sequence[Any]]) -> Mat:
    return _specialise(rows, cols, elem)(*values)
