"""
Zero-copy column views.

A ColumnView is an ordered sequence of references into one column of an
existing matrix. It holds a strided numpy view of the matrix storage, so
reading or writing through it never allocates a column buffer.

The view shares storage with its matrix: writes through the view show up
in the matrix and vice versa. No matrix operation relocates storage, so a
view stays valid as long as it is held. Mutating the same matrix from
another thread while a view is being read is a data race; nothing here
arbitrates it.
"""

from __future__ import annotations

from typing import Any, Iterable, Iterator

import numpy as np
from numpy.typing import NDArray

from toygemm.core.elements import coerce
from toygemm.core.exceptions import ReadOnlyError
from toygemm.core.validation import check_index, check_row_count


class ColumnView:
    """
    Borrowed, fixed-length view of column `column` of a matrix.

    Obtain one through Mat.col_view(); do not construct directly.

    Values written through the view are converted to the matrix element
    type, exactly as writes through the matrix itself are.

    Attributes:
        column: Column index inside the source matrix
        elem: Element type of the source matrix
        readonly: True if writes through this view are refused
    """

    __slots__ = ('_data', 'column', 'elem')

    def __init__(self, data: NDArray[Any], column: int, elem: type):
        self._data = data
        self.column = column
        self.elem = elem

    @property
    def readonly(self) -> bool:
        return not self._data.flags.writeable

    def __len__(self) -> int:
        return self._data.shape[0]

    def __iter__(self) -> Iterator[Any]:
        return iter(self._data)

    def __getitem__(self, row: int) -> Any:
        return self._data[check_index(row, len(self), 'row')]

    def __setitem__(self, row: int, value: Any) -> None:
        row = check_index(row, len(self), 'row')
        self._check_writeable()
        self._data[row] = coerce([value], self.elem, (1, 1), stacklevel=3)[0, 0]

    def assign(self, values: Iterable[Any]) -> None:
        """
        Write a whole column, element by element, into the source matrix.

        Raises:
            DimensionError: If values does not hold exactly one value per row
            ReadOnlyError: If the view is read-only
            ValidationError: If a value cannot be converted to elem

        Warns:
            ElementCastWarning: If values are narrowed into elem
        """
        values = tuple(values)
        check_row_count(values, len(self))
        self._check_writeable()
        converted = coerce(values, self.elem, (len(values), 1), stacklevel=3)[:, 0]
        for row, value in enumerate(converted):
            self._data[row] = value

    def _check_writeable(self) -> None:
        if self.readonly:
            raise ReadOnlyError(f"column {self.column}: view is read-only")

    def __array__(self, dtype=None, copy=None) -> NDArray[Any]:
        # Always a copy: handing out the raw view would bypass the read-only check
        return np.array(self._data, dtype=dtype)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, ColumnView):
            other = other._data
        try:
            if len(other) != len(self):
                return False
        except TypeError:
            return NotImplemented
        return all(a == b for a, b in zip(self._data, other))

    __hash__ = None

    def __repr__(self) -> str:
        return f"ColumnView(column={self.column}, values={self._data.tolist()})"
