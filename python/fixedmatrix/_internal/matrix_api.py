from __future__ import annotations

import operator
from typing import Any, Callable, Iterator

from . import formatting as _formatting
from . import interop as _interop
from .capabilities import MatrixOperations, T
from .errors import InvalidDimensionError, MatrixIndexError
from .iteration import MatrixIterator


_CONSTRUCT_KEY = object()

MatrixMixin = _formatting.MatrixMixin


def _check_dimension(name: str, value: Any) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidDimensionError(f"{name} must be an integer, got {type(value).__name__}")
    if value < 0:
        raise InvalidDimensionError(f"{name} must be non-negative, got {value}")
    return value


def _check_index_type(value: Any) -> None:
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"matrix indices must be integers, got {type(value).__name__}")


class Matrix(MatrixMixin, MatrixOperations[T]):
    """Fixed-size, rectangular, row-major matrix of arbitrary elements.

    Instances are created with :meth:`Matrix.of` (or ``matrix_of``); the
    dimensions never change afterwards. Every indexed access is
    bounds-checked and raises :class:`MatrixIndexError` instead of clamping
    or wrapping negative indices.
    """

    def __init__(
        self,
        rows_count: int,
        columns_count: int,
        initializer: Callable[[int, int], T],
        *,
        _key: object = None,
    ) -> None:
        if _key is not _CONSTRUCT_KEY:
            raise TypeError("Matrix cannot be constructed directly; use Matrix.of() or matrix_of()")
        self._rows_count = rows_count
        self._columns_count = columns_count
        self._data: list[list[T]] = [
            [initializer(row, col) for col in range(columns_count)]
            for row in range(rows_count)
        ]

    @classmethod
    def of(
        cls,
        rows: int,
        columns: int,
        initializer: Callable[[int, int], T],
    ) -> "Matrix[T]":
        """Build a ``rows x columns`` matrix, calling ``initializer(row, col)``
        once per cell in row-major order."""
        n_rows = _check_dimension("rows", rows)
        n_cols = _check_dimension("columns", columns)
        if not callable(initializer):
            raise TypeError("initializer must be callable as initializer(row, col)")
        return cls(n_rows, n_cols, initializer, _key=_CONSTRUCT_KEY)

    # --- dimensions ---

    @property
    def rows_count(self) -> int:
        return self._rows_count

    @property
    def columns_count(self) -> int:
        return self._columns_count

    # --- bounds ---

    def _check_range(self, row: int, col: int) -> None:
        _check_index_type(row)
        _check_index_type(col)
        if not (0 <= row < self._rows_count and 0 <= col < self._columns_count):
            raise MatrixIndexError(row, col, self._rows_count, self._columns_count)

    def _check_row(self, row: int) -> None:
        _check_index_type(row)
        if not 0 <= row < self._rows_count:
            raise MatrixIndexError(row, None, self._rows_count, self._columns_count)

    def _check_column(self, col: int) -> None:
        _check_index_type(col)
        if not 0 <= col < self._columns_count:
            raise MatrixIndexError(None, col, self._rows_count, self._columns_count)

    # --- element access ---

    def get(self, row: int, col: int) -> T:
        self._check_range(row, col)
        return self._data[row][col]

    def set(self, row: int, col: int, value: T) -> None:
        self._check_range(row, col)
        self._data[row][col] = value

    def __getitem__(self, key: Any) -> T:
        if not (isinstance(key, tuple) and len(key) == 2):
            raise TypeError("matrix indices must be provided as [row, col]")
        i, j = key
        return self.get(operator.index(i), operator.index(j))

    def __setitem__(self, key: Any, value: T) -> None:
        if not (isinstance(key, tuple) and len(key) == 2):
            raise TypeError("matrix indices must be provided as [row, col]")
        i, j = key
        self.set(operator.index(i), operator.index(j), value)

    # --- snapshots ---

    def rows(self, row: int) -> list[T]:
        self._check_row(row)
        return list(self._data[row])

    def columns(self, col: int) -> list[T]:
        self._check_column(col)
        return [self.get(row, col) for row in range(self._rows_count)]

    # --- traversal ---

    def __iter__(self) -> Iterator[T]:
        return MatrixIterator(
            rows=self._rows_count,
            columns=self._columns_count,
            get_item_at=self.get,
        )

    def on_each(self, action: Callable[[int, int, T], Any]) -> None:
        for row in range(self._rows_count):
            for col in range(self._columns_count):
                action(row, col, self.get(row, col))

    # --- interop ---

    def to_numpy(self, dtype: Any = None) -> Any:
        return _interop.to_numpy(self, dtype)

    def __array__(self, dtype: Any = None, copy: Any = None) -> Any:
        if copy is False:
            raise ValueError("fixedmatrix cannot expose its cells without copying")
        return _interop.to_numpy(self, dtype)
