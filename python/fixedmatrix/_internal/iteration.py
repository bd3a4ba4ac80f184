from __future__ import annotations

from typing import Callable, Iterator, TypeVar


T = TypeVar("T")


class MatrixIterator(Iterator[T]):
    """Single-pass row-major iterator over a matrix.

    Elements are fetched through ``get_item_at`` at each step rather than
    copied up front, so writes to cells that have not been visited yet are
    observed.
    """

    def __init__(self, rows: int, columns: int, get_item_at: Callable[[int, int], T]):
        self._rows = rows
        self._columns = columns
        self._get_item_at = get_item_at
        self._row = 0
        self._col = 0

    def __iter__(self) -> "MatrixIterator[T]":
        return self

    def __next__(self) -> T:
        if self._columns == 0 or self._row >= self._rows:
            raise StopIteration
        value = self._get_item_at(self._row, self._col)
        self._col += 1
        if self._col >= self._columns:
            self._col = 0
            self._row += 1
        return value

    def __repr__(self) -> str:
        return (
            f"<MatrixIterator position=({self._row}, {self._col}) "
            f"shape=({self._rows}, {self._columns})>"
        )
