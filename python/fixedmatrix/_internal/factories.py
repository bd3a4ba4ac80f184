from __future__ import annotations

from typing import Any, Callable

from .capabilities import T
from .coercion import coerce_general_matrix as _coerce_general_matrix
from .matrix_api import Matrix


_np: Any | None = None


def configure(*, np_module: Any | None) -> None:
    global _np
    _np = np_module


def matrix_of(rows: int, columns: int, initializer: Callable[[int, int], T]) -> Matrix[T]:
    """Create a ``rows x columns`` matrix populated by ``initializer(row, col)``."""
    return Matrix.of(rows, columns, initializer)


def matrix_from_rows(data: Any) -> Matrix[Any]:
    """Create a matrix from a rectangular nested sequence, a 2-D NumPy array,
    or another matrix. The input is copied; later changes to it are not seen."""
    n_rows, n_cols, rows = _coerce_general_matrix(data, np_module=_np)
    return matrix_of(n_rows, n_cols, lambda row, col: rows[row][col])
