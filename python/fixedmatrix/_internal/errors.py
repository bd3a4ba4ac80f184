"""fixedmatrix exception types.

Keep this module lightweight and dependency-free to avoid import cycles.
"""
from __future__ import annotations


class MatrixIndexError(IndexError):
    """Raised when a row or column index falls outside the matrix dimensions.

    ``row`` or ``col`` is ``None`` when only the other axis was validated
    (``Matrix.columns`` / ``Matrix.rows``).
    """

    def __init__(
        self,
        row: int | None,
        col: int | None,
        rows_count: int,
        columns_count: int,
    ) -> None:
        self.row = row
        self.col = col
        self.rows_count = rows_count
        self.columns_count = columns_count
        if col is None:
            message = f"{row} out of {rows_count}"
        elif row is None:
            message = f"{col} out of {columns_count}"
        else:
            message = f"{row} out of {rows_count} or {col} out of {columns_count}"
        super().__init__(message)


class InvalidDimensionError(ValueError):
    """Raised when a matrix is requested with a negative or non-integer dimension."""
